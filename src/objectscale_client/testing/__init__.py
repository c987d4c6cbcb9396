"""Test doubles for code that depends on the management API clients."""

from .fake_remote_caller import FakeRemoteCaller, Fixture

__all__ = ["FakeRemoteCaller", "Fixture"]
