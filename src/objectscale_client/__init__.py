"""Async client library for the ObjectScale management REST API."""

__version__ = "0.1.0"
