"""Recovery status payloads (JSON)."""

from typing import Optional

from .base import APIModel


class RebuildInfo(APIModel):
    """Rebuild progress of a storage server device.

    The server encodes ``total_bytes``, ``remaining_bytes`` and ``level`` as
    JSON strings; pydantic's lax mode turns them into integers.
    """

    status: Optional[str] = None
    total_bytes: int = 0
    remaining_bytes: int = 0
    level: int = 0
    disk: Optional[str] = None
    message: Optional[str] = None
    host: Optional[str] = None
    progress: Optional[str] = None
