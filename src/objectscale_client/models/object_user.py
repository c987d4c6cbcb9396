"""Object user and secret key payloads (JSON)."""

from typing import List, Optional

from pydantic import Field

from .base import APIModel
from .common import Link


class BlobUser(APIModel):
    user_id: str = Field(alias="userid")
    namespace: str


class ObjectUserList(APIModel):
    blob_users: List[BlobUser] = Field(default_factory=list, alias="blobuser")


class ObjectUserInfo(APIModel):
    """Details of a single object user."""

    namespace: Optional[str] = None
    name: Optional[str] = None
    locked: bool = False
    created: Optional[str] = None
    tags: List[str] = Field(default_factory=list)


class ObjectUserSecret(APIModel):
    """The (up to two) secret keys of an object user."""

    secret_key_1: Optional[str] = None
    key_timestamp_1: Optional[str] = None
    key_expiry_timestamp_1: Optional[str] = None
    secret_key_2: Optional[str] = None
    key_timestamp_2: Optional[str] = None
    key_expiry_timestamp_2: Optional[str] = None
    link: Optional[Link] = None


class ObjectUserSecretKeyCreateRequest(APIModel):
    """Request to add a secret key; the server generates one if none is given."""

    secret_key: Optional[str] = Field(default=None, alias="secretkey")
    namespace: str
    existing_key_expiry_time_mins: Optional[str] = None


class ObjectUserSecretKeyCreateResponse(APIModel):
    secret_key: str
    key_timestamp: Optional[str] = None
    key_expiry_timestamp: Optional[str] = None
    link: Optional[Link] = None


class ObjectUserSecretKeyDeleteRequest(APIModel):
    secret_key: str
    namespace: str
