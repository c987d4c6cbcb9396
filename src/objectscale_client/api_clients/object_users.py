"""Object user and secret key management."""

from typing import Dict, Optional

from ..models.object_user import (
    ObjectUserInfo,
    ObjectUserList,
    ObjectUserSecret,
    ObjectUserSecretKeyCreateRequest,
    ObjectUserSecretKeyCreateResponse,
    ObjectUserSecretKeyDeleteRequest,
)
from .base_client import RemoteCaller
from .request import ContentType, HTTPMethod, Request, quote_segment


class ObjectUsersClient:
    """Operations on object users and their S3 secret keys."""

    def __init__(self, client: RemoteCaller):
        self.client = client

    async def list(self, params: Optional[Dict[str, str]] = None) -> ObjectUserList:
        request = Request(
            method=HTTPMethod.GET,
            path="object/users",
            content_type=ContentType.JSON,
            params=params or {},
        )
        return await self.client.make_remote_call(request, ObjectUserList)

    async def get_info(
        self, uid: str, params: Optional[Dict[str, str]] = None
    ) -> ObjectUserInfo:
        request = Request(
            method=HTTPMethod.GET,
            path=f"object/users/{quote_segment(uid)}/info",
            content_type=ContentType.JSON,
            params=params or {},
        )
        return await self.client.make_remote_call(request, ObjectUserInfo)

    async def get_secret(
        self, uid: str, params: Optional[Dict[str, str]] = None
    ) -> ObjectUserSecret:
        request = Request(
            method=HTTPMethod.GET,
            path=f"object/user-secret-keys/{quote_segment(uid)}",
            content_type=ContentType.JSON,
            params=params or {},
        )
        return await self.client.make_remote_call(request, ObjectUserSecret)

    async def create_secret(
        self,
        uid: str,
        key: ObjectUserSecretKeyCreateRequest,
        params: Optional[Dict[str, str]] = None,
    ) -> ObjectUserSecretKeyCreateResponse:
        """Add a secret key to an object user.

        Args:
            uid: Object user id
            key: Key to add; leave ``secret_key`` unset to let the server
                generate one
            params: Extra query parameters

        Returns:
            The created key and its timestamps
        """
        request = Request(
            method=HTTPMethod.POST,
            path=f"object/user-secret-keys/{quote_segment(uid)}",
            content_type=ContentType.JSON,
            params=params or {},
            body=key,
        )
        return await self.client.make_remote_call(
            request, ObjectUserSecretKeyCreateResponse
        )

    async def delete_secret(
        self,
        uid: str,
        key: ObjectUserSecretKeyDeleteRequest,
        params: Optional[Dict[str, str]] = None,
    ) -> None:
        request = Request(
            method=HTTPMethod.POST,
            path=f"object/user-secret-keys/{quote_segment(uid)}/deactivate",
            content_type=ContentType.JSON,
            params=params or {},
            body=key,
        )
        await self.client.make_remote_call(request)
