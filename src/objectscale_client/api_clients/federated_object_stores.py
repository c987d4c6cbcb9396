"""Federated object store listing."""

from typing import Dict, Optional

from ..models.federated_object_store import FederatedObjectStoreList
from .base_client import RemoteCaller
from .request import ContentType, HTTPMethod, Request


class FederatedObjectStoresClient:
    def __init__(self, client: RemoteCaller):
        self.client = client

    async def list(
        self, params: Optional[Dict[str, str]] = None
    ) -> FederatedObjectStoreList:
        """List object stores federated with this one for replication."""
        request = Request(
            method=HTTPMethod.GET,
            path="replication/info",
            content_type=ContentType.XML,
            params=params or {},
        )
        return await self.client.make_remote_call(request, FederatedObjectStoreList)
