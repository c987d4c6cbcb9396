"""Alert policy management."""

from typing import Dict, Optional

from ..models.alert_policy import AlertPolicies, AlertPolicy
from .base_client import RemoteCaller
from .request import ContentType, HTTPMethod, Request, quote_segment


class AlertPoliciesClient:
    """Create, read, update and delete alert policies."""

    def __init__(self, client: RemoteCaller):
        self.client = client

    async def get(self, name: str) -> AlertPolicy:
        request = Request(
            method=HTTPMethod.GET,
            path=f"vdc/alertpolicy/{quote_segment(name)}",
            content_type=ContentType.XML,
        )
        return await self.client.make_remote_call(request, AlertPolicy)

    async def list(self, params: Optional[Dict[str, str]] = None) -> AlertPolicies:
        """List alert policies.

        Args:
            params: Paging and filter parameters such as ``limit`` and ``marker``

        Returns:
            One page of alert policies
        """
        request = Request(
            method=HTTPMethod.GET,
            path="vdc/alertpolicy/list",
            content_type=ContentType.XML,
            params=params or {},
        )
        return await self.client.make_remote_call(request, AlertPolicies)

    async def create(self, policy: AlertPolicy) -> AlertPolicy:
        request = Request(
            method=HTTPMethod.POST,
            path="vdc/alertpolicy",
            content_type=ContentType.XML,
            body=policy,
        )
        return await self.client.make_remote_call(request, AlertPolicy)

    async def update(self, policy: AlertPolicy, name: str) -> AlertPolicy:
        request = Request(
            method=HTTPMethod.PUT,
            path=f"vdc/alertpolicy/{quote_segment(name)}",
            content_type=ContentType.XML,
            body=policy,
        )
        return await self.client.make_remote_call(request, AlertPolicy)

    async def delete(self, name: str) -> None:
        request = Request(
            method=HTTPMethod.DELETE,
            path=f"vdc/alertpolicy/{quote_segment(name)}",
            content_type=ContentType.XML,
        )
        await self.client.make_remote_call(request)
