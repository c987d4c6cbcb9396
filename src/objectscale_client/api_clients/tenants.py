"""Tenant and tenant quota management."""

from typing import Dict, Optional

from ..models.tenant import (
    Tenant,
    TenantCreate,
    TenantList,
    TenantQuota,
    TenantQuotaSet,
    TenantUpdate,
)
from .base_client import RemoteCaller
from .request import ContentType, HTTPMethod, Request, quote_segment


class TenantsClient:
    """Operations on tenants, which map one to one onto IAM accounts."""

    def __init__(self, client: RemoteCaller):
        self.client = client

    @staticmethod
    def _path(tenant_id: str, suffix: str = "") -> str:
        return f"object/tenants/tenant/{quote_segment(tenant_id)}{suffix}"

    async def list(self, params: Optional[Dict[str, str]] = None) -> TenantList:
        request = Request(
            method=HTTPMethod.GET,
            path="object/tenants",
            content_type=ContentType.XML,
            params=params or {},
        )
        return await self.client.make_remote_call(request, TenantList)

    async def get(
        self, tenant_id: str, params: Optional[Dict[str, str]] = None
    ) -> Tenant:
        request = Request(
            method=HTTPMethod.GET,
            path=self._path(tenant_id),
            content_type=ContentType.XML,
            params=params or {},
        )
        return await self.client.make_remote_call(request, Tenant)

    async def create(self, payload: TenantCreate) -> Tenant:
        request = Request(
            method=HTTPMethod.POST,
            path="object/tenants/tenant/",
            content_type=ContentType.XML,
            body=payload,
        )
        return await self.client.make_remote_call(request, Tenant)

    async def update(self, payload: TenantUpdate, tenant_id: str) -> None:
        request = Request(
            method=HTTPMethod.PUT,
            path=self._path(tenant_id, "/"),
            content_type=ContentType.XML,
            body=payload,
        )
        await self.client.make_remote_call(request)

    async def delete(self, tenant_id: str) -> None:
        """Delete a tenant. The tenant must not own any buckets."""
        request = Request(
            method=HTTPMethod.POST,
            path=self._path(tenant_id, "/delete/"),
            content_type=ContentType.XML,
        )
        await self.client.make_remote_call(request)

    async def get_quota(
        self, tenant_id: str, params: Optional[Dict[str, str]] = None
    ) -> TenantQuota:
        request = Request(
            method=HTTPMethod.GET,
            path=self._path(tenant_id, "/quota"),
            content_type=ContentType.XML,
            params=params or {},
        )
        return await self.client.make_remote_call(request, TenantQuota)

    async def set_quota(self, tenant_id: str, payload: TenantQuotaSet) -> None:
        request = Request(
            method=HTTPMethod.PUT,
            path=self._path(tenant_id, "/quota"),
            content_type=ContentType.XML,
            body=payload,
        )
        await self.client.make_remote_call(request)

    async def delete_quota(self, tenant_id: str) -> None:
        request = Request(
            method=HTTPMethod.DELETE,
            path=self._path(tenant_id, "/quota"),
            content_type=ContentType.XML,
        )
        await self.client.make_remote_call(request)
