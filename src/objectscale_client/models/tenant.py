"""Tenant and tenant quota payloads (XML)."""

from typing import List, Optional

from pydantic import Field

from .base import APIModel


class Tenant(APIModel):
    xml_tag = "tenant"

    id: Optional[str] = None
    alias: Optional[str] = None
    encryption_enabled: Optional[bool] = Field(
        default=None, alias="is_encryption_enabled"
    )
    compliance_enabled: Optional[bool] = Field(
        default=None, alias="is_compliance_enabled"
    )
    replication_group: Optional[str] = Field(
        default=None, alias="default_data_services_vpool"
    )
    bucket_block_size: Optional[int] = Field(
        default=None, alias="default_bucket_block_size"
    )
    retention_classes: Optional[str] = None
    block_size: Optional[str] = Field(default=None, alias="blockSize")
    block_size_in_count: Optional[str] = Field(default=None, alias="blockSizeInCount")
    notification_size: Optional[str] = Field(default=None, alias="notificationSize")
    notification_size_in_count: Optional[str] = Field(
        default=None, alias="notificationSizeInCount"
    )


class TenantList(APIModel):
    xml_tag = "tenants"

    items: List[Tenant] = Field(default_factory=list, alias="tenant")


class TenantCreate(APIModel):
    """Request to create a tenant for an IAM account."""

    xml_tag = "tenant_create"

    account_id: str
    alias: Optional[str] = None
    encryption_enabled: bool = Field(default=False, alias="is_encryption_enabled")
    compliance_enabled: bool = Field(default=False, alias="is_compliance_enabled")
    bucket_block_size: Optional[int] = Field(
        default=None, alias="default_bucket_block_size"
    )


class TenantUpdate(APIModel):
    xml_tag = "tenant_update"

    alias: Optional[str] = None
    bucket_block_size: Optional[int] = Field(
        default=None, alias="default_bucket_block_size"
    )


class TenantQuotaSet(APIModel):
    """Quota limits to apply to a tenant. Sizes are in GB."""

    xml_tag = "tenant_quota_details"

    block_size: Optional[str] = Field(default=None, alias="blockSize")
    notification_size: Optional[str] = Field(default=None, alias="notificationSize")
    block_size_in_count: Optional[str] = Field(default=None, alias="blockSizeInCount")
    notification_size_in_count: Optional[str] = Field(
        default=None, alias="notificationSizeInCount"
    )


class TenantQuota(TenantQuotaSet):
    id: Optional[str] = None
