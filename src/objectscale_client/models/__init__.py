"""Payload models for the ObjectScale management API."""

from .alert_policy import AlertPolicies, AlertPolicy, AlertPolicyCondition
from .base import APIModel
from .bucket import (
    Bucket,
    BucketCreate,
    BucketInfo,
    BucketList,
    BucketQuota,
    BucketQuotaInfo,
    BucketQuotaUpdate,
)
from .common import Link, Tag, TagSet
from .crr import CRR
from .federated_object_store import (
    CRRControlParameters,
    FederatedObjectStore,
    FederatedObjectStoreList,
)
from .object_user import (
    BlobUser,
    ObjectUserInfo,
    ObjectUserList,
    ObjectUserSecret,
    ObjectUserSecretKeyCreateRequest,
    ObjectUserSecretKeyCreateResponse,
    ObjectUserSecretKeyDeleteRequest,
)
from .objmt import (
    AccountBillingInfo,
    AccountBillingInfoList,
    BucketBillingInfo,
    BucketBillingInfoList,
    BucketReplicationInfoList,
    ReplicationBillingInfo,
    StorageClassCountSize,
    StoreBillingInfo,
    StoreBillingInfoList,
    StoreReplicationDataList,
    StoreReplicationThroughputRto,
    TopNBucket,
)
from .status import RebuildInfo
from .tenant import (
    Tenant,
    TenantCreate,
    TenantList,
    TenantQuota,
    TenantQuotaSet,
    TenantUpdate,
)

__all__ = [
    "APIModel",
    # Alert policies
    "AlertPolicies",
    "AlertPolicy",
    "AlertPolicyCondition",
    # Buckets
    "Bucket",
    "BucketCreate",
    "BucketInfo",
    "BucketList",
    "BucketQuota",
    "BucketQuotaInfo",
    "BucketQuotaUpdate",
    "Link",
    "Tag",
    "TagSet",
    # Replication
    "CRR",
    "CRRControlParameters",
    "FederatedObjectStore",
    "FederatedObjectStoreList",
    # Object users
    "BlobUser",
    "ObjectUserInfo",
    "ObjectUserList",
    "ObjectUserSecret",
    "ObjectUserSecretKeyCreateRequest",
    "ObjectUserSecretKeyCreateResponse",
    "ObjectUserSecretKeyDeleteRequest",
    # Metering
    "AccountBillingInfo",
    "AccountBillingInfoList",
    "BucketBillingInfo",
    "BucketBillingInfoList",
    "BucketReplicationInfoList",
    "ReplicationBillingInfo",
    "StorageClassCountSize",
    "StoreBillingInfo",
    "StoreBillingInfoList",
    "StoreReplicationDataList",
    "StoreReplicationThroughputRto",
    "TopNBucket",
    # Status
    "RebuildInfo",
    # Tenants
    "Tenant",
    "TenantCreate",
    "TenantList",
    "TenantQuota",
    "TenantQuotaSet",
    "TenantUpdate",
]
