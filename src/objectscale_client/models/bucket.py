"""Bucket, bucket quota and bucket listing payloads (XML)."""

from typing import List, Optional

from pydantic import Field

from .base import APIModel
from .common import TagSet


class Bucket(APIModel):
    """Object bucket as returned by the management API."""

    xml_tag = "object_bucket"

    name: str
    id: Optional[str] = None
    api_type: Optional[str] = None
    audit_delete_expiration: Optional[int] = None
    created: Optional[str] = None
    namespace: Optional[str] = None
    owner: Optional[str] = None
    replication_group: Optional[str] = Field(default=None, alias="vpool")
    soft_quota: Optional[str] = Field(default=None, alias="softquota")
    encryption_enabled: Optional[bool] = Field(
        default=None, alias="is_encryption_enabled"
    )
    fs_access_enabled: Optional[bool] = None
    locked: Optional[bool] = None
    stale_allowed: Optional[bool] = Field(default=None, alias="is_stale_allowed")
    tso_read_only: Optional[bool] = Field(default=None, alias="is_tso_read_only")
    default_retention: Optional[int] = None
    block_size: Optional[int] = None
    block_size_in_count: Optional[int] = None
    notification_size: Optional[int] = None
    notification_size_in_count: Optional[int] = None
    retention: Optional[int] = None
    default_group: Optional[str] = None
    tags: Optional[TagSet] = Field(default=None, alias="TagSet")
    storage_policy: Optional[str] = Field(
        default=None,
        alias="storagePolicy",
        json_schema_extra={"xml": "storage_policy"},
    )


class BucketInfo(Bucket):
    xml_tag = "bucket_info"


class BucketCreate(Bucket):
    """Creation request; same fields as Bucket under a different root element."""

    xml_tag = "object_bucket_create"


class BucketList(APIModel):
    """One page of buckets."""

    xml_tag = "object_buckets"

    items: List[Bucket] = Field(default_factory=list, alias="object_bucket")
    max_buckets: Optional[int] = Field(
        default=None, alias="max_buckets", json_schema_extra={"xml": "MaxBuckets"}
    )
    next_marker: Optional[str] = Field(
        default=None, alias="next_marker", json_schema_extra={"xml": "NextMarker"}
    )
    filter: Optional[str] = Field(default=None, alias="Filter")
    next_page_link: Optional[str] = Field(
        default=None,
        alias="next_page_link",
        json_schema_extra={"xml": "NextPageLink"},
    )


class BucketQuota(APIModel):
    """Hard and notification quota of a bucket, in GB and object counts."""

    bucket_name: str = Field(alias="bucketname")
    namespace: Optional[str] = None
    block_size: Optional[int] = Field(default=None, alias="blockSize")
    block_size_in_count: Optional[int] = Field(default=None, alias="blockSizeInCount")
    notification_size: Optional[int] = Field(default=None, alias="notificationSize")
    notification_size_in_count: Optional[int] = Field(
        default=None, alias="notificationSizeInCount"
    )


class BucketQuotaInfo(BucketQuota):
    xml_tag = "bucket_quota_details"


class BucketQuotaUpdate(BucketQuota):
    xml_tag = "bucket_quota_param"
