"""Metering (objMT) payloads (XML).

Most metric collections are wrapped in an extra element on the wire, e.g.
``<total_user_object_metric><storage_class_counts>...``; such fields declare
the ``parent>child`` element path.
"""

from typing import List, Optional

from pydantic import Field

from .base import APIModel


def _counts(wrapper: str):
    return Field(
        default_factory=list,
        json_schema_extra={"xml": f"{wrapper}>storage_class_counts"},
    )


class StorageClassCountSize(APIModel):
    """Object count and sizes for one storage class."""

    storage_class: Optional[str] = None
    counts: Optional[int] = Field(
        default=None, json_schema_extra={"xml": "count_size>counts"}
    )
    logical_size: Optional[int] = Field(
        default=None, json_schema_extra={"xml": "count_size>logical_size"}
    )
    physical_size: Optional[int] = Field(
        default=None, json_schema_extra={"xml": "count_size>physical_size"}
    )


class BucketBillingInfo(APIModel):
    bucket_name: Optional[str] = None
    compression_ratio: Optional[float] = None
    consistent_time: Optional[str] = None
    hard_quota_in_count: Optional[int] = None
    hard_quota_in_gb: Optional[int] = Field(default=None, alias="hard_quota_in_GB")
    soft_quota_in_count: Optional[int] = None
    soft_quota_in_gb: Optional[int] = Field(default=None, alias="soft_quota_in_GB")
    object_distribution: Optional[str] = None
    total_local_data: Optional[int] = None
    total_replica_data: Optional[int] = None
    total_user_object_metric: List[StorageClassCountSize] = _counts(
        "total_user_object_metric"
    )
    total_replica_object_metric: List[StorageClassCountSize] = _counts(
        "total_replica_object_metric"
    )


class AccountBillingInfo(APIModel):
    """Usage of one IAM account."""

    account_id: Optional[str] = None
    consistent_time: Optional[str] = None
    total_local_data: Optional[int] = None
    total_replica_data: Optional[int] = None
    hard_quota_in_count: Optional[int] = None
    hard_quota_in_gb: Optional[int] = Field(default=None, alias="hard_quota_in_GB")
    soft_quota_in_count: Optional[int] = None
    soft_quota_in_gb: Optional[int] = Field(default=None, alias="soft_quota_in_GB")
    total_user_object_metric: List[StorageClassCountSize] = _counts(
        "total_user_object_metric"
    )
    total_replica_object_metric: List[StorageClassCountSize] = _counts(
        "total_replica_object_metric"
    )
    bucket_billing_info: List[BucketBillingInfo] = Field(default_factory=list)


class _MetricList(APIModel):
    status: Optional[str] = None
    size_unit: Optional[str] = None
    date_time: Optional[str] = None


class AccountBillingInfoList(_MetricList):
    xml_tag = "account_billing_objmt_infos"

    items: List[AccountBillingInfo] = Field(
        default_factory=list, alias="account_billing_objmt_info"
    )


class BucketBillingInfoList(_MetricList):
    xml_tag = "bucket_billing_objmt_infos"

    items: List[BucketBillingInfo] = Field(
        default_factory=list, alias="bucket_billing_objmt_info"
    )


class ReplicationBillingInfo(APIModel):
    """Data still pending replication between a source and destination bucket."""

    source_bucket: Optional[str] = Field(
        default=None,
        json_schema_extra={"xml": "replication_source_destination>source_bucket"},
    )
    destination_bucket: Optional[str] = Field(
        default=None,
        json_schema_extra={
            "xml": "replication_source_destination>destination_bucket_arn"
        },
    )
    consistent_time: Optional[str] = None
    pending_to_replicate: List[StorageClassCountSize] = _counts("pending_to_replicate")


class BucketReplicationInfoList(_MetricList):
    xml_tag = "replication_info_list"

    items: List[ReplicationBillingInfo] = Field(
        default_factory=list, alias="replication_billing_info"
    )


class TopNBucket(APIModel):
    bucket_name: Optional[str] = None
    metric_number: Optional[int] = None


class StoreBillingInfo(APIModel):
    """Usage of the whole object store."""

    compression_ratio: Optional[float] = None
    consistent_time: Optional[str] = None
    total_local_data: Optional[int] = None
    total_replica_data: Optional[int] = None
    total_user_object_metric: List[StorageClassCountSize] = _counts(
        "total_user_object_metric"
    )
    total_replica_object_metric: List[StorageClassCountSize] = _counts(
        "total_replica_object_metric"
    )
    top_buckets_by_object_count: List[TopNBucket] = Field(
        default_factory=list,
        json_schema_extra={"xml": "top_n_buckets_by_object_count>top_n_bucket"},
    )
    top_buckets_by_object_size: List[TopNBucket] = Field(
        default_factory=list,
        json_schema_extra={"xml": "top_n_buckets_by_object_size>top_n_bucket"},
    )


class StoreBillingInfoList(_MetricList):
    xml_tag = "store_billing_info_list"

    info: Optional[StoreBillingInfo] = Field(default=None, alias="store_billing_info")


class StoreReplicationThroughputRto(APIModel):
    sample_time_range: Optional[int] = None
    consistent_time: Optional[str] = None
    destination_store: Optional[str] = None
    throughput: Optional[int] = None
    rto: Optional[int] = None
    pending_to_replicate: List[StorageClassCountSize] = _counts("pending_to_replicate")
    replicated_delta: List[StorageClassCountSize] = _counts("replicated_delta")


class StoreReplicationDataList(_MetricList):
    xml_tag = "store_replication_list"

    start_time: Optional[str] = None
    end_time: Optional[str] = None
    samples: List[StoreReplicationThroughputRto] = Field(
        default_factory=list, alias="store_replication_throughput_rto"
    )


class AccountIds(APIModel):
    xml_tag = "account_list"

    ids: List[str] = Field(default_factory=list, alias="id")


class BucketIds(APIModel):
    xml_tag = "bucket_list"

    ids: List[str] = Field(default_factory=list, alias="id")


class StoreIds(APIModel):
    xml_tag = "store_list"

    ids: List[str] = Field(default_factory=list, alias="id")


class ReplicationPair(APIModel):
    src: str
    dest: str


class ReplicationPairs(APIModel):
    xml_tag = "replication_list"

    replications: List[ReplicationPair] = Field(
        default_factory=list, alias="replication"
    )
