"""Federated object store payloads (XML)."""

from typing import List, Optional

from pydantic import Field

from .base import APIModel


class CRRControlParameters(APIModel):
    suspend_start_mills: Optional[int] = Field(default=None, alias="suspendStartMills")
    pause_start_mills: Optional[int] = Field(default=None, alias="pauseStartMills")
    pause_end_mills: Optional[int] = Field(default=None, alias="pauseEndMills")
    throttle_bandwidth: Optional[int] = Field(default=None, alias="throttleBandwidth")


class FederatedObjectStore(APIModel):
    """An object store taking part in replication with the local one."""

    xml_tag = "ReplicationStoreInfo"

    crr_configured: Optional[bool] = Field(default=None, alias="CRRConfigured")
    object_scale_id: Optional[str] = Field(default=None, alias="ObjectScaleId")
    object_store_id: Optional[str] = Field(default=None, alias="ObjectStoreId")
    object_store_name: Optional[str] = Field(default=None, alias="ObjectStoreName")
    replication_status: Optional[str] = Field(default=None, alias="ReplicationStatus")
    object_store_rto: Optional[int] = Field(default=None, alias="ObjectStoreRTO")
    failed_data: Optional[int] = Field(default=None, alias="FailedData")
    crr_control_parameters: Optional[CRRControlParameters] = Field(
        default=None, alias="CRRControlParameters"
    )


class FederatedObjectStoreList(APIModel):
    xml_tag = "ReplicationInfo"

    items: List[FederatedObjectStore] = Field(
        default_factory=list, alias="ReplicationStoreInfo"
    )
