"""Cross-region replication control payloads (XML)."""

from typing import Optional

from pydantic import Field

from .base import APIModel


class CRR(APIModel):
    """Replication state between a source and a destination object store."""

    xml_tag = "ReplicationAdminConfiguration"

    destination_object_scale: Optional[str] = Field(
        default=None, alias="destinationObjectScale"
    )
    destination_object_store: Optional[str] = Field(
        default=None, alias="destinationObjectStore"
    )
    pause_start_mills: Optional[int] = Field(default=None, alias="pauseStartMills")
    pause_end_mills: Optional[int] = Field(default=None, alias="pauseEndMills")
    suspend_start_mills: Optional[int] = Field(default=None, alias="suspendStartMills")
    throttle_bandwidth: Optional[int] = Field(default=None, alias="throttleBandwidth")
