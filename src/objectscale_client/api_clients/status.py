"""Storage server recovery status."""

from typing import Dict, Optional

from ..models.status import RebuildInfo
from .base_client import RemoteCaller
from .request import ContentType, HTTPMethod, Request, quote_segment


class StatusClient:
    def __init__(self, client: RemoteCaller):
        self.client = client

    async def get_rebuild_status(
        self,
        object_store_name: str,
        ss_pod_name: str,
        ss_pod_namespace: str,
        level: str,
        params: Optional[Dict[str, str]] = None,
    ) -> RebuildInfo:
        """Get rebuild progress of a storage server pod.

        The device is addressed by the in-cluster DNS name of the storage
        server pod, ``{pod}.{store}-ss.{namespace}.svc.cluster.local``.
        """
        device = f"{ss_pod_name}.{object_store_name}-ss.{ss_pod_namespace}.svc.cluster.local"
        request = Request(
            method=HTTPMethod.GET,
            path=(
                f"vdc/recovery-status/devices/{quote_segment(device)}"
                f"/levels/{quote_segment(level)}"
            ),
            content_type=ContentType.JSON,
            params=params or {},
        )
        return await self.client.make_remote_call(request, RebuildInfo)
