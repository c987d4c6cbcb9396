"""Cross-region replication (CRR) control."""

from typing import Dict, Optional

from ..models.crr import CRR
from .base_client import RemoteCaller
from .request import ContentType, HTTPMethod, Request, quote_segment


class CRRClient:
    """Pause, suspend, throttle and inspect replication to a destination store.

    Control operations are bodiless POSTs; the destination is identified by
    its ObjectScale instance and object store names.
    """

    def __init__(self, client: RemoteCaller):
        self.client = client

    @staticmethod
    def _path(dest_object_scale: str, dest_object_store: str, action: str = "") -> str:
        path = (
            f"replication/control/{quote_segment(dest_object_scale)}"
            f"/{quote_segment(dest_object_store)}"
        )
        return f"{path}/{action}" if action else path

    async def _control(
        self,
        action: str,
        dest_object_scale: str,
        dest_object_store: str,
        params: Optional[Dict[str, str]],
    ) -> None:
        request = Request(
            method=HTTPMethod.POST,
            path=self._path(dest_object_scale, dest_object_store, action),
            content_type=ContentType.XML,
            params=params or {},
        )
        await self.client.make_remote_call(request)

    async def pause(
        self,
        dest_object_scale: str,
        dest_object_store: str,
        params: Optional[Dict[str, str]] = None,
    ) -> None:
        """Pause replication; ``params`` may carry ``pauseEndMills``."""
        await self._control("pause", dest_object_scale, dest_object_store, params)

    async def suspend(
        self,
        dest_object_scale: str,
        dest_object_store: str,
        params: Optional[Dict[str, str]] = None,
    ) -> None:
        await self._control("suspend", dest_object_scale, dest_object_store, params)

    async def resume(
        self,
        dest_object_scale: str,
        dest_object_store: str,
        params: Optional[Dict[str, str]] = None,
    ) -> None:
        await self._control("resume", dest_object_scale, dest_object_store, params)

    async def throttle(
        self,
        dest_object_scale: str,
        dest_object_store: str,
        params: Optional[Dict[str, str]] = None,
    ) -> None:
        """Limit replication bandwidth; ``params`` carries ``throttleMBPerSecond``."""
        await self._control("throttle", dest_object_scale, dest_object_store, params)

    async def unthrottle(
        self,
        dest_object_scale: str,
        dest_object_store: str,
        params: Optional[Dict[str, str]] = None,
    ) -> None:
        await self._control("unthrottle", dest_object_scale, dest_object_store, params)

    async def get(
        self,
        dest_object_scale: str,
        dest_object_store: str,
        params: Optional[Dict[str, str]] = None,
    ) -> CRR:
        request = Request(
            method=HTTPMethod.GET,
            path=self._path(dest_object_scale, dest_object_store),
            content_type=ContentType.XML,
            params=params or {},
        )
        return await self.client.make_remote_call(request, CRR)
