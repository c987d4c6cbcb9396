"""Bucket management: buckets, bucket policies and bucket quotas."""

from typing import Dict, Optional

from ..models.bucket import (
    Bucket,
    BucketCreate,
    BucketInfo,
    BucketList,
    BucketQuotaInfo,
    BucketQuotaUpdate,
)
from .base_client import RemoteCaller
from .request import ContentType, HTTPMethod, Request, quote_segment


class BucketsClient:
    """Operations on object buckets."""

    def __init__(self, client: RemoteCaller):
        self.client = client

    async def get(self, name: str, params: Optional[Dict[str, str]] = None) -> Bucket:
        """Get a bucket.

        Args:
            name: Bucket name
            params: Query parameters, usually ``namespace``

        Returns:
            Bucket details
        """
        request = Request(
            method=HTTPMethod.GET,
            path=f"object/bucket/{quote_segment(name)}/info",
            content_type=ContentType.XML,
            params=params or {},
        )
        return await self.client.make_remote_call(request, BucketInfo)

    async def list(self, params: Optional[Dict[str, str]] = None) -> BucketList:
        request = Request(
            method=HTTPMethod.GET,
            path="object/bucket",
            content_type=ContentType.XML,
            params=params or {},
        )
        return await self.client.make_remote_call(request, BucketList)

    async def create(self, bucket: Bucket) -> Bucket:
        """Create a bucket and return it as stored by the server."""
        request = Request(
            method=HTTPMethod.POST,
            path="object/bucket",
            content_type=ContentType.XML,
            body=BucketCreate.model_validate(bucket.model_dump(exclude_none=True)),
        )
        return await self.client.make_remote_call(request, Bucket)

    async def delete(self, name: str, namespace: str, empty_bucket: bool = False) -> None:
        """Deactivate a bucket.

        Args:
            name: Bucket name
            namespace: Namespace (tenant) owning the bucket
            empty_bucket: Delete the bucket contents as well
        """
        request = Request(
            method=HTTPMethod.POST,
            path=f"object/bucket/{quote_segment(name)}/deactivate",
            content_type=ContentType.JSON,
            params={
                "namespace": namespace,
                "emptyBucket": "true" if empty_bucket else "false",
            },
        )
        await self.client.make_remote_call(request)

    async def get_policy(
        self, name: str, params: Optional[Dict[str, str]] = None
    ) -> Optional[str]:
        """Return the bucket policy document, or None when the bucket has none."""
        request = Request(
            method=HTTPMethod.GET,
            path=f"object/bucket/{quote_segment(name)}/policy",
            content_type=ContentType.JSON,
            params=params or {},
            allow_empty_response=True,
        )
        return await self.client.make_remote_call(request, str)

    async def update_policy(
        self, name: str, policy: str, params: Optional[Dict[str, str]] = None
    ) -> None:
        """Replace the bucket policy; ``policy`` is sent verbatim as JSON."""
        request = Request(
            method=HTTPMethod.PUT,
            path=f"object/bucket/{quote_segment(name)}/policy",
            content_type=ContentType.JSON,
            params=params or {},
            body=policy,
        )
        await self.client.make_remote_call(request)

    async def delete_policy(
        self, name: str, params: Optional[Dict[str, str]] = None
    ) -> None:
        request = Request(
            method=HTTPMethod.DELETE,
            path=f"object/bucket/{quote_segment(name)}/policy",
            content_type=ContentType.JSON,
            params=params or {},
        )
        await self.client.make_remote_call(request)

    async def get_quota(self, name: str, namespace: str) -> BucketQuotaInfo:
        request = Request(
            method=HTTPMethod.GET,
            path=f"object/bucket/{quote_segment(name)}/quota",
            content_type=ContentType.XML,
            params={"namespace": namespace},
        )
        return await self.client.make_remote_call(request, BucketQuotaInfo)

    async def update_quota(self, quota: BucketQuotaUpdate) -> None:
        request = Request(
            method=HTTPMethod.PUT,
            path=f"object/bucket/{quote_segment(quota.bucket_name)}/quota",
            content_type=ContentType.XML,
            body=quota,
        )
        await self.client.make_remote_call(request)

    async def delete_quota(self, name: str, namespace: str) -> None:
        request = Request(
            method=HTTPMethod.DELETE,
            path=f"object/bucket/{quote_segment(name)}/quota",
            content_type=ContentType.XML,
            params={"namespace": namespace},
        )
        await self.client.make_remote_call(request)
