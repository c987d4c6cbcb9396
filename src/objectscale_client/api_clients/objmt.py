"""Metering (objMT) queries for accounts, buckets and the object store."""

from typing import Dict, List, Optional, Sequence, Tuple

from ..models.objmt import (
    AccountBillingInfoList,
    AccountIds,
    BucketBillingInfoList,
    BucketIds,
    BucketReplicationInfoList,
    ReplicationPair,
    ReplicationPairs,
    StoreBillingInfoList,
    StoreIds,
    StoreReplicationDataList,
)
from .base_client import RemoteCaller
from .request import ContentType, HTTPMethod, Request, quote_segment


class ObjmtClient:
    """Read capacity and replication metrics.

    Queries that select several accounts, buckets or stores send the ids in
    an XML body, so they are POSTs even though they do not modify anything.
    """

    def __init__(self, client: RemoteCaller):
        self.client = client

    async def get_account_billing_info(
        self, ids: List[str], params: Optional[Dict[str, str]] = None
    ) -> AccountBillingInfoList:
        request = Request(
            method=HTTPMethod.POST,
            path="object/mt/account/info",
            content_type=ContentType.XML,
            params=params or {},
            body=AccountIds(ids=ids),
        )
        return await self.client.make_remote_call(request, AccountBillingInfoList)

    async def get_bucket_billing_info(
        self, account: str, ids: List[str], params: Optional[Dict[str, str]] = None
    ) -> BucketBillingInfoList:
        request = Request(
            method=HTTPMethod.POST,
            path=f"object/mt/account/{quote_segment(account)}/bucket/info",
            content_type=ContentType.XML,
            params=params or {},
            body=BucketIds(ids=ids),
        )
        return await self.client.make_remote_call(request, BucketBillingInfoList)

    async def get_replication_info(
        self,
        account: str,
        replication_pairs: Sequence[Tuple[str, str]],
        params: Optional[Dict[str, str]] = None,
    ) -> BucketReplicationInfoList:
        """Get pending replication between bucket pairs of an account.

        Args:
            account: IAM account id
            replication_pairs: ``(source bucket, destination bucket)`` pairs
            params: Extra query parameters
        """
        body = ReplicationPairs(
            replications=[
                ReplicationPair(src=src, dest=dest) for src, dest in replication_pairs
            ]
        )
        request = Request(
            method=HTTPMethod.POST,
            path=f"object/mt/account/{quote_segment(account)}/replication/info",
            content_type=ContentType.XML,
            params=params or {},
            body=body,
        )
        return await self.client.make_remote_call(request, BucketReplicationInfoList)

    async def get_store_billing_info(
        self, params: Optional[Dict[str, str]] = None
    ) -> StoreBillingInfoList:
        request = Request(
            method=HTTPMethod.GET,
            path="object/mt/store/info",
            content_type=ContentType.XML,
            params=params or {},
        )
        return await self.client.make_remote_call(request, StoreBillingInfoList)

    async def get_store_replication_data(
        self, ids: List[str], params: Optional[Dict[str, str]] = None
    ) -> StoreReplicationDataList:
        request = Request(
            method=HTTPMethod.POST,
            path="object/mt/store/replication",
            content_type=ContentType.XML,
            params=params or {},
            body=StoreIds(ids=ids),
        )
        return await self.client.make_remote_call(request, StoreReplicationDataList)
