"""Aggregate of all resource clients sharing one dispatcher."""

from .alert_policies import AlertPoliciesClient
from .base_client import RemoteCaller
from .buckets import BucketsClient
from .crr import CRRClient
from .federated_object_stores import FederatedObjectStoresClient
from .object_users import ObjectUsersClient
from .objmt import ObjmtClient
from .status import StatusClient
from .tenants import TenantsClient


class ClientSet:
    """Entry point exposing every resource family over a single RemoteCaller.

    Any object implementing ``make_remote_call`` works, so tests can pass a
    FakeRemoteCaller in place of a ManagementAPIClient.
    """

    def __init__(self, client: RemoteCaller):
        self._client = client
        self._alert_policies = AlertPoliciesClient(client)
        self._buckets = BucketsClient(client)
        self._crr = CRRClient(client)
        self._federated_object_stores = FederatedObjectStoresClient(client)
        self._object_users = ObjectUsersClient(client)
        self._objmt = ObjmtClient(client)
        self._status = StatusClient(client)
        self._tenants = TenantsClient(client)

    @property
    def client(self) -> RemoteCaller:
        return self._client

    @property
    def alert_policies(self) -> AlertPoliciesClient:
        return self._alert_policies

    @property
    def buckets(self) -> BucketsClient:
        return self._buckets

    @property
    def crr(self) -> CRRClient:
        return self._crr

    @property
    def federated_object_stores(self) -> FederatedObjectStoresClient:
        return self._federated_object_stores

    @property
    def object_users(self) -> ObjectUsersClient:
        return self._object_users

    @property
    def objmt(self) -> ObjmtClient:
        return self._objmt

    @property
    def status(self) -> StatusClient:
        return self._status

    @property
    def tenants(self) -> TenantsClient:
        return self._tenants

    async def close(self) -> None:
        """Close the underlying dispatcher if it holds resources."""
        close = getattr(self._client, "close", None)
        if close is not None:
            await close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
