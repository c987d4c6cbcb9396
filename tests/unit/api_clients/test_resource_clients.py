"""Unit tests for the resource clients.

Each client is exercised against a FakeRemoteCaller to check the Request it
builds: method, path, wire format, parameters and body.
"""

import pytest

from objectscale_client.api_clients import ClientSet
from objectscale_client.api_clients.exceptions import APIError
from objectscale_client.api_clients.request import ContentType, HTTPMethod
from objectscale_client.models import (
    AlertPolicies,
    AlertPolicy,
    Bucket,
    BucketCreate,
    BucketQuotaUpdate,
    CRR,
    ObjectUserList,
    ObjectUserSecretKeyCreateRequest,
    ObjectUserSecretKeyCreateResponse,
    ObjectUserSecretKeyDeleteRequest,
    RebuildInfo,
    TenantCreate,
    TenantQuotaSet,
    TenantUpdate,
)
from objectscale_client.models.objmt import AccountIds, ReplicationPairs, StoreIds
from objectscale_client.testing import FakeRemoteCaller


@pytest.fixture
def fake() -> FakeRemoteCaller:
    return FakeRemoteCaller()


@pytest.fixture
def clients(fake) -> ClientSet:
    return ClientSet(fake)


@pytest.mark.asyncio
class TestAlertPoliciesClient:
    async def test_get(self, fake, clients):
        fake.register(
            "GET", "vdc/alertpolicy/cpu%20high", AlertPolicy(policy_name="cpu high")
        )

        policy = await clients.alert_policies.get("cpu high")

        assert policy.policy_name == "cpu high"
        request = fake.last_call()
        assert request.path == "vdc/alertpolicy/cpu%20high"
        assert request.content_type == ContentType.XML

    async def test_list_passes_paging_params(self, fake, clients):
        fake.register(
            "GET",
            "vdc/alertpolicy/list",
            b"<alert_policies><alert_policy><policyName>p1</policyName>"
            b"</alert_policy><next_marker>p1</next_marker></alert_policies>",
        )

        page = await clients.alert_policies.list({"limit": "1"})

        assert isinstance(page, AlertPolicies)
        assert page.items[0].policy_name == "p1"
        assert page.next_marker == "p1"
        assert fake.last_call().params == {"limit": "1"}

    async def test_create_update_delete(self, fake, clients):
        policy = AlertPolicy(policy_name="p1", period=5)
        fake.register("POST", "vdc/alertpolicy", policy)
        fake.register("PUT", "vdc/alertpolicy/p1", policy)
        fake.register("DELETE", "vdc/alertpolicy/p1")

        await clients.alert_policies.create(policy)
        assert fake.last_call().body is policy

        await clients.alert_policies.update(policy, "p1")
        assert fake.last_call().method == HTTPMethod.PUT

        assert await clients.alert_policies.delete("p1") is None
        assert fake.last_call().body is None


@pytest.mark.asyncio
class TestBucketsClient:
    async def test_get_with_namespace(self, fake, clients):
        fake.register("GET", "object/bucket/b1/info", Bucket(name="b1"))

        bucket = await clients.buckets.get("b1", {"namespace": "ns1"})

        assert bucket.name == "b1"
        assert fake.last_call().params == {"namespace": "ns1"}

    async def test_create_wraps_body(self, fake, clients):
        fake.register("POST", "object/bucket", Bucket(name="b1", id="ns1.b1"))

        created = await clients.buckets.create(
            Bucket(name="b1", namespace="ns1", replication_group="rg1")
        )

        assert created.id == "ns1.b1"
        body = fake.last_call().body
        assert isinstance(body, BucketCreate)
        assert body.replication_group == "rg1"

    async def test_delete_deactivates(self, fake, clients):
        fake.register("POST", "object/bucket/b1/deactivate")

        await clients.buckets.delete("b1", "ns1", empty_bucket=True)

        request = fake.last_call()
        assert request.method == HTTPMethod.POST
        assert request.params == {"namespace": "ns1", "emptyBucket": "true"}

    async def test_missing_policy_is_none(self, fake, clients):
        fake.register("GET", "object/bucket/b1/policy")

        assert await clients.buckets.get_policy("b1", {"namespace": "ns1"}) is None

    async def test_policy_document_is_returned_verbatim(self, fake, clients):
        document = '{"Version":"2012-10-17","Statement":[]}'
        fake.register("GET", "object/bucket/b1/policy", document)

        assert await clients.buckets.get_policy("b1") == document

    async def test_update_policy_sends_raw_document(self, fake, clients):
        fake.register("PUT", "object/bucket/b1/policy")
        document = '{"Version":"2012-10-17"}'

        await clients.buckets.update_policy("b1", document, {"namespace": "ns1"})

        request = fake.last_call()
        assert request.body == document
        assert request.content_type == ContentType.JSON

    async def test_quota(self, fake, clients):
        fake.register(
            "GET",
            "object/bucket/b1/quota",
            b"<bucket_quota_details><bucketname>b1</bucketname>"
            b"<blockSize>10</blockSize></bucket_quota_details>",
        )
        fake.register("PUT", "object/bucket/b1/quota")
        fake.register("DELETE", "object/bucket/b1/quota")

        quota = await clients.buckets.get_quota("b1", "ns1")
        assert quota.block_size == 10

        update = BucketQuotaUpdate(bucket_name="b1", namespace="ns1", block_size=20)
        await clients.buckets.update_quota(update)
        assert fake.last_call().body is update

        await clients.buckets.delete_quota("b1", "ns1")
        assert fake.last_call().params == {"namespace": "ns1"}

    async def test_not_found_surfaces_api_error(self, clients):
        with pytest.raises(APIError) as exc_info:
            await clients.buckets.get("missing")

        assert exc_info.value.is_not_found


@pytest.mark.asyncio
class TestCRRClient:
    @pytest.mark.parametrize("action", ["pause", "suspend", "resume", "unthrottle"])
    async def test_control_actions(self, fake, clients, action):
        fake.register("POST", f"replication/control/os-b/store-b/{action}")

        await getattr(clients.crr, action)("os-b", "store-b")

        request = fake.last_call()
        assert request.method == HTTPMethod.POST
        assert request.body is None

    async def test_throttle_params(self, fake, clients):
        fake.register("POST", "replication/control/os-b/store-b/throttle")

        await clients.crr.throttle("os-b", "store-b", {"throttleMBPerSecond": "100"})

        assert fake.last_call().params == {"throttleMBPerSecond": "100"}

    async def test_get(self, fake, clients):
        fake.register(
            "GET",
            "replication/control/os-b/store-b",
            CRR(destination_object_scale="os-b", throttle_bandwidth=100),
        )

        crr = await clients.crr.get("os-b", "store-b")

        assert crr.throttle_bandwidth == 100


@pytest.mark.asyncio
class TestFederatedObjectStoresClient:
    async def test_list(self, fake, clients):
        fake.register(
            "GET",
            "replication/info",
            b"<ReplicationInfo><ReplicationStoreInfo><ObjectStoreName>store-b"
            b"</ObjectStoreName><CRRConfigured>true</CRRConfigured>"
            b"</ReplicationStoreInfo></ReplicationInfo>",
        )

        stores = await clients.federated_object_stores.list()

        assert stores.items[0].object_store_name == "store-b"
        assert stores.items[0].crr_configured is True


@pytest.mark.asyncio
class TestObjectUsersClient:
    async def test_list(self, fake, clients):
        fake.register(
            "GET",
            "object/users",
            '{"blobuser": [{"userid": "u1", "namespace": "ns1"}]}',
        )

        users = await clients.object_users.list({"namespace": "ns1"})

        assert isinstance(users, ObjectUserList)
        assert users.blob_users[0].user_id == "u1"
        assert fake.last_call().content_type == ContentType.JSON

    async def test_secret_keys(self, fake, clients):
        fake.register(
            "POST",
            "object/user-secret-keys/u1",
            ObjectUserSecretKeyCreateResponse(secret_key="abc"),
        )
        fake.register("POST", "object/user-secret-keys/u1/deactivate")

        created = await clients.object_users.create_secret(
            "u1", ObjectUserSecretKeyCreateRequest(namespace="ns1")
        )
        assert created.secret_key == "abc"

        await clients.object_users.delete_secret(
            "u1", ObjectUserSecretKeyDeleteRequest(secret_key="abc", namespace="ns1")
        )
        assert fake.last_call().path == "object/user-secret-keys/u1/deactivate"

    async def test_user_id_is_escaped(self, fake, clients):
        fake.register("GET", "object/users/a%2Fb/info", "{}")

        await clients.object_users.get_info("a/b")

        assert fake.last_call().path == "object/users/a%2Fb/info"


@pytest.mark.asyncio
class TestObjmtClient:
    async def test_account_billing_info_body(self, fake, clients):
        fake.register(
            "POST",
            "object/mt/account/info",
            b"<account_billing_objmt_infos><status>OK</status>"
            b"<account_billing_objmt_info><account_id>a1</account_id>"
            b"</account_billing_objmt_info></account_billing_objmt_infos>",
        )

        result = await clients.objmt.get_account_billing_info(["a1"], {"sizeunit": "KB"})

        assert result.items[0].account_id == "a1"
        request = fake.last_call()
        assert request.body == AccountIds(ids=["a1"])
        assert request.params == {"sizeunit": "KB"}

    async def test_replication_info_pairs(self, fake, clients):
        fake.register("POST", "object/mt/account/a1/replication/info", b"<replication_info_list/>")

        await clients.objmt.get_replication_info("a1", [("b1", "b2")])

        body = fake.last_call().body
        assert isinstance(body, ReplicationPairs)
        assert (body.replications[0].src, body.replications[0].dest) == ("b1", "b2")

    async def test_bucket_and_store_queries(self, fake, clients):
        fake.register(
            "POST",
            "object/mt/account/a1/bucket/info",
            b"<bucket_billing_objmt_infos/>",
        )
        fake.register("GET", "object/mt/store/info", b"<store_billing_info_list/>")
        fake.register(
            "POST", "object/mt/store/replication", b"<store_replication_list/>"
        )

        buckets = await clients.objmt.get_bucket_billing_info("a1", ["b1"])
        assert buckets.items == []

        store = await clients.objmt.get_store_billing_info()
        assert store.info is None

        await clients.objmt.get_store_replication_data(["s1"])
        assert fake.last_call().body == StoreIds(ids=["s1"])


@pytest.mark.asyncio
class TestStatusClient:
    async def test_rebuild_status_device_path(self, fake, clients):
        device = "ss-0.store-a-ss.objectscale.svc.cluster.local"
        fake.register(
            "GET",
            f"vdc/recovery-status/devices/{device}/levels/1",
            RebuildInfo(status="Running", total_bytes=10),
        )

        info = await clients.status.get_rebuild_status("store-a", "ss-0", "objectscale", "1")

        assert info.status == "Running"
        assert fake.last_call().content_type == ContentType.JSON


@pytest.mark.asyncio
class TestTenantsClient:
    async def test_create_and_update_paths(self, fake, clients):
        fake.register("POST", "object/tenants/tenant", b"<tenant><id>a1</id></tenant>")
        fake.register("PUT", "object/tenants/tenant/a1")

        tenant = await clients.tenants.create(TenantCreate(account_id="a1"))
        assert tenant.id == "a1"
        assert fake.last_call().path == "object/tenants/tenant/"

        await clients.tenants.update(TenantUpdate(alias="first"), "a1")
        assert fake.last_call().path == "object/tenants/tenant/a1/"

    async def test_delete_is_post(self, fake, clients):
        fake.register("POST", "object/tenants/tenant/a1/delete")

        await clients.tenants.delete("a1")

        request = fake.last_call()
        assert request.method == HTTPMethod.POST
        assert request.path == "object/tenants/tenant/a1/delete/"

    async def test_quota(self, fake, clients):
        fake.register(
            "GET",
            "object/tenants/tenant/a1/quota",
            b"<tenant_quota_details><id>a1</id><blockSize>5</blockSize></tenant_quota_details>",
        )
        fake.register("PUT", "object/tenants/tenant/a1/quota")
        fake.register("DELETE", "object/tenants/tenant/a1/quota")

        quota = await clients.tenants.get_quota("a1")
        assert quota.block_size == "5"

        await clients.tenants.set_quota("a1", TenantQuotaSet(block_size="10"))
        await clients.tenants.delete_quota("a1")
        assert [c.method for c in fake.calls] == [
            HTTPMethod.GET,
            HTTPMethod.PUT,
            HTTPMethod.DELETE,
        ]


@pytest.mark.asyncio
class TestClientSet:
    async def test_shares_one_dispatcher(self, fake, clients):
        assert clients.client is fake
        assert clients.buckets.client is clients.tenants.client

    async def test_context_manager_closes_dispatcher(self):
        class Closable(FakeRemoteCaller):
            closed = False

            async def close(self):
                self.closed = True

        dispatcher = Closable()
        async with ClientSet(dispatcher):
            pass

        assert dispatcher.closed
