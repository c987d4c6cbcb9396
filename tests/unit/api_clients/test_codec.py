"""Tests for the XML/JSON payload codec."""

import json
import xml.etree.ElementTree as ET
from typing import Dict, List

import pytest

from objectscale_client.api_clients.codec import decode, decode_error_payload, encode
from objectscale_client.api_clients.exceptions import DecodeError, EncodeError
from objectscale_client.api_clients.request import ContentType
from objectscale_client.models import (
    AlertPolicies,
    AlertPolicy,
    AlertPolicyCondition,
    Bucket,
    BucketList,
    ObjectUserInfo,
    RebuildInfo,
    StoreBillingInfoList,
    Tag,
    TagSet,
    TenantList,
)
from objectscale_client.models.objmt import AccountIds, ReplicationPair, ReplicationPairs

ALERT_POLICY_XML = b"""<?xml version="1.0" encoding="UTF-8"?>
<alert_policy>
  <policyName>capacity</policyName>
  <metricType>Capacity</metricType>
  <metricName>UsedPercent</metricName>
  <isEnabled>true</isEnabled>
  <period>5</period>
  <periodUnits>Minutes</periodUnits>
  <datapointsToConsider>3</datapointsToConsider>
  <datapointsToAlert>2</datapointsToAlert>
  <statistic>Average</statistic>
  <operator>GreaterThan</operator>
  <condition>
    <thresholdUnits>%</thresholdUnits>
    <thresholdValue>80</thresholdValue>
    <severityType>WARNING</severityType>
  </condition>
</alert_policy>"""


class TestXmlDecode:
    def test_decode_nested_model(self):
        policy = decode(ALERT_POLICY_XML, ContentType.XML, AlertPolicy)

        assert policy.policy_name == "capacity"
        assert policy.period == 5
        assert policy.datapoints_to_alert == 2
        assert policy.condition == AlertPolicyCondition(
            threshold_units="%", threshold_value="80", severity_type="WARNING"
        )
        assert policy.created_by is None

    def test_decode_repeated_children_into_list(self):
        data = b"""<tenants>
            <tenant><id>t1</id><alias>first</alias></tenant>
            <tenant><id>t2</id><is_encryption_enabled>true</is_encryption_enabled></tenant>
        </tenants>"""

        tenants = decode(data, ContentType.XML, TenantList)

        assert [t.id for t in tenants.items] == ["t1", "t2"]
        assert tenants.items[1].encryption_enabled is True

    def test_decode_uses_xml_name_override(self):
        data = b"""<object_buckets>
            <object_bucket><name>b1</name><storage_policy>gold</storage_policy></object_bucket>
            <MaxBuckets>100</MaxBuckets>
            <NextMarker>b1</NextMarker>
        </object_buckets>"""

        page = decode(data, ContentType.XML, BucketList)

        assert page.items[0].storage_policy == "gold"
        assert page.max_buckets == 100
        assert page.next_marker == "b1"

    def test_decode_nested_element_paths(self):
        data = b"""<store_billing_info_list>
            <status>OK</status>
            <store_billing_info>
                <total_local_data>42</total_local_data>
                <total_user_object_metric>
                    <storage_class_counts>
                        <storage_class>STANDARD</storage_class>
                        <count_size><counts>7</counts><logical_size>1024</logical_size></count_size>
                    </storage_class_counts>
                </total_user_object_metric>
                <top_n_buckets_by_object_count>
                    <top_n_bucket><bucket_name>b1</bucket_name><metric_number>5</metric_number></top_n_bucket>
                </top_n_buckets_by_object_count>
            </store_billing_info>
        </store_billing_info_list>"""

        result = decode(data, ContentType.XML, StoreBillingInfoList)

        metric = result.info.total_user_object_metric[0]
        assert metric.storage_class == "STANDARD"
        assert metric.counts == 7
        assert metric.logical_size == 1024
        assert result.info.top_buckets_by_object_count[0].bucket_name == "b1"
        assert result.info.total_replica_object_metric == []

    def test_empty_element_for_numeric_field_is_treated_as_missing(self):
        data = b"<alert_policy><policyName>p</policyName><period/></alert_policy>"

        policy = decode(data, ContentType.XML, AlertPolicy)

        assert policy.period is None

    def test_root_element_mismatch(self):
        with pytest.raises(DecodeError, match="alert_policy"):
            decode(b"<tenant><id>t1</id></tenant>", ContentType.XML, AlertPolicy)

    def test_malformed_xml(self):
        with pytest.raises(DecodeError, match="Malformed"):
            decode(b"<alert_policy><policyName>", ContentType.XML, AlertPolicy)

    def test_shape_mismatch_is_not_zero_filled(self):
        data = b"<alert_policy><policyName>p</policyName><period>soon</period></alert_policy>"

        with pytest.raises(DecodeError):
            decode(data, ContentType.XML, AlertPolicy)

    def test_missing_required_field(self):
        with pytest.raises(DecodeError):
            decode(b"<alert_policy><period>1</period></alert_policy>", ContentType.XML, AlertPolicy)

    def test_non_model_target_is_rejected(self):
        with pytest.raises(DecodeError):
            decode(b"<a/>", ContentType.XML, Dict[str, str])


class TestXmlEncode:
    def test_encode_skips_none_and_renders_booleans(self):
        bucket = Bucket(name="b1", namespace="ns1", fs_access_enabled=False, locked=True)

        root = ET.fromstring(encode(bucket, ContentType.XML))

        assert root.tag == "object_bucket"
        assert root.findtext("name") == "b1"
        assert root.findtext("fs_access_enabled") == "false"
        assert root.findtext("locked") == "true"
        assert root.find("owner") is None

    def test_encode_repeated_and_nested_elements(self):
        body = ReplicationPairs(
            replications=[
                ReplicationPair(src="b1", dest="b2"),
                ReplicationPair(src="b3", dest="b4"),
            ]
        )

        root = ET.fromstring(encode(body, ContentType.XML))

        assert root.tag == "replication_list"
        assert [r.findtext("src") for r in root.findall("replication")] == ["b1", "b3"]

    def test_encode_id_list(self):
        root = ET.fromstring(encode(AccountIds(ids=["a1", "a2"]), ContentType.XML))

        assert [e.text for e in root.findall("id")] == ["a1", "a2"]

    def test_model_without_root_element_name(self):
        with pytest.raises(EncodeError, match="root element"):
            encode(ObjectUserInfo(name="u"), ContentType.XML)

    def test_plain_value_cannot_be_xml(self):
        with pytest.raises(EncodeError):
            encode({"a": 1}, ContentType.XML)


class TestRoundTrip:
    @pytest.mark.parametrize("content_type", [ContentType.XML, ContentType.JSON])
    def test_alert_policies(self, content_type):
        value = AlertPolicies(
            items=[
                AlertPolicy(
                    policy_name="p1",
                    period=5,
                    condition=AlertPolicyCondition(threshold_value="80"),
                ),
                AlertPolicy(policy_name="p2", statistic="Sum"),
            ],
            next_marker="p2",
        )

        assert decode(encode(value, content_type), content_type, AlertPolicies) == value

    @pytest.mark.parametrize("content_type", [ContentType.XML, ContentType.JSON])
    def test_bucket_with_tags(self, content_type):
        value = Bucket(
            name="b1",
            namespace="ns1",
            encryption_enabled=True,
            block_size=10,
            tags=TagSet(tags=[Tag(key="env", value="prod")]),
            storage_policy="gold",
        )

        assert decode(encode(value, content_type), content_type, Bucket) == value


class TestJson:
    def test_json_uses_wire_names(self):
        body = json.loads(encode(Bucket(name="b1", replication_group="rg1"), ContentType.JSON))

        assert body == {"name": "b1", "vpool": "rg1"}

    def test_string_encoded_integers(self):
        data = b'{"status": "Running", "total_bytes": "2048", "remaining_bytes": "1024", "level": "1"}'

        info = decode(data, ContentType.JSON, RebuildInfo)

        assert (info.total_bytes, info.remaining_bytes, info.level) == (2048, 1024, 1)

    def test_json_shape_mismatch(self):
        with pytest.raises(DecodeError):
            decode(b'{"total_bytes": "lots"}', ContentType.JSON, RebuildInfo)

    def test_json_non_model_target(self):
        assert decode(b'["a", "b"]', ContentType.JSON, List[str]) == ["a", "b"]

    def test_plain_values_are_json_encoded(self):
        assert json.loads(encode({"a": [1, 2]}, ContentType.JSON)) == {"a": [1, 2]}

    def test_unserializable_value(self):
        with pytest.raises(EncodeError):
            encode(object(), ContentType.JSON)


class TestRawBodies:
    def test_raw_string_passes_through(self):
        policy = '{"Version":"2012-10-17","Statement":[]}'

        assert encode(policy, ContentType.JSON) == policy.encode("utf-8")

    def test_decode_into_str_and_bytes(self):
        assert decode(b'{"a":1}', ContentType.JSON, str) == '{"a":1}'
        assert decode(b"<a/>", ContentType.XML, bytes) == b"<a/>"


class TestEmptyBodies:
    def test_empty_body_fails_by_default(self):
        with pytest.raises(DecodeError, match="Empty"):
            decode(b"", ContentType.JSON, RebuildInfo)

    def test_empty_body_allowed(self):
        assert decode(b"  ", ContentType.XML, AlertPolicy, allow_empty=True) is None


class TestErrorPayload:
    def test_xml_error_document(self):
        data = b"""<error><code>1004</code><description>Not found</description>
            <details>bucket b1</details><retryable>false</retryable></error>"""

        payload = decode_error_payload(data, ContentType.XML)

        assert payload["code"] == "1004"
        assert payload["description"] == "Not found"
        assert payload["details"] == "bucket b1"

    def test_json_error_for_xml_request(self):
        payload = decode_error_payload(b'{"code": 7, "description": "bad"}', ContentType.XML)

        assert payload == {"code": 7, "description": "bad"}

    def test_unstructured_body(self):
        assert decode_error_payload(b"<html>proxy error</html>", ContentType.XML) is None
        assert decode_error_payload(b"", ContentType.JSON) is None
