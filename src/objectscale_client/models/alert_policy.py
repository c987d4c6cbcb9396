"""Alert policy payloads (XML)."""

from typing import List, Optional

from pydantic import Field

from .base import APIModel


class AlertPolicyCondition(APIModel):
    """Threshold that fires an alert policy."""

    threshold_units: Optional[str] = Field(default=None, alias="thresholdUnits")
    threshold_value: Optional[str] = Field(default=None, alias="thresholdValue")
    severity_type: Optional[str] = Field(default=None, alias="severityType")


class AlertPolicy(APIModel):
    """Alert policy definition."""

    xml_tag = "alert_policy"

    policy_name: str = Field(alias="policyName")
    metric_type: Optional[str] = Field(default=None, alias="metricType")
    metric_name: Optional[str] = Field(default=None, alias="metricName")
    created_by: Optional[str] = Field(default=None, alias="createdBy")
    is_enabled: Optional[str] = Field(default=None, alias="isEnabled")
    is_per_instance_metric: Optional[str] = Field(
        default=None, alias="isPerInstanceMetric"
    )
    period: Optional[int] = None
    period_units: Optional[str] = Field(default=None, alias="periodUnits")
    datapoints_to_consider: Optional[int] = Field(
        default=None, alias="datapointsToConsider"
    )
    datapoints_to_alert: Optional[int] = Field(default=None, alias="datapointsToAlert")
    statistic: Optional[str] = None
    operator: Optional[str] = None
    condition: Optional[AlertPolicyCondition] = None


class AlertPolicies(APIModel):
    """One page of alert policies."""

    xml_tag = "alert_policies"

    items: List[AlertPolicy] = Field(default_factory=list, alias="alert_policy")
    max_policies: Optional[int] = Field(default=None, alias="MaxPolicies")
    next_marker: Optional[str] = None
    filter: Optional[str] = Field(default=None, alias="Filter")
    next_page_link: Optional[str] = None
