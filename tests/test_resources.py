"""Tests for stored DNSEndpoint auditing"""

import logging
from unittest import mock

from kubernetes.client.rest import ApiException
from dnsendpoint.kubernetes.resources import audit_dns_endpoints, list_dns_endpoints

logger = logging.getLogger(__name__)


def make_item(name, record_type, targets):
    return {
        "metadata": {"name": name, "namespace": "default"},
        "spec": {"endpoints": [{"recordType": record_type, "targets": targets}]},
    }


@mock.patch("dnsendpoint.kubernetes.resources.get_k8s_client")
def test_list_namespaced(get_client):
    api = get_client.return_value
    api.list_namespaced_custom_object.return_value = {"items": [make_item("a", "A", [])]}

    items = list_dns_endpoints("default")

    assert len(items) == 1
    api.list_namespaced_custom_object.assert_called_once_with(
        "externaldns.nginx.org", "v1", "default", "dnsendpoints"
    )


@mock.patch("dnsendpoint.kubernetes.resources.get_k8s_client")
def test_list_cluster_wide(get_client):
    api = get_client.return_value
    api.list_cluster_custom_object.return_value = {}

    assert list_dns_endpoints() == []
    api.list_cluster_custom_object.assert_called_once_with(
        "externaldns.nginx.org", "v1", "dnsendpoints"
    )


@mock.patch("dnsendpoint.kubernetes.resources.get_k8s_client")
def test_audit_reports_invalid(get_client):
    api = get_client.return_value
    api.list_namespaced_custom_object.return_value = {
        "items": [
            make_item("good", "A", ["10.0.0.1"]),
            make_item("bad-type", "MX", ["10.0.0.1"]),
            make_item("bad-target", "A", ["nope"]),
        ]
    }

    invalid = audit_dns_endpoints("default", logger)

    assert invalid == ["default/bad-type", "default/bad-target"]


@mock.patch("dnsendpoint.kubernetes.resources.get_k8s_client")
def test_audit_api_failure(get_client):
    get_client.return_value.list_cluster_custom_object.side_effect = ApiException(
        status=403, reason="Forbidden"
    )

    assert audit_dns_endpoints(None, logger) == []
