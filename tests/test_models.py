"""Tests for DNSEndpoint models"""

from dnsendpoint.models import DNSEndpoint, ProviderSpecificProperty


def test_dns_endpoint_from_dict():
    body = {
        "apiVersion": "externaldns.nginx.org/v1",
        "kind": "DNSEndpoint",
        "metadata": {"name": "web", "namespace": "prod", "generation": 3},
        "spec": {
            "endpoints": [
                {
                    "dnsName": "web.example.com",
                    "targets": ["10.0.0.1", "10.0.0.2"],
                    "recordType": "A",
                    "recordTTL": 300,
                    "setIdentifier": "eu",
                    "labels": {"owner": "team"},
                    "providerSpecific": [{"name": "weight", "value": "10"}],
                }
            ]
        },
        "status": {"observedGeneration": 2},
    }

    dns_endpoint = DNSEndpoint.from_dict(body)

    assert dns_endpoint.name == "web"
    assert dns_endpoint.namespace == "prod"
    assert dns_endpoint.generation == 3
    assert dns_endpoint.status.observed_generation == 2

    endpoint = dns_endpoint.spec.endpoints[0]
    assert endpoint.dns_name == "web.example.com"
    assert endpoint.targets == ["10.0.0.1", "10.0.0.2"]
    assert endpoint.record_type == "A"
    assert endpoint.record_ttl == 300
    assert endpoint.set_identifier == "eu"
    assert endpoint.labels == {"owner": "team"}
    assert endpoint.provider_specific == [ProviderSpecificProperty("weight", "10")]


def test_dns_endpoint_from_dict_defaults():
    dns_endpoint = DNSEndpoint.from_dict({"metadata": {"name": "empty"}, "spec": {"endpoints": None}})

    assert dns_endpoint.name == "empty"
    assert dns_endpoint.spec.endpoints == []
    assert dns_endpoint.status.observed_generation == 0


def test_endpoint_missing_targets():
    dns_endpoint = DNSEndpoint.from_dict({"spec": {"endpoints": [{"recordType": "TXT"}]}})

    assert dns_endpoint.spec.endpoints[0].targets == []
