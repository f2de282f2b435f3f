"""
DNSEndpoint resource models
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class ProviderSpecificProperty:
    """Provider specific configuration attached to an endpoint"""

    name: str = ""
    value: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProviderSpecificProperty":
        return cls(name=data.get("name", ""), value=data.get("value", ""))


@dataclass
class Endpoint:
    """A single DNS record to be published"""

    dns_name: str = ""
    targets: List[str] = field(default_factory=list)
    record_type: str = ""
    set_identifier: str = ""
    record_ttl: int = 0
    labels: Dict[str, str] = field(default_factory=dict)
    provider_specific: List[ProviderSpecificProperty] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Endpoint":
        return cls(
            dns_name=data.get("dnsName", ""),
            targets=list(data.get("targets") or []),
            record_type=data.get("recordType", ""),
            set_identifier=data.get("setIdentifier", ""),
            record_ttl=data.get("recordTTL", 0),
            labels=dict(data.get("labels") or {}),
            provider_specific=[
                ProviderSpecificProperty.from_dict(p)
                for p in data.get("providerSpecific") or []
            ],
        )


@dataclass
class DNSEndpointSpec:
    endpoints: List[Endpoint] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "DNSEndpointSpec":
        data = data or {}
        return cls(endpoints=[Endpoint.from_dict(e) for e in data.get("endpoints") or []])


@dataclass
class DNSEndpointStatus:
    observed_generation: int = 0

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "DNSEndpointStatus":
        data = data or {}
        return cls(observed_generation=data.get("observedGeneration", 0))


@dataclass
class DNSEndpoint:
    """
    DNSEndpoint custom resource (externaldns.nginx.org/v1)
    """

    name: str = ""
    namespace: str = ""
    generation: int = 0
    spec: DNSEndpointSpec = field(default_factory=DNSEndpointSpec)
    status: DNSEndpointStatus = field(default_factory=DNSEndpointStatus)

    @classmethod
    def from_dict(cls, body: Dict[str, Any]) -> "DNSEndpoint":
        """Build a DNSEndpoint from its Kubernetes object representation"""
        metadata = body.get("metadata") or {}
        return cls(
            name=metadata.get("name", ""),
            namespace=metadata.get("namespace", ""),
            generation=metadata.get("generation", 0),
            spec=DNSEndpointSpec.from_dict(body.get("spec")),
            status=DNSEndpointStatus.from_dict(body.get("status")),
        )
