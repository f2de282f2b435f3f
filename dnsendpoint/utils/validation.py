"""
DNSEndpoint validation
"""

import logging
from typing import Iterable

import dns.exception
import dns.ipv4
import dns.ipv6

from dnsendpoint.models import DNSEndpoint, DNSEndpointSpec, Endpoint
from dnsendpoint.utils.exceptions import (
    EmptySpecError,
    InvalidTargetError,
    UnsupportedRecordTypeError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Record types implemented by the external-dns project
SUPPORTED_RECORD_TYPES = ("A", "CNAME", "TXT", "SRV", "NS", "PTR")

ERROR_PREFIX = "error validating DNSEndpoint"


def is_valid_ip(value: str) -> bool:
    """Check if value is an IPv4 or IPv6 address literal"""
    if not isinstance(value, str) or not value:
        return False

    try:
        dns.ipv4.inet_aton(value)
        return True
    except dns.exception.SyntaxError:
        pass

    try:
        dns.ipv6.inet_aton(value)
        return True
    except (dns.exception.SyntaxError, ValueError):
        return False


def verify_dns_record_type(record_type: str) -> None:
    """Check if record_type is one of the supported DNS record types"""
    if record_type not in SUPPORTED_RECORD_TYPES:
        raise UnsupportedRecordTypeError(record_type, SUPPORTED_RECORD_TYPES)


def verify_dns_name(dns_name: str) -> None:
    """Check if dns_name is a valid DNS name.

    Names are not validated yet; every value is accepted.
    """


def verify_targets(targets: Iterable[str]) -> None:
    """Raise on the first target that is not an IP address"""
    for target in targets:
        if not is_valid_ip(target):
            raise InvalidTargetError(target)


def verify_endpoint(endpoint: Endpoint) -> None:
    verify_dns_record_type(endpoint.record_type)
    verify_targets(endpoint.targets)
    verify_dns_name(endpoint.dns_name)


def verify_dns_endpoint_spec(spec: DNSEndpointSpec) -> None:
    if not spec.endpoints:
        raise EmptySpecError()


def validate_dns_endpoint(dns_endpoint: DNSEndpoint) -> None:
    """
    Validate a DNSEndpoint resource.

    Raises the ValidationError subclass for the first violated constraint,
    with its message prefixed by "error validating DNSEndpoint".
    """
    try:
        verify_dns_endpoint_spec(dns_endpoint.spec)
        for endpoint in dns_endpoint.spec.endpoints:
            verify_endpoint(endpoint)
    except ValidationError as e:
        logger.debug(f"DNSEndpoint {dns_endpoint.namespace}/{dns_endpoint.name} rejected: {e}")
        raise e.wrap(ERROR_PREFIX)
