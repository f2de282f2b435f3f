"""
DNSEndpoint resource access
"""

import logging
from typing import Any, Dict, List, Optional

from kubernetes.client.rest import ApiException

from dnsendpoint.kubernetes.client import get_k8s_client
from dnsendpoint.models import DNSEndpoint
from dnsendpoint.utils.exceptions import ValidationError
from dnsendpoint.utils.validation import validate_dns_endpoint

logger = logging.getLogger(__name__)

GROUP = "externaldns.nginx.org"
VERSION = "v1"
PLURAL = "dnsendpoints"


def list_dns_endpoints(namespace: Optional[str] = None) -> List[Dict[str, Any]]:
    """List stored DNSEndpoint objects, across all namespaces if namespace is None"""
    api = get_k8s_client()

    if namespace:
        result = api.list_namespaced_custom_object(GROUP, VERSION, namespace, PLURAL)
    else:
        result = api.list_cluster_custom_object(GROUP, VERSION, PLURAL)

    return result.get("items", [])


def audit_dns_endpoints(namespace: Optional[str], logger) -> List[str]:
    """Validate DNSEndpoints admitted before the webhook was in place"""
    try:
        items = list_dns_endpoints(namespace)
    except ApiException as e:
        logger.error(f"Failed to list DNSEndpoints: {e.status} {e.reason}")
        return []

    invalid = []
    for item in items:
        dns_endpoint = DNSEndpoint.from_dict(item)
        try:
            validate_dns_endpoint(dns_endpoint)
        except ValidationError as e:
            name = f"{dns_endpoint.namespace}/{dns_endpoint.name}"
            logger.warning(f"Stored DNSEndpoint {name} is invalid: {e}")
            invalid.append(name)

    logger.info(f"Audited {len(items)} DNSEndpoints, {len(invalid)} invalid")
    return invalid
