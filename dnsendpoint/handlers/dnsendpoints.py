"""
Handlers for DNSEndpoint resources
"""

import kopf
import logging
from dnsendpoint.models import DNSEndpoint
from dnsendpoint.kubernetes.resources import GROUP, VERSION, PLURAL
from dnsendpoint.utils.exceptions import ValidationError
from dnsendpoint.utils.validation import validate_dns_endpoint

logger = logging.getLogger(__name__)


@kopf.on.validate(GROUP, VERSION, PLURAL, id="validate-dnsendpoint")
def validate_dnsendpoint(body, name, namespace, logger, **kwargs):
    """Reject DNSEndpoints that fail validation at admission time"""
    try:
        validate_dns_endpoint(DNSEndpoint.from_dict(body))
    except ValidationError as e:
        logger.info(f"Denied DNSEndpoint {namespace}/{name}: {e}")
        raise kopf.AdmissionError(str(e), code=422)


@kopf.on.create(GROUP, VERSION, PLURAL)
@kopf.on.update(GROUP, VERSION, PLURAL)
@kopf.on.resume(GROUP, VERSION, PLURAL)
def manage_dnsendpoint(body, name, namespace, patch, logger, **kwargs):
    """Validate stored DNSEndpoint and record the observed generation"""
    dns_endpoint = DNSEndpoint.from_dict(body)

    # Already checked at this generation
    if dns_endpoint.generation and dns_endpoint.status.observed_generation == dns_endpoint.generation:
        logger.info(f"DNSEndpoint {name} unchanged at generation {dns_endpoint.generation}")
        return {"phase": "Valid"}

    logger.info(f"Checking DNSEndpoint {name}")

    try:
        validate_dns_endpoint(dns_endpoint)

        patch.status["observedGeneration"] = dns_endpoint.generation
        return {"phase": "Valid"}

    except ValueError as e:
        raise kopf.PermanentError(f"Invalid DNSEndpoint: {e}")
    except Exception as e:
        raise kopf.TemporaryError(f"DNSEndpoint check failed: {e}", delay=30)
