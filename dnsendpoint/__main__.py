"""
Main entry point for the DNSEndpoint validation operator
"""

import logging
import sys
import kopf
import os

# Import handlers
from dnsendpoint.handlers import dnsendpoints
from dnsendpoint.kubernetes.resources import audit_dns_endpoints

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[
        logging.StreamHandler(sys.stdout),
    ],
)

logger = logging.getLogger(__name__)


def audit_enabled() -> bool:
    return os.getenv("AUDIT_ON_STARTUP", "true").lower() in ("1", "true", "yes")


@kopf.on.startup()
def configure_operator(settings: kopf.OperatorSettings, **_):
    """Configure operator for production use"""

    # Watching configuration
    settings.watching.server_timeout = 60
    settings.watching.client_timeout = 120

    # Posting configuration
    settings.posting.enabled = True
    settings.posting.level = logging.INFO

    # Peering configuration
    settings.peering.name = "dnsendpoint-validator"
    settings.peering.mandatory = True

    # Execution configuration
    settings.execution.max_workers = 10

    # Admission webhook configuration
    settings.admission.server = kopf.WebhookServer(
        addr=os.getenv("WEBHOOK_ADDR", "0.0.0.0"),
        port=int(os.getenv("WEBHOOK_PORT", "9443")),
        host=os.getenv("WEBHOOK_HOST"),
        certfile=os.getenv("WEBHOOK_CERTFILE"),
        pkeyfile=os.getenv("WEBHOOK_PKEYFILE"),
    )
    settings.admission.managed = "dnsendpoint.externaldns.nginx.org"

    logger.info("DNSEndpoint validation operator configured successfully")


@kopf.on.startup()
def audit_stored_endpoints(logger, **_):
    """Report stored DNSEndpoints that would not pass admission"""
    if not audit_enabled():
        return

    audit_dns_endpoints(os.getenv("OPERATOR_NAMESPACE"), logger)


@kopf.on.login()
def login(**kwargs):
    """Handle authentication"""
    return kopf.login_via_client(**kwargs)


def main():
    """Main entry point"""
    namespace = os.getenv("OPERATOR_NAMESPACE")
    kopf.run(
        standalone=True,
        clusterwide=not namespace,
        namespaces=[namespace] if namespace else [],
    )


if __name__ == "__main__":
    main()
