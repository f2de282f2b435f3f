"""
Kubernetes API access for DNSEndpoint custom objects
"""

from kubernetes import client, config
import os


def get_k8s_client() -> client.CustomObjectsApi:
    """Get the CustomObjectsApi used to read stored DNSEndpoints.

    Prefers the service account when running inside a pod and falls back
    to the local kubeconfig.
    """
    if os.getenv("KUBERNETES_SERVICE_HOST"):
        try:
            config.load_incluster_config()
        except config.ConfigException:
            config.load_kube_config()
    else:
        config.load_kube_config()

    return client.CustomObjectsApi()
