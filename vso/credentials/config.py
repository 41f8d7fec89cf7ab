"""
vso.credentials.config

Environment-driven settings for the credentials package.
"""

import logging
import os

from kubernetes import client, config

logger = logging.getLogger(__name__)

DEFAULT_OPERATOR_NAMESPACE = "vault-secrets-operator-system"
SERVICE_ACCOUNT_NAMESPACE_PATH = "/var/run/secrets/kubernetes.io/serviceaccount/namespace"


def is_running_in_cluster() -> bool:
    """Check if running inside a Kubernetes cluster."""
    return bool(os.getenv("KUBERNETES_SERVICE_HOST"))


def get_operator_namespace(
    namespace_path: str = SERVICE_ACCOUNT_NAMESPACE_PATH,
) -> str:
    """
    Resolve the namespace the operator runs in.

    Precedence: OPERATOR_NAMESPACE, the service account namespace file,
    POD_NAMESPACE, then DEFAULT_OPERATOR_NAMESPACE.
    """
    namespace = os.environ.get("OPERATOR_NAMESPACE")
    if namespace:
        return namespace

    try:
        with open(namespace_path, "r") as f:
            namespace = f.read().strip()
    except IOError:
        logger.debug("No service account namespace at %s", namespace_path)
    if namespace:
        return namespace

    return os.environ.get("POD_NAMESPACE") or DEFAULT_OPERATOR_NAMESPACE


def load_api_client() -> client.ApiClient:
    """Load in-cluster or kubeconfig settings and return an API client."""
    if is_running_in_cluster():
        config.load_incluster_config()
    else:
        config.load_kube_config()
    return client.ApiClient()
