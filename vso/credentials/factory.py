"""
vso.credentials.factory

Factory for creating credential providers.
"""

import logging
from typing import Dict, Optional, Type

from kubernetes.client import ApiClient

from . import config
from .auth import VaultAuth
from .consts import PROVIDER_METHOD_TOKEN, PROVIDER_METHODS
from .exceptions import ProviderNotFoundError
from .provider import CredentialProvider
from .token_provider import TokenCredentialProvider

logger = logging.getLogger(__name__)

PROVIDERS: Dict[str, Type[CredentialProvider]] = {
    PROVIDER_METHOD_TOKEN: TokenCredentialProvider,
}


def get_credential_provider(
    auth_obj: VaultAuth,
    provider_namespace: Optional[str] = None,
    client: Optional[ApiClient] = None,
) -> CredentialProvider:
    """
    Get an initialized credential provider for the VaultAuth's method.

    Args:
        auth_obj: VaultAuth configuration naming the auth method
        provider_namespace: Namespace the credentials apply to;
            defaults to the operator namespace
        client: Kubernetes API client passed through to the provider

    Returns:
        CredentialProvider instance, already bound by init()

    Raises:
        ProviderNotFoundError: If the method is unknown or has no provider
        CredentialProviderError: If the provider fails to initialize
    """
    method = auth_obj.spec.method
    if method not in PROVIDER_METHODS:
        raise ProviderNotFoundError(
            f"Invalid auth method: '{method}'. "
            f"Valid options are: {', '.join(sorted(PROVIDER_METHODS))}"
        )

    provider_class = PROVIDERS.get(method)
    if provider_class is None:
        raise ProviderNotFoundError(f"Unsupported auth method: '{method}'")

    if provider_namespace is None:
        provider_namespace = config.get_operator_namespace()

    provider = provider_class()
    provider.init(client, auth_obj, provider_namespace)
    logger.info("Using %s credential provider for VaultAuth %s", method, auth_obj.name)
    return provider
