"""
vso.credentials

Vault credential provider package for the Vault Secrets Operator.

This package provides a pluggable interface for the credentials used to
authenticate to Vault on behalf of VaultAuth resources, with a provider
for pre-issued tokens read from a file.
"""

from .provider import CredentialProvider
from .token_provider import TokenCredentialProvider
from .auth import VaultAuth, VaultAuthSpec, VaultAuthConfigToken, get_vault_auth
from .factory import get_credential_provider
from .exceptions import (
    CredentialProviderError,
    ConfigurationMissingError,
    ConfigurationInvalidError,
    EmptyFilePathError,
    TokenFileUnreadableError,
    EmptyTokenError,
    ProviderNotFoundError,
    KubernetesResourceError,
)

__all__ = [
    # Abstract classes
    "CredentialProvider",
    # Token implementation
    "TokenCredentialProvider",
    # Configuration model
    "VaultAuth",
    "VaultAuthSpec",
    "VaultAuthConfigToken",
    "get_vault_auth",
    # Factory function
    "get_credential_provider",
    # Exceptions
    "CredentialProviderError",
    "ConfigurationMissingError",
    "ConfigurationInvalidError",
    "EmptyFilePathError",
    "TokenFileUnreadableError",
    "EmptyTokenError",
    "ProviderNotFoundError",
    "KubernetesResourceError",
]

__version__ = "0.1.0"
