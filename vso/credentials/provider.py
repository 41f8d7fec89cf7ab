"""
vso.credentials.provider

Abstract base class for Vault credential providers.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from kubernetes.client import ApiClient

from .auth import VaultAuth


class CredentialProvider(ABC):
    """
    Produces the credentials used to log in to Vault for one auth method.

    Calls are synchronous and take no context object: diagnostics go to each
    module's logger, and cancellation is left to the caller.
    """

    @abstractmethod
    def init(
        self,
        client: Optional[ApiClient],
        auth_obj: VaultAuth,
        provider_namespace: str,
    ) -> None:
        """
        Binds the provider to a VaultAuth configuration and namespace.

        Implementations validate everything needed for later get_creds()
        calls to succeed, and raise if they cannot.

        Args:
            client: Kubernetes API client, for providers that read cluster objects
            auth_obj: The VaultAuth configuration to bind
            provider_namespace: Namespace the credentials apply to

        Raises:
            CredentialProviderError: If the configuration is missing or invalid
        """
        pass

    @abstractmethod
    def get_creds(self, client: Optional[ApiClient]) -> Dict[str, Any]:
        """
        Returns the credentials needed to authenticate to Vault.

        Args:
            client: Kubernetes API client, for providers that read cluster objects

        Returns:
            Dict[str, Any]: The complete credential set

        Raises:
            CredentialProviderError: If the credentials cannot be obtained
        """
        pass

    @abstractmethod
    def get_namespace(self) -> str:
        """
        Returns the namespace the credentials apply to.

        Returns:
            str: Provider namespace
        """
        pass

    @abstractmethod
    def get_uid(self) -> str:
        """
        Returns the identifier of this provider instance.

        Returns:
            str: Provider UID
        """
        pass
