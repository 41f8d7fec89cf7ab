"""
vso.credentials.token_provider

Token auth method: a pre-issued Vault token read from a local file.
"""

import logging
from typing import Any, Dict, Optional

from kubernetes.client import ApiClient

from .auth import VaultAuth
from .consts import PROVIDER_SECRET_KEY_TOKEN, TOKEN_PROVIDER_UID
from .exceptions import (
    ConfigurationInvalidError,
    ConfigurationMissingError,
    CredentialProviderError,
    EmptyFilePathError,
    EmptyTokenError,
    TokenFileUnreadableError,
)
from .provider import CredentialProvider

logger = logging.getLogger(__name__)


class TokenCredentialProvider(CredentialProvider):
    """
    Credential provider for the token auth method.

    The token file is read again on every get_creds() call so that a token
    rotated on disk is picked up without re-binding the provider.
    """

    def __init__(
        self,
        auth_obj: Optional[VaultAuth] = None,
        provider_namespace: str = "",
        uid: str = "",
    ):
        """
        Initialize token credential provider.

        Args:
            auth_obj: VaultAuth configuration, normally bound later by init()
            provider_namespace: Namespace the credentials apply to
            uid: Provider identifier
        """
        self.auth_obj = auth_obj
        self.provider_namespace = provider_namespace
        self.uid = uid

    def get_namespace(self) -> str:
        return self.provider_namespace

    def get_uid(self) -> str:
        return self.uid

    def init(
        self,
        client: Optional[ApiClient],
        auth_obj: VaultAuth,
        provider_namespace: str,
    ) -> None:
        """
        Bind the provider and check that the token file is readable now.

        Raises:
            ConfigurationMissingError: If the VaultAuth has no token configuration
            ConfigurationInvalidError: If the token configuration fails validation
            EmptyFilePathError: If the token file path is empty
            TokenFileUnreadableError: If the token file cannot be read
            EmptyTokenError: If the token file has no usable content
        """
        if auth_obj.spec.token is None:
            raise ConfigurationMissingError("token auth method not configured")
        try:
            auth_obj.spec.token.validate()
        except ValueError as e:
            raise ConfigurationInvalidError(
                f"invalid token auth configuration: {e}"
            ) from e

        self.auth_obj = auth_obj
        self.provider_namespace = provider_namespace

        # The value is discarded, get_creds() reads the file again.
        self.read_token_file()

        self.uid = TOKEN_PROVIDER_UID
        logger.info(
            "Token credential provider bound to %s in namespace %s",
            auth_obj.spec.token.file_path,
            provider_namespace,
        )

    def read_token_file(self) -> str:
        """Read the token file and return its contents stripped of surrounding whitespace."""
        if self.auth_obj is None or self.auth_obj.spec.token is None:
            raise ConfigurationMissingError("token auth method not configured")

        file_path = self.auth_obj.spec.token.file_path
        if not isinstance(file_path, str):
            raise ConfigurationInvalidError(
                f"invalid token auth configuration: filePath must be a string, "
                f"got {type(file_path).__name__}"
            )
        if file_path == "":
            raise EmptyFilePathError("file path is empty")

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise TokenFileUnreadableError(
                f"failed to read token file {file_path}: {e}", file_path
            ) from e

        token = data.strip()
        if not token:
            raise EmptyTokenError(
                f"token file {file_path} is empty or contains only whitespace",
                file_path,
            )

        logger.debug("Read token from %s", file_path)
        return token

    def get_creds(self, client: Optional[ApiClient]) -> Dict[str, Any]:
        """Return the token credential set, read fresh from the token file."""
        try:
            token = self.read_token_file()
        except CredentialProviderError:
            logger.exception("Failed to read token from file")
            raise

        return {PROVIDER_SECRET_KEY_TOKEN: token}
