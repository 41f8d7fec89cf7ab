"""
vso.credentials.exceptions

Custom exceptions for the credentials package.
"""


class CredentialProviderError(Exception):
    """Base exception for credential provider errors."""

    pass


class ConfigurationMissingError(CredentialProviderError):
    """Raised when no sub-configuration is set for the selected auth method."""

    pass


class ConfigurationInvalidError(CredentialProviderError):
    """Raised when the auth method sub-configuration fails validation."""

    pass


class EmptyFilePathError(CredentialProviderError):
    """Raised when the token file path is empty at read time."""

    pass


class TokenFileUnreadableError(CredentialProviderError):
    """Raised when the token file cannot be read."""

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path


class EmptyTokenError(CredentialProviderError):
    """Raised when the token file is empty or contains only whitespace."""

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path


class ProviderNotFoundError(CredentialProviderError):
    """Raised when no credential provider exists for an auth method."""

    pass


class KubernetesResourceError(CredentialProviderError):
    """Raised when a VaultAuth resource cannot be fetched or parsed."""

    pass
