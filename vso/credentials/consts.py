"""
vso.credentials.consts

Credential-map keys and provider method identifiers shared by the
credential providers, the provider factory and the Vault request builder.
"""

# Keys of the credential set returned by CredentialProvider.get_creds()
PROVIDER_SECRET_KEY_APP_ROLE = "id"
PROVIDER_SECRET_KEY_JWT = "jwt"
PROVIDER_SECRET_KEY_TOKEN = "token"

# Values of VaultAuth.spec.method
PROVIDER_METHOD_KUBERNETES = "kubernetes"
PROVIDER_METHOD_JWT = "jwt"
PROVIDER_METHOD_APP_ROLE = "appRole"
PROVIDER_METHOD_AWS = "aws"
PROVIDER_METHOD_GCP = "gcp"
PROVIDER_METHOD_TOKEN = "token"

PROVIDER_METHODS = frozenset(
    {
        PROVIDER_METHOD_KUBERNETES,
        PROVIDER_METHOD_JWT,
        PROVIDER_METHOD_APP_ROLE,
        PROVIDER_METHOD_AWS,
        PROVIDER_METHOD_GCP,
        PROVIDER_METHOD_TOKEN,
    }
)

# The token provider is not backed by a Kubernetes object, so it has no UID of its own.
TOKEN_PROVIDER_UID = "token-file-provider"
