"""
vso.credentials.auth

VaultAuth configuration model and lookup from the Kubernetes API.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from kubernetes import client

from . import config
from .exceptions import KubernetesResourceError

logger = logging.getLogger(__name__)

VAULT_AUTH_GROUP = "secrets.hashicorp.com"
VAULT_AUTH_VERSION = "v1beta1"
VAULT_AUTH_PLURAL = "vaultauths"


@dataclass
class VaultAuthConfigToken:
    """Token auth method configuration: a pre-issued Vault token read from a file."""

    file_path: str = ""

    def validate(self) -> None:
        """Raise ValueError if the configuration cannot be used."""
        if not isinstance(self.file_path, str):
            raise ValueError(
                f"filePath must be a string, got {type(self.file_path).__name__}"
            )
        if self.file_path == "":
            raise ValueError("empty filePath")

    @classmethod
    def from_dict(cls, data: Any) -> "VaultAuthConfigToken":
        """
        Build the token configuration from the ``spec.token`` section.

        Raises:
            KubernetesResourceError: If the section is not a mapping or filePath is not a string
        """
        if not isinstance(data, Mapping):
            raise KubernetesResourceError(
                f"VaultAuth spec.token must be a mapping, got {type(data).__name__}"
            )
        file_path = data.get("filePath")
        if file_path is None:
            file_path = ""
        if not isinstance(file_path, str):
            raise KubernetesResourceError(
                f"VaultAuth spec.token.filePath must be a string, got {type(file_path).__name__}"
            )
        return cls(file_path=file_path)


@dataclass
class VaultAuthSpec:
    """
    Desired auth state of a VaultAuth resource.

    Only the sub-configuration matching ``method`` is expected to be set.
    Sub-configurations other than ``token`` are kept as the raw mappings
    found on the resource.
    """

    method: str = ""
    mount: str = ""
    namespace: str = ""
    token: Optional[VaultAuthConfigToken] = None
    kubernetes: Optional[Dict[str, Any]] = None
    jwt: Optional[Dict[str, Any]] = None
    app_role: Optional[Dict[str, Any]] = None
    aws: Optional[Dict[str, Any]] = None
    gcp: Optional[Dict[str, Any]] = None


@dataclass
class VaultAuth:
    """A VaultAuth custom resource."""

    name: str = ""
    namespace: str = ""
    uid: str = ""
    spec: VaultAuthSpec = field(default_factory=VaultAuthSpec)

    @classmethod
    def from_dict(cls, obj: Any) -> "VaultAuth":
        """
        Build a VaultAuth from a custom object as returned by the Kubernetes API.

        Args:
            obj: The custom object, with camelCase keys

        Returns:
            VaultAuth instance

        Raises:
            KubernetesResourceError: If the object is not a VaultAuth mapping with a spec
        """
        if not isinstance(obj, Mapping):
            raise KubernetesResourceError(
                f"VaultAuth object must be a mapping, got {type(obj).__name__}"
            )

        metadata = obj.get("metadata") or {}
        if not isinstance(metadata, Mapping):
            raise KubernetesResourceError(
                f"VaultAuth metadata must be a mapping, got {type(metadata).__name__}"
            )
        spec = obj.get("spec")
        if not isinstance(spec, Mapping):
            raise KubernetesResourceError(
                f"VaultAuth {metadata.get('namespace', '')}/{metadata.get('name', '')} "
                "has no spec"
            )

        token = spec.get("token")
        return cls(
            name=metadata.get("name", ""),
            namespace=metadata.get("namespace", ""),
            uid=metadata.get("uid", ""),
            spec=VaultAuthSpec(
                method=spec.get("method", ""),
                mount=spec.get("mount", ""),
                namespace=spec.get("namespace", ""),
                token=VaultAuthConfigToken.from_dict(token) if token is not None else None,
                kubernetes=spec.get("kubernetes"),
                jwt=spec.get("jwt"),
                app_role=spec.get("appRole"),
                aws=spec.get("aws"),
                gcp=spec.get("gcp"),
            ),
        )


def get_vault_auth(
    api_client: Optional[client.ApiClient], name: str, namespace: str
) -> VaultAuth:
    """
    Fetch a VaultAuth resource from the cluster.

    Args:
        api_client: Kubernetes API client; loaded from the environment when None
        name: Name of the VaultAuth resource
        namespace: Namespace of the VaultAuth resource

    Returns:
        VaultAuth instance

    Raises:
        KubernetesResourceError: If the resource cannot be read or parsed
    """
    if api_client is None:
        api_client = config.load_api_client()

    custom_api = client.CustomObjectsApi(api_client)
    try:
        obj = custom_api.get_namespaced_custom_object(
            group=VAULT_AUTH_GROUP,
            version=VAULT_AUTH_VERSION,
            namespace=namespace,
            plural=VAULT_AUTH_PLURAL,
            name=name,
        )
    except client.exceptions.ApiException as e:
        error_msg = f"Could not read VaultAuth {name} in namespace {namespace}: {e}"
        logger.error(error_msg)
        raise KubernetesResourceError(error_msg) from e

    vault_auth = VaultAuth.from_dict(obj)
    logger.info(
        "Loaded VaultAuth %s/%s with method %r", namespace, name, vault_auth.spec.method
    )
    return vault_auth
