"""
VaultAuth model and lookup unit tests.

Usage:
    pytest vso/tests/unit/test_auth.py -v
"""

from unittest import mock

import pytest
from kubernetes.client.exceptions import ApiException

from vso.credentials import KubernetesResourceError, VaultAuth, get_vault_auth
from vso.credentials.auth import VaultAuthConfigToken


def vault_auth_object(spec):
    return {
        "apiVersion": "secrets.hashicorp.com/v1beta1",
        "kind": "VaultAuth",
        "metadata": {"name": "default", "namespace": "team1", "uid": "1234-abcd"},
        "spec": spec,
    }


class TestVaultAuthConfigToken:
    def test_validate_accepts_path(self):
        VaultAuthConfigToken(file_path="/var/run/vault/token").validate()

    def test_validate_rejects_empty_path(self):
        with pytest.raises(ValueError, match="empty filePath"):
            VaultAuthConfigToken().validate()

    def test_validate_rejects_non_string_path(self):
        with pytest.raises(ValueError, match="filePath must be a string"):
            VaultAuthConfigToken(file_path=1).validate()


class TestVaultAuthFromDict:
    def test_token_method(self):
        vault_auth = VaultAuth.from_dict(
            vault_auth_object(
                {
                    "method": "token",
                    "mount": "token",
                    "namespace": "vault-ns",
                    "token": {"filePath": "/var/run/vault/token"},
                }
            )
        )

        assert vault_auth.name == "default"
        assert vault_auth.namespace == "team1"
        assert vault_auth.uid == "1234-abcd"
        assert vault_auth.spec.method == "token"
        assert vault_auth.spec.mount == "token"
        assert vault_auth.spec.namespace == "vault-ns"
        assert vault_auth.spec.token == VaultAuthConfigToken(
            file_path="/var/run/vault/token"
        )

    def test_token_section_without_file_path(self):
        vault_auth = VaultAuth.from_dict(
            vault_auth_object({"method": "token", "token": {}})
        )

        assert vault_auth.spec.token == VaultAuthConfigToken(file_path="")

    def test_other_method_kept_as_mapping(self):
        app_role = {"roleId": "role", "secretRef": "approle-secret"}

        vault_auth = VaultAuth.from_dict(
            vault_auth_object({"method": "appRole", "appRole": app_role})
        )

        assert vault_auth.spec.method == "appRole"
        assert vault_auth.spec.app_role == app_role
        assert vault_auth.spec.token is None

    def test_missing_spec(self):
        obj = vault_auth_object({})
        del obj["spec"]

        with pytest.raises(KubernetesResourceError, match="team1/default has no spec"):
            VaultAuth.from_dict(obj)

    @pytest.mark.parametrize("token", ["/var/run/vault/token", ["/path"], 42])
    def test_token_section_not_a_mapping(self, token):
        with pytest.raises(KubernetesResourceError, match="spec.token must be a mapping"):
            VaultAuth.from_dict(vault_auth_object({"method": "token", "token": token}))

    @pytest.mark.parametrize("file_path", [1, 3.5, ["/path"]])
    def test_file_path_not_a_string(self, file_path):
        with pytest.raises(
            KubernetesResourceError, match="spec.token.filePath must be a string"
        ):
            VaultAuth.from_dict(
                vault_auth_object({"method": "token", "token": {"filePath": file_path}})
            )

    def test_metadata_not_a_mapping(self):
        obj = vault_auth_object({"method": "token"})
        obj["metadata"] = "default"

        with pytest.raises(KubernetesResourceError, match="metadata must be a mapping"):
            VaultAuth.from_dict(obj)

    def test_not_a_mapping(self):
        with pytest.raises(KubernetesResourceError, match="must be a mapping"):
            VaultAuth.from_dict(["not", "a", "mapping"])


class TestGetVaultAuth:
    def test_reads_custom_object(self):
        api_client = mock.Mock()
        obj = vault_auth_object(
            {"method": "token", "token": {"filePath": "/var/run/vault/token"}}
        )

        with mock.patch(
            "vso.credentials.auth.client.CustomObjectsApi"
        ) as custom_objects_api:
            custom_objects_api.return_value.get_namespaced_custom_object.return_value = obj
            vault_auth = get_vault_auth(api_client, "default", "team1")

        custom_objects_api.assert_called_once_with(api_client)
        custom_objects_api.return_value.get_namespaced_custom_object.assert_called_once_with(
            group="secrets.hashicorp.com",
            version="v1beta1",
            namespace="team1",
            plural="vaultauths",
            name="default",
        )
        assert vault_auth.spec.token.file_path == "/var/run/vault/token"

    def test_api_error(self):
        with mock.patch(
            "vso.credentials.auth.client.CustomObjectsApi"
        ) as custom_objects_api:
            custom_objects_api.return_value.get_namespaced_custom_object.side_effect = (
                ApiException(status=404, reason="Not Found")
            )
            with pytest.raises(KubernetesResourceError) as exc_info:
                get_vault_auth(mock.Mock(), "missing", "team1")

        assert "Could not read VaultAuth missing in namespace team1" in str(
            exc_info.value
        )
        assert isinstance(exc_info.value.__cause__, ApiException)

    def test_loads_api_client_when_none(self):
        obj = vault_auth_object({"method": "token", "token": {"filePath": "/t"}})

        with mock.patch(
            "vso.credentials.auth.config.load_api_client"
        ) as load_api_client, mock.patch(
            "vso.credentials.auth.client.CustomObjectsApi"
        ) as custom_objects_api:
            custom_objects_api.return_value.get_namespaced_custom_object.return_value = obj
            get_vault_auth(None, "default", "team1")

        custom_objects_api.assert_called_once_with(load_api_client.return_value)
