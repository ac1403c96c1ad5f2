"""Tests for credential store implementations.

This module contains unit tests for the key-value backed, environment and
AWS Secrets Manager credential stores and the store factory.
"""

import json
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from botocore.exceptions import ClientError

from tfx_auth_core.exceptions import CredentialStoreError, UnknownStoreTypeError
from tfx_auth_core.kv_store import (
    FileKeyValueStore,
    InMemoryKeyValueStore,
    RedisKeyValueStore,
)
from tfx_auth_core.store import (
    AWSSecretsCredentialStore,
    EnvironmentCredentialStore,
    KeyValueCredentialStore,
    create_credential_store,
)

URL = "https://dev.azure.com/contoso"


def _client_error(code: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}}, "GetSecretValue")


class TestKeyValueCredentialStore:
    """Test the key-value backed credential store."""

    @pytest.mark.asyncio
    async def test_store_get_clear(self) -> None:
        """Test the full lifecycle of an entry."""
        store = KeyValueCredentialStore(InMemoryKeyValueStore())

        assert await store.get_credential(URL, "allusers") is None

        await store.store_credential(URL, "allusers", "token:abc123")
        assert await store.get_credential(URL, "allusers") == "token:abc123"
        assert await store.get_credential(URL, "someone") is None

        assert await store.clear_credential(URL, "allusers") is True
        assert await store.clear_credential(URL, "allusers") is False
        assert await store.get_credential(URL, "allusers") is None

    @pytest.mark.asyncio
    async def test_key_layout(self) -> None:
        """Test that entries live under service name, scope and URL."""
        kv_store = InMemoryKeyValueStore()
        store = KeyValueCredentialStore(kv_store, service_name="tfx")

        await store.store_credential(URL, "allusers", "token:abc123")

        assert await kv_store.get(f"allusers:{URL}", prefix="tfx") == "token:abc123"

    @pytest.mark.asyncio
    async def test_backend_failure(self) -> None:
        """Test that backend errors surface as credential store errors."""
        kv_store = AsyncMock()
        kv_store.get.side_effect = ConnectionError("redis down")
        kv_store.put.side_effect = ConnectionError("redis down")
        store = KeyValueCredentialStore(kv_store)

        with pytest.raises(CredentialStoreError, match="redis down"):
            await store.get_credential(URL, "allusers")
        with pytest.raises(CredentialStoreError):
            await store.store_credential(URL, "allusers", "token:abc123")

    @pytest.mark.asyncio
    async def test_close_closes_backend(self) -> None:
        """Test that closing is passed through."""
        kv_store = AsyncMock()
        await KeyValueCredentialStore(kv_store).close()
        kv_store.close.assert_awaited_once()


class TestEnvironmentCredentialStore:
    """Test the environment variable credential store."""

    def test_variable_name(self) -> None:
        """Test how scope and URL become a variable name."""
        store = EnvironmentCredentialStore()

        assert (
            store.variable_name(URL, "allusers")
            == "TFX_CREDENTIAL_ALLUSERS_HTTPS___DEV_AZURE_COM_CONTOSO"
        )

    @pytest.mark.asyncio
    async def test_get_credential(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test reading a credential from the environment."""
        store = EnvironmentCredentialStore(prefix="CI_")
        monkeypatch.setenv(store.variable_name(URL, "allusers"), "token:abc123")

        assert await store.get_credential(URL, "allusers") == "token:abc123"

    @pytest.mark.asyncio
    async def test_missing_or_empty_variable(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that unset and empty variables both mean absent."""
        store = EnvironmentCredentialStore(prefix="CI_")
        with patch("tfx_auth_core.store.environment.logger") as mock_logger:
            monkeypatch.delenv(store.variable_name(URL, "allusers"), raising=False)
            assert await store.get_credential(URL, "allusers") is None

            monkeypatch.setenv(store.variable_name(URL, "allusers"), "")
            assert await store.get_credential(URL, "allusers") is None

        # The variable to set is named in the log
        mock_logger.debug.assert_called_with(
            "CREDENTIAL_VARIABLE_NOT_SET",
            key=URL,
            variable="CI_ALLUSERS_HTTPS___DEV_AZURE_COM_CONTOSO",
        )
        assert mock_logger.debug.call_count == 2

    @pytest.mark.asyncio
    async def test_read_only(self) -> None:
        """Test that writes are refused with the variable to set instead."""
        store = EnvironmentCredentialStore()

        with pytest.raises(CredentialStoreError, match="TFX_CREDENTIAL_ALLUSERS"):
            await store.store_credential(URL, "allusers", "token:abc123")
        with pytest.raises(CredentialStoreError):
            await store.clear_credential(URL, "allusers")


class TestAWSSecretsCredentialStore:
    """Test the AWS Secrets Manager credential store with a mocked client."""

    @pytest.fixture
    def client(self) -> MagicMock:
        """Mocked Secrets Manager client."""
        return MagicMock()

    @pytest.fixture
    def store(self, client: MagicMock) -> Any:
        """Store whose boto3 session returns the mocked client."""
        with patch("tfx_auth_core.store.aws.boto3.session.Session") as session_cls:
            session_cls.return_value.client.return_value = client
            yield AWSSecretsCredentialStore(region="eu-west-1")

    def _secret(self, document: dict[str, Any]) -> dict[str, str]:
        return {"SecretString": json.dumps(document)}

    @pytest.mark.asyncio
    async def test_get_credential(
        self, store: AWSSecretsCredentialStore, client: MagicMock
    ) -> None:
        """Test reading one URL from the scope's secret."""
        client.get_secret_value.return_value = self._secret({URL: "token:abc123"})

        assert await store.get_credential(URL, "allusers") == "token:abc123"
        assert await store.get_credential("https://other", "allusers") is None
        client.get_secret_value.assert_called_with(
            SecretId="tfx-allusers-credentials"
        )

    @pytest.mark.asyncio
    async def test_missing_secret_is_absent(
        self, store: AWSSecretsCredentialStore, client: MagicMock
    ) -> None:
        """Test that a secret that does not exist means nothing is cached."""
        client.get_secret_value.side_effect = _client_error("ResourceNotFoundException")

        assert await store.get_credential(URL, "allusers") is None

    @pytest.mark.asyncio
    async def test_access_denied(
        self, store: AWSSecretsCredentialStore, client: MagicMock
    ) -> None:
        """Test that permission errors are store errors."""
        client.get_secret_value.side_effect = _client_error("AccessDeniedException")

        with pytest.raises(CredentialStoreError, match="Access denied"):
            await store.get_credential(URL, "allusers")

    @pytest.mark.asyncio
    async def test_invalid_secret(
        self, store: AWSSecretsCredentialStore, client: MagicMock
    ) -> None:
        """Test that a non-JSON secret is a store error."""
        client.get_secret_value.return_value = {"SecretString": "plain text"}

        with pytest.raises(CredentialStoreError, match="not a JSON"):
            await store.get_credential(URL, "allusers")

    @pytest.mark.asyncio
    async def test_store_creates_secret(
        self, store: AWSSecretsCredentialStore, client: MagicMock
    ) -> None:
        """Test that the first write creates the secret."""
        client.get_secret_value.side_effect = _client_error("ResourceNotFoundException")

        await store.store_credential(URL, "allusers", "token:abc123")

        client.create_secret.assert_called_once_with(
            Name="tfx-allusers-credentials",
            SecretString=json.dumps({URL: "token:abc123"}),
        )

    @pytest.mark.asyncio
    async def test_store_merges_existing(
        self, store: AWSSecretsCredentialStore, client: MagicMock
    ) -> None:
        """Test that writes keep the other URLs in the secret."""
        client.get_secret_value.return_value = self._secret({"https://a": "token:x"})

        await store.store_credential(URL, "allusers", "basic:alice:secret")

        (call,) = client.put_secret_value.call_args_list
        assert json.loads(call.kwargs["SecretString"]) == {
            "https://a": "token:x",
            URL: "basic:alice:secret",
        }

    @pytest.mark.asyncio
    async def test_clear_credential(
        self, store: AWSSecretsCredentialStore, client: MagicMock
    ) -> None:
        """Test removing one URL from the secret."""
        client.get_secret_value.return_value = self._secret(
            {URL: "token:abc123", "https://a": "token:x"}
        )

        assert await store.clear_credential(URL, "allusers") is True
        assert await store.clear_credential("https://missing", "allusers") is False

        (call,) = client.put_secret_value.call_args_list
        assert json.loads(call.kwargs["SecretString"]) == {"https://a": "token:x"}


class TestCreateCredentialStore:
    """Test the credential store factory."""

    def test_key_value_types(self, tmp_path: Path) -> None:
        """Test that key-value types wrap the matching backend."""
        memory = create_credential_store("memory")
        file_store = create_credential_store("file", file_path=tmp_path / "c.json")
        redis_store = create_credential_store("redis", redis_host="redis.local")

        assert isinstance(memory, KeyValueCredentialStore)
        assert isinstance(memory._kv_store, InMemoryKeyValueStore)
        assert isinstance(file_store._kv_store, FileKeyValueStore)  # type: ignore[attr-defined]
        assert isinstance(redis_store._kv_store, RedisKeyValueStore)  # type: ignore[attr-defined]

    def test_other_types(self) -> None:
        """Test environment and AWS stores."""
        env_store = create_credential_store("environment", env_prefix="CI_")
        aws_store = create_credential_store(
            "aws", aws_region="us-east-1", service_name="build"
        )

        assert isinstance(env_store, EnvironmentCredentialStore)
        assert env_store.prefix == "CI_"
        assert isinstance(aws_store, AWSSecretsCredentialStore)
        assert aws_store.region == "us-east-1"
        assert aws_store.secret_name("allusers") == "build-allusers-credentials"

    def test_unknown_type(self) -> None:
        """Test that unknown store types are rejected."""
        with pytest.raises(UnknownStoreTypeError):
            create_credential_store("keychain")
