"""AWS Secrets Manager credential store.

This module provides the AWSSecretsCredentialStore class. Each service and
scope pair maps to one secret named ``{service}-{scope}-credentials`` whose
SecretString is a JSON object from target URL to serialized credential.
"""

import json
import os
from typing import Any

import boto3
import structlog
from botocore.exceptions import BotoCoreError, ClientError

from tfx_auth_core.config import DEFAULT_SERVICE_NAME
from tfx_auth_core.exceptions import CredentialStoreError

# Get logger for this module
logger = structlog.get_logger(__name__)

DEFAULT_AWS_REGION = "eu-west-2"


class AWSSecretsCredentialStore:
    """Credential store keeping entries in AWS Secrets Manager."""

    def __init__(
        self,
        region: str | None = None,
        endpoint_url: str | None = None,
        service_name: str = DEFAULT_SERVICE_NAME,
        profile_name: str | None = None,
    ) -> None:
        """Initialize the AWS Secrets credential store.

        Args:
            region: AWS region to use. Defaults to AWS_REGION env var or eu-west-2.
            endpoint_url: Optional custom endpoint URL for testing or local development.
            service_name: Service part of the secret name.
            profile_name: AWS profile. Defaults to the AWS_PROFILE env var.
        """
        self.region = region or os.getenv("AWS_REGION", DEFAULT_AWS_REGION)
        self.endpoint_url = endpoint_url
        self.service_name = service_name
        self.profile_name = profile_name or os.getenv("AWS_PROFILE")
        self._client: Any = None

    def secret_name(self, scope: str) -> str:
        """Name of the secret holding the credentials of a scope."""
        return f"{self.service_name}-{scope}-credentials"

    def _get_client(self) -> Any:
        if self._client is None:
            if self.profile_name:
                session = boto3.session.Session(profile_name=self.profile_name)
            else:
                session = boto3.session.Session()
            client_kwargs: dict[str, Any] = {
                "service_name": "secretsmanager",
                "region_name": self.region,
            }
            if self.endpoint_url:
                client_kwargs["endpoint_url"] = self.endpoint_url
            self._client = session.client(**client_kwargs)
        return self._client

    def _read_secret(self, secret_name: str) -> dict[str, str] | None:
        """Load the secret document, or None if the secret does not exist."""
        try:
            response = self._get_client().get_secret_value(SecretId=secret_name)
        except ClientError as e:
            error_code = e.response["Error"]["Code"]
            if error_code == "ResourceNotFoundException":
                return None
            if error_code == "AccessDeniedException":
                raise CredentialStoreError(
                    f"Access denied to secret '{secret_name}'", "aws"
                ) from e
            raise CredentialStoreError(
                f"AWS Secrets Manager error: {e}", "aws"
            ) from e
        except BotoCoreError as e:
            raise CredentialStoreError(
                f"AWS Secrets Manager error: {e}", "aws"
            ) from e

        try:
            document = json.loads(response["SecretString"])
        except (KeyError, json.JSONDecodeError) as e:
            raise CredentialStoreError(
                f"Secret '{secret_name}' is not a JSON string secret", "aws"
            ) from e
        if not isinstance(document, dict):
            raise CredentialStoreError(
                f"Secret '{secret_name}' must contain a JSON object", "aws"
            )
        return document

    def _write_secret(
        self, secret_name: str, document: dict[str, str], *, exists: bool
    ) -> None:
        client = self._get_client()
        secret_string = json.dumps(document, sort_keys=True)
        try:
            if exists:
                client.put_secret_value(SecretId=secret_name, SecretString=secret_string)
            else:
                client.create_secret(Name=secret_name, SecretString=secret_string)
        except (ClientError, BotoCoreError) as e:
            raise CredentialStoreError(
                f"Failed to write secret '{secret_name}': {e}", "aws"
            ) from e

    async def get_credential(self, key: str, scope: str) -> str | None:
        """Get the serialized credential for key from the scope's secret."""
        document = self._read_secret(self.secret_name(scope))
        if document is None:
            return None
        value = document.get(key)
        if value is not None and not isinstance(value, str):
            raise CredentialStoreError(
                f"Credential for '{key}' in secret '{self.secret_name(scope)}' "
                f"is not a string: {type(value)}",
                "aws",
            )
        return value

    async def store_credential(self, key: str, scope: str, credential: str) -> None:
        """Store the serialized credential in the scope's secret."""
        secret_name = self.secret_name(scope)
        document = self._read_secret(secret_name)
        exists = document is not None
        updated = {**(document or {}), key: credential}
        self._write_secret(secret_name, updated, exists=exists)
        logger.info("CREDENTIAL_STORED", key=key, scope=scope, secret=secret_name)

    async def clear_credential(self, key: str, scope: str) -> bool:
        """Remove the credential for key from the scope's secret."""
        secret_name = self.secret_name(scope)
        document = self._read_secret(secret_name)
        if document is None or key not in document:
            return False
        del document[key]
        self._write_secret(secret_name, document, exists=True)
        logger.info("CREDENTIAL_CLEARED", key=key, scope=scope, secret=secret_name)
        return True

    async def close(self) -> None:
        """Drop the cached client."""
        self._client = None
