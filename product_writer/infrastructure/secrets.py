"""Secrets Manager client used to fill configuration missing from the environment."""

import base64
import json
import time
from typing import Any

import boto3
import structlog
from botocore.exceptions import ClientError

logger = structlog.get_logger()

# Cache TTL for secrets (in seconds)
_SECRET_CACHE_TTL = 300  # 5 minutes


class SecretsManager:
    """
    Client for AWS Secrets Manager with caching.

    Secret values are cached per process so warm invocations do not
    call Secrets Manager again until the TTL expires.
    """

    def __init__(self, region_name: str | None = None, client: Any = None) -> None:
        """
        Initialize Secrets Manager client.

        Args:
            region_name: AWS region. If None, uses default from environment.
            client: Preconfigured boto3 client, mainly for tests
        """
        self._client = client or boto3.client("secretsmanager", region_name=region_name)
        self._cache: dict[str, tuple[Any, float]] = {}

    def get_secret(self, secret_id: str, use_cache: bool = True) -> dict[str, Any]:
        """
        Fetch a secret from Secrets Manager.

        Args:
            secret_id: The ARN or name of the secret
            use_cache: Whether to use cached value if available

        Returns:
            Parsed JSON secret value as dictionary

        Raises:
            SecretNotFoundError: If secret doesn't exist
            SecretAccessDeniedError: If access is denied
        """
        if use_cache and secret_id in self._cache:
            value, cached_at = self._cache[secret_id]
            if time.time() - cached_at < _SECRET_CACHE_TTL:
                logger.debug("Using cached secret", secret_id=secret_id)
                return value

        try:
            response = self._client.get_secret_value(SecretId=secret_id)
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code", "")

            if error_code == "ResourceNotFoundException":
                logger.error("Secret not found", secret_id=secret_id)
                raise SecretNotFoundError(f"Secret not found: {secret_id}") from e

            if error_code in ("AccessDeniedException", "UnauthorizedAccess"):
                logger.error("Access denied to secret", secret_id=secret_id)
                raise SecretAccessDeniedError(f"Access denied: {secret_id}") from e

            logger.error(
                "Failed to fetch secret",
                secret_id=secret_id,
                error_code=error_code,
                error=str(e),
            )
            raise

        if "SecretString" in response:
            secret_value = json.loads(response["SecretString"])
        else:
            secret_value = json.loads(base64.b64decode(response["SecretBinary"]).decode("utf-8"))

        self._cache[secret_id] = (secret_value, time.time())
        logger.info("Secret fetched successfully", secret_id=secret_id)
        return secret_value


class SecretNotFoundError(Exception):
    """Raised when a secret is not found."""

    pass


class SecretAccessDeniedError(Exception):
    """Raised when access to a secret is denied."""

    pass


# Global instance (lazy initialized)
_secrets_manager: SecretsManager | None = None


def get_secrets_manager(region_name: str | None = None) -> SecretsManager:
    """Get or create the global SecretsManager instance."""
    global _secrets_manager
    if _secrets_manager is None:
        _secrets_manager = SecretsManager(region_name)
    return _secrets_manager
