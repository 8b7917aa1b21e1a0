from functools import lru_cache

import structlog
from botocore.exceptions import BotoCoreError, ClientError
from pydantic_settings import BaseSettings

from .domain.errors import ConfigurationError
from .infrastructure.secrets import SecretAccessDeniedError, SecretNotFoundError, get_secrets_manager

logger = structlog.get_logger()

# Settings that must be present before any request is processed
REQUIRED_SETTINGS = (
    "default_region",
    "wordpress_products_table_name",
    "wordpress_product_variations_table_name",
)


class Settings(BaseSettings):
    """Product writer settings loaded from environment."""

    # Service
    service_name: str = "product-writer"
    log_level: str = "INFO"

    # AWS
    default_region: str | None = None
    aws_endpoint_url: str | None = None  # For LocalStack
    config_secret_id: str | None = None  # JSON secret with fallback values

    # DynamoDB
    wordpress_products_table_name: str | None = None
    wordpress_product_variations_table_name: str | None = None
    store_connect_timeout: float = 5
    store_read_timeout: float = 10
    store_max_attempts: int = 3

    def missing(self) -> list[str]:
        """Env var names of required settings that have no value."""
        return [name.upper() for name in REQUIRED_SETTINGS if not getattr(self, name)]

    class Config:
        env_file = ".env"
        case_sensitive = False


def _hydrate_from_secret(settings: Settings) -> Settings:
    """Fill required settings missing from the environment from the config secret."""
    secret_id = settings.config_secret_id
    try:
        secret = get_secrets_manager(settings.default_region).get_secret(secret_id)
    except (SecretNotFoundError, SecretAccessDeniedError, ClientError, BotoCoreError, ValueError) as e:
        raise ConfigurationError.from_secret(secret_id, settings.missing(), str(e)) from e

    if not isinstance(secret, dict):
        raise ConfigurationError.from_secret(
            secret_id, settings.missing(), "The configuration secret must be a JSON object"
        )

    updates = {}
    for name in REQUIRED_SETTINGS:
        if getattr(settings, name):
            continue
        value = secret.get(name.upper()) or secret.get(name)
        if value:
            updates[name] = value

    if updates:
        logger.info("Settings hydrated from secret", keys=sorted(k.upper() for k in updates))
    return settings.model_copy(update=updates)


def load_settings(settings: Settings | None = None) -> Settings:
    """
    Load settings and fail fast when required values are missing.

    Raises:
        ConfigurationError: Naming every missing required setting, or when the
            config secret cannot be read or is not a JSON object
    """
    settings = settings or Settings()

    try:
        if settings.missing() and settings.config_secret_id:
            settings = _hydrate_from_secret(settings)

        missing = settings.missing()
        if missing:
            raise ConfigurationError(missing)
    except ConfigurationError as e:
        logger.error(
            e.description,
            error_name=e.detail.name,
            error_message=e.detail.message,
        )
        raise
    return settings


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Settings loaded once per process."""
    return load_settings()
