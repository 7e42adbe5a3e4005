"""Utility functions for application configuration management.

The URL shortener is configured exclusively through environment variables,
which the Lambda runtime injects at deployment time. They are read exactly
once per process into an immutable `Settings` object that is then passed
explicitly to the request router. Nothing downstream reads the environment.

Recognized variables:

    TABLE_NAME              – storage namespace (DynamoDB table or Redis key prefix)  [required]
    API_AUTH_TOKEN          – expected bearer credential                              [required]
    STORAGE_BACKEND         – 'dynamodb' (default) or 'redis'
    SHORTCODE_MAX_ATTEMPTS  – conditional insert attempts per shorten request (default 5)
    REDIS_HOST/REDIS_PORT/REDIS_DB/REDIS_USERNAME/REDIS_PASSWORD
                            – Redis connection details (redis backend only)
    AWS_ENDPOINT_URL_DYNAMODB
                            – DynamoDB endpoint override, e.g. LocalStack

Functions:
    app_env() -> str
        Re-exported from `shortlink.utils.runtime`.

    load_settings() -> Settings
        Build the process-wide settings from the environment.

Example:
    Typical usage inside a Lambda handler:

        >>> from shortlink.utils.config import load_settings
        >>> settings = load_settings()
        >>> settings.table_name
        'shortlinks'
"""

import os
import logging
from dataclasses import dataclass, field

from shortlink.constants import ENV, ShortCode, StorageBackend
from shortlink.exceptions import BadConfigurationError
from shortlink.utils.helpers import require_environment
from shortlink.utils.runtime import app_env


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RedisSettings:
    host: str = 'localhost'
    port: int = 6379
    db: int = 0
    username: str | None = None
    password: str | None = field(default=None, repr=False)


@dataclass(frozen=True)
class Settings:
    """Immutable process-wide configuration

    Attributes:
        table_name (str):
            Storage namespace identifier.
        auth_token (str):
            Expected bearer credential. Excluded from repr to keep it out of logs.
        storage_backend (StorageBackend):
            Key-value store used to persist short links.
        max_attempts (int):
            Conditional insert attempts per shorten request.
        redis (RedisSettings):
            Redis connection details, only used by the redis backend.
        dynamodb_endpoint_url (str | None):
            Optional DynamoDB endpoint override.
    """

    table_name: str
    auth_token: str = field(repr=False)
    storage_backend: StorageBackend = StorageBackend.DYNAMODB
    max_attempts: int = ShortCode.MAX_ATTEMPTS
    redis: RedisSettings = field(default_factory=RedisSettings)
    dynamodb_endpoint_url: str | None = None


def _int_from_env(name: str, default: int, minimum: int = 0) -> int:
    raw = os.environ.get(name)
    if raw is None or raw == '':
        return default

    try:
        value = int(raw)
    except ValueError as e:
        raise BadConfigurationError(f"Environment variable '{name}' must be an integer (given value: {raw!r}).") from e

    if value < minimum:
        raise BadConfigurationError(f"Environment variable '{name}' must be >= {minimum} (given value: {value}).")
    return value


@require_environment(ENV.Shortener.TABLE_NAME, ENV.Shortener.API_AUTH_TOKEN)
def load_settings() -> Settings:
    """Load process-wide settings from the environment

    Returns:
        Settings: immutable configuration object

    Raises:
        MissingEnvironmentVariableError:
            If TABLE_NAME or API_AUTH_TOKEN is missing or empty.
        BadConfigurationError:
            If an optional variable holds an invalid value.
    """
    backend = os.environ.get(ENV.Shortener.STORAGE_BACKEND) or StorageBackend.DYNAMODB
    try:
        storage_backend = StorageBackend(backend.lower())
    except ValueError as e:
        choices = ', '.join(f"'{b}'" for b in StorageBackend)
        raise BadConfigurationError(f'Unknown storage backend {backend!r} (expected one of {choices}).') from e

    redis_settings = RedisSettings(
        host=os.environ.get(ENV.Redis.HOST) or 'localhost',
        port=_int_from_env(ENV.Redis.PORT, 6379),
        db=_int_from_env(ENV.Redis.DB, 0),
        username=os.environ.get(ENV.Redis.USERNAME) or None,
        password=os.environ.get(ENV.Redis.PASSWORD) or None,
    )

    settings = Settings(
        table_name=os.environ[ENV.Shortener.TABLE_NAME],
        auth_token=os.environ[ENV.Shortener.API_AUTH_TOKEN],
        storage_backend=storage_backend,
        max_attempts=_int_from_env(ENV.Shortener.SHORTCODE_MAX_ATTEMPTS, ShortCode.MAX_ATTEMPTS, minimum=1),
        redis=redis_settings,
        dynamodb_endpoint_url=os.environ.get(ENV.DynamoDB.ENDPOINT_URL) or None,
    )
    logger.debug(
        'Loaded settings from environment.',
        extra={'tableName': settings.table_name, 'storageBackend': str(settings.storage_backend), 'appEnv': app_env()},
    )
    return settings
