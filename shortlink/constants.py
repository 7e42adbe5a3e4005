import string
from enum import StrEnum


class ShortCode:
    """Short code generation parameters."""

    # 26 lowercase + 26 uppercase + 10 digits
    ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits
    LENGTH = 6
    MAX_ATTEMPTS = 5  # Conditional insert attempts before giving up on collisions


class Auth:
    """Bearer authentication parameters."""

    SCHEME = 'Bearer'
    REALM = 'URL Shortener'
    CHALLENGE = f'{SCHEME} realm="{REALM}"'


class StorageBackend(StrEnum):
    DYNAMODB = 'dynamodb'
    REDIS = 'redis'


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        AWS_SAM_LOCAL = 'AWS_SAM_LOCAL'
        LOG_LEVEL = 'LOG_LEVEL'

    class Shortener(StrEnum):
        TABLE_NAME = 'TABLE_NAME'
        API_AUTH_TOKEN = 'API_AUTH_TOKEN'  # noqa: S105
        STORAGE_BACKEND = 'STORAGE_BACKEND'
        SHORTCODE_MAX_ATTEMPTS = 'SHORTCODE_MAX_ATTEMPTS'

    class Redis(StrEnum):
        HOST = 'REDIS_HOST'
        PORT = 'REDIS_PORT'
        DB = 'REDIS_DB'
        USERNAME = 'REDIS_USERNAME'
        PASSWORD = 'REDIS_PASSWORD'  # noqa: S105

    class DynamoDB(StrEnum):
        ENDPOINT_URL = 'AWS_ENDPOINT_URL_DYNAMODB'  # usually http://localstack:4566


# Error codes
UNKNOWN_INTERNAL_SERVER_ERROR = 'UNKNOWN_INTERNAL_SERVER_ERROR'
