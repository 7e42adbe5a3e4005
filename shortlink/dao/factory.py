"""Construct the short link DAO selected by the application settings.

Functions:
    create_dao(settings: Settings) -> ShortLinkBaseDAO
        Build a DynamoDB or Redis backed DAO namespaced by `settings.table_name`.
"""

import logging

from shortlink.constants import StorageBackend
from shortlink.dao.base import ShortLinkBaseDAO
from shortlink.dao.dynamodb import ShortLinkDynamoDBDAO
from shortlink.dao.redis import ShortLinkRedisDAO
from shortlink.exceptions import BadConfigurationError
from shortlink.utils.config import Settings


logger = logging.getLogger(__name__)


def create_dao(settings: Settings) -> ShortLinkBaseDAO:
    if settings.storage_backend == StorageBackend.DYNAMODB:
        logger.debug('Using DynamoDB as the backend database for short links.', extra={'tableName': settings.table_name})
        return ShortLinkDynamoDBDAO(
            table_name=settings.table_name,
            dynamodb_endpoint_url=settings.dynamodb_endpoint_url,
        )

    if settings.storage_backend == StorageBackend.REDIS:
        logger.debug('Using Redis as the backend database for short links.', extra={'prefix': settings.table_name})
        return ShortLinkRedisDAO(
            redis_host=settings.redis.host,
            redis_port=settings.redis.port,
            redis_db=settings.redis.db,
            redis_username=settings.redis.username,
            redis_password=settings.redis.password,
            prefix=settings.table_name,
        )

    raise BadConfigurationError(f'Unsupported storage backend {settings.storage_backend!r}.')
