"""Data Access Object (DAO) implementation for managing short links in Redis

This module provides a Redis-based implementation of ShortLinkBaseDAO.

Responsibilities:
    - Insert short links only if their code is still free (SET NX);
    - Retrieve short links by code;
    - Translate Redis failures (connectivity or refused commands) into DAO exceptions.

Classes:
    ShortLinkRedisDAO:
        DAO for storing and retrieving ShortLinkModel in a Redis datastore.

Example:
    >>> from shortlink.models import ShortLinkModel
    >>> from shortlink.dao.redis import ShortLinkRedisDAO

    >>> dao = ShortLinkRedisDAO(prefix='shortlinks')
    >>> dao.insert(ShortLinkModel(code='abc123', long_url='https://example.com/page'))
    <ShortLinkRedisDAO>

    >>> dao.get('abc123').long_url
    'https://example.com/page'
"""

from beartype import beartype

from shortlink.models import ShortLinkModel
from shortlink.dao.base import ShortLinkBaseDAO
from shortlink.dao.redis.mixins import RedisClientMixin
from shortlink.dao.redis.helpers import handle_redis_connection_error
from shortlink.dao.exceptions import ShortLinkAlreadyExistsError, ShortLinkNotFoundError


class ShortLinkRedisDAO(RedisClientMixin, ShortLinkBaseDAO):
    """Redis-based Data Access Object (DAO) for managing short link mappings

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.

    Methods:
        insert(short_link: ShortLinkModel, **kwargs) -> ShortLinkRedisDAO:
            Store a short link mapping unless the code is already taken.
            Raises ShortLinkAlreadyExistsError when a link with the same code exists.
            Raises DataStoreError when Redis is unreachable or refuses the command.

        get(code: str, **kwargs) -> ShortLinkModel:
            Retrieve a short link mapping by code.
            Raises ShortLinkNotFoundError when the code doesn't exist.
            Raises DataStoreError when Redis is unreachable or refuses the command.
    """

    @handle_redis_connection_error
    @beartype
    def insert(self, short_link: ShortLinkModel, **kwargs) -> 'ShortLinkRedisDAO':
        """Insert a short link mapping into Redis

        The existence check and the write are a single SET NX command, so two
        concurrent inserts of the same code can never both succeed.

        Args:
            short_link (ShortLinkModel):
                ShortLinkModel instance representing the short link mapping.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShortLinkRedisDAO: self (for method chaining)

        Raises:
            ShortLinkAlreadyExistsError:
                If a short link with the same code already exists.
            DataStoreError:
                If Redis is unreachable or refuses the SET.
        """
        link_url_key = self.keys.link_url_key(short_link.code)
        if not self.redis.set(link_url_key, short_link.long_url, nx=True):
            raise ShortLinkAlreadyExistsError(f"Short link with code '{short_link.code}' already exists.")
        return self

    @handle_redis_connection_error
    @beartype
    def get(self, code: str, **kwargs) -> ShortLinkModel:
        """Retrieve a stored short link mapping by code

        Args:
            code (str):
                The code identifier of the short link.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShortLinkModel:
                The retrieved ShortLinkModel instance if found.

        Raises:
            ShortLinkNotFoundError:
                If the short link does not exist in Redis.
            DataStoreError:
                If Redis is unreachable or refuses the GET.
        """
        long_url = self.redis.get(self.keys.link_url_key(code))
        if long_url is None:
            raise ShortLinkNotFoundError(f"Short link with code '{code}' not found.")

        if isinstance(long_url, bytes):
            long_url = long_url.decode('utf-8')
        return ShortLinkModel(code=code, long_url=long_url)
