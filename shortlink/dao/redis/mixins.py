"""Redis client and key schema shared by Redis-backed short link DAOs.

With STORAGE_BACKEND=redis, `create_dao()` builds the client from the
REDIS_* settings and uses TABLE_NAME as the key prefix. Tests hand in a
mocked client instead.

Example:
    >>> dao = ShortLinkRedisDAO(redis_host='redis.internal', prefix='shortlinks-prod')
    >>> dao.keys.link_url_key('q7fEm0')
    'shortlinks-prod:links:q7fEm0:url'
"""

from typing import Optional

import redis

from shortlink.dao.redis.redis_key_schema import RedisKeySchema


class RedisClientMixin:
    """Gives a DAO `self.redis` (redis.Redis) and `self.keys` (RedisKeySchema).

    redis-py connects on the first command, so constructing a DAO during
    Lambda cold start does no network I/O. An unreachable server shows up
    later, as DataStoreError from `insert()`/`get()`.
    """

    def __init__(
        self,
        redis_host: Optional[str] = 'localhost',
        redis_port: Optional[int] = 6379,
        redis_db: Optional[int] = 0,
        redis_decode_responses: Optional[bool] = True,
        redis_username: Optional[str] = None,
        redis_password: Optional[str] = None,
        redis_client: Optional[redis.Redis] = None,
        prefix: Optional[str] = None,
    ):
        """Use `redis_client` when given, otherwise connect with the redis_* arguments

        Args:
            redis_host, redis_port, redis_db:
                Server address. Defaults match a local `redis-server`.
            redis_decode_responses (Optional[bool]):
                Return long URLs as str rather than bytes. Defaults to True.
            redis_username, redis_password:
                ACL credentials, if the server requires them.
            redis_client (Optional[redis.Redis]):
                Ready-made client. The redis_* arguments are ignored when given.
            prefix (Optional[str]):
                Key namespace, normally the TABLE_NAME setting.
        """
        if redis_client is None:
            redis_client = redis.Redis(
                host=redis_host,
                port=int(redis_port),
                db=int(redis_db),
                decode_responses=redis_decode_responses,
                username=redis_username,
                password=redis_password,
            )

        self.redis = redis_client
        self.keys = RedisKeySchema(prefix=prefix)
