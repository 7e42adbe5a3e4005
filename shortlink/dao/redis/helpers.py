import functools
import redis
from typing import TypeVar, Any
from collections.abc import Callable

from shortlink.dao.exceptions import DataStoreError


__all__ = []

F = TypeVar('F', bound=Callable[..., Any])


def _redis_address(client: redis.Redis) -> str:
    info = client.connection_pool.connection_kwargs
    return f'{info.get("host")}:{info.get("port")}/{info.get("db")}'


def handle_redis_connection_error[F](method: F) -> F:
    """Translate every redis-py failure raised by a short link DAO method into DataStoreError

    Unreachable servers and timeouts read as "can't connect". Commands the
    server refuses (ACL denials, read-only replicas, OOM, WRONGTYPE, ...) are
    `ResponseError`s and read as "rejected". Either way the operations layer
    only ever sees DataStoreError.

    Example:
        >>> @handle_redis_connection_error
        ... def get(self, code):
        ...     return self.redis.get(self.keys.link_url_key(code))
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except (redis.exceptions.ConnectionError, redis.exceptions.TimeoutError) as e:
            raise DataStoreError(f"Can't connect to Redis at {_redis_address(self.redis)}.") from e
        except redis.exceptions.RedisError as e:
            raise DataStoreError(f'Redis at {_redis_address(self.redis)} rejected the command ({e.__class__.__name__}).') from e

    return wrapper
