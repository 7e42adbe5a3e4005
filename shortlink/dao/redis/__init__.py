from shortlink.dao.redis.redis_key_schema import RedisKeySchema
from shortlink.dao.redis.mixins import RedisClientMixin
from shortlink.dao.redis.short_link_redis_dao import ShortLinkRedisDAO


__all__ = [
    'RedisKeySchema',
    'RedisClientMixin',
    'ShortLinkRedisDAO',
]
