from linkshortener.dao.redis.redis_key_schema import RedisKeySchema
from linkshortener.dao.redis.mixins import RedisClientMixin
from linkshortener.dao.redis.link_table_redis_dao import LinkTableRedisDAO


__all__ = [
    'RedisKeySchema',
    'RedisClientMixin',
    'LinkTableRedisDAO',
]
