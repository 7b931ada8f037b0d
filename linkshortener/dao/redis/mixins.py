"""Redis client setup shared by Redis-backed DAOs

The client is either injected or built from the `backends.redis` section of
the configuration: every key of that section is handed to `redis.Redis`
unchanged, so connection options such as `username`, `password` or
`socket_timeout` need no code changes.

Example:
    >>> dao = LinkTableRedisDAO(prefix='linkshortener:local', host='localhost', port=6379, db=0)
    >>> dao._redis_location()
    'localhost:6379/0'
"""

import redis

from linkshortener.dao.redis.redis_key_schema import RedisKeySchema
from linkshortener.dao.exceptions import StoreUnavailableError


class RedisClientMixin:
    """Inject a Redis client and key schema, then PING once

    Attributes:
        redis (redis.Redis):
            Client used by subclasses. Always decodes responses to str.
        keys (RedisKeySchema):
            Namespaced key names.

    Raises:
        StoreUnavailableError:
            If Redis does not answer the initial PING.
    """

    def __init__(self, redis_client: redis.Redis | None = None, prefix: str | None = None, **connection):
        if redis_client is None:
            redis_client = redis.Redis(**{**connection, 'decode_responses': True})

        self.redis = redis_client
        self.keys = RedisKeySchema(prefix=prefix)

        self._healthcheck()

    def _redis_location(self) -> str:
        info = self.redis.connection_pool.connection_kwargs
        return f"{info.get('host')}:{info.get('port')}/{info.get('db')}"

    def _healthcheck(self) -> None:
        try:
            self.redis.ping()
        except (redis.exceptions.ConnectionError, redis.exceptions.TimeoutError) as e:
            raise StoreUnavailableError(
                f"Can't connect to Redis at {self._redis_location()}. Check the provided configuration parameters."
            ) from e
