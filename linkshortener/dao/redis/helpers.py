import functools
from typing import Any
from collections.abc import Callable

import redis

from linkshortener.dao.exceptions import StoreUnavailableError


__all__ = []


def handle_redis_connection_error[F: Callable[..., Any]](method: F) -> F:
    """Turn Redis connectivity errors raised by a DAO method into StoreUnavailableError

    The wrapped method's owner must provide `_redis_location()` (see RedisClientMixin).
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except (redis.exceptions.ConnectionError, redis.exceptions.TimeoutError) as e:
            raise StoreUnavailableError(f"Can't connect to Redis at {self._redis_location()}.") from e

    return wrapper
