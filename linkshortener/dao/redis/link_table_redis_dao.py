"""Data Access Object (DAO) implementation for a link table kept under one Redis key

The whole table is serialized as a single JSON string under
`<prefix>:links:table`. Every save replaces the value with one SET command,
so readers never observe a partially written table.

Classes:
    LinkTableRedisDAO:
        DAO storing the link table as a single JSON value in Redis.

Example:
    >>> from linkshortener.dao.redis import LinkTableRedisDAO

    >>> dao = LinkTableRedisDAO(prefix='linkshortener:dev')
    >>> dao.save({'abc123': 'https://example.com/page'})
    <LinkTableRedisDAO>
    >>> dao.load()
    {'abc123': 'https://example.com/page'}
"""

from beartype import beartype

from linkshortener.dao.base import LinkTableBaseDAO
from linkshortener.dao.exceptions import CorruptStoreError
from linkshortener.dao.helpers import decode_link_table, encode_link_table
from linkshortener.dao.redis.mixins import RedisClientMixin
from linkshortener.dao.redis.helpers import handle_redis_connection_error


class LinkTableRedisDAO(RedisClientMixin, LinkTableBaseDAO):
    """Redis-based Data Access Object (DAO) for the link table

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.

    Methods:
        load(**kwargs) -> LinkTable:
            Read the table, initializing the key with an empty table when missing.
            Raises CorruptStoreError when the stored value is not UTF-8 or cannot be parsed.
            Raises StoreUnavailableError on connectivity issues with Redis.

        save(table: LinkTable, **kwargs) -> LinkTableRedisDAO:
            Replace the stored table with a single SET.
            Raises StoreUnavailableError on connectivity issues with Redis.
    """

    def __repr__(self) -> str:
        return f'<LinkTableRedisDAO key={self.keys.link_table_key()!r}>'

    @handle_redis_connection_error
    @beartype
    def load(self, **kwargs) -> dict[str, str]:
        key = self.keys.link_table_key()
        source = f'redis key {key}'

        try:
            raw = self.redis.get(key)
            if isinstance(raw, bytes):
                raw = raw.decode('utf-8')
        except UnicodeDecodeError as e:
            raise CorruptStoreError(f'Link table at {source} is not valid UTF-8: {e}') from e

        if raw is None:
            # NX keeps a concurrently written table from being clobbered
            self.redis.set(key, encode_link_table({}), nx=True)
            return {}

        return decode_link_table(raw, source=source)

    @handle_redis_connection_error
    @beartype
    def save(self, table: dict[str, str], **kwargs) -> 'LinkTableRedisDAO':
        self.redis.set(self.keys.link_table_key(), encode_link_table(table))
        return self
