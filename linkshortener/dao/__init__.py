from linkshortener.dao.base import LinkTableBaseDAO
from linkshortener.dao.file import LinkTableFileDAO
from linkshortener.dao.redis import LinkTableRedisDAO


__all__ = [
    'LinkTableBaseDAO',
    'LinkTableFileDAO',
    'LinkTableRedisDAO',
]
