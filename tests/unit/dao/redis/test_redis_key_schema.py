"""Unit tests for the RedisKeySchema class in redis_key_schema.py.

Test coverage includes:

1. Default prefix behavior
   - Confirms keys are not prefixed when no prefix is provided.

2. Custom prefix behavior
   - Confirms keys are correctly prefixed when a valid prefix is provided.

3. Invalid prefix types
   - Ensures improper prefix types raise TypeError.
"""

import pytest

from linkshortener.dao.redis.redis_key_schema import RedisKeySchema


def test_link_table_key_without_prefix():
    assert RedisKeySchema().link_table_key() == 'links:table'


@pytest.mark.parametrize(
    'prefix, expected',
    [
        ('linkshortener:local', 'linkshortener:local:links:table'),
        ('app', 'app:links:table'),
    ],
)
def test_link_table_key_with_prefix(prefix, expected):
    assert RedisKeySchema(prefix=prefix).link_table_key() == expected


@pytest.mark.parametrize('prefix', [123, 1.5, ['app'], {'app': 'env'}])
def test_invalid_prefix_type(prefix):
    with pytest.raises(TypeError):
        RedisKeySchema(prefix=prefix)
