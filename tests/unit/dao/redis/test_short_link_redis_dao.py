"""Unit tests for the ShortLinkRedisDAO

Test coverage includes:

1. Insertion behavior
   - Validates inserting a short link issues a single SET NX on the namespaced key.
   - Confirms taken codes raise ShortLinkAlreadyExistsError.
   - Ensures invalid types raise TypeError or BeartypeCallHintParamViolation.
   - Confirms Redis connection errors raise DataStoreError.

2. Retrieval behavior
   - Ensures fetching existing codes returns a populated ShortLinkModel.
   - Confirms missing keys raise ShortLinkNotFoundError.
   - Ensures invalid types raise TypeError or BeartypeCallHintParamViolation.
   - Confirms Redis connection and timeout errors raise DataStoreError.
"""

import re

import pytest
import redis
from beartype.roar import BeartypeCallHintParamViolation

from shortlink.models import ShortLinkModel
from shortlink.dao.base import ShortLinkBaseDAO
from shortlink.dao.exceptions import DataStoreError, ShortLinkAlreadyExistsError, ShortLinkNotFoundError
from shortlink.dao.redis import ShortLinkRedisDAO


# -------------------------------
# Fixtures
# -------------------------------


@pytest.fixture
def dao(redis_client, key_prefix):
    return ShortLinkRedisDAO(redis_client=redis_client, prefix=key_prefix)


def test_dao_implements_base_interface(dao):
    assert isinstance(dao, ShortLinkBaseDAO)


# -------------------------------
# 1. Insertion behavior
# -------------------------------


def test_insert_short_link(dao, redis_client):
    """Ensure a short link is stored with a single conditional SET."""
    short_link = ShortLinkModel(code='abc123', long_url='https://example.com/test')

    assert dao.insert(short_link) is dao
    redis_client.set.assert_called_once_with('shortlinks-test:links:abc123:url', 'https://example.com/test', nx=True)


def test_insert_short_link_which_already_exists(dao, redis_client):
    """SET NX returning None means the code is taken."""
    redis_client.set.return_value = None
    short_link = ShortLinkModel(code='abc123', long_url='https://example.com/duplicate')

    with pytest.raises(ShortLinkAlreadyExistsError, match=re.escape("Short link with code 'abc123' already exists.")):
        dao.insert(short_link)


def test_insert_short_link_with_invalid_type(dao):
    with pytest.raises((TypeError, BeartypeCallHintParamViolation)):
        dao.insert('https://example.com/notamodel')


def test_insert_short_link_with_redis_connection_error(dao, redis_client):
    redis_client.set.side_effect = redis.exceptions.ConnectionError('Connection error')
    redis_client.connection_pool.connection_kwargs = {'host': '203.0.113.1', 'port': 18000, 'db': 5}
    short_link = ShortLinkModel(code='abc123', long_url='https://example.com/failure')

    with pytest.raises(DataStoreError, match="Can't connect to Redis at 203.0.113.1:18000/5."):
        dao.insert(short_link)


# -------------------------------
# 2. Retrieval behavior
# -------------------------------


def test_get_short_link(dao, redis_client):
    redis_client.get.return_value = 'https://example.com/test'

    short_link = dao.get('abc123')

    assert short_link == ShortLinkModel(code='abc123', long_url='https://example.com/test')
    redis_client.get.assert_called_once_with('shortlinks-test:links:abc123:url')


def test_get_short_link_decodes_bytes(dao, redis_client):
    redis_client.get.return_value = b'https://example.com/bytes'

    assert dao.get('abc123').long_url == 'https://example.com/bytes'


def test_get_short_link_which_does_not_exist(dao, redis_client):
    redis_client.get.return_value = None

    with pytest.raises(ShortLinkNotFoundError, match="Short link with code 'abc123' not found."):
        dao.get('abc123')


def test_get_short_link_with_invalid_type(dao):
    with pytest.raises((TypeError, BeartypeCallHintParamViolation)):
        dao.get(12345)


@pytest.mark.parametrize('error', [redis.exceptions.ConnectionError('down'), redis.exceptions.TimeoutError('slow')])
def test_get_short_link_with_redis_errors(dao, redis_client, error):
    redis_client.get.side_effect = error

    with pytest.raises(DataStoreError, match="Can't connect to Redis at redis.test:6379/0."):
        dao.get('abc123')


def test_dao_without_prefix_uses_bare_keys(redis_client):
    dao = ShortLinkRedisDAO(redis_client=redis_client)
    dao.insert(ShortLinkModel(code='abc123', long_url='https://example.com'))

    redis_client.set.assert_called_once_with('links:abc123:url', 'https://example.com', nx=True)
