"""Unit tests for the shorten and resolve operations.

Test coverage includes:

1. Request body parsing
   - Valid bodies yield the url; malformed or incomplete bodies raise InvalidRequestError.

2. Shorten
   - Stores the mapping and builds https://<host>/<code>.
   - Retries with a fresh code on collisions and gives up after max_attempts.
   - Storage failures raise StorageFailureError without retrying.

3. Path parsing
   - Single segments yield the code; anything else raises InvalidPathError.

4. Resolve
   - Known codes redirect; unknown codes and lookup failures both raise NotFoundError.

5. Round trip
   - Resolving a freshly shortened code redirects to the original URL.
"""

import re
import string
from unittest.mock import MagicMock

import pytest

from shortlink.models import ShortLinkModel
from shortlink.dao.base import ShortLinkBaseDAO
from shortlink.exceptions import InvalidPathError, InvalidRequestError, NotFoundError, StorageFailureError
from shortlink.lambdas.url_shortener.operations import parse_long_url, parse_shortcode, resolve, shorten
from shortlink.lambdas.url_shortener.responses import JsonBody, Redirect


BASE62 = set(string.ascii_letters + string.digits)


def sequence(*codes: str):
    """Shortcode generator returning the given codes in order."""
    remaining = iter(codes)
    return lambda length: next(remaining)


# -------------------------------
# 1. Request body parsing
# -------------------------------


@pytest.mark.parametrize(
    'body, expected',
    [
        ('{"url": "https://example.com"}', 'https://example.com'),
        ('{"url": "https://example.com/a?b=c", "extra": 1}', 'https://example.com/a?b=c'),
        ('{"url": "not even a url"}', 'not even a url'),
    ],
)
def test_parse_long_url(body, expected):
    assert parse_long_url(body) == expected


@pytest.mark.parametrize(
    'body',
    [
        None,
        '',
        'not json',
        '{"url": ',
        '[]',
        '"https://example.com"',
        '{}',
        '{"url": ""}',
        '{"url": null}',
        '{"url": 42}',
        '{"target_url": "https://example.com"}',
        '[' * 100_000,
        '{"url": ' * 100_000,
        '{"url": "https://example.com", "weight": NaN}',
        '{"url": "https://example.com", "weight": -Infinity}',
    ],
    ids=lambda body: repr(body)[:40],
)
def test_parse_long_url_invalid(body):
    with pytest.raises(InvalidRequestError):
        parse_long_url(body)


# -------------------------------
# 2. Shorten
# -------------------------------


def test_shorten_stores_mapping(dao):
    result = shorten('{"url": "https://example.com"}', 'example.com', dao)

    assert isinstance(result, JsonBody)
    assert result.status_code == 200
    short_url = result.payload['short_url']
    assert re.fullmatch(r'https://example\.com/[a-zA-Z0-9]{6}', short_url)

    code = short_url.rsplit('/', 1)[1]
    assert dao.links == {code: 'https://example.com'}


def test_shorten_retries_on_collision(dao):
    dao.links['taken1'] = 'https://first.example'

    result = shorten('{"url": "https://second.example"}', 'sho.rt', dao, generate=sequence('taken1', 'free01'))

    assert result.payload == {'short_url': 'https://sho.rt/free01'}
    assert dao.links == {'taken1': 'https://first.example', 'free01': 'https://second.example'}
    assert dao.insert_calls == 2


def test_shorten_gives_up_after_max_attempts(dao):
    dao.links.update({'aaaaaa': 'https://a.example', 'bbbbbb': 'https://b.example'})

    with pytest.raises(StorageFailureError):
        shorten('{"url": "https://c.example"}', 'sho.rt', dao, max_attempts=2, generate=sequence('aaaaaa', 'bbbbbb'))

    assert dao.insert_calls == 2
    assert dao.links == {'aaaaaa': 'https://a.example', 'bbbbbb': 'https://b.example'}


def test_shorten_storage_failure_is_not_retried(dao):
    dao.fail_writes = True

    with pytest.raises(StorageFailureError):
        shorten('{"url": "https://example.com"}', 'example.com', dao, max_attempts=5)

    assert dao.insert_calls == 1


def test_shorten_invalid_body_never_touches_storage():
    dao = MagicMock(spec=ShortLinkBaseDAO)

    with pytest.raises(InvalidRequestError):
        shorten('{"url": ""}', 'example.com', dao)

    dao.insert.assert_not_called()


def test_shorten_inserts_generated_model():
    dao = MagicMock(spec=ShortLinkBaseDAO)

    shorten('{"url": "https://example.com"}', 'example.com', dao, generate=sequence('abc123'))

    dao.insert.assert_called_once_with(ShortLinkModel(code='abc123', long_url='https://example.com'))


# -------------------------------
# 3. Path parsing
# -------------------------------


@pytest.mark.parametrize(
    'path, expected',
    [
        ('/abc123', 'abc123'),
        ('abc123', 'abc123'),
        ('/abc123/', 'abc123'),
        ('//abc123//', 'abc123'),
        ('/', ''),
        ('', ''),
    ],
)
def test_parse_shortcode(path, expected):
    assert parse_shortcode(path) == expected


@pytest.mark.parametrize('path', ['/a/b', '/abc123/extra/', '/a//b', '/prod/abc123'])
def test_parse_shortcode_invalid(path):
    with pytest.raises(InvalidPathError):
        parse_shortcode(path)


# -------------------------------
# 4. Resolve
# -------------------------------


def test_resolve_known_code(dao):
    dao.links['abc123'] = 'https://example.com'

    result = resolve('/abc123', dao)

    assert result == Redirect(location='https://example.com')
    assert result.status_code == 301


def test_resolve_unknown_code(dao):
    with pytest.raises(NotFoundError):
        resolve('/nope00', dao)


def test_resolve_lookup_failure_looks_like_not_found(dao):
    dao.links['abc123'] = 'https://example.com'
    dao.fail_reads = True

    with pytest.raises(NotFoundError) as excinfo:
        resolve('/abc123', dao)

    assert excinfo.value.status_code == 404
    assert excinfo.value.message == 'Not found'


def test_resolve_empty_code_skips_lookup():
    dao = MagicMock(spec=ShortLinkBaseDAO)

    with pytest.raises(NotFoundError):
        resolve('/', dao)

    dao.get.assert_not_called()


def test_resolve_two_segments_skips_lookup():
    dao = MagicMock(spec=ShortLinkBaseDAO)

    with pytest.raises(InvalidPathError):
        resolve('/a/b', dao)

    dao.get.assert_not_called()


# -------------------------------
# 5. Round trip
# -------------------------------


@pytest.mark.parametrize('long_url', ['https://example.com', 'https://example.com/path?q=1#frag', 'ftp://files.example/a.txt'])
def test_shorten_then_resolve(dao, long_url):
    result = shorten(f'{{"url": "{long_url}"}}', 'sho.rt', dao)
    short_url = result.payload['short_url']
    code = short_url.removeprefix('https://sho.rt/')

    assert len(code) == 6
    assert set(code) <= BASE62
    assert resolve(f'/{code}', dao) == Redirect(location=long_url)
