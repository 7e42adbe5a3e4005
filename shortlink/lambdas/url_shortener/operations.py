"""Shorten and resolve operations

Both operations talk to the key-value store through a ShortLinkBaseDAO and
report failures by raising RequestError subclasses, which the router turns
into plain-text error responses.

Functions:
    shorten(body, host, dao, max_attempts) -> JsonBody
        Store a new short link and answer with its short URL.
    resolve(path, dao) -> Redirect
        Look up a short code and answer with a redirect to its long URL.
"""

import json
import logging
from collections.abc import Callable

from shortlink.constants import ShortCode
from shortlink.models import ShortLinkModel
from shortlink.dao.base import ShortLinkBaseDAO
from shortlink.dao.exceptions import DataStoreError, ShortLinkAlreadyExistsError, ShortLinkNotFoundError
from shortlink.exceptions import InvalidPathError, InvalidRequestError, NotFoundError, StorageFailureError
from shortlink.utils.helpers import get_short_url
from shortlink.utils.shortener import generate_shortcode
from shortlink.lambdas.url_shortener.responses import JsonBody, Redirect
from shortlink.lambdas.url_shortener.constants import (
    SHORT_LINK_CREATED,
    SHORT_LINK_RESOLVED,
    SHORT_LINK_NOT_FOUND,
    SHORTCODE_COLLISION,
    STORAGE_FAILURE,
)


logger = logging.getLogger(__name__)


def _reject_constant(name: str):
    raise ValueError(f'{name} is not valid JSON')


def parse_long_url(body: str | None) -> str:
    """Extract the long URL from a shorten request body

    The body must be a JSON object with a non-empty string `url` field.
    NaN and Infinity literals are not JSON and are rejected.

    Raises:
        InvalidRequestError: if the body is missing, malformed or has no url
    """
    try:
        payload = json.loads(body or '', parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        raise InvalidRequestError('invalid JSON body') from e

    if not isinstance(payload, dict):
        raise InvalidRequestError('JSON body must be an object')

    long_url = payload.get('url')
    if not isinstance(long_url, str) or not long_url:
        raise InvalidRequestError("missing 'url' in JSON body")
    return long_url


def parse_shortcode(path: str) -> str:
    """Extract the short code from a resolve request path

    Leading and trailing slashes are stripped; what remains must be exactly
    one path segment.

    Raises:
        InvalidPathError: if the path holds more than one segment

    Example:
        >>> parse_shortcode('/abc123/')
        'abc123'
        >>> parse_shortcode('/a/b')
        Traceback (most recent call last):
            ...
        shortlink.exceptions.InvalidPathError: expected a single path segment
    """
    segments = path.strip('/').split('/')
    if len(segments) != 1:
        raise InvalidPathError('expected a single path segment')
    return segments[0]


def shorten(
    body: str | None,
    host: str,
    dao: ShortLinkBaseDAO,
    max_attempts: int = ShortCode.MAX_ATTEMPTS,
    generate: Callable[[int], str] = generate_shortcode,
) -> JsonBody:
    """Shorten a long URL

    Procedure:
    - Step 1: Extract the long URL from the request body
    - Step 2: Generate a shortcode and conditionally insert the mapping,
              retrying with a fresh shortcode if it is already taken
    - Step 3: Build the short URL from the Host header

    Args:
        body (str | None): raw JSON request body
        host (str): value of the request's Host header
        dao (ShortLinkBaseDAO): key-value store for short links
        max_attempts (int): insert attempts before giving up on collisions
        generate (Callable[[int], str]): shortcode generator

    Returns:
        JsonBody: {"short_url": "https://<host>/<code>"}

    Raises:
        InvalidRequestError: malformed body or missing url
        StorageFailureError: the mapping could not be written
    """
    # 1- Extract long URL from request body
    long_url = parse_long_url(body)

    # 2- Generate shortcode and store the mapping
    for attempt in range(1, max_attempts + 1):
        code = generate(ShortCode.LENGTH)
        try:
            dao.insert(ShortLinkModel(code=code, long_url=long_url))
        except ShortLinkAlreadyExistsError:
            logger.warning(
                'Shortcode collision on attempt %s of %s.',
                attempt,
                max_attempts,
                extra={'shortcode': code, 'event': SHORTCODE_COLLISION},
            )
            continue
        except DataStoreError as e:
            logger.exception('Failed to store short link. Responding with 500.', extra={'shortcode': code, 'event': STORAGE_FAILURE})
            raise StorageFailureError(str(e)) from e
        else:
            break
    else:
        logger.error(
            'Exhausted %s attempts to find a free shortcode. Responding with 500.',
            max_attempts,
            extra={'event': STORAGE_FAILURE},
        )
        raise StorageFailureError('no free shortcode found')

    # 3- Build short URL
    short_url = get_short_url(host, code)
    logger.info('Short link created. Responding with 200.', extra={'shortcode': code, 'event': SHORT_LINK_CREATED})
    return JsonBody(payload={'short_url': short_url})


def resolve(path: str, dao: ShortLinkBaseDAO) -> Redirect:
    """Resolve a short code into a redirect

    Procedure:
    - Step 1: Extract the shortcode from the request path
    - Step 2: Get the short link record from the key-value store
    - Step 3: Redirect the client to the long URL

    A missing record and a failed lookup are both answered with 404, so
    callers learn nothing about the state of the data store.

    Args:
        path (str): raw request path, e.g. '/abc123'
        dao (ShortLinkBaseDAO): key-value store for short links

    Returns:
        Redirect: 301 redirect to the stored long URL

    Raises:
        InvalidPathError: the path is not exactly one segment
        NotFoundError: the code is unknown or the lookup failed
    """
    # 1- Extract shortcode from request path
    code = parse_shortcode(path)
    if not code:
        logger.info('Empty shortcode in path. Responding with 404.', extra={'event': SHORT_LINK_NOT_FOUND})
        raise NotFoundError('empty shortcode')

    # 2- Get short link record from the key-value store
    try:
        short_link = dao.get(code)
    except ShortLinkNotFoundError as e:
        logger.info('Short link not found. Responding with 404.', extra={'shortcode': code, 'event': SHORT_LINK_NOT_FOUND})
        raise NotFoundError(str(e)) from e
    except DataStoreError as e:
        logger.exception('Failed to look up short link. Responding with 404.', extra={'shortcode': code, 'event': STORAGE_FAILURE})
        raise NotFoundError(str(e)) from e

    # 3- Redirect client to long URL
    logger.info('Redirecting client to long URL. Responding with 301.', extra={'shortcode': code, 'event': SHORT_LINK_RESOLVED})
    return Redirect(location=short_link.long_url)
