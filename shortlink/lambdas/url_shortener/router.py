"""Per-request dispatch for the URL shortener

    Unauthenticated --(bad credential)--------------------> Rejected (401)
    Unauthenticated --(ok)--> Authenticated
        POST .../shorten   --> Shortening
        POST anything else --> Rejected (404)
        GET  any path      --> Resolving
        any other method   --> Rejected (405)

No state survives a request; settings and the DAO are read-only inputs.
"""

import logging

from shortlink.models import Request
from shortlink.dao.base import ShortLinkBaseDAO
from shortlink.exceptions import MethodNotAllowedError, RequestError, RouteNotFoundError, UnauthorizedError
from shortlink.utils.auth import authorize
from shortlink.utils.config import Settings
from shortlink.lambdas.url_shortener.operations import resolve, shorten
from shortlink.lambdas.url_shortener.responses import PlainError, Response
from shortlink.lambdas.url_shortener.constants import REQUEST_REJECTED


logger = logging.getLogger(__name__)

SHORTEN_PATH_SUFFIX = '/shorten'


def route(request: Request, settings: Settings, dao: ShortLinkBaseDAO) -> Response:
    """Authenticate and dispatch a request to the shorten or resolve operation

    Args:
        request (Request): normalized inbound request
        settings (Settings): process-wide configuration
        dao (ShortLinkBaseDAO): key-value store for short links

    Returns:
        Response: Redirect, JsonBody or PlainError
    """
    try:
        return _dispatch(request, settings, dao)
    except RequestError as error:
        logger.info(
            'Request rejected. Responding with %s.',
            error.status_code,
            extra={'event': REQUEST_REJECTED, 'error': error.error_code, 'method': request.method, 'path': request.path},
        )
        return PlainError.from_error(error)


def _dispatch(request: Request, settings: Settings, dao: ShortLinkBaseDAO) -> Response:
    if not authorize(request.headers.get('authorization'), settings.auth_token):
        raise UnauthorizedError('missing or invalid bearer credential')

    match request.method:
        case 'POST':
            if not request.path.endswith(SHORTEN_PATH_SUFFIX):
                raise RouteNotFoundError(f'no POST route for {request.path}')
            return shorten(request.body, request.headers.get('host', ''), dao, max_attempts=settings.max_attempts)
        case 'GET':
            return resolve(request.path, dao)
        case _:
            raise MethodNotAllowedError(f'method {request.method} not allowed')
