import base64
import binascii
import functools
import logging

from shortlink.types import LambdaEvent, LambdaContext, LambdaResponse
from shortlink.models import Request
from shortlink.dao.base import ShortLinkBaseDAO
from shortlink.dao.factory import create_dao
from shortlink.utils.config import Settings, load_settings
from shortlink.utils.helpers import guarantee_500_response
from shortlink.lambdas.url_shortener.router import route
from shortlink.lambdas.url_shortener.responses import render


logger = logging.getLogger(__name__)


def parse_event(event: LambdaEvent) -> Request:
    """Normalize an API Gateway event into a Request

    Supports both HTTP API (payload v2: `rawPath`, `requestContext.http.method`)
    and REST API (payload v1: `path`, `httpMethod`) events. Header names are
    lower-cased and base64 encoded bodies are decoded as UTF-8.

    Args:
        event (LambdaEvent): API Gateway event payload

    Returns:
        Request: transport-neutral request

    Example:
        >>> parse_event({'rawPath': '/abc123', 'requestContext': {'http': {'method': 'get'}}})
        Request(method='GET', path='/abc123', headers={}, body=None)
    """
    request_context = event.get('requestContext') or {}
    method = (request_context.get('http') or {}).get('method') or event.get('httpMethod') or ''
    path = event.get('rawPath') or event.get('path') or '/'
    headers = {name.lower(): value for name, value in (event.get('headers') or {}).items() if value is not None}

    body = event.get('body')
    if body is not None and event.get('isBase64Encoded'):
        try:
            body = base64.b64decode(body, validate=True).decode('utf-8')
        except (binascii.Error, UnicodeDecodeError):
            logger.debug('Request body is not valid base64 encoded UTF-8; treating it as missing.')
            body = None

    return Request(method=method.upper(), path=path, headers=headers, body=body)


@functools.cache
def runtime() -> tuple[Settings, ShortLinkBaseDAO]:
    """Build process-wide settings and DAO once per Lambda execution environment"""
    settings = load_settings()
    logger.debug('Initialized URL shortener runtime.', extra={'settings': repr(settings)})
    return settings, create_dao(settings)


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle incoming API Gateway requests to shorten and resolve URLs

    Routes:
        POST .../shorten   body {"url": "<long url>"}
        GET  /<code>

    HTTP responses:
        200: Successful URL shortening
            body: {"short_url": "https://<host>/<code>"}
        301: Successful redirect
            headers:
                Location: long URL destination
        400: Bad client request
            body: Invalid request (shorten) | Invalid URL (resolve)
        401: Unauthorized
            headers:
                WWW-Authenticate: Bearer realm="URL Shortener"
        404: Not found
            body: Not found (unknown POST route, unknown or unreadable code)
        405: Method not allowed
        500: Internal server error
            body: Database error (write failed) | Internal Server Error (unexpected)

    Args:
        event (LambdaEvent):
            API Gateway event payload in Lambda Proxy format (v1 or v2).
        context (LambdaContext):
            AWS Lambda runtime context object (not used directly).

    Returns:
        LambdaResponse:
            API Gateway-compatible response including statusCode, headers, and body.

    Example:
        >>> event = {
        ...     'rawPath': '/shorten',
        ...     'requestContext': {'http': {'method': 'POST'}},
        ...     'headers': {'authorization': 'Bearer s3cr3t', 'host': 'sho.rt'},
        ...     'body': '{"url": "https://example.com"}',
        ... }
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        200
    """
    settings, dao = runtime()
    request = parse_event(event)
    return render(route(request, settings, dao))
