"""Helper utilities for AWS lambda functions.

Functions:
    get_short_url() -> str
        Get string representation of short URL for a given host and shortcode
    require_environment(*names: str) -> Callable
        Decorator: Ensure required environment variables are present
    guarantee_500_response(handler: Callable) -> Callable
        Decorator: Turn unexpected handler exceptions into 500 responses

Example:
    Typical usage inside a Lambda handler:

        >>> from shortlink.utils.helpers import get_short_url
        >>> get_short_url('sho.rt', 'abc123')
        'https://sho.rt/abc123'
"""

import os
import json
import logging
import functools
from collections.abc import Callable

from shortlink.constants import UNKNOWN_INTERNAL_SERVER_ERROR
from shortlink.exceptions import MissingEnvironmentVariableError
from shortlink.utils.runtime import running_locally


logger = logging.getLogger(__name__)


def get_short_url(host: str, shortcode: str) -> str:
    """Get string representation of shortened URL

    Args:
        host (str): value of the request's Host header
        shortcode (str): shortcode

    Returns:
        str: short url string representation
    """
    return f'https://{host}/{shortcode}'


def require_environment(*names: str) -> Callable:
    """Decorator ensuring required environment variables are present.

    Args:
        *names (str):
            Names of required environment variables.

    Raises:
        MissingEnvironmentVariableError:
            If any required environment variable is missing or empty.

    Example:
        >>> @require_environment('TABLE_NAME', 'API_AUTH_TOKEN')
        ... def my_function():
        ...     pass
        >>> my_function()
        MissingEnvironmentVariableError: Missing required environment variables: 'TABLE_NAME', 'API_AUTH_TOKEN'
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            missing = [name for name in names if not os.environ.get(name)]
            if missing:
                missing_list = ', '.join(f"'{name}'" for name in missing)
                raise MissingEnvironmentVariableError(f'Missing required environment variables: {missing_list}')
            return func(*args, **kwargs)

        return wrapper

    return decorator


def guarantee_500_response(handler: Callable) -> Callable:
    """Decorator: respond with 500 if the lambda handler raises unexpectedly

    When running locally (SAM, tests with APP_ENV=local) the original exception
    is re-raised instead, so stack traces stay visible during development.

    Args:
        handler (Callable):
            Lambda handler with signature (event, context) -> response.

    Returns:
        Callable: wrapped lambda handler
    """

    @functools.wraps(handler)
    def wrapper(event, context, *args, **kwargs):
        try:
            return handler(event, context, *args, **kwargs)
        except Exception as e:
            if running_locally():
                raise
            logger.exception(
                'Unhandled exception in lambda handler. Responding with 500.',
                extra={'event': UNKNOWN_INTERNAL_SERVER_ERROR, 'error': e.__class__.__name__},
            )
            return {
                'statusCode': 500,
                'headers': {'Content-Type': 'application/json'},
                'body': json.dumps(
                    {
                        'message': 'Internal Server Error',
                        'error_code': UNKNOWN_INTERNAL_SERVER_ERROR,
                    }
                ),
            }

    return wrapper
