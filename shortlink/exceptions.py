from shortlink.constants import Auth


class ShortLinkError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:shortlink_error'


class ConfigurationError(ShortLinkError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class MissingEnvironmentVariableError(ConfigurationError):
    """Raised when a required environment variable is missing."""

    error_code = 'config:missing_environment_variable_error'


class BadConfigurationError(ConfigurationError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'


class RequestError(ShortLinkError):
    """Base exception for errors answered directly to the API caller.

    Subclasses define the HTTP status code and the plain-text message the
    caller receives. Extra response headers may be attached per class.
    """

    error_code = 'request:request_error'
    status_code = 500
    message = 'Internal Server Error'
    headers: dict[str, str] = {}


class UnauthorizedError(RequestError):
    """Raised when the bearer credential is missing or wrong."""

    error_code = 'request:unauthorized'
    status_code = 401
    message = 'Unauthorized'
    headers = {'WWW-Authenticate': Auth.CHALLENGE}


class RouteNotFoundError(RequestError):
    """Raised when a POST request targets anything but /shorten."""

    error_code = 'request:route_not_found'
    status_code = 404
    message = 'Not found'


class MethodNotAllowedError(RequestError):
    """Raised for HTTP methods other than GET and POST."""

    error_code = 'request:method_not_allowed'
    status_code = 405
    message = 'Method not allowed'


class InvalidRequestError(RequestError):
    """Raised when the shorten request body is malformed or has no url."""

    error_code = 'request:invalid_request'
    status_code = 400
    message = 'Invalid request'


class InvalidPathError(RequestError):
    """Raised when the resolve path is not exactly one segment."""

    error_code = 'request:invalid_path'
    status_code = 400
    message = 'Invalid URL'


class StorageFailureError(RequestError):
    """Raised when the short link mapping cannot be written."""

    error_code = 'request:storage_failure'
    status_code = 500
    message = 'Database error'


class NotFoundError(RequestError):
    """Raised when a short code cannot be resolved (missing or unreadable)."""

    error_code = 'request:not_found'
    status_code = 404
    message = 'Not found'
