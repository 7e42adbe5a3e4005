"""Operation results and their rendering into API Gateway proxy responses.

Every operation returns one of three variants:

    Redirect(location)              -> 301 with a Location header
    JsonBody(payload, status_code)  -> JSON document, 200 by default
    PlainError(status_code, ...)    -> plain-text error message

`render()` is the single place that knows the API Gateway response shape.
"""

import json
from dataclasses import dataclass, field
from typing import Any

from shortlink.exceptions import RequestError
from shortlink.types import HttpHeaders, LambdaResponse


@dataclass(frozen=True)
class Redirect:
    location: str
    status_code: int = 301


@dataclass(frozen=True)
class JsonBody:
    payload: dict[str, Any]
    status_code: int = 200


@dataclass(frozen=True)
class PlainError:
    status_code: int
    message: str
    headers: HttpHeaders = field(default_factory=dict)

    @classmethod
    def from_error(cls, error: RequestError) -> 'PlainError':
        return cls(status_code=error.status_code, message=error.message, headers=dict(error.headers))


type Response = Redirect | JsonBody | PlainError


def render(response: Response) -> LambdaResponse:
    """Render an operation result as an API Gateway Lambda proxy response

    Args:
        response (Response): Redirect, JsonBody or PlainError

    Returns:
        LambdaResponse: dict with statusCode, headers and body

    Example:
        >>> render(Redirect(location='https://example.com'))
        {'statusCode': 301, 'headers': {'Location': 'https://example.com'}, 'body': ''}
    """
    match response:
        case Redirect(location=location, status_code=status_code):
            return {
                'statusCode': status_code,
                'headers': {'Location': location},
                'body': '',
            }
        case JsonBody(payload=payload, status_code=status_code):
            return {
                'statusCode': status_code,
                'headers': {'Content-Type': 'application/json'},
                'body': json.dumps(payload),
            }
        case PlainError(status_code=status_code, message=message, headers=headers):
            return {
                'statusCode': status_code,
                'headers': {'Content-Type': 'text/plain; charset=utf-8', **headers},
                'body': message,
            }
        case _:
            raise TypeError(f'Cannot render response of type {type(response)}.')
