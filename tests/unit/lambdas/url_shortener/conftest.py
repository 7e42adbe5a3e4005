import json
from collections.abc import Callable
from typing import cast

import pytest

from shortlink.types import LambdaEvent
from shortlink.models import ShortLinkModel
from shortlink.dao.base import ShortLinkBaseDAO
from shortlink.dao.exceptions import DataStoreError, ShortLinkAlreadyExistsError, ShortLinkNotFoundError
from shortlink.utils.config import Settings


AUTH_TOKEN = 's3cr3t'  # noqa: S105


class InMemoryShortLinkDAO(ShortLinkBaseDAO):
    """Dict-backed DAO with switchable failures."""

    def __init__(self):
        self.links: dict[str, str] = {}
        self.fail_reads = False
        self.fail_writes = False
        self.insert_calls = 0

    def insert(self, short_link: ShortLinkModel, **kwargs) -> 'InMemoryShortLinkDAO':
        self.insert_calls += 1
        if self.fail_writes:
            raise DataStoreError('write failed')
        if short_link.code in self.links:
            raise ShortLinkAlreadyExistsError(f"Short link with code '{short_link.code}' already exists.")
        self.links[short_link.code] = short_link.long_url
        return self

    def get(self, code: str, **kwargs) -> ShortLinkModel:
        if self.fail_reads:
            raise DataStoreError('read failed')
        if code not in self.links:
            raise ShortLinkNotFoundError(f"Short link with code '{code}' not found.")
        return ShortLinkModel(code=code, long_url=self.links[code])


@pytest.fixture
def dao() -> InMemoryShortLinkDAO:
    return InMemoryShortLinkDAO()


@pytest.fixture
def settings() -> Settings:
    return Settings(table_name='shortlinks-test', auth_token=AUTH_TOKEN, max_attempts=3)


@pytest.fixture
def auth_header() -> str:
    return f'Bearer {AUTH_TOKEN}'


@pytest.fixture
def http_api_event(auth_header) -> Callable[..., LambdaEvent]:
    """Build API Gateway HTTP API (payload v2) events."""

    def _event(method: str = 'GET', path: str = '/abc123', body: dict | str | None = None, headers: dict | None = None) -> LambdaEvent:
        if headers is None:
            headers = {'authorization': auth_header, 'host': 'example.com'}
        if isinstance(body, dict):
            body = json.dumps(body)
        return cast(
            LambdaEvent,
            {
                'version': '2.0',
                'routeKey': '$default',
                'rawPath': path,
                'rawQueryString': '',
                'headers': headers,
                'requestContext': {
                    'domainName': 'example.com',
                    'http': {'method': method, 'path': path, 'protocol': 'HTTP/1.1', 'sourceIp': '203.0.113.7'},
                    'stage': '$default',
                },
                'body': body,
                'isBase64Encoded': False,
            },
        )

    return _event


@pytest.fixture
def rest_api_event(auth_header) -> Callable[..., LambdaEvent]:
    """Build API Gateway REST API (payload v1) events."""

    def _event(method: str = 'GET', path: str = '/abc123', body: dict | str | None = None, headers: dict | None = None) -> LambdaEvent:
        if headers is None:
            headers = {'Authorization': auth_header, 'Host': 'example.com', 'User-Agent': 'pytest'}
        if isinstance(body, dict):
            body = json.dumps(body)
        return cast(
            LambdaEvent,
            {
                'resource': '/{proxy+}',
                'path': path,
                'httpMethod': method,
                'headers': headers,
                'requestContext': {'resourcePath': '/{proxy+}', 'httpMethod': method, 'domainName': 'example.com', 'stage': 'prod'},
                'body': body,
                'isBase64Encoded': False,
            },
        )

    return _event
