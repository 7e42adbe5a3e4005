from collections.abc import Callable
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError


@pytest.fixture
def client_error() -> Callable[..., ClientError]:
    """Build botocore ClientErrors carrying a given DynamoDB error code."""

    def _client_error(code: str, operation: str = 'PutItem') -> ClientError:
        return ClientError({'Error': {'Code': code, 'Message': f'{code} raised by test'}}, operation)

    return _client_error


@pytest.fixture
def dynamodb_table() -> MagicMock:
    """Mock a boto3 DynamoDB Table resource."""
    table = MagicMock()
    table.name = 'shortlinks-test'
    table.put_item.return_value = {}
    table.get_item.return_value = {}
    return table
