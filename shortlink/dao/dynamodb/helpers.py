import functools
from typing import TypeVar, Any
from collections.abc import Callable

from botocore.exceptions import BotoCoreError, ClientError

from shortlink.dao.exceptions import DataStoreError


__all__ = []

F = TypeVar('F', bound=Callable[..., Any])

CONDITIONAL_CHECK_FAILED = 'ConditionalCheckFailedException'


def client_error_code(error: ClientError) -> str:
    return error.response.get('Error', {}).get('Code', '')


def handle_dynamodb_client_error[F](method: F) -> F:
    """Wrap DynamoDB-interacting DAO methods to handle botocore errors

    Args:
        method (Callable[..., Any]):
            DAO method performing DynamoDB operations which may raise
            botocore.exceptions.ClientError or botocore.exceptions.BotoCoreError.

    Returns:
        Callable[..., Any]:
            Wrapped method which raises DataStoreError on any DynamoDB failure.

    Example:
        >>> @handle_dynamodb_client_error
        ... def get_item(self, code):
        ...     return self.table.get_item(Key={'code': code})
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except ClientError as e:
            raise DataStoreError(f"DynamoDB request to table '{self.table.name}' failed ({client_error_code(e) or 'unknown error'}).") from e
        except BotoCoreError as e:
            raise DataStoreError(f"Can't reach DynamoDB table '{self.table.name}'.") from e

    return wrapper
