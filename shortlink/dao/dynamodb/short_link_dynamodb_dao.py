"""Data Access Object (DAO) implementation for managing short links in DynamoDB

Table layout:
    partition key  `code`      (S)
    attribute      `long_url`  (S)

Classes:
    ShortLinkDynamoDBDAO:
        DAO for storing and retrieving ShortLinkModel in a DynamoDB table.

Example:
    >>> from shortlink.models import ShortLinkModel
    >>> from shortlink.dao.dynamodb import ShortLinkDynamoDBDAO

    >>> dao = ShortLinkDynamoDBDAO(table_name='shortlinks')
    >>> dao.insert(ShortLinkModel(code='abc123', long_url='https://example.com/page'))
    <ShortLinkDynamoDBDAO>

    >>> dao.get('abc123').long_url
    'https://example.com/page'
"""

from beartype import beartype
from botocore.exceptions import ClientError

from shortlink.models import ShortLinkModel
from shortlink.dao.base import ShortLinkBaseDAO
from shortlink.dao.dynamodb.mixins import DynamoDBTableMixin
from shortlink.dao.dynamodb.helpers import CONDITIONAL_CHECK_FAILED, client_error_code, handle_dynamodb_client_error
from shortlink.dao.exceptions import ShortLinkAlreadyExistsError, ShortLinkNotFoundError


class ShortLinkDynamoDBDAO(DynamoDBTableMixin, ShortLinkBaseDAO):
    """DynamoDB-based Data Access Object (DAO) for managing short link mappings

    Attributes (see DynamoDBTableMixin):
        table (boto3 DynamoDB Table resource):
            Table holding one item per short link.

    Methods:
        insert(short_link: ShortLinkModel, **kwargs) -> ShortLinkDynamoDBDAO:
            Put a short link item unless an item with the same code exists.
            Raises ShortLinkAlreadyExistsError when the code is taken.
            Raises DataStoreError on any other DynamoDB failure.

        get(code: str, **kwargs) -> ShortLinkModel:
            Get a short link item by code.
            Raises ShortLinkNotFoundError when no item exists.
            Raises DataStoreError on any DynamoDB failure.
    """

    @handle_dynamodb_client_error
    @beartype
    def insert(self, short_link: ShortLinkModel, **kwargs) -> 'ShortLinkDynamoDBDAO':
        """Conditionally put a short link item into DynamoDB

        Args:
            short_link (ShortLinkModel):
                ShortLinkModel instance representing the short link mapping.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShortLinkDynamoDBDAO: self (for method chaining)

        Raises:
            ShortLinkAlreadyExistsError:
                If an item with the same code already exists.
            DataStoreError:
                If DynamoDB rejects the request or can't be reached.
        """
        try:
            self.table.put_item(
                Item={
                    'code': short_link.code,
                    'long_url': short_link.long_url,
                },
                ConditionExpression='attribute_not_exists(code)',
            )
        except ClientError as e:
            if client_error_code(e) == CONDITIONAL_CHECK_FAILED:
                raise ShortLinkAlreadyExistsError(f"Short link with code '{short_link.code}' already exists.") from e
            raise
        return self

    @handle_dynamodb_client_error
    @beartype
    def get(self, code: str, **kwargs) -> ShortLinkModel:
        """Retrieve a stored short link item by code

        Args:
            code (str):
                The code identifier of the short link.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShortLinkModel:
                The retrieved ShortLinkModel instance if found.

        Raises:
            ShortLinkNotFoundError:
                If no item with the given code exists.
            DataStoreError:
                If DynamoDB rejects the request or can't be reached.
        """
        item = self.table.get_item(Key={'code': code}).get('Item')
        if item is None or 'long_url' not in item:
            raise ShortLinkNotFoundError(f"Short link with code '{code}' not found.")

        return ShortLinkModel(code=code, long_url=str(item['long_url']))
