"""DynamoDB mixin providing shared table resource initialization.

Classes:
    - DynamoDBTableMixin: Base mixin to inject a boto3 DynamoDB Table resource.

Example:
    >>> class ShortLinkDynamoDBDAO(DynamoDBTableMixin, ShortLinkBaseDAO):
    ...     pass
    ...
    >>> dao = ShortLinkDynamoDBDAO(table_name='shortlinks')
    >>> dao.table.name
    'shortlinks'
"""

from typing import Any, Optional

import boto3


class DynamoDBTableMixin:
    """Mixin DynamoDB table setup for DynamoDB-backed DAOs.

    Attributes:
        table (boto3 DynamoDB Table resource):
            Table used by subclasses. boto3 resources open no connection on
            construction, so building a DAO never touches the network.
    """

    def __init__(
        self,
        table_name: Optional[str] = None,
        dynamodb_endpoint_url: Optional[str] = None,
        dynamodb_table: Optional[Any] = None,
    ):
        """Initialize a DynamoDB-based DAO

        Either pass an existing Table resource or the table name (and an
        optional endpoint override, e.g. LocalStack).

        Args:
            table_name (Optional[str]):
                Name of the DynamoDB table.

            dynamodb_endpoint_url (Optional[str]):
                Endpoint override for the DynamoDB service.

            dynamodb_table (Optional[Any]):
                Pre-initialized boto3 Table resource. If None, a new one is created.

        Raises:
            ValueError:
                If neither a table name nor a table resource is provided.
        """
        if dynamodb_table is None:
            if not table_name:
                raise ValueError('Either table_name or dynamodb_table must be provided.')
            dynamodb = boto3.resource('dynamodb', endpoint_url=dynamodb_endpoint_url)
            dynamodb_table = dynamodb.Table(table_name)

        self.table = dynamodb_table
