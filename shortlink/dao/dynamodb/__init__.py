from shortlink.dao.dynamodb.mixins import DynamoDBTableMixin
from shortlink.dao.dynamodb.short_link_dynamodb_dao import ShortLinkDynamoDBDAO


__all__ = [
    'DynamoDBTableMixin',
    'ShortLinkDynamoDBDAO',
]
