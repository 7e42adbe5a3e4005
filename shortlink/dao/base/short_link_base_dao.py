"""Abstract base class for ShortLink data access objects (DAOs).

This class establishes a consistent contract for all ShortLink DAO implementations,
regardless of the underlying key-value store (e.g., DynamoDB, Redis).

Responsibilities:
    - Provide an interface for inserting and retrieving ShortLinkModel objects.
    - Standardize error handling across multiple data store implementations.
    - Enforce a consistent API for use by Lambda functions.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from shortlink.models import ShortLinkModel
        >>> from shortlink.dao.dynamodb import ShortLinkDynamoDBDAO

        >>> dao = ShortLinkDynamoDBDAO(table_name='shortlinks')

        >>> short_link = ShortLinkModel(code='a1b2c3', long_url='https://example.com/blog/article-123')
        >>> dao.insert(short_link)

        >>> retrieved = dao.get('a1b2c3')
        >>> print(retrieved.long_url)
        https://example.com/blog/article-123
"""

from abc import ABC, abstractmethod

from shortlink.models import ShortLinkModel


class ShortLinkBaseDAO(ABC):
    """Interface for ShortLink data access objects (DAOs).

    Methods:
        insert(short_link: ShortLinkModel, **kwargs) -> ShortLinkBaseDAO:
            Insert a new ShortLinkModel into the data store, only if its code is free.
            Raises ShortLinkAlreadyExistsError if the code already exists.
            Raises DataStoreError on connection or write failure.

        get(code: str, **kwargs) -> ShortLinkModel:
            Retrieve a ShortLinkModel from the data store by code.
            Raises ShortLinkNotFoundError if the entry does not exist.
            Raises DataStoreError on connection or read failure.

    Subclassing:
        Datastore-specific implementations (e.g., ShortLinkDynamoDBDAO or
        ShortLinkRedisDAO) must extend this class and implement all
        abstract methods.

    NOTE:
        - Records are never updated or deleted. The DAO does not provide
          an interface to do either.
    """

    @abstractmethod
    def insert(self, short_link: ShortLinkModel, **kwargs) -> 'ShortLinkBaseDAO':
        """Insert a new ShortLinkModel into the data store.

        Args:
            short_link (ShortLinkModel):
                The ShortLinkModel instance to be inserted.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortLinkBaseDAO: self (for method chaining)

        Raises:
            ShortLinkAlreadyExistsError:
                If a ShortLinkModel with the same code already exists

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def get(self, code: str, **kwargs) -> ShortLinkModel:
        """Retrieve a ShortLinkModel from the data store by its code.

        Args:
            code (str):
                The code of the ShortLinkModel to be retrieved.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortLinkModel: The stored ShortLinkModel instance.

        Raises:
            ShortLinkNotFoundError:
                If no ShortLinkModel with the given code exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass
