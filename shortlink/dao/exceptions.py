"""Exceptions related to Data Access Objects (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    ShortLinkNotFoundError:
        Raised when a ShortLinkModel is not found in the data store.

    ShortLinkAlreadyExistsError:
        Raised when attempting to insert a ShortLinkModel whose code is taken.

    DataStoreError:
        Raised when there is an error in the data store (e.g., connection issues, throttling, etc.).

Example:
    >>> from shortlink.dao.exceptions import ShortLinkNotFoundError
    >>> raise ShortLinkNotFoundError("Short link with code 'abc123' not found.")
    Traceback (most recent call last):
        ...
    shortlink.dao.exceptions.ShortLinkNotFoundError: Short link with code 'abc123' not found.
"""


class DAOError(Exception):
    """Generic base class for DAO-related exceptions."""

    pass


class ShortLinkNotFoundError(DAOError):
    """Exception raised when a ShortLinkModel is not found in the data store."""

    pass


class ShortLinkAlreadyExistsError(DAOError):
    """Exception raised when attempting to insert a ShortLinkModel that already exists in the data store."""

    pass


class DataStoreError(DAOError):
    """Exception raised when there is an error in the data store.

    e.g. connection issues, timeouts, throttling, missing table, etc.
    """

    pass
