"""Bearer credential validation

Functions:
    authorize(header: str | None, expected: str) -> bool
        True if the Authorization header carries exactly the expected bearer token.

Example:
    >>> authorize('Bearer s3cr3t', 's3cr3t')
    True
    >>> authorize('bearer s3cr3t', 's3cr3t')
    False
"""

import hmac

from shortlink.constants import Auth


def authorize(header: str | None, expected: str) -> bool:
    """Validate an Authorization header against the expected bearer token

    The header must be exactly `"Bearer " + expected`. Scheme and token are
    compared case-sensitively and in constant time. An empty expected token
    never authorizes anything.

    Args:
        header (str | None): raw value of the Authorization header
        expected (str): configured API token

    Returns:
        bool: True if the caller is authorized, False otherwise
    """
    if not header or not expected:
        return False

    credential = f'{Auth.SCHEME} {expected}'
    return hmac.compare_digest(header.encode('utf-8'), credential.encode('utf-8'))
