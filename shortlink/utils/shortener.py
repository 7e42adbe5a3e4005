"""Shortcode generation utility

This module provides a helper function for generating short, random,
fixed-length codes suitable for use as URL slugs.

Functions:
    generate_shortcode(length=6):
        Generate a random Base62 code of exactly `length` characters.

Example:
    >>> from shortlink.utils import generate_shortcode
    >>> generate_shortcode()
    'q7fEm0'
"""

import secrets

from shortlink.constants import ShortCode


def generate_shortcode(length: int = ShortCode.LENGTH) -> str:
    """Generate a random short code from the Base62 alphabet.

    Every character is sampled independently and uniformly (with replacement)
    from [a-zA-Z0-9]. Uniqueness is NOT guaranteed by this function; callers
    must rely on a conditional insert in the data store to detect collisions.

    Args:
        length (int, optional):
            Exact length of the resulting code. Defaults to 6.

    Returns:
        str: A random alphanumeric code of exactly `length` characters.

    Raises:
        TypeError: If `length` is not an integer.
        ValueError: If `length` is negative.

    Example:
        >>> len(generate_shortcode(8))
        8
        >>> generate_shortcode(0)
        ''

    NOTE:
        - Uses the OS CSPRNG via `secrets`: it needs no seeding, differs across
          process restarts and is safe to share between threads.
        - With 62^6 possible codes collisions are rare but not impossible.
    """
    if isinstance(length, bool) or not isinstance(length, int):
        raise TypeError(f'Length must be of type integer (given type: {type(length)}).')
    if length < 0:
        raise ValueError(f'Length must be a non-negative integer (given value: {length}).')

    return ''.join(secrets.choice(ShortCode.ALPHABET) for _ in range(length))
