"""Shortcode generation and validation utilities

Functions:
    generate_shortcode(nbytes=Shortcode.RANDOM_BYTES) -> str:
        Draw a random hex token suitable for use as a URL slug.

    is_valid_shortcode(shortcode) -> bool:
        Check whether a caller-supplied shortcode can be used as a lookup key.

Example:
    >>> from linkshortener.utils import generate_shortcode
    >>> generate_shortcode()
    '9f86d081'
"""

import secrets

from linkshortener.constants import Shortcode


def generate_shortcode(nbytes: int = Shortcode.RANDOM_BYTES) -> str:
    """Generate a random, hex-encoded shortcode.

    With the default of 4 random bytes the result is 8 lowercase hex
    characters (32 bits of entropy), which keeps accidental collisions rare
    for tables that fit in memory. Collisions are not retried here: the
    caller is responsible for checking the code against the link table.

    Args:
        nbytes (int, optional):
            Number of random bytes to draw. Defaults to 4.

    Returns:
        str: A hex string of length 2 * nbytes.

    Raises:
        ValueError: If nbytes is not a positive integer.
    """
    if not isinstance(nbytes, int) or nbytes <= 0:
        raise ValueError(f'Number of random bytes must be a positive integer (given value: {nbytes!r}).')

    return secrets.token_hex(nbytes)


def is_valid_shortcode(shortcode: str) -> bool:
    """Return True if `shortcode` is one or more printable characters without '/'.

    Spaces are printable, so 'my code' is accepted and resolves from '/my%20code'.
    """
    return bool(shortcode) and shortcode.isprintable() and '/' not in shortcode
