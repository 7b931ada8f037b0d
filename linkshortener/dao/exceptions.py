"""Exceptions related to link store operations.

Every error kind the link store can report derives from LinkStoreError.
The store never raises them across its public boundary: they are carried
inside a Result (see linkshortener.models) so callers handle each kind.

Classes:
    LinkStoreError:
        Generic base class for link store exceptions.

    InvalidInputError:
        A required field is missing or malformed (client's fault).

    CodeConflictError:
        The requested or generated shortcode is already mapped.

    CorruptStoreError:
        The persisted record exists but cannot be parsed as a link table.

    StoreUnavailableError:
        An I/O failure prevented reading or writing the persisted record.

Example:
    >>> from linkshortener.dao.exceptions import CodeConflictError
    >>> raise CodeConflictError("Short code 'abc123' already exists.")
    Traceback (most recent call last):
        ...
    linkshortener.dao.exceptions.CodeConflictError: Short code 'abc123' already exists.
"""

from linkshortener.exceptions import LinkShortenerError


class LinkStoreError(LinkShortenerError):
    """Generic base class for link store exceptions."""

    error_code = 'store:link_store_error'


class InvalidInputError(LinkStoreError):
    """Raised when a destination or requested shortcode is missing or malformed."""

    error_code = 'store:invalid_input_error'


class CodeConflictError(LinkStoreError):
    """Raised when inserting a shortcode that already maps to a destination."""

    error_code = 'store:code_conflict_error'


class CorruptStoreError(LinkStoreError):
    """Raised when the persisted record is non-empty but not a valid link table."""

    error_code = 'store:corrupt_store_error'


class StoreUnavailableError(LinkStoreError):
    """Raised when the persisted record cannot be read or written.

    Examples include permission errors, full disks, and Redis connection issues.
    """

    error_code = 'store:store_unavailable_error'
