from dataclasses import dataclass

from linkshortener.dao.exceptions import LinkStoreError


# fmt: off
@dataclass(frozen=True)
class ShortURLModel:
    target: str     # Destination URL (absolute or relative)
    shortcode: str  # Unique short identifier, primary key of the mapping
# fmt: on


@dataclass(frozen=True)
class Result[T]:
    """Tagged outcome of a LinkStore operation.

    Exactly one of the two situations holds:
        - `error` is None: the operation succeeded and `value` carries its payload
          (which may itself be None, e.g. an unknown shortcode on resolve).
        - `error` is a LinkStoreError: the operation failed with that error kind.

    Example:
        >>> match store.create_link('https://example.com'):
        ...     case Result(ok=True, value=shortcode):
        ...         print(shortcode)
        ...     case Result(error=CodeConflictError()):
        ...         print('taken')
    """

    value: T | None = None
    error: LinkStoreError | None = None

    @property
    def ok(self) -> bool:
        """True when the operation succeeded. Usable as a match keyword: `case Result(ok=True, ...)`."""
        return self.error is None
