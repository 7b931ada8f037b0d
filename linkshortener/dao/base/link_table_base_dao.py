"""Abstract base class for link table data access objects (DAOs).

This class establishes a consistent contract for every persistence medium
that can hold the link table (e.g., a JSON file or a single Redis key).

Responsibilities:
    - Load the whole code -> destination mapping from the persisted record.
    - Replace the persisted record wholesale with a new mapping.
    - Standardize error reporting across persistence media.

Example:
    Typical usage with a medium-specific implementation:

        >>> from linkshortener.dao.file import LinkTableFileDAO

        >>> dao = LinkTableFileDAO(path='data/links.json')
        >>> dao.load()
        {}
        >>> dao.save({'abc123': 'https://example.com/blog/article-123'})
        <LinkTableFileDAO>
        >>> dao.load()
        {'abc123': 'https://example.com/blog/article-123'}
"""

from abc import ABC, abstractmethod

from linkshortener.types import LinkTable


class LinkTableBaseDAO(ABC):
    """Interface for link table data access objects (DAOs).

    Methods:
        load(**kwargs) -> LinkTable:
            Read the full link table from the persisted record.
            Creates an empty record when none exists.
            Raises CorruptStoreError if the record is not a valid link table.
            Raises StoreUnavailableError on I/O failure.

        save(table: LinkTable, **kwargs) -> LinkTableBaseDAO:
            Atomically replace the persisted record with `table`.
            Raises StoreUnavailableError on I/O failure.

    Subclassing:
        Medium-specific implementations (e.g., LinkTableFileDAO or
        LinkTableRedisDAO) must extend this class and implement all
        abstract methods.

    NOTE:
        - The record is always replaced as a whole, never patched. Every save
          therefore costs O(table size).
    """

    @abstractmethod
    def load(self, **kwargs) -> LinkTable:
        """Read the full link table from the persisted record.

        Args:
            **kwargs:
                Additional keyword arguments, used by the persistence medium.

        Returns:
            LinkTable: The code -> destination mapping (empty if no record exists).

        Raises:
            CorruptStoreError:
                If the record is non-empty but cannot be parsed as a link table.

            StoreUnavailableError:
                If the record cannot be read.
        """
        pass

    @abstractmethod
    def save(self, table: LinkTable, **kwargs) -> 'LinkTableBaseDAO':
        """Replace the persisted record with `table`.

        A reader must never observe a partially written record.

        Args:
            table (LinkTable):
                The complete code -> destination mapping to persist.

            **kwargs:
                Additional keyword arguments, used by the persistence medium.

        Returns:
            LinkTableBaseDAO: self (for method chaining)

        Raises:
            StoreUnavailableError:
                If the record cannot be written.
        """
        pass
