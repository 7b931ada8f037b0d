"""Authoritative owner of the shortcode -> destination mapping

LinkStore keeps the link table in memory, mirrors every mutation to the
persisted record through a LinkTableBaseDAO and serializes all access to
the shared table with a single lock.

Responsibilities:
    - Load the table once, on first access;
    - Validate, generate and collision-check shortcodes;
    - Persist the whole table before acknowledging a create (write-through);
    - Report every failure as a tagged Result instead of raising.

Classes:
    LinkStore:
        Thread-safe link table backed by a data access object.

Example:
    >>> from linkshortener.store import LinkStore
    >>> from linkshortener.dao.file import LinkTableFileDAO

    >>> store = LinkStore(LinkTableFileDAO(path='data/links.json'))
    >>> store.create_link('https://example.com/page', 'docs')
    Result(value='docs', error=None)
    >>> store.resolve('docs')
    Result(value='https://example.com/page', error=None)
    >>> store.resolve('missing')
    Result(value=None, error=None)

NOTE:
    - Every create rewrites the whole record, so its cost grows linearly with
      the table size.
"""

import threading
from types import MappingProxyType
from collections.abc import Mapping

from linkshortener.types import LinkTable
from linkshortener.models import Result, ShortURLModel
from linkshortener.dao.base import LinkTableBaseDAO
from linkshortener.dao.exceptions import LinkStoreError, InvalidInputError, CodeConflictError
from linkshortener.utils.shortener import generate_shortcode, is_valid_shortcode


class LinkStore:
    """Thread-safe, write-through link table

    Attributes:
        dao (LinkTableBaseDAO):
            Data access object owning the persisted record.

    Methods:
        load(refresh: bool = False) -> Result[LinkTable]:
            Return a copy of the current table, reading the record on first access.

        save(table: LinkTable) -> Result[LinkTable]:
            Persist `table` wholesale and adopt it as the in-memory table.

        create_link(destination: str, requested_code: str | None = None) -> Result[str]:
            Map a new shortcode to `destination` and return the shortcode.

        resolve(shortcode: str) -> Result[str]:
            Return the destination for `shortcode` (value None when unknown).

        list_links() -> Result[Mapping[str, str]]:
            Return a read-only snapshot of the full table.
    """

    def __init__(self, dao: LinkTableBaseDAO):
        self.dao = dao
        self._table: LinkTable | None = None
        self._lock = threading.Lock()

    def _current(self) -> LinkTable:
        # Caller must hold self._lock
        if self._table is None:
            self._table = self.dao.load()
        return self._table

    def load(self, refresh: bool = False) -> Result[LinkTable]:
        """Return a copy of the current link table

        Args:
            refresh (bool):
                If True, re-read the persisted record even if the table is
                already in memory.

        Returns:
            Result[LinkTable]:
                The table, or CorruptStoreError / StoreUnavailableError.
        """
        with self._lock:
            try:
                if refresh:
                    self._table = None
                return Result(value=dict(self._current()))
            except LinkStoreError as e:
                return Result(error=e)

    def save(self, table: LinkTable) -> Result[LinkTable]:
        """Persist `table` as the whole record

        The in-memory table is replaced only after the record was written, so
        a failed save leaves it untouched and the call can be retried.

        Returns:
            Result[LinkTable]:
                A copy of the saved table, or StoreUnavailableError.
        """
        snapshot = dict(table)
        with self._lock:
            try:
                self.dao.save(snapshot)
            except LinkStoreError as e:
                return Result(error=e)
            self._table = snapshot
            return Result(value=dict(snapshot))

    def create_link(self, destination: str, requested_code: str | None = None) -> Result[str]:
        """Map a shortcode to `destination`

        Uses `requested_code` verbatim when given, otherwise draws a random
        shortcode. A collision is reported as CodeConflictError, even for
        generated shortcodes: the caller decides whether to resubmit.

        The check-insert-persist sequence runs under the store lock, so two
        concurrent creates of the same shortcode can never both succeed.

        Args:
            destination (str):
                Non-empty destination URL (absolute or relative).
            requested_code (str | None):
                Caller-supplied shortcode. None or '' means "generate one".

        Returns:
            Result[str]:
                The assigned shortcode, or one of InvalidInputError,
                CodeConflictError, CorruptStoreError, StoreUnavailableError.
        """
        if not isinstance(destination, str) or not destination:
            return Result(error=InvalidInputError('URL is required.'))
        if requested_code and not (isinstance(requested_code, str) and is_valid_shortcode(requested_code)):
            return Result(error=InvalidInputError("Short code must be printable characters without '/'."))

        short_url = ShortURLModel(target=destination, shortcode=requested_code or generate_shortcode())

        with self._lock:
            try:
                table = self._current()
                if short_url.shortcode in table:
                    raise CodeConflictError('Short code already exists. Please choose another.')

                updated = {**table, short_url.shortcode: short_url.target}
                self.dao.save(updated)
            except LinkStoreError as e:
                return Result(error=e)

            self._table = updated
            return Result(value=short_url.shortcode)

    def resolve(self, shortcode: str) -> Result[str]:
        """Look up the destination for `shortcode`

        An unknown shortcode is a routine negative lookup: Result(value=None).
        """
        with self._lock:
            try:
                return Result(value=self._current().get(shortcode))
            except LinkStoreError as e:
                return Result(error=e)

    def list_links(self) -> Result[Mapping[str, str]]:
        with self._lock:
            try:
                return Result(value=MappingProxyType(dict(self._current())))
            except LinkStoreError as e:
                return Result(error=e)
