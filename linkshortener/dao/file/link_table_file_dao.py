"""Data Access Object (DAO) implementation for a link table kept in a JSON file

Responsibilities:
    - Create the record (holding an empty table) on first load;
    - Read and validate the record;
    - Replace the record atomically (temporary file + os.replace);
    - Translate OS-level failures into StoreUnavailableError.

Classes:
    LinkTableFileDAO:
        DAO storing the whole link table as a single JSON document on disk.

Example:
    >>> from linkshortener.dao.file import LinkTableFileDAO

    >>> dao = LinkTableFileDAO(path='data/links.json')
    >>> dao.save({'abc123': 'https://example.com/page'})
    <LinkTableFileDAO>
    >>> dao.load()['abc123']
    'https://example.com/page'
"""

import os
import tempfile
from pathlib import Path

from beartype import beartype

from linkshortener.dao.base import LinkTableBaseDAO
from linkshortener.dao.helpers import decode_link_table, encode_link_table
from linkshortener.dao.exceptions import StoreUnavailableError


class LinkTableFileDAO(LinkTableBaseDAO):
    """File-based Data Access Object (DAO) for the link table

    Attributes:
        path (Path):
            Location of the JSON record. Parent directories are created on demand.

    Methods:
        load(**kwargs) -> LinkTable:
            Read the record, creating it with an empty table when missing.
            Raises CorruptStoreError when the record cannot be parsed.
            Raises StoreUnavailableError on OS-level failures.

        save(table: LinkTable, **kwargs) -> LinkTableFileDAO:
            Write `table` to a temporary sibling file and rename it over the record.
            Raises StoreUnavailableError on OS-level failures.
    """

    def __init__(self, path: str | os.PathLike):
        self.path = Path(path)

    def __repr__(self) -> str:
        return f'<LinkTableFileDAO path={str(self.path)!r}>'

    @beartype
    def load(self, **kwargs) -> dict[str, str]:
        """Read the link table from disk

        Returns:
            LinkTable: The stored mapping, or {} for a missing or zero-length record.

        Raises:
            CorruptStoreError:
                If the record is non-empty and not a JSON object of strings.
            StoreUnavailableError:
                If the record cannot be read (permissions, I/O errors, etc.).
        """
        try:
            raw = self.path.read_text(encoding='utf-8')
        except FileNotFoundError:
            self.save({})
            return {}
        except (OSError, UnicodeDecodeError) as e:
            raise StoreUnavailableError(f"Can't read link table at {self.path}: {e}") from e

        return decode_link_table(raw, source=str(self.path))

    @beartype
    def save(self, table: dict[str, str], **kwargs) -> 'LinkTableFileDAO':
        """Atomically replace the record on disk

        The table is written to a temporary file in the record's directory,
        flushed to disk and renamed over the record with os.replace(). Readers
        either see the previous record or the new one, never a partial write.

        Args:
            table (LinkTable):
                The complete code -> destination mapping to persist.

        Returns:
            LinkTableFileDAO: self (for method chaining)

        Raises:
            StoreUnavailableError:
                If any step of the write fails. The previous record is left intact.
        """
        payload = encode_link_table(table)
        tmp_path = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=f'.{self.path.name}.', suffix='.tmp')
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self.path)
        except OSError as e:
            if tmp_path is not None:
                Path(tmp_path).unlink(missing_ok=True)
            raise StoreUnavailableError(f"Can't write link table at {self.path}: {e}") from e
        return self
