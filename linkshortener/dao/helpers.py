import json

from linkshortener.types import LinkTable
from linkshortener.dao.exceptions import CorruptStoreError


__all__ = ['decode_link_table', 'encode_link_table']


def decode_link_table(raw: str, source: str) -> LinkTable:
    """Parse the textual persisted record into a link table

    A zero-length record is an empty table, not an error. Any other
    content must parse, whitespace-only records included.

    Args:
        raw (str):
            Raw record contents.
        source (str):
            Human-readable record location, used in error messages.

    Returns:
        LinkTable: The decoded code -> destination mapping.

    Raises:
        CorruptStoreError:
            If the record is not a JSON object of string keys to string values.

    Example:
        >>> decode_link_table('{"abc123": "https://example.com"}', 'links.json')
        {'abc123': 'https://example.com'}
        >>> decode_link_table('', 'links.json')
        {}
    """
    if not raw:
        return {}

    try:
        table = json.loads(raw)
    except json.JSONDecodeError as e:
        raise CorruptStoreError(f'Link table at {source} is not valid JSON: {e}') from e

    if not isinstance(table, dict):
        raise CorruptStoreError(f'Link table at {source} must be a JSON object (found {type(table).__name__}).')
    for code, destination in table.items():
        if not isinstance(destination, str):
            raise CorruptStoreError(f"Link table at {source} maps '{code}' to a non-string destination.")

    return table


def encode_link_table(table: LinkTable) -> str:
    return json.dumps(table, indent=2, ensure_ascii=False)
