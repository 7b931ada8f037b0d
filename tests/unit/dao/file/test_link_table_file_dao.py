"""Unit tests for the LinkTableFileDAO

Test coverage includes:

1. Loading behavior
   - Ensures a missing record is created holding an empty table.
   - Ensures a zero-length record loads as an empty table.
   - Confirms malformed records raise CorruptStoreError.
   - Confirms unreadable records raise StoreUnavailableError.

2. Saving behavior
   - Ensures saved tables round-trip through load().
   - Ensures saving replaces the record wholesale and leaves no temporary files.
   - Confirms write failures raise StoreUnavailableError and keep the old record.
   - Ensures invalid types raise BeartypeCallHintParamViolation.
"""

import os
import json

import pytest
from beartype.roar import BeartypeCallHintParamViolation

from linkshortener.dao.file import LinkTableFileDAO
from linkshortener.dao.exceptions import CorruptStoreError, StoreUnavailableError


# -------------------------------
# Fixtures
# -------------------------------


@pytest.fixture
def record_path(tmp_path):
    return tmp_path / 'data' / 'links.json'


@pytest.fixture
def dao(record_path):
    return LinkTableFileDAO(path=record_path)


# -------------------------------
# 1. Loading behavior
# -------------------------------


def test_load_missing_record_creates_empty_table(dao, record_path):
    """Ensure a missing record is created (with its directory) and loads as {}."""
    assert not record_path.exists()

    assert dao.load() == {}
    assert record_path.exists()
    assert json.loads(record_path.read_text()) == {}


def test_load_zero_length_record(dao, record_path):
    """Ensure a zero-length record is an empty table, not a parse failure."""
    record_path.parent.mkdir(parents=True)
    record_path.write_text('')

    assert dao.load() == {}


def test_load_existing_record(dao, record_path):
    record_path.parent.mkdir(parents=True)
    record_path.write_text(json.dumps({'abc123': 'https://example.com', 'docs': '/docs'}))

    assert dao.load() == {'abc123': 'https://example.com', 'docs': '/docs'}


@pytest.mark.parametrize(
    'contents',
    [
        '{"abc123": "https://exa',
        'not json at all',
        '["abc123", "https://example.com"]',
        '"https://example.com"',
        '{"abc123": 42}',
        '   \n',
    ],
)
def test_load_corrupt_record_raises(dao, record_path, contents):
    """Confirm non-empty records that aren't a string->string object raise CorruptStoreError."""
    record_path.parent.mkdir(parents=True)
    record_path.write_text(contents)

    with pytest.raises(CorruptStoreError):
        dao.load()


def test_load_unreadable_record_raises(tmp_path):
    """Confirm OS-level read failures (here: record is a directory) raise StoreUnavailableError."""
    record_path = tmp_path / 'links.json'
    record_path.mkdir()

    with pytest.raises(StoreUnavailableError):
        LinkTableFileDAO(path=record_path).load()


# -------------------------------
# 2. Saving behavior
# -------------------------------


def test_save_then_load(dao):
    table = {'abc123': 'https://example.com/blog/article-123', 'home': '/'}

    assert dao.save(table) is dao
    assert dao.load() == table


def test_save_replaces_record_wholesale(dao, record_path):
    """Ensure save() overwrites the whole record and leaves no temporary files behind."""
    dao.save({'old': 'https://old.example.com'})
    dao.save({'new': 'https://new.example.com'})

    assert json.loads(record_path.read_text()) == {'new': 'https://new.example.com'}
    assert os.listdir(record_path.parent) == ['links.json']


def test_save_load_is_idempotent(dao, record_path):
    """Ensure persisting a just-loaded table doesn't change its observable content."""
    dao.save({'abc123': 'https://example.com', 'ünï': 'https://example.com/ü'})
    before = dao.load()

    dao.save(dao.load())

    assert dao.load() == before


def test_save_failure_keeps_previous_record(dao, record_path, monkeypatch):
    """Confirm a failed rename raises StoreUnavailableError and keeps the old record intact."""
    dao.save({'abc123': 'https://example.com'})

    def failing_replace(src, dst):
        raise OSError('disk full')

    monkeypatch.setattr('linkshortener.dao.file.link_table_file_dao.os.replace', failing_replace)

    with pytest.raises(StoreUnavailableError, match='disk full'):
        dao.save({'abc123': 'https://example.com', 'xyz': 'https://other.example.com'})

    assert json.loads(record_path.read_text()) == {'abc123': 'https://example.com'}
    assert os.listdir(record_path.parent) == ['links.json']


def test_save_with_invalid_type(dao):
    with pytest.raises(BeartypeCallHintParamViolation):
        dao.save(['abc123', 'https://example.com'])
