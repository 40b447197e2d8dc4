"""Shared fixtures for docseek tests."""

import sqlite3
from pathlib import Path

import pytest

from docseek.docsets import Docset
from docseek.utils.config import Config, set_config

SAMPLE_ROWS = [
    ("readFile", "function", "fs/readFile.html"),
    ("readdir", "function", "fs/readdir.html"),
    ("ReadStream", "class", "fs/ReadStream.html"),
]


def write_index(index_path: Path, rows, create_table: bool = True) -> Path:
    """Create a docSet.dsidx SQLite file with the given rows."""
    index_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(index_path)
    try:
        if create_table:
            conn.execute(
                "CREATE TABLE searchIndex(id INTEGER PRIMARY KEY, name TEXT, type TEXT, path TEXT)"
            )
            conn.executemany(
                "INSERT INTO searchIndex(name, type, path) VALUES (?, ?, ?)", rows
            )
        else:
            conn.execute("CREATE TABLE other(x TEXT)")
        conn.commit()
    finally:
        conn.close()
    return index_path


@pytest.fixture
def sample_rows():
    return list(SAMPLE_ROWS)


@pytest.fixture
def docsets_dir(tmp_path):
    """Empty docsets directory."""
    path = tmp_path / "docsets"
    path.mkdir()
    return path


@pytest.fixture
def make_docset(docsets_dir):
    """Factory creating ``<name>.docset`` bundles with a search index."""

    def _make(name="NodeJS", rows=SAMPLE_ROWS, create_table=True):
        docset = Docset.in_directory(docsets_dir, name)
        docset.documents_dir.mkdir(parents=True, exist_ok=True)
        write_index(docset.index_path, rows, create_table=create_table)
        return docset

    return _make


@pytest.fixture
def sample_docset(make_docset):
    """NodeJS docset holding SAMPLE_ROWS."""
    return make_docset()


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Fresh default config for every test, without viewer checks or env overrides."""
    monkeypatch.delenv("DOCSEEK_CONFIG", raising=False)
    monkeypatch.delenv("DOCSEEK_DOCSET_DIR", raising=False)

    config = Config()
    config.set("viewer.check", False)
    set_config(config)
    yield config
    set_config(None)
