"""Read-only access to a docset's SQLite search index."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, Optional

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import URL, Connection, Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import NullPool

from docseek.core.exceptions import StoreUnavailable
from docseek.core.records import IndexRecord
from docseek.utils.logging import get_logger

logger = get_logger(__name__)

INDEX_RELATIVE_PATH = Path("Contents/Resources/docSet.dsidx")
DOCUMENTS_RELATIVE_PATH = Path("Contents/Resources/Documents")
INDEX_TABLE = "searchIndex"

_SELECT_ALL = "SELECT name, type, path FROM searchIndex"
_SELECT_LIKE = (
    "SELECT name, type, path FROM searchIndex "
    "WHERE name LIKE :pattern ESCAPE '\\'"
)
_TABLE_EXISTS = "SELECT 1 FROM sqlite_master WHERE type IN ('table', 'view') AND name = :name"


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so ``value`` is matched literally.

    Args:
        value: Raw substring

    Returns:
        Escaped value for use with ``ESCAPE '\\'``
    """
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _decode_text(raw: bytes) -> str:
    # Invalid UTF-8 in the index must not abort the scan
    return raw.decode("utf-8", errors="replace")


class IndexReader:
    """Scoped, read-only reader over one docset index.

    The store handle exists only between ``__enter__`` and ``__exit__``.
    Rows are projected into IndexRecord without sorting or scoring.

    Example:
        >>> with IndexReader(Path("~/docsets/Python_3.docset")) as reader:
        ...     for record in reader.records(pattern="open"):
        ...         print(record.name)
    """

    def __init__(self, docset_root: Path, docset_name: Optional[str] = None):
        """Initialize reader.

        Args:
            docset_root: Path to the ``<Name>.docset`` directory
            docset_name: Identifier used in errors (defaults to the dir stem)
        """
        self.docset_root = Path(docset_root)
        self.docset_name = docset_name or self.docset_root.stem
        self.index_path = self.docset_root / INDEX_RELATIVE_PATH
        self.skipped_rows = 0

        self._engine: Optional[Engine] = None
        self._connection: Optional[Connection] = None

    def _unavailable(self, reason: str) -> StoreUnavailable:
        return StoreUnavailable(self.docset_name, reason, path=self.index_path)

    def open(self) -> None:
        """Open the index and check that it has a search table.

        Raises:
            StoreUnavailable: If the index is missing, corrupt or unreadable
        """
        if self._connection is not None:
            return

        if not self.index_path.is_file():
            raise self._unavailable(f"index file not found: {self.index_path}")

        url = URL.create(
            "sqlite",
            database=self.index_path.resolve().as_uri(),
            query={"mode": "ro", "uri": "true"},
        )
        self._engine = create_engine(url, poolclass=NullPool)
        event.listen(self._engine, "connect", self._on_connect)

        try:
            self._connection = self._engine.connect()
            found = self._connection.execute(
                text(_TABLE_EXISTS), {"name": INDEX_TABLE}
            ).first()
        except SQLAlchemyError as e:
            self.close()
            raise self._unavailable(str(getattr(e, "orig", None) or e)) from e

        if found is None:
            self.close()
            raise self._unavailable(f"no '{INDEX_TABLE}' table in {self.index_path}")

        logger.debug(f"Opened index {self.index_path}")

    @staticmethod
    def _on_connect(dbapi_connection, connection_record) -> None:
        dbapi_connection.text_factory = _decode_text

    def close(self) -> None:
        """Release the store handle. Safe to call more than once."""
        if self._connection is not None:
            try:
                self._connection.close()
            finally:
                self._connection = None
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None

    def records(self, pattern: Optional[str] = None) -> Iterator[IndexRecord]:
        """Yield index records.

        Args:
            pattern: If None, scan the whole table. Otherwise only rows whose
                name contains ``pattern`` as a substring (ASCII
                case-insensitive, as SQLite's LIKE).

        Yields:
            IndexRecord for each well-formed row

        Raises:
            StoreUnavailable: If the scan fails
        """
        if self._connection is None:
            raise RuntimeError("IndexReader is not open; use it as a context manager")

        if pattern is None:
            statement, params = text(_SELECT_ALL), {}
        else:
            statement = text(_SELECT_LIKE)
            params = {"pattern": f"%{escape_like(pattern)}%"}

        try:
            result = self._connection.execute(statement, params)
            for name, kind, path in result:
                if name is None or kind is None or path is None:
                    self.skipped_rows += 1
                    logger.debug(
                        f"Skipping malformed row in {self.docset_name}: "
                        f"name={name!r}, type={kind!r}, path={path!r}"
                    )
                    continue
                yield IndexRecord(name=str(name), kind=str(kind), relative_path=str(path))
        except SQLAlchemyError as e:
            raise self._unavailable(str(getattr(e, "orig", None) or e)) from e

    def __enter__(self) -> "IndexReader":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"IndexReader({self.index_path})"
