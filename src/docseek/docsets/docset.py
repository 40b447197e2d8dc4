"""Docset bundles on disk."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List

from docseek.core.exceptions import DocsetNotFound, DocsetsDirectoryError
from docseek.core.index_reader import DOCUMENTS_RELATIVE_PATH, INDEX_RELATIVE_PATH
from docseek.utils.logging import get_logger
from docseek.utils.timing import timed

logger = get_logger(__name__)

DOCSET_SUFFIX = ".docset"


@dataclass(frozen=True)
class Docset:
    """An installed docset.

    Attributes:
        name: Docset name without the ``.docset`` suffix
        path: Path to the ``<name>.docset`` directory
    """

    name: str
    path: Path

    @property
    def index_path(self) -> Path:
        return self.path / INDEX_RELATIVE_PATH

    @property
    def documents_dir(self) -> Path:
        return self.path / DOCUMENTS_RELATIVE_PATH

    def exists(self) -> bool:
        return self.path.is_dir()

    @classmethod
    def in_directory(cls, docsets_dir: Path, name: str) -> "Docset":
        return cls(name=name, path=Path(docsets_dir) / f"{name}{DOCSET_SUFFIX}")


@timed("list_docsets")
def list_docsets(docsets_dir: Path) -> List[str]:
    """List installed docset names.

    Every subdirectory counts, named by its stem (``Python_3.docset`` ->
    ``Python_3``). Names are sorted for stable output.

    Args:
        docsets_dir: Directory holding the docsets

    Returns:
        Sorted docset names (empty if the directory does not exist)

    Raises:
        DocsetsDirectoryError: If the directory exists but cannot be read
    """
    docsets_dir = Path(docsets_dir)
    if not docsets_dir.exists():
        logger.info(f"Docsets directory does not exist: {docsets_dir}")
        return []

    try:
        names = [entry.stem for entry in docsets_dir.iterdir() if entry.is_dir()]
    except OSError as e:
        raise DocsetsDirectoryError(docsets_dir, str(e)) from e

    return sorted(names)


def find_docset(docsets_dir: Path, name: str) -> Docset:
    """Locate a docset by name.

    Args:
        docsets_dir: Directory holding the docsets
        name: Docset name without suffix

    Returns:
        Docset

    Raises:
        DocsetNotFound: If ``<docsets_dir>/<name>.docset`` is not a directory
    """
    docset = Docset.in_directory(docsets_dir, name)
    if not docset.exists():
        raise DocsetNotFound(name, docset.path)
    return docset
