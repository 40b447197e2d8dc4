"""Exception types raised by docseek."""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class DocseekError(Exception):
    """Base class for all docseek errors."""


class StoreUnavailable(DocseekError):
    """The docset index could not be opened or read.

    Raised for a missing, corrupt or unreadable ``docSet.dsidx``. Always
    raised before any result is produced.
    """

    def __init__(self, docset: str, reason: str, path: Optional[Path] = None):
        self.docset = docset
        self.reason = reason
        self.path = path
        super().__init__(f"index for docset '{docset}' is unavailable: {reason}")


class DocsetNotFound(DocseekError):
    """No docset with the requested name exists in the docsets directory."""

    def __init__(self, name: str, path: Path):
        self.name = name
        self.path = path
        super().__init__(f"Docset '{name}' not found at {path}")


class DocsetsDirectoryError(DocseekError):
    """The docsets directory could not be listed."""

    def __init__(self, path: Optional[Path], reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot list docsets in {path}: {reason}")
