"""Business logic for docset listing."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from docseek.docsets import check_viewer, list_docsets, resolve_docsets_dir
from docseek.utils.config import Config


class DocsetHandler:
    """Handler for docset discovery and environment checks."""

    def __init__(self, config: Config):
        """Initialize handler.

        Args:
            config: Configuration instance
        """
        self.config = config

    def list_docsets(self, docsets_dir: Optional[Path] = None) -> List[str]:
        """List installed docset names.

        Args:
            docsets_dir: Optional docsets directory override

        Returns:
            Sorted docset names (empty when no directory can be found)
        """
        base_dir = resolve_docsets_dir(docsets_dir, config=self.config)
        if base_dir is None:
            return []
        return list_docsets(base_dir)

    def missing_viewer(self) -> Optional[str]:
        """Return the viewer binary name if checking is enabled and it is missing."""
        if not self.config.get("viewer.check", True):
            return None
        binary = self.config.get("viewer.binary", "zeal")
        return None if check_viewer(binary) else binary
