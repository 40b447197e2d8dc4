"""Business logic for the search command."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence

from docseek.core.exceptions import DocsetsDirectoryError
from docseek.core.formatter import ResultFormatter, build_glyph_table
from docseek.core.query import normalize_query
from docseek.core.records import RankedResult
from docseek.core.search import DocsetSearcher
from docseek.docsets import find_docset, resolve_docsets_dir
from docseek.utils.config import Config
from docseek.utils.logging import get_logger

logger = get_logger(__name__)


class SearchHandler:
    """Handler for search operations.

    Resolves the docset, runs the search pipeline and renders result lines.
    """

    def __init__(self, config: Config):
        """Initialize handler.

        Args:
            config: Configuration instance
        """
        self.config = config

    def resolve_docsets_dir(self, override: Optional[Path] = None) -> Path:
        """Resolve the docsets directory or fail.

        Raises:
            DocsetsDirectoryError: If no directory can be determined
        """
        docsets_dir = resolve_docsets_dir(override, config=self.config)
        if docsets_dir is None:
            raise DocsetsDirectoryError(
                None, "docsets directory not found; pass --docset-dir"
            )
        return docsets_dir

    def search(
        self,
        docset_name: str,
        query_tokens: Sequence[str],
        docsets_dir: Optional[Path] = None,
    ) -> RankedResult:
        """Search a docset by name.

        Args:
            docset_name: Docset name without the .docset suffix
            query_tokens: Query words; none lists every entry
            docsets_dir: Optional docsets directory override

        Returns:
            RankedResult

        Raises:
            DocsetNotFound: If the docset does not exist
            StoreUnavailable: If its index cannot be read
        """
        base_dir = self.resolve_docsets_dir(docsets_dir)
        docset = find_docset(base_dir, docset_name)
        query = normalize_query(query_tokens)

        logger.info(f"Searching '{query}' in {docset.path}")

        searcher = DocsetSearcher.from_config(self.config)
        return searcher.search(docset, query)

    def build_formatter(self, decorate: Optional[bool] = None) -> ResultFormatter:
        """Create a result formatter from the ``output`` config section.

        Args:
            decorate: Glyph decoration; None falls back to ``output.icons``
        """
        if decorate is None:
            decorate = bool(self.config.get("output.icons", False))

        return ResultFormatter(
            decorate=decorate,
            glyphs=build_glyph_table(self.config.get("output.glyphs")),
            delimiter=self.config.get("output.delimiter", "\t"),
            color=bool(self.config.get("output.color", True)),
        )

    def format_results(
        self, result: RankedResult, decorate: Optional[bool] = None
    ) -> List[str]:
        """Render a ranked result as output lines."""
        return self.build_formatter(decorate).format_all(result)
