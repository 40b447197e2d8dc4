"""Search-and-rank core: index reading, fuzzy scoring, ranking and formatting."""

from docseek.core.exceptions import (
    DocseekError,
    DocsetNotFound,
    DocsetsDirectoryError,
    StoreUnavailable,
)
from docseek.core.records import (
    LIST_MODE_SCORE,
    IndexRecord,
    RankedResult,
    ScoredCandidate,
)
from docseek.core.index_reader import IndexReader
from docseek.core.query import is_list_mode, normalize_query
from docseek.core.matcher import CaseMatching, FuzzyMatcher
from docseek.core.ranker import rank
from docseek.core.formatter import (
    DEFAULT_GLYPHS,
    Glyph,
    Kind,
    ResultFormatter,
    build_glyph_table,
)
from docseek.core.search import DocsetSearcher, search_docset

__all__ = [
    "DocseekError",
    "DocsetNotFound",
    "DocsetsDirectoryError",
    "StoreUnavailable",
    "LIST_MODE_SCORE",
    "IndexRecord",
    "RankedResult",
    "ScoredCandidate",
    "IndexReader",
    "is_list_mode",
    "normalize_query",
    "CaseMatching",
    "FuzzyMatcher",
    "rank",
    "DEFAULT_GLYPHS",
    "Glyph",
    "Kind",
    "ResultFormatter",
    "build_glyph_table",
    "DocsetSearcher",
    "search_docset",
]
