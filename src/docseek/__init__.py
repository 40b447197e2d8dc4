"""docseek - fuzzy lookup in local Dash/Zeal documentation sets."""

__version__ = "0.1.0"

# Core search pipeline
from docseek.core import (
    DocseekError,
    DocsetNotFound,
    DocsetSearcher,
    FuzzyMatcher,
    IndexReader,
    IndexRecord,
    RankedResult,
    ResultFormatter,
    ScoredCandidate,
    StoreUnavailable,
    normalize_query,
    rank,
)

# Docsets
from docseek.docsets import Docset, find_docset, list_docsets, resolve_docsets_dir

# Config
from docseek.utils.config import Config, get_config, load_config

__all__ = [
    # Version
    "__version__",
    # Core
    "DocsetSearcher",
    "FuzzyMatcher",
    "IndexReader",
    "IndexRecord",
    "RankedResult",
    "ResultFormatter",
    "ScoredCandidate",
    "normalize_query",
    "rank",
    # Errors
    "DocseekError",
    "DocsetNotFound",
    "StoreUnavailable",
    # Docsets
    "Docset",
    "find_docset",
    "list_docsets",
    "resolve_docsets_dir",
    # Config
    "Config",
    "get_config",
    "load_config",
]
