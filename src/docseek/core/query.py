"""Query normalization."""

from __future__ import annotations

from typing import Sequence

LIST_ALL_QUERY = ""


def normalize_query(tokens: Sequence[str]) -> str:
    """Join raw query tokens into a single search string.

    Tokens are joined with single spaces and otherwise left untouched;
    case handling belongs to the matcher.

    Args:
        tokens: Query words in command-line order

    Returns:
        The search string, or "" (list-all mode) for no tokens
    """
    if isinstance(tokens, str):
        return tokens
    return " ".join(tokens)


def is_list_mode(query: str) -> bool:
    """Return True if ``query`` asks for every entry in the docset."""
    return query == LIST_ALL_QUERY
