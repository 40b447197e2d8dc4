"""Final ordering of scored candidates."""

from __future__ import annotations

from typing import Iterable, Tuple

from docseek.core.records import ScoredCandidate


def list_mode_key(candidate: ScoredCandidate) -> Tuple[str, str, str, str]:
    """Total order for list mode: case-insensitive name, then exact name."""
    record = candidate.record
    return (record.name.casefold(), record.name, record.kind, record.relative_path)


def rank(
    candidates: Iterable[ScoredCandidate], list_mode: bool
) -> Tuple[ScoredCandidate, ...]:
    """Order candidates for output.

    List mode sorts by name ignoring case. Fuzzy mode sorts by descending
    score; ``sorted`` is stable, so equal scores keep the order in which
    the index produced them.

    Args:
        candidates: Scored candidates in index enumeration order
        list_mode: True when the query was empty

    Returns:
        Ranked candidates, best first (empty tuple for no candidates)
    """
    if list_mode:
        return tuple(sorted(candidates, key=list_mode_key))
    return tuple(sorted(candidates, key=lambda c: c.score, reverse=True))
