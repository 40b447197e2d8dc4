"""Record and result data structures."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Tuple

# Score given to every candidate when the query is empty
LIST_MODE_SCORE = 0


@dataclass(frozen=True)
class IndexRecord:
    """One row of a docset's search index.

    Attributes:
        name: Symbol or page name
        kind: Entry type as stored (e.g. "Function", "Class", "Guide")
        relative_path: Document path relative to the docset's Documents dir
    """

    name: str
    kind: str
    relative_path: str


@dataclass(frozen=True)
class ScoredCandidate:
    """An index record that matched the query.

    Attributes:
        record: Source record
        score: Fuzzy score (higher is better) or LIST_MODE_SCORE
        resolved_path: Documents dir joined with the record's relative path
    """

    record: IndexRecord
    score: int
    resolved_path: Path

    @property
    def name(self) -> str:
        return self.record.name

    @property
    def kind(self) -> str:
        return self.record.kind

    def __repr__(self) -> str:
        return f"ScoredCandidate(name={self.record.name!r}, kind={self.record.kind!r}, score={self.score})"


@dataclass(frozen=True)
class RankedResult:
    """Ordered search results for one query against one docset.

    Attributes:
        docset: Docset name the results came from
        query: Normalized query ("" for list mode)
        candidates: Ranked candidates, best first
        scanned: Number of records read from the index
    """

    docset: str
    query: str
    candidates: Tuple[ScoredCandidate, ...]
    scanned: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.candidates

    def __len__(self) -> int:
        return len(self.candidates)

    def __iter__(self) -> Iterator[ScoredCandidate]:
        return iter(self.candidates)
