"""Search pipeline: index scan, scoring and ranking for one docset."""

from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor
from itertools import chain
from typing import TYPE_CHECKING, List, Optional, Sequence

from docseek.core.index_reader import IndexReader
from docseek.core.matcher import FuzzyMatcher
from docseek.core.query import is_list_mode
from docseek.core.ranker import rank
from docseek.core.records import RankedResult, ScoredCandidate
from docseek.utils.config import Config
from docseek.utils.logging import get_logger
from docseek.utils.timing import TimingContext

if TYPE_CHECKING:
    from docseek.docsets.docset import Docset

logger = get_logger(__name__)

DEFAULT_PARALLEL_THRESHOLD = 5000


class DocsetSearcher:
    """Runs a query against a single docset.

    The whole pipeline runs inside one ``search`` call: the index is read
    completely, then scored, then ranked. Errors surface before any result
    exists, so callers never see partial output.

    Attributes:
        matcher: Fuzzy matcher used in fuzzy mode
        prefilter: Narrow fuzzy candidates with a substring LIKE first
        max_workers: Worker threads for scoring (1 disables the pool)
        parallel_threshold: Minimum candidates before the pool is used
    """

    def __init__(
        self,
        matcher: Optional[FuzzyMatcher] = None,
        prefilter: bool = True,
        max_workers: Optional[int] = None,
        parallel_threshold: int = DEFAULT_PARALLEL_THRESHOLD,
    ):
        """Initialize searcher.

        Args:
            matcher: Fuzzy matcher (defaults to smart-case matching)
            prefilter: Apply the LIKE pre-filter before fuzzy scoring
            max_workers: Worker threads for scoring (default: CPU count)
            parallel_threshold: Minimum candidate count for parallel scoring
        """
        self.matcher = matcher or FuzzyMatcher()
        self.prefilter = prefilter
        self.max_workers = max_workers or os.cpu_count() or 1
        self.parallel_threshold = parallel_threshold

    @classmethod
    def from_config(cls, config: Config) -> "DocsetSearcher":
        """Build a searcher from the ``search`` config section."""
        return cls(
            matcher=FuzzyMatcher.from_config(config.get("search.case", "smart")),
            prefilter=bool(config.get("search.prefilter", True)),
            max_workers=config.get("search.max_workers"),
            parallel_threshold=int(
                config.get("search.parallel_threshold", DEFAULT_PARALLEL_THRESHOLD)
            ),
        )

    def search(self, docset: Docset, query: str) -> RankedResult:
        """Search a docset.

        Args:
            docset: Docset to search
            query: Normalized query ("" lists every entry)

        Returns:
            RankedResult (possibly empty)

        Raises:
            StoreUnavailable: If the index cannot be opened or read
        """
        list_mode = is_list_mode(query)
        pattern = None if list_mode or not self.prefilter else query

        with IndexReader(docset.path, docset_name=docset.name) as reader:
            with TimingContext(f"scan {docset.name}"):
                records = list(reader.records(pattern=pattern))
            if reader.skipped_rows:
                logger.info(
                    f"Skipped {reader.skipped_rows} malformed rows in {docset.name}"
                )

        logger.debug(
            f"Read {len(records)} candidates from {docset.name} "
            f"(mode={'list' if list_mode else 'fuzzy'}, prefilter={pattern is not None})"
        )

        with TimingContext(f"score {len(records)} candidates"):
            if list_mode:
                scores: List[Optional[int]] = [
                    self.matcher.score(query, r.name) for r in records
                ]
            else:
                scores = self.score_all(query, [r.name for r in records])

        documents_dir = docset.documents_dir
        candidates = [
            ScoredCandidate(
                record=record,
                score=score,
                resolved_path=documents_dir / record.relative_path,
            )
            for record, score in zip(records, scores)
            if score is not None
        ]

        with TimingContext("rank"):
            ranked = rank(candidates, list_mode=list_mode)

        return RankedResult(
            docset=docset.name, query=query, candidates=ranked, scanned=len(records)
        )

    def score_all(self, query: str, names: Sequence[str]) -> List[Optional[int]]:
        """Score names against the query, keeping their order.

        Large batches are split into chunks and scored on a thread pool.
        ``Executor.map`` yields chunk results in submission order, so the
        output is identical to sequential scoring.

        Args:
            query: Non-empty query
            names: Candidate names in index order

        Returns:
            One score (or None for no match) per name, in input order
        """
        if self.max_workers <= 1 or len(names) < self.parallel_threshold:
            return self.matcher.score_many(query, names)

        chunk_size = -(-len(names) // self.max_workers)
        chunks = [names[i : i + chunk_size] for i in range(0, len(names), chunk_size)]

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            results = executor.map(
                lambda chunk: self.matcher.score_many(query, chunk), chunks
            )
            return list(chain.from_iterable(results))


def search_docset(
    docset: Docset, query: str, searcher: Optional[DocsetSearcher] = None
) -> RankedResult:
    """Convenience wrapper around DocsetSearcher.search."""
    return (searcher or DocsetSearcher()).search(docset, query)
