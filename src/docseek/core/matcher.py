"""Fuzzy subsequence matching and scoring of index entry names.

Scores follow the usual "fuzzy finder" model: every query character must
appear in order in the name, and the best alignment is chosen by a small
dynamic program that rewards contiguous runs and matches at word or
camelCase boundaries, and charges for gaps. Shorter names receive a small
bonus over longer ones with the same alignment.

The matcher is immutable and all scoring functions are pure, so
candidates can be scored from several threads at once.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterable, List, Optional, Sequence

from docseek.core.records import LIST_MODE_SCORE

SCORE_MATCH = 16
SCORE_GAP_START = -3
SCORE_GAP_EXTENSION = -1

BONUS_BOUNDARY = SCORE_MATCH // 2
BONUS_NON_WORD = SCORE_MATCH // 2
BONUS_CAMEL = BONUS_BOUNDARY + SCORE_GAP_EXTENSION
BONUS_CONSECUTIVE = -(SCORE_GAP_START + SCORE_GAP_EXTENSION)
BONUS_FIRST_CHAR_MULTIPLIER = 2

# One point off per this many unmatched name characters
LENGTH_PENALTY_STEP = 4


class CaseMatching(str, Enum):
    """How letter case is compared."""

    SMART = "smart"  # ignore case unless the query contains an uppercase letter
    IGNORE = "ignore"
    RESPECT = "respect"


class CharClass(IntEnum):
    NON_WORD = 0
    LOWER = 1
    UPPER = 2
    NUMBER = 3


def char_class(ch: str) -> CharClass:
    """Classify a single character for boundary bonuses."""
    if ch.isdigit():
        return CharClass.NUMBER
    if ch.isupper():
        return CharClass.UPPER
    if ch.isalpha():
        return CharClass.LOWER
    return CharClass.NON_WORD


def position_bonus(prev: CharClass, cur: CharClass) -> int:
    """Bonus for matching a character of class ``cur`` preceded by ``prev``."""
    if prev == CharClass.NON_WORD and cur != CharClass.NON_WORD:
        return BONUS_BOUNDARY
    if (prev == CharClass.LOWER and cur == CharClass.UPPER) or (
        prev != CharClass.NUMBER and cur == CharClass.NUMBER
    ):
        return BONUS_CAMEL
    if cur == CharClass.NON_WORD:
        return BONUS_NON_WORD
    return 0


def _fold(ch: str) -> str:
    # Keep one character per position, even where lower() would expand it
    lowered = ch.lower()
    return lowered if len(lowered) == 1 else ch


@dataclass(frozen=True)
class FuzzyMatcher:
    """Stateless fuzzy matcher.

    Attributes:
        case: Case matching policy
    """

    case: CaseMatching = CaseMatching.SMART

    @classmethod
    def from_config(cls, case: Optional[str]) -> "FuzzyMatcher":
        """Build a matcher from a config value ("smart", "ignore", "respect")."""
        if not case:
            return cls()
        try:
            return cls(case=CaseMatching(str(case).lower()))
        except ValueError:
            valid = ", ".join(c.value for c in CaseMatching)
            raise ValueError(
                f"Invalid search.case '{case}' (expected one of: {valid})"
            ) from None

    def ignores_case(self, query: str) -> bool:
        if self.case is CaseMatching.IGNORE:
            return True
        if self.case is CaseMatching.RESPECT:
            return False
        return not any(ch.isupper() for ch in query)

    def score(self, query: str, name: str) -> Optional[int]:
        """Score ``name`` against ``query``.

        Args:
            query: Normalized query; "" means list mode
            name: Candidate name

        Returns:
            LIST_MODE_SCORE for an empty query, None when the query is not
            an ordered subsequence of the name, otherwise the best
            alignment score (higher is better)
        """
        if not query:
            return LIST_MODE_SCORE

        if self.ignores_case(query):
            pattern = [_fold(ch) for ch in query]
            text = [_fold(ch) for ch in name]
        else:
            pattern = list(query)
            text = list(name)

        m, n = len(pattern), len(text)
        if m > n:
            return None

        bounds = _alignment_bounds(pattern, text)
        if bounds is None:
            return None
        lo, hi = bounds

        bonuses = _bonuses(name)
        best = _best_alignment(pattern, text, bonuses, lo, hi)
        if best is None:
            return None

        return best - (n - m) // LENGTH_PENALTY_STEP

    def matches(self, query: str, name: str) -> bool:
        return self.score(query, name) is not None

    def score_many(self, query: str, names: Iterable[str]) -> List[Optional[int]]:
        """Score a batch of names in order."""
        return [self.score(query, name) for name in names]


def _bonuses(name: str) -> List[int]:
    bonuses = []
    prev = CharClass.NON_WORD
    for ch in name:
        cur = char_class(ch)
        bonuses.append(position_bonus(prev, cur))
        prev = cur
    return bonuses


def _alignment_bounds(pattern: Sequence[str], text: Sequence[str]):
    """Earliest and latest position each pattern character can occupy.

    Returns None when the pattern is not a subsequence of the text.
    """
    m, n = len(pattern), len(text)

    lo = []
    j = 0
    for ch in pattern:
        while j < n and text[j] != ch:
            j += 1
        if j == n:
            return None
        lo.append(j)
        j += 1

    hi = [0] * m
    j = n - 1
    for i in range(m - 1, -1, -1):
        while text[j] != pattern[i]:
            j -= 1
        hi[i] = j
        j -= 1

    return lo, hi


def _best_alignment(
    pattern: Sequence[str],
    text: Sequence[str],
    bonuses: Sequence[int],
    lo: Sequence[int],
    hi: Sequence[int],
) -> Optional[int]:
    """Best alignment score of pattern in text (None if no alignment).

    ``scores[j]`` holds the best score with the current pattern character
    matched at text position ``j``; ``runs[j]`` the bonus carried by the
    contiguous run ending there.
    """
    n = len(text)
    prev_scores: List[Optional[int]] = [None] * n
    prev_runs = [0] * n

    for i, ch in enumerate(pattern):
        scores: List[Optional[int]] = [None] * n
        runs = [0] * n
        gap_best: Optional[int] = None
        start = lo[i] if i == 0 else lo[i - 1] + 1

        for j in range(start, hi[i] + 1):
            if i > 0:
                # best score ending at or before j - 2, paying for the gap to j
                if gap_best is not None:
                    gap_best += SCORE_GAP_EXTENSION
                if j >= 2 and prev_scores[j - 2] is not None:
                    opened = prev_scores[j - 2] + SCORE_GAP_START
                    if gap_best is None or opened > gap_best:
                        gap_best = opened

            if j < lo[i] or text[j] != ch:
                continue

            bonus = bonuses[j]
            if i == 0:
                scores[j] = SCORE_MATCH + bonus * BONUS_FIRST_CHAR_MULTIPLIER
                runs[j] = bonus
                continue

            best: Optional[int] = None
            run = bonus
            if gap_best is not None:
                best = gap_best + SCORE_MATCH + bonus

            if prev_scores[j - 1] is not None:
                run_bonus = prev_runs[j - 1]
                if bonus >= BONUS_BOUNDARY and bonus > run_bonus:
                    run_bonus = bonus
                consecutive = prev_scores[j - 1] + SCORE_MATCH + max(
                    run_bonus, bonus, BONUS_CONSECUTIVE
                )
                if best is None or consecutive >= best:
                    best = consecutive
                    run = run_bonus

            scores[j] = best
            runs[j] = run

        prev_scores, prev_runs = scores, runs

    final = [s for s in prev_scores if s is not None]
    return max(final) if final else None
