"""Tests for result ordering."""

from itertools import permutations
from pathlib import Path

from docseek.core.ranker import list_mode_key, rank
from docseek.core.records import LIST_MODE_SCORE, IndexRecord, ScoredCandidate


def candidate(name, score=LIST_MODE_SCORE, kind="function", path=None):
    record = IndexRecord(name=name, kind=kind, relative_path=path or f"{name}.html")
    return ScoredCandidate(
        record=record, score=score, resolved_path=Path("/docs") / record.relative_path
    )


def names(ranked):
    return [c.name for c in ranked]


def test_list_mode_is_case_insensitive_by_name():
    base = [candidate("readFile"), candidate("readdir"), candidate("ReadStream")]

    for order in permutations(base):
        assert names(rank(order, list_mode=True)) == [
            "readdir",
            "readFile",
            "ReadStream",
        ]


def test_list_mode_breaks_case_ties_deterministically():
    upper, lower = candidate("Foo"), candidate("foo")

    assert names(rank([lower, upper], list_mode=True)) == ["Foo", "foo"]
    assert names(rank([upper, lower], list_mode=True)) == ["Foo", "foo"]


def test_list_mode_key_orders_duplicates_by_kind_and_path():
    a = candidate("open", kind="function", path="b.html")
    b = candidate("open", kind="Method", path="a.html")
    c = candidate("open", kind="function", path="a.html")

    ranked = rank([a, b, c], list_mode=True)

    assert [(x.kind, x.record.relative_path) for x in ranked] == [
        ("Method", "a.html"),
        ("function", "a.html"),
        ("function", "b.html"),
    ]
    assert list_mode_key(a)[0] == "open"


def test_fuzzy_mode_sorts_by_descending_score():
    ranked = rank(
        [candidate("low", 10), candidate("high", 90), candidate("mid", 50)],
        list_mode=False,
    )

    assert names(ranked) == ["high", "mid", "low"]
    scores = [c.score for c in ranked]
    assert scores == sorted(scores, reverse=True)


def test_fuzzy_ties_keep_index_order():
    ranked = rank(
        [candidate("first", 20), candidate("second", 20), candidate("best", 30)],
        list_mode=False,
    )

    assert names(ranked) == ["best", "first", "second"]


def test_empty_input():
    assert rank([], list_mode=True) == ()
    assert rank(iter([]), list_mode=False) == ()
