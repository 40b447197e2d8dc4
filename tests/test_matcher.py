"""Tests for fuzzy matching and scoring."""

import pytest

from docseek.core.matcher import (
    BONUS_BOUNDARY,
    BONUS_CAMEL,
    CaseMatching,
    CharClass,
    FuzzyMatcher,
    char_class,
    position_bonus,
)
from docseek.core.records import LIST_MODE_SCORE


def is_subsequence(query, name):
    it = iter(name.casefold())
    return all(ch in it for ch in query.casefold())


@pytest.fixture
def matcher():
    return FuzzyMatcher()


def test_empty_query_is_list_mode(matcher):
    """Every name matches an empty query with the same score."""
    assert matcher.score("", "readFile") == LIST_MODE_SCORE
    assert matcher.score("", "") == LIST_MODE_SCORE


def test_non_subsequence_is_excluded(matcher):
    """Names without an ordered alignment get no score at all."""
    assert matcher.score("readf", "readdir") is None
    assert matcher.score("readf", "ReadStream") is None
    assert matcher.score("fr", "readFile") is None
    assert matcher.score("longer than name", "short") is None


def test_readf_example(matcher):
    scores = {
        name: matcher.score("readf", name)
        for name in ["readFile", "readdir", "ReadStream"]
    }

    assert scores["readFile"] is not None
    assert scores["readdir"] is None
    assert scores["ReadStream"] is None


@pytest.mark.parametrize(
    "query, others",
    [
        ("read", ["r_e_a_d", "rxexaxd", "Re_Ad", "rea_X_d"]),
        ("ab", ["a_b", "aXb", "a.b", "a__B"]),
        ("readFile", ["read_File", "readXFile", "r.e.a.d.F.i.l.e"]),
    ],
)
def test_exact_match_outscores_scattered_matches(matcher, query, others):
    """An exact name is never beaten by a non-contiguous alignment."""
    exact = matcher.score(query, query)
    for other in others:
        score = matcher.score(query, other)
        if score is not None:
            assert exact > score, other


def test_consecutive_run_beats_gaps(matcher):
    assert matcher.score("abc", "abcxx") > matcher.score("abc", "axbxc")


def test_word_boundary_bonus(matcher):
    assert matcher.score("fb", "foo_bar") > matcher.score("fb", "foobar")


def test_camel_case_bonus(matcher):
    assert matcher.score("rs", "ReadStream") > matcher.score("rs", "readstream")


def test_shorter_name_preferred(matcher):
    assert matcher.score("abc", "abc") > matcher.score("abc", "abcdefghijkl")


def test_smart_case(matcher):
    """Lowercase queries ignore case; an uppercase letter makes it case-sensitive."""
    assert matcher.score("rs", "ReadStream") is not None
    assert matcher.score("RS", "ReadStream") is not None
    assert matcher.score("RS", "readstream") is None


def test_ignore_and_respect_case():
    ignore = FuzzyMatcher(case=CaseMatching.IGNORE)
    respect = FuzzyMatcher(case=CaseMatching.RESPECT)

    assert ignore.score("RS", "readstream") is not None
    assert respect.score("rs", "ReadStream") is None
    assert respect.score("RS", "ReadStream") is not None


def test_from_config():
    assert FuzzyMatcher.from_config(None).case is CaseMatching.SMART
    assert FuzzyMatcher.from_config("IGNORE").case is CaseMatching.IGNORE

    with pytest.raises(ValueError):
        FuzzyMatcher.from_config("sometimes")


@pytest.mark.parametrize(
    "name",
    ["a\x00b", "a\ufffdb", "\x1b[31mab", "ab\n", "\u0130stanbul ab", "a\u200bb"],
)
def test_odd_characters_do_not_crash(matcher, name):
    score = matcher.score("ab", name)
    assert score is not None
    assert isinstance(score, int)


def test_control_characters_in_query(matcher):
    assert matcher.score("a\x00b", "xa\x00b") is not None
    assert matcher.score("\x00", "ab") is None


def test_score_many_keeps_order(matcher):
    names = ["readdir", "readFile", "ReadStream", "fs.readFileSync"]
    scores = matcher.score_many("readf", names)

    assert len(scores) == len(names)
    assert scores[0] is None
    assert scores[1] is not None
    assert scores[2] is None
    assert scores[3] is not None
    assert scores == [matcher.score("readf", n) for n in names]


def test_matches_are_subsequences(matcher):
    names = ["readFile", "fs.readdir", "Buffer.alloc", "read_file", "rEaDf"]
    for query in ["rf", "read", "buf", "fsr", "ac"]:
        for name in names:
            if matcher.matches(query, name):
                assert is_subsequence(query, name)


def test_score_is_deterministic(matcher):
    assert matcher.score("rdf", "readFile") == matcher.score("rdf", "readFile")


def test_char_classes_and_bonuses():
    assert char_class("a") == CharClass.LOWER
    assert char_class("A") == CharClass.UPPER
    assert char_class("7") == CharClass.NUMBER
    assert char_class("_") == CharClass.NON_WORD
    assert char_class("\x00") == CharClass.NON_WORD

    assert position_bonus(CharClass.NON_WORD, CharClass.LOWER) == BONUS_BOUNDARY
    assert position_bonus(CharClass.LOWER, CharClass.UPPER) == BONUS_CAMEL
    assert position_bonus(CharClass.LOWER, CharClass.NUMBER) == BONUS_CAMEL
    assert position_bonus(CharClass.LOWER, CharClass.LOWER) == 0
