import pytest

from inglish_scoring.alignment.edit_distance import levenshtein_distance
from inglish_scoring.scorer import similarity
from inglish_scoring.scorer.similarity import levenshtein, similarity_percent

PAIRS = [
    ("Hello, world!", "hello world"),
    ("cat", "dog"),
    ("I like apples", "I like apple"),
    ("", "something"),
    ("kitten", "sitting"),
    ("The quick brown fox", "a quick brown box jumps"),
]


def test_levenshtein_distance():
    assert levenshtein_distance("kitten", "sitting") == 3
    assert levenshtein_distance("", "abc") == 3
    assert levenshtein_distance("abc", "") == 3
    assert levenshtein_distance("same", "same") == 0


def test_levenshtein_normalizes_first():
    assert levenshtein("Hello, World!", "hello world") == 0
    assert levenshtein(None, "ab") == 2


def test_perfect_match_ignores_case_and_punctuation():
    assert similarity_percent("Hello, world!", "hello world") == 100.0


def test_both_empty_is_perfect():
    assert similarity_percent("", "") == 100.0
    assert similarity_percent(None, "?!") == 100.0


def test_total_mismatch_is_zero_not_negative():
    assert similarity_percent("cat", "dog") == 0.0
    assert similarity_percent("abc", "") == 0.0


def test_partial_match():
    assert similarity_percent("abcd", "abce") == pytest.approx(75.0)


@pytest.mark.parametrize("a, b", PAIRS)
def test_symmetric_and_in_range(a, b):
    score = similarity_percent(a, b)
    assert score == similarity_percent(b, a)
    assert 0.0 <= score <= 100.0


def test_long_input_is_truncated(monkeypatch, caplog):
    monkeypatch.setattr(similarity, "MAX_SIMILARITY_CHARS", 3)
    with caplog.at_level("WARNING"):
        assert similarity_percent("abcdef", "abcxyz") == 100.0
    assert "Truncating" in caplog.text
