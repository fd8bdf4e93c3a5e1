import pytest

from inglish_scoring.alignment import aligner
from inglish_scoring.alignment.aligner import compare_words
from inglish_scoring.alignment.edit_distance import align_sequences
from inglish_scoring.models import AlignmentStep, TranscribedWord


def words(*tokens, confidence=0.9):
    return [{"word": t, "confidence": confidence} for t in tokens]


def verdicts(results):
    return [(r.word, r.is_correct) for r in results]


def test_exact_match():
    results = compare_words("I like apples", words("I", "like", "apples"))
    assert verdicts(results) == [("I", True), ("like", True), ("apples", True)]
    assert all(r.confidence == 0.9 for r in results)


def test_substitution():
    results = compare_words("I like apples", [{"word": "I"}, {"word": "hate"}, {"word": "apples"}])
    assert verdicts(results) == [("I", True), ("hate", False), ("apples", True)]
    assert [r.confidence for r in results] == [0.0, 0.0, 0.0]


def test_insertion():
    results = compare_words("I like apples", words("I", "really", "like", "apples"))
    assert verdicts(results) == [("I", True), ("really", False), ("like", True), ("apples", True)]


def test_deletion():
    results = compare_words("I really like apples", words("I", "like", "apples"))
    assert verdicts(results) == [("I", True), ("like", True), ("apples", True)]


def test_original_casing_and_punctuation_kept_in_output():
    results = compare_words("hello world", words("Hello,", "WORLD!"))
    assert verdicts(results) == [("Hello,", True), ("WORLD!", True)]


def test_empty_transcription():
    assert compare_words("anything", []) == []
    assert compare_words("anything", None) == []


def test_no_usable_words_marks_everything_incorrect():
    results = compare_words("hello", [{"word": "..."}, {"word": "", "confidence": 0.4}])
    assert verdicts(results) == [("...", False), ("", False)]
    assert [r.confidence for r in results] == [0.0, 0.4]


def test_malformed_entries_default_fields():
    results = compare_words("I like", [{"word": "I"}, {"confidence": "high"}])
    assert verdicts(results) == [("I", True), ("", False)]
    assert [r.confidence for r in results] == [0.0, 0.0]


def test_indices_refer_to_usable_words():
    results = compare_words("I like", words("I", "--", "like"))
    assert [r.is_correct for r in results] == [True, True, False]


def test_accepts_transcribed_word_objects():
    results = compare_words("good morning", [TranscribedWord("Good", 0.8), TranscribedWord("evening", 0.5)])
    assert verdicts(results) == [("Good", True), ("evening", False)]
    assert results[1].confidence == 0.5


def test_repeated_reference_word_aligns_to_last_occurrence():
    assert align_sequences(["the", "the"], ["the"]) == [
        AlignmentStep("del", 0, None),
        AlignmentStep("match", 1, 0),
    ]
    assert [r.is_correct for r in compare_words("the the", words("the"))] == [True]


def test_diagonal_preferred_over_deletion_on_ties():
    assert align_sequences(["a", "b"], ["c"]) == [
        AlignmentStep("del", 0, None),
        AlignmentStep("sub", 1, 0),
    ]


def test_alignment_covers_every_token():
    steps = align_sequences(["i", "like", "red", "apples"], ["i", "love", "apples", "too"])
    assert sorted(s.hyp_index for s in steps if s.hyp_index is not None) == [0, 1, 2, 3]
    assert sorted(s.ref_index for s in steps if s.ref_index is not None) == [0, 1, 2, 3]


def test_alignment_of_empty_sequences():
    assert align_sequences([], []) == []
    assert align_sequences(["a"], []) == [AlignmentStep("del", 0, None)]
    assert align_sequences([], ["a"]) == [AlignmentStep("ins", None, 0)]


@pytest.mark.parametrize(
    "reference, spoken",
    [
        ("I like apples", ("I", "like", "apples")),
        ("She sells sea shells", ("she", "sells", "she", "shells", "by")),
        ("one two", ("three",)),
        ("", ("hello", "there")),
    ],
)
def test_deterministic_and_length_preserving(reference, spoken):
    first = compare_words(reference, words(*spoken))
    second = compare_words(reference, words(*spoken))
    assert first == second
    assert len(first) == len(spoken)
    assert [r.word for r in first] == list(spoken)


def test_words_past_the_cap_are_incorrect(monkeypatch, caplog):
    monkeypatch.setattr(aligner, "MAX_ALIGNMENT_WORDS", 2)
    with caplog.at_level("WARNING"):
        results = compare_words("a b c", words("a", "b", "c"))
    assert [r.is_correct for r in results] == [True, True, False]
    assert "Truncating" in caplog.text


def test_nan_confidence_defaults_to_zero():
    results = compare_words("a", [{"word": "a", "confidence": float("nan")}])
    assert results[0].is_correct is True
    assert results[0].confidence == 0.0
