from __future__ import annotations

import math
from typing import Any, Dict, Iterable, List, Optional

from .alignment.aligner import compare_words
from .config import GOOD_THRESHOLD, NEEDS_PRACTICE_THRESHOLD, PERFECT_THRESHOLD
from .models.aligned_word import WordComparisonResult
from .scorer.similarity import similarity_percent


def accuracy_level(accuracy: float) -> str:
    """Bucket an accuracy percentage.

    Scores between NEEDS_PRACTICE_THRESHOLD and GOOD_THRESHOLD are "poor";
    only scores below NEEDS_PRACTICE_THRESHOLD are "needs_practice".
    """
    if accuracy >= PERFECT_THRESHOLD:
        return "perfect"
    if accuracy >= GOOD_THRESHOLD:
        return "good"
    if accuracy < NEEDS_PRACTICE_THRESHOLD:
        return "needs_practice"
    return "poor"


def summarize_comparison(comparison: List[WordComparisonResult]) -> Dict[str, Any]:
    correct_confidences = [w.confidence for w in comparison if w.is_correct]
    avg_confidence = (
        sum(correct_confidences) / len(correct_confidences)
        if correct_confidences
        else 0.0
    )
    return {
        "total_words": len(comparison),
        "correct": len(correct_confidences),
        "incorrect": len(comparison) - len(correct_confidences),
        "average_confidence": avg_confidence,
    }


def generate_report(
    reference_text: Optional[str],
    transcribed_text: Optional[str],
    transcribed_words: Optional[Iterable[Any]],
    audio_duration: float = 0,
) -> Dict[str, Any]:
    """
    Build the report payload for one spoken attempt.

    Accuracy comes from the character-level similarity of the full transcript,
    word correctness from the word alignment of the individual ASR words.

    Args:
        reference_text: Target sentence
        transcribed_text: Full ASR transcript
        transcribed_words: ASR words ({word, confidence, ...} dicts or TranscribedWord)
        audio_duration: Recording length in seconds

    Returns:
        Dict with accuracy, texts, incorrect_words, word_details,
        audio_duration, accuracy_level flags and a summary
    """
    accuracy = max(0.0, min(100.0, similarity_percent(reference_text, transcribed_text)))
    comparison = compare_words(reference_text, transcribed_words)
    level = accuracy_level(accuracy)

    return {
        "accuracy": accuracy,
        "reference_text": reference_text or "",
        "transcribed_text": transcribed_text or "",
        "incorrect_words": [w.word for w in comparison if not w.is_correct],
        "word_details": [w.to_dict() for w in comparison],
        # halves round up
        "audio_duration": max(0, math.floor((audio_duration or 0) + 0.5)),
        "accuracy_level": level,
        "perfect": level == "perfect",
        "good": level == "good",
        "needs_practice": level == "needs_practice",
        "summary": summarize_comparison(comparison),
    }


if __name__ == "__main__":
    # Example usage
    report = generate_report(
        "I like apples.",
        "I really like apple",
        [
            {"word": "I", "confidence": 0.98},
            {"word": "really", "confidence": 0.71},
            {"word": "like", "confidence": 0.95},
            {"word": "apple", "confidence": 0.62},
        ],
        audio_duration=2.4,
    )
    print("Final Report:")
    print(report["summary"])
    print("\nWords:")
    for w in report["word_details"]:
        print(w)
