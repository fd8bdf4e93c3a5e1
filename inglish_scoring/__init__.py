"""
inglish-scoring - pronunciation scoring core.

Scores a learner's spoken attempt at a reference sentence from the output of
a speech-to-text service: a sentence-level similarity percentage and a
per-word correct/incorrect verdict.
"""
from .alignment import align_sequences, compare_words, levenshtein_distance, normalize_text, tokenize
from .asr import parse_deepgram_response
from .models import AlignmentStep, TranscribedWord, WordComparisonResult
from .report_generator import accuracy_level, generate_report
from .scorer import levenshtein, similarity_percent

__version__ = "0.1.0"

__all__ = [
    "AlignmentStep",
    "TranscribedWord",
    "WordComparisonResult",
    "accuracy_level",
    "align_sequences",
    "compare_words",
    "generate_report",
    "levenshtein",
    "levenshtein_distance",
    "normalize_text",
    "parse_deepgram_response",
    "similarity_percent",
    "tokenize",
]
