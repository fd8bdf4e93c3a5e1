"""Alignment utilities for matching reference text to ASR output."""
from .aligner import compare_words
from .edit_distance import align_sequences, levenshtein_distance
from .normalizer import normalize_text, tokenize

__all__ = ["align_sequences", "compare_words", "levenshtein_distance", "normalize_text", "tokenize"]
