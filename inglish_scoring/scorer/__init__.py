"""Sentence-level similarity scoring."""
from .similarity import levenshtein, similarity_percent

__all__ = ["levenshtein", "similarity_percent"]
