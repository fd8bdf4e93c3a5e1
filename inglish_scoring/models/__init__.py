"""Data models shared by the scorer and the aligner."""
from .aligned_word import AlignmentStep, WordComparisonResult
from .transcribed_word import TranscribedWord

__all__ = ["AlignmentStep", "TranscribedWord", "WordComparisonResult"]
