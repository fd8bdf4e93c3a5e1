"""Data models for word alignment between reference text and ASR output."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class AlignmentStep:
    """One edge of the backtracked edit-distance path.

    Attributes:
        op: Operation type - "match", "sub", "del", or "ins"
        ref_index: Index into the reference tokens (None for "ins")
        hyp_index: Index into the hypothesis tokens (None for "del")
    """
    op: str  # "match" | "sub" | "del" | "ins"
    ref_index: Optional[int]
    hyp_index: Optional[int]

    @property
    def is_correct(self) -> bool:
        return self.op == "match"


@dataclass(frozen=True)
class WordComparisonResult:
    """Correctness verdict for one transcribed word.

    Attributes:
        word: The word as the ASR service returned it (original casing)
        is_correct: True when the word aligned to an equal reference word
        confidence: ASR confidence carried through unchanged
    """
    word: str
    is_correct: bool
    confidence: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "word": self.word,
            "isCorrect": self.is_correct,
            "confidence": self.confidence,
        }
