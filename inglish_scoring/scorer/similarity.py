"""Character-level similarity between a reference sentence and a transcript."""
from __future__ import annotations

import logging
from typing import Optional

from ..alignment.edit_distance import levenshtein_distance
from ..alignment.normalizer import normalize_text
from ..config import MAX_SIMILARITY_CHARS

logger = logging.getLogger(__name__)


def _cap(text: str) -> str:
    if len(text) <= MAX_SIMILARITY_CHARS:
        return text
    logger.warning("Truncating text from %d to %d characters before scoring", len(text), MAX_SIMILARITY_CHARS)
    return text[:MAX_SIMILARITY_CHARS]


def levenshtein(reference_text: Optional[str], hypothesis_text: Optional[str]) -> int:
    """Edit distance between the normalized forms of two texts."""
    return levenshtein_distance(_cap(normalize_text(reference_text)), _cap(normalize_text(hypothesis_text)))


def similarity_percent(reference_text: Optional[str], hypothesis_text: Optional[str]) -> float:
    """Accuracy percentage (0-100) of a spoken attempt against the target sentence.

    Both texts are normalized, then scored as ``1 - distance / max_len``
    clamped to [0, 1]. Two empty texts are a perfect match.

    Args:
        reference_text: The sentence the learner was asked to say
        hypothesis_text: The ASR transcript of the attempt

    Returns:
        Similarity in percent
    """
    a = _cap(normalize_text(reference_text))
    b = _cap(normalize_text(hypothesis_text))
    if not a and not b:
        return 100.0

    distance = levenshtein_distance(a, b)
    max_len = max(len(a), len(b)) or 1
    similarity = 1.0 - distance / max_len
    return max(0.0, min(1.0, similarity)) * 100.0
