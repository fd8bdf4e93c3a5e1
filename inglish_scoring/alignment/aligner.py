"""Word-level comparison between reference text and ASR output."""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

from ..config import MAX_ALIGNMENT_WORDS
from ..models.aligned_word import AlignmentStep, WordComparisonResult
from ..models.transcribed_word import TranscribedWord
from .edit_distance import align_sequences, alignment_cost
from .normalizer import normalize_text, tokenize

logger = logging.getLogger(__name__)


def tokenize_asr(words: List[TranscribedWord]) -> List[str]:
    """Normalize each ASR word, dropping words that normalize to nothing."""
    hyp_tokens: List[str] = []
    for w in words:
        normalized = normalize_text(w.word)
        if normalized:
            hyp_tokens.append(normalized)
    return hyp_tokens


def _cap(tokens: List[str], label: str) -> List[str]:
    if len(tokens) <= MAX_ALIGNMENT_WORDS:
        return tokens
    logger.warning(
        "Truncating %s from %d to %d tokens before alignment",
        label, len(tokens), MAX_ALIGNMENT_WORDS,
    )
    return tokens[:MAX_ALIGNMENT_WORDS]


def compare_words(
    reference_text: Optional[str],
    transcribed_words: Optional[Iterable[Any]],
) -> List[WordComparisonResult]:
    """Mark each transcribed word as correct or incorrect against the reference.

    The reference and the normalized ASR words are aligned with a word-level
    edit distance (see ``align_sequences``). A transcribed word is correct only
    when its alignment step is a match.

    Hypothesis indices in the alignment are positions in the list of words
    that survive normalization, while results are looked up by position in
    ``transcribed_words``; a position with no step is marked incorrect.

    Args:
        reference_text: The sentence the learner was asked to say
        transcribed_words: ASR words as dicts ({word, confidence, start, end})
            or TranscribedWord objects, in spoken order

    Returns:
        One WordComparisonResult per transcribed word, in input order
    """
    words = [TranscribedWord.from_raw(w) for w in (transcribed_words or [])]

    ref_tokens = _cap(tokenize(reference_text), "reference")
    hyp_tokens = _cap(tokenize_asr(words), "transcription")

    if not hyp_tokens:
        return [WordComparisonResult(word=w.word, is_correct=False, confidence=w.confidence) for w in words]

    steps = align_sequences(ref_tokens, hyp_tokens)
    by_hyp: Dict[int, AlignmentStep] = {
        step.hyp_index: step for step in steps if step.hyp_index is not None
    }
    logger.debug(
        "Aligned %d reference / %d spoken tokens, edit cost %d",
        len(ref_tokens), len(hyp_tokens), alignment_cost(steps),
    )

    results: List[WordComparisonResult] = []
    for idx, w in enumerate(words):
        step = by_hyp.get(idx)
        results.append(
            WordComparisonResult(
                word=w.word,
                is_correct=step.is_correct if step is not None else False,
                confidence=w.confidence,
            )
        )
    return results
