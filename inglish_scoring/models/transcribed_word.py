"""Data model for a single word returned by a speech-to-text service."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping, Optional


def _number_or(value: Any, default: Optional[float]) -> Optional[float]:
    # bool is an int subclass but never a meaningful confidence/timestamp
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    value = float(value)
    if math.isnan(value):
        return default
    return value


@dataclass(frozen=True)
class TranscribedWord:
    """A recognized word with its confidence and optional timestamps.

    Attributes:
        word: The recognized word, original casing
        confidence: Recognition confidence in 0..1 (0.0 when absent)
        start: Start timestamp in seconds (or None)
        end: End timestamp in seconds (or None)
    """
    word: str
    confidence: float = 0.0
    start: Optional[float] = None
    end: Optional[float] = None

    @classmethod
    def from_raw(cls, raw: Any) -> "TranscribedWord":
        """Build a TranscribedWord from a dict, another TranscribedWord or any
        object exposing ``word``/``confidence`` attributes.

        Missing or malformed fields default to ``""`` for the word and ``0.0``
        for the confidence, so ASR payloads never make scoring fail.
        """
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, Mapping):
            get = raw.get
        else:
            def get(key: str, default: Any = None) -> Any:
                return getattr(raw, key, default)

        word = get("word")
        return cls(
            word=word if isinstance(word, str) else "",
            confidence=_number_or(get("confidence"), 0.0) or 0.0,
            start=_number_or(get("start"), None),
            end=_number_or(get("end"), None),
        )
