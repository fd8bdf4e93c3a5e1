"""Conversion of Deepgram ``/v1/listen`` responses into scoring input."""
from __future__ import annotations

from typing import Any, Dict, List

from ..models.transcribed_word import TranscribedWord


def _first(items: Any) -> Any:
    if isinstance(items, list) and items:
        return items[0]
    return None


def parse_deepgram_response(payload: Any) -> Dict[str, Any]:
    """
    Extract the transcript and word list from a decoded Deepgram response.

    Reads results.channels[0].alternatives[0]; a payload missing any level
    yields an empty transcript and no words.
    input:payload: JSON body returned by Deepgram (already decoded)
    """
    results = payload.get("results") if isinstance(payload, dict) else None
    channel = _first(results.get("channels")) if isinstance(results, dict) else None
    alternative = _first(channel.get("alternatives")) if isinstance(channel, dict) else None
    if not isinstance(alternative, dict):
        return {"text": "", "words": []}

    transcript = alternative.get("transcript")
    raw_words = alternative.get("words")
    words: List[TranscribedWord] = []
    for w in raw_words if isinstance(raw_words, list) else []:
        tw = TranscribedWord.from_raw(w)
        # missing timestamps default to 0.0
        words.append(TranscribedWord(
            word=tw.word,
            confidence=tw.confidence,
            start=tw.start or 0.0,
            end=tw.end or 0.0,
        ))

    return {
        "text": transcript if isinstance(transcript, str) else "",
        "words": words,
    }
