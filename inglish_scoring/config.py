"""Runtime limits and report thresholds for pronunciation scoring."""
from __future__ import annotations

import os


def _positive_int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


# Both DPs are quadratic; anything past these caps is truncated before scoring.
MAX_SIMILARITY_CHARS = _positive_int_env("INGLISH_MAX_SIMILARITY_CHARS", 5000)
MAX_ALIGNMENT_WORDS = _positive_int_env("INGLISH_MAX_ALIGNMENT_WORDS", 500)

# Accuracy levels used by the report payload (percent)
PERFECT_THRESHOLD = 100.0
GOOD_THRESHOLD = 80.0
NEEDS_PRACTICE_THRESHOLD = 60.0
