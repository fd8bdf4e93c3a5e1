"""Text normalization utilities for scoring and alignment."""
from __future__ import annotations

import re
from typing import List, Optional


# Punctuation replaced by a space before comparison (ASCII and curly quotes, hyphen)
PUNCTUATION_RE = re.compile(r"[.,!?;:()\"'’“”\-]")
WHITESPACE_RE = re.compile(r"\s+")


def normalize_text(text: Optional[str]) -> str:
    """Normalize text for comparison.

    Lowercases, replaces punctuation with spaces, collapses whitespace runs
    and trims. ``None`` is treated as an empty string.

    Args:
        text: Raw reference or ASR text

    Returns:
        Normalized text (may be empty)
    """
    text = (text or "").lower()
    text = PUNCTUATION_RE.sub(" ", text)
    text = WHITESPACE_RE.sub(" ", text)
    return text.strip()


def tokenize(text: Optional[str]) -> List[str]:
    """Split normalized text into word tokens.

    Example: "Hello, world!" -> ["hello", "world"]
    """
    return [token for token in normalize_text(text).split(" ") if token]
