"""Adapters from speech-to-text payloads to scoring input."""
from .deepgram import parse_deepgram_response

__all__ = ["parse_deepgram_response"]
