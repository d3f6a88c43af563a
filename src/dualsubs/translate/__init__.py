from __future__ import annotations

from .translator import TranslationEngine, TranslationError, TranslationMismatchError
from .codec import decode_cue, decode_cues, encode_cue, encode_cues
from .google_translator import GoogleTranslator

__all__ = [
    "TranslationEngine",
    "TranslationError",
    "TranslationMismatchError",
    "GoogleTranslator",
    "encode_cue",
    "encode_cues",
    "decode_cue",
    "decode_cues",
]
