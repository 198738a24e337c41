"""
hangul_fun package exports.

Provides a stable import surface for the Hangul engine; the modules under
`hangul_fun.domain` remain the canonical homes of each function.
"""

from .domain.hangul_compose import compose_all  # noqa: F401
from .domain.hangul_unicode import (  # noqa: F401
    HangulCharClass,
    classify,
    compose_syllable,
    decompose_all,
    decompose_syllable,
    split,
)
from .domain.jamo_stream import JamoInStream, JamoStream  # noqa: F401
from .domain.pronunciation_hints import get_jamo_pronunciation, get_pronunciation_hint  # noqa: F401
from .domain.pronunciation_rules import apply_pronunciation_rules, pronounce  # noqa: F401
from .domain.romanization_rr import UNKNOWN_ROMANIZATION, romanize_decomposed, romanize_text  # noqa: F401

__all__ = [
    "HangulCharClass",
    "JamoInStream",
    "JamoStream",
    "UNKNOWN_ROMANIZATION",
    "apply_pronunciation_rules",
    "classify",
    "compose_all",
    "compose_syllable",
    "decompose_all",
    "decompose_syllable",
    "get_jamo_pronunciation",
    "get_pronunciation_hint",
    "pronounce",
    "romanize_decomposed",
    "romanize_text",
    "split",
]
