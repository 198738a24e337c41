"""Modern Hangul jamo data (domain layer).

This module contains *no* I/O.

It centralises:
- The compatibility jamo tables (U+3130 block) in standard Unicode Hangul order
- The matching conjoining jamo (U+1100 block) for each role
- `ModernJamo`: classification of a conjoining jamo as initial, vowel or final

Only the *modern* sub-ranges of the Hangul Jamo block are covered; archaic
jamo are not ModernJamo and have no compatibility counterpart here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Optional, Union


# -----------------------------------------------------------------------------
# Compatibility jamo ordering (display glyphs)
# -----------------------------------------------------------------------------

# Leading consonants (Choseong) in standard Unicode Hangul order
CHOSEONG: Final[tuple[str, ...]] = (
    "ㄱ", "ㄲ", "ㄴ", "ㄷ", "ㄸ", "ㄹ", "ㅁ", "ㅂ", "ㅃ",
    "ㅅ", "ㅆ", "ㅇ", "ㅈ", "ㅉ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ",
)

# Vowels (Jungseong) in standard Unicode Hangul order
JUNGSEONG: Final[tuple[str, ...]] = (
    "ㅏ", "ㅐ", "ㅑ", "ㅒ", "ㅓ", "ㅔ", "ㅕ", "ㅖ",
    "ㅗ", "ㅘ", "ㅙ", "ㅚ", "ㅛ",
    "ㅜ", "ㅝ", "ㅞ", "ㅟ", "ㅠ",
    "ㅡ", "ㅢ", "ㅣ",
)

# Trailing consonants (Jongseong) in standard Unicode Hangul order
# Index 0 is "no final"
JONGSEONG: Final[tuple[str, ...]] = (
    "",
    "ㄱ", "ㄲ", "ㄳ",
    "ㄴ", "ㄵ", "ㄶ",
    "ㄷ",
    "ㄹ", "ㄺ", "ㄻ", "ㄼ", "ㄽ", "ㄾ", "ㄿ", "ㅀ",
    "ㅁ",
    "ㅂ", "ㅄ",
    "ㅅ", "ㅆ",
    "ㅇ",
    "ㅈ", "ㅊ",
    "ㅋ",
    "ㅌ",
    "ㅍ",
    "ㅎ",
)


# -----------------------------------------------------------------------------
# Conjoining jamo (Hangul Jamo block)
# -----------------------------------------------------------------------------

INITIAL_BASE: Final[int] = 0x1100
VOWEL_BASE: Final[int] = 0x1161
# Final index 0 means "no final", so index 1 is 0x11A8.
FINAL_BASE: Final[int] = 0x11A7

INITIALS: Final[tuple[str, ...]] = tuple(chr(INITIAL_BASE + i) for i in range(len(CHOSEONG)))
VOWELS: Final[tuple[str, ...]] = tuple(chr(VOWEL_BASE + i) for i in range(len(JUNGSEONG)))
FINALS: Final[tuple[str, ...]] = ("",) + tuple(chr(FINAL_BASE + i) for i in range(1, len(JONGSEONG)))

# The silent initial consonant (ㅇ at the start of a syllable)
SILENT_INITIAL: Final[str] = INITIALS[CHOSEONG.index("ㅇ")]


# -----------------------------------------------------------------------------
# Internal lookup maps
# -----------------------------------------------------------------------------

_INITIAL_BY_COMPAT: Final[dict[str, str]] = dict(zip(CHOSEONG, INITIALS))
_VOWEL_BY_COMPAT: Final[dict[str, str]] = dict(zip(JUNGSEONG, VOWELS))
_FINAL_BY_COMPAT: Final[dict[str, str]] = dict(zip(JONGSEONG[1:], FINALS[1:]))

_COMPAT_BY_JAMO: Final[dict[str, str]] = {
    **dict(zip(INITIALS, CHOSEONG)),
    **dict(zip(VOWELS, JUNGSEONG)),
    **dict(zip(FINALS[1:], JONGSEONG[1:])),
}


# -----------------------------------------------------------------------------
# ModernJamo
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class InitialConsonant:
    char: str


@dataclass(frozen=True)
class Vowel:
    char: str


@dataclass(frozen=True)
class FinalConsonant:
    char: str


ModernJamo = Union[InitialConsonant, Vowel, FinalConsonant]


def modern_jamo(ch: Optional[str]) -> Optional[ModernJamo]:
    """Classify a conjoining jamo by role.

    Returns None for anything outside the three modern sub-ranges
    (ᄀ..ᄒ, ᅡ..ᅵ, ᆨ..ᇂ), including None itself and multi-character strings.
    """
    if not ch or len(ch) != 1:
        return None
    if INITIALS[0] <= ch <= INITIALS[-1]:
        return InitialConsonant(ch)
    if VOWELS[0] <= ch <= VOWELS[-1]:
        return Vowel(ch)
    if FINALS[1] <= ch <= FINALS[-1]:
        return FinalConsonant(ch)
    return None


def is_initial_consonant(ch: Optional[str]) -> bool:
    return isinstance(modern_jamo(ch), InitialConsonant)


def is_vowel(ch: Optional[str]) -> bool:
    return isinstance(modern_jamo(ch), Vowel)


def is_final_consonant(ch: Optional[str]) -> bool:
    return isinstance(modern_jamo(ch), FinalConsonant)


# -----------------------------------------------------------------------------
# Compatibility <-> conjoining conversion
# -----------------------------------------------------------------------------

def initial_jamo(compat: str) -> str:
    """Return the conjoining initial consonant for a compatibility glyph (e.g. "ㄱ" -> U+1100).

    Raises:
        KeyError: if `compat` is not one of the 19 modern initial consonants.
    """
    return _INITIAL_BY_COMPAT[compat]


def vowel_jamo(compat: str) -> str:
    return _VOWEL_BY_COMPAT[compat]


def final_jamo(compat: str) -> str:
    return _FINAL_BY_COMPAT[compat]


def to_compat(ch: str) -> str:
    """Return the compatibility glyph for a conjoining jamo, or `ch` unchanged."""
    return _COMPAT_BY_JAMO.get(ch, ch)
