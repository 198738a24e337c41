"""Hangul Unicode classification and syllable arithmetic.

This module is *domain* logic (no I/O).

It provides:
  - `HangulCharClass` / `classify()` for mapping any character to its Hangul block
  - `decompose_syllable()` / `compose_syllable()` for the Hangul Syllables algorithm
  - `decompose_all()` and `split()` for working with whole strings

Notes:
  - Composition is table-free: SBase + (LIndex * VCount + VIndex) * TCount + TIndex
  - Decomposition yields *conjoining* jamo (U+1100 block), not compatibility jamo.
    See `jamo_data.to_compat()` for display glyphs.
"""

from __future__ import annotations

import sys
from enum import Enum, auto
from itertools import groupby
from typing import Final, Iterable, Optional

from hangul_fun.domain.jamo_data import FINAL_BASE, FINALS, INITIAL_BASE, VOWEL_BASE, VOWELS


# Unicode Hangul syllable constants
SYLLABLE_BASE: Final[int] = 0xAC00
_V_COUNT: Final[int] = 21
_T_COUNT: Final[int] = 28
_N_COUNT: Final[int] = _V_COUNT * _T_COUNT  # 588


class HangulCharClass(Enum):
    CompatibilityJamo = auto()
    JamoExtendedA = auto()
    JamoExtendedB = auto()
    Jamo = auto()
    Syllables = auto()
    Other = auto()

    @classmethod
    def of(cls, ch: str) -> "HangulCharClass":
        return classify(ch)

    @staticmethod
    def split(text: str) -> list[tuple["HangulCharClass", str]]:
        return split(text)


def classify(ch: str) -> HangulCharClass:
    """Return the Hangul block containing `ch` (HangulCharClass.Other if none)."""
    cp = ord(ch)
    if 0xAC00 <= cp <= 0xD7AF:
        return HangulCharClass.Syllables
    if 0x1100 <= cp <= 0x11FF:
        return HangulCharClass.Jamo
    if 0x3130 <= cp <= 0x318F:
        return HangulCharClass.CompatibilityJamo
    if 0xA960 <= cp <= 0xA97F:
        return HangulCharClass.JamoExtendedA
    if 0xD7B0 <= cp <= 0xD7FF:
        return HangulCharClass.JamoExtendedB
    return HangulCharClass.Other


def split(text: str) -> list[tuple[HangulCharClass, str]]:
    """Partition `text` into maximal runs of characters sharing a class.

    Example:
        split("hi 이 there") ->
            [(Other, "hi "), (Syllables, "이"), (Other, " there")]
    """
    return [(cls, "".join(run)) for cls, run in groupby(text, key=classify)]


# -----------------------------------------------------------------------------
# Syllable codec
# -----------------------------------------------------------------------------

def decompose_syllable(ch: str) -> Optional[tuple[str, str, Optional[str]]]:
    """Split a precomposed syllable into (initial, medial, final) conjoining jamo.

    Returns None unless `ch` is in the Hangul Syllables block. The final is
    None for open syllables (e.g. "가").
    """
    if classify(ch) is not HangulCharClass.Syllables:
        return None

    base = ord(ch) - SYLLABLE_BASE
    initial_idx = base // _N_COUNT
    medial_idx = (base - initial_idx * _N_COUNT) // _T_COUNT
    final_idx = base - initial_idx * _N_COUNT - medial_idx * _T_COUNT

    initial = chr(INITIAL_BASE + initial_idx)
    medial = chr(VOWEL_BASE + medial_idx)
    final = chr(FINAL_BASE + final_idx) if final_idx else None

    assert classify(initial) is HangulCharClass.Jamo, "bad initial for U+%04X" % ord(ch)
    assert classify(medial) is HangulCharClass.Jamo, "bad medial for U+%04X" % ord(ch)
    return initial, medial, final


def compose_syllable(jamos: Iterable[Optional[str]]) -> Optional[str]:
    """Compose (initial, medial[, final]) conjoining jamo into a syllable.

    Accepts a string such as "\\u1100\\u1161" or the tuple returned by
    `decompose_syllable()` (a trailing None final is ignored).

    Returns None for anything that is not exactly two or three characters,
    or whose arithmetic falls outside the Hangul Syllables block.
    """
    chars = [c for c in jamos if c is not None]
    if len(chars) not in (2, 3):
        return None
    if any(len(c) != 1 for c in chars):
        return None

    initial_cp = ord(chars[0])
    medial_idx = ord(chars[1]) - VOWEL_BASE
    if initial_cp < INITIAL_BASE or not 0 <= medial_idx < len(VOWELS):
        return None

    final_idx = 0
    if len(chars) == 3:
        final_idx = ord(chars[2]) - FINAL_BASE
        if not 1 <= final_idx < len(FINALS):
            return None

    cp = SYLLABLE_BASE + (initial_cp - INITIAL_BASE) * _N_COUNT + medial_idx * _T_COUNT + final_idx
    if cp > sys.maxunicode or classify(chr(cp)) is not HangulCharClass.Syllables:
        return None
    return chr(cp)


def decompose_all(text: str) -> str:
    """Expand every syllable in `text` into its jamo; everything else is kept verbatim."""
    out: list[str] = []
    for ch in text:
        parts = decompose_syllable(ch)
        if parts is None:
            out.append(ch)
            continue
        out.extend(p for p in parts if p is not None)
    return "".join(out)
