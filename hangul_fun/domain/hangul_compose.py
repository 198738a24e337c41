"""Hangul composition helpers (domain layer).

This module contains *no* I/O.

Primary API:
- compose_all(jamos): re-compose a conjoining jamo sequence for display
- compose_lvt(lead, vowel, tail) / compose_cv(lead, vowel): compose from compatibility jamo
"""

from __future__ import annotations

from hangul_fun.domain.hangul_unicode import compose_syllable
from hangul_fun.domain.jamo_data import (
    CHOSEONG,
    JONGSEONG,
    JUNGSEONG,
    final_jamo,
    initial_jamo,
    is_final_consonant,
    is_initial_consonant,
    is_vowel,
    vowel_jamo,
)


def compose_all(jamos: str) -> str:
    """Re-compose conjoining jamo into syllable blocks.

    Greedily takes an initial consonant and a vowel, plus the following
    final consonant when there is one. Characters that do not start such a
    pattern (spaces, Latin text, stray jamo) pass through unchanged.
    """
    out: list[str] = []
    i = 0
    n = len(jamos)
    while i < n:
        ch = jamos[i]
        if is_initial_consonant(ch) and i + 1 < n and is_vowel(jamos[i + 1]):
            width = 3 if i + 2 < n and is_final_consonant(jamos[i + 2]) else 2
            chunk = jamos[i:i + width]
            syllable = compose_syllable(chunk)
            out.append(syllable if syllable is not None else chunk)
            i += width
            continue
        out.append(ch)
        i += 1
    return "".join(out)


def compose_lvt(lead: str, vowel: str, tail: str = "") -> str:
    """Compose a Hangul syllable from compatibility jamo.

    Args:
        lead: choseong (e.g., "ㄱ")
        vowel: jungseong (e.g., "ㅏ")
        tail: jongseong (e.g., "ㄴ") or "" for no final

    Returns:
        A composed Hangul syllable (e.g., "간") or "" if inputs are invalid.
    """
    l = (lead or "").strip()
    v = (vowel or "").strip()
    t = (tail or "").strip()

    if l not in CHOSEONG or v not in JUNGSEONG or t not in JONGSEONG:
        return ""

    jamos = [initial_jamo(l), vowel_jamo(v)]
    if t:
        jamos.append(final_jamo(t))
    return compose_syllable(jamos) or ""


def compose_cv(lead: str, vowel: str) -> str:
    """Compose a Hangul syllable from a leading consonant and a vowel."""
    return compose_lvt(lead, vowel, "")
