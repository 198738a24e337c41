"""Pronunciation advice for individual jamo.

An empty string means no hint is recorded. Many of the vowel hints follow
"Hangeul Master" (Talk To Me In Korean).
"""

from __future__ import annotations

from typing import Final

from hangul_fun.domain.jamo_data import (
    SILENT_INITIAL,
    final_jamo,
    initial_jamo,
    is_final_consonant,
    to_compat,
    vowel_jamo,
)
from hangul_fun.domain.jamo_stream import JamoInStream

_VOWEL_HINTS: dict[str, str] = {
    "ㅏ": "'a' as in 'father'",
    "ㅐ": "'a' as in 'sad' or 'pan', indistinct from ㅔ",
    "ㅑ": "'ya' as in 'yard'",
    "ㅒ": "'ye' as in 'yeah'",
    "ㅓ": "'u' as in 'bus', 'gut', 'cup'",
    "ㅔ": "'e' as in 'bed' or 'pet', indistinct from ㅐ",
    "ㅕ": "'yu' as in 'yummy'",
    "ㅖ": "'ye' as in 'yes'",
    "ㅗ": "'o' as in 'ago'",
    "ㅘ": "'wa' as in 'waffle'",
    "ㅙ": "'we' as in 'wet', indistinct from ㅞ",
    "ㅚ": "",
    "ㅛ": "'yo' as in 'yoga'",
    "ㅜ": "'oo' as in 'food'",
    "ㅝ": "'wo' as in 'wonder'",
    "ㅞ": "'we' as in 'wet', indistinct from ㅙ",
    "ㅟ": "'wee' as in 'week'",
    "ㅠ": "'you'",
    "ㅡ": "'uh' with upper/lower teeth close and yucky face",
    "ㅢ": "",
    "ㅣ": "'ee' as in 'feet'",
}

_INITIAL_HINTS: dict[str, str] = {
    "ㄱ": "between 'g' and 'k', as in 'go'",
    "ㄲ": "tense 'k', as in 'skate'",
    "ㄴ": "'n' as in 'no'",
    "ㄷ": "between 'd' and 't', as in 'day'",
    "ㄸ": "tense 't', as in 'stop'",
    "ㄹ": "light tap between 'r' and 'l', as in 'ladder'",
    "ㅁ": "'m' as in 'man'",
    "ㅂ": "between 'b' and 'p', as in 'boy'",
    "ㅃ": "tense 'p', as in 'spot'",
    "ㅅ": "'s' as in 'see'",
    "ㅆ": "tense 's', as in 'sea'",
    "ㅇ": "silent",
    "ㅈ": "'j' as in 'jam'",
    "ㅉ": "tense 'j', as in 'pizza'",
    "ㅊ": "'ch' as in 'chat'",
    "ㅋ": "'k' as in 'kite'",
    "ㅌ": "'t' as in 'tea'",
    "ㅍ": "'p' as in 'pie'",
    "ㅎ": "'h' as in 'hat'",
}

_FINAL_HINTS: dict[str, str] = {
    "ㄱ": "unreleased 'k', as in 'book'",
    "ㄲ": "unreleased 'k', as in 'book'",
    "ㄴ": "'n' as in 'sun'",
    "ㄷ": "unreleased 't', as in 'cat'",
    "ㄹ": "'l' as in 'ball'",
    "ㅁ": "'m' as in 'some'",
    "ㅂ": "unreleased 'p', as in 'cup'",
    "ㅅ": "unreleased 't', as in 'cat'",
    "ㅆ": "unreleased 't', as in 'cat'",
    "ㅇ": "'ng' as in 'sing'",
    "ㅈ": "unreleased 't', as in 'cat'",
    "ㅊ": "unreleased 't', as in 'cat'",
    "ㅋ": "unreleased 'k', as in 'book'",
    "ㅌ": "unreleased 't', as in 'cat'",
    "ㅍ": "unreleased 'p', as in 'cup'",
    "ㅎ": "unreleased 't', or silent before a vowel",
}

# ㅅ sounds like 'sh' before these vowels.
_S_LIKE_VOWELS: set[str] = {"ㅣ", "ㅑ", "ㅕ", "ㅛ", "ㅠ", "ㅖ", "ㅒ", "ㅟ"}

_HINTS: Final[dict[str, str]] = {
    **{vowel_jamo(g): h for g, h in _VOWEL_HINTS.items()},
    **{initial_jamo(g): h for g, h in _INITIAL_HINTS.items()},
    **{final_jamo(g): h for g, h in _FINAL_HINTS.items()},
}

_INITIAL_S: Final[str] = initial_jamo("ㅅ")
_FINAL_NG: Final[str] = final_jamo("ㅇ")
_FINAL_H: Final[str] = final_jamo("ㅎ")


def get_jamo_pronunciation(ch: str) -> str:
    """Return advice on the pronunciation of a conjoining jamo ("" if none)."""
    return _HINTS.get(ch, "")


def get_pronunciation_hint(item: JamoInStream) -> str:
    """Return a hint for `item.curr`, taking its neighbours into account."""
    ch = item.curr

    if ch == _INITIAL_S and to_compat(item.next or "") in _S_LIKE_VOWELS:
        return "'sh' as in 'she'"

    if ch == SILENT_INITIAL and is_final_consonant(item.prev):
        return "silent; the previous final consonant is pronounced here"

    if is_final_consonant(ch) and item.is_final_consonant_followed_by_vowel():
        if ch == _FINAL_H:
            return "silent before a vowel"
        if ch != _FINAL_NG:
            target = item.next_syllable or "the next syllable"
            return "carried over to start {}".format(target)

    return get_jamo_pronunciation(ch)
