from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final, Optional

from hangul_fun.domain.hangul_compose import compose_all
from hangul_fun.domain.hangul_unicode import decompose_all
from hangul_fun.domain.jamo_data import SILENT_INITIAL, final_jamo, initial_jamo, vowel_jamo
from hangul_fun.domain.pronunciation_rules import apply_pronunciation_rules

# Emitted for jamo whose romanization is not known (mostly compound finals).
UNKNOWN_ROMANIZATION: Final[str] = "?"


@dataclass(frozen=True)
class RRResult:
    rr: str
    pronounced: str
    details: list[str] = field(default_factory=list)


_VOWEL_RR: dict[str, str] = {
    "ㅏ": "a",
    "ㅓ": "eo",
    "ㅗ": "o",
    "ㅜ": "u",
    "ㅡ": "eu",
    "ㅣ": "i",
    "ㅐ": "ae",
    "ㅔ": "e",
    "ㅚ": "oe",
    "ㅟ": "wi",
    "ㅘ": "wa",
    "ㅝ": "wo",
    "ㅙ": "wae",
    "ㅞ": "we",
    "ㅢ": "ui",
    "ㅑ": "ya",
    "ㅕ": "yeo",
    "ㅛ": "yo",
    "ㅠ": "yu",
    "ㅒ": "yae",
    "ㅖ": "ye",
}

_CONS_RR: dict[str, str] = {
    "ㄱ": "g",
    "ㄴ": "n",
    "ㄷ": "d",
    "ㄹ": "r",
    "ㅁ": "m",
    "ㅂ": "b",
    "ㅅ": "s",
    "ㅇ": "",
    "ㅈ": "j",
    "ㅊ": "ch",
    "ㅋ": "k",
    "ㅌ": "t",
    "ㅍ": "p",
    "ㅎ": "h",
    "ㄲ": "kk",
    "ㄸ": "tt",
    "ㅃ": "pp",
    "ㅆ": "ss",
    "ㅉ": "jj",
}

# Finals before a consonant or at the end of a word (unreleased).
# None means unknown: rendered as the caller's `unknown` marker.
_FINAL_RR: dict[str, Optional[str]] = {
    "ㄱ": "k",
    "ㄲ": "k",
    "ㄳ": None,
    "ㄴ": "n",
    "ㄵ": None,
    "ㄶ": None,
    "ㄷ": "t",
    "ㄹ": "l",
    "ㄺ": None,
    "ㄻ": None,
    "ㄼ": None,
    "ㄽ": None,
    "ㄾ": None,
    "ㄿ": None,
    "ㅀ": None,
    "ㅁ": "m",
    "ㅂ": "p",
    "ㅄ": None,
    "ㅅ": "t",
    "ㅆ": "t",
    "ㅇ": "ng",
    "ㅈ": "t",
    "ㅊ": "t",
    "ㅋ": "k",
    "ㅌ": "t",
    "ㅍ": "p",
    "ㅎ": "t",
}

# Finals linked onto a following silent ㅇ.
_FINAL_RR_BEFORE_VOWEL: dict[str, Optional[str]] = {
    **_FINAL_RR,
    "ㄱ": "g",
    "ㄲ": "kk",
    "ㄷ": "d",
    "ㅂ": "b",
    "ㅅ": "s",
    "ㅆ": "ss",
    "ㅈ": "j",
    "ㅊ": "ch",
    "ㅎ": "h",
}

_INITIAL_TABLE: Final[dict[str, str]] = {initial_jamo(g): rr for g, rr in _CONS_RR.items()}
_VOWEL_TABLE: Final[dict[str, str]] = {vowel_jamo(g): rr for g, rr in _VOWEL_RR.items()}
_FINAL_TABLE: Final[dict[str, Optional[str]]] = {final_jamo(g): rr for g, rr in _FINAL_RR.items()}
_FINAL_TABLE_BEFORE_VOWEL: Final[dict[str, Optional[str]]] = {
    final_jamo(g): rr for g, rr in _FINAL_RR_BEFORE_VOWEL.items()
}


def romanize_jamo(ch: str, is_next_vowel: bool = False, unknown: str = UNKNOWN_ROMANIZATION) -> Optional[str]:
    """Romanize a single conjoining jamo.

    `is_next_vowel` only matters for final consonants: it says whether the
    next syllable starts with a silent ㅇ, so the final is pronounced as that
    syllable's onset.

    Returns None for characters with no mapping (non-Hangul, archaic jamo).
    """
    if ch in _INITIAL_TABLE:
        return _INITIAL_TABLE[ch]
    if ch in _VOWEL_TABLE:
        return _VOWEL_TABLE[ch]

    table = _FINAL_TABLE_BEFORE_VOWEL if is_next_vowel else _FINAL_TABLE
    if ch not in table:
        return None
    rr = table[ch]
    return unknown if rr is None else rr


def romanize_decomposed(jamos: str, unknown: str = UNKNOWN_ROMANIZATION) -> str:
    """Romanize a conjoining jamo sequence (*not* precomposed syllables).

    Unmapped characters are copied through, so romanize_decomposed("hi") == "hi".
    """
    parts: list[str] = []
    # The trailing space gives the last character a "next" to look at.
    for ch, following in zip(jamos, jamos[1:] + " "):
        rr = romanize_jamo(ch, following == SILENT_INITIAL, unknown)
        parts.append(ch if rr is None else rr)
    return "".join(parts)


def romanize_text(text: str, apply_rules: bool = True, unknown: str = UNKNOWN_ROMANIZATION) -> RRResult:
    """Romanize arbitrary text, optionally respelling it as pronounced first."""
    if not text:
        return RRResult(rr="", pronounced="", details=[])

    jamos = decompose_all(text)
    if apply_rules:
        jamos = apply_pronunciation_rules(jamos)

    rr = romanize_decomposed(jamos, unknown=unknown)
    pronounced = compose_all(jamos)
    details = [
        "RR spelling: {}".format(rr),
        "Pronounced: {}".format(pronounced),
    ]
    return RRResult(rr=rr, pronounced=pronounced, details=details)
