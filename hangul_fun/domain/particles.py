from __future__ import annotations

from hangul_fun.domain.hangul_unicode import decompose_syllable


def ends_in_vowel(word: str) -> bool:
    """Return True if the last syllable of `word` has no final consonant.

    Raises:
        ValueError: if `word` is empty or does not end in a Hangul syllable.
    """
    if not word:
        raise ValueError("string is empty")
    parts = decompose_syllable(word[-1])
    if parts is None:
        raise ValueError("final character is not a hangul syllable: %r" % word[-1])
    return parts[2] is None


def copula(word: str) -> str:
    """Return the polite copula to attach to `word` ("예요" after a vowel, else "이에요")."""
    return "예요" if ends_in_vowel(word) else "이에요"
