import pytest

from hangul_fun.domain.jamo_data import (
    FINALS,
    INITIALS,
    SILENT_INITIAL,
    VOWELS,
    FinalConsonant,
    InitialConsonant,
    Vowel,
    final_jamo,
    initial_jamo,
    is_final_consonant,
    is_initial_consonant,
    is_vowel,
    modern_jamo,
)


def test_table_sizes():
    assert len(INITIALS) == 19
    assert len(VOWELS) == 21
    assert len(FINALS) == 28
    assert FINALS[0] == ""
    assert SILENT_INITIAL == "ᄋ"


@pytest.mark.parametrize("ch,cls", [
    ("ᄀ", InitialConsonant),
    ("ᄒ", InitialConsonant),
    ("ᅡ", Vowel),
    ("ᅵ", Vowel),
    ("ᆨ", FinalConsonant),
    ("ᇂ", FinalConsonant),
])
def test_modern_jamo_roles(ch, cls):
    assert modern_jamo(ch) == cls(ch)


@pytest.mark.parametrize("ch", [None, "", "\u1113", "\u1176", "\u11c3", "\u11a7", "ㄱ", "가", "\u1100\u1161"])
def test_modern_jamo_rejects(ch):
    assert modern_jamo(ch) is None
    assert not (is_initial_consonant(ch) or is_vowel(ch) or is_final_consonant(ch))


def test_same_consonant_different_roles():
    assert is_initial_consonant(initial_jamo("ㄱ"))
    assert is_final_consonant(final_jamo("ㄱ"))
    assert initial_jamo("ㄱ") != final_jamo("ㄱ")


def test_converters_reject_wrong_role():
    with pytest.raises(KeyError):
        initial_jamo("ㄳ")
    with pytest.raises(KeyError):
        final_jamo("ㄸ")
