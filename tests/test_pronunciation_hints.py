from hangul_fun.domain.jamo_data import final_jamo, initial_jamo, vowel_jamo
from hangul_fun.domain.jamo_stream import JamoStream
from hangul_fun.domain.pronunciation_hints import get_jamo_pronunciation, get_pronunciation_hint


def hints(text):
    return [(item.curr, get_pronunciation_hint(item)) for item in JamoStream.from_hangul_syllables(text)]


def test_jamo_pronunciation_tables():
    assert get_jamo_pronunciation(vowel_jamo("ㅏ")) == "'a' as in 'father'"
    assert get_jamo_pronunciation(initial_jamo("ㅇ")) == "silent"
    assert get_jamo_pronunciation(final_jamo("ㅇ")) == "'ng' as in 'sing'"
    assert "unreleased" in get_jamo_pronunciation(final_jamo("ㅂ"))


def test_missing_hint_is_empty():
    assert get_jamo_pronunciation(vowel_jamo("ㅚ")) == ""
    assert get_jamo_pronunciation("a") == ""
    assert get_jamo_pronunciation(final_jamo("ㄺ")) == ""


def test_s_before_i_sounds_like_sh():
    (s, hint), _ = hints("시")
    assert s == initial_jamo("ㅅ")
    assert hint == "'sh' as in 'she'"

    (_, hint), _ = hints("사")
    assert hint == "'s' as in 'see'"


def test_final_carried_to_next_syllable():
    items = hints("밥을")
    assert items[2] == (final_jamo("ㅂ"), "carried over to start 을")
    assert items[3] == (initial_jamo("ㅇ"), "silent; the previous final consonant is pronounced here")


def test_final_without_following_vowel():
    items = hints("밥")
    assert items[2][1] == "unreleased 'p', as in 'cup'"


def test_final_h_before_vowel():
    items = hints("좋아")
    assert items[2] == (final_jamo("ㅎ"), "silent before a vowel")


def test_final_ng_is_not_carried():
    items = hints("생일")
    assert items[2] == (final_jamo("ㅇ"), "'ng' as in 'sing'")


def test_leading_silent_initial():
    items = hints("아")
    assert items[0] == (initial_jamo("ㅇ"), "silent")
