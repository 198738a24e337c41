import unicodedata

import pytest

from hangul_fun.domain.hangul_unicode import (
    HangulCharClass,
    classify,
    compose_syllable,
    decompose_all,
    decompose_syllable,
    split,
)
from hangul_fun.domain.jamo_data import FINALS


@pytest.mark.classification
@pytest.mark.parametrize("ch,expected", [
    ("가", HangulCharClass.Syllables),
    ("힯", HangulCharClass.Syllables),
    ("ᄀ", HangulCharClass.Jamo),
    ("ᇿ", HangulCharClass.Jamo),
    ("ㄱ", HangulCharClass.CompatibilityJamo),
    ("ꥠ", HangulCharClass.JamoExtendedA),
    ("ힰ", HangulCharClass.JamoExtendedB),
    ("a", HangulCharClass.Other),
    (" ", HangulCharClass.Other),
    ("漢", HangulCharClass.Other),
])
def test_classify(ch, expected):
    assert classify(ch) is expected
    assert HangulCharClass.of(ch) is expected
    # Repeated calls agree.
    assert classify(ch) is classify(ch)


def test_decompose_syllable_with_and_without_final():
    assert decompose_syllable("밥") == ("\u1107", "\u1161", "\u11b8")
    assert decompose_syllable("가") == ("\u1100", "\u1161", None)


@pytest.mark.parametrize("ch", ["a", "ㄱ", "ᄀ", " "])
def test_decompose_non_syllable_is_none(ch):
    assert decompose_syllable(ch) is None


def test_every_syllable_round_trips():
    for cp in range(0xAC00, 0xD7B0):
        ch = chr(cp)
        parts = decompose_syllable(ch)
        assert parts is not None
        initial, medial, final = parts
        assert classify(initial) is HangulCharClass.Jamo
        assert classify(medial) is HangulCharClass.Jamo
        assert final is None or final in FINALS
        assert compose_syllable(parts) == ch


def test_decomposition_matches_unicode_nfd():
    for cp in range(0xAC00, 0xD7A4, 97):
        ch = chr(cp)
        assert decompose_all(ch) == unicodedata.normalize("NFD", ch)


def test_compose_syllable_from_string():
    assert compose_syllable("\u1100\u1161") == "가"
    assert compose_syllable("\u1107\u1161\u11b8") == "밥"


def test_compose_syllable_unassigned_tail():
    # Initials past the 19 modern ones still land inside the block.
    assert compose_syllable("\u1113\u1161") == "\ud7a4"
    assert decompose_syllable("\ud7af") == ("\u1113", "\u1161", "\u11b2")


@pytest.mark.parametrize("jamos", [
    "",
    "\u1100",
    "\u1100\u1161\u11a8\u11a8",
    "ab",
    "ㄱㅏ",  # compatibility jamo are not conjoining jamo
    "\u1100\u1176",  # medial past the 21 modern vowels
    "\u1100\u1161\u1100",  # initial in the final slot
])
def test_compose_syllable_rejects_malformed(jamos):
    assert compose_syllable(jamos) is None


def test_decompose_all_only_touches_syllables():
    assert decompose_all("hi, 이") == "hi, \u110b\u1175"
    assert decompose_all("hello, world!") == "hello, world!"
    assert decompose_all("") == ""


def test_decompose_all_expands_each_syllable():
    text = "밥을 먹다"
    out = decompose_all(text)
    assert len(out) == 3 + 3 + 1 + 3 + 2
    assert " " in out


def test_split_runs():
    assert split("hi 이 there") == [
        (HangulCharClass.Other, "hi "),
        (HangulCharClass.Syllables, "이"),
        (HangulCharClass.Other, " there"),
    ]
    assert split("") == []
    assert HangulCharClass.split("밥을") == [(HangulCharClass.Syllables, "밥을")]


@pytest.mark.parametrize("text", ["hi 이 there", "안녕하세요, world! 밥을 먹다.", "ㄱㄴ가ᄀx"])
def test_split_covers_text(text):
    runs = split(text)
    assert "".join(run for _, run in runs) == text
    for (a, _), (b, _) in zip(runs, runs[1:]):
        assert a is not b
