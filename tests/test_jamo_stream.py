from hangul_fun.domain.jamo_stream import JamoInStream, JamoStream

B = "ᄇ"  # initial ㅂ
A = "ᅡ"  # vowel ㅏ
BF = "ᆸ"  # final ㅂ
NG = "ᄋ"  # silent initial ㅇ
EU = "ᅳ"  # vowel ㅡ
LF = "ᆯ"  # final ㄹ


def test_single_syllable_items():
    items = list(JamoStream.from_hangul_syllables("밥"))
    assert items == [
        JamoInStream(curr=B, prev=None, next=A, after_next=BF, next_syllable=None),
        JamoInStream(curr=A, prev=B, next=BF, after_next=None, next_syllable=None),
        JamoInStream(curr=BF, prev=A, next=None, after_next=None, next_syllable=None),
    ]


def test_from_jamos_matches_from_syllables():
    a = list(JamoStream.from_jamos(B + A + BF))
    b = list(JamoStream.from_hangul_syllables("밥"))
    assert a == b


def test_next_syllable_two_syllables():
    items = list(JamoStream.from_hangul_syllables("밥을"))
    assert [it.curr for it in items] == [B, A, BF, NG, EU, LF]
    assert [it.next_syllable for it in items] == ["을", "을", "을", None, None, None]


def test_next_syllable_across_space():
    items = list(JamoStream.from_hangul_syllables("밥 을"))
    assert items[0].next_syllable == "을"
    assert items[3].curr == " "
    assert items[3].next_syllable == "을"


def test_next_syllable_stops_at_non_jamo():
    items = list(JamoStream.from_hangul_syllables("밥을 hi"))
    assert items[0].next_syllable == "을"


def test_final_followed_by_vowel():
    items = list(JamoStream.from_hangul_syllables("밥을"))
    assert items[2].is_final_consonant_followed_by_vowel()
    assert not items[1].is_final_consonant_followed_by_vowel()

    alone = list(JamoStream.from_hangul_syllables("밥"))
    assert not alone[2].is_final_consonant_followed_by_vowel()


def test_seek_to_syllable():
    stream = JamoStream.from_hangul_syllables("밥을")
    assert stream.syllable_count == 2

    stream.seek_to_syllable(1)
    assert stream.position == 3
    assert next(stream).curr == NG

    stream.seek_to_syllable(0)
    assert next(stream).curr == B


def test_seek_out_of_range_is_ignored():
    stream = JamoStream.from_hangul_syllables("밥을")
    next(stream)
    stream.seek_to_syllable(5)
    assert stream.position == 1
    stream.seek_to_syllable(-1)
    assert stream.position == 1


def test_exhausted_stream_stays_exhausted():
    stream = JamoStream.from_hangul_syllables("가")
    assert len(list(stream)) == 2
    assert list(stream) == []


def test_empty_and_non_hangul():
    assert list(JamoStream.from_hangul_syllables("")) == []
    stream = JamoStream.from_hangul_syllables("hi")
    assert stream.syllable_count == 0
    assert [it.curr for it in stream] == ["h", "i"]
