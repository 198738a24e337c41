import pytest

from hangul_fun.services.lyrics_navigation import REWIND_MS, LyricsNavigation

LYRICS = [
    (0, "  학교 종이 땡땡땡  "),
    (1500, ""),
    (3000, "어서 모이자"),
    (6000, "   "),
    (9000, "hello 선생님"),
]


@pytest.fixture
def nav():
    return LyricsNavigation.from_timed_lines(LYRICS, visible_lines=2)


def test_blank_lines_dropped_and_trimmed(nav):
    assert nav.lines == [(0, "학교 종이 땡땡땡"), (3000, "어서 모이자"), (9000, "hello 선생님")]


def test_initial_selection(nav):
    assert nav.selection() == ("학교", "학")


def test_next_syllable_crosses_words(nav):
    nav.next_syllable()
    assert nav.selection() == ("학교", "교")
    nav.next_syllable()
    assert nav.selection() == ("종이", "종")
    nav.prev_syllable()
    assert nav.selection() == ("학교", "교")


def test_syllable_stops_at_line_edges(nav):
    nav.prev_syllable()
    assert nav.selection() == ("학교", "학")
    for _ in range(20):
        nav.next_syllable()
    assert nav.selection() == ("땡땡땡", "땡")
    assert (nav.word, nav.syllable) == (2, 2)


def test_next_line_resets_and_scrolls(nav):
    nav.next_syllable()
    nav.next_line()
    assert nav.line == 1
    assert nav.selection() == ("어서", "어")
    assert nav.first_line == 0

    nav.next_line()
    assert nav.selection() == ("선생님", "선")
    assert nav.first_line == 1
    assert nav.visible() == nav.lines[1:3]

    nav.next_line()
    assert nav.line == 2


def test_prev_line_scrolls_back(nav):
    nav.next_line()
    nav.next_line()
    nav.prev_line()
    nav.prev_line()
    assert nav.line == 0
    assert nav.first_line == 0
    nav.prev_line()
    assert nav.line == 0


def test_playing_line(nav):
    assert nav.playing_line(0) == 0
    assert nav.playing_line(2999) == 0
    assert nav.playing_line(3000) == 1
    assert nav.playing_line(60000) == 2


def test_playing_line_before_first_timestamp():
    n = LyricsNavigation.from_timed_lines([(500, "가")])
    assert n.playing_line(100) is None


def test_seek_targets(nav):
    nav.next_line()
    assert nav.current_line_start() == 3000
    assert LyricsNavigation.rewind_target(5000) == 5000 - REWIND_MS
    assert LyricsNavigation.rewind_target(500) == 0


def test_empty_lyrics():
    n = LyricsNavigation.from_timed_lines([(0, " "), (10, "")])
    assert n.lines == []
    assert n.selection() is None
    assert n.current_line_start() is None
    n.next_line()
    n.next_syllable()
    n.prev_syllable()
    assert n.visible() == []


def test_line_without_hangul_has_no_selection():
    n = LyricsNavigation.from_timed_lines([(0, "la la la")])
    assert n.selection() is None
    n.next_syllable()
    assert (n.word, n.syllable) == (0, 0)
