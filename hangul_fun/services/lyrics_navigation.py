from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from hangul_fun.domain.hangul_unicode import HangulCharClass, split

logger = logging.getLogger(__name__)

# (milliseconds, line of lyrics), as produced by an LRC parser.
TimedLine = tuple[int, str]

REWIND_MS = 2000


def _words(line: str) -> list[str]:
    return [run for cls, run in split(line) if cls is HangulCharClass.Syllables]


@dataclass
class LyricsNavigation:
    """Line/word/syllable selection over timed lyrics.

    Owns:
    - the non-empty, trimmed lyrics lines
    - the window of visible lines (first_line .. first_line + visible_lines)
    - the selected line, word (run of Hangul syllables) and syllable

    Rendering and audio seeking stay with the caller.
    """

    lines: list[TimedLine] = field(default_factory=list)
    visible_lines: int = 10
    first_line: int = 0
    line: int = 0
    word: int = 0
    syllable: int = 0

    @classmethod
    def from_timed_lines(cls, lines: Iterable[TimedLine], visible_lines: int = 10) -> "LyricsNavigation":
        kept = [(int(ms), text.strip()) for ms, text in lines if text.strip()]
        logger.debug("LyricsNavigation: %d lyric lines", len(kept))
        return cls(lines=kept, visible_lines=max(1, int(visible_lines)))

    def _word_lengths(self) -> list[int]:
        if not self.lines:
            return []
        return [len(w) for w in _words(self.lines[self.line][1])]

    def selection(self) -> Optional[tuple[str, str]]:
        """Return the selected (word, syllable), or None if nothing is selectable."""
        if not 0 <= self.line < len(self.lines):
            return None
        words = _words(self.lines[self.line][1])
        if self.word >= len(words) or self.syllable >= len(words[self.word]):
            return None
        word = words[self.word]
        return word, word[self.syllable]

    def next_line(self) -> None:
        if self.line + 1 < len(self.lines):
            self.line += 1
            self.word = 0
            self.syllable = 0
            if self.first_line + self.visible_lines <= self.line:
                self.first_line += 1

    def prev_line(self) -> None:
        if self.line > 0:
            self.line -= 1
            self.word = 0
            self.syllable = 0
            if self.first_line > self.line:
                self.first_line = self.line

    def next_syllable(self) -> None:
        lengths = self._word_lengths()
        if self.word >= len(lengths):
            return
        if self.syllable + 1 < lengths[self.word]:
            self.syllable += 1
        elif self.word + 1 < len(lengths):
            self.word += 1
            self.syllable = 0

    def prev_syllable(self) -> None:
        lengths = self._word_lengths()
        if self.word >= len(lengths):
            return
        if self.syllable > 0:
            self.syllable -= 1
        elif self.word > 0:
            self.word -= 1
            self.syllable = lengths[self.word] - 1

    def visible(self) -> list[TimedLine]:
        return self.lines[self.first_line:self.first_line + self.visible_lines]

    def playing_line(self, position_ms: int) -> Optional[int]:
        """Index of the last line whose timestamp is at or before `position_ms`."""
        latest = None
        for idx, (ms, _) in enumerate(self.lines):
            if ms > position_ms:
                break
            latest = idx
        return latest

    def current_line_start(self) -> Optional[int]:
        """Seek target for replaying the selected line."""
        if 0 <= self.line < len(self.lines):
            return self.lines[self.line][0]
        return None

    @staticmethod
    def rewind_target(position_ms: int, rewind_ms: int = REWIND_MS) -> int:
        return max(0, int(position_ms) - int(rewind_ms))
