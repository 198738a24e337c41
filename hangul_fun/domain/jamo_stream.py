"""Look-ahead iteration over a decomposed jamo sequence.

Every downstream consumer (pronunciation rules, hints, the syllable
breakdown) needs to see a jamo together with its neighbours. `JamoStream`
materialises the sequence once and records where each syllable starts, so
peeking and seeking are index arithmetic.
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from typing import Iterator, Optional

from hangul_fun.domain.hangul_unicode import compose_syllable, decompose_all
from hangul_fun.domain.jamo_data import SILENT_INITIAL, is_initial_consonant, modern_jamo


@dataclass(frozen=True)
class JamoInStream:
    curr: str
    prev: Optional[str] = None
    next: Optional[str] = None
    after_next: Optional[str] = None
    next_syllable: Optional[str] = None

    def is_final_consonant_followed_by_vowel(self) -> bool:
        # Assumes a well-formed jamo sequence.
        return self.next == SILENT_INITIAL


class JamoStream:
    """Forward-only cursor yielding a `JamoInStream` per position."""

    def __init__(self, jamos: str) -> None:
        self._jamos = str(jamos)
        self._syllable_starts = [i for i, ch in enumerate(self._jamos) if is_initial_consonant(ch)]
        self._index = 0

    @classmethod
    def from_jamos(cls, jamos: str) -> "JamoStream":
        return cls(jamos)

    @classmethod
    def from_hangul_syllables(cls, text: str) -> "JamoStream":
        return cls(decompose_all(text))

    @property
    def position(self) -> int:
        return self._index

    @property
    def syllable_count(self) -> int:
        return len(self._syllable_starts)

    def seek_to_syllable(self, index: int) -> None:
        """Move to the start of the `index`-th syllable; out-of-range is ignored."""
        if 0 <= index < len(self._syllable_starts):
            self._index = self._syllable_starts[index]

    def __iter__(self) -> Iterator[JamoInStream]:
        return self

    def __next__(self) -> JamoInStream:
        i = self._index
        if i >= len(self._jamos):
            raise StopIteration
        self._index += 1
        return JamoInStream(
            curr=self._jamos[i],
            prev=self._jamos[i - 1] if i > 0 else None,
            next=self._at(i + 1),
            after_next=self._at(i + 2),
            next_syllable=self._next_syllable(i),
        )

    def _at(self, i: int) -> Optional[str]:
        return self._jamos[i] if i < len(self._jamos) else None

    def _next_syllable(self, i: int) -> Optional[str]:
        pos = bisect_right(self._syllable_starts, i)
        if pos >= len(self._syllable_starts):
            return None
        start = self._syllable_starts[pos]
        end = self._syllable_starts[pos + 1] if pos + 1 < len(self._syllable_starts) else len(self._jamos)

        chunk: list[str] = []
        for ch in self._jamos[start:end]:
            if modern_jamo(ch) is None:
                break
            chunk.append(ch)
        return compose_syllable(chunk)
