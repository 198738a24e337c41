"""Per-syllable reports (domain layer).

Used by the CLI and by anything that shows a selected syllable next to its
jamo, romanization and pronunciation hints.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from hangul_fun.domain.hangul_unicode import classify, decompose_syllable
from hangul_fun.domain.jamo_data import to_compat
from hangul_fun.domain.jamo_stream import JamoStream
from hangul_fun.domain.pronunciation_hints import get_pronunciation_hint
from hangul_fun.domain.romanization_rr import UNKNOWN_ROMANIZATION, romanize_jamo


@dataclass(frozen=True)
class JamoPart:
    role: str  # "initial" | "medial" | "final"
    jamo: str
    compat: str
    rr: str
    hint: str


@dataclass(frozen=True)
class SyllableBreakdown:
    syllable: str
    parts: list[JamoPart] = field(default_factory=list)

    def part(self, role: str) -> Optional[JamoPart]:
        for p in self.parts:
            if p.role == role:
                return p
        return None

    def lines(self) -> list[str]:
        labels = {"initial": "Initial", "medial": "Medial ", "final": "Final  "}
        out = []
        for p in self.parts:
            line = "  {}: {} ({})".format(labels[p.role], p.compat, p.rr)
            if p.hint:
                line = "{} {}".format(line, p.hint)
            out.append(line)
        return out


def describe_char(ch: str) -> str:
    """One-line report: glyph, codepoint, Hangul class and jamo for syllables."""
    start = "ch={} ({:#x}) {}".format(ch, ord(ch), classify(ch).name)
    parts = decompose_syllable(ch)
    if parts is None:
        return start

    initial, medial, final = parts
    info = "{} initial={} ({:#x}) medial={} ({:#x})".format(
        start, to_compat(initial), ord(initial), to_compat(medial), ord(medial)
    )
    if final is not None:
        info = "{} final={} ({:#x})".format(info, to_compat(final), ord(final))
    return info


def describe_syllable(ch: str, unknown: str = UNKNOWN_ROMANIZATION) -> Optional[SyllableBreakdown]:
    """Break a syllable into its parts; None if `ch` is not a Hangul syllable.

    The silent initial ㅇ is romanized as "silent". A final whose sound changes
    before a vowel shows both readings, e.g. "p/b" for ㅂ.
    """
    if decompose_syllable(ch) is None:
        return None

    roles = ("initial", "medial", "final")
    parts: list[JamoPart] = []
    for role, item in zip(roles, JamoStream.from_hangul_syllables(ch)):
        if role == "final":
            alone = romanize_jamo(item.curr, False, unknown) or unknown
            linked = romanize_jamo(item.curr, True, unknown) or unknown
            rr = alone if alone == linked else "{}/{}".format(alone, linked)
        else:
            rr = romanize_jamo(item.curr, False, unknown)
            rr = unknown if rr is None else (rr or "silent")
        parts.append(
            JamoPart(
                role=role,
                jamo=item.curr,
                compat=to_compat(item.curr),
                rr=rr,
                hint=get_pronunciation_hint(item),
            )
        )
    return SyllableBreakdown(syllable=ch, parts=parts)
