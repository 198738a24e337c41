"""Phonological rules for final consonants (domain layer).

Written Hangul and spoken Korean diverge at syllable boundaries. For every
final consonant in a jamo sequence the rules below decide the *surface*
final consonant and, where it changes, the surface initial consonant of the
following syllable.

Rules are pure functions `RuleContext -> RuleResult` and run in a fixed order:

  1. simplify_compound_final  (ㄳ, ㄺ, ... reduced to one consonant)
  2. resyllabify              (liaison: final moves onto a silent ㅇ)
  3. reinforce                (tensification: ㄱㄷㅂㅅㅈ -> ㄲㄸㅃㅆㅉ)

Compound finals must be reduced first; the later rules only match simple
finals.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Final, NamedTuple, Optional, Union

from hangul_fun.domain.hangul_compose import compose_all
from hangul_fun.domain.hangul_unicode import decompose_all
from hangul_fun.domain.jamo_data import (
    SILENT_INITIAL,
    final_jamo,
    initial_jamo,
    is_final_consonant,
    is_initial_consonant,
)
from hangul_fun.domain.jamo_stream import JamoStream


# -----------------------------------------------------------------------------
# Rule types
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class RuleContext:
    """A final consonant and the initial consonant that follows it (if any)."""

    final: str
    next_initial: Optional[str] = None


@dataclass(frozen=True)
class NoChange:
    pass


@dataclass(frozen=True)
class ChangeNextInitial:
    initial: str


@dataclass(frozen=True)
class ChangeFinal:
    final: str


@dataclass(frozen=True)
class ChangeBoth:
    final: str
    initial: str


@dataclass(frozen=True)
class RemoveFinal:
    pass


@dataclass(frozen=True)
class RemoveFinalAndChangeNextInitial:
    initial: str


RuleResult = Union[
    NoChange,
    ChangeNextInitial,
    ChangeFinal,
    ChangeBoth,
    RemoveFinal,
    RemoveFinalAndChangeNextInitial,
]

Rule = Callable[[RuleContext], RuleResult]

NO_CHANGE: Final[NoChange] = NoChange()
REMOVE_FINAL: Final[RemoveFinal] = RemoveFinal()


# -----------------------------------------------------------------------------
# Rule data
# -----------------------------------------------------------------------------

class _Cluster(NamedTuple):
    # Surface final before a consonant or at the end of a word. None: not modelled.
    reduced: Optional[str]
    # Before a silent ㅇ: the final that stays, and the member carried onto the ㅇ.
    kept: str
    carried: Optional[str]


_COMPOUND_FINALS: Final[dict[str, _Cluster]] = {
    final_jamo("ㄳ"): _Cluster(final_jamo("ㄱ"), final_jamo("ㄱ"), initial_jamo("ㅅ")),
    final_jamo("ㄵ"): _Cluster(final_jamo("ㄴ"), final_jamo("ㄴ"), initial_jamo("ㅈ")),
    # ㅎ aspirates a following consonant; only the liaison outcome is defined.
    final_jamo("ㄶ"): _Cluster(None, final_jamo("ㄴ"), None),
    final_jamo("ㄺ"): _Cluster(final_jamo("ㄱ"), final_jamo("ㄹ"), initial_jamo("ㄱ")),
    final_jamo("ㄻ"): _Cluster(final_jamo("ㅁ"), final_jamo("ㄹ"), initial_jamo("ㅁ")),
    final_jamo("ㄼ"): _Cluster(final_jamo("ㄹ"), final_jamo("ㄹ"), initial_jamo("ㅂ")),
    final_jamo("ㄽ"): _Cluster(final_jamo("ㄹ"), final_jamo("ㄹ"), initial_jamo("ㅅ")),
    final_jamo("ㄾ"): _Cluster(final_jamo("ㄹ"), final_jamo("ㄹ"), initial_jamo("ㅌ")),
    final_jamo("ㄿ"): _Cluster(final_jamo("ㅂ"), final_jamo("ㄹ"), initial_jamo("ㅍ")),
    final_jamo("ㅀ"): _Cluster(None, final_jamo("ㄹ"), None),
    final_jamo("ㅄ"): _Cluster(final_jamo("ㅂ"), final_jamo("ㅂ"), initial_jamo("ㅅ")),
}

# Simple finals that move onto a following silent ㅇ.
_FINAL_TO_INITIAL: Final[dict[str, str]] = {
    final_jamo(g): initial_jamo(g)
    for g in ("ㄱ", "ㄲ", "ㄴ", "ㄷ", "ㄹ", "ㅁ", "ㅂ", "ㅅ", "ㅆ", "ㅈ", "ㅊ", "ㅋ", "ㅌ", "ㅍ")
}

_FINAL_NG: Final[str] = final_jamo("ㅇ")
_FINAL_H: Final[str] = final_jamo("ㅎ")
_INITIAL_S: Final[str] = initial_jamo("ㅅ")

# Obstruent finals (k/t/p sounds) that tense a following plain consonant.
_TENSE_INDUCING: Final[frozenset[str]] = frozenset(
    final_jamo(g) for g in ("ㄱ", "ㄲ", "ㅋ", "ㄷ", "ㅅ", "ㅆ", "ㅈ", "ㅊ", "ㅌ", "ㅂ", "ㅍ")
)

_TENSED: Final[dict[str, str]] = {
    initial_jamo(plain): initial_jamo(tense)
    for plain, tense in (("ㄱ", "ㄲ"), ("ㄷ", "ㄸ"), ("ㅂ", "ㅃ"), ("ㅅ", "ㅆ"), ("ㅈ", "ㅉ"))
}


# -----------------------------------------------------------------------------
# Rules
# -----------------------------------------------------------------------------

def simplify_compound_final(ctx: RuleContext) -> RuleResult:
    """Reduce a two-consonant final (e.g. 닭 -> 닥, 닭을 -> 달글)."""
    cluster = _COMPOUND_FINALS.get(ctx.final)
    if cluster is None:
        return NO_CHANGE

    if ctx.next_initial == SILENT_INITIAL:
        if cluster.carried is None:
            return ChangeFinal(cluster.kept)
        return ChangeBoth(cluster.kept, cluster.carried)

    if cluster.reduced is None:
        return NO_CHANGE
    return ChangeFinal(cluster.reduced)


def resyllabify(ctx: RuleContext) -> RuleResult:
    """Move a final consonant onto a following silent ㅇ (십오 -> 시보).

    ㅇ never moves (생일 stays 생일) and ㅎ is dropped (좋아 -> 조아).
    """
    if ctx.next_initial != SILENT_INITIAL:
        return NO_CHANGE
    if ctx.final == _FINAL_NG:
        return NO_CHANGE
    if ctx.final == _FINAL_H:
        return REMOVE_FINAL

    moved = _FINAL_TO_INITIAL.get(ctx.final)
    if moved is None:
        return NO_CHANGE
    return RemoveFinalAndChangeNextInitial(moved)


def reinforce(ctx: RuleContext) -> RuleResult:
    """Tense a plain initial after an obstruent final (학교 -> 학꾜).

    ㅎ followed by ㅅ drops out and tenses the ㅅ (좋소 -> 조쏘).
    """
    tensed = _TENSED.get(ctx.next_initial) if ctx.next_initial else None
    if tensed is None:
        return NO_CHANGE
    if ctx.final == _FINAL_H and ctx.next_initial == _INITIAL_S:
        return RemoveFinalAndChangeNextInitial(tensed)
    if ctx.final in _TENSE_INDUCING:
        return ChangeNextInitial(tensed)
    return NO_CHANGE


PRONUNCIATION_RULES: Final[tuple[Rule, ...]] = (
    simplify_compound_final,
    resyllabify,
    reinforce,
)


# -----------------------------------------------------------------------------
# Pipeline
# -----------------------------------------------------------------------------

def resolve_final(
    ctx: RuleContext,
    rules: tuple[Rule, ...] = PRONUNCIATION_RULES,
) -> tuple[Optional[str], Optional[str]]:
    """Run `rules` in order over one final-consonant position.

    Returns (surface final or None if removed, next-initial override or None).
    A Remove* result stops the pipeline for this position.
    """
    keep_final = True
    override: Optional[str] = None

    for rule in rules:
        result = rule(ctx)
        if isinstance(result, ChangeFinal):
            ctx = replace(ctx, final=result.final)
        elif isinstance(result, ChangeNextInitial):
            ctx = replace(ctx, next_initial=result.initial)
            override = result.initial
        elif isinstance(result, ChangeBoth):
            ctx = replace(ctx, final=result.final, next_initial=result.initial)
            override = result.initial
        elif isinstance(result, RemoveFinal):
            keep_final = False
            break
        elif isinstance(result, RemoveFinalAndChangeNextInitial):
            keep_final = False
            override = result.initial
            break

    return (ctx.final if keep_final else None), override


def apply_pronunciation_rules(jamos: str, rules: tuple[Rule, ...] = PRONUNCIATION_RULES) -> str:
    """Rewrite a conjoining jamo sequence into its pronounced (surface) form.

    Non-jamo characters pass through unchanged; a final consonant only sees a
    next initial when one immediately follows it (spaces block liaison).
    """
    out: list[str] = []
    skip_initial = False

    for item in JamoStream.from_jamos(jamos):
        if is_final_consonant(item.curr):
            next_initial = item.next if is_initial_consonant(item.next) else None
            final, override = resolve_final(RuleContext(item.curr, next_initial), rules)
            if final is not None:
                out.append(final)
            if override is not None:
                out.append(override)
                skip_initial = True
            continue

        if skip_initial and is_initial_consonant(item.curr):
            # Already emitted as the override above.
            skip_initial = False
            continue

        out.append(item.curr)

    return "".join(out)


def pronounce(text: str) -> str:
    """Return `text` respelled as pronounced, e.g. pronounce("학교") == "학꾜"."""
    return compose_all(apply_pronunciation_rules(decompose_all(text)))
