"""hangul-fun: analyze and learn Hangul from the command line.

Sub-commands:
  decode STRING         per-character report, decomposition and romanization
  romanize TEXT         romanization (pronunciation rules applied unless --no-rules)
  pronounce TEXT        respell TEXT as it is pronounced
  breakdown TEXT        initial/medial/final details for each syllable
  introductions         a random "Greetings & Introductions" dialogue
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import Callable, Optional, Sequence

from hangul_fun.domain.enums import RomanizationSettings
from hangul_fun.domain.hangul_unicode import decompose_all
from hangul_fun.domain.pronunciation_rules import pronounce
from hangul_fun.domain.romanization_rr import romanize_decomposed, romanize_text
from hangul_fun.domain.syllables import describe_char, describe_syllable
from hangul_fun.services.introductions import random_introduction
from hangul_fun.services.settings_store import SettingsStore

logger = logging.getLogger("hangul_fun")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hangul-fun", description="A program to help one analyze and learn Hangul.")
    parser.add_argument("--settings", default=None, help="Path to settings.yaml.")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("decode", help="Decode a string.")
    p.add_argument("string")

    p = sub.add_parser("romanize", help="Romanize text.")
    p.add_argument("text")
    p.add_argument("--no-rules", action="store_true", help="Romanize the spelling, not the pronunciation.")
    p.add_argument("--unknown", default=None, help="Marker for jamo with no known romanization.")

    p = sub.add_parser("pronounce", help="Respell text as pronounced.")
    p.add_argument("text")

    p = sub.add_parser("breakdown", help="Show the jamo of each syllable.")
    p.add_argument("text")

    p = sub.add_parser("introductions", help="Print a random introductions dialogue.")
    p.add_argument("--seed", type=int, default=None)

    return parser


def _cmd_decode(args: argparse.Namespace, settings: RomanizationSettings) -> int:
    for ch in args.string:
        print(describe_char(ch))
    decomposed = decompose_all(args.string)
    print(
        "decomposed: {} (original length={}, decomposed length={})".format(
            decomposed, len(args.string), len(decomposed)
        )
    )
    print("romanized: {}".format(romanize_decomposed(decomposed, unknown=settings.unknown_marker)))
    return 0


def _cmd_romanize(args: argparse.Namespace, settings: RomanizationSettings) -> int:
    marker = args.unknown if args.unknown is not None else settings.unknown_marker
    result = romanize_text(args.text, apply_rules=settings.apply_rules and not args.no_rules, unknown=marker)
    print(result.rr)
    return 0


def _cmd_pronounce(args: argparse.Namespace, settings: RomanizationSettings) -> int:
    print(pronounce(args.text))
    return 0


def _cmd_breakdown(args: argparse.Namespace, settings: RomanizationSettings) -> int:
    for ch in args.text:
        breakdown = describe_syllable(ch, unknown=settings.unknown_marker)
        if breakdown is None:
            continue
        print("Syllable: {}".format(ch))
        for line in breakdown.lines():
            print(line)
    return 0


def _cmd_introductions(args: argparse.Namespace, settings: RomanizationSettings) -> int:
    rng = random.Random(args.seed) if args.seed is not None else None
    for line in random_introduction(rng).lines():
        print(line)
    return 0


_COMMANDS: dict[str, Callable[[argparse.Namespace, RomanizationSettings], int]] = {
    "decode": _cmd_decode,
    "romanize": _cmd_romanize,
    "pronounce": _cmd_pronounce,
    "breakdown": _cmd_breakdown,
    "introductions": _cmd_introductions,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    store = SettingsStore(args.settings)
    logging.basicConfig(level=store.get_log_level(), format="[%(levelname)s] %(name)s: %(message)s")
    settings = store.get_romanization()
    logger.debug("Settings from %s: %s", store.path, settings)

    try:
        return _COMMANDS[args.command](args, settings)
    except ValueError as e:
        print("error: {}".format(e), file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
