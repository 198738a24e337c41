"""The "Greetings & Introductions" conversation.

From Unit 2 of Active Korean 1 (Language Education Institute, Seoul National
University), pg. 42. A name, country and occupation are picked at random and
the polite copula is chosen to match each noun.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Final, Optional

from hangul_fun.domain.particles import copula

logger = logging.getLogger(__name__)

NAMES: Final[tuple[str, ...]] = ("양양", "키샨", "마이클", "크리스")
COUNTRIES: Final[tuple[str, ...]] = ("미국", "중국", "일본", "인도")
OCCUPATIONS: Final[tuple[str, ...]] = ("선생님", "학생", "의사", "요리사")


@dataclass(frozen=True)
class Introduction:
    name: str
    country: str
    occupation: str

    def lines(self) -> list[str]:
        name_copula = copula(self.name)
        occupation_copula = copula(self.occupation)
        return [
            "안녕하세요?",
            "안녕하세요? 저는 {}{}.".format(self.name, name_copula),
            "{} 씨는 {} 사람이에요?".format(self.name, self.country),
            "네, 저는 {} 사람이에요.".format(self.country),
            "{} 씨는 {}{}?".format(self.name, self.occupation, occupation_copula),
            "네, 저는 {}{}.".format(self.occupation, occupation_copula),
        ]


def random_introduction(rng: Optional[random.Random] = None) -> Introduction:
    rng = rng or random.Random()
    intro = Introduction(
        name=rng.choice(NAMES),
        country=rng.choice(COUNTRIES),
        occupation=rng.choice(OCCUPATIONS),
    )
    logger.debug("Introduction picked: %s", intro)
    return intro
