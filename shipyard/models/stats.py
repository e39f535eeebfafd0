"""Dice ratings and modified stats."""

from dataclasses import dataclass
from enum import Enum


class Rating(Enum):
    """Die rating used for defense, pilot skill and weapon firepower."""

    D4 = "2d4"
    D6 = "2d6"
    D8 = "2d8"
    D10 = "2d10"
    D12 = "2d12"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Stat:
    """A die rating plus a flat modifier (e.g. 2d8+1)."""

    rating: Rating
    modifier: int = 0

    def __str__(self) -> str:
        s = self.rating.value
        if self.modifier > 0:
            s += f"+{self.modifier}"
        elif self.modifier < 0:
            s += str(self.modifier)
        return s
