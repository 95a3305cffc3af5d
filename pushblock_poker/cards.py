"""Playing cards of a 52-card french-suited deck."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from functools import total_ordering
from typing import List

RANK_SYMBOLS = "23456789TJQKA"


class Rank(IntEnum):
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def symbol(self) -> str:
        return RANK_SYMBOLS[self - Rank.TWO]

    @property
    def label(self) -> str:
        return self.name.capitalize()

    def predecessor(self) -> "Rank":
        # Two wraps around to Ace so the wheel (5-4-3-2-A) reads as a run
        if self == Rank.TWO:
            return Rank.ACE
        return Rank(self - 1)

    @classmethod
    def from_symbol(cls, symbol: str) -> "Rank":
        idx = RANK_SYMBOLS.find(symbol.upper())
        if len(symbol) != 1 or idx < 0:
            raise ValueError(f"invalid card rank {symbol!r}")
        return cls(idx + Rank.TWO)


class Suit(str, Enum):
    DIAMOND = "d"
    CLUB = "c"
    HEART = "h"
    SPADE = "s"


@total_ordering
@dataclass(frozen=True, eq=False)
class Card:
    """A card whose equality, ordering and hash only look at the rank."""

    rank: Rank
    suit: Suit

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank == other.rank

    def __lt__(self, other: "Card") -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank < other.rank

    def __hash__(self) -> int:
        return hash(self.rank)

    def __str__(self) -> str:
        return f"{self.rank.symbol}{self.suit.value}"

    @classmethod
    def parse(cls, text: str) -> "Card":
        text = text.strip()
        if len(text) != 2:
            raise ValueError(f"card must be two characters like 'Ts', got {text!r}")
        try:
            suit = Suit(text[1].lower())
        except ValueError:
            raise ValueError(f"invalid card suit {text[1]!r}") from None
        return cls(Rank.from_symbol(text[0]), suit)


def parse_cards(text: str) -> List[Card]:
    return [Card.parse(token) for token in text.replace(",", " ").split()]
