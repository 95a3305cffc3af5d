from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import IntEnum
from functools import total_ordering
from itertools import combinations
from typing import Iterable, List, Optional, Sequence, Tuple

from .cards import Card, Rank

HAND_SIZE = 5
MAX_HAND_SIZE = 7


class HandCategory(IntEnum):
    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").title()


@dataclass(frozen=True, order=True)
class HandKind:
    category: HandCategory
    # tiebreak ranks within the category, most significant first
    ranks: Tuple[Rank, ...] = ()

    @classmethod
    def high_card(cls, ranks: Sequence[Rank]) -> "HandKind":
        return cls(HandCategory.HIGH_CARD, tuple(ranks))

    @classmethod
    def pair(cls, pair: Rank, high_cards: Sequence[Rank]) -> "HandKind":
        return cls(HandCategory.PAIR, (pair, *high_cards))

    @classmethod
    def two_pair(cls, pair_high: Rank, pair_low: Rank, high_card: Rank) -> "HandKind":
        return cls(HandCategory.TWO_PAIR, (pair_high, pair_low, high_card))

    @classmethod
    def three_of_a_kind(cls, rank: Rank) -> "HandKind":
        return cls(HandCategory.THREE_OF_A_KIND, (rank,))

    @classmethod
    def straight(cls, high: Rank) -> "HandKind":
        return cls(HandCategory.STRAIGHT, (high,))

    @classmethod
    def flush(cls, ranks: Sequence[Rank]) -> "HandKind":
        return cls(HandCategory.FLUSH, tuple(ranks))

    @classmethod
    def full_house(cls, rank: Rank) -> "HandKind":
        return cls(HandCategory.FULL_HOUSE, (rank,))

    @classmethod
    def four_of_a_kind(cls, rank: Rank) -> "HandKind":
        return cls(HandCategory.FOUR_OF_A_KIND, (rank,))

    @classmethod
    def straight_flush(cls, high: Rank) -> "HandKind":
        return cls(HandCategory.STRAIGHT_FLUSH, (high,))

    @classmethod
    def royal_flush(cls) -> "HandKind":
        return cls(HandCategory.ROYAL_FLUSH)

    def __str__(self) -> str:
        label = self.category.label
        if self.category in (HandCategory.STRAIGHT, HandCategory.STRAIGHT_FLUSH):
            return f"{label} ({self.ranks[0].label} high)"
        if self.category in (HandCategory.THREE_OF_A_KIND, HandCategory.FULL_HOUSE, HandCategory.FOUR_OF_A_KIND):
            return f"{label} ({self.ranks[0].label}s)"
        if self.category == HandCategory.TWO_PAIR:
            high, low, kicker = self.ranks
            return f"{label} ({high.label}s and {low.label}s, {kicker.label} kicker)"
        if self.ranks:
            return f"{label} ({' '.join(rank.symbol for rank in self.ranks)})"
        return label


def _ranks(cards: Sequence[Card]) -> List[Rank]:
    return [card.rank for card in cards]


def _is_flush(cards: Sequence[Card]) -> bool:
    first_suit = cards[0].suit
    return all(card.suit == first_suit for card in cards)


def _straight_high_card(cards: Sequence[Card]) -> Optional[Rank]:
    ranks = _ranks(cards)
    if ranks[0] == Rank.ACE and ranks[-1] == Rank.TWO:
        ranks = ranks[1:] + ranks[:1]
    for previous, rank in zip(ranks, ranks[1:]):
        if rank != previous.predecessor():
            return None
    return ranks[0]


def _set_hand(cards: Sequence[Card]) -> Optional[HandKind]:
    counts = Counter(_ranks(cards))
    three_of_a_kind: Optional[Rank] = None
    pairs: List[Rank] = []
    high_cards: List[Rank] = []
    for rank, count in counts.items():
        if count == 4:
            return HandKind.four_of_a_kind(rank)
        if count == 3:
            three_of_a_kind = rank
        elif count == 2:
            pairs.append(rank)
        else:
            high_cards.append(rank)

    if three_of_a_kind is not None:
        if not pairs:
            return HandKind.three_of_a_kind(three_of_a_kind)
        return HandKind.full_house(three_of_a_kind)
    if len(pairs) == 2:
        return HandKind.two_pair(max(pairs), min(pairs), high_cards[0])
    if len(pairs) == 1:
        return HandKind.pair(pairs[0], sorted(high_cards, reverse=True))
    return None


def classify(cards: Sequence[Card]) -> HandKind:
    # cards must be sorted by descending rank
    if len(cards) != HAND_SIZE:
        raise ValueError(f"classification needs exactly {HAND_SIZE} cards, got {len(cards)}")
    if _is_flush(cards):
        high = _straight_high_card(cards)
        if high == Rank.ACE:
            return HandKind.royal_flush()
        if high is not None:
            return HandKind.straight_flush(high)
        return HandKind.flush(_ranks(cards))
    high = _straight_high_card(cards)
    if high is not None:
        return HandKind.straight(high)
    set_hand = _set_hand(cards)
    if set_hand is not None:
        return set_hand
    return HandKind.high_card(_ranks(cards))


def _best_combination(cards: Sequence[Card]) -> Tuple[HandKind, Tuple[Card, ...]]:
    # combinations keep the descending order; max keeps the first of equal kinds
    best = max(combinations(cards, HAND_SIZE), key=classify)
    return classify(best), best


@total_ordering
class Hand:
    """Five to seven cards, compared by the best five-card hand they contain."""

    __slots__ = ("_cards", "_kind", "_best")

    def __init__(self, cards: Iterable[Card]) -> None:
        cards = list(cards)
        if not HAND_SIZE <= len(cards) <= MAX_HAND_SIZE:
            raise ValueError(f"a hand holds {HAND_SIZE} to {MAX_HAND_SIZE} cards, got {len(cards)}")
        self._cards: Tuple[Card, ...] = tuple(sorted(cards, key=lambda card: card.rank, reverse=True))
        self._kind, self._best = _best_combination(self._cards)

    @property
    def cards(self) -> Tuple[Card, ...]:
        return self._cards

    def kind(self) -> HandKind:
        return self._kind

    def best_five(self) -> Tuple[Card, ...]:
        return self._best

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.kind() == other.kind()

    def __lt__(self, other: "Hand") -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.kind() < other.kind()

    def __hash__(self) -> int:
        return hash(self.kind())

    def __repr__(self) -> str:
        return f"Hand({' '.join(str(card) for card in self._cards)})"
