"""Push-block puzzle engine and poker hand evaluator."""

from .coordinate import Direction, Point, PointSet
from .board import Board, replay_moves
from .levels import SAMPLE_LEVEL, format_level, load_level, parse_level, sample_board
from .timeline import Timeline
from .cards import Card, Rank, Suit, parse_cards
from .hand import Hand, HandCategory, HandKind

__all__ = [
    "Direction",
    "Point",
    "PointSet",
    "Board",
    "replay_moves",
    "SAMPLE_LEVEL",
    "format_level",
    "load_level",
    "parse_level",
    "sample_board",
    "Timeline",
    "Card",
    "Rank",
    "Suit",
    "parse_cards",
    "Hand",
    "HandCategory",
    "HandKind",
]
