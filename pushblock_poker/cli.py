from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from .board import Board
from .cards import parse_cards
from .config import Settings
from .coordinate import Direction
from .hand import Hand
from .levels import format_level, load_level, sample_board
from .timeline import Timeline

logger = logging.getLogger(__name__)

UNDO = "Z"
REDO = "Y"
RESET = "X"


def play_moves(timeline: Timeline, moves: str) -> Timeline:
    for token in moves.upper():
        if token.isspace():
            continue
        if token == UNDO:
            timeline.undo()
        elif token == REDO:
            timeline.redo()
        elif token == RESET:
            timeline.reset()
        else:
            timeline.move(Direction.parse(token))
    return timeline


def _load_board(level: Optional[str], settings: Settings) -> Board:
    path = level or settings.level_path
    if path is None:
        return sample_board()
    logger.info("loading level %s", path)
    return load_level(path)


def run_puzzle(args: argparse.Namespace, settings: Settings) -> int:
    timeline = Timeline.from_board(_load_board(args.level, settings))
    play_moves(timeline, args.moves)
    print(format_level(timeline.current))
    print(f"Moves recorded: {timeline.index}")
    if timeline.solved:
        print("Win!")
    return 0


def run_poker(args: argparse.Namespace, settings: Settings) -> int:
    hands: List[Hand] = [Hand(parse_cards(text)) for text in args.hands]
    for hand in hands:
        print(f"{' '.join(str(card) for card in hand.cards)}: {hand.kind()}")
    if len(hands) == 2:
        first, second = hands
        if first == second:
            print("Tie")
        else:
            print(f"Hand {1 if first > second else 2} is stronger")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pushblock-poker", description="Push-block puzzle and poker hand tools.")
    parser.add_argument("--log-level", default=None, help="Logging level (default: $PUSHBLOCK_LOG_LEVEL or WARNING).")
    sub = parser.add_subparsers(dest="command", required=True)

    puzzle = sub.add_parser("puzzle", help="Play a sequence of moves on a level.")
    puzzle.add_argument("--level", default=None, help="Level file (default: $PUSHBLOCK_LEVEL or the sample level).")
    puzzle.add_argument(
        "--moves", default="", help="Moves as letters U/L/D/R; Z undoes, Y redoes, X resets."
    )
    puzzle.set_defaults(handler=run_puzzle)

    poker = sub.add_parser("poker", help="Rank poker hands written like 'Ts Js Qs Ks As'.")
    poker.add_argument("hands", nargs="+", help="One quoted hand per argument.")
    poker.set_defaults(handler=run_poker)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings.from_env()
    level_name = (args.log_level or settings.log_level).upper()
    logging.basicConfig(level=getattr(logging, level_name, logging.WARNING), format="%(levelname)s %(name)s: %(message)s")

    try:
        return args.handler(args, settings)
    except (ValueError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
