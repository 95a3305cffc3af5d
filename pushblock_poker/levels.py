"""Plain-text level format for push-block boards.

One line per row, one character per cell::

    #  -  |   wall
    0         block
    ^         target
    *         block resting on a target
    @         player
    +         player standing on a target
    .  space  empty floor

Row index is the y coordinate and column index the x coordinate, both from
the top-left corner.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Union

from .board import Board
from .coordinate import Point, PointSet

logger = logging.getLogger(__name__)

WALL_CHARS = "#-|"
FLOOR_CHARS = ". "
BLOCK = "0"
TARGET = "^"
TRIGGERED_TARGET = "*"
PLAYER = "@"
PLAYER_ON_TARGET = "+"

SAMPLE_LEVEL = "\n".join(
    [
        "..###...",
        "..#^#...",
        "..#.####",
        "###0.0^#",
        "#^.0@###",
        "####0#..",
        "...#^#..",
        "...###..",
    ]
)


def parse_level(text: str) -> Board:
    player: Optional[Point] = None
    walls = PointSet()
    blocks = PointSet()
    targets = PointSet()

    for y, line in enumerate(text.splitlines()):
        for x, char in enumerate(line):
            point = Point(x, y)
            if char in FLOOR_CHARS:
                continue
            if char in WALL_CHARS:
                walls.append(point)
            elif char == BLOCK:
                blocks.append(point)
            elif char == TARGET:
                targets.append(point)
            elif char == TRIGGERED_TARGET:
                blocks.append(point)
                targets.append(point)
            elif char in (PLAYER, PLAYER_ON_TARGET):
                if player is not None:
                    raise ValueError(f"line {y + 1}, column {x + 1}: second player (first at {player.x},{player.y})")
                player = point
                if char == PLAYER_ON_TARGET:
                    targets.append(point)
            else:
                raise ValueError(f"line {y + 1}, column {x + 1}: unknown cell {char!r}")

    if player is None:
        raise ValueError("level has no player")
    logger.debug(
        "parsed level: %d walls, %d blocks, %d targets", len(walls), len(blocks), len(targets)
    )
    return Board(player, walls, blocks, targets)


def _cell_char(board: Board, point: Point) -> str:
    on_target = board.is_target(point)
    if point == board.player:
        return PLAYER_ON_TARGET if on_target else PLAYER
    if board.is_wall(point):
        return WALL_CHARS[0]
    if board.is_block(point):
        return TRIGGERED_TARGET if on_target else BLOCK
    return TARGET if on_target else FLOOR_CHARS[0]


def format_level(board: Board) -> str:
    points = [board.player, *board.walls(), *board.blocks(), *board.targets()]
    if any(p.x < 0 or p.y < 0 for p in points):
        raise ValueError("cannot write a level with negative coordinates")
    width = max(p.x for p in points) + 1
    height = max(p.y for p in points) + 1
    lines: List[str] = []
    for y in range(height):
        lines.append("".join(_cell_char(board, Point(x, y)) for x in range(width)))
    return "\n".join(lines)


def load_level(path: Union[str, Path]) -> Board:
    return parse_level(Path(path).read_text(encoding="utf-8"))


def sample_board() -> Board:
    return parse_level(SAMPLE_LEVEL)
