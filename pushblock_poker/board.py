from __future__ import annotations

import logging
from typing import Iterable, Optional, Tuple

from .coordinate import Direction, Point, PointSet

logger = logging.getLogger(__name__)


class Board:
    """Immutable push-block puzzle state; accessors hand out copies."""

    __slots__ = ("_player", "_walls", "_blocks", "_targets")

    def __init__(self, player: Point, walls: Iterable[Point], blocks: Iterable[Point], targets: Iterable[Point]) -> None:
        self._player = player
        self._walls = PointSet(walls)
        self._blocks = PointSet(blocks)
        self._targets = PointSet(targets)

    @property
    def player(self) -> Point:
        return self._player

    def walls(self) -> PointSet:
        return self._walls.copy()

    def blocks(self) -> PointSet:
        return self._blocks.copy()

    def targets(self) -> PointSet:
        return self._targets.copy()

    def is_wall(self, point: Point) -> bool:
        return point in self._walls

    def is_block(self, point: Point) -> bool:
        return point in self._blocks

    def is_target(self, point: Point) -> bool:
        return point in self._targets

    def move(self, direction: Direction) -> "Board":
        moving = PointSet()
        n = 1
        while True:
            candidate = self._player.nudge_by(n, direction)
            if candidate is None or candidate in self._walls:
                logger.debug("move %s rejected at step %d from %s", direction.value, n, self._player)
                return Board(self._player, self._walls, self._blocks, self._targets)
            if candidate not in self._blocks:
                break
            moving.append(candidate)
            n += 1

        new_player = _nudged(self._player, direction)
        new_blocks = [_nudged(block, direction) if block in moving else block for block in self._blocks]
        board = Board(new_player, self._walls, new_blocks, self._targets)
        if len(moving) and board.all_targets_triggered():
            logger.debug("all %d targets triggered", len(self._targets))
        return board

    def triggered_targets(self) -> PointSet:
        return PointSet(target for target in self._targets if target in self._blocks)

    def all_targets_triggered(self) -> bool:
        return all(target in self._blocks for target in self._targets)

    def state_key(self) -> Tuple:
        return (
            (self._player.x, self._player.y),
            tuple((p.x, p.y) for p in self._walls),
            tuple((p.x, p.y) for p in self._blocks),
            tuple((p.x, p.y) for p in self._targets),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self._player == other._player
            and self._walls == other._walls
            and self._blocks == other._blocks
            and self._targets == other._targets
        )

    def __hash__(self) -> int:
        return hash(self.state_key())

    def __repr__(self) -> str:
        return (
            f"Board(player={self._player!r}, walls={self._walls!r}, "
            f"blocks={self._blocks!r}, targets={self._targets!r})"
        )


def _nudged(point: Point, direction: Direction) -> Point:
    moved: Optional[Point] = point.nudge(direction)
    if moved is None:
        raise ValueError(f"cannot move {point} {direction.value.lower()} past the coordinate range")
    return moved


def replay_moves(board: Board, directions: Iterable[Direction]) -> Board:
    for direction in directions:
        board = board.move(direction)
    return board
