from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from .board import Board
from .coordinate import Direction

logger = logging.getLogger(__name__)


@dataclass
class Timeline:
    """Caller-side history of boards with a cursor for undo, redo and reset."""

    initial: Board
    boards: List[Board] = field(default_factory=list)
    index: int = 0

    def __post_init__(self) -> None:
        if not self.boards:
            self.boards = [self.initial]
        if not 0 <= self.index < len(self.boards):
            raise IndexError(f"timeline index {self.index} out of range")

    @classmethod
    def from_board(cls, board: Board) -> "Timeline":
        return cls(initial=board)

    @property
    def current(self) -> Board:
        return self.boards[self.index]

    @property
    def solved(self) -> bool:
        return self.current.all_targets_triggered()

    def at_end(self) -> bool:
        return self.index == len(self.boards) - 1

    def append(self, board: Board) -> None:
        del self.boards[self.index + 1 :]
        self.boards.append(board)
        self.index += 1

    def move(self, direction: Direction) -> Board:
        board = self.current.move(direction)
        if board == self.current:
            logger.debug("blocked move %s not recorded", direction.value)
        else:
            self.append(board)
        return self.current

    def undo(self) -> bool:
        if self.index == 0:
            return False
        self.index -= 1
        return True

    def redo(self) -> bool:
        if self.at_end():
            return False
        self.index += 1
        return True

    def jump(self, index: int) -> None:
        if not 0 <= index < len(self.boards):
            raise IndexError(f"timeline index {index} out of range")
        self.index = index

    def reset(self) -> Board:
        self.append(self.initial)
        return self.current
