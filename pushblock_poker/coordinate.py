from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Iterator, Optional, Sequence

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def _validate_component(name: str, value: int) -> None:
    if not INT_MIN <= value <= INT_MAX:
        raise ValueError(f"{name} must fit in a signed 32-bit integer, got {value}")


class Direction(str, Enum):
    UP = "UP"
    LEFT = "LEFT"
    DOWN = "DOWN"
    RIGHT = "RIGHT"

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @classmethod
    def parse(cls, token: str) -> "Direction":
        key = token.strip().upper()
        for direction in cls:
            if key in (direction.value, direction.value[0]):
                return direction
        raise ValueError(f"unknown direction {token!r}")


_OPPOSITES: Dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


@dataclass(frozen=True)
class Point:
    """A cell position: x grows rightward, y grows downward."""

    x: int
    y: int

    def __post_init__(self) -> None:
        _validate_component("x", self.x)
        _validate_component("y", self.y)

    def nudge(self, direction: Direction) -> Optional["Point"]:
        return self.nudge_by(1, direction)

    def nudge_by(self, n: int, direction: Direction) -> Optional["Point"]:
        x, y = self.x, self.y
        if direction == Direction.UP:
            y -= n
        elif direction == Direction.DOWN:
            y += n
        elif direction == Direction.LEFT:
            x -= n
        else:
            x += n
        if not (INT_MIN <= x <= INT_MAX and INT_MIN <= y <= INT_MAX):
            return None
        return Point(x, y)


class PointSet:
    __slots__ = ("_points",)

    def __init__(self, points: Iterable[Point] = ()) -> None:
        self._points: Dict[Point, None] = {}
        for point in points:
            self.append(point)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Sequence[int]]) -> "PointSet":
        return cls(Point(x, y) for x, y in pairs)

    def append(self, point: Point) -> None:
        self._points.setdefault(point, None)

    def copy(self) -> "PointSet":
        return PointSet(self._points)

    def __contains__(self, point: object) -> bool:
        return point in self._points

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, PointSet) and list(self._points) == list(other._points)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        inner = ", ".join(f"({p.x}, {p.y})" for p in self._points)
        return f"PointSet([{inner}])"
