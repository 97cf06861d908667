from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

# Convenient tuple aliases used across modules
Point = Tuple[int, int]


class Color(IntEnum):
    EMPTY = 0
    BLACK = 1
    WHITE = 2

    def opponent(self) -> "Color":
        if self == Color.EMPTY:
            raise ValueError("Empty points have no opponent.")
        return Color.WHITE if self == Color.BLACK else Color.BLACK

    @property
    def label(self) -> str:
        return "" if self == Color.EMPTY else self.name.lower()

    @classmethod
    def parse(cls, value: Union["Color", int, str, None]) -> "Color":
        if isinstance(value, Color):
            return value
        if value is None:
            return cls.EMPTY
        if isinstance(value, int):
            return cls(value)
        text = value.strip().upper()
        if text in ("", "EMPTY", "."):
            return cls.EMPTY
        for color in cls:
            if color.name == text or (color != cls.EMPTY and color.name[0] == text):
                return color
        raise ValueError(f"Unknown color: {value!r}")


@dataclass(frozen=True)
class Stone:
    x: int
    y: int
    color: Color = Color.EMPTY

    @property
    def point(self) -> Point:
        return (self.x, self.y)

    @property
    def is_empty(self) -> bool:
        return self.color == Color.EMPTY


# A string is a maximal chain of same-coloured stones, sorted by (y, x).
String = Tuple[Stone, ...]


def reading_order(stone: Stone) -> Tuple[int, int]:
    return (stone.y, stone.x)


@dataclass(frozen=True)
class MoveRecord:
    stone: Stone
    captured: Tuple[String, ...] = field(default_factory=tuple)

    @property
    def captured_count(self) -> int:
        return sum(len(string) for string in self.captured)

    @property
    def captured_points(self) -> Tuple[Point, ...]:
        return tuple(stone.point for string in self.captured for stone in string)


class Board:
    """Square board holding the occupied stones, indexed by coordinate.

    Empty points are never stored; ``stone_at`` synthesises an empty stone for
    them. Iteration order of ``stones`` is placement order.
    """

    def __init__(
        self,
        size: int = 19,
        stones: Iterable[Stone] = (),
        last_taker: Optional[Stone] = None,
    ) -> None:
        self.size = size
        self.last_taker = last_taker
        self._points: Dict[Point, Stone] = {}
        for stone in stones:
            self._points[stone.point] = stone

    @property
    def stones(self) -> List[Stone]:
        return list(self._points.values())

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Stone]:
        return iter(self._points.values())

    def __contains__(self, stone: object) -> bool:
        if not isinstance(stone, Stone):
            return False
        return self._points.get(stone.point) == stone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.size == other.size
            and self.last_taker == other.last_taker
            and set(self._points.values()) == set(other._points.values())
        )

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def stone_at(self, x: int, y: int) -> Stone:
        existing = self._points.get((x, y))
        if existing is not None:
            return existing
        return Stone(x, y, Color.EMPTY)

    def is_occupied(self, x: int, y: int) -> bool:
        return (x, y) in self._points

    def place(self, stone: Stone) -> None:
        self._points[stone.point] = stone

    def remove(self, stones: Iterable[Stone]) -> int:
        removed = 0
        for stone in stones:
            if self._points.pop(stone.point, None) is not None:
                removed += 1
        return removed

    def copy(self) -> "Board":
        return Board(self.size, self._points.values(), self.last_taker)

    def render(self) -> str:
        symbols = {Color.EMPTY: ".", Color.BLACK: "X", Color.WHITE: "O"}
        rows = []
        # Highest y on top, like a printed diagram.
        for y in reversed(range(self.size)):
            rows.append("".join(symbols[self.stone_at(x, y).color] for x in range(self.size)))
        return "\n".join(rows)

    def __repr__(self) -> str:
        return f"Board(size={self.size}, stones={len(self._points)}, last_taker={self.last_taker})\n{self.render()}"
