"""
Board geometry for Invasion of the Cow Snatchers.

Farm layout (7 rows x 7 cols), indexed as Pos(x, y):

    y:  0 1 2 3 4 5 6
  x=0 | . . . . . . .
  x=1 | . . . . . . .
  ...
  x=6 | . . . . . . .

x is the row (North = x - 1), y is the column (West = y - 1).
"""

from __future__ import annotations
import operator
from enum import Enum
from functools import total_ordering
from typing import Iterator, Optional

# Board dimensions
SIZE = 7
EDGE = SIZE - 1


class Direction(Enum):
    """The cardinal directions in which the UFO may be moved."""

    NORTH = (-1, 0)
    SOUTH = (1, 0)
    WEST = (0, -1)
    EAST = (0, 1)

    @classmethod
    def values(cls) -> Iterator[Direction]:
        """Iterate over all directions in the fixed N, S, W, E order."""
        return iter((cls.NORTH, cls.SOUTH, cls.WEST, cls.EAST))

    @property
    def delta(self) -> tuple[int, int]:
        return self.value

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @property
    def letter(self) -> str:
        return self.name[0]

    @classmethod
    def from_symbol(cls, text: str) -> Direction:
        """Parse an arrow ('↑') or a letter ('N', case-insensitive)."""
        for d in cls:
            if text == d.symbol or text.upper() == d.letter:
                return d
        raise ValueError(f"Invalid direction: {text!r}")

    def __str__(self) -> str:
        return self.symbol


_SYMBOLS = {
    Direction.NORTH: "↑",
    Direction.SOUTH: "↓",
    Direction.WEST: "←",
    Direction.EAST: "→",
}


@total_ordering
class Pos:
    """A position on the farm, both coordinates in [0, EDGE].

    Positions only come from grid indices or from bounds-checked stepping,
    so an out-of-range or non-integer coordinate is a programming error, not
    bad input. Integer-like values such as numpy integers are accepted and
    stored as plain ints. Positions order row-major.
    """

    __slots__ = ("_x", "_y")

    def __init__(self, x: int, y: int):
        try:
            x, y = operator.index(x), operator.index(y)
        except TypeError:
            raise AssertionError(f"Pos coordinates must be integers, got {x!r}, {y!r}") from None
        if not 0 <= x <= EDGE:
            raise AssertionError(f"Pos x (is {x}) should be less than {SIZE}")
        if not 0 <= y <= EDGE:
            raise AssertionError(f"Pos y (is {y}) should be less than {SIZE}")
        self._x = x
        self._y = y

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    def xy(self) -> tuple[int, int]:
        return self._x, self._y

    def step(self, direction: Direction) -> Optional[Pos]:
        """
        Return the position one step from self in `direction`, or None if
        that step would move off the edge of the farm.
        """
        dx, dy = direction.delta
        x, y = self._x + dx, self._y + dy
        if not (0 <= x <= EDGE and 0 <= y <= EDGE):
            return None
        return Pos(x, y)

    def on_edge(self) -> bool:
        """Check if the position lies on the outer row or column."""
        return self._x in (0, EDGE) or self._y in (0, EDGE)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pos):
            return NotImplemented
        return self.xy() == other.xy()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Pos):
            return NotImplemented
        return self.xy() < other.xy()

    def __hash__(self) -> int:
        return hash(self.xy())

    def __repr__(self) -> str:
        return f"Pos({self._x}, {self._y})"

    def __str__(self) -> str:
        return f"({self._x},{self._y})"


def step(pos: Pos, direction: Direction) -> Optional[Pos]:
    """Step `pos` once in `direction` (None if off the farm)."""
    return pos.step(direction)


def all_positions() -> Iterator[Pos]:
    """Iterate over all positions of the farm in row-major order."""
    for x in range(SIZE):
        for y in range(SIZE):
            yield Pos(x, y)
