"""
The farm: initial and fixed elements of a puzzle.

A farm holds the starting positions of the UFO and the cattle and the fixed
positions of the walls and the silo. It is parsed once from text and then
shared, read-only, by every search state.

Text format (7 lines of 7 glyphs, each line ending in '\\n'):

```
U|A| |R
-+B+-+-
 | | |S
-+-+C+-
 | | |O
-+F+-+H
Y| | |P
```
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterator, Optional, Union

import numpy as np

from ..config import FarmConfig
from .geometry import SIZE, Pos, all_positions
from .objects import COWS, Object

logger = logging.getLogger(__name__)

_COW_CODES = np.array([int(cow) for cow in COWS], dtype=np.int8)


class FarmParseError(ValueError):
    """Raised when farm text is malformed or violates the farm rules."""

    def __init__(self, reason: str, line: Optional[int] = None, column: Optional[int] = None):
        self.reason = reason
        self.line = line
        self.column = column
        where = ""
        if line is not None:
            where = f" (line {line + 1}" + (f", column {column + 1})" if column is not None else ")")
        super().__init__(f"{reason}{where}")


class Farm:
    """
    Immutable 7x7 farm layout.

    Attributes:
        ufo_pos: Starting position of the UFO
        cow_count: Number of cows on the farm (the bull is not counted)
    """

    __slots__ = ("_layout", "_ufo_pos", "_cow_count")

    def __init__(self, layout: np.ndarray, ufo_pos: Pos, cow_count: int):
        if layout.shape != (SIZE, SIZE):
            raise ValueError(f"Farm layout must be {SIZE}x{SIZE}, got {layout.shape}")
        self._layout = np.array(layout, dtype=np.int8)
        self._layout.setflags(write=False)
        self._ufo_pos = ufo_pos
        self._cow_count = cow_count

    @classmethod
    def parse(cls, text: str, config: Optional[FarmConfig] = None) -> Farm:
        """Parse farm text. Raises FarmParseError; never returns a partial farm."""
        return _FarmParser(text, config or FarmConfig.from_env()).parse()

    @property
    def ufo_pos(self) -> Pos:
        return self._ufo_pos

    @property
    def cow_count(self) -> int:
        return self._cow_count

    def get(self, pos: Pos) -> Object:
        """Return the object at `pos`."""
        x, y = pos.xy()
        return Object(int(self._layout[x, y]))

    def __getitem__(self, pos: Pos) -> Object:
        return self.get(pos)

    def to_array(self) -> np.ndarray:
        """Writable copy of the layout as (7, 7) int8 Object codes."""
        return self._layout.copy()

    def count_cows(self) -> int:
        """Count cow cells by scanning the layout."""
        return int(np.isin(self._layout, _COW_CODES).sum())

    def positions_of(self, obj: Object) -> list[Pos]:
        """All positions holding `obj`, in row-major order."""
        return [Pos(int(x), int(y)) for x, y in np.argwhere(self._layout == int(obj))]

    def cells(self) -> Iterator[tuple[Pos, Object]]:
        for pos in all_positions():
            yield pos, self.get(pos)

    def to_text(self) -> str:
        """Serialize to the farm text format (parses back to an equal farm)."""
        lines = []
        for row in self._layout:
            lines.append("".join(Object(int(code)).glyph for code in row) + "\n")
        return "".join(lines)

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"Farm(ufo_pos={self._ufo_pos!r}, cow_count={self._cow_count})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Farm):
            return NotImplemented
        return (
            self._ufo_pos == other._ufo_pos and
            self._cow_count == other._cow_count and
            np.array_equal(self._layout, other._layout)
        )

    def __hash__(self) -> int:
        return hash((self._layout.tobytes(), self._ufo_pos, self._cow_count))


class _FarmParser:
    """Single-pass parser over farm text, in row-major cell order."""

    def __init__(self, text: str, config: FarmConfig):
        self.text = text
        self.config = config
        self.offset = 0
        self.layout = np.full((SIZE, SIZE), int(Object.EMPTY), dtype=np.int8)
        self.seen: set[Object] = set()
        self.wall_count = 0
        self.cow_count = 0
        self.ufo_pos: Optional[Pos] = None

    def _next_char(self) -> Optional[str]:
        if self.offset >= len(self.text):
            return None
        ch = self.text[self.offset]
        self.offset += 1
        return ch

    def _put(self, pos: Pos, obj: Object) -> None:
        x, y = pos.xy()
        if obj.is_singleton():
            if obj in self.seen:
                raise FarmParseError(f"Duplicate {obj.name.lower()}", x, y)
            self.seen.add(obj)
        self.layout[x, y] = int(obj)
        if obj.is_ufo():
            self.ufo_pos = pos
        if obj.is_cow():
            self.cow_count += 1
        if obj.is_wall():
            self.wall_count += 1

    def parse(self) -> Farm:
        for x in range(SIZE):
            for y in range(SIZE):
                ch = self._next_char()
                if ch is None:
                    raise FarmParseError("Unexpected end of input", x, y)
                if ch == "\n":
                    raise FarmParseError("Line too short", x, y)
                try:
                    obj = Object.from_glyph(ch)
                except KeyError:
                    raise FarmParseError(f"Unrecognized character {ch!r}", x, y) from None
                self._put(Pos(x, y), obj)
            if self._next_char() != "\n":
                raise FarmParseError("Expected line terminator", x, SIZE)

        if self.offset != len(self.text):
            raise FarmParseError("Trailing data after farm")
        if Object.RED_BULL not in self.seen:
            raise FarmParseError("Missing red bull")
        if self.ufo_pos is None:
            raise FarmParseError("Missing UFO")
        if self.wall_count != self.config.wall_slots:
            raise FarmParseError(
                f"Expected {self.config.wall_slots} wall cells, found {self.wall_count}"
            )

        return Farm(self.layout, self.ufo_pos, self.cow_count)


def parse_farm(text: str, config: Optional[FarmConfig] = None) -> Farm:
    """Parse farm text into a Farm."""
    return Farm.parse(text, config)


def load_farm(source: Union[str, Path], config: Optional[FarmConfig] = None) -> Farm:
    """
    Read and parse a farm file.

    A bare name (no directory part) is looked up in `config.farm_dir`, with a
    '.txt' suffix added when missing.
    """
    config = config or FarmConfig.from_env()
    path = Path(source)
    if path.parent == Path(".") and not path.is_file():
        path = config.farm_dir / (path.name if path.suffix else f"{path.name}.txt")

    # newline="" keeps terminators exactly as written
    with open(path, encoding=config.encoding, newline="") as f:
        text = f.read()

    farm = Farm.parse(text, config)
    logger.debug(f"Loaded farm {path}: UFO at {farm.ufo_pos}, {farm.cow_count} cows")
    return farm
