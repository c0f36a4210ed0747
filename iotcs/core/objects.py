"""
Farm objects: the closed set of things a cell can hold.

Glyph table (one character per cell in the farm text format):

  U  UFO              B  Barn   (barrier, carry limit 0)
  A  Azure cow        C  Crop   (barrier, carry limit 1)
  Y  Yellow cow       F  Fence  (barrier, carry limit 2)
  P  Purple cow       H  Hay    (barrier, carry limit 3)
  O  Orange cow       S  Silo   (UFO may never land here)
  R  Red bull         |  -  +   template walls and corners
                      ' '       empty
"""

from __future__ import annotations
from enum import IntEnum
from typing import Optional


class Object(IntEnum):
    """Contents of a single farm cell."""

    UFO = 0
    AZURE_COW = 1
    YELLOW_COW = 2
    PURPLE_COW = 3
    ORANGE_COW = 4
    RED_BULL = 5
    BARN = 6
    CROP = 7
    FENCE = 8
    HAY = 9
    SILO = 10
    WALL1 = 11
    WALL2 = 12
    CORNER = 13
    EMPTY = 14

    @property
    def glyph(self) -> str:
        return _GLYPHS[self]

    @classmethod
    def from_glyph(cls, ch: str) -> Object:
        """Look up the object for a glyph. Raises KeyError if unknown."""
        return _BY_GLYPH[ch]

    def is_ufo(self) -> bool:
        return self is Object.UFO

    def is_cow(self) -> bool:
        return self in COWS

    def is_bull(self) -> bool:
        return self is Object.RED_BULL

    def is_barrier(self) -> bool:
        return self in BARRIERS

    def is_wall(self) -> bool:
        """Barriers plus the plain template walls: the 24 wall slots of a farm."""
        return self in BARRIERS or self in (Object.WALL1, Object.WALL2)

    def is_singleton(self) -> bool:
        """Objects that may appear at most once on a farm."""
        return self in _SINGLETONS

    @property
    def barrier_strength(self) -> Optional[int]:
        """Rank of a barrier from weakest (0) to strongest (3), None otherwise."""
        if self in BARRIERS:
            return BARRIERS.index(self)
        return None

    @property
    def carry_limit(self) -> Optional[int]:
        """Most items the UFO may carry and still push through this barrier."""
        return self.barrier_strength


COWS = (Object.AZURE_COW, Object.YELLOW_COW, Object.PURPLE_COW, Object.ORANGE_COW)

# Weakest to strongest
BARRIERS = (Object.BARN, Object.CROP, Object.FENCE, Object.HAY)

_SINGLETONS = frozenset(COWS + (Object.UFO, Object.RED_BULL, Object.SILO))

_GLYPHS = {
    Object.UFO: "U",
    Object.AZURE_COW: "A",
    Object.YELLOW_COW: "Y",
    Object.PURPLE_COW: "P",
    Object.ORANGE_COW: "O",
    Object.RED_BULL: "R",
    Object.BARN: "B",
    Object.CROP: "C",
    Object.FENCE: "F",
    Object.HAY: "H",
    Object.SILO: "S",
    Object.WALL1: "|",
    Object.WALL2: "-",
    Object.CORNER: "+",
    Object.EMPTY: " ",
}
_BY_GLYPH = {glyph: obj for obj, glyph in _GLYPHS.items()}
