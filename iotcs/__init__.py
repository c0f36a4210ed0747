"""Invasion of the Cow Snatchers: farm model and legal-move generator."""

from .config import FarmConfig
from .core import (
    Direction, Farm, FarmParseError, IllegalMoveError, IotCS, MoveGenerator,
    Object, Pos, Puzzle, load_farm, parse_farm,
)

__all__ = [
    "Direction",
    "Farm",
    "FarmConfig",
    "FarmParseError",
    "IllegalMoveError",
    "IotCS",
    "MoveGenerator",
    "Object",
    "Pos",
    "Puzzle",
    "load_farm",
    "parse_farm",
]
