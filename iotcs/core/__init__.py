"""Core puzzle logic: geometry, farm parsing, state, and move generation."""

from .geometry import SIZE, Direction, Pos, all_positions, step
from .objects import Object, COWS, BARRIERS
from .farm import Farm, FarmParseError, parse_farm, load_farm
from .state import IotCS
from .moves import MoveGenerator, IllegalMoveError
from .puzzle import Puzzle
