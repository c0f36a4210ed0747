"""
Move generation and path notation for Invasion of the Cow Snatchers.

A move is a Direction. Paths are written as a string of arrows ("↑→↓") or
letters ("NES"); whitespace and commas are ignored when parsing.
"""

from __future__ import annotations
import logging
from typing import Iterable

from .geometry import Direction
from .state import IotCS

logger = logging.getLogger(__name__)


class IllegalMoveError(ValueError):
    """Raised when replaying a path hits an illegal move."""

    def __init__(self, index: int, direction: Direction):
        self.index = index
        self.direction = direction
        super().__init__(f"Illegal move {direction} at step {index}")


def format_path(directions: Iterable[Direction]) -> str:
    """Convert a sequence of directions to arrow notation."""
    return "".join(d.symbol for d in directions)


def parse_path(text: str) -> list[Direction]:
    """Parse arrow or letter notation into directions."""
    directions = []
    for ch in text:
        if ch.isspace() or ch == ",":
            continue
        directions.append(Direction.from_symbol(ch))
    return directions


class MoveGenerator:
    """Generates legal moves for a puzzle state."""

    @staticmethod
    def get_successors(state: IotCS) -> list[tuple[Direction, IotCS]]:
        """All legal (direction, successor) pairs in N, S, W, E order."""
        return state.next()

    @staticmethod
    def get_legal_moves(state: IotCS) -> list[Direction]:
        """Directions in which the UFO can currently move."""
        return [d for d in Direction.values() if state.copy().attempt_move(d) is not None]

    @staticmethod
    def get_move_mask(state: IotCS) -> list[bool]:
        """
        Get a mask indicating which moves are legal.

        Returns four booleans, one per direction in N, S, W, E order.
        """
        legal = set(MoveGenerator.get_legal_moves(state))
        return [d in legal for d in Direction.values()]


# Convenience functions
def get_successors(state: IotCS) -> list[tuple[Direction, IotCS]]:
    """Get all (direction, successor) pairs."""
    return MoveGenerator.get_successors(state)


def get_legal_moves(state: IotCS) -> list[Direction]:
    """Get all legal directions."""
    return MoveGenerator.get_legal_moves(state)


def is_legal_move(state: IotCS, direction: Direction) -> bool:
    """Check if a move is legal."""
    return state.copy().attempt_move(direction) is not None


def replay(state: IotCS, path: Iterable[Direction]) -> IotCS:
    """
    Apply `path` to a copy of `state` and return the final state.

    Raises IllegalMoveError at the first illegal move; `state` is never modified.
    """
    current = state.copy()
    for i, direction in enumerate(path):
        if current.attempt_move(direction) is None:
            logger.debug(f"Replay stopped at step {i}: {direction} from {current.ufo_pos} ({current.cattle_label()})")
            raise IllegalMoveError(i, direction)
    return current
