"""Interface consumed by external search drivers."""

from __future__ import annotations
from typing import Hashable, Protocol, Sequence, TypeVar, runtime_checkable

M = TypeVar("M", covariant=True)


@runtime_checkable
class Puzzle(Protocol[M]):
    """A node of a single-player puzzle's state graph."""

    def is_goal(self) -> bool:
        """Return True if this node solves the puzzle."""
        ...

    def next(self) -> Sequence[tuple[M, "Puzzle[M]"]]:
        """Return (move, successor) pairs for every legal move."""
        ...

    def key(self) -> Hashable:
        """Return a hashable identity for visited-set bookkeeping."""
        ...
