"""
Puzzle state representation for Invasion of the Cow Snatchers.

A state is a reference to a shared Farm plus the current status of the UFO:
its position and the cattle it has beamed up, in pickup order.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional

from .farm import Farm
from .geometry import Direction, Pos
from .objects import Object


@dataclass(eq=False)
class IotCS:
    """
    Represents one node of the puzzle's state graph.

    The farm is held by reference and never copied, so cloning a state only
    duplicates the small mutable fields below.

    States hash by those mutable fields: do not move a state once it is a
    set member or dict key. Expand from a copy() instead, as next() does.

    Attributes:
        farm: Shared, read-only farm (initial cattle, walls and silo)
        ufo_pos: Current UFO position
        cattle: Beamed-up cows and, last of all, the red bull, in pickup order
        bull_picked: Whether the red bull has been beamed up
    """
    farm: Farm = field(repr=False)
    ufo_pos: Pos
    cattle: list[Object] = field(default_factory=list)
    bull_picked: bool = False

    @classmethod
    def new(cls, farm: Farm) -> IotCS:
        """Create the starting state for a farm."""
        return cls(farm=farm, ufo_pos=farm.ufo_pos)

    @property
    def carried(self) -> int:
        """Number of cattle currently in the UFO."""
        return len(self.cattle)

    def copy(self) -> IotCS:
        """Copy the UFO status; the farm is shared."""
        return IotCS(
            farm=self.farm,
            ufo_pos=self.ufo_pos,
            cattle=list(self.cattle),
            bull_picked=self.bull_picked,
        )

    def attempt_move(self, direction: Direction) -> Optional[Pos]:
        """
        Move the UFO two cells in `direction`, in place.

        The UFO passes over the first cell and lands on the second. Returns the
        landing position, or None if the move is illegal, in which case the
        state is left unchanged.

        Rules:
        1. A barrier on the first cell can only be pushed through while the
           number of carried cattle is at most its carry limit
        2. The UFO may never land on the silo
        3. The red bull can only be beamed up once every cow is aboard
        4. Landing on cattle already aboard (or their cells) changes nothing
        """
        pos1 = self.ufo_pos.step(direction)
        if pos1 is None:
            return None
        limit = self.farm.get(pos1).carry_limit
        if limit is not None and self.carried > limit:
            return None

        pos2 = pos1.step(direction)
        if pos2 is None:
            return None
        obj2 = self.farm.get(pos2)

        pickup = None
        if obj2 is Object.SILO:
            return None
        elif obj2.is_bull():
            # Once the bull is aboard the counts no longer line up, so only
            # check ordering before the first pickup
            if not self.bull_picked and self.carried != self.farm.cow_count:
                return None
            if obj2 not in self.cattle:
                pickup = obj2
        elif obj2.is_cow():
            if obj2 not in self.cattle:
                pickup = obj2

        # Both cells validated: commit
        if pickup is not None:
            self.cattle.append(pickup)
            if pickup.is_bull():
                self.bull_picked = True
        self.ufo_pos = pos2
        return pos2

    def is_goal(self) -> bool:
        """Every cow and the bull aboard, and the UFO on the farm's edge."""
        if self.carried != self.farm.cow_count + 1:
            return False
        return self.ufo_pos.on_edge()

    def next(self) -> list[tuple[Direction, IotCS]]:
        """All legal (direction, successor) pairs, in N, S, W, E order."""
        successors = []
        for direction in Direction.values():
            child = self.copy()
            if child.attempt_move(direction) is not None:
                successors.append((direction, child))
        return successors

    def cattle_label(self) -> str:
        """Compact UFO summary, e.g. 'U:AYR'."""
        return "U:" + "".join(obj.glyph for obj in self.cattle)

    def key(self) -> tuple:
        """Hashable key of the UFO status (the farm is not included)."""
        return (self.ufo_pos, tuple(self.cattle), self.bull_picked)

    def __hash__(self) -> int:
        return hash(self.key())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IotCS):
            return False
        return self.farm is other.farm and self.key() == other.key()
