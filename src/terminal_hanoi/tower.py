"""Peg/disk state for the three-peg tower."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class Peg(Enum):
    # Values index straight into Tower.pegs.
    LEFT = 0
    MIDDLE = 1
    RIGHT = 2


class EmptyPegError(RuntimeError):
    """Raised when a move is requested from a peg holding no disks."""


@dataclass(frozen=True)
class Move:
    disk: int
    source: Peg
    target: Peg


@dataclass
class Tower:
    """Three pegs of disks; the last element of each peg is its top disk.

    Disks are identified by size (1 is the smallest). A new tower holds the
    whole stack on ``Peg.LEFT`` with the largest disk at the bottom.
    """

    height: int
    delay: int = 0  # milliseconds between frames
    pegs: List[List[int]] = field(init=False)
    moves: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        if self.height < 0:
            raise ValueError(f"Tower height must be non-negative, got {self.height}")
        if self.delay < 0:
            raise ValueError(f"Tower delay must be non-negative, got {self.delay}")
        self.pegs = [list(range(self.height, 0, -1)), [], []]

    @property
    def disk_count(self) -> int:
        return sum(len(peg) for peg in self.pegs)

    def disks(self, peg: Peg) -> List[int]:
        """Return a copy of the disks on ``peg``, bottom first."""
        return list(self.pegs[peg.value])

    def top(self, peg: Peg) -> Optional[int]:
        stack = self.pegs[peg.value]
        return stack[-1] if stack else None

    def can_move(self, source: Peg, target: Peg) -> bool:
        """Return True iff moving the top disk from source to target is legal."""
        if source is target:
            return False
        moving = self.top(source)
        if moving is None:
            return False
        resting = self.top(target)
        return resting is None or moving < resting

    def move_disk(self, source: Peg, target: Peg) -> Move:
        """Relocate the top disk of ``source`` onto ``target``.

        The size rule is not checked here; the solver only produces legal
        moves. Moving from an empty peg means the solver is broken, so it
        raises instead of doing nothing.
        """
        stack = self.pegs[source.value]
        if not stack:
            raise EmptyPegError(f"Cannot move a disk from empty peg {source.name}")
        disk = stack.pop()
        self.pegs[target.value].append(disk)
        self.moves += 1
        return Move(disk, source, target)

    def is_solved(self) -> bool:
        """Check whether every disk sits on the right peg."""
        left, middle, right = self.pegs
        return not left and not middle and len(right) == self.height
