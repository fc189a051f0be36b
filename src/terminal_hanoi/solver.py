"""Recursive move generation for the three-peg transfer."""
from __future__ import annotations

from typing import Callable, Iterator, Optional, Tuple

from .tower import Move, Peg, Tower

MoveCallback = Callable[[Tower, Move], None]


def expected_moves(height: int) -> int:
    if height < 0:
        raise ValueError(f"Height must be non-negative, got {height}")
    return (1 << height) - 1


def move_stack(
    tower: Tower,
    size: int,
    start: Peg,
    target: Peg,
    aux: Peg,
    on_move: Optional[MoveCallback] = None,
) -> int:
    """Move the top ``size`` disks of ``start`` onto ``target`` via ``aux``.

    ``on_move`` runs once after each single-disk move has been applied.
    Returns the number of moves made.
    """
    if size <= 0:
        return 0
    count = move_stack(tower, size - 1, start, aux, target, on_move)
    move = tower.move_disk(start, target)
    if on_move is not None:
        on_move(tower, move)
    count += 1
    count += move_stack(tower, size - 1, aux, target, start, on_move)
    return count


def solve(tower: Tower, on_move: Optional[MoveCallback] = None) -> int:
    """Transfer the whole stack from the left peg to the right peg."""
    return move_stack(tower, tower.height, Peg.LEFT, Peg.RIGHT, Peg.MIDDLE, on_move)


def plan_moves(
    height: int,
    start: Peg = Peg.LEFT,
    target: Peg = Peg.RIGHT,
    aux: Peg = Peg.MIDDLE,
) -> Iterator[Tuple[Peg, Peg]]:
    """Yield the (source, target) pairs ``solve`` would apply, without a tower."""
    if height <= 0:
        return
    yield from plan_moves(height - 1, start, aux, target)
    yield start, target
    yield from plan_moves(height - 1, aux, target, start)
