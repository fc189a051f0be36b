"""Text rendering of a tower: one line per layer, three fixed-width cells per line.

Rendering is a pure state-to-text transform; writing frames to the terminal
lives in ``terminal_hanoi.terminal``.
"""
from __future__ import annotations

from typing import Optional

from .tower import Peg, Tower

BLOCK = "■"


def box_width(height: int) -> int:
    return height * 2 + 6


def render_cell(disk: Optional[int], width: int) -> str:
    """Center a block of ``disk * 2`` characters in a cell of ``width``."""
    if disk is None:
        return " " * width
    block_len = disk * 2
    pad = (width - block_len) // 2
    return " " * pad + BLOCK * block_len + " " * pad


def render_layer(tower: Tower, layer: int) -> str:
    """Render layer ``layer`` (0 = bottom) across all pegs, newline-terminated."""
    width = box_width(tower.height)
    cells = []
    for peg in Peg:
        stack = tower.pegs[peg.value]
        disk = stack[layer] if layer < len(stack) else None
        cells.append(render_cell(disk, width))
    return "".join(cells) + "\n"


def render_frame(tower: Tower) -> str:
    """Render every layer from the top one down to the base."""
    return "".join(render_layer(tower, layer) for layer in range(tower.height - 1, -1, -1))
