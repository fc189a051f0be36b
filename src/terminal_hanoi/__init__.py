# src/terminal_hanoi/__init__.py
"""
Animated three-peg tower transfer for the terminal.

The core is split into a state model (``tower``), the recursive move
generator (``solver``) and a pure text renderer (``render``). The
``terminal`` and ``cli`` modules wrap them into the ``hanoi`` command.
"""

from .tower import Peg, Move, Tower, EmptyPegError
from .solver import solve, move_stack, plan_moves, expected_moves
from .render import box_width, render_cell, render_layer, render_frame
from .terminal import Animator, prepare_terminal, restore_terminal
from .logger import LogLevel, RunLogger, summary_lines
from .config import RunConfig

__all__ = [
    # State model
    "Peg", "Move", "Tower", "EmptyPegError",
    # Solver
    "solve", "move_stack", "plan_moves", "expected_moves",
    # Rendering and terminal output
    "box_width", "render_cell", "render_layer", "render_frame",
    "Animator", "prepare_terminal", "restore_terminal",
    # Run settings and reporting
    "LogLevel", "RunLogger", "summary_lines", "RunConfig",
]
