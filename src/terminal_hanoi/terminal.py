# terminal_hanoi/terminal.py
"""Terminal control and the redraw/pause cycle around ``render_frame``."""
from __future__ import annotations

import sys
import time
from typing import Callable, Optional, TextIO

from .render import render_frame
from .tower import Move, Tower

HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
DISABLE_BLINK = "\x1b[?12l"
CLEAR_SCREEN = "\x1b[2J"
CURSOR_HOME = "\x1b[1;1H"


def prepare_terminal(stream: Optional[TextIO] = None) -> None:
    """Hide the cursor and stop it blinking for the length of the animation."""
    stream = stream or sys.stdout
    stream.write(DISABLE_BLINK + HIDE_CURSOR)
    stream.flush()


def restore_terminal(stream: Optional[TextIO] = None) -> None:
    stream = stream or sys.stdout
    stream.write(SHOW_CURSOR)
    stream.flush()


class Animator:
    """
    Draws frames to a text stream and paces them.

    Each ``draw`` clears the screen, homes the cursor, writes the frame,
    flushes, and only then sleeps for ``delay`` milliseconds. An Animator
    is callable with ``(tower, move)`` so it can be handed to ``solve``
    directly as the per-move callback.
    """

    def __init__(
        self,
        delay: int,
        stream: Optional[TextIO] = None,
        sleep: Optional[Callable[[float], None]] = None,
    ):
        if delay < 0:
            raise ValueError(f"Delay must be non-negative, got {delay}")
        self.delay = delay
        self.stream = stream or sys.stdout
        self._sleep = sleep or time.sleep
        self.frames_drawn = 0

    def _write_frame(self, tower: Tower) -> None:
        # Frame plus one extra line break, as print() would emit.
        self.stream.write(render_frame(tower) + "\n")
        self.stream.flush()

    def show_initial(self, tower: Tower) -> None:
        self._write_frame(tower)

    def draw(self, tower: Tower) -> None:
        self.stream.write(CLEAR_SCREEN + CURSOR_HOME)
        self._write_frame(tower)
        self.frames_drawn += 1
        self._sleep(self.delay / 1000)

    def __call__(self, tower: Tower, move: Move) -> None:
        self.draw(tower)
