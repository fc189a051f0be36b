from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List

from .tower import Move, Tower


class LogLevel(Enum):
    NONE = "none"
    MINIMAL = "minimal"
    ALL = "all"

    @classmethod
    def parse(cls, text: str) -> "LogLevel":
        """Case-insensitive lookup by name, e.g. ``"All"`` -> ``LogLevel.ALL``."""
        try:
            return cls(text.lower())
        except ValueError:
            raise ValueError(f"{text} is not a valid value for log level!") from None


class RunLogger:
    """
    Collects per-move frames of a run for inspection after it finishes.

    Frame schema:
      {
        "type": "snapshot" | "move",
        "note": str,                  # snapshot only
        "move": int,                  # 1-based move index, move only
        "disk": int,                  # move only
        "from": "left" | "middle" | "right",
        "to": "left" | "middle" | "right",
        "pegs": [[int, ...], [int, ...], [int, ...]],
      }
    """

    def __init__(self):
        self.events: List[Dict[str, Any]] = []

    def snapshot(self, tower: Tower, note: str = ""):
        self.events.append({
            "type": "snapshot",
            "note": note,
            "pegs": [list(peg) for peg in tower.pegs],
        })

    def record_move(self, tower: Tower, move: Move):
        self.events.append({
            "type": "move",
            "move": tower.moves,
            "disk": move.disk,
            "from": move.source.name.lower(),
            "to": move.target.name.lower(),
            "pegs": [list(peg) for peg in tower.pegs],
        })

    def moves(self) -> List[Dict[str, Any]]:
        return [e for e in self.events if e["type"] == "move"]

    def __call__(self, tower: Tower, move: Move):
        self.record_move(tower, move)


def summary_lines(level: LogLevel, tower: Tower) -> List[str]:
    """Completion messages printed after the solve, by verbosity."""
    if level is LogLevel.NONE:
        return []
    lines = [f"Completed in {tower.moves} moves"]
    if level is LogLevel.ALL:
        lines.append(f"Tower height: {tower.height} pegs")
        lines.append(f"Delay: ~{tower.delay}ms")
    return lines
