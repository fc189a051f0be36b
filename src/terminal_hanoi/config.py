"""Run configuration for the animation."""
from __future__ import annotations

from argparse import Namespace
from dataclasses import dataclass

from .logger import LogLevel

DEFAULT_DELAY_MS = 100
DEFAULT_HEIGHT = 6


@dataclass
class RunConfig:
    """Settings supplied by the command line."""
    delay: int = DEFAULT_DELAY_MS          # pause after each frame, milliseconds
    height: int = DEFAULT_HEIGHT           # number of disks; 0 is a no-op tower
    loglevel: LogLevel = LogLevel.MINIMAL  # what to print once solved

    def __post_init__(self) -> None:
        if self.delay < 0:
            raise ValueError(f"delay must be non-negative, got {self.delay}")
        if self.height < 0:
            raise ValueError(f"height must be non-negative, got {self.height}")

    @classmethod
    def from_args(cls, args: Namespace) -> "RunConfig":
        return cls(delay=args.delay, height=args.height, loglevel=args.loglevel)
