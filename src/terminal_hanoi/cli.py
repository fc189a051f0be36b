"""Command line entry point: ``hanoi [OPTION...]``."""
from __future__ import annotations

import argparse
import re
import sys
from typing import Callable, List, NoReturn, Optional, TextIO

from .config import DEFAULT_DELAY_MS, DEFAULT_HEIGHT, RunConfig
from .logger import LogLevel, RunLogger, summary_lines
from .solver import solve
from .terminal import Animator, prepare_terminal, restore_terminal
from .tower import Move, Tower

HELP_HINT = "Do -H or --help for more information."

_UNSIGNED = re.compile(r"\+?[0-9]+")
_UNRECOGNIZED = re.compile(r"^unrecognized arguments: (?P<args>.+)$", re.S)
_ARGUMENT_ERROR = re.compile(r"^argument (?P<option>[^:]+): (?P<detail>.*)$", re.S)
_VALUE_NAMES = {"delay": "delay", "height": "height", "loglevel": "log level"}

LOGLEVEL_HELP = """\
Sets the loglevel for the program (not capital sensitive).
Possible values are:
  [None] - print nothing
  [Minimal] - only print moves taken
  [All] - print both moves taken, tower height and print delay
Default value of [Minimal]"""


class HanoiArgumentParser(argparse.ArgumentParser):
    """Reports bad arguments on stdout with a pointer to the help text.

    argparse's messages are reworded to the tool's own lines, and errors
    exit with status 0, as the tool always has.
    """

    def error(self, message: str) -> NoReturn:
        print(describe_error(message))
        print(HELP_HINT)
        self.exit(0)


def describe_error(message: str) -> str:
    """Turn an argparse error message into the user facing text."""
    unknown = _UNRECOGNIZED.match(message)
    if unknown:
        args = unknown.group("args")
        first = args.split()[0] if args.split() else args
        return f'Unknown argument "{first}"!'
    match = _ARGUMENT_ERROR.match(message)
    if not match:
        return message
    name = _VALUE_NAMES.get(match.group("option").split("/")[-1].lstrip("-"), "value")
    detail = match.group("detail")
    if detail.startswith("expected one argument"):
        return f"Please specify a value for {name}!"
    return detail


def _non_negative(name: str) -> Callable[[str], int]:
    def parse(text: str) -> int:
        # Plain ASCII digits only; int() alone would take "1_0" or " 3 ".
        if not _UNSIGNED.fullmatch(text):
            raise argparse.ArgumentTypeError(
                f"{text} is not a valid value for {name}!\n"
                f"Please specify a valid value for {name}!"
            )
        return int(text)
    return parse


def _loglevel(text: str) -> LogLevel:
    try:
        return LogLevel.parse(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"{exc}\nPlease specify a valid value for log level!"
        ) from None


def build_parser() -> HanoiArgumentParser:
    parser = HanoiArgumentParser(
        prog="hanoi",
        usage="hanoi [OPTION...]",
        description="Solves the tower of hanoi in your terminal!",
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("-H", "--help", action="help", help="Displays help")
    parser.add_argument(
        "-D", "--delay",
        type=_non_negative("delay"),
        default=DEFAULT_DELAY_MS,
        metavar="VALUE",
        help=f"Sets the delay between peg moves in milliseconds.\nDefault value of {DEFAULT_DELAY_MS}",
    )
    parser.add_argument(
        "-N", "--height",
        type=_non_negative("height"),
        default=DEFAULT_HEIGHT,
        metavar="VALUE",
        help=f"Sets the height of the tower.\nDefault value of {DEFAULT_HEIGHT}",
    )
    parser.add_argument(
        "-L", "--loglevel",
        type=_loglevel,
        default=LogLevel.MINIMAL,
        metavar="VALUE",
        help=LOGLEVEL_HELP,
    )
    return parser


def parse_args(argv: Optional[List[str]] = None) -> RunConfig:
    args = build_parser().parse_args(argv)
    return RunConfig.from_args(args)


def run(
    config: RunConfig,
    stream: Optional[TextIO] = None,
    sleep: Optional[Callable[[float], None]] = None,
    recorder: Optional[RunLogger] = None,
) -> Tower:
    """Animate a full solve and print the completion summary.

    When a ``recorder`` is given it gets the starting layout and every move.
    Returns the solved tower so its move count, height and delay can be read.
    """
    stream = stream or sys.stdout
    tower = Tower(config.height, config.delay)
    animator = Animator(config.delay, stream=stream, sleep=sleep)

    def on_move(tower: Tower, move: Move) -> None:
        if recorder is not None:
            recorder.record_move(tower, move)
        animator(tower, move)

    prepare_terminal(stream)
    try:
        if recorder is not None:
            recorder.snapshot(tower, note="start")
        animator.show_initial(tower)
        solve(tower, on_move=on_move)
    finally:
        restore_terminal(stream)

    for line in summary_lines(config.loglevel, tower):
        print(line, file=stream)
    return tower


def main(argv: Optional[List[str]] = None) -> int:
    config = parse_args(argv)
    run(config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
