"""Command line entry point for the bar chart race."""

from __future__ import annotations

import os
import re
import sys
from dataclasses import dataclass
from typing import Sequence

from .animation import AnimationController

__all__ = ["ArgumentOptions", "parse_args", "help_text", "apply_options", "main"]

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")
_MIN_BARS_EXCLUSIVE = 5

_HELP = """
  
    Welcome to the Bar Chart Race program.
    You need to provide a formated data file to run the program
    run with the following command
    ./bcr {mandatory: <DATA_FILE>} {optional: <ini file with settings>} {optional: <command line arguments}
    Command line arguments:

    -b <interger> sets the max amount of horizontal bars to be displayed
    -f <interger> sets the framerate of the program
    
    """


@dataclass
class ArgumentOptions:
    """Settings gathered from the command line."""

    send_help: bool = False
    is_all_invalid: bool = False
    bar_argument: int | None = None
    fps_argument: int | None = None
    ini_file: str | None = None
    text_file: str | None = None


def _parse_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    return int(match.group(1))


def parse_args(argv: Sequence[str]) -> ArgumentOptions:
    """Read the command line arguments (without the program name)."""
    options = ArgumentOptions()
    if not argv:
        options.is_all_invalid = True
        return options

    args = iter(argv)
    for arg in args:
        if arg.startswith("-"):
            if arg == "-b":
                value = next(args, None)
                if value is not None:
                    bars = _parse_int(value)
                    if bars > _MIN_BARS_EXCLUSIVE:
                        options.bar_argument = bars
            elif arg == "-f":
                value = next(args, None)
                if value is not None:
                    fps = _parse_int(value)
                    if fps > 0:
                        options.fps_argument = fps
            elif arg == "-h":
                options.send_help = True
                return options
            continue

        _, dot, extension = arg.rpartition(".")
        if dot and "." + extension == ".ini":
            if options.ini_file is None:
                options.ini_file = arg
        elif os.path.exists(arg):
            options.text_file = arg
    return options


def help_text() -> str:
    """The usage message."""
    return _HELP


def apply_options(options: ArgumentOptions, animation: AnimationController) -> None:
    """Configure *animation* from *options*; show help and exit when asked to."""
    if options.is_all_invalid or options.send_help:
        sys.stdout.write(help_text())
        raise SystemExit(1)
    if options.text_file is not None:
        animation.set_filename(options.text_file)
    else:
        sys.stderr.write("Data file not found. Use the argument -h to learn more")
    if options.ini_file is not None:
        animation.read_ini(options.ini_file)
    if options.bar_argument is not None:
        animation.set_bars(options.bar_argument)
    if options.fps_argument is not None:
        animation.set_fps(options.fps_argument)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the animation from the command line."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        options = parse_args(argv)
    except ValueError as error:
        sys.stderr.write(f"{error}\n")
        return 1

    animation = AnimationController()
    apply_options(options, animation)

    while not animation.is_over():
        animation.process_events()
        animation.update()
        animation.render()
    return 0


if __name__ == "__main__":
    sys.exit(main())