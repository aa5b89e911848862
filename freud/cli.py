"""Command-line entry point."""

from __future__ import annotations

import re
import sys
from collections.abc import Callable, Sequence

from . import features
from .config import Config, MissingFileError, parse_arguments
from .image import ImageReadError

STAT_REPORT_FILE = "stat.txt"
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _first_file(config: Config) -> str:
    if not config.filenames:
        raise MissingFileError("Missing file")
    return config.filenames[0]


def _first_argument(config: Config) -> str:
    if not config.arguments:
        raise ValueError("missing component argument")
    return config.arguments[0]


def _print_pixel(config: Config) -> None:
    if config.filenames and len(config.arguments) >= 2:
        x, y = (_atoi(arg) for arg in config.arguments[:2])
        features.print_pixel(config.filenames[0], x, y)


# (name, matches only the whole name, handler)
_COMMANDS: list[tuple[str, bool, Callable[[Config], object]]] = [
    ("helloworld", False, lambda c: features.hello_world()),
    ("dimension", False, lambda c: features.dimension(_first_file(c))),
    ("first_pixel", False, lambda c: features.first_pixel(_first_file(c))),
    ("tenth_pixel", True, lambda c: features.tenth_pixel(_first_file(c))),
    ("second_line", True, lambda c: features.second_line(_first_file(c))),
    ("print_pixel", True, _print_pixel),
    ("max_component", True,
     lambda c: features.max_component(_first_file(c), _first_argument(c))),
    ("max_pixel", True, lambda c: features.max_pixel(_first_file(c))),
    ("min_pixel", True, lambda c: features.min_pixel(_first_file(c))),
    ("min_component", True,
     lambda c: features.min_component(_first_file(c), _first_argument(c))),
    ("stat_report", True,
     lambda c: features.stat_report(_first_file(c), STAT_REPORT_FILE)),
]


def run_command(config: Config) -> list[str]:
    """Run every command matching config.command; return the names that matched."""
    matched = []
    for name, exact, handler in _COMMANDS:
        if config.command == name or (not exact and config.command.startswith(name)):
            handler(config)
            matched.append(name)
    return matched


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the command line and run the requested command."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        config = parse_arguments(args)
    except ValueError as exc:
        print(f"freud: {exc}", file=sys.stderr)
        return 1
    print(config.debug_report(), end="")
    try:
        config.check_file()
        run_command(config)
    except (MissingFileError, ImageReadError, ValueError) as exc:
        print(exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())