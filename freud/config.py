"""Command-line configuration and its parsing."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

MAX_FILE_COUNT = 10
MAX_LENGTH_COMMAND = 25
MAX_ARGUMENT_COUNT = 5
VERSION_TEXT = "Version 1.0.0"

_PROGRAM = "freud"
# long name -> (takes an argument, option key)
_LONG_OPTIONS = {
    "debug": (False, "debug"),
    "brief": (False, "brief"),
    "version": (False, "v"),
    "file": (True, "f"),
    "command": (True, "c"),
    "type": (True, "t"),
}
# short letter -> takes an argument
_SHORT_OPTIONS = {"f": True, "c": True, "v": True}


class MissingFileError(Exception):
    """Raised when no image file was given."""


@dataclass
class Config:
    """Options collected from the command line."""

    debug_mode: bool = False
    command: str = ""
    filenames: list[str] = field(default_factory=list)
    arguments: list[str] = field(default_factory=list)

    def check_file(self) -> None:
        """Raise MissingFileError unless at least one file was given."""
        if not self.filenames:
            raise MissingFileError("Missing file")

    def debug_report(self) -> str:
        """Describe the configuration when debug mode is on, else return ''."""
        if not self.debug_mode:
            return ""
        lines = ["debug flag is set"]
        count = len(self.filenames)
        lines += [f"file {i}/{count}: {name}\n" for i, name in enumerate(self.filenames, 1)]
        count = len(self.arguments)
        lines += [f"arguments {i}/{count}: {arg}\n" for i, arg in enumerate(self.arguments, 1)]
        lines.append(f"option: {self.command}\n")
        return "".join(lines)


def _warn(message: str) -> None:
    print(f"{_PROGRAM}: {message}", file=sys.stderr)


def _parse_long(body: str, rest: Iterator[str]) -> tuple[str, str | None] | None:
    name, has_inline, inline = body.partition("=")
    if name in _LONG_OPTIONS:
        full = name
    else:
        candidates = [option for option in _LONG_OPTIONS if option.startswith(name)]
        if not candidates:
            _warn(f"unrecognized option '--{name}'")
            return None
        if len(candidates) > 1:
            _warn(f"option '--{name}' is ambiguous")
            return None
        full = candidates[0]
    takes_argument, key = _LONG_OPTIONS[full]
    if not takes_argument:
        if has_inline:
            _warn(f"option '--{full}' doesn't allow an argument")
            return None
        return key, None
    value = inline if has_inline else next(rest, None)
    if value is None:
        _warn(f"option '--{full}' requires an argument")
        return None
    return key, value


def _parse_short(cluster: str, rest: Iterator[str]) -> Iterator[tuple[str, str | None]]:
    for position, letter in enumerate(cluster):
        if letter not in _SHORT_OPTIONS:
            _warn(f"invalid option -- '{letter}'")
            continue
        if not _SHORT_OPTIONS[letter]:
            yield letter, None
            continue
        value = cluster[position + 1:] or next(rest, None)
        if value is None:
            _warn(f"option requires an argument -- '{letter}'")
        else:
            yield letter, value
        return


def _apply(config: Config, key: str, value: str | None) -> None:
    if key == "debug":
        config.debug_mode = True
    elif key == "brief":
        config.debug_mode = False
    elif key == "v":
        print(VERSION_TEXT)
        raise SystemExit(0)
    elif key == "f":
        if len(config.filenames) >= MAX_FILE_COUNT:
            raise ValueError(f"too many files (at most {MAX_FILE_COUNT})")
        config.filenames.append(value or "")
    elif key == "c":
        config.command = (value or "")[:MAX_LENGTH_COMMAND]
    # "t" (--type) is accepted and ignored.


def parse_arguments(argv: Iterable[str]) -> Config:
    """Build a Config from command-line arguments, without the program name."""
    config = Config()
    operands: list[str] = []
    rest = iter(argv)
    for arg in rest:
        if arg == "--":
            operands.extend(rest)
            break
        if arg.startswith("--"):
            parsed = _parse_long(arg[2:], rest)
            if parsed is not None:
                _apply(config, *parsed)
        elif arg.startswith("-") and arg != "-":
            for key, value in _parse_short(arg[1:], rest):
                _apply(config, key, value)
        else:
            operands.append(arg)
    if len(operands) > MAX_ARGUMENT_COUNT:
        raise ValueError(f"too many arguments (at most {MAX_ARGUMENT_COUNT})")
    config.arguments = operands
    return config