"""Command-line entry point for reading RCLF documents."""

from __future__ import annotations

import re
import sys

from . import printer
from .errors import (
    InvalidArgsError,
    ParsingFailedError,
    RclfError,
    RclfFileNotFoundError,
)
from .parser import DocumentError, parse

_RED = "\x1b[1;31m"
_RESET = "\x1b[0m"
_LEADING_INTEGER = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_INDEX_OPTIONS = {"-c": "col", "-k": "key", "-v": "val"}


def usage() -> str:
    """Return the usage text."""
    return (
        "usage:\n"
        "  rclf out [-n] -f <file name> [-c N] [-k N] [-v N]\n\n"
        "  rclf version\n\n"
        "options:\n"
        "  -f <file name>  Path to RCLF document\n"
        "  -n              Disable syntax checking\n"
        "  -c <N>          Column index (optional)\n"
        "  -k <N>          Key index (requires -c)\n"
        "  -v <N>          Value index (requires -c & -k)\n"
    )


def _to_int(text: str) -> int:
    match = _LEADING_INTEGER.match(text)
    return int(match.group(1)) if match else 0


def _report(error: RclfError) -> int:
    message = f"[rclf] return {int(error.code)}: {error}"
    if isinstance(error, ParsingFailedError):
        message = f"{_RED}{message}{_RESET}"
    print(message, file=sys.stderr)
    return int(error.code)


def _pick(items: list, index: int):
    if not 0 <= index < len(items):
        raise InvalidArgsError(str(index))
    return items[index]


def main(argv: list[str] | None = None) -> int:
    """Run the command line; return the exit code."""
    args = list(sys.argv[1:] if argv is None else argv)

    if args and args[0] == "version":
        print("  rclf: \033[1m\033[94mversion 0.1\033[0m")
        return 0

    command = None
    filepath = None
    check_syntax = True
    indices = {"col": -1, "key": -1, "val": -1}

    remaining = iter(args)
    for arg in remaining:
        if arg == "out":
            command = arg
        elif arg == "-n":
            check_syntax = False
        elif arg == "-f" or arg in _INDEX_OPTIONS:
            operand = next(remaining, None)
            if operand is None:
                return _report(InvalidArgsError(arg))
            if arg == "-f":
                filepath = operand
            else:
                indices[_INDEX_OPTIONS[arg]] = _to_int(operand)
        else:
            return _report(InvalidArgsError(arg))

    if command is None or filepath is None:
        print(usage(), end="")
        return _report(InvalidArgsError(""))

    try:
        with open(filepath, "rb"):
            pass
    except OSError:
        return _report(RclfFileNotFoundError(filepath))

    print(f'[rclf] reading "{filepath}"...')
    try:
        document = parse(filepath, check_syntax)
    except DocumentError as exc:
        print(f"{_RED}[rclf] return NULL: {exc}{_RESET}", file=sys.stderr)
        return _report(ParsingFailedError())
    except RclfError as exc:
        _report(exc)
        return _report(ParsingFailedError())

    col, key, val = indices["col"], indices["key"], indices["val"]
    try:
        if col == -1:
            printer.print_all(document)
        elif key == -1:
            printer.print_column(document, col)
        else:
            column = _pick(document.columns, col)
            chosen_key = _pick(column.keys, key)
            if val == -1:
                printer.print_key(chosen_key, col, key, 10)
            else:
                value = _pick(chosen_key.values, val)
                printer.print_value(value, col, key, val, 10)
    except InvalidArgsError as exc:
        return _report(exc)
    return 0


if __name__ == "__main__":
    sys.exit(main())