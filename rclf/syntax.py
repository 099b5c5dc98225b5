"""Syntax checking of RCLF documents."""

from __future__ import annotations

import re
from collections.abc import Iterable

from .errors import (
    EmptyFileError,
    InvalidColumnError,
    InvalidSyntaxError,
    InvalidValueCountError,
    NoEndTagError,
    NoRclTagError,
    RclfFileNotFoundError,
)

_WHITESPACE = " \t\n\v\f\r"
_LEADING_INTEGER = re.compile(r"[ \t\n\v\f\r]*[+-]?[0-9]+")


def _tokens(line: str, separator: str) -> list[str]:
    """Split on ``separator``, drop empty pieces and strip leading blanks."""
    return [piece.lstrip(_WHITESPACE) for piece in line.split(separator) if piece]


def _column_header_ok(line: str) -> bool:
    match = _LEADING_INTEGER.match(line, 3)
    end = match.end() if match else 3
    return end < len(line) and line[end] == "]"


def check_lines(lines: Iterable[str], filepath="<input>") -> int:
    """Check the lines of a document; return how many lines were read.

    Raises an :class:`~rclf.errors.RclfError` subclass on the first problem.
    """
    lines = list(lines)
    if not any(lines):
        raise EmptyFileError(filepath)

    has_rcl = has_end = in_column = False
    key_count = 0
    value_line_count = 0

    for raw in lines:
        line = raw.split("\n", 1)[0]
        if line.startswith("//") or len(line) < 2:
            continue
        if line.startswith("&rcl"):
            if has_rcl:
                raise InvalidSyntaxError(filepath, "multiple &rcl tags")
            has_rcl = True
        elif line.startswith("&e"):
            if not in_column:
                raise InvalidSyntaxError(filepath, "&e without &c[]")
            has_end = True
            in_column = False
        elif line.startswith("&c["):
            if not has_rcl:
                raise NoRclTagError(filepath)
            if in_column:
                raise InvalidColumnError(filepath, line)
            in_column = True
            if not _column_header_ok(line):
                raise InvalidColumnError(filepath, line)
            key_count = 0
            value_line_count = 0
        elif in_column and ";" in line:
            if key_count > 0:
                raise InvalidSyntaxError(filepath, "multiple key lines in column")
            for token in _tokens(line, ";"):
                if not token:
                    raise InvalidSyntaxError(filepath, "empty key")
                key_count += 1
        elif in_column and ":" in line:
            value_line_count += 1
            tokens = _tokens(line, ":")
            if any(not token for token in tokens):
                raise InvalidSyntaxError(filepath, "empty value")
            if len(tokens) != key_count:
                raise InvalidValueCountError(
                    filepath, value_line_count - 1, key_count, len(tokens)
                )
        else:
            raise InvalidSyntaxError(filepath, line)

    if not has_rcl:
        raise NoRclTagError(filepath)
    if not has_end:
        raise NoEndTagError(filepath)
    return len(lines)


def check_syntax(filepath) -> int:
    """Check the document stored at ``filepath``; return the number of lines read."""
    try:
        handle = open(filepath, encoding="utf-8", errors="surrogateescape", newline="\n")
    except OSError as exc:
        raise RclfFileNotFoundError(filepath) from exc
    with handle:
        return check_lines(handle, filepath)