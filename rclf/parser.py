"""Parsing of RCLF documents into columns, keys and values."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from . import syntax
from .errors import ErrorCode, RclfError, RclfFileNotFoundError

_WHITESPACE = " \t\n\v\f\r"
_LEADING_INTEGER = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


class DocumentError(RclfError):
    """The document's structure could not be read."""

    code = ErrorCode.PARSING_FAILED


@dataclass
class Value:
    """One value of a key: a single item, or an array of items."""

    items: list[str] = field(default_factory=list)
    is_array: bool = False


@dataclass
class Key:
    """A named key and the values given to it, one per value line."""

    name: str
    values: list[Value] = field(default_factory=list)


@dataclass
class Column:
    """A ``&c[n]`` section: its declared index and its keys."""

    index: int = 0
    keys: list[Key] = field(default_factory=list)


@dataclass
class Document:
    """A parsed document: its columns in the order they were closed."""

    columns: list[Column] = field(default_factory=list)


def _trim_quotes(text: str) -> str:
    if len(text) >= 2 and text[0] == '"' and text[-1] == '"':
        return text[1:-1]
    return text


def _tokens(line: str, separator: str) -> list[str]:
    return [piece.lstrip(_WHITESPACE) for piece in line.split(separator) if piece]


def _leading_int(text: str) -> int:
    match = _LEADING_INTEGER.match(text)
    return int(match.group(1)) if match else 0


def parse_value(text: str) -> Value:
    """Parse one value token: ``(a, b, ...)`` is an array, anything else a single item."""
    if text.startswith("(") and text.endswith(")"):
        inner = text[1:][:-1]
        return Value([_trim_quotes(token) for token in _tokens(inner, ",")], True)
    return Value([_trim_quotes(text.lstrip(_WHITESPACE))], False)


def parse_lines(lines: Iterable[str]) -> Document:
    """Build a :class:`Document` from the lines of a document."""
    document = Document()
    current = Column()
    in_column = False
    used_indices: set[int] = set()

    for raw in lines:
        line = raw.split("\n", 1)[0].split("//", 1)[0]
        if len(line) < 2:
            continue
        if line.startswith("&c["):
            end = line.find("]", 3)
            if end < 0:
                raise DocumentError("wrong &c[n] section header")
            index = _leading_int(line[3:end])
            if index in used_indices:
                raise DocumentError("duplicate column index detected")
            used_indices.add(index)
            in_column = True
            current = Column(index)
        elif line.startswith("&e"):
            document.columns.append(current)
            in_column = False
        elif in_column:
            if ";" in line:
                current.keys.extend(Key(_trim_quotes(token)) for token in _tokens(line, ";"))
            elif ":" in line:
                for key, token in zip(current.keys, _tokens(line, ":")):
                    key.values.append(parse_value(token))
    return document


def parse(filepath, check_syntax: bool = True) -> Document:
    """Read and parse the document at ``filepath``, checking its syntax first if asked."""
    if check_syntax:
        syntax.check_syntax(filepath)
    try:
        handle = open(filepath, encoding="utf-8", errors="surrogateescape", newline="\n")
    except OSError as exc:
        raise RclfFileNotFoundError(filepath) from exc
    with handle:
        return parse_lines(handle)