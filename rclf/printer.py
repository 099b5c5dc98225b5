"""Text rendering of parsed RCLF documents."""

from __future__ import annotations

import sys
from typing import TextIO

from .parser import Document, Key, Value


def _line(prefix: str, quote_pos: int, text: str) -> str:
    # A prefix longer than the quote position still gets the surplus as padding.
    padding = " " * abs(quote_pos - len(prefix))
    return f'{prefix}{padding}"{text}"\n'


def format_value(
    value: Value, col_index: int, key_index: int, value_index: int, quote_pos: int
) -> str:
    """Render one value; an array gives one line per item."""
    prefix = f"Col{col_index} {key_index} {value_index}~ "
    items = value.items if value.is_array else value.items[:1]
    return "".join(_line(prefix, quote_pos, item) for item in items)


def format_key(key: Key, col_index: int, key_index: int, quote_pos: int) -> str:
    """Render every value of a key."""
    return "".join(
        format_value(value, col_index, key_index, value_index, quote_pos)
        for value_index, value in enumerate(key.values)
    )


def format_column(document: Document, col_index: int) -> str:
    """Render the column at position ``col_index``; nothing if there is none."""
    if document is None or not 0 <= col_index < len(document.columns):
        return ""
    column = document.columns[col_index]
    key_prefix = f"Col{column.index} {col_index}/ "
    value_prefix = f"Col{column.index} 0 0~ "
    quote_pos = max(len(key_prefix), len(value_prefix)) + 2

    parts = []
    for key_index, key in enumerate(column.keys):
        parts.append(_line(f"Col{column.index} {key_index}/ ", quote_pos, key.name))
        parts.append(format_key(key, column.index, key_index, quote_pos))
    return "".join(parts)


def format_all(document: Document) -> str:
    """Render every column of the document."""
    if document is None:
        return ""
    return "".join(
        format_column(document, position) for position in range(len(document.columns))
    )


def print_value(
    value: Value,
    col_index: int,
    key_index: int,
    value_index: int,
    quote_pos: int,
    file: TextIO | None = None,
) -> None:
    """Write one rendered value to ``file`` (standard output by default)."""
    (file or sys.stdout).write(
        format_value(value, col_index, key_index, value_index, quote_pos)
    )


def print_key(
    key: Key, col_index: int, key_index: int, quote_pos: int, file: TextIO | None = None
) -> None:
    """Write every rendered value of a key to ``file``."""
    (file or sys.stdout).write(format_key(key, col_index, key_index, quote_pos))


def print_column(document: Document, col_index: int, file: TextIO | None = None) -> None:
    """Write one rendered column to ``file``."""
    (file or sys.stdout).write(format_column(document, col_index))


def print_all(document: Document, file: TextIO | None = None) -> None:
    """Write the whole rendered document to ``file``."""
    (file or sys.stdout).write(format_all(document))