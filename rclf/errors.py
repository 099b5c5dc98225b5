"""Error types raised while checking and reading RCLF documents."""

from __future__ import annotations

from enum import IntEnum


class ErrorCode(IntEnum):
    """Exit codes reported for each kind of failure."""

    INVALID_ARGS = 1
    FILE_NOT_FOUND = 2
    PARSING_FAILED = 3
    EMPTY_FILE = 4
    NO_RCL_TAG = 5
    NO_END_TAG = 6
    INVALID_COLUMN = 7
    INVALID_KEY_COUNT = 8
    INVALID_VALUE_COUNT = 9
    MEMORY_ALLOC = 10
    INVALID_SYNTAX = 11


class RclfError(Exception):
    """Base class of every RCLF error; ``code`` is the matching exit code."""

    code: ErrorCode = ErrorCode.PARSING_FAILED


class InvalidArgsError(RclfError):
    """An unknown command-line argument was given."""

    code = ErrorCode.INVALID_ARGS

    def __init__(self, arg: str) -> None:
        self.arg = arg
        super().__init__(f"unknown arg {arg}")


class RclfFileNotFoundError(RclfError):
    """The document file could not be opened."""

    code = ErrorCode.FILE_NOT_FOUND

    def __init__(self, filepath) -> None:
        self.filepath = filepath
        super().__init__(f"can't open file {filepath}")


class ParsingFailedError(RclfError):
    """Parsing the document did not succeed."""

    code = ErrorCode.PARSING_FAILED

    def __init__(self) -> None:
        super().__init__("parsing failed oh no")


class EmptyFileError(RclfError):
    """The document file holds nothing."""

    code = ErrorCode.EMPTY_FILE

    def __init__(self, filepath) -> None:
        self.filepath = filepath
        super().__init__(f"file {filepath} is empty")


class NoRclTagError(RclfError):
    """The document lacks its ``&rcl`` tag."""

    code = ErrorCode.NO_RCL_TAG

    def __init__(self, filepath) -> None:
        self.filepath = filepath
        super().__init__(f"missing &rcl tag in {filepath}")


class NoEndTagError(RclfError):
    """The document never closes a column with ``&e``."""

    code = ErrorCode.NO_END_TAG

    def __init__(self, filepath) -> None:
        self.filepath = filepath
        super().__init__(f"missing &e tag in {filepath}")


class InvalidColumnError(RclfError):
    """A ``&c[n]`` header is malformed or misplaced."""

    code = ErrorCode.INVALID_COLUMN

    def __init__(self, filepath, line: str) -> None:
        self.filepath = filepath
        self.line = line
        super().__init__(f"invalid column syntax in {filepath}: {line}")


class InvalidKeyCountError(RclfError):
    """The number of keys does not match what was expected."""

    code = ErrorCode.INVALID_KEY_COUNT

    def __init__(self, filepath, expected: int, actual: int) -> None:
        self.filepath = filepath
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"invalid key count in {filepath}: expected {expected}, got {actual}"
        )


class InvalidValueCountError(RclfError):
    """A value line holds a different number of values than there are keys."""

    code = ErrorCode.INVALID_VALUE_COUNT

    def __init__(self, filepath, key_index: int, expected: int, actual: int) -> None:
        self.filepath = filepath
        self.key_index = key_index
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"invalid value count for key {key_index} in {filepath}: "
            f"expected {expected}, got {actual}"
        )


class InvalidSyntaxError(RclfError):
    """A line of the document breaks the format's rules."""

    code = ErrorCode.INVALID_SYNTAX

    def __init__(self, filepath, line: str) -> None:
        self.filepath = filepath
        self.line = line
        super().__init__(f"invalid syntax in {filepath}: {line}")