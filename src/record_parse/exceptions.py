"""Custom exception hierarchy for record-parse.

Every error the package raises inherits from :class:`RecordParseError`.
The strict policy *returns* :class:`ParseError` instances instead of
raising them, so each one is a self-contained value: a closed ``kind``
tag plus, for age failures, the underlying integer diagnostic.

Hierarchy
---------
RecordParseError
├── ParseError
│   ├── BadFieldCountError
│   ├── EmptyNameError
│   └── InvalidAgeError
├── IntegerParseError
├── RecordInvariantError
└── RichUnavailableError
"""

from __future__ import annotations

import enum


class RecordParseError(Exception):
    """Base exception for all record-parse errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Integer parsing -------------------------------------------------------

class IntErrorKind(enum.Enum):
    """Why a piece of text is not a valid unsigned integer."""

    EMPTY = "cannot parse integer from empty string"
    INVALID_DIGIT = "invalid digit found in string"
    POS_OVERFLOW = "number too large to fit in target type"


class IntegerParseError(RecordParseError):
    """Raised when text cannot be read as a bounded unsigned integer."""

    def __init__(self, kind: IntErrorKind, text: str) -> None:
        super().__init__(kind.value)
        self.kind: IntErrorKind = kind
        self.text: str = text


# --- Record parsing --------------------------------------------------------

class ParseErrorKind(enum.Enum):
    """Closed set of reasons a line is not a valid record."""

    BAD_FIELD_COUNT = "bad_field_count"
    EMPTY_NAME = "empty_name"
    INVALID_AGE = "invalid_age"


class ParseError(RecordParseError):
    """Base class for the three record-parsing failures.

    Only the subclasses below are ever instantiated; ``kind`` lets
    callers branch on a tag without ``isinstance`` chains.
    """

    kind: ParseErrorKind


class BadFieldCountError(ParseError):
    """The line did not split into exactly two fields."""

    kind = ParseErrorKind.BAD_FIELD_COUNT

    def __init__(self, field_count: int) -> None:
        super().__init__(
            f"expected 2 comma-separated fields, got {field_count}",
            hint="Use the form NAME,AGE (e.g. Mark,20).",
        )
        self.field_count: int = field_count


class EmptyNameError(ParseError):
    """The name field was empty."""

    kind = ParseErrorKind.EMPTY_NAME

    def __init__(self) -> None:
        super().__init__("name must not be empty")


class InvalidAgeError(ParseError):
    """The age field was not an integer in ``[0, 255]``."""

    kind = ParseErrorKind.INVALID_AGE

    def __init__(self, cause: IntegerParseError) -> None:
        super().__init__(
            f"invalid age: {cause}",
            hint="Age must be a whole number between 0 and 255.",
        )
        self.cause: IntegerParseError = cause


# --- Model invariants ------------------------------------------------------

class RecordInvariantError(RecordParseError):
    """Raised when a Record is constructed with out-of-range fields."""


# --- Environment -----------------------------------------------------------

class RichUnavailableError(RecordParseError):
    """Raised when a Rich-only feature is requested without Rich installed."""
