"""Strict parsing of small unsigned integers.

Python's :func:`int` is too lenient for record fields: it accepts
surrounding whitespace, ``+``/``-`` signs, ``_`` separators and non-ASCII
digits.  :func:`parse_u8` accepts only ASCII ``0-9`` and reports *why*
anything else was rejected via :class:`~record_parse.exceptions.IntErrorKind`.
"""

from __future__ import annotations

from record_parse.exceptions import IntegerParseError, IntErrorKind
from record_parse.utils.constants import AGE_MAX

_ASCII_DIGITS: frozenset[str] = frozenset("0123456789")


def parse_unsigned(text: str, *, maximum: int) -> int:
    """Parse *text* as a base-10 integer in ``[0, maximum]``.

    Raises
    ------
    IntegerParseError
        With kind ``EMPTY``, ``INVALID_DIGIT`` or ``POS_OVERFLOW``.
    """
    if not text:
        raise IntegerParseError(IntErrorKind.EMPTY, text)
    if not set(text) <= _ASCII_DIGITS:
        raise IntegerParseError(IntErrorKind.INVALID_DIGIT, text)

    # Length check first: int() refuses very long digit strings.
    significant = text.lstrip("0")
    if len(significant) > len(str(maximum)):
        raise IntegerParseError(IntErrorKind.POS_OVERFLOW, text)

    value = int(significant or "0")
    if value > maximum:
        raise IntegerParseError(IntErrorKind.POS_OVERFLOW, text)
    return value


def parse_u8(text: str) -> int:
    """Parse *text* as an 8-bit unsigned integer (``0``–``255``)."""
    return parse_unsigned(text, maximum=AGE_MAX)
