"""Shared ``NAME,AGE`` validation pipeline.

Every function in this module is a **pure** transformation — no I/O,
no side effects, fully deterministic.

Check order (enforced by :func:`parse_record`):

1. **Split** — full split on ``,``, empty fields preserved.
2. **Field count** — exactly two fields.
3. **Name** — non-empty.
4. **Age** — ASCII digits only, within ``[0, 255]``.

A line that is wrong in several ways reports the first failing check,
so ``",one"`` is an empty-name error rather than an invalid-age error.
"""

from __future__ import annotations

from record_parse.core.integers import parse_u8
from record_parse.core.models import Record
from record_parse.exceptions import (
    BadFieldCountError,
    EmptyNameError,
    IntegerParseError,
    InvalidAgeError,
)
from record_parse.utils.constants import FIELD_COUNT, FIELD_DELIMITER


def split_fields(text: str) -> list[str]:
    """Split *text* on every delimiter, keeping empty fields."""
    return text.split(FIELD_DELIMITER)


def parse_record(text: str) -> Record:
    """Parse one ``NAME,AGE`` line into a :class:`Record`.

    Raises
    ------
    BadFieldCountError
        If the line does not split into exactly two fields.
    EmptyNameError
        If the name field is empty.
    InvalidAgeError
        If the age field is not an integer in ``[0, 255]``; the
        :class:`IntegerParseError` is available as ``cause``.
    """
    fields = split_fields(text)
    if len(fields) != FIELD_COUNT:
        raise BadFieldCountError(len(fields))

    name, age_text = fields
    if not name:
        raise EmptyNameError()

    try:
        age = parse_u8(age_text)
    except IntegerParseError as exc:
        raise InvalidAgeError(exc) from exc

    return Record(name=name, age=age)
