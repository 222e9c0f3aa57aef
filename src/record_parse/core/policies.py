"""The two failure policies layered over :func:`parse_record`.

Both functions are total: every ``str`` input yields a value and
neither ever raises a :class:`~record_parse.exceptions.ParseError`.
"""

from __future__ import annotations

import logging

from record_parse.core.models import DEFAULT_RECORD, Record
from record_parse.core.pipeline import parse_record
from record_parse.exceptions import InvalidAgeError, ParseError

logger = logging.getLogger(__name__)


def parse_with_default(text: str) -> Record:
    """Parse *text*, returning :data:`DEFAULT_RECORD` for any invalid input.

    Callers cannot tell a failed parse from input that happens to
    describe the default record.
    """
    try:
        return parse_record(text)
    except ParseError as exc:
        logger.debug("Falling back to default record (%s): %s", exc.kind.value, exc)
        return DEFAULT_RECORD


def parse_strict(text: str) -> Record | ParseError:
    """Parse *text*, returning either the Record or the ParseError.

    The error is returned rather than raised, so the result can be
    dispatched on with ``isinstance`` or ``match``.  Tracebacks are
    cleared on the returned error (and on its ``cause``) so the value
    holds no parser frames.
    """
    try:
        return parse_record(text)
    except ParseError as exc:
        if isinstance(exc, InvalidAgeError):
            exc.cause.with_traceback(None)
        return exc.with_traceback(None)
