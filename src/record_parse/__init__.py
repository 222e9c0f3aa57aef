"""record-parse — ``NAME,AGE`` line parsing under two failure policies.

* :func:`parse_with_default` never fails; invalid input yields
  :data:`DEFAULT_RECORD`.
* :func:`parse_strict` returns the :class:`Record` or a classified
  :class:`ParseError`.
"""

import logging

from record_parse.core import (
    DEFAULT_RECORD,
    Record,
    parse_record,
    parse_strict,
    parse_u8,
    parse_with_default,
)
from record_parse.exceptions import (
    BadFieldCountError,
    EmptyNameError,
    IntegerParseError,
    IntErrorKind,
    InvalidAgeError,
    ParseError,
    ParseErrorKind,
    RecordInvariantError,
    RecordParseError,
    RichUnavailableError,
)
from record_parse.version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "DEFAULT_RECORD",
    "BadFieldCountError",
    "EmptyNameError",
    "IntErrorKind",
    "IntegerParseError",
    "InvalidAgeError",
    "ParseError",
    "ParseErrorKind",
    "Record",
    "RecordInvariantError",
    "RecordParseError",
    "RichUnavailableError",
    "__version__",
    "parse_record",
    "parse_strict",
    "parse_u8",
    "parse_with_default",
]
