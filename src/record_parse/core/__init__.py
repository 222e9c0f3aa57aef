"""Core layer — pure parsing, validation and the two failure policies.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
* All functions must be fully typed and deterministic.
"""

from record_parse.core.integers import parse_u8, parse_unsigned
from record_parse.core.models import DEFAULT_RECORD, Record
from record_parse.core.pipeline import parse_record, split_fields
from record_parse.core.policies import parse_strict, parse_with_default

__all__: list[str] = [
    "DEFAULT_RECORD",
    "Record",
    "parse_record",
    "parse_strict",
    "parse_u8",
    "parse_unsigned",
    "parse_with_default",
    "split_fields",
]
