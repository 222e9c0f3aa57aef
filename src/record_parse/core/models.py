"""Domain models for record-parse.

:class:`Record` is a **frozen** dataclass — an immutable value object
that validates its own invariants on construction, so no code path can
hold a Record with an empty name or an out-of-range age.
"""

from __future__ import annotations

from dataclasses import dataclass

from record_parse.exceptions import RecordInvariantError
from record_parse.utils.constants import AGE_MAX, AGE_MIN, DEFAULT_AGE, DEFAULT_NAME


@dataclass(frozen=True, slots=True)
class Record:
    """A person parsed from a ``NAME,AGE`` line."""

    name: str
    """Non-empty display name."""

    age: int
    """Age in years, an 8-bit unsigned quantity."""

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise RecordInvariantError(f"name must be a non-empty string, got {self.name!r}")
        if isinstance(self.age, bool) or not isinstance(self.age, int):
            raise RecordInvariantError(f"age must be an int, got {type(self.age).__name__}")
        if not AGE_MIN <= self.age <= AGE_MAX:
            raise RecordInvariantError(
                f"age must be within [{AGE_MIN}, {AGE_MAX}], got {self.age}",
            )

    # ------------------------------------------------------------------
    # Alternate constructors
    # ------------------------------------------------------------------

    @classmethod
    def default(cls) -> Record:
        """Return the shared fallback record.

        Always returns the module constant :data:`DEFAULT_RECORD` (a plain
        ``Record``, even when called on a subclass) so identity checks
        against it stay valid.
        """
        return DEFAULT_RECORD

    @classmethod
    def from_text(cls, text: str) -> Record:
        """Parse *text*, substituting the default record on any failure."""
        from record_parse.core.policies import parse_with_default

        return parse_with_default(text)

    @classmethod
    def parse(cls, text: str) -> Record:
        """Parse *text* strictly.

        Raises
        ------
        ParseError
            One of its three subclasses, depending on the failing check.
        """
        from record_parse.core.pipeline import parse_record

        return parse_record(text)


DEFAULT_RECORD: Record = Record(name=DEFAULT_NAME, age=DEFAULT_AGE)
"""Fallback value substituted by the default policy for invalid input."""
