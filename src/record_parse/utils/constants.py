"""Parsing constants shared by the core layer and the demo CLI."""

from __future__ import annotations

FIELD_DELIMITER: str = ","
"""Separator between the name and age fields."""

FIELD_COUNT: int = 2
"""Exact number of fields a well-formed line splits into."""

AGE_MIN: int = 0
AGE_MAX: int = 255
"""Inclusive bounds of an 8-bit unsigned age."""

DEFAULT_NAME: str = "John"
DEFAULT_AGE: int = 30
"""Fields of the fallback record used by the default policy."""
