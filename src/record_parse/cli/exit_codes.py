"""Exit-code constants used by the CLI layer."""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit — every example was parsed and rendered."""

GENERAL_ERROR: int = 1
"""A known RecordParseError was caught. User-facing message was displayed."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""
