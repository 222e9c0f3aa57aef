"""Shared pytest fixtures and configuration for the record-parse test suite.

Guidelines
----------
* Core tests must be pure — no side effects.
* Tests must not depend on OS state.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Undo handlers and levels installed by ``--verbose`` runs."""
    package_logger = logging.getLogger("record_parse")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    yield
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
