"""Shared pytest fixtures and configuration for the foo-record test suite.

Guidelines
----------
* Core tests must be pure — no side effects.
* CLI tests drive ``main``/``cli`` with explicit arguments.
* Tests must not depend on OS state.
"""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest

from foo_record.utils.logging import configure_logging


@pytest.fixture(autouse=True)
def _quiet_logging() -> Generator[None, None, None]:
    """Route structlog through stdlib at WARNING and restore afterwards."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("foo_record")
    pkg_level = pkg.level
    configure_logging(verbose=False)
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)
