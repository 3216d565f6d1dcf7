"""Exception hierarchy for foo-record.

The core layer never raises these for validation; it returns
:class:`~foo_record.core.result.Err` values instead.  Exceptions only
appear at the CLI edge, where :meth:`~foo_record.core.result.Err.unwrap`
converts a failed result into an :class:`InvalidInputError` so the
error boundary can render it.

Hierarchy
---------
FooRecordError
├── InvalidInputError
├── UsageError
└── EnvironmentError
"""

from __future__ import annotations


class FooRecordError(Exception):
    """Base exception for all foo-record errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Validation ------------------------------------------------------------

class InvalidInputError(FooRecordError):
    """Raised when a record cannot be built from the given input."""


# --- Invocation ------------------------------------------------------------

class UsageError(FooRecordError):
    """Raised when the command line does not match ``<name> <age>``."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(FooRecordError):
    """Raised when an optional runtime dependency is not available."""
