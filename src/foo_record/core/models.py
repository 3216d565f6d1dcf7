"""Domain models for foo-record.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O and compare by value.
"""

from __future__ import annotations

from dataclasses import dataclass

from foo_record.exceptions import InvalidInputError


# ---------------------------------------------------------------------------
# Record
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Foo:
    """A validated person-like record.

    Instances should be obtained through
    :func:`foo_record.core.factory.create`, which guarantees the
    invariants below.  Direct construction performs no checks.
    """

    name: str
    """Display label.  Never empty for factory-built records."""

    age: int
    """Age in years, stored in an unsigned 8-bit range.

    Factory-built records satisfy ``age < 255`` and ``age <= 120``.
    """


# ---------------------------------------------------------------------------
# Error kind
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class InvalidInput:
    """The single failure kind produced by the record factory."""

    message: str
    """Human-readable description, surfaced to the user verbatim."""

    def __str__(self) -> str:
        return self.message

    def to_exception(self) -> InvalidInputError:
        """Convert to the exception raised by ``Err.unwrap``."""
        return InvalidInputError(self.message)
