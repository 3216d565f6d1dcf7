"""Tests for domain models (core/models.py).

All models are frozen dataclasses — these tests verify immutability,
equality semantics, and the debug rendering the CLI relies on.
"""

from __future__ import annotations

import pytest

from foo_record.core.models import Foo, InvalidInput
from foo_record.exceptions import InvalidInputError


# ---------------------------------------------------------------------------
# Foo
# ---------------------------------------------------------------------------

class TestFoo:
    def test_fields_accessible(self) -> None:
        foo = Foo(name="Alice", age=30)
        assert foo.name == "Alice"
        assert foo.age == 30

    def test_frozen(self) -> None:
        foo = Foo(name="Alice", age=30)
        with pytest.raises(AttributeError):
            foo.age = 31  # type: ignore[misc]

    def test_equality(self) -> None:
        assert Foo(name="Alice", age=30) == Foo(name="Alice", age=30)

    def test_inequality(self) -> None:
        assert Foo(name="Alice", age=30) != Foo(name="Alice", age=31)

    def test_repr_includes_field_names_and_values(self) -> None:
        assert repr(Foo(name="Alice", age=30)) == "Foo(name='Alice', age=30)"


# ---------------------------------------------------------------------------
# InvalidInput
# ---------------------------------------------------------------------------

class TestInvalidInput:
    def test_str_is_message(self) -> None:
        assert str(InvalidInput("invalid age")) == "invalid age"

    def test_to_exception(self) -> None:
        exc = InvalidInput("invalid age").to_exception()
        assert isinstance(exc, InvalidInputError)
        assert str(exc) == "invalid age"

    def test_frozen(self) -> None:
        err = InvalidInput("x")
        with pytest.raises(AttributeError):
            err.message = "y"  # type: ignore[misc]
