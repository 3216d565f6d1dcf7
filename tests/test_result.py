"""Tests for the tagged result type (core/result.py)."""

from __future__ import annotations

import pytest

from foo_record.core.models import Foo, InvalidInput
from foo_record.core.result import Err, Ok, Result
from foo_record.exceptions import InvalidInputError


class TestOk:
    def test_predicates(self) -> None:
        res = Ok(1)
        assert res.is_ok()
        assert not res.is_err()

    def test_unwrap_returns_value(self) -> None:
        foo = Foo(name="Alice", age=30)
        assert Ok(foo).unwrap() is foo


class TestErr:
    def test_predicates(self) -> None:
        res = Err(InvalidInput("nope"))
        assert res.is_err()
        assert not res.is_ok()

    def test_unwrap_raises_converted_error(self) -> None:
        with pytest.raises(InvalidInputError, match="^nope$"):
            Err(InvalidInput("nope")).unwrap()

    def test_equality(self) -> None:
        assert Err(InvalidInput("a")) == Err(InvalidInput("a"))
        assert Err(InvalidInput("a")) != Err(InvalidInput("b"))


class TestPatternMatching:
    @staticmethod
    def _describe(res: Result[Foo, InvalidInput]) -> str:
        match res:
            case Ok(foo):
                return f"ok:{foo.name}"
            case Err(error):
                return f"err:{error}"
        return "unreachable"  # pragma: no cover

    def test_match_ok(self) -> None:
        assert self._describe(Ok(Foo(name="Bob", age=1))) == "ok:Bob"

    def test_match_err(self) -> None:
        assert self._describe(Err(InvalidInput("bad"))) == "err:bad"
