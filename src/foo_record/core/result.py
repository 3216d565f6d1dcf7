"""Tagged ``Ok | Err`` result type.

Fallible core operations return one of these variants instead of
raising.  Both are frozen dataclasses, so callers can branch with
``is_ok()`` or with structural pattern matching::

    match create(name, age):
        case Ok(foo): ...
        case Err(error): ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, NoReturn, Protocol, TypeVar, Union


class ErrorKind(Protocol):
    """Anything an :class:`Err` can carry."""

    def to_exception(self) -> Exception:
        ...  # pragma: no cover


T = TypeVar("T")
E = TypeVar("E", bound=ErrorKind)


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful outcome wrapping *value*."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed outcome wrapping an error kind."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """Raise the carried error as an exception."""
        raise self.error.to_exception()


Result = Union[Ok[T], Err[E]]
