"""
Result values shared by the parser and the decoder.

Every fallible operation in csvdecode returns either ``Ok(value)`` or
``Err(error)`` instead of raising. Both are frozen dataclasses and support
structural pattern matching:

    match parse("a,b"):
        case Ok(value=document):
            ...
        case Err(error=errors):
            ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, NoReturn, TypeVar

from .errors import UnwrapError

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success case of ``Result[T, E]``."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True

    @property
    def is_err(self) -> bool:
        return False

    def map(self, fn: Callable[[T], U]) -> Ok[U]:
        """Apply ``fn`` to the wrapped value."""
        return Ok(fn(self.value))

    def map_err(self, fn: Callable[[Any], Any]) -> Ok[T]:
        return self

    def and_then(self, fn: Callable[[T], Result[U, Any]]) -> Result[U, Any]:
        """Chain another fallible step onto this value."""
        return fn(self.value)

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: Any) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failure case of ``Result[T, E]``."""

    error: E

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def is_err(self) -> bool:
        return True

    def map(self, fn: Callable[[Any], Any]) -> Err[E]:
        return self

    def map_err(self, fn: Callable[[E], F]) -> Err[F]:
        """Transform the wrapped error."""
        return Err(fn(self.error))

    def and_then(self, fn: Callable[[Any], Any]) -> Err[E]:
        return self

    def unwrap(self) -> NoReturn:
        """
        Raise ``UnwrapError`` carrying the error value.

        Raises:
            UnwrapError: always
        """
        raise UnwrapError(self.error)

    def unwrap_or(self, default: U) -> U:
        return default


Result = Ok[T] | Err[E]
