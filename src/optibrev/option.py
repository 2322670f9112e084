"""Option[T] — Some and Nothing variants.

The variant class is the discriminant: ``Some`` carries exactly one value,
``Nothing`` carries none.  Both are immutable; ``map`` always builds a new
instance.

Usage::

    from optibrev import Nothing, Some

    port = Some(8080)
    port.map(str).or_else("none")      # "8080"
    Nothing().or_else_get(lambda: 80)  # 80
"""

from __future__ import annotations

from typing import Callable, Generic, Iterator, NoReturn, TypeVar

from optibrev.errors import EmptyUnwrapError

T = TypeVar("T")
U = TypeVar("U")


class Some(Generic[T]):
    """Option holding a value."""

    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    def is_some(self) -> bool:
        return True

    def is_none(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self._value

    def or_else(self, default: T) -> T:  # noqa: ARG002
        return self._value

    unwrap_or = or_else

    def or_else_get(self, supplier: Callable[[], T]) -> T:  # noqa: ARG002
        return self._value

    def map(self, func: Callable[[T], U]) -> "Some[U]":
        return Some(func(self._value))

    def __iter__(self) -> Iterator[T]:
        yield self._value

    def __str__(self) -> str:
        return f"Some({self._value})"

    def __repr__(self) -> str:
        return f"Some({self._value!r})"


class Nothing(Generic[T]):
    """Empty option."""

    __slots__ = ()

    def is_some(self) -> bool:
        return False

    def is_none(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise EmptyUnwrapError()

    def or_else(self, default: T) -> T:
        return default

    unwrap_or = or_else

    def or_else_get(self, supplier: Callable[[], T]) -> T:
        return supplier()

    def map(self, func: Callable[[T], U]) -> "Nothing[U]":  # noqa: ARG002
        return Nothing()

    def __iter__(self) -> Iterator[T]:
        return iter(())

    def __str__(self) -> str:
        return "None"

    def __repr__(self) -> str:
        return "Nothing"


type Option[T] = Some[T] | Nothing[T]

__all__ = ["Nothing", "Option", "Some"]
