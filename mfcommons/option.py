"""A container that either holds one value or is empty."""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

__all__ = [
    "EmptyOptionalError",
    "Option",
    "empty",
    "of",
    "of_nullable",
]

T = TypeVar("T")
U = TypeVar("U")

_MISSING: Any = object()


class EmptyOptionalError(RuntimeError):
    """Raised when the value of an empty option is requested."""

    def __init__(self) -> None:
        super().__init__("No value present in Optional.")


class Option(Generic[T]):
    """Either holds a value or is empty.

    Build instances with :func:`of`, :func:`of_nullable` and :func:`empty`.
    Options are immutable.
    """

    __slots__ = ("_value",)

    def __init__(self, value: Any = _MISSING) -> None:
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Option instances are immutable")

    def get(self) -> T:
        """Return the value, raising :class:`EmptyOptionalError` if empty."""
        return self.get_or_throw()

    def is_present(self) -> bool:
        return self._value is not _MISSING

    def is_empty(self) -> bool:
        return not self.is_present()

    def __bool__(self) -> bool:
        return self.is_present()

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Return this option if it holds a value matching ``predicate``, else empty."""
        if self.is_empty():
            return self
        return self if predicate(self._value) else empty()

    def map(self, mapper: Callable[[T], U]) -> Option[U]:
        """Return an option holding ``mapper(value)``, or empty if this one is empty."""
        if self.is_empty():
            return empty()
        return of(mapper(self._value))

    def flat_map(self, mapper: Callable[[T], Option[U]]) -> Option[U]:
        """Return ``mapper(value)``, or empty if this one is empty."""
        if self.is_empty():
            return empty()
        result = mapper(self._value)
        if not isinstance(result, Option):
            raise TypeError(
                f"flat_map expected the mapper to return an Option, got {type(result).__name__}"
            )
        return result

    def use_this_or_run(self, supplier: Callable[[], Option[T]]) -> Option[T]:
        """Return this option if it holds a value, otherwise the one ``supplier`` gives."""
        return self if self.is_present() else supplier()

    def get_or_default(self, other: T) -> T:
        return self._value if self.is_present() else other

    def get_or_run(self, supplier: Callable[[], T]) -> T:
        """Return the value, or the result of ``supplier()`` if empty."""
        return self._value if self.is_present() else supplier()

    def get_or_throw(self, supplier: Callable[[], BaseException] | None = None) -> T:
        """Return the value, or raise.

        If empty, raises the exception made by ``supplier`` or, without one,
        :class:`EmptyOptionalError`.
        """
        if self.is_present():
            return self._value
        if supplier is None:
            raise EmptyOptionalError()
        raise supplier()

    def contains(self, value: Any) -> bool:
        return self.is_present() and self._value == value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        if self.is_present():
            return other.contains(self._value)
        return other.is_empty()

    def __hash__(self) -> int:
        if self.is_empty():
            return hash((Option, _MISSING))
        return hash((Option, self._value))

    def __repr__(self) -> str:
        if self.is_empty():
            return "Option.empty()"
        return f"Option.of({self._value!r})"


_EMPTY: Option[Any] = Option()


def empty() -> Option[Any]:
    """Return the shared empty option."""
    return _EMPTY


def of(value: T) -> Option[T]:
    """Return an option holding ``value`` (``None`` included)."""
    return Option(value)


def of_nullable(value: T | None) -> Option[T]:
    """Return an option holding ``value``, or empty if ``value`` is ``None``."""
    return empty() if value is None else Option(value)