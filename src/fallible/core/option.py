"""
Option container for values that may be absent.

``Option[T]`` is either ``Some[T]`` (a value is present) or ``Nothing[T]``
(no value). Unlike ``T | None`` it nests and composes: ``Some(None)`` is a
present value that happens to be ``None``, and absence travels through
``map``/``and_then``/``filter`` chains without ``if x is not None`` ladders.

Manifesto:
    - **Presence is not nullability:** Some(None) is present
    - **Absence carries nothing:** Nothing has no payload; fallbacks take no args
    - **Lazy fallbacks:** or_else(), unwrap_or_else(), to_result_else() only
      call their callback when absent

Architecture:
    ::

        ┌─────────────────────────────────────────────────────────────┐
        │                       Option[T]                              │
        │                      (Type Alias)                            │
        ├─────────────────┬─────────────────┬─────────────────────────┤
        │    Some[T]      │   Nothing[T]    │     Utilities           │
        ├─────────────────┼─────────────────┼─────────────────────────┤
        │ • value: T      │ (no payload)    │ • some() / none()       │
        │ • map()         │ • or_()         │ • from_nullable()       │
        │ • filter()      │ • or_else()     │ • all_some()            │
        │ • zip()/unzip() │ • unwrap_or()   │ • any_some()            │
        │ • to_result()   │ • to_result()   │                         │
        └─────────────────┴─────────────────┴─────────────────────────┘

Examples:
    >>> from fallible.core.option import Some, Nothing, from_nullable
    >>> users = {"alice": "alice@example.com"}
    >>> from_nullable(users.get("alice")).map(str.upper).unwrap_or("-")
    'ALICE@EXAMPLE.COM'
    >>> from_nullable(users.get("bob")).map(str.upper).unwrap_or("-")
    '-'
    >>> match Some(3).filter(lambda n: n % 2 == 0):
    ...     case Some(value):
    ...         print(value)
    ...     case Nothing():
    ...         print("odd")
    odd

Tags:
    option-pattern, optionality, functional-programming, monadic, fallible
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, Literal, NoReturn, TypeVar

from fallible.core.errors import UnwrapError
from fallible.core.result import Err, Ok, Result


T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")
A = TypeVar("A")
B = TypeVar("B")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Some(Generic[T]):
    """
    Present option holding a value.

    The value may be anything, ``None`` included.

    Examples:
        >>> Some(2).map(lambda x: x + 1)
        Some(3)
        >>> Some(2).zip(Some("b"))
        Some((2, 'b'))
        >>> Some(2).xor(Nothing())
        Some(2)
    """

    value: T
    tag: ClassVar[Literal["Some"]] = "Some"

    # ------------------------------------------------------------------ #
    # Inspection
    # ------------------------------------------------------------------ #

    def is_some(self) -> Literal[True]:
        return True

    def is_none(self) -> Literal[False]:
        return False

    def is_some_and(self, predicate: Callable[[T], bool]) -> bool:
        return bool(predicate(self.value))

    def is_none_or(self, predicate: Callable[[T], bool]) -> bool:
        return bool(predicate(self.value))

    # ------------------------------------------------------------------ #
    # Extraction
    # ------------------------------------------------------------------ #

    def unwrap(self) -> T:
        return self.value

    def expect(self, message: str) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        return self.value

    # ------------------------------------------------------------------ #
    # Transformation
    # ------------------------------------------------------------------ #

    def map(self, f: Callable[[T], U]) -> Option[U]:
        return Some(f(self.value))

    def map_or(self, default: U, f: Callable[[T], U]) -> U:
        return f(self.value)

    def map_or_else(self, default_f: Callable[[], U], f: Callable[[T], U]) -> U:
        return f(self.value)

    def inspect(self, f: Callable[[T], Any]) -> Option[T]:
        """Call f with value for side effects, return self."""
        f(self.value)
        return self

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Self if the predicate holds, Nothing otherwise."""
        if predicate(self.value):
            return self
        return Nothing()

    # ------------------------------------------------------------------ #
    # Combination
    # ------------------------------------------------------------------ #

    def and_(self, other: Option[U]) -> Option[U]:
        return other

    def or_(self, other: Option[T]) -> Option[T]:
        return self

    def or_else(self, f: Callable[[], Option[T]]) -> Option[T]:
        return self

    def and_then(self, f: Callable[[T], Option[U]]) -> Option[U]:
        return f(self.value)

    def xor(self, other: Option[T]) -> Option[T]:
        """Self if ``other`` is Nothing, otherwise Nothing."""
        if other.is_none():
            return self
        return Nothing()

    def zip(self, other: Option[U]) -> Option[tuple[T, U]]:
        match other:
            case Some(value):
                return Some((self.value, value))
        return Nothing()

    def zip_with(self, other: Option[U], f: Callable[[T, U], R]) -> Option[R]:
        match other:
            case Some(value):
                return Some(f(self.value, value))
        return Nothing()

    def unzip(self: Some[tuple[A, B]]) -> tuple[Option[A], Option[B]]:
        """Split ``Some((a, b))`` into ``(Some(a), Some(b))``."""
        first, second = self.value
        return Some(first), Some(second)

    # ------------------------------------------------------------------ #
    # Conversion
    # ------------------------------------------------------------------ #

    def to_result(self, error: E) -> Result[T, E]:
        return Ok(self.value)

    def to_result_else(self, f: Callable[[], E]) -> Result[T, E]:
        return Ok(self.value)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"some": True, "value": self.value}

    def __repr__(self) -> str:
        return f"Some({self.value!r})"


@dataclass(frozen=True, slots=True)
class Nothing(Generic[T]):
    """
    Absent option.

    Every ``Nothing`` compares equal to every other ``Nothing``. Callbacks
    that would receive the value are never called; zero-argument fallbacks
    (``unwrap_or_else``, ``or_else``, ``map_or_else``, ``to_result_else``)
    are called exactly once.

    Examples:
        >>> Nothing().map(lambda x: x + 1)
        Nothing
        >>> Nothing().unwrap_or_else(lambda: 7)
        7
        >>> Nothing().is_none_or(lambda x: False)
        True
    """

    tag: ClassVar[Literal["None"]] = "None"

    # ------------------------------------------------------------------ #
    # Inspection
    # ------------------------------------------------------------------ #

    def is_some(self) -> Literal[False]:
        return False

    def is_none(self) -> Literal[True]:
        return True

    def is_some_and(self, predicate: Callable[[T], bool]) -> Literal[False]:
        return False

    def is_none_or(self, predicate: Callable[[T], bool]) -> Literal[True]:
        return True

    # ------------------------------------------------------------------ #
    # Extraction
    # ------------------------------------------------------------------ #

    def unwrap(self) -> NoReturn:
        raise UnwrapError("Called unwrap on a None value")

    def expect(self, message: str) -> NoReturn:
        raise UnwrapError(message)

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        return f()

    # ------------------------------------------------------------------ #
    # Transformation
    # ------------------------------------------------------------------ #

    def map(self, f: Callable[[T], U]) -> Option[U]:
        return Nothing()

    def map_or(self, default: U, f: Callable[[T], U]) -> U:
        return default

    def map_or_else(self, default_f: Callable[[], U], f: Callable[[T], U]) -> U:
        return default_f()

    def inspect(self, f: Callable[[T], Any]) -> Option[T]:
        return self

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        return self

    # ------------------------------------------------------------------ #
    # Combination
    # ------------------------------------------------------------------ #

    def and_(self, other: Option[U]) -> Option[U]:
        return Nothing()

    def or_(self, other: Option[T]) -> Option[T]:
        return other

    def or_else(self, f: Callable[[], Option[T]]) -> Option[T]:
        return f()

    def and_then(self, f: Callable[[T], Option[U]]) -> Option[U]:
        return Nothing()

    def xor(self, other: Option[T]) -> Option[T]:
        """``other`` if it is Some, otherwise Nothing."""
        return other

    def zip(self, other: Option[U]) -> Option[tuple[T, U]]:
        return Nothing()

    def zip_with(self, other: Option[U], f: Callable[[T, U], R]) -> Option[R]:
        return Nothing()

    def unzip(self) -> tuple[Option[Any], Option[Any]]:
        return Nothing(), Nothing()

    # ------------------------------------------------------------------ #
    # Conversion
    # ------------------------------------------------------------------ #

    def to_result(self, error: E) -> Result[T, E]:
        return Err(error)

    def to_result_else(self, f: Callable[[], E]) -> Result[T, E]:
        return Err(f())

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"some": False}

    def __repr__(self) -> str:
        return "Nothing"


# Type alias for Option
Option = Some[T] | Nothing[T]


# =============================================================================
# OPTION CONSTRUCTORS
# =============================================================================


def some(value: T) -> Option[T]:
    """Wrap ``value`` in Some. ``some(None)`` is present."""
    return Some(value)


def none() -> Option[Any]:
    """An absent option."""
    return Nothing()


def from_nullable(value: T | None) -> Option[T]:
    """
    Convert an optional value to Option.

    Only ``None`` becomes Nothing; ``0``, ``""`` and ``False`` are present.

    Examples:
        >>> from_nullable(None)
        Nothing
        >>> from_nullable(0)
        Some(0)
    """
    if value is None:
        return Nothing()
    return Some(value)


# =============================================================================
# COLLECTORS
# =============================================================================


def all_some(options: Iterable[Option[T]]) -> Option[list[T]]:
    """
    Collect Options into an Option of list (fail-fast).

    Returns Nothing at the first Nothing without consuming the rest; otherwise
    Some with every value in input order. An empty input is Some([]).

    Examples:
        >>> all_some([Some(1), Some(2)])
        Some([1, 2])
        >>> all_some([Some(1), Nothing(), Some(3)])
        Nothing
        >>> all_some([])
        Some([])
    """
    values: list[T] = []
    for option in options:
        match option:
            case Some(value):
                values.append(value)
            case Nothing():
                return Nothing()
            case _:
                raise TypeError(f"expected Some or Nothing, got {type(option).__name__}")
    return Some(values)


def any_some(options: Iterable[Option[T]]) -> Option[T]:
    """
    Return the first Some, or Nothing if there is none.

    Examples:
        >>> any_some([Nothing(), Some(2), Some(3)])
        Some(2)
        >>> any_some([])
        Nothing
    """
    for option in options:
        match option:
            case Some():
                return option
            case Nothing():
                continue
            case _:
                raise TypeError(f"expected Some or Nothing, got {type(option).__name__}")
    return Nothing()


__all__ = [
    # Types
    "Option",
    "Some",
    "Nothing",
    # Constructors
    "some",
    "none",
    "from_nullable",
    # Collectors
    "all_some",
    "any_some",
]
