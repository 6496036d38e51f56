"""
Result container for explicit success/failure handling.

Provides a typed ``Result[T, E]`` that is either ``Ok[T, E]`` (holding a
success value) or ``Err[T, E]`` (holding an error value). Failure becomes an
ordinary value that flows through ``map``/``and_then``/``or_else`` chains
instead of an exception the caller might forget to catch.

The error side is unconstrained: it may be an exception, a string, an enum,
a dataclass or anything else. Only :func:`try_result` and
:func:`try_result_async` turn raised exceptions into ``Err`` values, and only
the unsafe extractors (``unwrap``, ``expect``, ``unwrap_err``,
``expect_err``) ever raise, always with :class:`UnwrapError`.

Manifesto:
    - **Explicit over Implicit:** The signature says the call can fail
    - **Composable:** Chain fallible steps with and_then(), no nested try/except
    - **Total by default:** Everything except the unsafe extractors is total
    - **Batch-friendly:** all_ok(), any_ok() and partition_results() fold lists

Architecture:
    ::

        ┌─────────────────────────────────────────────────────────────┐
        │                     Result[T, E]                             │
        │                    (Type Alias)                              │
        ├─────────────────┬─────────────────┬─────────────────────────┤
        │   Ok[T, E]      │   Err[T, E]     │     Utilities           │
        │   (Success)     │   (Failure)     │                         │
        ├─────────────────┼─────────────────┼─────────────────────────┤
        │ • value: T      │ • error: E      │ • ok() / err()          │
        │ • map()         │ • map_err()     │ • from_nullable()       │
        │ • and_then()    │ • or_else()     │ • try_result()          │
        │ • unwrap()      │ • unwrap_err()  │ • try_result_async()    │
        │ • to_option()   │ • err()         │ • all_ok() / any_ok()   │
        └─────────────────┴─────────────────┴─────────────────────────┘

Examples:
    Basic usage with pattern matching:

    >>> from fallible.core.result import Ok, Err, Result
    >>> def divide(a: int, b: int) -> Result[float, str]:
    ...     if b == 0:
    ...         return Err("division by zero")
    ...     return Ok(a / b)
    >>> match divide(10, 2):
    ...     case Ok(value):
    ...         print(f"Result: {value}")
    ...     case Err(error):
    ...         print(f"Error: {error}")
    Result: 5.0

    Chaining:

    >>> Ok(10).map(lambda x: x * 2).and_then(lambda x: Ok(x + 1)).unwrap()
    21
    >>> Err("oops").map(lambda x: x * 2).unwrap_or(0)
    0

Performance:
    - **Time complexity:** O(1) for every method, O(n) for the aggregators
    - **Memory:** Ok/Err are frozen dataclasses with __slots__

Guardrails:
    ❌ DON'T: Call unwrap() without knowing the variant
    ✅ DO: Use unwrap_or(), unwrap_or_else() or pattern matching

    ❌ DON'T: Expect map()/and_then() to catch exceptions raised by your callback
    ✅ DO: Return Err from and_then(), or wrap the call in try_result()

Tags:
    result-pattern, error-handling, functional-programming, monadic, fallible
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Generic, Literal, NoReturn, TypeVar, overload

from fallible.core.errors import FallibleError, UnwrapError, render_value

if TYPE_CHECKING:
    from fallible.core.option import Option


T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")
X = TypeVar("X", bound=BaseException)


@dataclass(frozen=True, slots=True)
class Ok(Generic[T, E]):
    """
    Successful result containing a value.

    ``Ok[T, E]`` is immutable and, when its value is hashable, hashable. The
    error type parameter only exists so an ``Ok`` fits wherever a
    ``Result[T, E]`` is expected.

    Architecture:
        ::

            ┌─────────────────────────────────────────────────────────┐
            │                      Ok[T, E]                            │
            ├─────────────────────────────────────────────────────────┤
            │  value: T                                                │
            ├─────────────────────────────────────────────────────────┤
            │  Inspection     │  Extraction    │  Transformation      │
            │  • is_ok()      │  • unwrap()    │  • map()             │
            │  • is_ok_and()  │  • expect()    │  • and_then()        │
            │  • is_err()     │  • unwrap_or() │  • inspect()         │
            └─────────────────────────────────────────────────────────┘

    Examples:
        >>> Ok(5).map(lambda x: x * 2)
        Ok(10)
        >>> Ok(5).is_ok_and(lambda x: x > 3)
        True
        >>> Ok(5).err()
        Nothing
    """

    value: T
    tag: ClassVar[Literal["Ok"]] = "Ok"

    # ------------------------------------------------------------------ #
    # Inspection
    # ------------------------------------------------------------------ #

    def is_ok(self) -> Literal[True]:
        return True

    def is_err(self) -> Literal[False]:
        return False

    def is_ok_and(self, predicate: Callable[[T], bool]) -> bool:
        """True if the predicate holds on the value."""
        return bool(predicate(self.value))

    def is_err_and(self, predicate: Callable[[E], bool]) -> Literal[False]:
        """Always False; the predicate is not called."""
        return False

    # ------------------------------------------------------------------ #
    # Extraction
    # ------------------------------------------------------------------ #

    def unwrap(self) -> T:
        """Get the value. Safe for Ok."""
        return self.value

    def expect(self, message: str) -> T:
        """Get the value. Safe for Ok."""
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raise UnwrapError; there is no error to return."""
        raise UnwrapError(f"Called unwrap_err on an Ok value: {render_value(self.value)}")

    def expect_err(self, message: str) -> NoReturn:
        """Raise UnwrapError with ``message``."""
        raise UnwrapError(message)

    def unwrap_or(self, default: T) -> T:
        """Get value or default (always returns value for Ok)."""
        return self.value

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        """Get value or call f with error (always returns value for Ok)."""
        return self.value

    # ------------------------------------------------------------------ #
    # Transformation
    # ------------------------------------------------------------------ #

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """Transform the value."""
        return Ok(f(self.value))

    def map_err(self, f: Callable[[E], F]) -> Result[T, F]:
        """No-op for Ok."""
        return Ok(self.value)

    def map_or(self, default: U, f: Callable[[T], U]) -> U:
        return f(self.value)

    def map_or_else(self, default_f: Callable[[E], U], f: Callable[[T], U]) -> U:
        return f(self.value)

    def inspect(self, f: Callable[[T], Any]) -> Result[T, E]:
        """Call f with value for side effects, return self."""
        f(self.value)
        return self

    def inspect_err(self, f: Callable[[E], Any]) -> Result[T, E]:
        """No-op for Ok."""
        return self

    # ------------------------------------------------------------------ #
    # Combination
    # ------------------------------------------------------------------ #

    def and_(self, other: Result[U, E]) -> Result[U, E]:
        """Return ``other``."""
        return other

    def or_(self, other: Result[T, F]) -> Result[T, F]:
        """Return self; ``other`` is ignored."""
        return Ok(self.value)

    def and_then(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain to another Result-returning function."""
        return f(self.value)

    def or_else(self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Return self if Ok, otherwise call f with error."""
        return Ok(self.value)

    # ------------------------------------------------------------------ #
    # Conversion
    # ------------------------------------------------------------------ #

    def to_option(self) -> Option[T]:
        """``Some(value)``."""
        from fallible.core.option import Some

        return Some(self.value)

    def err(self) -> Option[E]:
        """``Nothing``; the value is discarded."""
        from fallible.core.option import Nothing

        return Nothing()

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"ok": True, "value": self.value}

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[T, E]):
    """
    Failed result containing an error value.

    ``Err`` short-circuits the success-side operations: ``map()`` and
    ``and_then()`` hand the same error on without calling their callback.
    ``or_else()``, ``unwrap_or()`` and friends are the recovery points.

    The error may be any value. When it is an exception, ``unwrap()`` chains
    it as the ``__cause__`` of the raised :class:`UnwrapError` so tracebacks
    still point at the original failure.

    Examples:
        >>> Err("bad").map(lambda x: x * 2)
        Err('bad')
        >>> Err("bad").map_err(str.upper)
        Err('BAD')
        >>> Err("bad").or_else(lambda e: Ok(len(e))).unwrap()
        3
    """

    error: E
    tag: ClassVar[Literal["Err"]] = "Err"

    def _cause(self) -> BaseException | None:
        return self.error if isinstance(self.error, BaseException) else None

    # ------------------------------------------------------------------ #
    # Inspection
    # ------------------------------------------------------------------ #

    def is_ok(self) -> Literal[False]:
        return False

    def is_err(self) -> Literal[True]:
        return True

    def is_ok_and(self, predicate: Callable[[T], bool]) -> Literal[False]:
        """Always False; the predicate is not called."""
        return False

    def is_err_and(self, predicate: Callable[[E], bool]) -> bool:
        """True if the predicate holds on the error."""
        return bool(predicate(self.error))

    # ------------------------------------------------------------------ #
    # Extraction
    # ------------------------------------------------------------------ #

    def unwrap(self) -> NoReturn:
        """Raise UnwrapError. Use only when you're sure it's Ok."""
        raise UnwrapError(
            f"Called unwrap on an Err value: {render_value(self.error)}",
            cause=self._cause(),
        )

    def expect(self, message: str) -> NoReturn:
        """Raise UnwrapError with ``message``."""
        raise UnwrapError(message, cause=self._cause())

    def unwrap_err(self) -> E:
        """Get the error. Safe for Err."""
        return self.error

    def expect_err(self, message: str) -> E:
        """Get the error. Safe for Err."""
        return self.error

    def unwrap_or(self, default: T) -> T:
        """Get default since this is Err."""
        return default

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        """Call f with error to get value."""
        return f(self.error)

    # ------------------------------------------------------------------ #
    # Transformation
    # ------------------------------------------------------------------ #

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """No-op for Err."""
        return Err(self.error)

    def map_err(self, f: Callable[[E], F]) -> Result[T, F]:
        """Transform the error."""
        return Err(f(self.error))

    def map_or(self, default: U, f: Callable[[T], U]) -> U:
        return default

    def map_or_else(self, default_f: Callable[[E], U], f: Callable[[T], U]) -> U:
        return default_f(self.error)

    def inspect(self, f: Callable[[T], Any]) -> Result[T, E]:
        """No-op for Err."""
        return self

    def inspect_err(self, f: Callable[[E], Any]) -> Result[T, E]:
        """Call f with error for side effects, return self."""
        f(self.error)
        return self

    # ------------------------------------------------------------------ #
    # Combination
    # ------------------------------------------------------------------ #

    def and_(self, other: Result[U, E]) -> Result[U, E]:
        """Return self; ``other`` is ignored."""
        return Err(self.error)

    def or_(self, other: Result[T, F]) -> Result[T, F]:
        """Return ``other``."""
        return other

    def and_then(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """No-op for Err."""
        return Err(self.error)

    def or_else(self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Call f with error to try recovery."""
        return f(self.error)

    # ------------------------------------------------------------------ #
    # Conversion
    # ------------------------------------------------------------------ #

    def to_option(self) -> Option[T]:
        """``Nothing``; the error is discarded."""
        from fallible.core.option import Nothing

        return Nothing()

    def err(self) -> Option[E]:
        """``Some(error)``."""
        from fallible.core.option import Some

        return Some(self.error)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        if isinstance(self.error, FallibleError):
            return {"ok": False, "error": self.error.to_dict()}
        if isinstance(self.error, BaseException):
            return {
                "ok": False,
                "error": {
                    "error_type": type(self.error).__name__,
                    "message": str(self.error),
                },
            }
        return {"ok": False, "error": self.error}

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


# Type alias for Result
Result = Ok[T, E] | Err[T, E]


# =============================================================================
# RESULT CONSTRUCTORS
# =============================================================================


def ok(value: T) -> Result[T, Any]:
    """Wrap ``value`` in Ok. Any value is accepted, None included."""
    return Ok(value)


def err(error: E) -> Result[Any, E]:
    """Wrap ``error`` in Err. Any value is accepted, None included."""
    return Err(error)


def from_nullable(value: T | None, error: E) -> Result[T, E]:
    """
    Convert an optional value to Result.

    ``None`` becomes ``Err(error)``; anything else, falsy values such as
    ``0``, ``""`` and ``False`` included, becomes ``Ok(value)``.

    Examples:
        >>> cache = {"key1": "value1"}
        >>> from_nullable(cache.get("key1"), "cache miss")
        Ok('value1')
        >>> from_nullable(cache.get("missing"), "cache miss")
        Err('cache miss')
        >>> from_nullable(0, "cache miss")
        Ok(0)
    """
    if value is None:
        return Err(error)
    return Ok(value)


@overload
def try_result(f: Callable[[], T]) -> Result[T, Exception]: ...

@overload
def try_result(
    f: Callable[[], T], exceptions: type[X] | tuple[type[X], ...]
) -> Result[T, X]: ...

def try_result(
    f: Callable[[], T],
    exceptions: type[BaseException] | tuple[type[BaseException], ...] = Exception,
) -> Result[T, Any]:
    """
    Execute a function and wrap its outcome in Result.

    This is the bridge between exception-raising code and Result-returning
    code. A normal return (``None`` and other falsy values included) becomes
    ``Ok``; a raised exception becomes ``Err`` holding that exact exception
    object.

    Architecture:
        ::

            ┌─────────────┐         ┌─────────────┐
            │ f() raises  │ ──────> │  Err(exc)   │
            └─────────────┘         └─────────────┘
            ┌─────────────┐         ┌─────────────┐
            │ f() returns │ ──────> │  Ok(value)  │
            └─────────────┘         └─────────────┘

    Examples:
        >>> import json
        >>> try_result(lambda: json.loads('{"a": 1}'))
        Ok({'a': 1})
        >>> try_result(lambda: json.loads('invalid')).is_err()
        True

        Only capture the exceptions you expect:

        >>> try_result(lambda: int("x"), ValueError).is_err()
        True

    Guardrails:
        ❌ DON'T: Pass functions with arguments directly
        ✅ DO: Wrap in lambda: try_result(lambda: fetch(url))

    Args:
        f: Zero-argument callable that may raise
        exceptions: Exception type(s) to capture; anything else propagates.
            Defaults to ``Exception``, so ``KeyboardInterrupt`` and
            ``SystemExit`` always propagate.

    Returns:
        Ok with f()'s return value, or Err with the captured exception
    """
    try:
        return Ok(f())
    except exceptions as e:
        return Err(e)


@overload
async def try_result_async(f: Callable[[], Awaitable[T]]) -> Result[T, Exception]: ...

@overload
async def try_result_async(
    f: Callable[[], Awaitable[T]], exceptions: type[X] | tuple[type[X], ...]
) -> Result[T, X]: ...

async def try_result_async(
    f: Callable[[], Awaitable[T]],
    exceptions: type[BaseException] | tuple[type[BaseException], ...] = Exception,
) -> Result[T, Any]:
    """
    Await ``f()`` and wrap its outcome in Result.

    Same contract as :func:`try_result` for asynchronous callables. The
    calling task is suspended until ``f()`` settles; nothing is scheduled
    concurrently and there is no cancellation hook. ``asyncio.CancelledError``
    is not an ``Exception`` and therefore propagates.

    Examples:
        >>> import asyncio
        >>> async def fetch():
        ...     return 42
        >>> asyncio.run(try_result_async(fetch))
        Ok(42)
    """
    try:
        value = await f()
    except exceptions as e:
        return Err(e)
    return Ok(value)


# =============================================================================
# COLLECTORS
# =============================================================================


def all_ok(results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """
    Collect Results into a Result of list (fail-fast).

    Iterates in order. The first Err is returned as soon as it is seen and
    nothing after it is consumed. If every element is Ok, returns Ok with all
    values in input order. An empty input is vacuously Ok([]).

    Architecture:
        ::

            [Ok(1), Ok(2), Ok(3)] ──────> Ok([1, 2, 3])

            [Ok(1), Err(x), Err(y)] ────> Err(x)  # stops at first Err

    Examples:
        >>> all_ok([Ok(1), Ok(2), Ok(3)])
        Ok([1, 2, 3])
        >>> all_ok([Ok(1), Err("first"), Err("second")])
        Err('first')
        >>> all_ok([])
        Ok([])
    """
    values: list[T] = []
    for result in results:
        match result:
            case Ok(value):
                values.append(value)
            case Err(error):
                return Err(error)
            case _:
                raise TypeError(f"expected Ok or Err, got {type(result).__name__}")
    return Ok(values)


def any_ok(results: Iterable[Result[T, E]]) -> Result[T, list[E]]:
    """
    Return the first Ok, or an Err holding every error.

    Iterates in order and returns the first Ok as soon as it is seen. If
    every element is Err, returns a single Err whose payload lists all the
    error values in input order. An empty input is vacuously Err([]).

    Examples:
        >>> any_ok([Err("a"), Ok(42), Ok(100)])
        Ok(42)
        >>> any_ok([Err("a"), Err("b")])
        Err(['a', 'b'])
        >>> any_ok([])
        Err([])
    """
    errors: list[E] = []
    for result in results:
        match result:
            case Ok(value):
                return Ok(value)
            case Err(error):
                errors.append(error)
            case _:
                raise TypeError(f"expected Ok or Err, got {type(result).__name__}")
    return Err(errors)


def partition_results(results: Iterable[Result[T, E]]) -> tuple[list[T], list[E]]:
    """
    Partition results into successes and failures.

    Unlike :func:`all_ok` and :func:`any_ok` this never short-circuits: the
    whole input is consumed and both lists keep input order.

    Examples:
        >>> values, errors = partition_results([Ok(1), Err("a"), Ok(2)])
        >>> values, errors
        ([1, 2], ['a'])
    """
    values: list[T] = []
    errors: list[E] = []
    for result in results:
        match result:
            case Ok(value):
                values.append(value)
            case Err(error):
                errors.append(error)
            case _:
                raise TypeError(f"expected Ok or Err, got {type(result).__name__}")
    return values, errors


__all__ = [
    # Types
    "Result",
    "Ok",
    "Err",
    # Constructors
    "ok",
    "err",
    "from_nullable",
    "try_result",
    "try_result_async",
    # Collectors
    "all_ok",
    "any_ok",
    "partition_results",
]
