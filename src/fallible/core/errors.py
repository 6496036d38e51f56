"""
Error types raised by fallible.

The containers in this package model failure as data, so very little is ever
raised. What remains falls into two buckets:

- **Contract violations:** :class:`UnwrapError`, raised when an unsafe
  extractor (``unwrap``, ``expect``, ``unwrap_err``, ``expect_err``) is called
  on the wrong variant. This is a bug signal, not something to recover from.
- **Configuration problems:** :class:`ConfigError`, raised when the
  ``FALLIBLE_*`` environment fails validation.

Manifesto:
    - **Errors as values first:** Err and Nothing carry failures, not raises
    - **One loud signal:** UnwrapError is the only error the containers raise
    - **Chained causes:** Unwrapping an Err that holds an exception chains it

Architecture:
    ::

        ┌──────────────────────────────────────────┐
        │              FallibleError                │
        │        (message, cause, to_dict)          │
        ├─────────────────────┬────────────────────┤
        │     UnwrapError     │    ConfigError     │
        │ (wrong variant)     │ (bad FALLIBLE_*)   │
        └─────────────────────┴────────────────────┘

Examples:
    >>> from fallible import Err
    >>> Err("boom").unwrap()
    Traceback (most recent call last):
    ...
    fallible.core.errors.UnwrapError: Called unwrap on an Err value: 'boom'

Guardrails:
    ❌ DON'T: Catch UnwrapError to implement fallbacks
    ✅ DO: Use unwrap_or(), unwrap_or_else() or pattern matching

Tags:
    error-handling, exception-hierarchy, contract-violation, fallible
"""

from __future__ import annotations

from typing import Any


class FallibleError(Exception):
    """
    Base exception for everything fallible raises.

    Attributes:
        message: Human-readable description.
        cause: Optional underlying exception, also set as ``__cause__``.
    """

    def __init__(self, message: str, *, cause: BaseException | None = None):
        super().__init__(message)
        self.message = message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
        }
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class UnwrapError(FallibleError):
    """
    Raised by an unsafe extractor called on the wrong variant.

    Carries nothing beyond its message. Code that wants to recover from a
    failure should never reach for the unsafe extractors in the first place.

    Examples:
        >>> from fallible import Ok
        >>> Ok(1).unwrap_err()
        Traceback (most recent call last):
        ...
        fallible.core.errors.UnwrapError: Called unwrap_err on an Ok value: 1
    """


class ConfigError(FallibleError):
    """Invalid ``FALLIBLE_*`` configuration."""


# Max characters of a payload rendered into an UnwrapError message.
_REPR_MAX_LENGTH = 200


def render_value(value: Any) -> str:
    """Render a payload for an error message, truncated to ``_REPR_MAX_LENGTH``."""
    try:
        text = repr(value)
    except Exception:
        text = object.__repr__(value)
    if len(text) > _REPR_MAX_LENGTH:
        return text[: _REPR_MAX_LENGTH - 3] + "..."
    return text


__all__ = [
    "FallibleError",
    "UnwrapError",
    "ConfigError",
    "render_value",
]
