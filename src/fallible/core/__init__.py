"""fallible core -- the Result and Option containers.

Manifesto:
    Fallibility and optionality are ordinary values here. A function that
    can fail returns ``Result[T, E]``; a value that may be missing is an
    ``Option[T]``. Callers thread them through ``map``/``and_then``/``or_else``
    and only raise when they deliberately call an unsafe extractor.

Architecture::

    Layer 1 -- Containers
        result.py          Result[T, E] (Ok / Err / try_result / all_ok / any_ok)
        option.py          Option[T] (Some / Nothing / all_some / any_some)

    Layer 2 -- Errors
        errors.py          FallibleError, UnwrapError, ConfigError

    Layer 3 -- Cross-Cutting Concerns
        settings.py        FallibleSettings (FALLIBLE_* env vars)
        logging.py         Structured logging + inspect hooks (structlog)

Module Map (recommended reading order)
--------------------------------------
result.py, option.py, errors.py, then logging.py if you want log hooks.
"""

from fallible.core.errors import ConfigError, FallibleError, UnwrapError
from fallible.core.option import (
    Nothing,
    Option,
    Some,
    all_some,
    any_some,
    none,
    some,
)
from fallible.core.result import (
    Err,
    Ok,
    Result,
    all_ok,
    any_ok,
    err,
    ok,
    partition_results,
    try_result,
    try_result_async,
)

__all__ = [
    # Result
    "Result",
    "Ok",
    "Err",
    "ok",
    "err",
    "try_result",
    "try_result_async",
    "all_ok",
    "any_ok",
    "partition_results",
    # Option
    "Option",
    "Some",
    "Nothing",
    "some",
    "none",
    "all_some",
    "any_some",
    # Errors
    "FallibleError",
    "UnwrapError",
    "ConfigError",
]
