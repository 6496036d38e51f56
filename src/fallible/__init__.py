"""fallible -- Result and Option containers for Python.

Usage::

    from fallible import Ok, Err, Result, try_result

    def parse_port(raw: str) -> Result[int, str]:
        return (
            try_result(lambda: int(raw), ValueError)
            .map_err(lambda e: f"not a number: {raw!r}")
            .and_then(lambda n: Ok(n) if 0 < n < 65536 else Err(f"out of range: {n}"))
        )

The ``from_nullable`` constructors differ between the two containers and are
reached through their modules: ``fallible.result.from_nullable(value, error)``
and ``fallible.option.from_nullable(value)``.
"""

from fallible.core import option, result
from fallible.core import *  # noqa: F403
from fallible.core import __all__ as _core_all

__version__ = "0.1.0"

__all__ = ["option", "result", "__version__", *_core_all]
