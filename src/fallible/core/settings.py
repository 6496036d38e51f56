"""
Settings for fallible.

Manifesto:
    The containers are pure values and need no configuration to work. The
    few knobs that exist shape how the package *talks*: the log level,
    renderer and service name used by :mod:`fallible.core.logging`.
    Nothing read here changes what a container returns or raises.

All fields can be set via ``FALLIBLE_*`` environment variables (e.g.
``FALLIBLE_LOG_LEVEL=DEBUG``) or a ``.env`` file in the working directory.

Tags:
    fallible, configuration, settings, pydantic

Doc-Types:
    api-reference
"""

from __future__ import annotations

import logging

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fallible.core.errors import ConfigError


class FallibleSettings(BaseSettings):
    """fallible configuration.

    Fields
    ──────
    log_level        : Structlog log level
    log_json         : JSON renderer (True), console (False), auto (None)
    service          : ``service.name`` attached to every log event
    """

    model_config = SettingsConfigDict(
        env_prefix="FALLIBLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Observability ────────────────────────────────────────────
    log_level: str = "INFO"
    log_json: bool | None = None
    service: str = "fallible"

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level


# ── Settings factory with caching ────────────────────────────────────────

_settings_cache: dict[str, FallibleSettings] = {}


def get_settings(*, _force_reload: bool = False) -> FallibleSettings:
    """Load, validate, and cache a :class:`FallibleSettings` instance.

    Raises:
        ConfigError: if the environment holds an invalid value.
    """
    if not _force_reload and "default" in _settings_cache:
        return _settings_cache["default"]

    try:
        settings = FallibleSettings()
    except ValidationError as exc:
        raise ConfigError(f"Invalid fallible settings: {exc}", cause=exc) from exc

    _settings_cache["default"] = settings
    return settings


def clear_settings_cache() -> None:
    """Clear the settings cache (primarily for testing)."""
    _settings_cache.clear()


__all__ = [
    "FallibleSettings",
    "get_settings",
    "clear_settings_cache",
]
