"""Cache settings read from environment variables."""

from __future__ import annotations

from typing import Mapping, Optional

import logging
import os

from pydantic import BaseModel, Field, ValidationError, field_validator

from table_cache.modules.cache import BoundedEvictionCache
from table_cache.modules.errors import InvalidConfiguration


ENV_PREFIX = "TABLE_CACHE_"
DEFAULT_CAPACITY = 8

_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class CacheSettings(BaseModel):
    capacity: int = Field(default=DEFAULT_CAPACITY, ge=1)
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LEVELS:
            raise ValueError(f"unknown log level {value!r}")
        return level

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "CacheSettings":
        """Build settings from ``TABLE_CACHE_*`` variables.

        Missing variables fall back to the defaults. Invalid values raise
        :class:`InvalidConfiguration` naming the field.
        """
        env = os.environ if environ is None else environ
        raw = {}
        for name in cls.model_fields:
            value = env.get(ENV_PREFIX + name.upper())
            if value is not None and value.strip():
                raw[name] = value.strip()
        try:
            return cls.model_validate(raw)
        except ValidationError as exc:
            first = exc.errors()[0]
            field = str(first["loc"][0]) if first.get("loc") else None
            raise InvalidConfiguration(f"invalid setting {field}: {first['msg']}", config_key=field) from exc


def build_cache(settings: Optional[CacheSettings] = None) -> BoundedEvictionCache:
    settings = settings or CacheSettings.from_env()
    return BoundedEvictionCache(settings.capacity)


__all__ = ["CacheSettings", "build_cache", "ENV_PREFIX", "DEFAULT_CAPACITY"]
