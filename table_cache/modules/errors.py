"""Exceptions raised by the table cache."""

from __future__ import annotations

from typing import Optional


class TableCacheError(Exception):
    """Base exception for all table cache errors.

    Attributes:
        message: Human-readable error description
        error_code: Optional error code for programmatic handling
    """

    def __init__(self, message: str, error_code: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code

    def __str__(self) -> str:
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message


class InvalidConfiguration(TableCacheError, ValueError):
    """Bad cache capacity or settings value.

    Attributes:
        config_key: The setting that failed validation (if applicable)
    """

    def __init__(self, message: str, config_key: Optional[str] = None) -> None:
        super().__init__(message, error_code="CONFIG_ERROR")
        self.config_key = config_key


class KeyNotFound(TableCacheError, KeyError):
    """Lookup of a key that was never stored or has been evicted."""

    def __init__(self, key: str) -> None:
        super().__init__(f"key not in cache: {key!r}", error_code="KEY_NOT_FOUND")
        self.key = key


__all__ = ["TableCacheError", "InvalidConfiguration", "KeyNotFound"]
