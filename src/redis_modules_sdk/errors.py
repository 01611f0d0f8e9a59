"""Custom exceptions raised by the Redis modules SDK."""

from __future__ import annotations

from typing import Any


class RedisModuleError(Exception):
    """Base error for all module failures."""

    def __init__(self, message: str, *, context: Any | None = None) -> None:
        super().__init__(message)
        self.context = context


class ConnectionError(RedisModuleError):
    """Raised when the module cannot reach the server or is not connected."""


class CommandError(RedisModuleError):
    """Raised when the server rejects a command or the command fails."""


__all__ = [
    "CommandError",
    "ConnectionError",
    "RedisModuleError",
]
