"""Common transport abstractions."""

from __future__ import annotations

from typing import Any, Literal, Protocol, Sequence, runtime_checkable

import redis.exceptions

from ..errors import CommandError, ConnectionError, RedisModuleError

TransportKind = Literal["single", "cluster"]


@runtime_checkable
class Transport(Protocol):
    Kind = TransportKind

    @property
    def kind(self) -> TransportKind: ...

    async def call(self, command: str, args: Sequence[Any]) -> Any: ...

    async def quit(self) -> None: ...


def command_tokens(command: str, args: Sequence[Any]) -> list[Any]:
    """Split ``command`` into protocol tokens and append ``args``."""
    return [*command.split(), *args]


def translate_error(exc: Exception) -> RedisModuleError:
    """Map a redis-py exception onto the SDK's error types."""
    if isinstance(exc, RedisModuleError):
        return exc
    if isinstance(exc, (redis.exceptions.ConnectionError, redis.exceptions.TimeoutError)):
        return ConnectionError(str(exc), context=exc)
    return CommandError(str(exc), context=exc)


__all__ = ["Transport", "TransportKind", "command_tokens", "translate_error"]
