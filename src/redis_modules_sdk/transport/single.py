"""Single-node transport built on top of redis.asyncio."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

import redis.asyncio as aioredis
import redis.exceptions

from ..logger import BoundLogger, create_logger
from .base import Transport, command_tokens, translate_error


class RedisTransport:
    kind: Transport.Kind = "single"

    def __init__(
        self,
        options: Mapping[str, Any] | None = None,
        *,
        client: aioredis.Redis | None = None,
        logger: BoundLogger | None = None,
    ) -> None:
        self._options = {"decode_responses": True, **dict(options or {})}
        self._client = client or aioredis.Redis(**self._options)
        self._owns_client = client is None
        self._logger = (logger or create_logger()).child("single")

    @property
    def client(self) -> aioredis.Redis:
        return self._client

    async def call(self, command: str, args: Sequence[Any]) -> Any:
        tokens = command_tokens(command, args)
        self._logger.trace("REDIS -> %s", tokens)
        try:
            return await self._client.execute_command(*tokens)
        except redis.exceptions.RedisError as exc:
            raise translate_error(exc) from exc

    async def quit(self) -> None:
        if self._owns_client:
            self._logger.debug(
                "Closing connection to %s:%s",
                self._options.get("host", "localhost"),
                self._options.get("port", 6379),
            )
            await self._client.aclose()


__all__ = ["RedisTransport"]
