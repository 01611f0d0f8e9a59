"""Base class shared by every Redis module wrapper."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping, Sequence

from .errors import CommandError, ConnectionError, RedisModuleError
from .formatter import param_to_string
from .logger import BoundLogger, LogLevel, create_logger, log
from .parser import (
    is_only_two_dimensional_array,
    normalize_response,
    reduce_array_dimension,
)
from .transport import ClusterTransport, RedisTransport, Transport
from .transport.base import translate_error
from .transport.cluster import NodeSpec
from .types import CommandData, ExecuteResult


@dataclass
class ModuleOptions:
    is_handle_error: bool = True
    show_debug_logs: bool = False
    return_raw_response: bool = False
    logger: object | None = None
    log_level: LogLevel = "info"

    @classmethod
    def from_value(cls, value: "ModuleOptions | Mapping[str, Any] | None") -> "ModuleOptions":
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(value) - known)
        if unknown:
            raise TypeError(f"Unknown module options: {', '.join(unknown)}")
        return cls(**dict(value))


class RedisModule:
    """Connection state and command plumbing for a Redis module.

    ``options`` is either a mapping of ``redis.asyncio.Redis`` keyword options
    (single node) or a sequence of cluster nodes, in which case
    ``cluster_options`` are handed to ``RedisCluster``. The choice is fixed for
    the lifetime of the object.
    """

    def __init__(
        self,
        name: str,
        options: Mapping[str, Any] | Sequence[NodeSpec] | None = None,
        module_options: ModuleOptions | Mapping[str, Any] | None = None,
        cluster_options: Mapping[str, Any] | None = None,
        *,
        transport: Transport | None = None,
    ) -> None:
        self.name = name
        if isinstance(options, (str, bytes)):
            raise TypeError("options must be a mapping of Redis options or a sequence of cluster nodes")
        if options is None or isinstance(options, Mapping):
            self.redis_options: dict[str, Any] | None = dict(options or {})
            self.cluster_nodes: list[NodeSpec] | None = None
        else:
            self.redis_options = None
            self.cluster_nodes = list(options)
        self.cluster_options = dict(cluster_options) if cluster_options else None

        resolved = ModuleOptions.from_value(module_options)
        self.is_handle_error = resolved.is_handle_error
        self.show_debug_logs = resolved.show_debug_logs
        self.return_raw_response = resolved.return_raw_response
        self._logger = create_logger(
            logger=resolved.logger,
            level=resolved.log_level,
            show_debug_logs=resolved.show_debug_logs,
        ).child(name)
        self._provided_transport = transport
        self._transport: Transport | None = None

    @property
    def is_cluster(self) -> bool:
        return self.cluster_nodes is not None

    @property
    def transport(self) -> Transport | None:
        return self._transport

    @property
    def logger(self) -> BoundLogger:
        return self._logger

    async def __aenter__(self) -> "RedisModule":
        await self.connect()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.disconnect()

    async def connect(self) -> None:
        """Create the single-node or cluster connection."""
        if self._transport is not None:
            return
        self._transport = self._provided_transport or self._create_transport()
        self._logger.info("%s: connected (%s)", self.name, self._transport.kind)

    async def disconnect(self) -> None:
        """Quit the connection created by connect()."""
        if self._transport is None:
            return
        transport, self._transport = self._transport, None
        await transport.quit()
        self._logger.info("%s: disconnected", self.name)

    async def execute(self, command: str, *args: Any) -> Any:
        return await self.send_command(CommandData(command, list(args)))

    async def send_command(self, data: CommandData) -> Any:
        """Run a command and return its raw reply.

        A failure goes through handle_error(): it raises by default, and with
        ``is_handle_error`` disabled the formatted error message is returned in
        place of the reply.
        """
        result = await self.execute_safe(data)
        if result.ok:
            return result.data
        return self.handle_error(str(result.error), error=result.error)

    async def execute_safe(self, data: CommandData) -> ExecuteResult[Any]:
        try:
            response = await self._execute_internal(data)
            return ExecuteResult(ok=True, data=response)
        except Exception as exc:
            return ExecuteResult(ok=False, error=self._command_failure(data, exc))

    def handle_error(self, message: str, *, error: RedisModuleError | None = None) -> str:
        """Raise ``message`` when ``is_handle_error`` is set, otherwise return it."""
        if not self.is_handle_error:
            return message
        if error is None:
            raise CommandError(message)
        cause = error.context if isinstance(error.context, BaseException) else None
        raise error from cause

    def handle_response(self, response: Any) -> Any:
        """Collapse a reply into a scalar, list or dict unless raw responses were requested."""
        return normalize_response(response, raw=self.return_raw_response)

    def is_only_two_dimensional_array(self, array: Sequence[Any]) -> bool:
        return is_only_two_dimensional_array(array)

    def reduce_array_dimension(self, array: Sequence[Sequence[Any]]) -> list[Any]:
        return reduce_array_dimension(array)

    def param_to_string(self, value: Any) -> Any:
        return param_to_string(value)

    def log(self, level: LogLevel, msg: str) -> None:
        log(level, msg, show_debug_logs=self.show_debug_logs, logger=self._logger)

    async def _execute_internal(self, data: CommandData) -> Any:
        if self._transport is None:
            raise ConnectionError(f"{self.name} is not connected, call connect() first")
        if self.show_debug_logs:
            self._logger.debug(
                "%s: Running command %s with arguments: %s", self.name, data.command, data.args
            )
        response = await self._transport.call(data.command, data.args)
        if self.show_debug_logs:
            self._logger.debug(
                "%s: command %s responded with %s", self.name, data.command, response
            )
        return response

    def _command_failure(self, data: CommandData, exc: Exception) -> RedisModuleError:
        message = f"{self.name} class ({data.verb}): {exc}"
        error_type = type(translate_error(exc))
        cause: BaseException = exc
        # Transports already wrap driver errors; keep the driver exception.
        if isinstance(exc, RedisModuleError) and isinstance(exc.context, BaseException):
            cause = exc.context
        return error_type(message, context=cause)

    def _create_transport(self) -> Transport:
        if self.cluster_nodes is not None:
            return ClusterTransport(self.cluster_nodes, self.cluster_options, logger=self._logger)
        return RedisTransport(self.redis_options, logger=self._logger)


__all__ = ["ModuleOptions", "RedisModule"]
