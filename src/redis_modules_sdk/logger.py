"""Logging wrapper shared by modules and transports."""

from __future__ import annotations

import logging
from typing import Any, Callable, Literal

from .errors import RedisModuleError

LogLevel = Literal["trace", "debug", "info", "warn", "error"]

TRACE_LEVEL = 5
logging.addLevelName(TRACE_LEVEL, "TRACE")


LOG_LEVEL_PRIORITY: dict[LogLevel, int] = {
    "trace": 0,
    "debug": 1,
    "info": 2,
    "warn": 3,
    "error": 4,
}


class BoundLogger:
    """Wraps a logging.Logger (or duck-typed object) with the SDK's log levels."""

    def __init__(
        self,
        logger: Any | None = None,
        *,
        level: LogLevel = "info",
    ) -> None:
        self._logger = logger or _default_logger()
        self._level = level

    @property
    def level(self) -> LogLevel:
        return self._level

    def trace(self, msg: str, *args: Any, **kwargs: Any) -> None:
        if self._enabled("trace"):
            self._log(TRACE_LEVEL, msg, *args, **kwargs)

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        if self._enabled("debug"):
            self._log(logging.DEBUG, msg, *args, **kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        if self._enabled("info"):
            self._log(logging.INFO, msg, *args, **kwargs)

    def warn(self, msg: str, *args: Any, **kwargs: Any) -> None:
        if self._enabled("warn"):
            self._log(logging.WARNING, msg, *args, **kwargs)

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        if self._enabled("error"):
            self._log(logging.ERROR, msg, *args, **kwargs)

    def child(self, name: str) -> "BoundLogger":
        """Create a child logger anchored to the same Python logger."""
        if isinstance(self._logger, logging.Logger):
            base = self._logger.getChild(name)
        else:
            base = self._logger
        return BoundLogger(base, level=self._level)

    def _enabled(self, level: LogLevel) -> bool:
        return LOG_LEVEL_PRIORITY[level] >= LOG_LEVEL_PRIORITY[self._level]

    def _log(self, level: int, msg: str, *args: Any, **kwargs: Any) -> None:
        try:
            if hasattr(self._logger, "log"):
                self._logger.log(level, msg, *args, **kwargs)
                return

            # Fall back to direct method invocation (duck typing)
            method_map: dict[int, Callable[..., Any]] = {
                TRACE_LEVEL: getattr(self._logger, "trace", None),
                logging.DEBUG: getattr(self._logger, "debug", None),
                logging.INFO: getattr(self._logger, "info", None),
                logging.WARNING: getattr(self._logger, "warn", None),
                logging.ERROR: getattr(self._logger, "error", None),
            }
            handler = method_map.get(level)
            if handler:
                handler(msg, *args, **kwargs)
        except Exception:
            # Never let logging failures bubble up into module code
            pass


def _default_logger() -> logging.Logger:
    logger = logging.getLogger("redis_modules_sdk")
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s %(levelname)s %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    return logger


def create_logger(
    *,
    logger: Any | None = None,
    level: LogLevel = "info",
    show_debug_logs: bool = False,
) -> BoundLogger:
    """Build a BoundLogger; ``show_debug_logs`` lowers the level to at least debug."""
    if show_debug_logs and LOG_LEVEL_PRIORITY[level] > LOG_LEVEL_PRIORITY["debug"]:
        level = "debug"
    if isinstance(logger, BoundLogger):
        if logger.level == level:
            return logger
        return BoundLogger(logger._logger, level=level)
    return BoundLogger(logger, level=level)


def log(
    level: LogLevel,
    msg: str,
    *,
    show_debug_logs: bool = False,
    logger: BoundLogger | None = None,
) -> None:
    """Log ``msg`` at ``level``.

    Debug and trace messages are only emitted when ``show_debug_logs`` is set.
    An ``error`` level message raises RedisModuleError instead of being logged.
    """
    if level == "error":
        raise RedisModuleError(msg)
    if level in ("debug", "trace"):
        if not show_debug_logs:
            return
        bound = create_logger(logger=logger, level=level)
        getattr(bound, level)(msg)
        return
    bound = logger or create_logger()
    getattr(bound, level)(msg)


__all__ = ["BoundLogger", "LogLevel", "create_logger", "log"]
