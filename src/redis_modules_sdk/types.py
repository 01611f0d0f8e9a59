"""Shared typing helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass
class CommandData:
    """A single command invocation: the command name and its ordered arguments."""

    command: str
    args: list[Any] = field(default_factory=list)

    @property
    def verb(self) -> str:
        return self.command.split(" ")[0]


@dataclass
class ExecuteResult(Generic[T]):
    ok: bool
    data: T | None = None
    error: Exception | None = None


__all__ = ["CommandData", "ExecuteResult"]
