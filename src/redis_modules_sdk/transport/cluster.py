"""Cluster transport routing commands through redis.asyncio's RedisCluster."""

from __future__ import annotations

from typing import Any, Mapping, Sequence, Tuple, Union

import redis.exceptions
from redis.asyncio.cluster import ClusterNode, RedisCluster

from ..logger import BoundLogger, create_logger
from .base import Transport, command_tokens, translate_error

NodeSpec = Union[ClusterNode, Tuple[str, int], Mapping[str, Any]]


def to_cluster_node(node: NodeSpec) -> ClusterNode:
    """Accept a ClusterNode, a ``(host, port)`` pair or a ``{"host", "port"}`` mapping."""
    if isinstance(node, ClusterNode):
        return node
    if isinstance(node, Mapping):
        return ClusterNode(node.get("host", "localhost"), int(node.get("port", 6379)))
    host, port = node
    return ClusterNode(host, int(port))


class ClusterTransport:
    kind: Transport.Kind = "cluster"

    def __init__(
        self,
        nodes: Sequence[NodeSpec],
        options: Mapping[str, Any] | None = None,
        *,
        client: RedisCluster | None = None,
        logger: BoundLogger | None = None,
    ) -> None:
        self._nodes = [to_cluster_node(node) for node in nodes]
        self._options = {"decode_responses": True, **dict(options or {})}
        if client is None and not self._nodes:
            raise ValueError("At least one cluster node is required")
        self._client = client or RedisCluster(startup_nodes=self._nodes, **self._options)
        self._owns_client = client is None
        self._logger = (logger or create_logger()).child("cluster")

    @property
    def client(self) -> RedisCluster:
        return self._client

    @property
    def nodes(self) -> list[ClusterNode]:
        return list(self._nodes)

    async def call(self, command: str, args: Sequence[Any]) -> Any:
        tokens = command_tokens(command, args)
        self._logger.trace("CLUSTER -> %s", tokens)
        try:
            return await self._client.execute_command(*tokens)
        except redis.exceptions.RedisError as exc:
            raise translate_error(exc) from exc

    async def quit(self) -> None:
        if self._owns_client:
            self._logger.debug("Closing cluster connection (%d startup nodes)", len(self._nodes))
            await self._client.aclose()


__all__ = ["ClusterTransport", "NodeSpec", "to_cluster_node"]
