"""Transport implementations exposed to users."""

from .base import Transport, TransportKind
from .cluster import ClusterTransport
from .single import RedisTransport

__all__ = [
    "ClusterTransport",
    "RedisTransport",
    "Transport",
    "TransportKind",
]
