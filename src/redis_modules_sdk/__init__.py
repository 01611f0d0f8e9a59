"""Public surface for the Redis modules SDK."""

from .errors import CommandError, ConnectionError, RedisModuleError
from .formatter import param_to_string
from .logger import BoundLogger, LogLevel, create_logger, log
from .module import ModuleOptions, RedisModule
from .parser import is_only_two_dimensional_array, normalize_response, reduce_array_dimension
from .transport import ClusterTransport, RedisTransport, Transport
from .types import CommandData, ExecuteResult
from .version import __version__

__all__ = [
    "__version__",
    "BoundLogger",
    "ClusterTransport",
    "CommandData",
    "CommandError",
    "ConnectionError",
    "ExecuteResult",
    "LogLevel",
    "ModuleOptions",
    "RedisModule",
    "RedisModuleError",
    "RedisTransport",
    "Transport",
    "create_logger",
    "is_only_two_dimensional_array",
    "log",
    "normalize_response",
    "param_to_string",
    "reduce_array_dimension",
]
