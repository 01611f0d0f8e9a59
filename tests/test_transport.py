import asyncio

import pytest
import redis.exceptions
from redis.asyncio.cluster import ClusterNode

from redis_modules_sdk import CommandError, ConnectionError
from redis_modules_sdk.transport import ClusterTransport, RedisTransport
from redis_modules_sdk.transport.base import command_tokens, translate_error
from redis_modules_sdk.transport.cluster import to_cluster_node


class FakeDriver:
    def __init__(self, response=None, *, error: Exception | None = None) -> None:
        self.response = response
        self.error = error
        self.executed: list[tuple] = []
        self.closed = False

    async def execute_command(self, *args):
        self.executed.append(args)
        if self.error is not None:
            raise self.error
        return self.response

    async def aclose(self) -> None:
        self.closed = True


def test_command_is_split_into_tokens() -> None:
    assert command_tokens("FT.SEARCH", ["idx", "*"]) == ["FT.SEARCH", "idx", "*"]
    assert command_tokens("CLIENT  LIST", []) == ["CLIENT", "LIST"]


def test_single_transport_forwards_to_driver() -> None:
    driver = FakeDriver(["a", "1"])
    transport = RedisTransport(client=driver)
    assert asyncio.run(transport.call("TS.GET", ["key"])) == ["a", "1"]
    assert driver.executed == [("TS.GET", "key")]


def test_cluster_transport_forwards_to_driver() -> None:
    driver = FakeDriver("OK")
    transport = ClusterTransport([("127.0.0.1", 7000)], client=driver)
    assert transport.kind == "cluster"
    assert asyncio.run(transport.call("BF.ADD", ["f", "x"])) == "OK"
    assert driver.executed == [("BF.ADD", "f", "x")]


def test_driver_errors_are_translated() -> None:
    transport = RedisTransport(client=FakeDriver(error=redis.exceptions.ResponseError("WRONGTYPE")))
    with pytest.raises(CommandError, match="WRONGTYPE"):
        asyncio.run(transport.call("JSON.GET", ["k"]))

    transport = RedisTransport(client=FakeDriver(error=redis.exceptions.ConnectionError("refused")))
    with pytest.raises(ConnectionError, match="refused"):
        asyncio.run(transport.call("PING", []))


def test_translate_error_keeps_sdk_errors() -> None:
    original = ConnectionError("down")
    assert translate_error(original) is original
    assert isinstance(translate_error(redis.exceptions.TimeoutError("slow")), ConnectionError)
    assert isinstance(translate_error(ValueError("odd")), CommandError)


def test_quit_only_closes_owned_clients() -> None:
    driver = FakeDriver()
    asyncio.run(RedisTransport(client=driver).quit())
    assert driver.closed is False


def test_single_transport_decodes_responses_by_default() -> None:
    transport = RedisTransport({"host": "localhost", "port": 6380})
    kwargs = transport.client.connection_pool.connection_kwargs
    assert kwargs["decode_responses"] is True
    assert kwargs["port"] == 6380


def test_cluster_node_specs() -> None:
    node = ClusterNode("10.0.0.1", 7000)
    assert to_cluster_node(node) is node
    assert to_cluster_node(("10.0.0.2", "7001")).port == 7001
    mapped = to_cluster_node({"host": "10.0.0.3", "port": 7002})
    assert (mapped.host, mapped.port) == ("10.0.0.3", 7002)


def test_cluster_requires_nodes() -> None:
    with pytest.raises(ValueError):
        ClusterTransport([])
