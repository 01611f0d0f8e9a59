"""End-to-end scenario against a Redis server with the RedisBloom module loaded."""

from __future__ import annotations

import asyncio
import os
from typing import Any

from redis_modules_sdk import CommandData, RedisModule

REDIS_HOST = os.getenv("REDIS_DEMO_HOST", "localhost")
REDIS_PORT = int(os.getenv("REDIS_DEMO_PORT", "6379"))


class RedisBloom(RedisModule):
    def __init__(self, options: dict[str, Any], **module_options: Any) -> None:
        super().__init__("RedisBloom", options, module_options)

    async def reserve(self, key: str, error_rate: float, capacity: int) -> Any:
        return await self.send_command(CommandData("BF.RESERVE", [key, error_rate, capacity]))

    async def add(self, key: str, item: str) -> Any:
        return await self.send_command(CommandData("BF.ADD", [key, item]))

    async def exists(self, key: str, item: str) -> Any:
        return await self.send_command(CommandData("BF.EXISTS", [key, item]))

    async def info(self, key: str) -> Any:
        response = await self.send_command(CommandData("BF.INFO", [key]))
        return self.handle_response(response)


def log_section(title: str) -> None:
    print("\n" + "=" * 80)
    print(title)
    print("=" * 80)


async def main() -> None:
    async with RedisBloom({"host": REDIS_HOST, "port": REDIS_PORT}, show_debug_logs=True) as bloom:
        log_section("Reserve and fill a filter")
        await bloom.send_command(CommandData("DEL", ["demo:bloom"]))
        print(await bloom.reserve("demo:bloom", 0.01, 1000))
        for item in ("alpha", "beta", "gamma"):
            print(item, await bloom.add("demo:bloom", item))

        log_section("Membership")
        print("beta", await bloom.exists("demo:bloom", "beta"))
        print("delta", await bloom.exists("demo:bloom", "delta"))

        log_section("Normalized BF.INFO")
        print(await bloom.info("demo:bloom"))

    quiet = RedisBloom({"host": REDIS_HOST, "port": REDIS_PORT}, is_handle_error=False)
    async with quiet:
        log_section("Error returned as a string")
        print(await quiet.send_command(CommandData("BF.NOPE", [])))


if __name__ == "__main__":
    asyncio.run(main())
