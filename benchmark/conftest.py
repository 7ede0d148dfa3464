from __future__ import annotations

import asyncio
from typing import Sequence

import pytest

from redicmd import AsyncIORedis, SyncIORedis, aexecute, commands
from redicmd.sansio.types import ReplyT, TokensT


class MemoryTransport:
    """Just enough of a Redis server for GET and SETEX, kept in a dict."""

    def __init__(self):
        self.data: dict[str, bytes] = {}

    def send_one(self, tokens: TokensT) -> ReplyT:
        name, key, *args = tokens
        if name == "GET":
            return self.data.get(key)
        # SETEX key seconds value
        self.data[key] = str(args[-1]).encode()
        return b"OK"

    def send_many(self, commands: Sequence[TokensT]) -> list[ReplyT]:
        return [self.send_one(tokens) for tokens in commands]

    def close(self):
        self.data.clear()


class AsyncMemoryTransport(MemoryTransport):
    async def send_one(self, tokens: TokensT) -> ReplyT:
        return MemoryTransport.send_one(self, tokens)

    async def send_many(self, commands: Sequence[TokensT]) -> list[ReplyT]:
        return MemoryTransport.send_many(self, commands)

    async def close(self):
        self.data.clear()


@pytest.fixture(scope="session")
def loop():
    loop = asyncio.new_event_loop()
    yield loop
    loop.close()


@pytest.fixture
def benches():
    return {
        "redicmd-builder": (MemoryTransport(), bench_builder),
        "redicmd-syncio": (SyncIORedis(MemoryTransport()), bench_sio),
        "redicmd-syncio-pipeline": (SyncIORedis(MemoryTransport()), bench_sio_pipeline),
        "redicmd-asyncio": (AsyncIORedis(AsyncMemoryTransport()), bench_aio),
        "redicmd-asyncio-batch": (AsyncMemoryTransport(), bench_aio_batch),
    }


@pytest.fixture(
    params=[
        "redicmd-builder",
        "redicmd-syncio",
        "redicmd-syncio-pipeline",
        "redicmd-asyncio",
        "redicmd-asyncio-batch",
    ]
)
def bench_target(request, benches):
    return request.param, benches[request.param]


def bench_builder(r: MemoryTransport, n: int = 1000):
    return [
        (commands.get(f"key:{i}"), commands.setex(f"key:{i}", 600, i))
        for i in range(n)
    ]


def bench_sio(r: SyncIORedis, n: int = 1000):
    return [sio_task(i, r) for i in range(n)]


def bench_sio_pipeline(r: SyncIORedis, n: int = 1000):
    with r.pipeline() as pipe:
        for i in range(n):
            pipe.get(f"key:{i}")
        values = pipe.execute()
        for i, v in enumerate(values):
            pipe.setex(f"key:{i}", 600, 1 if v is None else int(v) + 1)
        return pipe.execute()


async def bench_aio(r: AsyncIORedis, n: int = 1000):
    tasks = [
        asyncio.create_task(
            aio_task(i, r), name=f"redicmd-{i}"
        ) for i in range(n)
    ]
    return await asyncio.gather(*tasks)


async def bench_aio_batch(r: AsyncMemoryTransport, n: int = 1000):
    values = await aexecute(r, [commands.get(f"key:{i}") for i in range(n)])
    return await aexecute(
        r,
        [
            commands.setex(f"key:{i}", 600, 1 if v is None else int(v) + 1)
            for i, v in enumerate(values)
        ],
    )


async def aio_task(i: int, r: AsyncIORedis) -> int:
    key = f"key:{i}"
    v = await r.get(key)
    new = 1 if v is None else int(v) + 1
    await r.setex(key, 600, new)
    return v


def sio_task(i: int, r: SyncIORedis) -> int:
    key = f"key:{i}"
    v = r.get(key)
    new = 1 if v is None else int(v) + 1
    r.setex(key, 600, new)
    return v
