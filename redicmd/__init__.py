"""Build Redis commands from plain Python values and dispatch them singly or
pipelined over a redis-py transport.

    >>> from redicmd import RedisTransport, commands, execute
    >>> transport = RedisTransport.open()
    >>> execute(transport, commands.set("k", "v"))
    b'OK'
    >>> execute(transport, [commands.get("k"), commands.delete("k")])
    [b'v', 1]
"""

from __future__ import annotations

from redicmd.client.aio import AsyncIOPipeline, AsyncIORedis
from redicmd.client.sio import SyncIOPipeline, SyncIORedis
from redicmd.io.aio import AsyncRedisTransport
from redicmd.io.base import NO_RECONNECT, NoReconnect, ReconnectPolicyT, RetryAfter
from redicmd.io.sio import RedisTransport
from redicmd.sansio.commands.builder import CommandBuilder
from redicmd.sansio.dispatcher import aexecute, execute
from redicmd.sansio.events import Command, PipelinedCommands
from redicmd.sansio.exceptions import (
    ArgumentShapeError,
    ProtocolError,
    RedisConnectionError,
    RedisError,
    RedisTimeoutError,
    ServerReplyError,
    TransportError,
)

__all__ = (
    "NO_RECONNECT",
    "ArgumentShapeError",
    "AsyncIOPipeline",
    "AsyncIORedis",
    "AsyncRedisTransport",
    "Command",
    "CommandBuilder",
    "NoReconnect",
    "PipelinedCommands",
    "ProtocolError",
    "RedisConnectionError",
    "RedisError",
    "RedisTimeoutError",
    "RedisTransport",
    "RetryAfter",
    "ServerReplyError",
    "SyncIOPipeline",
    "SyncIORedis",
    "TransportError",
    "aconnect",
    "aexecute",
    "commands",
    "connect",
    "execute",
    "start",
)

commands = CommandBuilder()
"""Module-level builder: ``commands.set("k", "v")`` returns a Command."""


def connect(
    host: str = "127.0.0.1",
    port: int = 6379,
    database: int = 0,
    password: str | None = "",
    reconnect: ReconnectPolicyT = NO_RECONNECT,
    **options,
) -> SyncIORedis:
    """Open a :py:class:`RedisTransport` and wrap it in a blocking client."""
    return SyncIORedis(
        RedisTransport.open(host, port, database, password, reconnect, **options)
    )


async def aconnect(
    host: str = "127.0.0.1",
    port: int = 6379,
    database: int = 0,
    password: str | None = "",
    reconnect: ReconnectPolicyT = NO_RECONNECT,
    **options,
) -> AsyncIORedis:
    """Open an :py:class:`AsyncRedisTransport` and wrap it in an asyncio client."""
    transport = await AsyncRedisTransport.open(
        host, port, database, password, reconnect, **options
    )
    return AsyncIORedis(transport)


def start() -> SyncIORedis:
    """Connect to a local server on database 1, without reconnecting."""
    return connect("127.0.0.1", 6379, 1, "", NO_RECONNECT)
