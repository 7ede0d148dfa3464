from __future__ import annotations

import pytest

from redicmd import AsyncIORedis, CommandBuilder, SyncIORedis
from redicmd.sansio.callbacks.errors import parse_error
from redicmd.sansio.exceptions import RedisConnectionError


class FakeTransport:
    """An in-memory stand-in for a Redis connection.

    Emulates a handful of string and list commands over a dict and records
    every round trip in ``calls``. Error texts read like redis-py hands them
    over, without the generic ``ERR`` code.
    """

    def __init__(self):
        self.data: dict = {}
        self.calls: list = []
        self.closed = False

    def send_one(self, tokens):
        self.calls.append(("send_one", tokens))
        return self.reply(tokens)

    def send_many(self, commands):
        commands = list(commands)
        self.calls.append(("send_many", commands))
        return [self.reply(tokens) for tokens in commands]

    def close(self):
        self.closed = True

    def reply(self, tokens):
        name, *args = tokens
        handler = getattr(self, f"_cmd_{name.lower()}", None)
        if handler is None:
            return parse_error(f"unknown command '{name}'")
        try:
            return handler(*args)
        except TypeError:
            return parse_error(
                f"wrong number of arguments for '{name.lower()}' command"
            )

    def _cmd_get(self, key):
        value = self.data.get(key)
        if isinstance(value, list):
            return self._wrongtype()
        return value

    def _cmd_set(self, key, value):
        self.data[key] = value
        return b"OK"

    def _cmd_del(self, *keys):
        return sum(self.data.pop(key, None) is not None for key in keys)

    def _cmd_incr(self, key):
        value = self.data.get(key, "0")
        if isinstance(value, list):
            return self._wrongtype()
        try:
            value = int(value) + 1
        except ValueError:
            return parse_error("value is not an integer or out of range")
        self.data[key] = str(value)
        return value

    def _cmd_rpush(self, key, *values):
        current = self.data.setdefault(key, [])
        if not isinstance(current, list):
            return self._wrongtype()
        current.extend(values)
        return len(current)

    def _cmd_lrange(self, key, start, end):
        current = self.data.get(key, [])
        if not isinstance(current, list):
            return self._wrongtype()
        start, end = int(start), int(end)
        end = len(current) if end == -1 else end + 1
        return current[start:end]

    @staticmethod
    def _wrongtype():
        return parse_error(
            "WRONGTYPE Operation against a key holding the wrong kind of value"
        )


class AsyncFakeTransport:
    def __init__(self):
        self.sync = FakeTransport()
        self.closed = False

    @property
    def calls(self):
        return self.sync.calls

    async def send_one(self, tokens):
        return self.sync.send_one(tokens)

    async def send_many(self, commands):
        return self.sync.send_many(commands)

    async def close(self):
        self.closed = True


class BrokenTransport:
    """Fails every round trip like a dropped connection would."""

    def __init__(self):
        self.calls = 0

    def send_one(self, tokens):
        self.calls += 1
        raise RedisConnectionError("Connection closed by server.")

    def send_many(self, commands):
        self.calls += 1
        raise RedisConnectionError("Connection closed by server.")


class MiscountingTransport(FakeTransport):
    """Drops the last reply of every pipeline."""

    def send_many(self, commands):
        return super().send_many(commands)[:-1]


@pytest.fixture
def commands():
    return CommandBuilder()


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def async_transport():
    return AsyncFakeTransport()


@pytest.fixture
def broken_transport():
    return BrokenTransport()


@pytest.fixture
def miscounting_transport():
    return MiscountingTransport()


@pytest.fixture
def client(transport):
    return SyncIORedis(transport)


@pytest.fixture
def async_client(async_transport):
    return AsyncIORedis(async_transport)
