from __future__ import annotations

import logging
from unittest import mock

import pytest
import redis.exceptions
from redis.backoff import ConstantBackoff, NoBackoff
from redis.retry import Retry

from redicmd import NO_RECONNECT, RetryAfter, connect, start
from redicmd.io import base
from redicmd.io.aio import AsyncRedisTransport
from redicmd.io.sio import RedisTransport
from redicmd.sansio import exceptions


@pytest.fixture
def redis_client():
    client = mock.MagicMock(name="redis.Redis")
    pipe = mock.MagicMock(name="Pipeline")
    client.pipeline.return_value.__enter__.return_value = pipe
    return client


@pytest.fixture
def async_redis_client():
    client = mock.MagicMock(name="redis.asyncio.Redis")
    client.execute_command = mock.AsyncMock()
    client.aclose = mock.AsyncMock()
    pipe = mock.MagicMock(name="Pipeline")
    pipe.execute = mock.AsyncMock()
    client.pipeline.return_value.__aenter__.return_value = pipe
    return client


class TestRedisTransport:
    def test_reply_parsing_is_disabled(self, redis_client):
        RedisTransport(redis_client)
        redis_client.response_callbacks.clear.assert_called_once_with()

    def test_send_one(self, redis_client):
        redis_client.execute_command.return_value = b"OK"
        transport = RedisTransport(redis_client)
        assert transport.send_one(("SET", "k", "v")) == b"OK"
        redis_client.execute_command.assert_called_once_with("SET", "k", "v")

    def test_send_one_returns_error_replies(self, redis_client):
        redis_client.execute_command.side_effect = redis.exceptions.ResponseError(
            "WRONGTYPE Operation against a key holding the wrong kind of value"
        )
        reply = RedisTransport(redis_client).send_one(("GET", "l"))
        assert isinstance(reply, exceptions.WrongTypeError)

    def test_send_one_maps_known_error_classes(self, redis_client):
        redis_client.execute_command.side_effect = redis.exceptions.NoScriptError(
            "No matching script."
        )
        reply = RedisTransport(redis_client).send_one(("EVALSHA", "abc", "0"))
        assert isinstance(reply, exceptions.NoScriptError)
        assert reply.message == "No matching script."

    def test_send_one_returns_loading_replies(self, redis_client):
        redis_client.execute_command.side_effect = redis.exceptions.BusyLoadingError(
            "Redis is loading the dataset in memory"
        )
        reply = RedisTransport(redis_client).send_one(("GET", "k"))
        assert isinstance(reply, exceptions.BusyLoadingError)
        assert reply.message == "Redis is loading the dataset in memory"

    def test_send_many_fails_while_loading(self, redis_client):
        pipe = redis_client.pipeline.return_value.__enter__.return_value
        pipe.execute.side_effect = redis.exceptions.BusyLoadingError("loading")
        with pytest.raises(exceptions.RedisConnectionError):
            RedisTransport(redis_client).send_many([("GET", "k")])

    @pytest.mark.parametrize(
        "error, expected",
        [
            (redis.exceptions.ConnectionError("gone"), exceptions.RedisConnectionError),
            (redis.exceptions.AuthenticationError("nope"), exceptions.AuthenticationError),
            (redis.exceptions.TimeoutError("slow"), exceptions.RedisTimeoutError),
            (redis.exceptions.DataError("bad"), exceptions.TransportError),
        ],
    )
    def test_send_one_raises_transport_errors(self, redis_client, error, expected):
        redis_client.execute_command.side_effect = error
        with pytest.raises(expected) as info:
            RedisTransport(redis_client).send_one(("GET", "k"))
        assert info.value.__cause__ is error

    def test_send_many(self, redis_client):
        pipe = redis_client.pipeline.return_value.__enter__.return_value
        pipe.execute.return_value = [
            None,
            b"OK",
            redis.exceptions.ResponseError("value is not an integer or out of range"),
            b"v",
        ]
        transport = RedisTransport(redis_client)
        replies = transport.send_many(
            [("GET", "k"), ("SET", "k", "v"), ("INCR", "k"), ("GET", "k")]
        )
        redis_client.pipeline.assert_called_once_with(transaction=False)
        assert pipe.pipeline_execute_command.call_args_list == [
            mock.call("GET", "k"),
            mock.call("SET", "k", "v"),
            mock.call("INCR", "k"),
            mock.call("GET", "k"),
        ]
        pipe.execute.assert_called_once_with(raise_on_error=False)
        assert replies[:2] == [None, b"OK"]
        assert isinstance(replies[2], exceptions.ServerReplyError)
        assert replies[3] == b"v"

    def test_send_many_raises_transport_errors(self, redis_client):
        pipe = redis_client.pipeline.return_value.__enter__.return_value
        pipe.execute.side_effect = redis.exceptions.ConnectionError("gone")
        with pytest.raises(exceptions.RedisConnectionError):
            RedisTransport(redis_client).send_many([("GET", "k")])

    def test_close(self, redis_client):
        with RedisTransport(redis_client):
            pass
        redis_client.close.assert_called_once_with()


class TestOpen:
    @mock.patch("redicmd.io.sio.redis.Redis")
    def test_open_connects_eagerly(self, redis_cls):
        transport = RedisTransport.open("10.0.0.1", 6380, 2, "secret")
        kwargs = redis_cls.call_args.kwargs
        assert kwargs["host"] == "10.0.0.1"
        assert kwargs["port"] == 6380
        assert kwargs["db"] == 2
        assert kwargs["password"] == "secret"
        assert kwargs["retry_on_error"] == []
        assert kwargs["protocol"] == 2
        redis_cls.return_value.execute_command.assert_called_once_with("PING")
        assert transport.address_info.db == 2

    @mock.patch("redicmd.io.sio.redis.Redis")
    def test_open_empty_password_means_none(self, redis_cls):
        RedisTransport.open()
        kwargs = redis_cls.call_args.kwargs
        assert kwargs["password"] is None
        assert (kwargs["host"], kwargs["port"], kwargs["db"]) == ("127.0.0.1", 6379, 0)

    @mock.patch("redicmd.io.sio.redis.Redis")
    def test_open_failure(self, redis_cls, caplog):
        redis_cls.return_value.execute_command.side_effect = (
            redis.exceptions.ConnectionError("Connection refused.")
        )
        with pytest.raises(exceptions.RedisConnectionError, match="127.0.0.1:6379"):
            with caplog.at_level(logging.WARNING, logger="redicmd.io.sio"):
                RedisTransport.open()
        redis_cls.return_value.close.assert_called_once_with()
        assert "Could not connect" in caplog.text

    @mock.patch("redicmd.io.sio.redis.Redis")
    def test_open_bad_credentials(self, redis_cls):
        redis_cls.return_value.execute_command.side_effect = (
            redis.exceptions.AuthenticationError("invalid password")
        )
        with pytest.raises(exceptions.AuthenticationError):
            RedisTransport.open(password="wrong")

    @mock.patch("redicmd.io.sio.redis.Redis")
    def test_connect_and_start(self, redis_cls):
        client = connect(port=6390)
        assert isinstance(client.transport, RedisTransport)
        assert redis_cls.call_args.kwargs["port"] == 6390
        start()
        assert redis_cls.call_args.kwargs["db"] == 1


class TestReconnectPolicy:
    def test_no_reconnect(self):
        kwargs = base.retry_kwargs(NO_RECONNECT, Retry)
        assert isinstance(kwargs["retry"]._backoff, NoBackoff)
        assert kwargs["retry"]._retries == 0
        assert kwargs["retry_on_error"] == []

    def test_retry_after(self):
        kwargs = base.retry_kwargs(RetryAfter(0.5), Retry)
        assert isinstance(kwargs["retry"]._backoff, ConstantBackoff)
        assert kwargs["retry"]._retries == -1
        assert redis.exceptions.ConnectionError in kwargs["retry_on_error"]

    def test_retry_after_attempts(self):
        assert base.retry_kwargs(RetryAfter(1, attempts=3), Retry)["retry"]._retries == 3

    def test_retry_after_rejects_negative_delays(self):
        with pytest.raises(ValueError):
            RetryAfter(-1)

    def test_unknown_policy(self):
        with pytest.raises(exceptions.ArgumentShapeError):
            base.retry_kwargs("sometimes", Retry)


class TestAsyncRedisTransport:
    @pytest.mark.asyncio
    async def test_send_one(self, async_redis_client):
        async_redis_client.execute_command.return_value = b"v"
        transport = AsyncRedisTransport(async_redis_client)
        assert await transport.send_one(("GET", "k")) == b"v"

    @pytest.mark.asyncio
    async def test_send_one_returns_error_replies(self, async_redis_client):
        async_redis_client.execute_command.side_effect = redis.exceptions.ResponseError(
            "unknown command 'NOPE'"
        )
        reply = await AsyncRedisTransport(async_redis_client).send_one(("NOPE",))
        assert isinstance(reply, exceptions.ServerReplyError)

    @pytest.mark.asyncio
    async def test_send_one_raises_transport_errors(self, async_redis_client):
        async_redis_client.execute_command.side_effect = redis.exceptions.TimeoutError()
        with pytest.raises(exceptions.RedisTimeoutError):
            await AsyncRedisTransport(async_redis_client).send_one(("GET", "k"))

    @pytest.mark.asyncio
    async def test_send_many(self, async_redis_client):
        pipe = async_redis_client.pipeline.return_value.__aenter__.return_value
        pipe.execute.return_value = [b"OK", redis.exceptions.ResponseError("boom")]
        replies = await AsyncRedisTransport(async_redis_client).send_many(
            [("SET", "k", "v"), ("INCR", "k")]
        )
        async_redis_client.pipeline.assert_called_once_with(transaction=False)
        pipe.execute.assert_awaited_once_with(raise_on_error=False)
        assert replies[0] == b"OK"
        assert isinstance(replies[1], exceptions.ServerReplyError)

    @pytest.mark.asyncio
    @mock.patch("redicmd.io.aio.redis.asyncio.Redis")
    async def test_open(self, redis_cls):
        redis_cls.return_value.execute_command = mock.AsyncMock(return_value=b"PONG")
        transport = await AsyncRedisTransport.open(database=3)
        assert redis_cls.call_args.kwargs["db"] == 3
        redis_cls.return_value.execute_command.assert_awaited_once_with("PING")
        redis_cls.return_value.aclose = mock.AsyncMock()
        await transport.close()
        redis_cls.return_value.aclose.assert_awaited_once_with()

    @pytest.mark.asyncio
    @mock.patch("redicmd.io.aio.redis.asyncio.Redis")
    async def test_open_failure(self, redis_cls):
        redis_cls.return_value.execute_command = mock.AsyncMock(
            side_effect=redis.exceptions.ConnectionError("refused")
        )
        redis_cls.return_value.aclose = mock.AsyncMock()
        with pytest.raises(exceptions.RedisConnectionError):
            await AsyncRedisTransport.open()
        redis_cls.return_value.aclose.assert_awaited_once_with()
