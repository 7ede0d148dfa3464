from __future__ import annotations

import socket
from typing import Mapping, Protocol, Sequence, Union

import attr
import redis.exceptions
from redis.backoff import ConstantBackoff, NoBackoff

from redicmd.sansio import exceptions
from redicmd.sansio.callbacks import errors
from redicmd.sansio.types import ReplyT, TokensT


class Transport(Protocol):
    """The interface the dispatcher needs from a live Redis connection.

    Implementations own the socket, the wire encoding and any reconnects.
    Error replies are returned as
    :py:class:`~redicmd.sansio.exceptions.ServerReplyError` values, while
    connection problems are raised as
    :py:class:`~redicmd.sansio.exceptions.TransportError`.
    """

    def send_one(self, tokens: TokensT) -> ReplyT:
        """Send one command and return its reply."""
        ...

    def send_many(self, commands: Sequence[TokensT]) -> list[ReplyT]:
        """Send all ``commands`` in one round trip, replies in the same order."""
        ...

    def close(self) -> None:
        ...


class AsyncTransport(Protocol):
    async def send_one(self, tokens: TokensT) -> ReplyT:
        ...

    async def send_many(self, commands: Sequence[TokensT]) -> list[ReplyT]:
        ...

    async def close(self) -> None:
        ...


@attr.s(kw_only=True, slots=True, auto_attribs=True)
class AddressInfo:
    host: str = "127.0.0.1"
    port: int = 6379
    db: int = 0
    password: str | None = attr.field(default=None, converter=lambda v: v or None)
    username: str | None = None


@attr.s(kw_only=True, slots=True, auto_attribs=True)
class ClientInfo:
    name: str | None = None
    encoding: str = "utf-8"
    encoding_errors: str = "strict"
    decode_responses: bool = False
    resp_version: int = 2
    """The RESP version to speak. Replies keep the RESP2 shapes unless this is changed."""


@attr.s(kw_only=True, slots=True, auto_attribs=True)
class SocketInfo:
    timeout: float | None = attr.field(factory=socket.getdefaulttimeout)
    connect_timeout: float | None = attr.field(factory=socket.getdefaulttimeout)
    keepalive: bool = False
    keepalive_options: Mapping[int, int | bytes] | None = None


@attr.frozen
class NoReconnect:
    """Fail calls once the connection is lost, without trying to reconnect."""


@attr.frozen
class RetryAfter:
    """Reconnect after a constant ``seconds`` delay when the connection drops.

    ``attempts`` caps the number of retries per call, ``None`` never gives up.
    """

    seconds: float = attr.field(validator=attr.validators.ge(0))
    attempts: int | None = None


NO_RECONNECT = NoReconnect()

ReconnectPolicyT = Union[NoReconnect, RetryAfter]


def redis_kwargs(
    address_info: AddressInfo,
    client_info: ClientInfo,
    socket_info: SocketInfo,
) -> dict:
    """Keyword arguments for a redis-py client built from our config objects."""
    return dict(
        host=address_info.host,
        port=address_info.port,
        db=address_info.db,
        username=address_info.username,
        password=address_info.password,
        client_name=client_info.name,
        encoding=client_info.encoding,
        encoding_errors=client_info.encoding_errors,
        decode_responses=client_info.decode_responses,
        protocol=client_info.resp_version,
        socket_timeout=socket_info.timeout,
        socket_connect_timeout=socket_info.connect_timeout,
        socket_keepalive=socket_info.keepalive,
        socket_keepalive_options=socket_info.keepalive_options,
    )


def retry_kwargs(reconnect: ReconnectPolicyT, retry_cls: type) -> dict:
    """Map a reconnect policy onto redis-py's ``retry`` and ``retry_on_error``.

    ``retry_cls`` is the sync or asyncio flavour of :py:class:`redis.retry.Retry`.
    """
    if isinstance(reconnect, RetryAfter):
        retries = -1 if reconnect.attempts is None else reconnect.attempts
        return dict(
            retry=retry_cls(ConstantBackoff(reconnect.seconds), retries),
            retry_on_error=[
                redis.exceptions.ConnectionError,
                redis.exceptions.TimeoutError,
            ],
        )
    if isinstance(reconnect, NoReconnect):
        return dict(retry=retry_cls(NoBackoff(), 0), retry_on_error=[])
    raise exceptions.ArgumentShapeError(
        f"Unknown reconnect policy: {reconnect!r}. "
        "Use NO_RECONNECT or RetryAfter(seconds)."
    )


def reply_error(err: redis.exceptions.RedisError) -> exceptions.ServerReplyError:
    """Turn a redis-py error reply into the error value handed to callers.

    redis-py strips the generic ``ERR`` code from messages, other codes are kept.
    """
    for exctype, ours in _REPLY_ERRORS.items():
        if isinstance(err, exctype):
            return ours(str(err))
    return errors.parse_error(str(err))


def transport_error(err: redis.exceptions.RedisError) -> exceptions.TransportError:
    """Turn a redis-py connection-level error into a transport error."""
    for exctype, ours in _TRANSPORT_ERRORS.items():
        if isinstance(err, exctype):
            return ours(str(err))
    return exceptions.TransportError(str(err))


def connection_error(
    address_info: AddressInfo, exception: BaseException
) -> exceptions.RedisConnectionError:
    message = (
        f"{exception.__class__.__name__} while connecting to "
        f"{address_info.host}:{address_info.port}. {exception}"
    )
    if isinstance(exception, redis.exceptions.AuthenticationError):
        return exceptions.AuthenticationError(message)
    return exceptions.RedisConnectionError(message)


def is_reply_error(reply: ReplyT) -> bool:
    return isinstance(reply, redis.exceptions.ResponseError)


_REPLY_ERRORS = {
    redis.exceptions.NoScriptError: exceptions.NoScriptError,
    redis.exceptions.ReadOnlyError: exceptions.ReadOnlyError,
    redis.exceptions.ExecAbortError: exceptions.ExecAbortError,
    redis.exceptions.NoPermissionError: exceptions.NoPermissionError,
    redis.exceptions.BusyLoadingError: exceptions.BusyLoadingError,
}
# redis-py raises LOADING as a ConnectionError. For a single command it is still
# the server's reply, a pipeline is aborted by it.
REPLY_ERRORS = (redis.exceptions.ResponseError, redis.exceptions.BusyLoadingError)
# Order matters: AuthenticationError is a ConnectionError.
_TRANSPORT_ERRORS = {
    redis.exceptions.AuthenticationError: exceptions.AuthenticationError,
    redis.exceptions.ConnectionError: exceptions.RedisConnectionError,
    redis.exceptions.TimeoutError: exceptions.RedisTimeoutError,
}
