from __future__ import annotations

import logging
from typing import Sequence

import redis
import redis.exceptions
from redis.retry import Retry

from redicmd.io import base
from redicmd.io.base import NO_RECONNECT, AddressInfo, ReconnectPolicyT
from redicmd.sansio.types import ReplyT, TokensT

logger = logging.getLogger(__name__)


class RedisTransport:
    """A blocking transport over a :py:class:`redis.Redis` client.

    redis-py owns the socket, the RESP encoding and reconnects. Its per-command
    reply parsing is switched off, so replies come back exactly as the server
    sent them (``None`` for absent values, error replies as
    :py:class:`~redicmd.sansio.exceptions.ServerReplyError` values).
    """

    __slots__ = ("client", "address_info")

    def __init__(self, client: redis.Redis, *, address_info: AddressInfo | None = None):
        self.client = client
        self.address_info = address_info or AddressInfo()
        client.response_callbacks.clear()

    @classmethod
    def open(
        cls,
        host: str = "127.0.0.1",
        port: int = 6379,
        database: int = 0,
        password: str | None = "",
        reconnect: ReconnectPolicyT = NO_RECONNECT,
        *,
        username: str | None = None,
        client_info: base.ClientInfo | None = None,
        socket_info: base.SocketInfo | None = None,
    ) -> RedisTransport:
        """Connect to the Redis server at ``host:port`` and select ``database``.

        Raises:
            :py:class:`~redicmd.sansio.exceptions.RedisConnectionError` if the
            server can't be reached or rejects the credentials.
        """
        address_info = AddressInfo(
            host=host, port=port, db=database, password=password, username=username
        )
        client = redis.Redis(
            **base.redis_kwargs(
                address_info,
                client_info or base.ClientInfo(),
                socket_info or base.SocketInfo(),
            ),
            **base.retry_kwargs(reconnect, Retry),
        )
        transport = cls(client, address_info=address_info)
        transport.connect()
        return transport

    def connect(self):
        """Check the connection with a PING, so bad addresses fail early."""
        address = self.address_info
        try:
            self.client.execute_command("PING")
        except redis.exceptions.RedisError as err:
            logger.warning(
                "Could not connect to %s:%s: %s", address.host, address.port, err
            )
            self.client.close()
            raise base.connection_error(address, err) from err
        logger.debug("Connected to %s:%s, db %s.", address.host, address.port, address.db)

    def send_one(self, tokens: TokensT) -> ReplyT:
        try:
            return self.client.execute_command(*tokens)
        except base.REPLY_ERRORS as err:
            return base.reply_error(err)
        except redis.exceptions.RedisError as err:
            raise base.transport_error(err) from err

    def send_many(self, commands: Sequence[TokensT]) -> list[ReplyT]:
        with self.client.pipeline(transaction=False) as pipe:
            # Queued as-is, WATCH included, so the batch is a single round trip.
            for tokens in commands:
                pipe.pipeline_execute_command(*tokens)
            try:
                replies = pipe.execute(raise_on_error=False)
            except redis.exceptions.RedisError as err:
                raise base.transport_error(err) from err
        return [
            base.reply_error(reply) if base.is_reply_error(reply) else reply
            for reply in replies
        ]

    def close(self):
        self.client.close()
        logger.debug(
            "Closed connection to %s:%s.", self.address_info.host, self.address_info.port
        )

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
