"""Route a command, or a pipeline of commands, to a transport.

A single :py:class:`~redicmd.sansio.events.Command` takes one ``send_one``
round trip and its reply is returned as-is. A
:py:class:`~redicmd.sansio.events.PipelinedCommands` (or any iterable of
commands) takes one ``send_many`` round trip and returns one reply per command,
in submission order. Error replies sit in the failing command's slot. They are
never raised here, so the remaining replies are always delivered.

Errors raised by the transport itself propagate unchanged.
"""

from __future__ import annotations

import logging
from typing import Iterable, Union

from redicmd.sansio import events, exceptions
from redicmd.sansio.types import ReplyT

__all__ = ("aexecute", "as_request", "execute")

logger = logging.getLogger(__name__)

RequestT = Union[events.Command, events.PipelinedCommands, Iterable[events.Command]]


def as_request(
    request: RequestT,
) -> events.Command | events.PipelinedCommands:
    """Resolve the caller's request into one of the two tagged variants.

    Raises:
        :py:class:`~redicmd.sansio.exceptions.ArgumentShapeError` if
        ``request`` is neither a command nor a collection of commands.
    """
    if isinstance(request, (events.Command, events.PipelinedCommands)):
        return request
    if isinstance(request, (str, bytes, bytearray, memoryview)):
        raise exceptions.ArgumentShapeError(
            f"Expected a Command or a collection of Commands, got {request!r}."
        )
    return events.PipelinedCommands(commands=request)


def execute(transport, request: RequestT) -> ReplyT | list[ReplyT]:
    """Send ``request`` over ``transport`` in exactly one round trip.

    Args:
        transport: A :py:class:`~redicmd.io.base.Transport`.
        request: A single command, or a pipeline of commands.

    Returns:
        The reply to a single command, or a list with one reply per pipelined
        command.
    """
    request = as_request(request)
    if isinstance(request, events.Command):
        logger.debug("Sending command %r.", request.command)
        return transport.send_one(request.tokens)
    logger.debug("Sending a pipeline of %d command(s).", len(request))
    replies = transport.send_many(request.tokens)
    return _check_replies(request, replies)


async def aexecute(transport, request: RequestT) -> ReplyT | list[ReplyT]:
    """Like :py:func:`execute`, over an :py:class:`~redicmd.io.base.AsyncTransport`."""
    request = as_request(request)
    if isinstance(request, events.Command):
        logger.debug("Sending command %r.", request.command)
        return await transport.send_one(request.tokens)
    logger.debug("Sending a pipeline of %d command(s).", len(request))
    replies = await transport.send_many(request.tokens)
    return _check_replies(request, replies)


def _check_replies(
    request: events.PipelinedCommands, replies: Iterable[ReplyT]
) -> list[ReplyT]:
    replies = list(replies)
    if len(replies) != len(request):
        raise exceptions.ProtocolError(
            f"Wrong number of replies from pipeline execution: "
            f"sent {len(request):,} command(s), got {len(replies):,} replies."
        )
    return replies
