from __future__ import annotations

from typing import Mapping

from redicmd.sansio.exceptions import (
    BusyLoadingError,
    ExecAbortError,
    NoPermissionError,
    NoScriptError,
    ReadOnlyError,
    ServerReplyError,
    WrongTypeError,
)

__all__ = ("parse_error", "str_if_bytes")


def str_if_bytes(value: str | bytes) -> str:
    return (
        value.decode("utf-8", errors="replace") if isinstance(value, bytes) else value
    )


def parse_error(response: str | bytes) -> ServerReplyError:
    """Parse an error reply into a (returned, not raised) Python exception.

    The leading upper-case word of a Redis error reply is its error code, e.g.
    ``WRONGTYPE Operation against a key holding the wrong kind of value``.
    Known codes map onto a dedicated subclass. The message is kept as the
    transport handed it over. redis-py drops the generic ``ERR`` code, so
    ``ERR unknown command`` arrives as ``unknown command``, while codes such as
    ``WRONGTYPE`` stay in the text.
    """
    decoded: str = str_if_bytes(response)
    error_code = decoded.split(" ", maxsplit=1)[0]
    exctype = EXCEPTION_CLASSES.get(error_code, ServerReplyError)
    return exctype(decoded)


EXCEPTION_CLASSES: Mapping[str, type[ServerReplyError]] = {
    "WRONGTYPE": WrongTypeError,
    "EXECABORT": ExecAbortError,
    "LOADING": BusyLoadingError,
    "NOSCRIPT": NoScriptError,
    "READONLY": ReadOnlyError,
    "NOPERM": NoPermissionError,
}
