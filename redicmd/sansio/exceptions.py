"""Core exceptions raised (or returned) by the command layer."""


class RedisError(Exception):
    pass


class ArgumentShapeError(RedisError, TypeError):
    """An argument matched none of the shapes a command builder accepts.

    Always raised locally, before anything reaches the transport.
    """


class ProtocolError(RedisError):
    pass


class ServerReplyError(RedisError):
    """An error reply from the server.

    Instances are handed back as the reply for the failing command, they are
    not raised by the dispatcher.
    """

    def __eq__(self, other):
        if not isinstance(other, ServerReplyError):
            return NotImplemented
        return type(self) is type(other) and self.args == other.args

    __hash__ = RedisError.__hash__

    @property
    def message(self) -> str:
        return str(self)


class WrongTypeError(ServerReplyError):
    pass


class NoScriptError(ServerReplyError):
    pass


class ExecAbortError(ServerReplyError):
    pass


class ReadOnlyError(ServerReplyError):
    pass


class NoPermissionError(ServerReplyError):
    pass


class BusyLoadingError(ServerReplyError):
    pass


class TransportError(RedisError):
    pass


class RedisConnectionError(ConnectionError, TransportError):
    pass


class AuthenticationError(RedisConnectionError):
    pass


class RedisTimeoutError(TimeoutError, TransportError):
    pass
