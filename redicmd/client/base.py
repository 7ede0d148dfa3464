from __future__ import annotations

from typing import Any, Generic, TypeVar

from redicmd.sansio import events
from redicmd.sansio.commands import core
from redicmd.sansio.types import EncodableT

_TT = TypeVar("_TT")


class BaseRedis(core.CoreCommands, Generic[_TT]):
    """Every command method builds a command and dispatches it right away."""

    transport: _TT

    def __init__(self, transport: _TT):
        self.transport = transport

    @staticmethod
    def make_command(command: str, *args: EncodableT) -> events.Command:
        return events.Command.build(command, *args)

    def execute_command(self, command: str, *args: EncodableT) -> Any:
        raise NotImplementedError()

    def pipeline(self):
        raise NotImplementedError()

    def __repr__(self):
        return f"<{self.__class__.__name__} transport={self.transport!r}>"


_ClientT = TypeVar("_ClientT", bound="PipelineMixin")


class PipelineMixin:
    """Queue commands and send them in a single round-trip on ``execute``.

    Command methods return the pipeline itself, so calls may be chained::

        replies = client.pipeline().get("k").set("k", "v").get("k").execute()
    """

    def __init__(self, transport):
        super().__init__(transport)
        self.stack: list[events.Command] = []

    def execute_command(self: _ClientT, command: str, *args: EncodableT) -> _ClientT:
        self.stack.append(self.make_command(command, *args))
        return self

    def __len__(self) -> int:
        return len(self.stack)

    def _pop_stack(self) -> events.PipelinedCommands:
        # Reset the current stack.
        stack = events.PipelinedCommands(commands=self.stack)
        self.stack = []
        return stack

    def reset(self):
        self.stack = []
