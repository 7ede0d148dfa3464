from __future__ import annotations

from typing import Iterable, Iterator

import attr

from redicmd.sansio import normalize
from redicmd.sansio.exceptions import ArgumentShapeError
from redicmd.sansio.types import EncodableT, TokensT, TokenT


class Event:
    __slots__ = ()


def _to_name(command: str | bytes) -> str:
    if isinstance(command, (bytes, bytearray, memoryview)):
        command = bytes(command).decode("ascii")
    if not isinstance(command, str) or not command:
        raise ArgumentShapeError(
            f"A command name must be a non-empty keyword, got {command!r}."
        )
    return command.upper()


@attr.frozen(kw_only=True)
class Command(Event):
    """Represents a Redis command which a client may send to the server.

    Commands are immutable and compare equal when their tokens are equal.

    See Also:

        - [Commands](https://redis.io/commands)
    """

    command: str = attr.field(converter=_to_name)
    """The top-level Redis command."""
    args: TokensT = attr.field(default=(), converter=normalize.tokens)
    """Any arguments or modifiers for the given command, in server order."""

    @classmethod
    def build(cls, command: str | bytes, *args: EncodableT) -> Command:
        return cls(command=command, args=args)

    @property
    def tokens(self) -> TokensT:
        """The full token sequence, operation name first."""
        return (self.command, *self.args)

    def __iter__(self) -> Iterator[TokenT]:
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.args) + 1


def _to_commands(commands: Iterable[Command]) -> tuple[Command, ...]:
    if isinstance(commands, Command):
        raise ArgumentShapeError(
            "Expected a collection of commands, got a single command. "
            "Dispatch it directly instead."
        )
    commands = tuple(normalize.itercollection(commands, what="commands"))
    for i, cmd in enumerate(commands):
        if not isinstance(cmd, Command):
            raise ArgumentShapeError(
                f"Item #{i} of the pipeline is a {cmd.__class__.__name__!r}, "
                "not a Command."
            )
    return commands


@attr.frozen(kw_only=True)
class PipelinedCommands(Event):
    """A series of commands which will be executed in a single round-trip.

    See Also:

       - [Pipelining](https://redis.io/topics/pipelining)
    """

    commands: tuple[Command, ...] = attr.field(default=(), converter=_to_commands)
    """The series of commands to send to the Redis server."""

    @classmethod
    def of(cls, *commands: Command) -> PipelinedCommands:
        return cls(commands=commands)

    @property
    def tokens(self) -> list[TokensT]:
        return [cmd.tokens for cmd in self.commands]

    def __iter__(self) -> Iterator[Command]:
        return iter(self.commands)

    def __len__(self) -> int:
        return len(self.commands)
