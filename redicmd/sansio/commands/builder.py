from __future__ import annotations

from redicmd.sansio import events
from redicmd.sansio.commands.core import CoreCommands
from redicmd.sansio.types import EncodableT


class CommandBuilder(CoreCommands):
    """Builds commands without sending them anywhere.

    Every command method returns an immutable
    :py:class:`~redicmd.sansio.events.Command`, ready to be dispatched on its
    own or collected into a pipeline.

    Examples:
        >>> commands = CommandBuilder()
        >>> commands.set("k", "v").tokens
        ('SET', 'k', 'v')
        >>> commands.delete(["a", "b", "c"]).tokens
        ('DEL', 'a', 'b', 'c')
    """

    def execute_command(self, command: str, *args: EncodableT) -> events.Command:
        return events.Command.build(command, *args)

    @staticmethod
    def pipeline(*commands: events.Command) -> events.PipelinedCommands:
        return events.PipelinedCommands.of(*commands)
