from typing import Any, Protocol

from redicmd.sansio.types import EncodableT


class CommandsProtocol(Protocol):
    def execute_command(self, command: str, *args: EncodableT) -> Any:
        ...
