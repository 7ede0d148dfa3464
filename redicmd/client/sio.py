from __future__ import annotations

from redicmd.client.base import BaseRedis, PipelineMixin
from redicmd.io import base
from redicmd.sansio import dispatcher
from redicmd.sansio.types import EncodableT, ReplyT


class SyncIORedis(BaseRedis[base.Transport]):
    """A blocking client: each command method returns the server's reply."""

    def execute_command(self, command: str, *args: EncodableT) -> ReplyT:
        return dispatcher.execute(self.transport, self.make_command(command, *args))

    def execute(self, request: dispatcher.RequestT):
        """Dispatch a command or pipeline which was built beforehand."""
        return dispatcher.execute(self.transport, request)

    def close(self):
        self.transport.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def pipeline(self) -> SyncIOPipeline:
        return SyncIOPipeline(self.transport)


class SyncIOPipeline(PipelineMixin, SyncIORedis):
    def execute(self) -> list[ReplyT]:
        """Send every queued command in one round trip.

        Returns:
            One reply per queued command, in order. Error replies are
            returned in place, not raised.
        """
        return dispatcher.execute(self.transport, self._pop_stack())

    def close(self):
        self.reset()

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.reset()
