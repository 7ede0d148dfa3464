from __future__ import annotations

from typing import Awaitable

from redicmd.client.base import BaseRedis, PipelineMixin
from redicmd.io import base
from redicmd.sansio import dispatcher
from redicmd.sansio.types import EncodableT, ReplyT


class AsyncIORedis(BaseRedis[base.AsyncTransport]):
    """An asyncio client: each command method returns an awaitable reply."""

    def execute_command(self, command: str, *args: EncodableT) -> Awaitable[ReplyT]:
        # Shape errors raise here, before anything is awaited.
        return dispatcher.aexecute(self.transport, self.make_command(command, *args))

    async def execute(self, request: dispatcher.RequestT):
        """Dispatch a command or pipeline which was built beforehand."""
        return await dispatcher.aexecute(self.transport, request)

    async def close(self):
        await self.transport.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def pipeline(self) -> AsyncIOPipeline:
        return AsyncIOPipeline(self.transport)


class AsyncIOPipeline(PipelineMixin, AsyncIORedis):
    async def execute(self) -> list[ReplyT]:
        """Send every queued command in one round trip."""
        return await dispatcher.aexecute(self.transport, self._pop_stack())

    async def close(self):
        self.reset()

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        self.reset()
