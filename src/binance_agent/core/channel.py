import asyncio
from typing import AsyncIterator, Generic, TypeVar

from binance_agent.core.errors import ChannelClosedError

T = TypeVar("T")

_CLOSED = object()


class Channel(Generic[T]):
    """
    Single-writer queue that can be closed.

    Readers iterate with ``async for``; iteration ends once the writer has
    closed the channel and every item put before the close has been read.
    """

    def __init__(self, maxsize: int = 0):
        self._queue: asyncio.Queue = asyncio.Queue(maxsize=maxsize)
        self._closed = False
        self._drained = False

    @property
    def closed(self) -> bool:
        return self._closed

    async def put(self, item: T) -> None:
        if self._closed:
            raise ChannelClosedError("put on closed channel")
        await self._queue.put(item)

    async def close(self) -> None:
        """Close the channel. Closing twice is a no-op."""
        if self._closed:
            return
        self._closed = True
        await self._queue.put(_CLOSED)

    async def get(self) -> T:
        """Return the next item, or raise StopAsyncIteration once drained."""
        if self._drained:
            raise StopAsyncIteration
        item = await self._queue.get()
        if item is _CLOSED:
            self._drained = True
            raise StopAsyncIteration
        return item

    def __aiter__(self) -> AsyncIterator[T]:
        return self

    async def __anext__(self) -> T:
        return await self.get()
