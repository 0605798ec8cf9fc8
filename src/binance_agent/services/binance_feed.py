from typing import AsyncIterator, Callable, Optional, TypeVar

from binance_agent.core.channel import Channel
from binance_agent.core.errors import DecodeError, TransportClosed
from binance_agent.core.interfaces import Frame, IFeed
from binance_agent.models import DEFAULT_SOCKET_OPTIONS, DepthDiff, SocketConnectionOptions, Trade
from binance_agent.services.decoder import decode_depth, decode_trade
from binance_agent.services.transport import WebSocketTransport

BINANCE_URL = "stream.binance.com:9443"

R = TypeVar("R")


class BinanceFeed(IFeed):
    """
    Trade and depth diff streams for one Binance symbol.

    Every call to ``trades()`` or ``depth_updates()`` opens its own
    transport with its own retry budget, so an outage on one stream never
    ends the other.
    """

    def __init__(
        self,
        symbol: str,
        logger,
        options: Optional[SocketConnectionOptions] = None,
        base_url: str = BINANCE_URL,
        scheme: str = "wss",
    ):
        self._symbol = symbol.lower()
        self._logger = logger
        self._options = options or DEFAULT_SOCKET_OPTIONS
        self._base_url = base_url
        self._scheme = scheme
        self._transports: list[WebSocketTransport] = []
        self._closed = False

    @property
    def symbol(self) -> str:
        return self._symbol

    def stream_url(self, stream: str) -> str:
        return f"{self._scheme}://{self._base_url}/ws/{self._symbol}@{stream}"

    async def trades(self) -> AsyncIterator[Trade]:
        frames = await self._open(self.stream_url("trade"))
        return self._decode(frames, decode_trade)

    async def depth_updates(self) -> AsyncIterator[DepthDiff]:
        frames = await self._open(self.stream_url("depth@100ms"))
        return self._decode(frames, decode_depth)

    @property
    def open_transports(self) -> int:
        return sum(1 for transport in self._transports if not transport.is_closed)

    async def close(self) -> None:
        self._closed = True
        transports, self._transports = self._transports, []
        for transport in transports:
            await transport.close()

    async def _open(self, url: str) -> Channel[Frame]:
        if self._closed:
            raise TransportClosed(url)
        self._transports = [t for t in self._transports if not t.is_closed]
        frames: Channel[Frame] = Channel()
        transport = WebSocketTransport(self._logger, self._options)
        # registered before dialing so close() can interrupt the retry loop
        self._transports.append(transport)
        await transport.connect_and_listen(url, frames)
        return frames

    async def _decode(self, frames: Channel[Frame], decode: Callable[[Frame], R]) -> AsyncIterator[R]:
        async for frame in frames:
            try:
                record = decode(frame)
            except DecodeError as e:
                self._logger.error(f"error unmarshalling {e.kind}", error=e.detail, detail=_text(frame))
                continue
            yield record


def _text(frame: Frame) -> str:
    if isinstance(frame, bytes):
        return frame.decode("utf-8", errors="replace")
    return frame
