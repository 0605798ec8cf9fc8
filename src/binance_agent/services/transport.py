import asyncio
from typing import Optional

from binance_agent.core.channel import Channel
from binance_agent.core.errors import ConnectionFailed, TransportClosed
from binance_agent.core.interfaces import Frame, IConnection, IDialer
from binance_agent.models import DEFAULT_SOCKET_OPTIONS, SocketConnectionOptions
from binance_agent.services.dialer import WebSocketDialer


class WebSocketTransport:
    """
    Streams raw frames from one URL into a sink channel.

    Dial and read failures draw on one retry budget of ``max_retries``
    attempts. A frame read successfully restores the full budget. When the
    budget runs out the sink is closed and the transport stops; the sink is
    closed exactly once, and never written to afterwards.
    """

    def __init__(self, logger, options: Optional[SocketConnectionOptions] = None):
        self._logger = logger
        self._options = options or DEFAULT_SOCKET_OPTIONS
        self._dialer: IDialer = self._options.dialer or WebSocketDialer()
        self._conn: Optional[IConnection] = None
        self._sink: Optional[Channel[Frame]] = None
        self._read_task: Optional[asyncio.Task] = None
        self._dial_task: Optional[asyncio.Task] = None
        self._closed = False

    @property
    def is_running(self) -> bool:
        return self._read_task is not None and not self._read_task.done()

    @property
    def is_closed(self) -> bool:
        """True after ``close()`` or once a terminal failure has closed the sink."""
        return self._closed or (self._sink is not None and self._sink.closed)

    async def connect_and_listen(self, url: str, sink: Channel[Frame], attempt: int = 0) -> None:
        """
        Dial ``url`` and start forwarding frames to ``sink`` in the background.

        Returns once connected. Raises ConnectionFailed, with the sink already
        closed, if no connection could be made within the retry budget, and
        TransportClosed if ``close()`` was called before a connection was made.
        """
        if self._closed:
            raise TransportClosed(url)
        self._sink = sink
        self._dial_task = asyncio.create_task(self._dial(url, attempt))
        try:
            conn, attempt = await self._dial_task
        except asyncio.CancelledError:
            if self._closed:
                raise TransportClosed(url) from None
            raise
        finally:
            self._dial_task = None
        if self._closed:
            await self._close_connection()
            raise TransportClosed(url)
        self._read_task = asyncio.create_task(self._listen(url, conn, attempt))

    async def close(self) -> None:
        self._closed = True
        if self._dial_task:
            # connect_and_listen sees the cancellation and raises TransportClosed
            self._dial_task.cancel()
        if self._read_task:
            self._read_task.cancel()
            try:
                await self._read_task
            except asyncio.CancelledError:
                pass
            self._read_task = None
        await self._close_connection()
        await self._close_sink()
        self._logger.info("transport closed")

    async def _dial(self, url: str, attempt: int) -> tuple[IConnection, int]:
        self._logger.info("connecting", url=url, attempt=attempt)
        while True:
            try:
                conn = await self._dialer.dial(url)
            except Exception as e:
                self._logger.error("connection error", url=url, attempt=attempt, error=str(e))
                if attempt >= self._options.max_retries:
                    break
                attempt += 1
                await asyncio.sleep(self._options.back_off_seconds)
                continue
            self._conn = conn
            self._logger.info("connected", url=url)
            return conn, attempt

        self._logger.error("max retries reached", url=url, attempts=attempt + 1)
        await self._close_sink()
        raise ConnectionFailed(url, attempt + 1)

    async def _listen(self, url: str, conn: IConnection, attempt: int) -> None:
        while True:
            try:
                frame = await conn.recv()
            except Exception as e:
                self._logger.error("error on read", url=url, attempt=attempt, error=str(e))
                await self._close_connection()
                if attempt >= self._options.max_retries:
                    self._logger.error("max retries reached", url=url)
                    await self._close_sink()
                    return
                attempt += 1
                await asyncio.sleep(self._options.back_off_seconds)
                try:
                    conn, attempt = await self._dial(url, attempt)
                except ConnectionFailed:
                    return
                continue

            attempt = 0
            await self._sink.put(frame)

    async def _close_connection(self) -> None:
        conn, self._conn = self._conn, None
        if conn is None:
            return
        try:
            await conn.close()
        except Exception as e:
            self._logger.warning("connection close failed", error=str(e))

    async def _close_sink(self) -> None:
        if self._sink is not None:
            await self._sink.close()
