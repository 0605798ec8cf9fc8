import logging
import ssl
from typing import Optional

import certifi
import websockets

from binance_agent.core.interfaces import IConnection, IDialer

# Reduce websockets library logging noise
logging.getLogger("websockets").setLevel(logging.WARNING)


class WebSocketDialer(IDialer):
    """Opens WebSocket connections, verifying ``wss`` peers against certifi's CA bundle."""

    def __init__(self, handshake_timeout: Optional[float] = 10.0):
        self._handshake_timeout = handshake_timeout
        self._ssl_context = ssl.create_default_context(cafile=certifi.where())

    async def dial(self, url: str) -> IConnection:
        kwargs = {"open_timeout": self._handshake_timeout}
        if url.startswith("wss://"):
            kwargs["ssl"] = self._ssl_context
        return await websockets.connect(url, **kwargs)
