from .dialer import WebSocketDialer
from .transport import WebSocketTransport
from .decoder import decode_depth, decode_trade
from .binance_feed import BINANCE_URL, BinanceFeed

__all__ = [
    "WebSocketDialer",
    "WebSocketTransport",
    "decode_depth",
    "decode_trade",
    "BINANCE_URL",
    "BinanceFeed",
]
