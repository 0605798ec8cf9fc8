from binance_agent.core import (
    Agent,
    ConnectionFailed,
    DecodeError,
    IStrategy,
    Side,
    StrategyError,
)
from binance_agent.models import BookEntry, DepthDiff, SocketConnectionOptions, Trade
from binance_agent.services import BinanceFeed, WebSocketDialer, decode_depth, decode_trade

__all__ = [
    "Agent",
    "ConnectionFailed",
    "DecodeError",
    "IStrategy",
    "Side",
    "StrategyError",
    "BookEntry",
    "DepthDiff",
    "SocketConnectionOptions",
    "Trade",
    "BinanceFeed",
    "WebSocketDialer",
    "decode_depth",
    "decode_trade",
]
