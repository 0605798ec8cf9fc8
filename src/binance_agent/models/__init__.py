from .trade import Trade
from .depth import BookEntry, DepthDiff
from .options import DEFAULT_SOCKET_OPTIONS, SocketConnectionOptions
from .wire import WIRE_CONTEXT, DecimalString

__all__ = [
    "Trade",
    "BookEntry",
    "DepthDiff",
    "SocketConnectionOptions",
    "DEFAULT_SOCKET_OPTIONS",
    "WIRE_CONTEXT",
    "DecimalString",
]
