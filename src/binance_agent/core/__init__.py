from .interfaces import Frame, IConnection, IDialer, IFeed, IStrategy
from .errors import (
    AgentError,
    ChannelClosedError,
    ConnectionFailed,
    DecodeError,
    StrategyError,
    TransportClosed,
)
from .events import BookLevelUpdate, Side, level_updates
from .channel import Channel
from .agent import Agent, AgentState

__all__ = [
    "Frame",
    "IConnection",
    "IDialer",
    "IFeed",
    "IStrategy",
    "AgentError",
    "ChannelClosedError",
    "ConnectionFailed",
    "DecodeError",
    "StrategyError",
    "TransportClosed",
    "BookLevelUpdate",
    "Side",
    "level_updates",
    "Channel",
    "Agent",
    "AgentState",
]
