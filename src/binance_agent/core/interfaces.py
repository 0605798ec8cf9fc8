from abc import ABC, abstractmethod
from typing import AsyncIterator, Union

from binance_agent.models import DepthDiff, Trade

Frame = Union[str, bytes]


class IConnection(ABC):
    @abstractmethod
    async def recv(self) -> Frame:
        pass

    @abstractmethod
    async def close(self) -> None:
        pass


class IDialer(ABC):
    @abstractmethod
    async def dial(self, url: str) -> IConnection:
        pass


class IFeed(ABC):
    @property
    @abstractmethod
    def symbol(self) -> str:
        pass

    @abstractmethod
    async def trades(self) -> AsyncIterator[Trade]:
        """Open the trade stream. Raises ConnectionFailed if the first dial fails."""

    @abstractmethod
    async def depth_updates(self) -> AsyncIterator[DepthDiff]:
        """Open the depth diff stream. Raises ConnectionFailed if the first dial fails."""

    @abstractmethod
    async def close(self) -> None:
        pass


class IStrategy(ABC):
    """
    Trading logic driven by the agent.

    The agent shares one strategy between the trade pump and every per-side
    book task, so callbacks can run concurrently with each other. Strategies
    must guard their own state. The trailing ``extras`` are reserved for
    strategy-specific context; the agent never passes any.
    """

    @abstractmethod
    async def new_order(self, order_id: str, price: float, quantity: float, *extras) -> None:
        """Place an order. Raises StrategyError on failure."""

    @abstractmethod
    async def on_trade(
        self,
        price: float,
        quantity: float,
        trade_id: str,
        buyer_order_id: str,
        seller_order_id: str,
        *extras,
    ) -> None:
        pass

    @abstractmethod
    async def on_book_update_bid(self, price: float, quantity: float, *extras) -> None:
        pass

    @abstractmethod
    async def on_book_update_ask(self, price: float, quantity: float, *extras) -> None:
        pass
