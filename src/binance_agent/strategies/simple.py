import asyncio
from dataclasses import dataclass
from enum import Enum

from binance_agent.core.errors import StrategyError
from binance_agent.core.interfaces import IStrategy


class Mode(str, Enum):
    # Buyers make bid shouts to purchase, sellers make ask shouts to sell
    BUYER = "buyer"
    SELLER = "seller"


@dataclass(frozen=True)
class PlacedOrder:
    order_id: str
    price: float
    quantity: float


class SimpleStrategy(IStrategy):
    """Logs every market event and keeps the orders it was asked to place."""

    def __init__(self, market: str, logger, mode: Mode = Mode.BUYER):
        self._market = market
        self._logger = logger
        self._mode = mode
        self._orders: dict[str, PlacedOrder] = {}
        self._lock = asyncio.Lock()

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def orders(self) -> dict[str, PlacedOrder]:
        return dict(self._orders)

    async def new_order(self, order_id: str, price: float, quantity: float, *extras) -> None:
        if price <= 0 or quantity <= 0:
            raise StrategyError(f"order {order_id} needs a positive price and quantity")
        async with self._lock:
            if order_id in self._orders:
                raise StrategyError(f"duplicate order id {order_id}")
            self._orders[order_id] = PlacedOrder(order_id, price, quantity)
        self._logger.info(
            "order placed",
            market=self._market,
            mode=self._mode.value,
            order_id=order_id,
            price=price,
            quantity=quantity,
        )

    async def on_trade(
        self,
        price: float,
        quantity: float,
        trade_id: str,
        buyer_order_id: str,
        seller_order_id: str,
        *extras,
    ) -> None:
        self._logger.debug(
            "trade",
            market=self._market,
            price=price,
            quantity=quantity,
            trade_id=trade_id,
            buyer_order_id=buyer_order_id,
            seller_order_id=seller_order_id,
        )

    async def on_book_update_bid(self, price: float, quantity: float, *extras) -> None:
        self._logger.debug("book update", market=self._market, event_type="bid", price=price, quantity=quantity)

    async def on_book_update_ask(self, price: float, quantity: float, *extras) -> None:
        self._logger.debug("book update", market=self._market, event_type="ask", price=price, quantity=quantity)
