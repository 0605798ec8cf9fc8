import asyncio
from typing import AsyncIterator, Awaitable, Callable, Optional

from binance_agent.core.errors import ConnectionFailed, TransportClosed
from binance_agent.core.events import BookLevelUpdate, Side, level_updates
from binance_agent.core.interfaces import IFeed, IStrategy
from binance_agent.models import DepthDiff, Trade

BookCallback = Callable[[float, float], Awaitable[None]]


class AgentState:
    def __init__(self):
        self.is_running: bool = False
        self.trades_dispatched: int = 0
        self.book_updates_dispatched: int = 0
        self.removals_skipped: int = 0
        self.callback_errors: int = 0


class Agent:
    """
    Drives a strategy from a feed.

    Trades are pumped in their own task. Each depth diff is split into a bid
    task and an ask task that run concurrently, so neither side of the book
    is consistently seen first; within a side, levels arrive in wire order.
    """

    def __init__(self, feed: IFeed, strategy: IStrategy, logger):
        self._feed = feed
        self._strategy = strategy
        self._logger = logger
        self._state = AgentState()
        self._trade_task: Optional[asyncio.Task] = None
        self._side_tasks: set[asyncio.Task] = set()

    @property
    def feed(self) -> IFeed:
        return self._feed

    @property
    def state(self) -> AgentState:
        return self._state

    async def start(self) -> None:
        """
        Run until both streams have ended.

        Raises ConnectionFailed if either stream cannot be opened; in that
        case any stream that did open is closed first. If ``stop()`` is
        called while a stream is still being opened, returns without
        dispatching anything.
        """
        self._logger.info("agent starting", symbol=self._feed.symbol)
        try:
            trades = await self._feed.trades()
            depth = await self._feed.depth_updates()
        except TransportClosed:
            self._logger.info("agent stopped before streams opened", symbol=self._feed.symbol)
            return
        except ConnectionFailed:
            await self._feed.close()
            raise

        self._state.is_running = True
        self._trade_task = asyncio.create_task(self._pump_trades(trades))
        try:
            await self._pump_depth(depth)
            await self._trade_task
            while self._side_tasks:
                await asyncio.gather(*self._side_tasks)
        finally:
            self._state.is_running = False
            if not self._trade_task.done():
                self._trade_task.cancel()
            for task in self._side_tasks:
                task.cancel()
        self._logger.info(
            "agent stopped",
            symbol=self._feed.symbol,
            trades=self._state.trades_dispatched,
            book_updates=self._state.book_updates_dispatched,
        )

    async def stop(self) -> None:
        """Close the feed; ``start()`` returns once the streams drain."""
        self._logger.info("agent stopping", symbol=self._feed.symbol)
        await self._feed.close()

    async def _pump_trades(self, trades: AsyncIterator[Trade]) -> None:
        async for trade in trades:
            try:
                await self._strategy.on_trade(
                    trade.price,
                    trade.quantity,
                    str(trade.id),
                    str(trade.buyer_order_id),
                    str(trade.seller_order_id),
                )
            except Exception as e:
                self._state.callback_errors += 1
                self._logger.error("strategy callback error", callback="on_trade", error=str(e))
                continue
            self._state.trades_dispatched += 1

    async def _pump_depth(self, depth: AsyncIterator[DepthDiff]) -> None:
        async for diff in depth:
            self._spawn_side(level_updates(diff, Side.BID), self._strategy.on_book_update_bid)
            self._spawn_side(level_updates(diff, Side.ASK), self._strategy.on_book_update_ask)

    def _spawn_side(self, updates: list[BookLevelUpdate], callback: BookCallback) -> None:
        task = asyncio.create_task(self._deliver_side(updates, callback))
        self._side_tasks.add(task)
        task.add_done_callback(self._side_tasks.discard)

    async def _deliver_side(self, updates: list[BookLevelUpdate], callback: BookCallback) -> None:
        for update in updates:
            # TODO: surface removals through an on_book_remove strategy callback
            if update.is_removal:
                self._state.removals_skipped += 1
                self._logger.debug("book removal", side=update.side.value, price=update.price)
                continue
            try:
                await callback(update.price, update.quantity)
            except Exception as e:
                self._state.callback_errors += 1
                self._logger.error(
                    "strategy callback error",
                    callback=f"on_book_update_{update.side.value}",
                    error=str(e),
                )
                continue
            self._state.book_updates_dispatched += 1
