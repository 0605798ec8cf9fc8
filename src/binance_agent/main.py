import asyncio
import signal

from binance_agent.config import Config
from binance_agent.core.agent import Agent
from binance_agent.core.errors import ConnectionFailed
from binance_agent.services.binance_feed import BinanceFeed
from binance_agent.strategies.simple import SimpleStrategy
from binance_agent.utils.logger import LoggerFactory


async def run_agent(agent: Agent, shutdown_event: asyncio.Event, logger) -> int:
    """Run ``agent`` until its streams end or ``shutdown_event`` is set."""

    async def stop_on_shutdown():
        await shutdown_event.wait()
        await agent.stop()

    watcher = asyncio.create_task(stop_on_shutdown())
    try:
        await agent.start()
    except ConnectionFailed as e:
        logger.error("application error", error=str(e))
        return 1
    finally:
        watcher.cancel()
        try:
            await watcher
        except asyncio.CancelledError:
            pass
        logger.info("application stopped")
    return 0


async def main() -> int:
    config = Config()
    logger_factory = LoggerFactory(config.log_level, config.json_logs)
    logger = logger_factory.create("main")

    logger.info("application starting", symbol=config.symbol)

    feed = BinanceFeed(
        symbol=config.symbol,
        logger=logger_factory.create("feed", symbol=config.symbol),
        options=config.socket_options(),
        base_url=config.binance_url,
        scheme=config.stream_scheme,
    )
    strategy = SimpleStrategy(config.symbol, logger_factory.create("strategy"))
    agent = Agent(feed, strategy, logger_factory.create("agent"))

    loop = asyncio.get_running_loop()
    shutdown_event = asyncio.Event()

    def handle_shutdown(sig):
        logger.info("shutdown signal received", signal=sig.name)
        shutdown_event.set()

    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, lambda s=sig: handle_shutdown(s))

    return await run_agent(agent, shutdown_event, logger)


def run() -> None:
    raise SystemExit(asyncio.run(main()))


if __name__ == "__main__":
    run()
