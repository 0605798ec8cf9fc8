import asyncio
from unittest.mock import AsyncMock

import pytest

from binance_agent.core.agent import Agent
from binance_agent.core.errors import ConnectionFailed
from binance_agent.main import run_agent

from fakes import FakeFeed, logged


@pytest.mark.asyncio
async def test_shutdown_event_stops_agent(mock_logger):
    feed = FakeFeed(follow=True)
    agent = Agent(feed, AsyncMock(), mock_logger)
    shutdown_event = asyncio.Event()

    running = asyncio.create_task(run_agent(agent, shutdown_event, mock_logger))
    await asyncio.sleep(0.05)
    assert not running.done()

    shutdown_event.set()
    assert await asyncio.wait_for(running, 1) == 0
    assert feed.closed
    assert "application stopped" in logged(mock_logger.info)


@pytest.mark.asyncio
async def test_watcher_is_cancelled_when_streams_end(mock_logger):
    feed = FakeFeed()
    agent = Agent(feed, AsyncMock(), mock_logger)
    tasks_before = asyncio.all_tasks()

    assert await asyncio.wait_for(run_agent(agent, asyncio.Event(), mock_logger), 1) == 0

    assert asyncio.all_tasks() == tasks_before
    assert not feed.closed


@pytest.mark.asyncio
async def test_connection_failure_exits_with_error(mock_logger):
    feed = FakeFeed(trades_error=ConnectionFailed("wss://example.test", 6))
    agent = Agent(feed, AsyncMock(), mock_logger)

    assert await asyncio.wait_for(run_agent(agent, asyncio.Event(), mock_logger), 1) == 1
    assert "application error" in logged(mock_logger.error)
