"""
Shared fixtures for the agent SDK test suite.
"""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Ensure src/ and this directory are importable without an installed package
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture
def mock_logger():
    logger = MagicMock()
    logger.info = MagicMock()
    logger.debug = MagicMock()
    logger.error = MagicMock()
    logger.warning = MagicMock()
    return logger
