"""
Pytest configuration and shared fixtures for test suite.

This module provides:
- Test client fixtures for FastAPI
- Mock API key fixtures
- Mock environment variables
"""

import os
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from unittest.mock import patch

from subkit.config import get_settings


@pytest.fixture
def config_dir(tmp_path):
    """Config directory path that does not exist yet."""
    return str(tmp_path / "config" / "subkit")


@pytest.fixture
def mock_env_vars(config_dir):
    """Mock environment variables for testing and reload cached settings."""
    with patch.dict(os.environ, {
        "API_KEY": "test-api-key",
        "ALLOWED_ORIGIN": "*",
        "CONFIG_DIR": config_dir,
        "LOG_LEVEL": "WARNING",
        "FRACTION_DIGITS": "3",
        "FRACTION_SEPARATOR": ".",
    }):
        get_settings.cache_clear()
        yield
    get_settings.cache_clear()


@pytest.fixture
def api_key():
    """Return test API key."""
    return "test-api-key"


@pytest.fixture
def api_headers(api_key):
    """Return headers with API key."""
    return {"X-API-Key": api_key}


@pytest_asyncio.fixture
async def client(mock_env_vars):
    """
    Create async test client for FastAPI app.

    Uses httpx AsyncClient with ASGITransport to test the FastAPI app
    without needing to run a server.
    """
    # Import app after env vars are mocked
    from main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def srt_cues():
    """Two SRT cues with comma separators."""
    return (
        "1\n"
        "00:00:01,000 --> 00:00:02,500\n"
        "Hello world\n"
        "\n"
        "2\n"
        "00:00:03,250 --> 00:00:05,000\n"
        "你好world\n"
    )
