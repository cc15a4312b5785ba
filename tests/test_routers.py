"""
Integration tests for all API routers.

This module tests:
- API authentication (401 for missing/invalid keys, 500 when unconfigured)
- Input validation (422 for invalid params)
- Endpoint responses for the timestamps, text and system routers
- The startup hook that creates the config directory
"""

import os
import logging
import threading
import pytest
from unittest.mock import patch

from subkit.config import get_settings


class TestAuthentication:
    """Test API key authentication across all endpoints."""

    @pytest.mark.asyncio
    async def test_root_is_public(self, client):
        """Test the welcome endpoint needs no key."""
        response = await client.get("/")
        assert response.status_code == 200
        assert "subkit" in response.json()["message"]

    @pytest.mark.asyncio
    async def test_missing_api_key(self, client):
        """Test requests without API key are rejected."""
        response = await client.get("/system/info")
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_invalid_api_key(self, client):
        """Test requests with invalid API key are rejected."""
        response = await client.get("/system/info", headers={"X-API-Key": "wrong-key"})
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_valid_api_key(self, client, api_headers):
        """Test requests with valid API key are accepted."""
        response = await client.get("/system/info", headers=api_headers)
        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_api_key_not_configured(self, client, api_headers):
        """Test 500 when the server has no API key."""
        with patch.dict(os.environ, {"API_KEY": ""}):
            get_settings.cache_clear()
            response = await client.get("/system/info", headers=api_headers)
        get_settings.cache_clear()
        assert response.status_code == 500

    @pytest.mark.asyncio
    async def test_request_id_header(self, client, api_headers):
        """Test every response carries a request id."""
        response = await client.post("/text/escape", headers=api_headers, json={"text": "a.b"})
        assert len(response.headers["X-Request-ID"]) == 8


class TestTimestampsRouter:
    """Test timestamps router endpoints."""

    @pytest.mark.asyncio
    async def test_parse_valid(self, client, api_headers):
        response = await client.get("/timestamps/parse", headers=api_headers, params={"text": "01:02:03,456"})
        assert response.status_code == 200
        data = response.json()
        assert data["seconds"] == 3723.456
        assert data["valid"] is True

    @pytest.mark.asyncio
    async def test_parse_no_timecode_is_not_an_error(self, client, api_headers):
        response = await client.get("/timestamps/parse", headers=api_headers, params={"text": "not a time"})
        assert response.status_code == 200
        data = response.json()
        assert data["seconds"] is None
        assert data["valid"] is False

    @pytest.mark.asyncio
    async def test_parse_missing_text(self, client, api_headers):
        response = await client.get("/timestamps/parse", headers=api_headers)
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_format_defaults(self, client, api_headers):
        response = await client.get("/timestamps/format", headers=api_headers, params={"seconds": 3723.456})
        assert response.status_code == 200
        assert response.json()["timestamp"] == "01:02:03.456"

    @pytest.mark.asyncio
    async def test_format_options(self, client, api_headers):
        response = await client.get(
            "/timestamps/format",
            headers=api_headers,
            params={"seconds": 3723.456, "digits": 2, "separator": ","}
        )
        assert response.status_code == 200
        assert response.json()["timestamp"] == "01:02:03,46"

    @pytest.mark.asyncio
    async def test_format_defaults_from_settings(self, client, api_headers):
        with patch.dict(os.environ, {"FRACTION_DIGITS": "1", "FRACTION_SEPARATOR": ","}):
            get_settings.cache_clear()
            response = await client.get("/timestamps/format", headers=api_headers, params={"seconds": 90.5})
        get_settings.cache_clear()
        assert response.json()["timestamp"] == "00:01:30,5"

    @pytest.mark.asyncio
    async def test_format_invalid_params(self, client, api_headers):
        for params in [
            {"seconds": -1},
            {"seconds": 1, "digits": 10},
            {"seconds": 1, "digits": -1},
            {"seconds": 1, "separator": ";"},
            {},
        ]:
            response = await client.get("/timestamps/format", headers=api_headers, params=params)
            assert response.status_code == 422, params

    @pytest.mark.asyncio
    async def test_shift(self, client, api_headers, srt_cues):
        response = await client.post(
            "/timestamps/shift",
            headers=api_headers,
            json={"text": srt_cues, "offset": 1.5}
        )
        assert response.status_code == 200
        data = response.json()
        assert data["shifted"] == 4
        assert "00:00:02,500 --> 00:00:04,000" in data["text"]
        assert "00:00:04,750 --> 00:00:06,500" in data["text"]

    @pytest.mark.asyncio
    async def test_shift_missing_offset(self, client, api_headers):
        response = await client.post("/timestamps/shift", headers=api_headers, json={"text": "00:00:01,000"})
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_parse_overlong_hours(self, client, api_headers):
        for text in ["9" * 310 + ":00:00,000", "1" * 5000 + ":00:00,000"]:
            response = await client.get("/timestamps/parse", headers=api_headers, params={"text": text})
            assert response.status_code == 200
            assert response.json()["valid"] is False

    @pytest.mark.asyncio
    async def test_shift_wide_fraction(self, client, api_headers):
        response = await client.post(
            "/timestamps/shift",
            headers=api_headers,
            json={"text": "00:00:01," + "0" * 30, "offset": 1}
        )
        assert response.status_code == 200
        assert response.json()["text"] == "00:00:02," + "0" * 30


class TestTextRouter:
    """Test text router endpoints."""

    @pytest.mark.asyncio
    async def test_words(self, client, api_headers):
        response = await client.post("/text/words", headers=api_headers, json={"text": "你好world"})
        assert response.status_code == 200
        assert response.json() == {"words": ["你", "好", "world"], "count": 3}

    @pytest.mark.asyncio
    async def test_words_lines_and_spaces(self, client, api_headers):
        response = await client.post("/text/words", headers=api_headers, json={"text": "hello world\nline2"})
        assert response.json()["words"] == ["hello ", "world", "\n", "line2"]

    @pytest.mark.asyncio
    async def test_words_normalize_newlines(self, client, api_headers):
        response = await client.post(
            "/text/words",
            headers=api_headers,
            json={"text": "a\r\nb", "normalize_newlines": True}
        )
        assert response.json()["words"] == ["a", "\n", "b"]

    @pytest.mark.asyncio
    async def test_words_missing_body(self, client, api_headers):
        response = await client.post("/text/words", headers=api_headers, json={})
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_escape(self, client, api_headers):
        response = await client.post("/text/escape", headers=api_headers, json={"text": "a.b*c"})
        assert response.status_code == 200
        assert response.json() == {"text": "a.b*c", "escaped": "a\\.b\\*c"}

    @pytest.mark.asyncio
    async def test_normalize_newlines(self, client, api_headers):
        response = await client.post("/text/normalize-newlines", headers=api_headers, json={"text": "a\r\nb\rc"})
        assert response.json() == {"text": "a\nb\nc"}


class TestSystemRouter:
    """Test system router endpoints."""

    @pytest.mark.asyncio
    async def test_system_info(self, client, api_headers, config_dir):
        response = await client.get("/system/info", headers=api_headers)
        data = response.json()
        assert data["path_separator"] == os.sep
        assert data["ctrl_key"] in ("Meta", "Control")
        assert data["config_dir"] == config_dir
        assert data["version"]
        assert data["os_type"]

    @pytest.mark.asyncio
    async def test_config_dir_created_once(self, client, api_headers, config_dir):
        first = await client.post("/system/config-dir", headers=api_headers)
        assert first.status_code == 200
        assert first.json() == {"config_dir": config_dir, "created": True}
        assert os.path.isdir(config_dir)

        second = await client.post("/system/config-dir", headers=api_headers)
        assert second.json()["created"] is False

    @pytest.mark.asyncio
    async def test_config_dir_failure(self, client, api_headers):
        with patch("subkit.routers.system.ensure_config_directory_exists", side_effect=PermissionError("denied")):
            response = await client.post("/system/config-dir", headers=api_headers)
        assert response.status_code == 500
        assert "denied" in response.json()["detail"]


class TestStartup:
    """Test the startup hook directly; ASGITransport does not run it."""

    @pytest.mark.asyncio
    async def test_startup_creates_config_dir(self, mock_env_vars, config_dir):
        from main import startup_event

        await startup_event()

        assert os.path.isdir(config_dir)

    @pytest.mark.asyncio
    async def test_startup_gives_up_on_slow_config_dir(self, mock_env_vars, config_dir, caplog):
        from main import startup_event

        release = threading.Event()
        with patch.dict(os.environ, {"RACE_TIMEOUT_SECONDS": "0.05"}), \
                patch("main.ensure_config_directory_exists", side_effect=lambda path: release.wait(1)):
            get_settings.cache_clear()
            with caplog.at_level(logging.WARNING, logger="subkit"):
                await startup_event()
        release.set()
        get_settings.cache_clear()

        warnings = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
        assert any("not ready after 0.05s" in message and config_dir in message for message in warnings)
        assert not os.path.isdir(config_dir)

    @pytest.mark.asyncio
    async def test_startup_logs_config_dir_failure(self, mock_env_vars, caplog):
        from main import startup_event

        with patch("main.ensure_config_directory_exists", side_effect=PermissionError("denied")):
            with caplog.at_level(logging.WARNING, logger="subkit"):
                await startup_event()

        assert any("denied" in r.getMessage() for r in caplog.records)
