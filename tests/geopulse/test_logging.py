"""Tests for geopulse._logging: decorators and file logging."""

from __future__ import annotations

import logging

import pytest

import geopulse._logging as mod
from geopulse._logging import log_api_call, log_service_call


class _FakeClient:
    """Minimal class to test logging decorators."""

    @log_api_call
    def fetch(self, latitude: float) -> dict:
        return {"latitude": latitude}

    @log_api_call
    def fetch_failing(self, latitude: float) -> dict:
        raise ValueError("test error")

    @log_service_call
    def odds(self, data: list) -> dict:
        return {"result": len(data)}

    @log_service_call
    async def odds_async(self, data: list) -> dict:
        return {"result": len(data)}

    @log_api_call
    async def fetch_async_failing(self) -> None:
        raise RuntimeError("async error")


def _close_handlers(logger: logging.Logger) -> None:
    for h in logger.handlers[:]:
        h.close()
        logger.removeHandler(h)


@pytest.fixture
def fake_client():
    return _FakeClient()


@pytest.fixture(autouse=True)
def _log_to_tmp(tmp_path):
    """Reset the module-level logger and redirect file output to tmp_path."""
    old_logger = mod._logger
    old_dir = mod._LOG_DIR

    named_logger = logging.getLogger("geopulse.api")
    old_propagate = named_logger.propagate
    old_level = named_logger.level
    _close_handlers(named_logger)

    mod._logger = None
    mod._LOG_DIR = str(tmp_path)

    yield tmp_path

    _close_handlers(named_logger)
    named_logger.propagate = old_propagate
    named_logger.setLevel(old_level)
    mod._logger = old_logger
    mod._LOG_DIR = old_dir


def _log_text(tmp_path) -> str:
    return (tmp_path / "api_calls.log").read_text(encoding="utf-8")


class TestLogApiCall:
    def test_returns_result(self, fake_client) -> None:
        assert fake_client.fetch(25.2) == {"latitude": 25.2}

    def test_logs_call_and_ok(self, fake_client, _log_to_tmp) -> None:
        fake_client.fetch(25.2)
        content = _log_text(_log_to_tmp)
        assert "CALL: _FakeClient.fetch(25.2)" in content
        assert "OK: _FakeClient.fetch(25.2)" in content

    def test_logs_failure(self, fake_client, _log_to_tmp) -> None:
        with pytest.raises(ValueError, match="test error"):
            fake_client.fetch_failing(1.0)
        content = _log_text(_log_to_tmp)
        assert "FAIL: _FakeClient.fetch_failing(1.0)" in content
        assert "ValueError" in content

    def test_preserves_function_name(self, fake_client) -> None:
        assert fake_client.fetch.__name__ == "fetch"

    @pytest.mark.asyncio
    async def test_async_failure(self, fake_client, _log_to_tmp) -> None:
        with pytest.raises(RuntimeError, match="async error"):
            await fake_client.fetch_async_failing()
        assert "FAIL: _FakeClient.fetch_async_failing()" in _log_text(_log_to_tmp)


class TestLogServiceCall:
    def test_logs_service_call(self, fake_client, _log_to_tmp) -> None:
        assert fake_client.odds([1, 2]) == {"result": 2}
        content = _log_text(_log_to_tmp)
        assert "SERVICE CALL: _FakeClient.odds" in content
        assert "SERVICE OK: _FakeClient.odds" in content

    @pytest.mark.asyncio
    async def test_async_service_call(self, fake_client, _log_to_tmp) -> None:
        assert await fake_client.odds_async([1]) == {"result": 1}
        assert "SERVICE OK: _FakeClient.odds_async" in _log_text(_log_to_tmp)

    def test_creates_log_directory(self, tmp_path) -> None:
        new_dir = tmp_path / "nested" / "logs"
        mod._LOG_DIR = str(new_dir)
        mod._logger = None
        _close_handlers(logging.getLogger("geopulse.api"))

        _FakeClient().odds([])

        assert (new_dir / "api_calls.log").exists()


class TestWithoutLogDir:
    def test_propagates_to_root(self, fake_client, caplog) -> None:
        mod._LOG_DIR = None
        mod._logger = None
        logger = logging.getLogger("geopulse.api")
        logger.propagate = True
        with caplog.at_level(logging.INFO, logger="geopulse.api"):
            fake_client.fetch(3.0)
        assert any("CALL: _FakeClient.fetch(3.0)" in r.getMessage() for r in caplog.records)
