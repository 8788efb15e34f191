"""Unit tests for configuration, logging, and the /health endpoint."""

import logging
from unittest.mock import patch

import httpx
from fastapi.testclient import TestClient

from conftest import FakeBackend


class TestSettings:
    """Settings loading via pydantic-settings."""

    def test_settings_defaults(self) -> None:
        """Given no overrides, defaults point at a local API."""
        from workstream.core.config import Settings

        with patch.dict("os.environ", {}, clear=True):
            s = Settings(_env_file=None)  # type: ignore[call-arg]
        assert s.API_URL == "http://localhost:8000/api/v1"
        assert s.API_TIMEOUT_SECONDS == 30.0
        assert s.ALLOWED_ORIGINS == "*"
        assert s.LOG_LEVEL == "INFO"

    def test_settings_read_environment(self) -> None:
        """Given env vars are set, settings picks them up."""
        env_overrides = {
            "API_URL": "https://api.workstream.test/api/v1",
            "API_TIMEOUT_SECONDS": "5",
            "ALLOWED_ORIGINS": "https://portal.test,https://admin.test",
        }
        with patch.dict("os.environ", env_overrides, clear=False):
            from workstream.core.config import Settings

            s = Settings()  # type: ignore[call-arg]
            assert s.API_URL == "https://api.workstream.test/api/v1"
            assert s.API_TIMEOUT_SECONDS == 5.0
            assert s.ALLOWED_ORIGINS == "https://portal.test,https://admin.test"


class TestHealthEndpoint:
    """GET /health probes the REST API."""

    def test_health_connected(self, test_client: TestClient, backend: FakeBackend) -> None:
        """Given the API answers, /health returns api=connected."""
        backend.add("GET", "/programs?limit=1", {"programs": []})

        response = test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        assert body["api"] == "connected"

    def test_health_api_error(self, test_client: TestClient, backend: FakeBackend) -> None:
        """Given the API errors, /health returns 503 with api=disconnected."""
        backend.add("GET", "/programs?limit=1", {"message": "down"}, status=500)

        response = test_client.get("/health")

        assert response.status_code == 503
        body = response.json()
        assert body["status"] == "degraded"
        assert body["api"] == "disconnected"

    def test_health_unreachable(self, test_client: TestClient, backend: FakeBackend) -> None:
        """Given the API cannot be reached, /health returns 503."""
        backend.fail("GET", "/programs?limit=1", httpx.ConnectError("Connection refused"))

        response = test_client.get("/health")

        assert response.status_code == 503
        assert response.json()["api"] == "disconnected"


    def test_health_non_json_success(self, test_client: TestClient, backend: FakeBackend) -> None:
        """Given a proxy answers 200 with an HTML page, /health returns 503."""
        backend.add_text("GET", "/programs?limit=1", "<html>maintenance</html>")

        response = test_client.get("/health")

        assert response.status_code == 503
        assert response.json()["api"] == "disconnected"


class TestLogging:
    """Structured logging configuration."""

    def test_setup_logging_configures_root_logger(self) -> None:
        """Given setup_logging is called, root logger has one handler."""
        from workstream.core.logging import setup_logging

        setup_logging()
        root = logging.getLogger()
        assert len(root.handlers) == 1
        fmt = root.handlers[0].formatter._fmt  # type: ignore[union-attr]
        assert "%(levelname)" in fmt
        assert "%(asctime)" in fmt
        assert "%(name)" in fmt

    def test_setup_logging_quiets_http_stack(self) -> None:
        from workstream.core.logging import QUIET_LOGGERS, setup_logging

        setup_logging()
        assert "httpx" in QUIET_LOGGERS
        for name in QUIET_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING

    def test_setup_logging_level_override(self) -> None:
        """Given an explicit level, it wins over settings.LOG_LEVEL."""
        from workstream.core.logging import setup_logging

        setup_logging("debug")
        assert logging.getLogger().level == logging.DEBUG
        setup_logging()
        assert logging.getLogger().level == logging.INFO

    def test_setup_logging_unknown_level_is_info(self) -> None:
        from workstream.core.logging import setup_logging

        setup_logging("chatty")
        assert logging.getLogger().level == logging.INFO

    def test_repeated_setup_keeps_one_handler(self) -> None:
        from workstream.core.logging import setup_logging

        setup_logging()
        setup_logging()
        assert len(logging.getLogger().handlers) == 1
