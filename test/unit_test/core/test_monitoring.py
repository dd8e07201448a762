"""
Unit tests for the Logfire monitoring module.

Logfire itself is always mocked; these tests only check how the module
decides what to configure and when to forward events.
"""

from unittest.mock import MagicMock, patch

import pytest
from fastapi import FastAPI

from sitecms.core import monitoring
from sitecms.core.monitoring import initialize_logfire, log_alert, log_api_request


@pytest.fixture(autouse=True)
def _reset_initialized(monkeypatch):
    monkeypatch.setattr(monitoring, "_initialized", False)


@pytest.fixture
def mock_logfire():
    with patch("sitecms.core.monitoring.logfire") as mock:
        yield mock


class TestInitializeLogfire:
    """Test initialize_logfire."""

    def test_disabled(self, mock_logfire, monkeypatch):
        monkeypatch.setattr(monitoring, "LOGFIRE_ENABLED", False)

        assert initialize_logfire() is False
        mock_logfire.configure.assert_not_called()

    def test_enabled_without_token(self, mock_logfire, monkeypatch):
        monkeypatch.setattr(monitoring, "LOGFIRE_ENABLED", True)
        monkeypatch.setattr(monitoring, "LOGFIRE_TOKEN", "")

        assert initialize_logfire() is False
        mock_logfire.configure.assert_not_called()

    def test_configures_and_instruments(self, mock_logfire, monkeypatch):
        monkeypatch.setattr(monitoring, "LOGFIRE_ENABLED", True)
        monkeypatch.setattr(monitoring, "LOGFIRE_TOKEN", "token")
        app = FastAPI()

        assert initialize_logfire(app) is True

        mock_logfire.configure.assert_called_once()
        assert mock_logfire.configure.call_args.kwargs["service_name"] == monitoring.LOGFIRE_SERVICE_NAME
        mock_logfire.instrument_sqlalchemy.assert_called_once()
        mock_logfire.instrument_httpx.assert_called_once()
        mock_logfire.instrument_fastapi.assert_called_once_with(app=app)
        assert monitoring._initialized is True

    def test_service_name_override(self, mock_logfire, monkeypatch):
        monkeypatch.setattr(monitoring, "LOGFIRE_ENABLED", True)
        monkeypatch.setattr(monitoring, "LOGFIRE_TOKEN", "token")

        initialize_logfire(service_name="sitecms-proxy")

        assert mock_logfire.configure.call_args.kwargs["service_name"] == "sitecms-proxy"
        mock_logfire.instrument_fastapi.assert_not_called()

    def test_instrumentation_failure_is_not_fatal(self, mock_logfire, monkeypatch):
        monkeypatch.setattr(monitoring, "LOGFIRE_ENABLED", True)
        monkeypatch.setattr(monitoring, "LOGFIRE_TOKEN", "token")
        mock_logfire.instrument_httpx.side_effect = RuntimeError("missing extra")

        assert initialize_logfire() is True

    def test_configure_failure(self, mock_logfire, monkeypatch):
        monkeypatch.setattr(monitoring, "LOGFIRE_ENABLED", True)
        monkeypatch.setattr(monitoring, "LOGFIRE_TOKEN", "token")
        mock_logfire.configure.side_effect = RuntimeError("bad token")

        assert initialize_logfire() is False
        assert monitoring._initialized is False


class TestEvents:
    """Test log_api_request and log_alert."""

    def test_api_request_skipped_when_not_initialized(self, mock_logfire):
        log_api_request("GET", "/api/products", 200, 1.5)
        mock_logfire.info.assert_not_called()

    def test_api_request_forwarded(self, mock_logfire, monkeypatch):
        monkeypatch.setattr(monitoring, "_initialized", True)

        log_api_request("GET", "/api/products", 200, 1.5)

        mock_logfire.info.assert_called_once_with(
            "API request completed", method="GET", path="/api/products", status_code=200, duration_ms=1.5
        )

    def test_alert_always_logged_locally(self, mock_logfire):
        with patch.object(monitoring, "logger") as mock_logger:
            log_alert("auth.degraded", "store down", {"reason": "timeout"})

        mock_logger.error.assert_called_once()
        assert mock_logger.error.call_args.kwargs["extra"]["alert_event"] == "auth.degraded"
        mock_logfire.error.assert_not_called()

    def test_alert_forwarded_when_initialized(self, mock_logfire, monkeypatch):
        monkeypatch.setattr(monitoring, "_initialized", True)

        log_alert("auth.degraded", "store down", {"reason": "timeout"})

        mock_logfire.error.assert_called_once_with("auth.degraded: store down", reason="timeout")

    def test_logfire_errors_swallowed(self, mock_logfire, monkeypatch):
        monkeypatch.setattr(monitoring, "_initialized", True)
        mock_logfire.info = MagicMock(side_effect=RuntimeError("network"))

        log_api_request("POST", "/api/messages", 201, 3.0)
