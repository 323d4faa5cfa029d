"""
Unit tests for the Logfire monitoring module.

This test suite covers:
- Feature flag handling
- Instrumentation of the app and engine
- Graceful degradation when instrumentation fails
- Request logging
"""

from unittest.mock import Mock, patch

import pytest

from unitracker.core import monitoring


@pytest.fixture(autouse=True)
def _reset_configured_flag():
    original = monitoring._logfire_configured
    yield
    monitoring._logfire_configured = original


class TestInitializeLogfire:
    def test_disabled_by_flag(self):
        with patch.object(monitoring, "LOGFIRE_ENABLED", False), patch.object(monitoring, "logfire") as mock_logfire:
            assert monitoring.initialize_logfire() is False

        mock_logfire.configure.assert_not_called()
        assert monitoring.is_logfire_configured() is False

    def test_enabled_without_token(self):
        with (
            patch.object(monitoring, "LOGFIRE_ENABLED", True),
            patch.object(monitoring, "LOGFIRE_TOKEN", ""),
            patch.object(monitoring, "logfire") as mock_logfire,
        ):
            assert monitoring.initialize_logfire() is False

        mock_logfire.configure.assert_not_called()

    def test_enabled_instruments_app_and_engine(self):
        app = Mock()
        engine = Mock()
        with (
            patch.object(monitoring, "LOGFIRE_ENABLED", True),
            patch.object(monitoring, "LOGFIRE_TOKEN", "token"),
            patch.object(monitoring, "logfire") as mock_logfire,
        ):
            assert monitoring.initialize_logfire(app=app, engine=engine) is True

        mock_logfire.configure.assert_called_once()
        assert mock_logfire.configure.call_args.kwargs["token"] == "token"
        mock_logfire.instrument_sqlalchemy.assert_called_once_with(engine=engine.sync_engine)
        mock_logfire.instrument_fastapi.assert_called_once_with(app)
        assert monitoring.is_logfire_configured() is True

    def test_instrumentation_failure_is_not_fatal(self):
        with (
            patch.object(monitoring, "LOGFIRE_ENABLED", True),
            patch.object(monitoring, "LOGFIRE_TOKEN", "token"),
            patch.object(monitoring, "logfire") as mock_logfire,
        ):
            mock_logfire.instrument_fastapi.side_effect = RuntimeError("boom")
            assert monitoring.initialize_logfire(app=Mock()) is True


class TestLogApiRequest:
    def test_not_sent_to_logfire_when_unconfigured(self):
        monitoring._logfire_configured = False
        with patch.object(monitoring, "logfire") as mock_logfire:
            monitoring.log_api_request("GET", "/api/tasks", 200, 3.2)

        mock_logfire.info.assert_not_called()

    def test_sent_to_logfire_when_configured(self):
        monitoring._logfire_configured = True
        with patch.object(monitoring, "logfire") as mock_logfire:
            monitoring.log_api_request("POST", "/api/notes", 201, 12.5)

        mock_logfire.info.assert_called_once()
        kwargs = mock_logfire.info.call_args.kwargs
        assert kwargs["method"] == "POST"
        assert kwargs["status_code"] == 201
