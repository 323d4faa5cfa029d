"""
Unit tests for server exception handlers.

Tests cover domain error mapping, global exception handling and handler
registration.
"""

import json
from unittest.mock import Mock, patch

import pytest
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from unitracker.core.exceptions import InvalidSessionTimesError, TimerStateError, UniTrackerError
from unitracker.server.exception_handlers import setup_exception_handlers
from unitracker.server.exception_handlers.global_handler import (
    domain_exception_handler,
    global_exception_handler,
)

HANDLER_LOGGER = "unitracker.server.exception_handlers.global_handler.logger"


@pytest.fixture
def mock_request():
    """Create a mock request object."""
    request = Mock(spec=Request)
    request.method = "GET"
    request.url.path = "/api/tasks"
    request.query_params = {}
    request.client = Mock()
    request.client.host = "127.0.0.1"
    return request


class TestGlobalExceptionHandler:
    """Test suite for global exception handler."""

    async def test_logs_error(self, mock_request):
        with patch(HANDLER_LOGGER) as mock_logger:
            await global_exception_handler(mock_request, ValueError("Test error"))

        mock_logger.error.assert_called_once()
        call_args = mock_logger.error.call_args
        assert "Unhandled exception" in call_args[0][0]
        assert call_args[1]["extra"]["error_type"] == "ValueError"
        assert call_args[1]["extra"]["path"] == "/api/tasks"

    async def test_returns_500_json(self, mock_request):
        with patch(HANDLER_LOGGER):
            response = await global_exception_handler(mock_request, RuntimeError("Test error"))

        assert isinstance(response, JSONResponse)
        assert response.status_code == 500
        body = json.loads(response.body.decode())
        assert body["detail"] == "Internal server error"
        assert body["error_type"] == "RuntimeError"
        assert isinstance(body["error_id"], str) and body["error_id"]

    async def test_error_id_matches_log(self, mock_request):
        with patch(HANDLER_LOGGER) as mock_logger:
            response = await global_exception_handler(mock_request, RuntimeError("x"))

        body = json.loads(response.body.decode())
        assert mock_logger.error.call_args[1]["extra"]["error_id"] == body["error_id"]

    async def test_missing_client(self, mock_request):
        mock_request.client = None
        with patch(HANDLER_LOGGER) as mock_logger:
            await global_exception_handler(mock_request, RuntimeError("x"))

        assert mock_logger.error.call_args[1]["extra"]["client"] == "unknown"


class TestDomainExceptionHandler:
    @pytest.mark.parametrize(
        "exc",
        [
            UniTrackerError("bad"),
            TimerStateError("Cannot pause a timer that is idle"),
            InvalidSessionTimesError("Study session cannot end before it starts"),
        ],
    )
    async def test_maps_to_400(self, mock_request, exc):
        with patch(HANDLER_LOGGER):
            response = await domain_exception_handler(mock_request, exc)

        assert response.status_code == 400
        assert json.loads(response.body.decode()) == {"detail": exc.message}


def test_setup_registers_handlers():
    app = FastAPI()
    setup_exception_handlers(app)

    assert app.exception_handlers[UniTrackerError] is domain_exception_handler
    assert app.exception_handlers[Exception] is global_exception_handler
