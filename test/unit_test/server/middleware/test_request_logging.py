"""Unit tests for the request logging middleware."""

from unittest.mock import patch

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from unitracker.server.middleware import RequestLoggingMiddleware

MIDDLEWARE_MODULE = "unitracker.server.middleware.request_logging"


@pytest.fixture
def app() -> FastAPI:
    app = FastAPI()
    app.add_middleware(RequestLoggingMiddleware)

    @app.get("/ok")
    async def ok():
        return {"ok": True}

    @app.get("/boom")
    async def boom():
        raise RuntimeError("boom")

    return app


async def test_adds_process_time_header_and_logs(app):
    with patch(f"{MIDDLEWARE_MODULE}.log_api_request") as mock_log:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
            response = await client.get("/ok")

    assert response.status_code == 200
    assert float(response.headers["X-Process-Time"]) >= 0
    kwargs = mock_log.call_args.kwargs
    assert kwargs["method"] == "GET"
    assert kwargs["path"] == "/ok"
    assert kwargs["status_code"] == 200


async def test_slow_request_warns(app):
    with (
        patch(f"{MIDDLEWARE_MODULE}.log_api_request"),
        patch(f"{MIDDLEWARE_MODULE}.SLOW_REQUEST_MS", -1),
        patch(f"{MIDDLEWARE_MODULE}.logger") as mock_logger,
    ):
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
            await client.get("/ok")

    mock_logger.warning.assert_called_once()
    assert "Slow API request" in mock_logger.warning.call_args[0][0]


async def test_failed_request_logged_as_500(app):
    with (
        patch(f"{MIDDLEWARE_MODULE}.log_api_request") as mock_log,
        patch(f"{MIDDLEWARE_MODULE}.logger") as mock_logger,
    ):
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
            with pytest.raises(RuntimeError):
                await client.get("/boom")

    mock_logger.error.assert_called_once()
    assert mock_log.call_args.kwargs["status_code"] == 500
