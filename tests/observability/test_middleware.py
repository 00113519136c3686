"""Tests for request logging and correlation middleware."""

import logging

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from userdir.observability.correlation import get_correlation_id
from userdir.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

MIDDLEWARE_LOGGER = "userdir.observability.middleware"


@pytest.fixture
def client() -> TestClient:
    """Provide a bare app wrapped in both middlewares with a custom header."""
    app = FastAPI()

    @app.get("/users/search")
    async def search() -> dict:
        return {"correlation_id": get_correlation_id()}

    @app.get("/broken")
    async def broken() -> dict:
        raise RuntimeError("store offline")

    @app.get("/unavailable", status_code=503)
    async def unavailable() -> dict:
        return {}

    app.add_middleware(RequestLoggingMiddleware, header_name="X-Trace")
    app.add_middleware(CorrelationMiddleware, header_name="X-Trace")
    return TestClient(app, raise_server_exceptions=False)


def _records(caplog) -> list[logging.LogRecord]:
    return [r for r in caplog.records if r.name == MIDDLEWARE_LOGGER]


class TestCorrelationMiddleware:
    """Tests for correlation ID binding."""

    def test_inbound_id_is_bound_and_echoed(self, client) -> None:
        response = client.get("/users/search", headers={"X-Trace": "trace-7"})

        assert response.json() == {"correlation_id": "trace-7"}
        assert response.headers["X-Trace"] == "trace-7"

    def test_missing_id_is_generated(self, client) -> None:
        response = client.get("/users/search")

        generated = response.headers["X-Trace"]
        assert generated
        assert response.json() == {"correlation_id": generated}


class TestRequestLoggingMiddleware:
    """Tests for per-request log records."""

    def test_success_is_logged_without_query_string(self, client, caplog) -> None:
        with caplog.at_level(logging.INFO, logger=MIDDLEWARE_LOGGER):
            client.get("/users/search", params={"firstName": "Jhon"}, headers={"X-Trace": "t"})

        record = _records(caplog)[-1]
        assert record.levelno == logging.INFO
        assert record.getMessage() == "GET /users/search -> 200"
        assert record.status_code == "200"
        assert record.path == "/users/search"
        assert record.trace_origin == "caller"
        assert float(record.duration_ms) >= 0
        assert "Jhon" not in record.getMessage()

    def test_generated_trace_origin(self, client, caplog) -> None:
        with caplog.at_level(logging.INFO, logger=MIDDLEWARE_LOGGER):
            client.get("/users/search")

        assert _records(caplog)[-1].trace_origin == "generated"

    def test_server_error_status_is_a_warning(self, client, caplog) -> None:
        with caplog.at_level(logging.INFO, logger=MIDDLEWARE_LOGGER):
            client.get("/unavailable")

        record = _records(caplog)[-1]
        assert record.levelno == logging.WARNING
        assert record.status_code == "503"

    def test_unhandled_exception_is_logged_with_traceback(self, client, caplog) -> None:
        with caplog.at_level(logging.INFO, logger=MIDDLEWARE_LOGGER):
            response = client.get("/broken")

        assert response.status_code == 500
        record = _records(caplog)[-1]
        assert record.levelno == logging.ERROR
        assert record.error_type == "RuntimeError"
        assert record.exc_info is not None
