"""
Test suite for correlation ID middleware.

System role: Verification of request correlation propagation
"""

from fastapi import FastAPI
from fastapi.testclient import TestClient

from backend.observability.correlation import (
    CORRELATION_HEADER,
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from backend.observability.middleware import CorrelationMiddleware


def build_app() -> FastAPI:
    app = FastAPI()
    app.add_middleware(CorrelationMiddleware)

    @app.get("/echo")
    async def echo() -> dict:
        return {"correlation_id": get_correlation_id()}

    return app


class TestCorrelationMiddleware:
    """Test suite for CorrelationMiddleware."""

    def test_should_reuse_incoming_header(self) -> None:
        client = TestClient(build_app())

        response = client.get("/echo", headers={CORRELATION_HEADER: "abc-123"})

        assert response.json() == {"correlation_id": "abc-123"}
        assert response.headers[CORRELATION_HEADER] == "abc-123"

    def test_should_generate_id_when_missing(self) -> None:
        client = TestClient(build_app())

        response = client.get("/echo")

        generated = response.headers[CORRELATION_HEADER]
        assert generated
        assert response.json() == {"correlation_id": generated}


class TestCorrelationContext:
    """Test suite for the correlation context helpers."""

    def test_set_get_clear(self) -> None:
        value = set_correlation_id("fixed")
        assert value == "fixed"
        assert get_correlation_id() == "fixed"

        clear_correlation_id()
        assert get_correlation_id() == ""
