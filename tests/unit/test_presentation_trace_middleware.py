"""Unit tests for TraceMiddleware.

Tests cover:
- Incoming X-Trace-Id is reused and echoed
- A trace id is generated when none is sent
- get_trace_id() sees the id inside the request and None outside
"""

from uuid import UUID

import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from src.presentation.routers.api.middleware.trace_middleware import (
    TRACE_ID_HEADER,
    TraceMiddleware,
    get_trace_id,
)


@pytest.fixture
def client():
    app = FastAPI()
    app.add_middleware(TraceMiddleware)

    @app.get("/trace")
    async def trace(request: Request) -> dict[str, str | None]:
        return {"context": get_trace_id(), "state": request.state.trace_id}

    return TestClient(app)


@pytest.mark.unit
class TestTraceMiddleware:
    """Test trace id propagation."""

    def test_reuses_incoming_trace_id(self, client):
        response = client.get("/trace", headers={TRACE_ID_HEADER: "abc-123"})

        assert response.headers[TRACE_ID_HEADER] == "abc-123"
        assert response.json() == {"context": "abc-123", "state": "abc-123"}

    def test_generates_trace_id(self, client):
        response = client.get("/trace")

        trace_id = response.headers[TRACE_ID_HEADER]
        assert UUID(trace_id)
        assert response.json()["context"] == trace_id

    def test_no_trace_id_outside_request(self, client):
        client.get("/trace")

        assert get_trace_id() is None
