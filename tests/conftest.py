"""
Pytest fixtures for the job search proxy tests.
"""

import json
import os

# IMPORTANT: Set environment variables BEFORE any imports from backend
# so Settings picks them up when first loaded.
os.environ["MINO_API_KEY"] = "test-mino-key"
os.environ["MINO_API_URL"] = "https://mino.test/v1/automation/run-sse"
os.environ["LOG_LEVEL"] = "DEBUG"

import httpx
import pytest
from fastapi.testclient import TestClient


def sse_line(event: dict) -> str:
    """Encode one event the way Mino frames it."""
    return f"data: {json.dumps(event)}\n\n"


def make_transport(chunks: list[str], status_code: int = 200, requests: list | None = None, reads: list | None = None):
    """
    Build a MockTransport that streams `chunks` as the response body.

    Every request is appended to `requests`; every chunk handed out is
    appended to `reads`.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        if requests is not None:
            requests.append(request)

        async def body():
            for chunk in chunks:
                if reads is not None:
                    reads.append(chunk)
                yield chunk.encode("utf-8")

        return httpx.Response(status_code, content=body())

    return httpx.MockTransport(handler)


@pytest.fixture
def app():
    from backend.api.app import app

    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """FastAPI test client fixture."""
    return TestClient(app)


@pytest.fixture
def mock_mino(app):
    """
    Route the outbound Mino call to a simulated stream.

    Call it with the chunks to stream; it returns the list that records
    outbound requests.
    """
    from backend.tools.mino import get_http_client

    requests: list[httpx.Request] = []

    def install(chunks: list[str], status_code: int = 200, reads: list | None = None):
        transport = make_transport(chunks, status_code, requests, reads)

        async def override():
            async with httpx.AsyncClient(transport=transport) as http_client:
                yield http_client

        app.dependency_overrides[get_http_client] = override
        return requests

    return install


@pytest.fixture
def failing_mino(app):
    """Make the outbound Mino call raise a transport error."""
    from backend.tools.mino import get_http_client

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    async def override():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http_client:
            yield http_client

    app.dependency_overrides[get_http_client] = override


@pytest.fixture
def listings():
    return [
        {
            "title": "Product Manager",
            "company": "Google",
            "location": "San Francisco, CA",
            "salary": "$90,000 - $120,000/year",
            "url": "https://www.linkedin.com/jobs/view/123456",
            "postedDate": "1 day ago",
        },
        {
            "title": "Associate Product Manager",
            "company": "Stripe",
            "location": "New York, NY",
            "salary": "Not listed",
            "url": "https://www.linkedin.com/jobs/view/654321",
            "postedDate": "3 days ago",
        },
    ]
