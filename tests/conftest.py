"""Shared test fixtures.

Provides a ``backend`` fake of the Workstream REST API (served through
``httpx.MockTransport``) and a ``test_client`` for the FastAPI gateway.
"""

from collections.abc import Generator
from typing import Any

import httpx
import pytest
from fastapi.testclient import TestClient

import workstream.api.client as client_mod
from workstream.api.client import ApiClient

API_BASE = "http://api.test/api/v1"
TOKEN = "session-token"
AUTH = {"Authorization": f"Bearer {TOKEN}"}


class FakeBackend:
    """Canned REST API responses keyed by method and endpoint.

    Endpoints are matched on the path relative to ``API_BASE`` plus the
    query string, exactly as the client builds them.
    """

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], Any] = {}
        self.requests: list[httpx.Request] = []

    def add(self, method: str, endpoint: str, json: Any = None, status: int = 200) -> None:
        self.routes[(method, endpoint)] = (status, json)

    def add_text(self, method: str, endpoint: str, text: str, status: int = 200) -> None:
        """Serve a non-JSON body, such as a proxy's HTML error page."""
        self.routes[(method, endpoint)] = (status, text)

    def fail(self, method: str, endpoint: str, error: Exception) -> None:
        self.routes[(method, endpoint)] = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        endpoint = request.url.raw_path.decode().removeprefix("/api/v1")
        route = self.routes.get((request.method, endpoint))
        if route is None:
            return httpx.Response(404, json={"message": f"No route for {endpoint}"})
        if isinstance(route, Exception):
            raise route
        status, body = route
        if body is None:
            return httpx.Response(status)
        if isinstance(body, str):
            return httpx.Response(status, text=body)
        return httpx.Response(status, json=body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def endpoints(self) -> list[str]:
        return [
            f"{r.method} {r.url.raw_path.decode().removeprefix('/api/v1')}"
            for r in self.requests
        ]


@pytest.fixture()
def backend() -> Generator[FakeBackend, None, None]:
    """Route the process-wide API client to a fresh ``FakeBackend``."""
    fake = FakeBackend()
    client_mod._client = ApiClient(API_BASE, transport=httpx.MockTransport(fake.handler))
    yield fake
    client_mod.reset_api_client()


@pytest.fixture()
def test_client(backend: FakeBackend) -> Generator[TestClient, None, None]:
    """Provide a FastAPI TestClient wired to the fake backend."""
    from workstream.main import app

    with TestClient(app) as client:
        yield client


def make_program(**overrides: Any) -> dict[str, Any]:
    program = {
        "id": "prog-1",
        "title": "Data Engineering Bootcamp",
        "slug": "data-engineering",
        "status": "OPEN",
        "applicationFee": 0,
        "minEducation": "Bachelor's degree",
        "requiredGrades": {"mathematics": "B"},
        "additionalRequirements": ["Laptop"],
        "university": {"id": "uni-1", "name": "Lagos Tech"},
        "employer": {"id": "emp-1", "name": "Acme Data"},
        "_count": {"applications": 4},
    }
    program.update(overrides)
    return program


def make_application(**overrides: Any) -> dict[str, Any]:
    application = {
        "id": "app-1",
        "applicationNumber": "WS-0001",
        "status": "SUBMITTED",
        "createdAt": "2026-01-05T10:00:00Z",
        "program": {"id": "prog-1", "title": "Data Engineering Bootcamp"},
    }
    application.update(overrides)
    return application
