"""Pytest configuration and fixtures."""

import json

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from rechart.api.dependencies import get_reconciler
from rechart.db.base import Base, get_db
from rechart.llm.client import CompletionClient, LLMConfig
from rechart.llm.reconciler import Reconciler


class StubCompletionAPI:
    """Stand-in for the completion endpoint.

    Each model maps to either an (HTTP status, completion text) pair or an
    exception to raise. Every request is recorded.
    """

    def __init__(self, replies: dict | None = None, models: list[str] | None = None):
        self.replies = replies or {}
        self.models = models or ["grok-3-mini", "grok-3"]
        self.calls: list[str] = []
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if request.url.path.endswith("/models"):
            return httpx.Response(200, json={
                "object": "list",
                "data": [
                    {"id": m, "object": "model", "created": 0, "owned_by": "xai"}
                    for m in self.models
                ],
            })

        body = json.loads(request.content)
        model = body["model"]
        self.calls.append(model)

        reply = self.replies.get(model, (500, "no reply configured"))
        if isinstance(reply, Exception):
            raise reply

        status_code, content = reply
        if status_code >= 400:
            return httpx.Response(status_code, text=content)
        return httpx.Response(
            status_code,
            json={
                "id": f"chatcmpl-{len(self.calls)}",
                "object": "chat.completion",
                "created": 0,
                "model": model,
                "choices": [{
                    "index": 0,
                    "finish_reason": "stop",
                    "message": {"role": "assistant", "content": content},
                }],
            },
        )

    def reconciler(self, api_key: str = "test-key") -> Reconciler:
        config = LLMConfig(api_key=api_key)
        client = CompletionClient(config, transport=httpx.MockTransport(self.handler))
        return Reconciler(config, client=client)


@pytest.fixture
def stub_api() -> StubCompletionAPI:
    """Completion endpoint stub with no replies configured."""
    return StubCompletionAPI()


@pytest.fixture
def make_api():
    """Factory for completion endpoint stubs with canned replies."""
    return StubCompletionAPI


@pytest.fixture(scope="function")
def test_db():
    """Create test database with thread-safe SQLite."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestSession = sessionmaker(bind=engine)
    session = TestSession()
    yield session
    session.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def reconciler(stub_api) -> Reconciler:
    """Reconciler with no credential; any network call would hit the stub."""
    return stub_api.reconciler(api_key="")


@pytest.fixture
def client(test_db, reconciler):
    """Create test client with in-memory database and stubbed completion API."""
    from rechart.api.main import create_app

    app = create_app()

    def override_get_db():
        yield test_db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_reconciler] = lambda: reconciler

    with TestClient(app) as client:
        yield client


@pytest.fixture
def auth_headers() -> dict[str, str]:
    """Headers identifying a test user."""
    return {"X-User-ID": "user-1"}


@pytest.fixture
def bar_payload() -> dict:
    """Chart payload as sent over the wire."""
    return {
        "chartData": [
            {"category": "A", "value": 10},
            {"category": "B", "value": 20},
        ],
        "config": {"xKey": "category", "yKey": "value"},
        "title": "Bar Chart",
        "description": "Visualization of category, value data",
        "insights": "Chart shows relationship between category and value. Data contains 2 records.",
    }


@pytest.fixture
def flowchart_payload() -> dict:
    """Diagram payload as sent over the wire."""
    return {
        "mermaidCode": "graph TD\n    A[Start] --> B[End]",
        "title": "Flowchart Diagram",
        "description": "Simple flow",
        "diagramType": "flowchart",
    }
