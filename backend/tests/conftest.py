import json
from typing import Any, Dict, List, Optional

import httpx
import pytest

from app.schemas.github import RemoteEvent


class FakeResponse:
    """Stands in for a streamed httpx.Response and counts closes."""

    def __init__(self, status_code: int = 200, body: bytes = b"", read_error: Optional[Exception] = None):
        self.status_code = status_code
        self.body = body
        self.read_error = read_error
        self.read_count = 0
        self.close_count = 0

    async def aread(self) -> bytes:
        self.read_count += 1
        if self.read_error is not None:
            raise self.read_error
        return self.body

    async def aclose(self) -> None:
        self.close_count += 1


class FakeClient:
    def __init__(self, events: Optional[List[RemoteEvent]] = None, response: Any = None, error: Optional[Exception] = None):
        self.events = events or []
        self.response = response if response is not None else FakeResponse()
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    async def list_events_performed_by_user(self, username, public_only, opts=None):
        self.calls.append({"username": username, "public_only": public_only, "opts": opts})
        if self.error is not None:
            raise self.error
        return self.events, self.response


def make_event_data(event_id: str = "1", payload: Any = None, **overrides) -> Dict[str, Any]:
    data = {
        "id": event_id,
        "type": "PushEvent",
        "public": True,
        "actor": {
            "id": 583231,
            "login": "octocat",
            "display_login": "octocat",
            "avatar_url": "https://avatars.githubusercontent.com/u/583231?",
            "url": "https://api.github.com/users/octocat",
        },
        "repo": {
            "id": 1296269,
            "name": "octocat/Hello-World",
            "url": "https://api.github.com/repos/octocat/Hello-World",
        },
        "created_at": "2024-05-01T12:34:56Z",
    }
    if payload is not None:
        data["payload"] = payload
    data.update(overrides)
    return data


def make_event(event_id: str = "1", payload: Any = None, **overrides) -> RemoteEvent:
    """Build a RemoteEvent; a dict payload is stored as compact JSON text."""
    event = RemoteEvent.model_validate(make_event_data(event_id, **overrides))
    if isinstance(payload, str):
        event.raw_payload = payload
    elif payload is not None:
        event.raw_payload = json.dumps(payload, separators=(",", ":"))
    return event


@pytest.fixture
def octocat_events() -> List[RemoteEvent]:
    """Three events for octocat, only the first carrying a payload."""
    return [
        make_event("101", payload={"ref": "main"}),
        make_event("102", type="WatchEvent"),
        make_event("103", type="ForkEvent", created_at="2024-04-30T08:00:00+02:00"),
    ]


@pytest.fixture
def mock_http_client():
    """Build an httpx.AsyncClient backed by a MockTransport handler."""

    def factory(handler, **kwargs) -> httpx.AsyncClient:
        client = httpx.AsyncClient(
            transport=httpx.MockTransport(handler),
            base_url=kwargs.pop("base_url", "https://api.github.com"),
            **kwargs,
        )
        return client

    return factory
