from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from movies_backend.config import GatewayConfig

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures" / "tmdb"


def load_fixture(name: str) -> Any:
    return json.loads((FIXTURES_DIR / name).read_text(encoding="utf-8"))


class FakeResponse:
    def __init__(self, status_code: int = 200, text: str = "") -> None:
        self.status_code = status_code
        self.text = text
        self.headers: dict[str, str] = {}

    def json(self) -> Any:
        return json.loads(self.text)


class FakeSession:
    """Stands in for `requests.Session`; records every GET and replays queued responses."""

    def __init__(self, responses: list[FakeResponse | Exception] | None = None) -> None:
        self.responses = list(responses or [])
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    def queue(self, status_code: int = 200, *, body: Any = None, text: str | None = None) -> None:
        if text is None:
            text = "" if body is None else json.dumps(body)
        self.responses.append(FakeResponse(status_code, text))

    def get(self, url, params=None, headers=None, timeout=None):  # noqa: ANN001
        self.calls.append({"url": url, "params": dict(params or {}), "headers": dict(headers or {}), "timeout": timeout})
        if not self.responses:
            return FakeResponse(200, "{}")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def gateway_config() -> GatewayConfig:
    return GatewayConfig(
        base_url="https://tmdb.test",
        api_version=3,
        bearer_token="bearer-secret",
        api_key="legacy-key",
        timeout_seconds=5.0,
    )


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def tmdb_fixture():
    return load_fixture
