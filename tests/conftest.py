"""Shared fixtures: a test app wired to a fake credential service."""

import json
import logging
from typing import Callable, List

import httpx
import pytest
from fastapi.testclient import TestClient

from config.http_client import get_http_client
from config.settings import Settings
from controller.controller_dependencies import get_settings
from main import app

TEST_TOKEN = "test-token"
TEST_BASE_URL = "https://verify.test"


@pytest.fixture(autouse=True)
def setup_logging():
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(levelname)s - %(name)s - %(message)s",
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    return logging.getLogger()


class FakeUpstream:
    """
    Records every outbound request and answers through `handler`.
    Default answer is 200 with an empty JSON object.
    """

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.handler: Callable[[httpx.Request], object] = lambda request: httpx.Response(
            200, json={}
        )

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.handler(request)
        if not isinstance(response, httpx.Response):
            response = await response
        return response

    def json_bodies(self) -> list:
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


def _make_settings(token) -> Settings:
    return Settings(
        _env_file=None,
        DHOLAKPUR_API_TOKEN=token,
        DHOLAKPUR_API_URL=TEST_BASE_URL,
    )


@pytest.fixture
def make_client(upstream):
    """Build a TestClient; pass token=None to simulate a missing secret."""

    def _build(token=TEST_TOKEN) -> TestClient:
        fake_http = httpx.AsyncClient(transport=httpx.MockTransport(upstream))
        app.dependency_overrides[get_settings] = lambda: _make_settings(token)
        app.dependency_overrides[get_http_client] = lambda: fake_http
        return TestClient(app)

    yield _build
    app.dependency_overrides.clear()


@pytest.fixture
def client(make_client) -> TestClient:
    return make_client()
