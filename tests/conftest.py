import httpx
import pytest
from fastapi.testclient import TestClient

from hashhunt.api.deps import get_oneinch_client, get_twitter_client
from hashhunt.main import app
from hashhunt.providers.oneinch import OneInchClient
from hashhunt.providers.twitter import TwitterClient

WALLET = "0xd8dA6BF26964aF9D7eEd9e03E53415D37aA96045"
ONEINCH_BASE = "https://api.1inch.test"
TWITTER_BASE = "https://api.twitter.test"


def respond(payload=None, status=200):
    """Route handler returning ``payload`` as JSON with ``status``."""

    def _handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status, json=payload)

    return _handler


def fail_with(exc_type, message="boom"):
    def _handler(request: httpx.Request) -> httpx.Response:
        raise exc_type(message, request=request)

    return _handler


class Upstream:
    """Path-keyed fake upstream for ``httpx.MockTransport`` that records requests."""

    def __init__(self):
        self.routes = {}
        self.requests = []

    def add(self, path, handler):
        self.routes[path] = handler

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"message": f"no route for {request.url.path}"})
        return route(request)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def paths(self):
        return [request.url.path for request in self.requests]


@pytest.fixture
def upstream():
    return Upstream()


@pytest.fixture
def oneinch(upstream):
    return OneInchClient(api_key="test-key", base_url=ONEINCH_BASE, transport=upstream.transport())


@pytest.fixture
def oneinch_without_key(upstream):
    return OneInchClient(api_key="", base_url=ONEINCH_BASE, transport=upstream.transport())


@pytest.fixture
def twitter(upstream):
    return TwitterClient(bearer_token="test-token", base_url=TWITTER_BASE, transport=upstream.transport())


@pytest.fixture
def api_client(oneinch, twitter):
    app.dependency_overrides[get_oneinch_client] = lambda: oneinch
    app.dependency_overrides[get_twitter_client] = lambda: twitter
    app.state.token_cache.clear()
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
    app.state.token_cache.clear()
