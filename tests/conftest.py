"""Shared fixtures: an in-memory stand-in for the Zendesk webhooks API."""

import json
from typing import Any, Dict, List

import httpx
import pytest

from zendesk_webhooks import HTTPTransport, WebhookClient, api_token_auth

BASE_URL = "https://acme.zendesk.com/api/v2"
WEBHOOKS_PREFIX = "/api/v2/webhooks"


class FakeWebhookServer:
    """Serves the webhooks endpoints from a dict, recording every request."""

    def __init__(self):
        self.webhooks: Dict[str, Dict[str, Any]] = {}
        self.requests: List[httpx.Request] = []
        self._next_id = 1

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        rest = request.url.path[len(WEBHOOKS_PREFIX) :].strip("/")
        parts = rest.split("/") if rest else []

        if not parts:
            if request.method == "GET":
                return httpx.Response(
                    200,
                    json={
                        "webhooks": list(self.webhooks.values()),
                        "meta": {
                            "has_more": False,
                            "after_cursor": None,
                            "before_cursor": None,
                        },
                        "links": {"prev": None, "next": None},
                    },
                )
            if request.method == "POST":
                hook = json.loads(request.content)["webhook"]
                hook["id"] = f"01GDXYD7ZTWYP2Q0BBWNT6ZX{self._next_id:02d}"
                hook["created_at"] = "2024-01-01T00:00:00Z"
                hook["created_by"] = "1001"
                self._next_id += 1
                self.webhooks[hook["id"]] = hook
                return httpx.Response(201, json={"webhook": hook})

        webhook_id = parts[0] if parts else ""
        if webhook_id not in self.webhooks:
            return httpx.Response(
                404,
                json={"errors": [{"code": "WebhookNotFound", "title": "Not found"}]},
            )

        if len(parts) == 2 and parts[1] == "signing_secret":
            return httpx.Response(
                200,
                json={"signing_secret": {"algorithm": "sha256", "secret": "abc123"}},
            )
        if request.method == "GET":
            return httpx.Response(200, json={"webhook": self.webhooks[webhook_id]})
        if request.method == "PUT":
            hook = json.loads(request.content)["webhook"]
            self.webhooks[webhook_id].update(hook)
            return httpx.Response(204)
        if request.method == "DELETE":
            del self.webhooks[webhook_id]
            return httpx.Response(204)
        return httpx.Response(405)


def make_client(handler) -> WebhookClient:
    """Build a WebhookClient whose requests are answered by ``handler``."""
    transport = HTTPTransport(
        BASE_URL,
        auth=api_token_auth("agent@example.com", "secret-token"),
        client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )
    return WebhookClient(transport)


@pytest.fixture
def server():
    """Fresh fake webhooks API."""
    return FakeWebhookServer()


@pytest.fixture
def client(server):
    """WebhookClient wired to the fake webhooks API."""
    return make_client(server)


@pytest.fixture
def client_factory():
    """Factory building a WebhookClient around a custom request handler."""
    return make_client
