"""
Shared fixtures: a fake set of business-support services on top of
httpx.MockTransport.
"""
import json

import httpx
import pytest

from bssreport.config import AuthContext
from bssreport.rpc import RpcClient


class FakeServices:
    """Routes `/<service>/<method>` to canned responses and records each call."""

    def __init__(self):
        self.routes = {}
        self.calls = []

    def on(self, service, method, handler):
        """`handler` is a dict (returned as-is), an httpx.Response, or a callable(payload)."""
        self.routes[f"/{service}/{method}"] = handler

    def handle(self, request: httpx.Request) -> httpx.Response:
        payload = json.loads(request.content or b"{}")
        self.calls.append((request.url.path, payload, request.headers))
        handler = self.routes.get(request.url.path)
        if handler is None:
            return httpx.Response(404, json={"code": "unimplemented", "message": request.url.path})
        if callable(handler):
            handler = handler(payload)
        if isinstance(handler, httpx.Response):
            return handler
        return httpx.Response(200, json=handler)

    def client(self, auth, base_url="http://bss.test"):
        return RpcClient(base_url, auth, transport=httpx.MockTransport(self.handle))

    def paths(self):
        return [path for path, _, _ in self.calls]


@pytest.fixture
def auth():
    return AuthContext(token="s.test-token", actor_id="fo-42")


@pytest.fixture
def fake():
    return FakeServices()


BSS_ENV = ("VAULT_TOKEN", "FIBER_OPERATOR_ID", "RPC_TIMEOUT",
           "WORKORDER_URL", "SUBSCRIPTION_URL", "ACCESSPOINT_URL", "INVENTORY_URL")


def clear_bss_env(monkeypatch):
    # setenv first so undo also removes values a .env file loaded later
    for name in BSS_ENV:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture
def no_bss_env(monkeypatch):
    clear_bss_env(monkeypatch)
