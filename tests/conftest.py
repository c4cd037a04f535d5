import json

import httpx
import pytest

from domain_watcher.config import WatchConfig

DOH_ENDPOINT = "https://dns.test/resolve"
WEBHOOK_URL = "https://discord.test/api/webhooks/1/token"

_AsyncClient = httpx.AsyncClient


class FakeNetwork:
    """Answers DoH queries from canned statuses and records webhook posts."""

    def __init__(self):
        self.statuses = {}
        self.failures = {}
        self.dns_requests = []
        self.webhook_posts = []
        self.webhook_status = 204

    def handler(self, request: httpx.Request) -> httpx.Response:
        if request.url.host == "discord.test":
            self.webhook_posts.append(json.loads(request.content))
            return httpx.Response(self.webhook_status)

        self.dns_requests.append(request)
        name = request.url.params["name"]
        failure = self.failures.get(name)
        if isinstance(failure, Exception):
            raise failure
        if failure is not None:
            return failure
        return httpx.Response(200, json={"Status": self.statuses.get(name, 0)})

    def client(self) -> httpx.AsyncClient:
        return _AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def network():
    return FakeNetwork()


@pytest.fixture
def doh_endpoint():
    return DOH_ENDPOINT


@pytest.fixture
def webhook_url():
    return WEBHOOK_URL


@pytest.fixture
def make_config(doh_endpoint, webhook_url):
    def _make(domains=(), **overrides):
        values = {
            "domains": tuple(domains),
            "webhook_url": webhook_url,
            "doh_endpoint": doh_endpoint,
            "lookup_timeout": 2.0,
        }
        values.update(overrides)
        return WatchConfig(**values)

    return _make
