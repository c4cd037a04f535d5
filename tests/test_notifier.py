import httpx
import pytest

from domain_watcher.services.notifier import format_availability_message, notify_available


def test_message_lists_domains_in_order():
    message = format_availability_message(["b.io", "a.com"])
    assert message == "The following domains are available: b.io, a.com"


@pytest.mark.asyncio
async def test_nothing_sent_for_empty_list(network, make_config):
    async with network.client() as client:
        delivered = await notify_available([], client, make_config())
    assert delivered is False
    assert network.webhook_posts == []


@pytest.mark.asyncio
async def test_posts_json_content(network, make_config):
    async with network.client() as client:
        delivered = await notify_available(["a.com"], client, make_config())
    assert delivered is True
    assert network.webhook_posts == [{"content": "The following domains are available: a.com"}]


@pytest.mark.asyncio
async def test_missing_webhook_skips_delivery(network, make_config):
    async with network.client() as client:
        delivered = await notify_available(["a.com"], client, make_config(webhook_url=None))
    assert delivered is False
    assert network.webhook_posts == []


@pytest.mark.asyncio
async def test_rejected_delivery_is_swallowed(network, make_config):
    network.webhook_status = 404
    async with network.client() as client:
        delivered = await notify_available(["a.com"], client, make_config())
    assert delivered is False
    assert len(network.webhook_posts) == 1


@pytest.mark.asyncio
async def test_transport_error_is_swallowed(make_config):
    def handler(request):
        raise httpx.ConnectError("webhook unreachable")

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        delivered = await notify_available(["a.com"], client, make_config())
    assert delivered is False
