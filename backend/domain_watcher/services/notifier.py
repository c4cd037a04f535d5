from __future__ import annotations

import logging
from typing import Sequence

import httpx

from ..config import WatchConfig

logger = logging.getLogger(__name__)


def format_availability_message(domains: Sequence[str]) -> str:
    return f"The following domains are available: {', '.join(domains)}"


async def send_discord_message(message: str, client: httpx.AsyncClient, webhook_url: str, timeout: float) -> None:
    response = await client.post(webhook_url, json={"content": message}, timeout=timeout)
    response.raise_for_status()


async def notify_available(domains: Sequence[str], client: httpx.AsyncClient, config: WatchConfig) -> bool:
    """Post one message listing ``domains`` to the webhook.

    Delivery is best effort: failures are logged and reported through the
    return value only.
    """
    if not domains:
        return False
    if not config.webhook_url:
        logger.warning("No webhook configured; skipping notice for %d available domain(s)", len(domains))
        return False

    try:
        await send_discord_message(
            format_availability_message(domains),
            client,
            config.webhook_url,
            config.lookup_timeout,
        )
    except httpx.HTTPError as exc:
        logger.warning("Failed to deliver availability notice: %s", exc)
        return False

    logger.info("Sent availability notice for %s", ", ".join(domains))
    return True
