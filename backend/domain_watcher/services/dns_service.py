from __future__ import annotations

import logging
from typing import Dict

import dns.rcode
import httpx
from pydantic import ValidationError

from ..config import DOMAIN_SEPARATOR, WatchConfig
from ..models import DnsJsonResponse, LookupOutcome

logger = logging.getLogger(__name__)

INVALID_DOMAIN = "Invalid domain name"
FORMAT_ERROR = "DNS query format error"
SERVER_FAILURE = "DNS server failed to respond"
TIMEOUT = "timeout"
MALFORMED_RESPONSE = "DNS lookup error: malformed response"

# Only NXDOMAIN signals availability; NOTIMP and REFUSED are kept as "taken".
STATUS_OUTCOMES: Dict[int, LookupOutcome] = {
    dns.rcode.Rcode.NOERROR: LookupOutcome.unavailable(),
    dns.rcode.Rcode.FORMERR: LookupOutcome.failed(FORMAT_ERROR),
    dns.rcode.Rcode.SERVFAIL: LookupOutcome.failed(SERVER_FAILURE),
    dns.rcode.Rcode.NXDOMAIN: LookupOutcome.available(),
    dns.rcode.Rcode.NOTIMP: LookupOutcome.unavailable(),
    dns.rcode.Rcode.REFUSED: LookupOutcome.unavailable(),
}


def classify_status(status: int) -> LookupOutcome:
    return STATUS_OUTCOMES.get(status, LookupOutcome.unavailable())


def _sanitize(domain: object) -> str | None:
    if not isinstance(domain, str):
        return None
    sanitized = domain.strip().lower()
    if not sanitized or DOMAIN_SEPARATOR in sanitized or any(char.isspace() for char in sanitized):
        return None
    return sanitized


async def _query(domain: str, client: httpx.AsyncClient, config: WatchConfig) -> LookupOutcome:
    try:
        response = await client.get(
            config.doh_endpoint,
            params={"name": domain},
            headers={"Accept": "application/json"},
            timeout=config.lookup_timeout,
        )
    except httpx.TimeoutException:
        return LookupOutcome.failed(TIMEOUT)
    except httpx.HTTPError as exc:
        return LookupOutcome.failed(f"DNS lookup error: {str(exc) or type(exc).__name__}")

    if not response.is_success:
        return LookupOutcome.failed(f"DNS lookup failed: {response.reason_phrase} ({response.status_code})")

    try:
        payload = DnsJsonResponse.model_validate_json(response.content)
    except ValidationError:
        return LookupOutcome.failed(MALFORMED_RESPONSE)

    return classify_status(payload.Status)


async def resolve_availability(domain: str, client: httpx.AsyncClient, config: WatchConfig) -> LookupOutcome:
    """Look up ``domain`` over DNS-over-HTTPS and classify the answer.

    Every fault is folded into a failed outcome so callers never see an exception.
    """
    sanitized = _sanitize(domain)
    if sanitized is None:
        logger.warning("Rejected invalid domain name %r", domain)
        return LookupOutcome.failed(INVALID_DOMAIN)

    try:
        outcome = await _query(sanitized, client, config)
    except Exception as exc:
        logger.exception("Unexpected error looking up %s", sanitized)
        outcome = LookupOutcome.failed(f"DNS lookup error: {str(exc) or type(exc).__name__}")

    if outcome.is_failed:
        logger.warning("Lookup for %s failed: %s", sanitized, outcome.reason)
    else:
        logger.debug("Lookup for %s: %s", sanitized, outcome.status.value)
    return outcome
