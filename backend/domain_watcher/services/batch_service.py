from __future__ import annotations

import asyncio
import logging
from typing import Dict, List, Sequence

import httpx

from ..config import WatchConfig
from ..models import BatchReport, DomainResult, LookupOutcome
from . import dns_service, notifier

logger = logging.getLogger(__name__)


async def evaluate_domains(domains: Sequence[str], client: httpx.AsyncClient, config: WatchConfig) -> BatchReport:
    semaphore = asyncio.Semaphore(config.max_concurrency)

    async def _probe(domain: str) -> LookupOutcome:
        async with semaphore:
            return await dns_service.resolve_availability(domain, client, config)

    outcomes: List[LookupOutcome] = await asyncio.gather(*(_probe(domain) for domain in domains))

    results: Dict[str, DomainResult] = {}
    for domain, outcome in zip(domains, outcomes):
        results.setdefault(domain, DomainResult.from_outcome(outcome))
    return BatchReport(results=results)


async def run_domain_check(config: WatchConfig, client: httpx.AsyncClient) -> BatchReport:
    report = await evaluate_domains(config.domains, client, config)
    available = report.available_domains
    logger.info(
        "Checked %d domain(s): %d available, errors=%s",
        len(report.results),
        len(available),
        report.has_errors,
    )
    await notifier.notify_available(available, client, config)
    return report
