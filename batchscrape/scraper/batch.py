"""Batch orchestrator: scrape many URLs concurrently and settle them all.

Every URL gets its own task and its own deadline.  The batch waits for all
of them, so its latency is that of the slowest URL.  Outcomes come back in
input order regardless of completion order.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, List, Sequence

from batchscrape.scraper.errors import ClientInputError, error_message
from batchscrape.scraper.fetcher import build_client
from batchscrape.scraper.models import ScrapeFailure, ScrapeOutcome
from batchscrape.scraper.scraper import scrape_url

logger = logging.getLogger(__name__)

UNKNOWN_URL_PLACEHOLDER = "Unknown URL (unexpected error)"
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred during scraping."


def validate_url_list(urls: Any) -> List[str]:
    """Check the shape of a batch request and return it as a list of strings.

    Non-string items are coerced with ``str()``; they then fail at fetch time
    like any other unusable URL.

    Raises:
        ClientInputError: If *urls* is missing, not a list/tuple, or empty.
    """
    if not urls or not isinstance(urls, (list, tuple)):
        raise ClientInputError()
    return [u if isinstance(u, str) else str(u) for u in urls]


def _settle(result: Any) -> ScrapeOutcome:
    if isinstance(result, BaseException):
        logger.error("Unexpected scraping error: %r", result)
        return ScrapeFailure(
            url=UNKNOWN_URL_PLACEHOLDER,
            error=str(result) or UNEXPECTED_ERROR_MESSAGE,
        )
    return result


async def scrape_all(urls: Sequence[str], timeout: float | None = None) -> List[ScrapeOutcome]:
    """Scrape every URL in *urls* concurrently.

    Args:
        urls: Non-empty, already validated sequence (see
            :func:`validate_url_list`).  Duplicates are scraped independently.
        timeout: Per-URL deadline in seconds; ``settings.request_timeout``
            when omitted.

    Returns:
        One outcome per input URL, in input order.
    """
    logger.info("Scraping batch of %d URL(s)", len(urls))

    results: List[Any] | None = None
    try:
        async with build_client() as client:
            tasks = [scrape_url(url, client=client, timeout=timeout) for url in urls]
            results = await asyncio.gather(*tasks, return_exceptions=True)
    except Exception as exc:
        # Raised while opening or closing the shared client.
        logger.error("Shared HTTP client failed: %r", exc)
        if results is None:
            return [ScrapeFailure(url=url, error=error_message(exc)) for url in urls]

    outcomes = [_settle(result) for result in results]
    failed = sum(1 for o in outcomes if o.status == ScrapeFailure.status)
    logger.info(
        "Batch finished: %d succeeded, %d failed", len(outcomes) - failed, failed
    )
    return outcomes


def scrape_all_sync(urls: Sequence[str], timeout: float | None = None) -> List[ScrapeOutcome]:
    """Blocking wrapper around :func:`scrape_all` for synchronous callers."""
    return asyncio.run(scrape_all(urls, timeout=timeout))
