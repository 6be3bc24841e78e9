"""Single-URL scraper: fetch, parse, extract, and wrap the result."""

from __future__ import annotations

import logging

import httpx

from batchscrape.scraper.errors import FetchHTTPError, FetchTimeout, error_message
from batchscrape.scraper.fetcher import build_client, fetch_html
from batchscrape.scraper.models import ScrapeFailure, ScrapeOutcome, ScrapeSuccess
from batchscrape.scraper.policies import extract_records

logger = logging.getLogger(__name__)


async def _scrape(client: httpx.AsyncClient, url: str, timeout: float | None) -> ScrapeOutcome:
    try:
        html = await fetch_html(client, url, timeout=timeout)
        records = extract_records(html, url)
    except FetchTimeout as exc:
        logger.warning("Timed out scraping %s", url)
        return ScrapeFailure(url=url, error=str(exc))
    except FetchHTTPError as exc:
        logger.warning("%s", exc)
        return ScrapeFailure(url=url, error=str(exc))
    except Exception as exc:
        logger.warning("Error scraping %s: %r", url, exc)
        return ScrapeFailure(url=url, error=error_message(exc))

    logger.info("Scraped %d record(s) from %s", len(records), url)
    return ScrapeSuccess(url=url, records=records)


async def scrape_url(
    url: str,
    client: httpx.AsyncClient | None = None,
    timeout: float | None = None,
) -> ScrapeOutcome:
    """Scrape *url* and return exactly one outcome; never raises.

    Args:
        url: Absolute http(s) URL.  Not validated here; malformed URLs
            surface as failures from httpx.
        client: Shared client for batch use.  When omitted a client is
            created for this call and closed afterwards.
        timeout: Per-URL deadline in seconds; ``settings.request_timeout``
            when omitted.
    """
    if client is not None:
        return await _scrape(client, url, timeout)

    try:
        async with build_client() as own_client:
            return await _scrape(own_client, url, timeout)
    except Exception as exc:
        # Raised while opening or closing the client itself.
        logger.warning("Client error for %s: %r", url, exc)
        return ScrapeFailure(url=url, error=error_message(exc))
