"""Time-bounded async HTTP fetcher."""

from __future__ import annotations

import asyncio
import logging

import httpx

from batchscrape.config import settings
from batchscrape.scraper.errors import FetchHTTPError, FetchTimeout

logger = logging.getLogger(__name__)


def build_client() -> httpx.AsyncClient:
    """Return an ``AsyncClient`` with no cap on simultaneous connections.

    The deadline is enforced per request by :func:`fetch_html`, so the
    client itself carries no timeout.
    """
    return httpx.AsyncClient(
        headers={"User-Agent": settings.user_agent},
        timeout=None,
        follow_redirects=True,
        limits=httpx.Limits(max_connections=None, max_keepalive_connections=None),
    )


async def _get_text(client: httpx.AsyncClient, url: str) -> str:
    response = await client.get(url)
    if not response.is_success:
        raise FetchHTTPError(url, response.status_code, response.reason_phrase)
    return response.text


async def fetch_html(
    client: httpx.AsyncClient,
    url: str,
    timeout: float | None = None,
) -> str:
    """GET *url* and return its body as text.

    The whole exchange (headers and body) must finish within *timeout*
    seconds, defaulting to ``settings.request_timeout``.  On expiry the
    in-flight request is cancelled.

    Raises:
        FetchTimeout: If the deadline expires, or httpx reports a timeout.
        FetchHTTPError: If the response status is not 2xx.
        httpx.HTTPError: For DNS, connection, TLS and protocol failures.
    """
    deadline = settings.request_timeout if timeout is None else timeout
    logger.debug("GET %s (timeout %.1fs)", url, deadline)
    try:
        return await asyncio.wait_for(_get_text(client, url), timeout=deadline)
    except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
        raise FetchTimeout(url) from exc
