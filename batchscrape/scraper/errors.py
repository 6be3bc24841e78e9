"""Exception types raised inside the scraper.

Only :class:`ClientInputError` ever reaches a caller; the fetch errors are
converted into :class:`~batchscrape.scraper.models.ScrapeFailure` outcomes
by :func:`~batchscrape.scraper.scraper.scrape_url`.
"""

from __future__ import annotations

INVALID_URL_LIST_MESSAGE = "Please provide an array of URLs in the request body."
TIMEOUT_MESSAGE = "Request timed out"


class ScrapeError(Exception):
    """Base class for all scraper errors."""


class ClientInputError(ScrapeError):
    """The batch request itself is malformed; nothing was scraped."""

    def __init__(self, message: str = INVALID_URL_LIST_MESSAGE) -> None:
        super().__init__(message)


class FetchTimeout(ScrapeError):
    """The per-URL deadline expired before the response completed."""

    def __init__(self, url: str) -> None:
        super().__init__(TIMEOUT_MESSAGE)
        self.url = url


class FetchHTTPError(ScrapeError):
    """The server answered with a status outside 200-299."""

    def __init__(self, url: str, status_code: int, reason: str) -> None:
        super().__init__(f"Failed to fetch {url}: {status_code} {reason}")
        self.url = url
        self.status_code = status_code
        self.reason = reason


def error_message(exc: BaseException) -> str:
    """Return ``str(exc)``, or the exception's class name when that is blank."""
    return str(exc) or exc.__class__.__name__
