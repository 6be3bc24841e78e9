"""Scraper package — concurrent fetch & record extraction."""

from batchscrape.scraper.batch import scrape_all, scrape_all_sync, validate_url_list
from batchscrape.scraper.errors import ClientInputError
from batchscrape.scraper.models import (
    HeadingRecord,
    ProductRecord,
    ScrapeFailure,
    ScrapeOutcome,
    ScrapeSuccess,
)
from batchscrape.scraper.scraper import scrape_url

__all__ = [
    "scrape_url",
    "scrape_all",
    "scrape_all_sync",
    "validate_url_list",
    "ClientInputError",
    "ScrapeOutcome",
    "ScrapeSuccess",
    "ScrapeFailure",
    "ProductRecord",
    "HeadingRecord",
]
