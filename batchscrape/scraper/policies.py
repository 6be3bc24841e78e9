"""Extraction policies: turn a parsed page into a list of records.

Policies are looked up in :data:`POLICIES`, an ordered table of
``(predicate, policy)`` pairs evaluated top to bottom against the request
URL.  The last entry always matches.  To support a new site, add a pair
above the fallback.
"""

from __future__ import annotations

from typing import Callable, List, Tuple
from urllib.parse import urljoin

from bs4 import BeautifulSoup

from batchscrape.scraper.models import HeadingRecord, ProductRecord, Record

ExtractionPolicy = Callable[[BeautifulSoup, str], List[Record]]
UrlPredicate = Callable[[str], bool]

GENERIC_HEADING_SOURCE = "Generic H1 scrape"


# ---------------------------------------------------------------------------
# Site-specific policies
# ---------------------------------------------------------------------------

def extract_book_products(soup: BeautifulSoup, url: str) -> List[Record]:
    """Scrape every ``article.product_pod`` on a books.toscrape.com listing.

    Containers lacking a title, price or link are skipped.  Relative links
    are resolved against *url*.
    """
    records: List[Record] = []
    for pod in soup.select("article.product_pod"):
        anchor = pod.select_one("h3 a")
        price_tag = pod.select_one(".product_price .price_color")

        title = (anchor.get("title") or "").strip() if anchor else ""
        href = (anchor.get("href") or "").strip() if anchor else ""
        price = price_tag.get_text().strip() if price_tag else ""

        if not (title and price and href):
            continue
        records.append(ProductRecord(title=title, price=price, link=urljoin(url, href)))
    return records


# ---------------------------------------------------------------------------
# Fallback
# ---------------------------------------------------------------------------

def extract_generic_heading(soup: BeautifulSoup, url: str) -> List[Record]:
    """Return the first ``<h1>`` as a single record, or nothing."""
    heading = soup.find("h1")
    title = heading.get_text().strip() if heading else ""
    if not title:
        return []
    return [HeadingRecord(title=title, source=GENERIC_HEADING_SOURCE)]


def _always(url: str) -> bool:
    return True


POLICIES: Tuple[Tuple[UrlPredicate, ExtractionPolicy], ...] = (
    (lambda url: "books.toscrape.com" in url, extract_book_products),
    (_always, extract_generic_heading),
)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def select_policy(url: str) -> ExtractionPolicy:
    """Return the first policy in :data:`POLICIES` whose predicate accepts *url*."""
    for predicate, policy in POLICIES:
        if predicate(url):
            return policy
    # Unreachable while the fallback stays last in the table.
    raise LookupError(f"No extraction policy for {url!r}")


def extract_records(html: str, url: str) -> List[Record]:
    """Parse *html* (tolerantly) and apply the policy selected for *url*."""
    soup = BeautifulSoup(html, "html.parser")
    return select_policy(url)(soup, url)
