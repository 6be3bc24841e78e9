"""Data models for the scraper pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Union


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ProductRecord:
    """One product container scraped from a catalogue page."""

    title: str
    price: str
    link: str

    def as_dict(self) -> dict[str, str]:
        return {"title": self.title, "price": self.price, "link": self.link}


@dataclass(frozen=True)
class HeadingRecord:
    """The generic fallback record built from a page's first ``<h1>``."""

    title: str
    source: str

    def as_dict(self) -> dict[str, str]:
        return {"title": self.title, "source": self.source}


# Records rebuilt from their wire form (e.g. the CLI cache) are plain mappings.
Record = Union[ProductRecord, HeadingRecord, Mapping[str, str]]


def record_as_dict(record: Record) -> dict[str, str]:
    """Return the wire form of *record*."""
    if isinstance(record, (ProductRecord, HeadingRecord)):
        return record.as_dict()
    return dict(record)


# ---------------------------------------------------------------------------
# Outcomes
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ScrapeSuccess:
    """A URL that was fetched and parsed; *records* may be empty."""

    url: str
    records: List[Record] = field(default_factory=list)

    status = "success"

    def to_dict(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "status": self.status,
            "records": [record_as_dict(r) for r in self.records],
        }


@dataclass(frozen=True)
class ScrapeFailure:
    """A URL whose scrape ended in a timeout, HTTP error or other exception."""

    url: str
    error: str

    status = "failed"

    def to_dict(self) -> dict[str, Any]:
        return {"url": self.url, "status": self.status, "error": self.error}


ScrapeOutcome = Union[ScrapeSuccess, ScrapeFailure]


def outcome_from_dict(data: Any) -> ScrapeOutcome:
    """Rebuild an outcome from the dict produced by ``to_dict()``.

    Raises:
        ValueError: If *data* does not have the expected shape.
    """
    if not isinstance(data, dict) or not isinstance(data.get("url"), str):
        raise ValueError(f"Not a scrape outcome: {data!r}")

    status = data.get("status")
    if status == ScrapeSuccess.status:
        records = data.get("records", [])
        if not isinstance(records, list) or not all(
            isinstance(r, dict) for r in records
        ):
            raise ValueError(f"Malformed records for {data['url']!r}")
        return ScrapeSuccess(
            url=data["url"],
            records=[{str(k): str(v) for k, v in r.items()} for r in records],
        )
    if status == ScrapeFailure.status:
        return ScrapeFailure(url=data["url"], error=str(data.get("error", "")))

    raise ValueError(f"Unknown outcome status {status!r}")
