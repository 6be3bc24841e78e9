"""Utilities for rendering scrape outcomes in the CLI."""

from __future__ import annotations

from typing import List, Sequence

from batchscrape.scraper.models import ScrapeOutcome, ScrapeSuccess, record_as_dict

MAX_RECORDS_SHOWN = 10


def render_outcome(outcome: ScrapeOutcome) -> str:
    """Render one outcome as a block of text.

    At most :data:`MAX_RECORDS_SHOWN` records are listed; the remainder is
    summarised as ``... and N more``.
    """
    lines: List[str] = [outcome.url, f"  Status: {outcome.status}"]

    if isinstance(outcome, ScrapeSuccess):
        records = outcome.records
        if not records:
            lines.append("  No records found or extracted for this URL.")
            return "\n".join(lines)

        lines.append(f"  Found {len(records)} record(s):")
        for record in records[:MAX_RECORDS_SHOWN]:
            fields = record_as_dict(record)
            for i, (key, value) in enumerate(fields.items()):
                bullet = "  - " if i == 0 else "    "
                lines.append(f"{bullet}{key}: {value}")
        if len(records) > MAX_RECORDS_SHOWN:
            lines.append(f"  ... and {len(records) - MAX_RECORDS_SHOWN} more")
    else:
        lines.append(f"  Error: {outcome.error}")

    return "\n".join(lines)


def render_outcomes(outcomes: Sequence[ScrapeOutcome]) -> str:
    """Render every outcome, separated by blank lines."""
    if not outcomes:
        return "No results found or provided."
    return "\n\n".join(render_outcome(o) for o in outcomes)
