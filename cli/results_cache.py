"""Persistent storage of the last batch's outcomes for the CLI.

Stored as JSON in ``settings.results_cache_path``
(``~/.batchscrape/last_results.json`` by default).  Only the CLI reads and
writes this file; the scraper core knows nothing about it.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional, Sequence

from batchscrape.config import settings
from batchscrape.scraper.models import ScrapeOutcome, outcome_from_dict


class CorruptCacheError(Exception):
    """The cache file exists but cannot be read back as outcomes."""


def _get_cache_path() -> Path:
    """Return the path to the results JSON file."""
    return settings.results_cache_path


def save_results(outcomes: Sequence[ScrapeOutcome]) -> None:
    """Overwrite the cache with *outcomes*."""
    settings.cache_dir.mkdir(parents=True, exist_ok=True)
    payload = [o.to_dict() for o in outcomes]
    _get_cache_path().write_text(json.dumps(payload, indent=2), encoding="utf-8")


def load_results() -> Optional[List[ScrapeOutcome]]:
    """Load cached outcomes.  Returns ``None`` when nothing is cached.

    Raises:
        CorruptCacheError: If the file is unreadable or malformed.
    """
    path = _get_cache_path()
    if not path.exists():
        return None

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(raw, list):
            raise ValueError("cached results are not a list")
        return [outcome_from_dict(item) for item in raw]
    except (OSError, ValueError) as exc:
        raise CorruptCacheError(str(exc)) from exc


def clear_results() -> None:
    """Delete the cache file if present."""
    _get_cache_path().unlink(missing_ok=True)
