"""Runtime settings shared by the scraper, the API and the CLI.

Every field reads a ``SCRAPE_*`` environment variable and falls back to a
built-in default.  A ``.env`` file next to the package is read on import but
never overrides variables already set in the environment.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# .env lives beside the batchscrape package, at the repository root.
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Scraper
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("SCRAPE_REQUEST_TIMEOUT", "15.0"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "SCRAPE_USER_AGENT",
            "Mozilla/5.0 (compatible; BatchScrape/1.0)",
        )
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("SCRAPE_LOG_LEVEL", "INFO")
    )

    # ------------------------------------------------------------------
    # CLI results cache
    # ------------------------------------------------------------------
    cache_dir: Path = field(
        default_factory=lambda: Path(
            os.environ.get("SCRAPE_CACHE_DIR", Path.home() / ".batchscrape")
        )
    )

    @property
    def results_cache_path(self) -> Path:
        """Absolute path to the JSON file holding the last batch's outcomes."""
        return self.cache_dir / "last_results.json"


def configure_logging(level: str | None = None) -> None:
    """Apply *level* (or ``settings.log_level``) to the root logger."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Shared instance; tests monkeypatch its attributes directly.
settings = Settings()
