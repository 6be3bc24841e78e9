"""batchscrape CLI — scrape URL batches and redisplay the last results.

Usage:
    python cli/main.py --help

Commands:
    scrape    → scrape URLs given as arguments and/or in a file
    last      → show the results of the previous scrape
    clear     → forget the previous results
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that
# `from batchscrape.xxx import ...` works when the CLI is invoked as
# `python cli/main.py` from any working directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from typing import List, Optional

import typer

from batchscrape.config import configure_logging, settings
from batchscrape.scraper import scrape_all_sync

from cli.intake import parse_url_lines
from cli.rendering import render_outcomes
from cli.results_cache import CorruptCacheError, clear_results, load_results, save_results

NO_VALID_URLS_MESSAGE = (
    "Please enter at least one valid URL (starting with http:// or https://)."
)
EMPTY_STATE_MESSAGE = (
    "No saved results. Run 'scrape <url> ...' to scrape some websites; "
    "the results will be saved here."
)
CLI_DEFAULT_LOG_LEVEL = "WARNING"

app = typer.Typer(
    name="batchscrape",
    help="Scrape structured records from many URLs at once.",
    no_args_is_help=True,
)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Logging level, e.g. INFO or DEBUG (default: WARNING)."
    ),
) -> None:
    configure_logging(log_level or CLI_DEFAULT_LOG_LEVEL)


@app.command("scrape")
def scrape(
    urls: Optional[List[str]] = typer.Argument(None, help="URLs to scrape."),
    file: Optional[Path] = typer.Option(
        None, "--file", "-f", help="Text file with one URL per line."
    ),
    timeout: Optional[float] = typer.Option(
        None, help=f"Per-URL timeout in seconds (default {settings.request_timeout:g})."
    ),
) -> None:
    """Scrape every URL concurrently and print one result per URL."""
    chunks = list(urls or [])
    if file is not None:
        try:
            chunks.append(file.read_text(encoding="utf-8"))
        except OSError as exc:
            typer.echo(f"[scrape] Cannot read {file}: {exc}")
            raise typer.Exit(code=1)

    targets = parse_url_lines(chunks)
    if not targets:
        typer.echo(f"[scrape] {NO_VALID_URLS_MESSAGE}")
        raise typer.Exit(code=1)

    typer.echo(f"[scrape] Scraping {len(targets)} URL(s) …")
    outcomes = scrape_all_sync(targets, timeout=timeout)
    typer.echo("")
    typer.echo(render_outcomes(outcomes))

    try:
        save_results(outcomes)
    except OSError as exc:
        typer.echo(f"\n[scrape] Note: could not save results for next session ({exc}).")


@app.command("last")
def last() -> None:
    """Show the results of the previous scrape."""
    try:
        outcomes = load_results()
    except CorruptCacheError as exc:
        typer.echo(f"[last] Could not load previously saved results; they might be corrupted ({exc}).")
        try:
            clear_results()
        except OSError as clear_exc:
            typer.echo(f"[last] Could not remove the saved results ({clear_exc}).")
        outcomes = None

    if outcomes is None:
        typer.echo(EMPTY_STATE_MESSAGE)
        return
    typer.echo(render_outcomes(outcomes))


@app.command("clear")
def clear() -> None:
    """Delete the saved results of the previous scrape."""
    try:
        clear_results()
    except OSError as exc:
        typer.echo(f"[clear] Could not remove the saved results ({exc}).")
        raise typer.Exit(code=1)
    typer.echo("[clear] Saved results removed.")


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
