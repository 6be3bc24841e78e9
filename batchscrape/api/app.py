"""FastAPI application factory.

Routers
-------
All endpoint groups are mounted under their respective path prefix:

    /scrape    — concurrent multi-URL scraping

Errors
------
A malformed batch request (:class:`ClientInputError`) is rendered as
``400 {"error": "<message>"}``.  Per-URL failures never fail the request.
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from batchscrape.config import configure_logging
from batchscrape.scraper.errors import ClientInputError

from batchscrape.api.routers import scrape as scrape_router


def create_app() -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    configure_logging()

    app = FastAPI(
        title="batchscrape API",
        description=(
            "Fetches a list of URLs concurrently, extracts structured records "
            "with site-specific rules, and reports a success or failure "
            "outcome for every URL."
        ),
        version="0.1.0",
    )

    # Allow browser frontends on any origin (tighten for production).
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ClientInputError, scrape_router.client_input_error_handler)
    app.include_router(scrape_router.router, prefix="/scrape", tags=["scrape"])

    return app


# Module-level instance used by uvicorn:
#   uvicorn batchscrape.api.app:app --reload
app = create_app()
