"""Batch scrape endpoint.

Routes
------
POST /scrape    Body: {"urls": ["https://...", ...]}    → scrape_all
"""

from __future__ import annotations

import json
import logging
from typing import Any, Literal, Optional

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from batchscrape.scraper import scrape_all, validate_url_list
from batchscrape.scraper.errors import ClientInputError

logger = logging.getLogger(__name__)

router = APIRouter()


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

class ScrapeOutcomeResponse(BaseModel):
    url: str
    status: Literal["success", "failed"]
    records: Optional[list[dict[str, str]]] = None
    error: Optional[str] = None


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

async def _read_urls(request: Request) -> Any:
    """Return the ``urls`` member of the JSON body, or ``None``."""
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None
    if not isinstance(body, dict):
        return None
    return body.get("urls")


# ---------------------------------------------------------------------------
# Endpoint
# ---------------------------------------------------------------------------

@router.post(
    "",
    response_model=list[ScrapeOutcomeResponse],
    response_model_exclude_none=True,
)
async def scrape(request: Request) -> list[dict[str, Any]]:
    """Scrape every URL in the body concurrently.

    Returns one outcome per URL in request order.  Per-URL failures are
    reported in-band with ``status: "failed"``; only a malformed request
    fails the call (HTTP 400).
    """
    logger.info("Received /scrape request")
    urls = validate_url_list(await _read_urls(request))

    outcomes = await scrape_all(urls)
    return [outcome.to_dict() for outcome in outcomes]


async def client_input_error_handler(request: Request, exc: ClientInputError) -> JSONResponse:
    """Render :class:`ClientInputError` as ``400 {"error": ...}``."""
    return JSONResponse(status_code=400, content={"error": str(exc)})
