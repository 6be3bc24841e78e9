"""FastAPI HTTP layer package.

Public re-export so callers can write::

    from batchscrape.api import app

    uvicorn batchscrape.api:app --reload
"""

from batchscrape.api.app import app

__all__ = ["app"]
