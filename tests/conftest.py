"""Shared pytest fixtures."""

from __future__ import annotations

import pytest

from tests.helpers import FakeAsyncClient


@pytest.fixture
def fake_client_factory(monkeypatch):
    """Make ``scrape_all`` use a :class:`FakeAsyncClient` built from the given routes."""

    def _install(routes, delays=None) -> FakeAsyncClient:
        client = FakeAsyncClient(routes, delays)
        monkeypatch.setattr("batchscrape.scraper.batch.build_client", lambda: client)
        return client

    return _install
