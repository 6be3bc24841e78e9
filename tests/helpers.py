"""HTML pages and an in-process stand-in for ``httpx.AsyncClient`` shared by the tests."""

from __future__ import annotations

import asyncio
from typing import Dict, Optional, Union

import httpx


BOOKS_HTML = """\
<!DOCTYPE html>
<html>
<head><title>All products | Books to Scrape</title></head>
<body>
  <ol class="row">
    <li>
      <article class="product_pod">
        <h3><a href="catalogue/a-light-in-the-attic_1000/index.html"
               title="A Light in the Attic">A Light in the ...</a></h3>
        <div class="product_price"><p class="price_color">  £51.77 </p></div>
      </article>
    </li>
    <li>
      <article class="product_pod">
        <h3><a href="catalogue/tipping-the-velvet_999/index.html"
               title="Tipping the Velvet">Tipping the Velvet</a></h3>
        <div class="product_price"><p class="price_color">£53.74</p></div>
      </article>
    </li>
    <li>
      <article class="product_pod">
        <h3><a href="https://books.toscrape.com/catalogue/soumission_998/index.html"
               title="Soumission">Soumission</a></h3>
        <div class="product_price"><p class="price_color">£50.10</p></div>
      </article>
    </li>
  </ol>
</body>
</html>
"""

BOOK_WITHOUT_PRICE = """\
<article class="product_pod">
  <h3><a href="catalogue/sharp-objects_997/index.html" title="Sharp Objects">Sharp Objects</a></h3>
  <div class="product_price"></div>
</article>
"""

EXAMPLE_HTML = """\
<!doctype html>
<html>
<head><title>Example Domain</title></head>
<body>
<div>
    <h1>  Example Domain  </h1>
    <p>This domain is for use in illustrative examples in documents.</p>
    <h1>Second heading</h1>
</div>
</body>
</html>
"""

NO_HEADING_HTML = "<html><body><p>Nothing to see here.</p></body></html>"


Behaviour = Union[str, int, Exception]


class FakeAsyncClient:
    """Minimal ``httpx.AsyncClient`` double with per-URL delay and behaviour.

    *routes* maps a URL to the body text (200), a status code, or an
    exception to raise.  *delays* maps a URL to seconds slept before
    answering.
    """

    def __init__(
        self,
        routes: Dict[str, Behaviour],
        delays: Optional[Dict[str, float]] = None,
    ) -> None:
        self.routes = routes
        self.delays = delays or {}
        self.requested: list[str] = []

    async def __aenter__(self) -> "FakeAsyncClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        return None

    async def get(self, url: str) -> httpx.Response:
        self.requested.append(url)
        await asyncio.sleep(self.delays.get(url, 0))
        behaviour = self.routes[url]
        if isinstance(behaviour, Exception):
            raise behaviour
        request = httpx.Request("GET", url)
        if isinstance(behaviour, int):
            return httpx.Response(behaviour, request=request)
        return httpx.Response(200, text=behaviour, request=request)

