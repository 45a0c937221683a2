"""Fixtures: settings, stub fetcher, search page markup builders."""

from __future__ import annotations

from html import escape

import pytest

from relay.config import Settings
from relay.fetch import FetchedPage


class StubFetcher:
    """Records requested URLs and answers with a canned page or error."""

    user_agent = "test-agent"

    def __init__(self, text: str = "", status_code: int = 200, error: Exception | None = None) -> None:
        self.text = text
        self.status_code = status_code
        self.error = error
        self.urls: list[str] = []

    async def fetch(self, url: str) -> FetchedPage:
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return FetchedPage(url=url, status_code=self.status_code, text=self.text)


def result_fragment(
    title: str | None = "Title",
    snippet: str | None = "Snippet",
    url: str | None = "example.com",
) -> str:
    """One DuckDuckGo-style result body; ``None`` omits that sub-fragment."""
    parts = ['<div class="result__body">']
    if title is not None:
        parts.append(
            f'<h2 class="result__title"><a class="result__a" href="#">{escape(title)}</a></h2>'
        )
    if snippet is not None:
        parts.append(f'<a class="result__snippet">{escape(snippet)}</a>')
    if url is not None:
        parts.append(f'<a class="result__url"> {escape(url)} </a>')
    parts.append("</div>")
    return "".join(parts)


def result_page(*fragments: str) -> str:
    return "<html><body><div id=\"links\">" + "".join(fragments) + "</div></body></html>"


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def stub_fetcher() -> StubFetcher:
    return StubFetcher()
