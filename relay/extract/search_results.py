"""DuckDuckGo HTML result page extractor."""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup, Tag

from relay.api.schemas import SearchResult

from .selectors import (
    HTML_PARSER,
    NO_LINK,
    NO_SNIPPET,
    NO_TITLE,
    RESULT_BODY_SELECTOR,
    RESULT_SNIPPET_SELECTOR,
    RESULT_TITLE_SELECTOR,
    RESULT_URL_SELECTOR,
)
from .normalize import ensure_absolute_url
from .text import trim

logger = logging.getLogger(__name__)

DEFAULT_MAX_RESULTS = 10


def _text_of(fragment: Tag, selector: str, placeholder: str) -> str:
    """Trimmed text of every node matching *selector*, or *placeholder* if blank."""
    text = trim("".join(node.get_text() for node in fragment.select(selector)))
    return text or placeholder


def select_result_fragments(soup: BeautifulSoup, limit: int = DEFAULT_MAX_RESULTS) -> list[Tag]:
    """Return the first *limit* result bodies in document order."""
    return soup.select(RESULT_BODY_SELECTOR)[:limit]


def parse_result_fragment(fragment: Tag) -> SearchResult | None:
    """Build a result from one fragment, or ``None`` if any field is missing.

    A field whose extracted text equals its placeholder is treated as
    missing, so a genuine title of "No title available" is dropped too.
    """
    title = _text_of(fragment, RESULT_TITLE_SELECTOR, NO_TITLE)
    snippet = _text_of(fragment, RESULT_SNIPPET_SELECTOR, NO_SNIPPET)
    link = _text_of(fragment, RESULT_URL_SELECTOR, NO_LINK)

    if title == NO_TITLE or snippet == NO_SNIPPET or link == NO_LINK:
        return None

    absolute = ensure_absolute_url(link)
    if absolute is None:
        logger.warning("could not format result link", extra={"link": link[:200]})
    return SearchResult(title=title, snippet=snippet, link=absolute)


def extract_results(html: str, limit: int = DEFAULT_MAX_RESULTS) -> list[SearchResult]:
    """Extract up to *limit* complete search results from a result page."""
    soup = BeautifulSoup(html, HTML_PARSER)
    fragments = select_result_fragments(soup, limit)

    results: list[SearchResult] = []
    for fragment in fragments:
        result = parse_result_fragment(fragment)
        if result is not None:
            results.append(result)

    logger.debug(
        "search results extracted",
        extra={"fragments": len(fragments), "result_count": len(results)},
    )
    return results
