"""Service layer: orchestrates the search and article relays for the API routes."""

from __future__ import annotations

import logging
from urllib.parse import quote

import httpx

from relay.api.schemas import ArticleResponse, SearchResult
from relay.config import Settings
from relay.extract import ensure_absolute_url, extract_article, extract_results
from relay.fetch import PageFetcher
from relay.result import Err, ErrorKind, Ok, Result, describe

logger = logging.getLogger(__name__)

SEARCH_QUERY_REQUIRED = 'Query parameter "q" is required'
SEARCH_FAILED = "Error fetching search results"
ARTICLE_URL_REQUIRED = "URL parameter is required"
ARTICLE_FAILED = "Error fetching article content"

# Characters JavaScript's encodeURIComponent leaves untouched
_URI_COMPONENT_SAFE = "-_.!~*'()"


def build_search_url(template: str, query: str) -> str:
    """Percent-encode *query* into the search engine URL template."""
    return template.format(query=quote(query, safe=_URI_COMPONENT_SAFE))


async def search_results(
    query: str | None,
    fetcher: PageFetcher,
    settings: Settings,
) -> Result[list[SearchResult]]:
    """Fetch the search engine result page for *query* and extract its hits."""
    if not query:
        return Err(ErrorKind.VALIDATION, SEARCH_QUERY_REQUIRED)

    try:
        url = build_search_url(settings.search_url, query)
        logger.info("search requested", extra={"query": query[:100]})

        try:
            page = await fetcher.fetch(url)
        except httpx.HTTPError as exc:
            logger.warning("search fetch failed", extra={"query": query[:100]}, exc_info=True)
            return Err(ErrorKind.FETCH, SEARCH_FAILED, describe(exc))

        if not page.ok:
            logger.warning(
                "search upstream returned error status",
                extra={"query": query[:100], "status_code": page.status_code},
            )
            return Err(ErrorKind.FETCH, SEARCH_FAILED, "Failed to fetch search results")

        try:
            results = extract_results(page.text, limit=settings.max_search_results)
        except Exception as exc:
            logger.exception("search result parsing failed", extra={"query": query[:100]})
            return Err(ErrorKind.PARSE, SEARCH_FAILED, describe(exc))
    except Exception as exc:
        logger.exception("search failed", extra={"query": query[:100]})
        return Err(ErrorKind.INTERNAL, SEARCH_FAILED, describe(exc))

    logger.info("search completed", extra={"query": query[:100], "result_count": len(results)})
    return Ok(results)


async def article_content(
    url: str | None,
    fetcher: PageFetcher,
) -> Result[ArticleResponse]:
    """Fetch the page at *url* and flatten its paragraphs and headings."""
    if not url:
        return Err(ErrorKind.VALIDATION, ARTICLE_URL_REQUIRED)

    try:
        absolute_url = ensure_absolute_url(url)
        if absolute_url is None:
            logger.warning("could not format article url", extra={"url": url[:200]})
            return Err(ErrorKind.NORMALIZE, ARTICLE_FAILED, "Invalid URL")

        logger.info("article requested", extra={"url": absolute_url})

        try:
            page = await fetcher.fetch(absolute_url)
        except httpx.HTTPError as exc:
            logger.warning("article fetch failed", extra={"url": absolute_url}, exc_info=True)
            return Err(ErrorKind.FETCH, ARTICLE_FAILED, describe(exc))

        if not page.ok:
            logger.warning(
                "article upstream returned error status",
                extra={"url": absolute_url, "status_code": page.status_code},
            )
            return Err(ErrorKind.FETCH, ARTICLE_FAILED, f"Failed to fetch article from {absolute_url}")

        try:
            content = extract_article(page.text)
        except Exception as exc:
            logger.exception("article parsing failed", extra={"url": absolute_url})
            return Err(ErrorKind.PARSE, ARTICLE_FAILED, describe(exc))
    except Exception as exc:
        logger.exception("article relay failed", extra={"url": url[:200]})
        return Err(ErrorKind.INTERNAL, ARTICLE_FAILED, describe(exc))

    logger.info("article completed", extra={"url": absolute_url, "content_length": len(content)})
    return Ok(ArticleResponse(content=content))
