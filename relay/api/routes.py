"""GET /search and GET /article endpoint handlers."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from relay.api.schemas import ArticleResponse, ErrorResponse, SearchResult
from relay.api.service import article_content, search_results
from relay.config import Settings
from relay.fetch import PageFetcher
from relay.result import Err, ErrorKind

router = APIRouter()


def _get_fetcher(request: Request) -> PageFetcher:
    return request.app.state.fetcher


def _get_settings(request: Request) -> Settings:
    return request.app.state.settings


def _error_response(err: Err) -> JSONResponse:
    """Shape an ``Err`` into the JSON error payload and status code."""
    if err.kind is ErrorKind.VALIDATION:
        status_code = status.HTTP_400_BAD_REQUEST
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    body = ErrorResponse(error=err.message, details=err.details)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


@router.get("/search", response_model=list[SearchResult])
async def search(
    q: str | None = None,
    fetcher: PageFetcher = Depends(_get_fetcher),
    settings: Settings = Depends(_get_settings),
):
    result = await search_results(q, fetcher, settings)
    if isinstance(result, Err):
        return _error_response(result)
    return result.value


@router.get("/article", response_model=ArticleResponse)
async def article(
    url: str | None = None,
    fetcher: PageFetcher = Depends(_get_fetcher),
):
    result = await article_content(url, fetcher)
    if isinstance(result, Err):
        return _error_response(result)
    return result.value
