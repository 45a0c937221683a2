"""Request/response Pydantic models."""

from pydantic import BaseModel


class SearchResult(BaseModel):
    title: str
    snippet: str
    link: str | None = None


class ArticleResponse(BaseModel):
    content: str = ""


class ErrorResponse(BaseModel):
    error: str
    details: str | None = None
