"""HTML extraction submodule: search result pages and article bodies."""

from __future__ import annotations

from .article import extract_article
from .normalize import ensure_absolute_url
from .search_results import extract_results, parse_result_fragment, select_result_fragments

__all__ = [
    "ensure_absolute_url",
    "extract_article",
    "extract_results",
    "parse_result_fragment",
    "select_result_fragments",
]
