"""Flattens article markup into plain text."""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup

from .selectors import ARTICLE_TEXT_SELECTOR, HTML_PARSER
from .text import trim

logger = logging.getLogger(__name__)


def extract_article(html: str) -> str:
    """Return the trimmed text of every paragraph and heading, one per line.

    Elements are taken in document order across the whole page; blank ones
    are skipped. Every kept line, including the last, ends with ``\\n``.
    """
    soup = BeautifulSoup(html, HTML_PARSER)

    content = ""
    for element in soup.select(ARTICLE_TEXT_SELECTOR):
        text = trim(element.get_text())
        if text:
            content += text + "\n"

    logger.debug("article extracted", extra={"content_length": len(content)})
    return content
