"""Constants shared by the HTML extractors."""

from __future__ import annotations

HTML_PARSER = "html5lib"

# DuckDuckGo HTML result markup
RESULT_BODY_SELECTOR = ".result__body"
RESULT_TITLE_SELECTOR = ".result__title .result__a"
RESULT_SNIPPET_SELECTOR = ".result__snippet"
RESULT_URL_SELECTOR = ".result__url"

NO_TITLE = "No title available"
NO_SNIPPET = "No snippet available"
NO_LINK = "No link available"

ARTICLE_TEXT_SELECTOR = "p, h1, h2, h3, h4, h5, h6"
