"""Outbound page fetcher built on httpx."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetchedPage:
    """Status and decoded body of an outbound GET."""

    url: str
    status_code: int
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class PageFetcher:
    """Issues outbound GET requests with a fixed identifying User-Agent.

    Network failures (connection errors, timeouts) propagate as
    ``httpx.HTTPError``; a non-2xx status is returned, not raised, so the
    caller decides how to report it.
    """

    def __init__(self, user_agent: str, timeout: float | None = 15.0) -> None:
        self._user_agent = user_agent
        self._timeout = timeout

    @property
    def user_agent(self) -> str:
        return self._user_agent

    async def fetch(self, url: str) -> FetchedPage:
        logger.debug("fetching page", extra={"url": url})
        async with httpx.AsyncClient(
            follow_redirects=True,
            headers={"User-Agent": self._user_agent},
        ) as client:
            resp = await client.get(url, timeout=self._timeout)
            text = resp.text
        logger.debug(
            "page fetched",
            extra={"url": url, "status_code": resp.status_code, "content_length": len(text)},
        )
        return FetchedPage(url=url, status_code=resp.status_code, text=text)
