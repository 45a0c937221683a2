"""FastAPI app entrypoint."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from relay.api.routes import router
from relay.config import get_settings
from relay.fetch import PageFetcher
from relay.logging_config import setup_logging

logger = logging.getLogger(__name__)

CORS_ALLOW_METHODS = "GET"
CORS_ALLOW_HEADERS = "Content-Type"


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    # Initialize logging FIRST so all subsequent operations produce JSON logs
    setup_logging(settings.log_level)

    fetcher = PageFetcher(
        user_agent=settings.user_agent,
        timeout=settings.fetch_timeout_seconds,
    )

    # Attach to app state for dependency injection
    app.state.settings = settings
    app.state.fetcher = fetcher

    logger.info(
        "relay ready",
        extra={
            "search_url": settings.search_url,
            "max_search_results": settings.max_search_results,
            "fetch_timeout_seconds": settings.fetch_timeout_seconds,
        },
    )

    yield

    logger.info("shutting down proxy server")


app = FastAPI(title="Search Relay", lifespan=lifespan)
# Answers preflight requests; cors_headers below covers every other response
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().allowed_origins,
    allow_methods=[CORS_ALLOW_METHODS],
    allow_headers=[CORS_ALLOW_HEADERS],
)
app.include_router(router)


@app.middleware("http")
async def cors_headers(request: Request, call_next):
    """Stamp the CORS headers on every response, with or without an Origin header."""
    response = await call_next(request)
    allowed = get_settings().allowed_origins
    if "*" in allowed:
        response.headers["Access-Control-Allow-Origin"] = "*"
    elif request.headers.get("origin") in allowed:
        response.headers["Access-Control-Allow-Origin"] = request.headers["origin"]
    response.headers["Access-Control-Allow-Methods"] = CORS_ALLOW_METHODS
    response.headers["Access-Control-Allow-Headers"] = CORS_ALLOW_HEADERS
    return response


@app.get("/health")
async def health():
    return {"status": "ok"}


def run() -> None:
    """Serve the relay with uvicorn on the configured host and port.

    The startup line is logged here, since only this entrypoint knows the
    port actually bound; ``uvicorn relay.main:app --port N`` logs uvicorn's own.
    """
    settings = get_settings()
    setup_logging(settings.log_level)
    logger.info(
        "proxy server running",
        extra={"url": f"http://localhost:{settings.port}", "host": settings.host, "port": settings.port},
    )
    uvicorn.run("relay.main:app", host=settings.host, port=settings.port, log_config=None)
