"""FastAPI server for Voice Search.

Thin HTTP adapter over SearchService; every endpoint answers with a
SearchResponse carrying a speakable ``ttsResponse``, including malformed
requests and unexpected failures.

Searches run in the threadpool while the endpoint watches the connection;
once the client disconnects, no further provider call is started.

Endpoints:
    POST /api/search - Automatic routing (classify, then search)
    POST /api/search/brave - Keyword search (web or news)
    POST /api/search/exa - Semantic search
    POST /api/search/crypto - Coin market information
    POST /api/search/restaurants - Restaurants for an explicit location
    GET /health - Health check
"""

import asyncio
import logging
import threading
from collections.abc import Callable
from typing import Annotated

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from voice_search import __version__
from voice_search.config import settings
from voice_search.errors import InputError
from voice_search.pipeline.composer import compose_error
from voice_search.pipeline.service import CancelCheck, SearchService
from voice_search.types.api import (
    BraveSearchRequest,
    CryptoSearchRequest,
    ExaSearchRequest,
    HealthResponse,
    RestaurantSearchRequest,
    SearchRequest,
    SearchResponse,
)
from voice_search.types.query import Query

logger = logging.getLogger(__name__)

EMPTY_QUERY_TTS = "I didn't catch a search query. Please tell me what you'd like me to look up."
INVALID_REQUEST_TTS = "I couldn't understand that search request. Please try asking again."

# Fields whose absence means the caller gave us nothing to search for
REQUIRED_TEXT_FIELDS = frozenset({"query", "symbol", "location"})

DISCONNECT_POLL_SECONDS = 0.25


def get_search_service() -> SearchService:
    """Build the service from the process settings (overridden in tests)."""
    return SearchService.from_settings(settings)


ServiceDep = Annotated[SearchService, Depends(get_search_service)]


# =============================================================================
# FastAPI App
# =============================================================================
app = FastAPI(
    title="Voice Search API",
    description="Search backend for voice agents with speech-ready answers.",
    version=__version__,
)


def _error_body(tts_response: str, error: str) -> dict:
    return SearchResponse(success=False, tts_response=tts_response, error=error).model_dump(
        mode="json", by_alias=True, exclude_none=True
    )


@app.exception_handler(InputError)
async def input_error_handler(request: Request, exc: InputError) -> JSONResponse:
    return JSONResponse(status_code=400, content=_error_body(EMPTY_QUERY_TTS, str(exc)))


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies are client errors and still get a spoken answer."""
    # Unparseable JSON reports a character offset instead of a field name
    fields = [
        err["loc"][-1]
        for err in exc.errors()
        if len(err.get("loc", ())) > 1 and isinstance(err["loc"][-1], str)
    ]
    missing_text = any(field in REQUIRED_TEXT_FIELDS for field in fields)

    logger.info(f"Rejected request to {request.url.path}", extra={"fields": fields})
    return JSONResponse(
        status_code=400,
        content=_error_body(
            EMPTY_QUERY_TTS if missing_text else INVALID_REQUEST_TTS,
            f"Invalid request: {', '.join(fields) or 'body'}",
        ),
    )


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Error processing {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content=_error_body(compose_error(), "Search failed"))


async def watch_disconnect(request: Request, cancelled: threading.Event) -> None:
    """Set ``cancelled`` once the client has gone away."""
    while not await request.is_disconnected():
        await asyncio.sleep(DISCONNECT_POLL_SECONDS)
    logger.info(f"Client disconnected from {request.url.path}, cancelling search")
    cancelled.set()


async def _respond(
    request: Request, run: Callable[[CancelCheck], SearchResponse]
) -> JSONResponse:
    """Run a search off the event loop and map provider failures to 502."""
    cancelled = threading.Event()
    watcher = asyncio.create_task(watch_disconnect(request, cancelled))
    try:
        response = await run_in_threadpool(run, cancelled.is_set)
    finally:
        watcher.cancel()

    return JSONResponse(
        status_code=200 if response.success else 502,
        content=response.model_dump(mode="json", by_alias=True, exclude_none=True),
    )


# =============================================================================
# Endpoints
# =============================================================================


@app.post("/api/search", response_model=SearchResponse)
async def search(body: SearchRequest, request: Request, service: ServiceDep) -> JSONResponse:
    """Classify a free-form query and run the matching search strategy."""
    query = Query(
        text=body.query,
        location=body.location,
        symbol=body.symbol,
        cuisine=body.cuisine,
    )
    return await _respond(
        request, lambda is_cancelled: service.search(query, is_cancelled=is_cancelled)
    )


@app.post("/api/search/brave", response_model=SearchResponse)
async def brave_search(
    body: BraveSearchRequest, request: Request, service: ServiceDep
) -> JSONResponse:
    """Keyword search; ``type="news"`` restricts to fresh news results."""
    return await _respond(
        request,
        lambda _: service.search_keyword(body.query, search_type=body.type, location=body.location),
    )


@app.post("/api/search/exa", response_model=SearchResponse)
async def exa_search(body: ExaSearchRequest, request: Request, service: ServiceDep) -> JSONResponse:
    """Semantic search, optionally limited to some domains."""
    return await _respond(
        request,
        lambda _: service.search_semantic(body.query, include_domains=body.include_domains),
    )


@app.post("/api/search/crypto", response_model=SearchResponse)
async def crypto_search(
    body: CryptoSearchRequest, request: Request, service: ServiceDep
) -> JSONResponse:
    """Latest price and market information for a coin."""
    return await _respond(request, lambda _: service.search_crypto(body.symbol))


@app.post("/api/search/restaurants", response_model=SearchResponse)
async def restaurant_search(
    body: RestaurantSearchRequest, request: Request, service: ServiceDep
) -> JSONResponse:
    """Individual restaurants (no listing pages) near a location."""
    return await _respond(
        request,
        lambda is_cancelled: service.search_restaurants(
            body.location, cuisine=body.cuisine, query=body.query, is_cancelled=is_cancelled
        ),
    )


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(
        status="ok",
        keyword_search_configured=bool(settings.brave_api_key),
        semantic_search_configured=bool(settings.exa_api_key),
        version=__version__,
    )


def run(host: str | None = None, port: int | None = None) -> None:
    """Serve the API with uvicorn."""
    uvicorn.run(app, host=host or settings.api_host, port=port or settings.api_port)


if __name__ == "__main__":
    run()
