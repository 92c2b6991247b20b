"""
FastAPI application exposing word autocompletion.

Only GET /autocomplete?term=<prefix> is supported. Everything else is
answered with 400 {"message": "Unsupported request"}.
"""

import logging

from fastapi import FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .autocomplete import WordAutocomplete
from .models import INTERNAL_ERROR, UNSUPPORTED_REQUEST, MatchesResponse

logger = logging.getLogger(__name__)

MAX_MATCHES = 25


def unsupported_request() -> JSONResponse:
    return JSONResponse(status_code=400, content=UNSUPPORTED_REQUEST.model_dump())


def internal_error() -> JSONResponse:
    return JSONResponse(status_code=500, content=INTERNAL_ERROR.model_dump())


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Unknown paths and methods are client errors like any other bad request."""
    logger.info(f"Unsupported request: {request.method} {request.url.path} ({exc.status_code})")
    return unsupported_request()


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info(f"Invalid request parameters: {request.url.query}")
    return unsupported_request()


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error for {request.method} {request.url.path}: {exc}", exc_info=True)
    return internal_error()


def create_app(service: WordAutocomplete) -> FastAPI:
    """
    Build the API around an autocomplete service whose corpus is already loaded.

    Args:
        service: The loaded autocomplete service shared by every request

    Returns:
        The FastAPI application

    Raises:
        RuntimeError: If the service has not loaded its corpus yet.
    """
    if not service.loaded:
        raise RuntimeError("Autocomplete service must load its corpus before the API is created")

    app = FastAPI(
        title="Word Autocomplete API",
        description="Ranked prefix completion over the words of a text corpus",
        version="1.0.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )
    app.state.autocomplete = service

    # CORS for the web UI. Preflight OPTIONS requests get the usual 400.
    @app.middleware("http")
    async def allow_any_origin(request: Request, call_next):
        response = await call_next(request)
        response.headers["Access-Control-Allow-Origin"] = "*"
        return response

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    @app.get("/autocomplete")
    def autocomplete(
        request: Request,
        term: str = Query("", description="Word prefix to complete")
    ) -> JSONResponse:
        """
        Return the most frequent corpus words starting with `term`.

        Args:
            term: The prefix to complete, matched case-sensitively

        Returns:
            JSON response {"matches": [...]} with at most MAX_MATCHES words
        """
        if not term:
            logger.info("Unsupported request: missing term")
            return unsupported_request()

        autocomplete_service: WordAutocomplete = request.app.state.autocomplete
        try:
            matches = autocomplete_service.search(term, MAX_MATCHES)
            body = MatchesResponse(matches=matches).model_dump()
        except Exception as e:
            logger.error(f"Autocomplete error for '{term}': {e}", exc_info=True)
            return internal_error()

        logger.info(f"Prefix: {term} Matches: {matches}")
        return JSONResponse(status_code=200, content=body)

    return app
