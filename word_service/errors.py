"""
errors.py — Client-facing error taxonomy
=========================================
Every error the API returns uses the same envelope: ``{"error": "<message>"}``.
Routes raise a ``WordServiceError`` subclass; the handlers registered here
turn it (and Starlette's own 404/405) into that envelope.
"""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class WordServiceError(Exception):
    status_code: int = 403
    message: str = "Forbidden"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class RateLimited(WordServiceError):
    message = "You hit the rate limit, try again in a few seconds"


class UnknownLanguage(WordServiceError):
    message = "No translation for this language"


class NoWordsOfLength(WordServiceError):
    message = "No words found with the specified length"


class RouteNotFound(WordServiceError):
    status_code = 404
    message = "Not found"


class UpstreamLoadError(Exception):
    """A word list could not be fetched or decoded. Never shown to clients."""

    def __init__(self, lang: str, reason: str) -> None:
        self.lang = lang
        self.reason = reason
        super().__init__(f"{lang}: {reason}")


def error_response(exc: WordServiceError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def register_exception_handlers(app: FastAPI, allow_any_origin: bool = False) -> None:
    # 500s are sent from outside every middleware, so CORS is set here
    server_error_headers = {"Access-Control-Allow-Origin": "*"} if allow_any_origin else None

    @app.exception_handler(WordServiceError)
    async def _word_service_error(request: Request, exc: WordServiceError):
        return error_response(exc)

    @app.exception_handler(StarletteHTTPException)
    async def _http_exc_handler(request: Request, exc: StarletteHTTPException):
        # Unknown paths and wrong methods on known paths both read as "not found"
        if exc.status_code in (404, 405):
            return error_response(RouteNotFound())
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})

    @app.exception_handler(Exception)
    async def _generic_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error method=%s path=%s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error"},
            headers=server_error_headers,
        )
