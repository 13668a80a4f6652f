from __future__ import annotations

import logging
import random
import sys
from typing import Callable, Optional

import httpx
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from pythonjsonlogger import jsonlogger

from .api import routes_pages, routes_words
from .config import Settings, settings as default_settings
from .context import AppContext
from .errors import register_exception_handlers

# ---------------------------------------------------------------------------
# Structured logging
# ---------------------------------------------------------------------------

_HANDLER_NAME = "word_service"


def _configure_logging(settings: Settings) -> None:
    """Structured JSON logging when log_format=json (default), plain text otherwise."""
    root = logging.getLogger()
    root.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))

    # create_app() may run more than once per process (tests)
    if any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(_HANDLER_NAME)
    if settings.log_format == "json":
        formatter = jsonlogger.JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s",
            rename_fields={"asctime": "timestamp", "levelname": "level"},
        )
    else:
        formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
    handler.setFormatter(formatter)
    root.addHandler(handler)


def create_app(
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    clock: Optional[Callable[[], int]] = None,
    rng: Optional[random.Random] = None,
) -> FastAPI:
    """
    Build the service. ``transport``, ``clock`` and ``rng`` replace the real
    upstream, wall clock and random source (tests pass fakes).
    """
    settings = settings or default_settings
    _configure_logging(settings)

    app = FastAPI(
        title="Random Word API",
        version="1.0.0",
        description=(
            "Random words from cached multi-language word lists, "
            "with per-client rate limiting."
        ),
        # Only the documented routes answer; everything else is a 404
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.ctx = AppContext.build(settings, transport=transport, clock=clock, rng=rng)

    allow_any = "*" in settings.allow_cors_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allow_cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if allow_any:
        # CORSMiddleware only answers requests carrying an Origin header;
        # the public API advertises the wildcard on every response.
        @app.middleware("http")
        async def _allow_any_origin(request: Request, call_next):
            response = await call_next(request)
            response.headers.setdefault("Access-Control-Allow-Origin", "*")
            return response

    register_exception_handlers(app, allow_any_origin=allow_any)

    app.include_router(routes_pages.router)
    app.include_router(routes_words.router)
    return app


app = create_app()
