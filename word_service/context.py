"""
context.py — Process-wide service state
========================================
Bundles the word store, loader and rate limiter into one object owned by
the FastAPI app (``app.state.ctx``). Routes reach it through ``get_context``.
"""
from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Callable, Optional

import httpx
from fastapi import Request

from .config import Settings
from .loader import WordLoader
from .rate_limit import SlidingWindowRateLimiter
from .store import WordStore


@dataclass
class AppContext:
    settings: Settings
    store: WordStore
    loader: WordLoader
    limiter: SlidingWindowRateLimiter
    rng: random.Random = field(default_factory=random.Random)

    @classmethod
    def build(
        cls,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        clock: Optional[Callable[[], int]] = None,
        rng: Optional[random.Random] = None,
    ) -> "AppContext":
        store = WordStore()
        return cls(
            settings=settings,
            store=store,
            loader=WordLoader.from_settings(store, settings, transport=transport),
            limiter=SlidingWindowRateLimiter(settings.rate_limit_window_ms, clock=clock),
            rng=rng or random.Random(),
        )


def get_context(request: Request) -> AppContext:
    return request.app.state.ctx
