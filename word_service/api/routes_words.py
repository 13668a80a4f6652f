from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request

from ..context import AppContext, get_context
from ..errors import RateLimited, UnknownLanguage
from ..rate_limit import client_id_from_request
from ..schemas import ErrorOut, WordQuery
from ..selector import select_words

logger = logging.getLogger(__name__)

router = APIRouter(tags=["words"])

_ERRORS = {403: {"model": ErrorOut}}


# ---------------------------------------------------------------------------
# Dependencies
# ---------------------------------------------------------------------------

async def loaded_context(ctx: AppContext = Depends(get_context)) -> AppContext:
    """Make sure the one-time word list load has run before serving data."""
    await ctx.loader.ensure_loaded()
    return ctx


def rate_limited_context(request: Request, ctx: AppContext = Depends(loaded_context)) -> AppContext:
    client_id = client_id_from_request(request, ctx.settings.client_ip_header)
    if not ctx.limiter.check(client_id):
        raise RateLimited()
    return ctx


def _words_for(ctx: AppContext, lang: str) -> List[str]:
    words = ctx.store.get_words(lang)
    if words is None:
        raise UnknownLanguage()
    return words


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------

@router.get("/languages", response_model=List[str])
async def list_languages(ctx: AppContext = Depends(loaded_context)) -> List[str]:
    """Language codes that currently have a word list."""
    return ctx.store.languages()


@router.get("/all", response_model=List[str], responses=_ERRORS)
async def all_words(
    lang: Optional[str] = Query(default=None),
    ctx: AppContext = Depends(rate_limited_context),
) -> List[str]:
    """Every word known for ``lang`` (default ``en``)."""
    return _words_for(ctx, lang or "en")


@router.get("/word", response_model=List[str], responses=_ERRORS)
async def random_words(
    number: Optional[str] = Query(default=None),
    length: Optional[str] = Query(default=None),
    lang: Optional[str] = Query(default=None),
    diff: Optional[str] = Query(default=None),
    ctx: AppContext = Depends(rate_limited_context),
) -> List[str]:
    """
    Random words from one language.

    Query values are parsed leniently: a non-numeric ``number`` falls back
    to 1, a non-numeric ``length`` or ``diff`` disables that filter.
    """
    q = WordQuery.from_raw(number, length, lang, diff, max_words=ctx.settings.max_words)
    words = _words_for(ctx, q.lang)
    return select_words(words, q.number, length=q.length, diff=q.diff, rng=ctx.rng)
