"""
loader.py — One-time remote population of the word store
=========================================================
The first request that needs word data triggers a single load pass:
the primary language, then each secondary language, each fetched on its
own. A language that fails to load is logged and skipped; whatever the
store held for it before stays in place. The pass is never repeated,
even when every fetch failed, so the built-in fallback may be all the
process ever serves.
"""
from __future__ import annotations

import asyncio
import enum
import logging
from typing import Dict, List, Optional

import httpx

from .errors import UpstreamLoadError
from .store import WordStore

logger = logging.getLogger(__name__)


class LoadState(str, enum.Enum):
    UNLOADED = "unloaded"
    LOADING = "loading"
    LOADED = "loaded"


def _decode_word_list(lang: str, resp: httpx.Response) -> List[str]:
    """Validate that an upstream response is a JSON array of strings."""
    try:
        resp.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise UpstreamLoadError(lang, f"HTTP {exc.response.status_code}") from exc
    try:
        payload = resp.json()
    except ValueError as exc:
        raise UpstreamLoadError(lang, "response is not valid JSON") from exc
    if not isinstance(payload, list) or not all(isinstance(w, str) for w in payload):
        raise UpstreamLoadError(lang, "payload is not an array of strings")
    return payload


class WordLoader:
    def __init__(
        self,
        store: WordStore,
        primary_language: str,
        primary_url: str,
        secondary_urls: Dict[str, str],
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.store = store
        self.primary_language = primary_language
        self.primary_url = primary_url
        self.secondary_urls = dict(secondary_urls)
        self._timeout = timeout
        self._transport = transport
        self._lock = asyncio.Lock()
        self.state = LoadState.UNLOADED
        self.load_count = 0

    @classmethod
    def from_settings(cls, store: WordStore, settings, transport=None) -> "WordLoader":
        return cls(
            store,
            primary_language=settings.primary_language,
            primary_url=settings.primary_url,
            secondary_urls={
                lang: settings.language_url(lang)
                for lang in settings.secondary_languages
                if lang != settings.primary_language
            },
            timeout=settings.fetch_timeout_seconds,
            transport=transport,
        )

    @property
    def is_loaded(self) -> bool:
        return self.state is LoadState.LOADED

    async def ensure_loaded(self) -> None:
        """Run the load pass once; later and concurrent callers just wait for it."""
        if self.state is LoadState.LOADED:
            return
        async with self._lock:
            if self.state is LoadState.LOADED:
                return
            self.state = LoadState.LOADING
            try:
                await self.load()
            except asyncio.CancelledError:
                # An interrupted pass is not a finished one; the next caller reloads
                logger.warning("Word list load cancelled before completing")
                self.state = LoadState.UNLOADED
                raise
            finally:
                if self.state is LoadState.LOADING:
                    self.state = LoadState.LOADED

    async def load(self) -> List[str]:
        """Fetch every configured language into the store.

        Returns the available languages after the pass.
        """
        self.load_count += 1
        targets = [(self.primary_language, self.primary_url)] + list(self.secondary_urls.items())

        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            for lang, url in targets:
                try:
                    words = await self._fetch(client, lang, url)
                except UpstreamLoadError as exc:
                    logger.warning("Failed to load language %s from %s: %s", lang, url, exc.reason)
                    continue
                self.store.set_words(lang, words)
                logger.debug("Loaded %d words for %s", len(words), lang)

        languages = self.store.refresh_languages()
        logger.info("Loaded languages: %s", ", ".join(languages))
        return languages

    async def _fetch(self, client: httpx.AsyncClient, lang: str, url: str) -> List[str]:
        try:
            resp = await client.get(url)
        except httpx.HTTPError as exc:
            raise UpstreamLoadError(lang, f"{type(exc).__name__}: {exc}") from exc
        return _decode_word_list(lang, resp)

