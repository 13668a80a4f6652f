"""
store.py — In-memory word lists keyed by language code
=======================================================
Holds one word list per language. Lists are replaced wholesale by the
loader and never mutated in place; readers always get a copy.
"""
from __future__ import annotations

from threading import Lock
from typing import Dict, Iterable, List, Optional

# Built-in data served until (or unless) the remote load succeeds
FALLBACK_LANGUAGE = "en"
FALLBACK_WORDS: List[str] = ["hello", "world", "test", "example", "demo"]


class WordStore:
    def __init__(self) -> None:
        self._lock = Lock()
        self._words: Dict[str, List[str]] = {FALLBACK_LANGUAGE: list(FALLBACK_WORDS)}
        self._languages: List[str] = [FALLBACK_LANGUAGE]

    def __contains__(self, lang: object) -> bool:
        with self._lock:
            return lang in self._words

    def languages(self) -> List[str]:
        """Available language codes as of the last refresh."""
        with self._lock:
            return list(self._languages)

    def get_words(self, lang: str) -> Optional[List[str]]:
        """Return a copy of the word list for ``lang``, or None if unknown."""
        with self._lock:
            words = self._words.get(lang)
            return list(words) if words is not None else None

    def set_words(self, lang: str, words: Iterable[str]) -> None:
        """Replace the word list for ``lang``."""
        new_list = list(words)
        with self._lock:
            self._words[lang] = new_list

    def refresh_languages(self) -> List[str]:
        """Recompute the available languages from the stored keys."""
        with self._lock:
            self._languages = list(self._words.keys())
            return list(self._languages)
