from __future__ import annotations

from functools import lru_cache
from typing import List, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings


_DEFAULT_SOURCE_URL = "https://raw.githubusercontent.com/RazorSh4rk/random-word-api/master"


class Settings(BaseSettings):
    # Server
    environment: str = "development"
    log_level: str = "info"
    log_format: str = "json"  # json | text
    allow_cors_origins: List[str] = ["*"]

    # Word list source
    words_source_base_url: str = _DEFAULT_SOURCE_URL
    primary_language: str = "en"
    secondary_languages: List[str] = ["de", "es", "fr", "it", "pt-br", "ro", "zh"]
    fetch_timeout_seconds: Optional[float] = None  # None = wait indefinitely

    # Rate limiting
    rate_limit_window_ms: int = 5000
    client_ip_header: str = "CF-Connecting-IP"

    # Word picker
    max_words: int = 100

    @field_validator("rate_limit_window_ms")
    @classmethod
    def validate_window(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("rate_limit_window_ms must be a positive number of milliseconds")
        return v

    @field_validator("words_source_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @property
    def primary_url(self) -> str:
        return f"{self.words_source_base_url}/words.json"

    def language_url(self, lang: str) -> str:
        """URL of the word list for a secondary language code."""
        return f"{self.words_source_base_url}/languages/{lang}.json"

    class Config:
        env_prefix = "WORDS_"


@lru_cache
def get_settings() -> Settings:
    return Settings()


# Module-level singleton for convenience
settings = get_settings()
