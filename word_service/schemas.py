from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from .selector import MAX_WORDS, MIN_WORDS, clamp_count, parse_int


class ErrorOut(BaseModel):
    """Envelope for every client-facing error."""

    error: str = Field(..., description="Human-readable error message.")


class WordQuery(BaseModel):
    """Normalised /word query parameters."""

    number: int = Field(default=1, ge=MIN_WORDS, le=MAX_WORDS, description="How many words to return.")
    length: int = Field(default=-1, description="Exact word length; below 1 means any length.")
    lang: str = Field(default="en", description="Language code.")
    diff: int = Field(default=-1, description="Difficulty 1–5; anything else disables it.")

    @classmethod
    def from_raw(
        cls,
        number: Optional[str],
        length: Optional[str],
        lang: Optional[str],
        diff: Optional[str],
        max_words: int = MAX_WORDS,
    ) -> "WordQuery":
        """Build from raw query strings, clamping ``number`` into [1, max_words]."""
        return cls(
            number=clamp_count(parse_int(number, 1), hi=min(max_words, MAX_WORDS)),
            length=parse_int(length, -1),
            lang=lang or "en",
            diff=parse_int(diff, -1),
        )
