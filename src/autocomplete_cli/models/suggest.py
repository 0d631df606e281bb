"""Suggestion request and result models."""

from enum import Enum

from pydantic import BaseModel, Field


class Source(str, Enum):
    """Upstream autocomplete endpoints."""

    GOOGLE = "google"
    YOUTUBE = "youtube"
    BING = "bing"
    AMAZON = "amazon"
    DUCKDUCKGO = "duckduckgo"


class SuggestOptions(BaseModel):
    """Per-call options for a suggestion lookup."""

    lang: str | None = Field(default=None, description="Language code (e.g., 'en', 'de')")
    country: str | None = Field(default=None, description="Country code (e.g., 'us', 'uk')")
    delay: int | None = Field(
        default=None,
        ge=0,
        description="Minimum milliseconds between outbound calls (default from settings)",
    )

    model_config = {"extra": "ignore", "frozen": True}


class CommandResult(BaseModel):
    """Outcome of a CLI command, success or the error message."""

    success: bool
    error: str | None = None

    model_config = {"extra": "ignore"}
