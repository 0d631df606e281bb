"""Suggestion sources module."""

from autocomplete_cli.sources.amazon import AmazonSuggestSource
from autocomplete_cli.sources.base import BaseSuggestionSource, SuggestionSource
from autocomplete_cli.sources.bing import BingSuggestSource
from autocomplete_cli.sources.duckduckgo import DuckDuckGoSuggestSource
from autocomplete_cli.sources.google import GoogleSuggestSource
from autocomplete_cli.sources.registry import get_source

__all__ = [
    "AmazonSuggestSource",
    "BaseSuggestionSource",
    "BingSuggestSource",
    "DuckDuckGoSuggestSource",
    "GoogleSuggestSource",
    "SuggestionSource",
    "get_source",
]
