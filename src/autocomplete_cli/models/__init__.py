"""Pydantic models for autocomplete-cli."""

from autocomplete_cli.models.suggest import CommandResult, Source, SuggestOptions

__all__ = [
    "CommandResult",
    "Source",
    "SuggestOptions",
]
