"""Fetch, print and wrap suggestion lookups for the CLI."""

import structlog
import typer

from autocomplete_cli.models.suggest import CommandResult, Source, SuggestOptions
from autocomplete_cli.sources.registry import get_source
from autocomplete_cli.utils.rate_limiter import RateLimitedFetcher

logger = structlog.get_logger(__name__)

NO_SUGGESTIONS_MESSAGE = "No suggestions found."


async def fetch_suggestions(
    query: str,
    options: SuggestOptions,
    source: Source | str,
    fetcher: RateLimitedFetcher | None = None,
) -> list[str]:
    """
    Fetch suggestions for ``query`` from ``source``.

    Args:
        query: Search query, passed verbatim
        options: Per-call options
        source: Source tag selecting the adapter
        fetcher: Rate-limited fetcher (the process-wide one if omitted)

    Returns:
        Ordered suggestion list, empty when the upstream payload had an unexpected shape

    Raises:
        SourceError: On transport, HTTP status or decode failures
        UnknownSourceError: If ``source`` is not a known tag
    """
    return await get_source(source, fetcher).fetch(query, options)


def print_suggestions(suggestions: list[str]) -> None:
    """Print one suggestion per line, or a notice when there are none."""
    if not suggestions:
        typer.echo(NO_SUGGESTIONS_MESSAGE)
        return

    for suggestion in suggestions:
        typer.echo(suggestion)


async def handle_command(
    query: str,
    options: SuggestOptions,
    source: Source | str,
    fetcher: RateLimitedFetcher | None = None,
) -> CommandResult:
    """
    Fetch and print suggestions, reporting failure instead of raising.
    """
    try:
        suggestions = await fetch_suggestions(query, options, source, fetcher)
        print_suggestions(suggestions)
        return CommandResult(success=True)
    except Exception as e:
        logger.debug(
            "command_failed",
            source=getattr(source, "value", source),
            error=str(e),
            error_type=type(e).__name__,
        )
        return CommandResult(success=False, error=str(e))
