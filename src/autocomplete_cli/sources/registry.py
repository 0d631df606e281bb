"""Source tag to adapter dispatch."""

from autocomplete_cli.exceptions import UnknownSourceError
from autocomplete_cli.models.suggest import Source
from autocomplete_cli.sources.amazon import AmazonSuggestSource
from autocomplete_cli.sources.base import BaseSuggestionSource
from autocomplete_cli.sources.bing import BingSuggestSource
from autocomplete_cli.sources.duckduckgo import DuckDuckGoSuggestSource
from autocomplete_cli.sources.google import GoogleSuggestSource
from autocomplete_cli.utils.rate_limiter import RateLimitedFetcher


def get_source(
    source: Source | str,
    fetcher: RateLimitedFetcher | None = None,
) -> BaseSuggestionSource:
    """
    Return the adapter for a source tag.

    Args:
        source: Source enum member or its string value
        fetcher: Rate-limited fetcher to hand to the adapter (optional)

    Raises:
        UnknownSourceError: If the tag names no known source
    """
    try:
        tag = Source(source)
    except ValueError as e:
        raise UnknownSourceError(source) from e

    if tag in (Source.GOOGLE, Source.YOUTUBE):
        return GoogleSuggestSource(video=tag is Source.YOUTUBE, fetcher=fetcher)
    if tag is Source.BING:
        return BingSuggestSource(fetcher)
    if tag is Source.AMAZON:
        return AmazonSuggestSource(fetcher)
    if tag is Source.DUCKDUCKGO:
        return DuckDuckGoSuggestSource(fetcher)

    raise UnknownSourceError(source)
