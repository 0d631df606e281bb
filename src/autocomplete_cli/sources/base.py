"""Base protocol and shared request flow for suggestion sources."""

import json
import time
from abc import abstractmethod
from typing import Any, Protocol, runtime_checkable

import httpx
import structlog

from autocomplete_cli.config import settings
from autocomplete_cli.exceptions import (
    ResponseDecodeError,
    SourceConnectionError,
    UpstreamHTTPError,
)
from autocomplete_cli.models.suggest import SuggestOptions
from autocomplete_cli.utils.rate_limiter import RateLimitedFetcher, default_fetcher

logger = structlog.get_logger(__name__)


@runtime_checkable
class SuggestionSource(Protocol):
    """
    Protocol for suggestion sources.

    All sources must implement this interface.
    """

    @property
    def name(self) -> str:
        """Return the source name."""
        ...

    def build_url(self, query: str, options: SuggestOptions) -> str:
        """Return the full request URL for ``query``."""
        ...

    def parse(self, body: str) -> list[str]:
        """Turn a raw response body into an ordered suggestion list."""
        ...

    @abstractmethod
    async def fetch(self, query: str, options: SuggestOptions) -> list[str]:
        """
        Fetch suggestions for a query.

        Args:
            query: Search query string, passed verbatim
            options: Per-call options

        Returns:
            Ordered list of suggestions (possibly empty)

        Raises:
            SourceError: If the request or decoding fails
        """
        ...


class BaseSuggestionSource:
    """
    Shared request flow: build URL, rate-limited GET, status check, parse.

    Subclasses provide ``name``, ``base_url``, ``build_params`` and ``parse``.
    """

    def __init__(self, fetcher: RateLimitedFetcher | None = None) -> None:
        """
        Initialize the source.

        Args:
            fetcher: Rate-limited fetcher (the process-wide one if omitted)
        """
        self._fetcher = fetcher or default_fetcher

    @property
    def name(self) -> str:
        raise NotImplementedError

    @property
    def base_url(self) -> str:
        raise NotImplementedError

    def build_params(self, query: str, options: SuggestOptions) -> dict[str, str]:
        raise NotImplementedError

    def parse(self, body: str) -> list[str]:
        raise NotImplementedError

    def build_url(self, query: str, options: SuggestOptions) -> str:
        """Return the full request URL, query parameters encoded."""
        return str(httpx.URL(self.base_url, params=self.build_params(query, options)))

    def _decode_json(self, body: str) -> Any:
        try:
            return json.loads(body)
        except ValueError as e:
            raise ResponseDecodeError(self.name, str(e)) from e

    async def fetch(self, query: str, options: SuggestOptions) -> list[str]:
        """Fetch and parse suggestions for ``query``."""
        url = self.build_url(query, options)
        delay_ms = options.delay if options.delay is not None else settings.default_delay_ms

        start_time = time.monotonic()
        try:
            response = await self._fetcher.acquire_and_fetch(url, delay_ms)
        except httpx.TransportError as e:
            logger.warning("source_transport_error", source=self.name, error=str(e))
            raise SourceConnectionError(self.name, str(e) or type(e).__name__) from e
        elapsed_ms = (time.monotonic() - start_time) * 1000

        logger.debug(
            "source_request",
            source=self.name,
            query=query[:50],
            status_code=response.status_code,
            elapsed_ms=elapsed_ms,
        )

        if not response.is_success:
            raise UpstreamHTTPError(self.name, response.status_code)

        suggestions = self.parse(response.text)
        logger.info("source_success", source=self.name, suggestion_count=len(suggestions))
        return suggestions


def second_element_strings(data: Any, source: str) -> list[str]:
    """
    Extract the suggestion array from a ``[query, [s1, s2, ...], ...]`` payload.

    Anything else yields an empty list.
    """
    if not isinstance(data, list) or len(data) < 2 or not isinstance(data[1], list):
        logger.warning("unexpected_response_shape", source=source, type=type(data).__name__)
        return []
    return [item for item in data[1] if isinstance(item, str)]
