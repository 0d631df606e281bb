"""DuckDuckGo autocomplete."""

import structlog

from autocomplete_cli.config import settings
from autocomplete_cli.models.suggest import SuggestOptions
from autocomplete_cli.sources.base import BaseSuggestionSource

logger = structlog.get_logger(__name__)


class DuckDuckGoSuggestSource(BaseSuggestionSource):
    """
    DuckDuckGo ``/ac/`` endpoint.

    Returns ``[{"phrase": "..."}, ...]``. Language and country are not supported.
    """

    @property
    def name(self) -> str:
        return "duckduckgo"

    @property
    def base_url(self) -> str:
        return settings.duckduckgo_base_url

    def build_params(self, query: str, options: SuggestOptions) -> dict[str, str]:
        return {"q": query}

    def parse(self, body: str) -> list[str]:
        data = self._decode_json(body)
        if not isinstance(data, list):
            logger.warning("unexpected_response_shape", source=self.name, type=type(data).__name__)
            return []

        suggestions: list[str] = []
        for item in data:
            if not isinstance(item, dict):
                continue
            phrase = item.get("phrase")
            if phrase and isinstance(phrase, str):
                suggestions.append(phrase)
        return suggestions
