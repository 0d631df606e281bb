"""Bing suggestions from the QSML (XML) endpoint."""

import html
import re

from autocomplete_cli.config import settings
from autocomplete_cli.models.suggest import SuggestOptions
from autocomplete_cli.sources.base import BaseSuggestionSource

TEXT_TAG_PATTERN = re.compile(r"<Text>(.*?)</Text>", re.DOTALL)


class BingSuggestSource(BaseSuggestionSource):
    """
    Bing QSML endpoint.

    The body is XML; suggestions are the ``<Text>`` elements in document order.
    """

    @property
    def name(self) -> str:
        return "bing"

    @property
    def base_url(self) -> str:
        return settings.bing_base_url

    @staticmethod
    def market(options: SuggestOptions) -> str:
        """Return the ``Market`` value, e.g. ``de-DE``; ``en-US`` without a country."""
        if options.country:
            return f"{options.lang or 'en'}-{options.country.upper()}"
        return "en-US"

    def build_params(self, query: str, options: SuggestOptions) -> dict[str, str]:
        return {"Market": self.market(options), "query": query}

    def parse(self, body: str) -> list[str]:
        return [html.unescape(text) for text in TEXT_TAG_PATTERN.findall(body)]
