"""Amazon search-box completions."""

from autocomplete_cli.config import settings
from autocomplete_cli.models.suggest import SuggestOptions
from autocomplete_cli.sources.base import BaseSuggestionSource, second_element_strings


class AmazonSuggestSource(BaseSuggestionSource):
    """Amazon completion endpoint. Same payload shape as Google; no lang/country."""

    @property
    def name(self) -> str:
        return "amazon"

    @property
    def base_url(self) -> str:
        return settings.amazon_base_url

    def build_params(self, query: str, options: SuggestOptions) -> dict[str, str]:
        return {
            "search-alias": "aps",
            "client": "amazon-search-ui",
            "mkt": "1",
            "q": query,
        }

    def parse(self, body: str) -> list[str]:
        return second_element_strings(self._decode_json(body), self.name)
