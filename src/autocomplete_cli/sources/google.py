"""Google and YouTube suggestions (suggestqueries endpoint)."""

from autocomplete_cli.config import settings
from autocomplete_cli.models.suggest import SuggestOptions
from autocomplete_cli.sources.base import BaseSuggestionSource, second_element_strings
from autocomplete_cli.utils.rate_limiter import RateLimitedFetcher


class GoogleSuggestSource(BaseSuggestionSource):
    """
    Google suggest endpoint, also serving YouTube when ``video`` is set.

    Response format: ``["query", ["suggestion 1", "suggestion 2", ...]]``
    """

    def __init__(self, video: bool = False, fetcher: RateLimitedFetcher | None = None) -> None:
        super().__init__(fetcher)
        self.video = video

    @property
    def name(self) -> str:
        return "youtube" if self.video else "google"

    @property
    def base_url(self) -> str:
        return settings.google_base_url

    def build_params(self, query: str, options: SuggestOptions) -> dict[str, str]:
        params = {"client": "firefox", "q": query}
        if self.video:
            params["ds"] = "yt"
        if options.lang:
            params["hl"] = options.lang
        if options.country:
            params["gl"] = options.country
        return params

    def parse(self, body: str) -> list[str]:
        return second_element_strings(self._decode_json(body), self.name)
