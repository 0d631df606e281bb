"""Integration tests for Google and YouTube suggestions with mocked HTTP."""

import httpx
import pytest
import respx
from httpx import Response

from autocomplete_cli.exceptions import (
    ResponseDecodeError,
    SourceConnectionError,
    UpstreamHTTPError,
)
from autocomplete_cli.models import SuggestOptions
from autocomplete_cli.suggest import fetch_suggestions

GOOGLE_URL = "https://suggestqueries.google.com/complete/search"


class TestGoogleSuggestions:
    """End-to-end fetches through the process-wide fetcher."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_fetch_google(self, sample_google_response):
        """Test successful Google fetch without optional parameters."""
        route = respx.get(GOOGLE_URL, params={"client": "firefox", "q": "test query"}).mock(
            return_value=Response(200, json=sample_google_response)
        )

        result = await fetch_suggestions("test query", SuggestOptions(), "google")

        assert result == ["suggestion 1", "suggestion 2", "suggestion 3"]
        params = route.calls.last.request.url.params
        assert "hl" not in params
        assert "gl" not in params
        assert "ds" not in params

    @pytest.mark.asyncio
    @respx.mock
    async def test_fetch_youtube_sends_ds_param(self):
        """Test YouTube fetch sends the ds=yt parameter."""
        respx.get(GOOGLE_URL, params={"client": "firefox", "q": "video", "ds": "yt"}).mock(
            return_value=Response(200, json=["video", ["video 1", "video 2"]])
        )

        result = await fetch_suggestions("video", SuggestOptions(delay=0), "youtube")

        assert result == ["video 1", "video 2"]

    @pytest.mark.asyncio
    @respx.mock
    async def test_lang_and_country(self):
        """Test language and country are sent as hl and gl."""
        respx.get(GOOGLE_URL, params={"q": "query", "hl": "en", "gl": "us"}).mock(
            return_value=Response(200, json=["query", ["result"]])
        )

        result = await fetch_suggestions("query", SuggestOptions(lang="en", country="us"), "google")

        assert result == ["result"]

    @pytest.mark.asyncio
    @respx.mock
    @pytest.mark.parametrize("status", [400, 403, 404, 429, 500, 503])
    async def test_http_error_status(self, status):
        """Test non-2xx statuses raise with the status in the message."""
        respx.get(GOOGLE_URL).mock(return_value=Response(status))

        with pytest.raises(UpstreamHTTPError) as exc_info:
            await fetch_suggestions("query", SuggestOptions(delay=0), "google")

        assert str(exc_info.value) == f"HTTP error: {status}"
        assert exc_info.value.status_code == status

    @pytest.mark.asyncio
    @respx.mock
    @pytest.mark.parametrize("payload", [{"unexpected": "format"}, ["query"], ["query", []]])
    async def test_unexpected_or_empty_payload(self, payload):
        """Test unexpected or empty payloads resolve to no suggestions."""
        respx.get(GOOGLE_URL).mock(return_value=Response(200, json=payload))

        assert await fetch_suggestions("query", SuggestOptions(delay=0), "google") == []

    @pytest.mark.asyncio
    @respx.mock
    async def test_non_json_body_raises(self):
        """Test a non-JSON body raises a decode error."""
        respx.get(GOOGLE_URL).mock(return_value=Response(200, text="<html></html>"))

        with pytest.raises(ResponseDecodeError):
            await fetch_suggestions("query", SuggestOptions(delay=0), "google")

    @pytest.mark.asyncio
    @respx.mock
    async def test_connection_error_raises(self):
        """Test transport failures raise a connection error."""
        respx.get(GOOGLE_URL).mock(side_effect=httpx.ConnectError("connection refused"))

        with pytest.raises(SourceConnectionError) as exc_info:
            await fetch_suggestions("query", SuggestOptions(delay=0), "google")

        assert "connection refused" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
