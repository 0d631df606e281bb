"""Shared test fixtures for the autocomplete-cli test suite."""

import logging
from typing import Any

import pytest
import respx
import structlog

# ─── Pytest Configuration ────────────────────────────────────────


def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no I/O)")
    config.addinivalue_line("markers", "integration: Integration tests")


# ─── Global State ────────────────────────────────────────────────


@pytest.fixture(autouse=True)
def fresh_rate_limiter():
    """Every test starts as a fresh process: no previous call recorded."""
    from autocomplete_cli.utils.rate_limiter import reset_rate_limiter

    reset_rate_limiter()
    yield
    reset_rate_limiter()


@pytest.fixture(autouse=True)
def quiet_logging():
    """Keep structlog output out of captured stdout."""
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.CRITICAL))
    yield
    structlog.reset_defaults()


# ─── Settings Fixtures ───────────────────────────────────────────


@pytest.fixture
def test_settings():
    """Settings with defaults and debug logging."""
    from autocomplete_cli.config import Settings

    return Settings(log_level="DEBUG", default_delay_ms=0)


# ─── HTTP Fixtures ───────────────────────────────────────────────


@pytest.fixture
def mock_http():
    """RESPX mock router for HTTP mocking."""
    with respx.mock(assert_all_called=False) as router:
        yield router


@pytest.fixture
def fetcher():
    """Rate-limited fetcher with its own limiter."""
    from autocomplete_cli.utils.rate_limiter import MinIntervalLimiter, RateLimitedFetcher

    return RateLimitedFetcher(limiter=MinIntervalLimiter())


# ─── Option Fixtures ─────────────────────────────────────────────


@pytest.fixture
def no_delay():
    """Options that skip the inter-call delay."""
    from autocomplete_cli.models import SuggestOptions

    return SuggestOptions(delay=0)


# ─── Sample Data Fixtures ────────────────────────────────────────


@pytest.fixture
def sample_google_response() -> list:
    """Sample Google suggest payload."""
    return ["test query", ["suggestion 1", "suggestion 2", "suggestion 3"]]


@pytest.fixture
def sample_amazon_response() -> list:
    """Sample Amazon completion payload (extra trailing elements)."""
    return ["iphone", ["iphone 15 case", "iphone charger"], [{}, {}], [], "1XYZ"]


@pytest.fixture
def sample_duckduckgo_response() -> list:
    """Sample DuckDuckGo /ac/ payload."""
    return [
        {"phrase": "python tutorial"},
        {"phrase": ""},
        {"phrase": "python download"},
        {"other": "ignored"},
    ]


@pytest.fixture
def sample_bing_response() -> str:
    """Sample Bing QSML body."""
    return (
        '<?xml version="1.0" encoding="utf-8"?>'
        "<SearchSuggestion><Query>weather</Query><Section>"
        "<Item><Text>weather today</Text></Item>"
        "<Item><Text>weather tomorrow</Text></Item>"
        "<Item><Text>weather radar</Text></Item>"
        "</Section></SearchSuggestion>"
    )
