"""Utility modules for autocomplete-cli."""

from autocomplete_cli.utils.rate_limiter import (
    MinIntervalLimiter,
    RateLimitedFetcher,
    default_fetcher,
    reset_rate_limiter,
)

__all__ = [
    "MinIntervalLimiter",
    "RateLimitedFetcher",
    "default_fetcher",
    "reset_rate_limiter",
]
