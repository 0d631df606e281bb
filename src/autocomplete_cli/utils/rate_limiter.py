"""Minimum-interval rate limiting for outbound requests."""

import time
from collections.abc import Callable

import anyio
import httpx
import structlog

from autocomplete_cli.config import settings

logger = structlog.get_logger(__name__)


class MinIntervalLimiter:
    """
    Spacer that keeps consecutive calls at least ``delay_ms`` apart.

    Only the start time of the previous call is tracked. The first call after
    construction or ``reset()`` never waits.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        """
        Initialize the limiter.

        Args:
            clock: Time source in seconds
        """
        self._clock = clock
        self.last_call: float | None = None
        self._lock = anyio.Lock()

    def reset(self) -> None:
        """Forget the previous call so the next one proceeds immediately."""
        self.last_call = None

    async def acquire(self, delay_ms: int) -> float:
        """
        Wait until ``delay_ms`` has passed since the previous call.

        Args:
            delay_ms: Minimum interval in milliseconds

        Returns:
            Seconds spent waiting
        """
        async with self._lock:
            delay = max(delay_ms, 0) / 1000
            waited = 0.0

            if self.last_call is not None:
                elapsed = self._clock() - self.last_call
                if elapsed < delay:
                    waited = delay - elapsed
                    await anyio.sleep(waited)

            self.last_call = self._clock()
            return waited


class RateLimitedFetcher:
    """
    Shared gate all sources send their requests through.

    The fetcher is a transport passthrough: it never retries and never
    interprets the response status.
    """

    def __init__(
        self,
        limiter: MinIntervalLimiter | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize the fetcher.

        Args:
            limiter: Limiter to use (a fresh one if omitted)
            http_client: Shared HTTP client (optional)
        """
        self.limiter = limiter or MinIntervalLimiter()
        self._http_client = http_client

    def reset(self) -> None:
        """Reset the limiter state."""
        self.limiter.reset()

    def _create_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=settings.request_timeout,
            verify=settings.get_ssl_context(),
            headers={"User-Agent": settings.user_agent},
        )

    async def acquire_and_fetch(self, url: str, delay_ms: int) -> httpx.Response:
        """
        Wait for the rate limiter, then GET ``url``.

        Args:
            url: Fully built request URL
            delay_ms: Minimum interval since the previous call

        Returns:
            The raw HTTP response
        """
        waited = await self.limiter.acquire(delay_ms)
        if waited:
            logger.debug("rate_limit_wait", waited_ms=round(waited * 1000, 1), delay_ms=delay_ms)

        if self._http_client is not None:
            return await self._http_client.get(url)

        async with self._create_client() as client:
            return await client.get(url)


# Process-wide gate shared by every source
default_fetcher = RateLimitedFetcher()


def reset_rate_limiter() -> None:
    """Reset the process-wide limiter (fresh-process semantics)."""
    default_fetcher.reset()
