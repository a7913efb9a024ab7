from __future__ import annotations

import logging
from typing import Mapping, Optional

import httpx

from ..core.errors import FetchError
from ..core.ports.clock_port import ClockPort, SystemClock

logger = logging.getLogger(__name__)


class HttpClient:
    def __init__(
        self,
        base_headers: Optional[Mapping[str, str]] = None,
        timeout_seconds: float = 20.0,
        retry_wait_seconds: float = 1.0,
        clock: Optional[ClockPort] = None,
    ) -> None:
        self._client = httpx.Client(
            timeout=timeout_seconds,
            headers=dict(base_headers or {}),
            follow_redirects=True,
            max_redirects=10
        )
        self._retry_wait = retry_wait_seconds
        self._clock = clock or SystemClock()

    def get_bytes(self, url: str, retry: int = 1) -> bytes:
        """GET url and return the body, trying up to ``retry`` times.

        Attempts are separated by an exponential backoff starting at
        ``retry_wait_seconds``. Non-2xx responses count as failed attempts.
        """
        attempts = max(1, retry)
        last_error: httpx.HTTPError | None = None
        for attempt in range(attempts):
            if attempt > 0:
                wait = self._retry_wait * (2 ** (attempt - 1))
                logger.debug(f"Waiting {wait:.1f}s before retrying {url} ({attempt + 1}/{attempts})")
                self._clock.sleep(wait)
            try:
                resp = self._client.get(url)
                resp.raise_for_status()
                return resp.content
            except httpx.HTTPError as exc:
                logger.debug(f"GET {url} failed ({attempt + 1}/{attempts}): {exc}")
                last_error = exc
        raise FetchError(f"failed to fetch {url}: {last_error}", url=url) from last_error

    def close(self) -> None:
        self._client.close()
