from __future__ import annotations

from typing import Protocol, Sequence


class FeedPort(Protocol):
    def list_versions(self) -> Sequence[str]:
        """Return the branches published in the feed manifest, in manifest order."""
        ...

    def fetch_advisory(self, version: str) -> bytes:
        """Return the raw advisory payload of one branch.

        Implementations raise FetchError (or FetchExhaustedError) when every
        attempt failed.
        """
        ...
