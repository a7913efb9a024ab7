from __future__ import annotations

from ..ports.feed_port import FeedPort

SKIPPED_BRANCH = "dev"


def is_skipped_branch(version: str) -> bool:
    return version.lower() == SKIPPED_BRANCH


class ListVersionsUseCase:
    def __init__(self, feed: FeedPort) -> None:
        self._feed = feed

    def execute(self) -> list[str]:
        return list(self._feed.list_versions())
