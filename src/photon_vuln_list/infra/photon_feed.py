from __future__ import annotations

import logging
from typing import Sequence

from pydantic import ValidationError

from ..config.urls import get_advisory_url, get_versions_url
from ..core.domain.schemas import PhotonVersions
from ..core.errors import DecodeError, FetchError, FetchExhaustedError
from ..core.ports.feed_port import FeedPort
from .http_client import HttpClient

logger = logging.getLogger(__name__)


class PhotonFeedAdapter(FeedPort):
    """Reads the Photon CVE metadata feed over HTTP.

    The manifest request delegates retries to the HTTP client (with backoff),
    while advisory payloads are retried here, one attempt per client call and
    without any wait between attempts.
    """

    def __init__(self, http_client: HttpClient, base_url: str, retry: int) -> None:
        self._http = http_client
        self._base_url = base_url
        self._retry = retry

    def list_versions(self) -> Sequence[str]:
        url = get_versions_url(self._base_url)
        try:
            res = self._http.get_bytes(url, retry=self._retry)
        except FetchError as exc:
            raise FetchError(f"failed to fetch Photon versions: {exc}", url=url) from exc
        try:
            versions = PhotonVersions.model_validate_json(res)
        except ValidationError as exc:
            raise DecodeError(f"failed to decode Photon versions: {exc}", resource=url) from exc
        logger.debug(f"Photon manifest lists {len(versions.branches)} branches")
        return versions.branches

    def fetch_advisory(self, version: str) -> bytes:
        url = get_advisory_url(self._base_url, version)
        last_error: FetchError | None = None
        for i in range(self._retry):
            try:
                return self._http.get_bytes(url, retry=1)
            except FetchError as exc:
                last_error = exc
                logger.warning(
                    f"Retrying to fetch Photon advisory for version {version} ({i + 1}/{self._retry}): {exc}"
                )
        raise FetchExhaustedError(version, self._retry, url=url) from last_error
