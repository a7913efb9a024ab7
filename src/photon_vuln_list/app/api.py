from __future__ import annotations

from pathlib import Path

from .container import Container
from ..config.settings import AppConfig
from ..core.domain.models import UpdateSummary


class PhotonVulnListClient:
    """Client for mirroring the Photon CVE metadata feed into a vuln-list tree.

    The container and its resources (the HTTP connection pool) are initialized
    once and reused across calls.

    Example:
        # Using default configuration (from environment variables)
        with PhotonVulnListClient() as client:
            summary = client.update()

        # Customize settings
        with PhotonVulnListClient(vuln_list_dir="/srv/vuln-list", retry=3, progress=False) as client:
            versions = client.list_versions()
            summary = client.update()
    """

    def __init__(
        self,
        *,
        vuln_list_dir: str | Path | None = None,
        url: str | None = None,
        retry: int | None = None,
        timeout_seconds: float | None = None,
        retry_wait_seconds: float | None = None,
        progress: bool | None = None,
    ):
        """Initialize the client.

        Args:
            vuln_list_dir: Root of the vuln-list tree. Advisories land in <vuln_list_dir>/photon.
                           If None, uses PHOTON_VULN_LIST_VULN_LIST_DIR or the user cache directory.
            url: Base URL of the feed. If None, uses PHOTON_VULN_LIST_URL or the VMware mirror.
            retry: Attempts per feed request. If None, uses PHOTON_VULN_LIST_RETRY or default (5).
            timeout_seconds: Per request timeout. If None, uses PHOTON_VULN_LIST_TIMEOUT_SECONDS or default (20).
            retry_wait_seconds: Base backoff of the HTTP client. If None, uses the environment or default (1).
            progress: Whether to render progress bars. If None, uses PHOTON_VULN_LIST_PROGRESS or default (True).
        """
        self._container = Container()

        # Build config dict with only provided values
        config_dict: dict[str, object] = {}
        if vuln_list_dir is not None:
            config_dict["vuln_list_dir"] = Path(vuln_list_dir)
        if url is not None:
            config_dict["url"] = url
        if retry is not None:
            config_dict["retry"] = retry
        if timeout_seconds is not None:
            config_dict["timeout_seconds"] = timeout_seconds
        if retry_wait_seconds is not None:
            config_dict["retry_wait_seconds"] = retry_wait_seconds
        if progress is not None:
            config_dict["progress"] = progress

        # Re-read the environment so it takes effect over the defaults loaded at import
        self._container.config.from_pydantic(AppConfig(**config_dict))
        self._container.init_resources()

    def update(self) -> UpdateSummary:
        """Fetch every Photon branch (except "dev") and write one JSON file per CVE and package.

        Raises:
            PhotonVulnListError: on the first fetch, decode, identifier or write failure.
        """
        uc = self._container.update_uc()
        return uc.execute()

    def list_versions(self) -> list[str]:
        """Return the branches of the feed manifest in manifest order, "dev" included."""
        uc = self._container.list_versions_uc()
        return uc.execute()

    def close(self) -> None:
        self._container.shutdown_resources()

    def __enter__(self) -> PhotonVulnListClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


__all__ = [
    "PhotonVulnListClient",
    "AppConfig",
]
