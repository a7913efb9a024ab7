from __future__ import annotations

from pathlib import Path


class PhotonVulnListError(Exception):
    """Base class for every failure of a Photon update run."""


class FetchError(PhotonVulnListError):
    def __init__(self, message: str, *, url: str | None = None, version: str | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.version = version


class FetchExhaustedError(FetchError):
    def __init__(self, version: str, attempts: int, *, url: str | None = None) -> None:
        super().__init__(
            f"failed to fetch Photon advisory for version {version} after {attempts} retries",
            url=url,
            version=version,
        )
        self.attempts = attempts


class DecodeError(PhotonVulnListError):
    def __init__(self, message: str, *, resource: str | None = None, version: str | None = None) -> None:
        super().__init__(message)
        self.resource = resource
        self.version = version


class InvalidIdentifierError(PhotonVulnListError):
    def __init__(self, identifier: str, *, version: str | None = None) -> None:
        where = f" (photon {version})" if version else ""
        super().__init__(f"invalid CVE-ID format: {identifier}{where}")
        self.identifier = identifier
        self.version = version


class WriteError(PhotonVulnListError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"failed to write {path}: {reason}")
        self.path = path
