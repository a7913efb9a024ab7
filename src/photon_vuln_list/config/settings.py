from __future__ import annotations

from pathlib import Path

import platformdirs
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .urls import PHOTON_ADVISORY_URL


def default_vuln_list_dir() -> Path:
    return Path(platformdirs.user_cache_dir("vuln-list-update")) / "vuln-list"


class AppConfig(BaseSettings):
    """Application configuration with automatic environment variable loading.

    All settings can be overridden via environment variables with the PHOTON_VULN_LIST_ prefix.
    For example:
        - PHOTON_VULN_LIST_VULN_LIST_DIR=/srv/vuln-list
        - PHOTON_VULN_LIST_URL=https://mirror.example.com/photon_cve_metadata/
        - PHOTON_VULN_LIST_RETRY=3

    Alternatively, settings can be provided programmatically when creating the Container:
        container = Container()
        container.config.from_pydantic(AppConfig(retry=3))
    """

    model_config = SettingsConfigDict(
        env_prefix="PHOTON_VULN_LIST_",
        case_sensitive=False,
        extra="forbid",
    )

    vuln_list_dir: Path = Field(
        default_factory=default_vuln_list_dir,
        description="Root of the vuln-list tree. Advisories are written below <vuln_list_dir>/photon",
    )

    url: str = Field(
        default=PHOTON_ADVISORY_URL,
        description="Base URL of the Photon CVE metadata feed",
    )

    retry: int = Field(
        default=5,
        ge=1,
        description="Number of attempts for each feed request",
    )

    timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout of a single HTTP request in seconds",
    )

    retry_wait_seconds: float = Field(
        default=1.0,
        ge=0,
        description="Base delay of the HTTP client's exponential backoff between attempts",
    )

    progress: bool = Field(
        default=True,
        description="Render a progress bar while writing advisories",
    )

    @field_validator("url")
    @classmethod
    def _ensure_trailing_slash(cls, value: str) -> str:
        return value if value.endswith("/") else value + "/"
