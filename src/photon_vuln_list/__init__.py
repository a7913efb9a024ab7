"""photon_vuln_list package: app/config/core/infra.

Expose library-friendly API client at the package level.
"""

from .app.api import AppConfig, PhotonVulnListClient
from .core.errors import (
    DecodeError,
    FetchError,
    FetchExhaustedError,
    InvalidIdentifierError,
    PhotonVulnListError,
    WriteError,
)

import logging

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

__all__ = [
    "PhotonVulnListClient",
    "AppConfig",
    "PhotonVulnListError",
    "FetchError",
    "FetchExhaustedError",
    "DecodeError",
    "InvalidIdentifierError",
    "WriteError",
]
