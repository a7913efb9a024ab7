from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class AdvisoryRecord:
    """One CVE-to-package association of a Photon branch.

    ``fields`` holds the advisory entry exactly as it was received; it is
    never interpreted beyond the identifier and the package name.
    """

    cve_id: str
    package: str
    os_version: str
    fields: dict[str, Any] = field(default_factory=dict, compare=False)

    @property
    def sub_path(self) -> Path:
        # Joined as path parts: an absolute package name stays below the branch directory
        return Path(self.os_version.lstrip("/\\"), self.package.lstrip("/\\"))

    def to_document(self) -> dict[str, Any]:
        return {**self.fields, "os_version": self.os_version}


@dataclass
class UpdateSummary:
    versions: list[str] = field(default_factory=list)
    records_written: int = 0
    files: list[Path] = field(default_factory=list)
