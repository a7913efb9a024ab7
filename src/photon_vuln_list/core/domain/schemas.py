from __future__ import annotations

from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class PhotonVersions(BaseModel):
    """Manifest of the Photon CVE metadata feed (photon_versions.json)"""
    branches: list[str]


class PhotonCve(BaseModel):
    """One entry of cve_data_photon<version>.json.

    Only the identifier and the package name are read; unknown keys are
    accepted so that newer feed fields pass through untouched.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    cve_id: Optional[str] = None
    pkg: Optional[str] = Field(default=None, validation_alias=AliasChoices("pkg", "pkgname"))
    cve_score: float | str | None = None
    aff_ver: Optional[str] = None
    res_ver: Optional[str] = None
    os_version: Optional[str] = None
