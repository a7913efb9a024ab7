from __future__ import annotations


PHOTON_ADVISORY_URL = "https://packages.vmware.com/photon/photon_cve_metadata/"

VERSIONS_FILE = "photon_versions.json"
ADVISORY_FORMAT = "cve_data_photon{version}.json"


def get_versions_url(base_url: str) -> str:
    return f"{base_url}{VERSIONS_FILE}"


def get_advisory_url(base_url: str, version: str) -> str:
    return base_url + ADVISORY_FORMAT.format(version=version)
