from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import TypeAdapter, ValidationError

from ...config.urls import ADVISORY_FORMAT
from ..domain.models import AdvisoryRecord
from ..domain.schemas import PhotonCve
from ..errors import DecodeError, InvalidIdentifierError

logger = logging.getLogger(__name__)

_entries_adapter = TypeAdapter(list[PhotonCve])


class RecordSplitter:
    """Turns a branch's advisory payload into records ready to be persisted.

    A record without identifier is dropped and logged. A record whose
    identifier does not have exactly three dash-separated segments aborts the
    branch, and the run, with InvalidIdentifierError.
    """

    def split(self, version: str, payload: bytes) -> list[AdvisoryRecord]:
        records: list[AdvisoryRecord] = []
        for raw, entry in self.decode(version, payload):
            record = self.to_record(version, raw, entry)
            if record is not None:
                records.append(record)
        return records

    def decode(self, version: str, payload: bytes) -> list[tuple[dict[str, Any], PhotonCve]]:
        resource = ADVISORY_FORMAT.format(version=version)
        prefix = f"failed to unmarshal Photon advisory for version {version}"
        try:
            raw = json.loads(payload)
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise DecodeError(f"{prefix}: {exc}", resource=resource, version=version) from exc
        if not isinstance(raw, list):
            raise DecodeError(
                f"{prefix}: expected JSON array, got {type(raw).__name__}", resource=resource, version=version
            )
        try:
            entries = _entries_adapter.validate_python(raw)
        except ValidationError as exc:
            raise DecodeError(f"{prefix}: {exc}", resource=resource, version=version) from exc
        return list(zip(raw, entries))

    def to_record(self, version: str, raw: dict[str, Any], entry: PhotonCve) -> AdvisoryRecord | None:
        cve_id = entry.cve_id or ""
        if not cve_id:
            logger.info(f"CVE-ID is empty (photon {version}, package {entry.pkg or '-'})")
            return None
        validate_identifier(cve_id, version=version)
        return AdvisoryRecord(
            cve_id=cve_id,
            package=entry.pkg or "",
            os_version=version,
            fields=dict(raw),
        )


def validate_identifier(cve_id: str, *, version: str | None = None) -> None:
    if len(cve_id.split("-")) != 3:
        logger.warning(f"invalid CVE-ID: {cve_id} (photon {version or '-'})")
        raise InvalidIdentifierError(cve_id, version=version)
