from __future__ import annotations

import logging
from pathlib import Path

from ..domain.models import AdvisoryRecord
from ..errors import WriteError
from ..ports.store_port import DocumentStorePort

logger = logging.getLogger(__name__)


class AdvisoryWriter:
    def __init__(self, store: DocumentStorePort, base_dir: Path) -> None:
        self._store = store
        self._base_dir = Path(base_dir)

    def write_record(self, sub_path: Path, identifier: str, record: AdvisoryRecord) -> Path:
        """Write record to <base_dir>/<sub_path>/<identifier>.json, replacing any previous file.

        Raises WriteError when the target does not resolve below base_dir.
        """
        directory = self._base_dir / sub_path
        file_name = f"{identifier}.json"
        target = directory / file_name
        if not target.resolve().is_relative_to(self._base_dir.resolve()):
            raise WriteError(target, f"path is outside of {self._base_dir}")
        try:
            path = self._store.write_json(directory, file_name, record.to_document())
        except OSError as exc:
            raise WriteError(target, str(exc)) from exc
        logger.debug(f"Wrote {path}")
        return path
