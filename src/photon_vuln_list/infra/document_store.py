from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..core.ports.store_port import DocumentStorePort


class LocalDocumentStore(DocumentStorePort):
    def write_json(self, directory: Path, file_name: str, data: Any) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / file_name
        path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
        return path
