from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol


class DocumentStorePort(Protocol):
    def write_json(self, directory: Path, file_name: str, data: Any) -> Path:
        """Write data as formatted JSON to directory/file_name and return the path.

        Missing parent directories are created and an existing file is replaced.
        Implementations raise OSError on I/O failure.
        """
        ...
