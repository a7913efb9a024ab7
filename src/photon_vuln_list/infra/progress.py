from __future__ import annotations

from typing import Any

from tqdm import tqdm

from ..core.ports.progress_port import ProgressPort


class TqdmProgress(ProgressPort):
    """Progress sink rendering one tqdm bar per unit of work."""

    def __init__(self, **tqdm_kwargs: Any) -> None:
        self._kwargs = tqdm_kwargs
        self._bar: tqdm | None = None

    def start(self, total: int, desc: str | None = None) -> None:
        self.finish()
        self._bar = tqdm(total=total, desc=desc, unit="cve", **self._kwargs)

    def advance(self, n: int = 1) -> None:
        if self._bar is not None:
            self._bar.update(n)

    def finish(self) -> None:
        # Always close explicitly so no bar is left to __del__
        if self._bar is not None:
            self._bar.close()
            self._bar = None


class NullProgress(ProgressPort):
    def start(self, total: int, desc: str | None = None) -> None:
        pass

    def advance(self, n: int = 1) -> None:
        pass

    def finish(self) -> None:
        pass
