from __future__ import annotations

from typing import Protocol
import time


class ClockPort(Protocol):
    def sleep(self, seconds: float) -> None:
        """Sleep for the given seconds."""


class SystemClock:
    def sleep(self, seconds: float) -> None:
        time.sleep(seconds)
