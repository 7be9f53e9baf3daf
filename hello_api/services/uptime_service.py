import time
from typing import Callable, Optional

# Captured when the package is first imported, i.e. at process start for run.py.
PROCESS_STARTED_AT = time.monotonic()


class UptimeService:
    """
    Reports how long the serving process has been running.

    Uses a monotonic clock so the value never goes backwards when the wall
    clock is adjusted.
    """

    def __init__(self, started_at: Optional[float] = None, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._started_at = PROCESS_STARTED_AT if started_at is None else started_at

    def uptime_seconds(self) -> float:
        return max(0.0, self._clock() - self._started_at)
