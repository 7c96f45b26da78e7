"""Clock abstraction.

Services that stamp records receive a Clock through their constructor
instead of calling ``datetime.now()`` themselves, so tests can pin time.
"""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from datetime import datetime, timezone


class Clock(ABC):

    @abstractmethod
    def now(self) -> datetime:
        """Return the current time as a timezone-aware UTC datetime."""


class SystemClock(Clock):
    """Wall clock that never goes backwards.

    If the system time is stepped back, the last reading is repeated
    until the wall clock catches up again.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._last: datetime | None = None

    def now(self) -> datetime:
        current = datetime.now(timezone.utc)
        with self._lock:
            if self._last is not None and current < self._last:
                current = self._last
            self._last = current
        return current
