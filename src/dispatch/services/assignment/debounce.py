"""Debounced recomputation for drag-and-drop sequences.

A drag gesture can fire several moves in quick succession. The scheduler
forwards each move to the ledger right away but holds the recompute until no
move has arrived for ``window_seconds``; the host decides how often to call
``poll``. Only the crews' final job sets are scored.
"""

from __future__ import annotations

import threading
import time
from typing import Callable, Optional

from ...config import settings
from ..routing.models import RouteMetrics
from .ledger import AssignmentLedger, MoveResult


class RecomputeScheduler:
    def __init__(
        self,
        ledger: AssignmentLedger,
        *,
        window_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ledger = ledger
        self.window_seconds = (
            settings.debounce_window_ms / 1000.0 if window_seconds is None else window_seconds
        )
        self._clock = clock
        self._lock = threading.Lock()
        self._last_change: Optional[float] = None
        self.recompute_count = 0

    @property
    def pending(self) -> bool:
        return self._last_change is not None

    def move(self, job_id: str, from_crew_id: Optional[str], to_crew_id: str) -> MoveResult:
        result = self.ledger.move(job_id, from_crew_id, to_crew_id)
        if result is MoveResult.MOVED:
            self.touch()
        return result

    def unassign(self, job_id: str) -> MoveResult:
        result = self.ledger.unassign(job_id)
        if result is MoveResult.MOVED:
            self.touch()
        return result

    def touch(self) -> None:
        """Restart the quiet window."""

        with self._lock:
            self._last_change = self._clock()

    def poll(self) -> Optional[dict[str, RouteMetrics]]:
        """Recompute dirty crews if the quiet window has elapsed."""

        with self._lock:
            if self._last_change is None:
                return None
            if self._clock() - self._last_change < self.window_seconds:
                return None
            return self._run()

    def flush(self) -> dict[str, RouteMetrics]:
        """Recompute now, regardless of the window."""

        with self._lock:
            return self._run()

    def _run(self) -> dict[str, RouteMetrics]:
        self._last_change = None
        if not self.ledger.dirty_crews():
            return {}
        self.recompute_count += 1
        return self.ledger.recompute_dirty()
