"""Process-local registry of dispatch boards."""

from __future__ import annotations

import threading
import uuid
from dataclasses import dataclass

from ...exceptions import LedgerNotFoundError
from .debounce import RecomputeScheduler
from .ledger import AssignmentLedger


@dataclass(slots=True)
class LedgerEntry:
    ledger: AssignmentLedger
    scheduler: RecomputeScheduler


class LedgerRegistry:
    def __init__(self) -> None:
        self._entries: dict[str, LedgerEntry] = {}
        self._lock = threading.Lock()

    def create(self, ledger: AssignmentLedger) -> str:
        ledger_id = uuid.uuid4().hex
        with self._lock:
            self._entries[ledger_id] = LedgerEntry(ledger=ledger, scheduler=RecomputeScheduler(ledger))
        return ledger_id

    def get(self, ledger_id: str) -> LedgerEntry:
        with self._lock:
            entry = self._entries.get(ledger_id)
        if entry is None:
            raise LedgerNotFoundError(ledger_id)
        return entry

    def remove(self, ledger_id: str) -> None:
        with self._lock:
            entry = self._entries.pop(ledger_id, None)
        if entry is None:
            raise LedgerNotFoundError(ledger_id)
        entry.ledger.reset()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()


registry = LedgerRegistry()
