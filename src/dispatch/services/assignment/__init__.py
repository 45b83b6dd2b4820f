"""Assignment ledger exports."""

from .debounce import RecomputeScheduler
from .ledger import AssignmentLedger, MoveResult

__all__ = ["AssignmentLedger", "MoveResult", "RecomputeScheduler"]
