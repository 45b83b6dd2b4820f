"""In-memory job-to-crew assignment ledger.

The ledger owns the current assignment for one dispatch board: the jobs held
by each crew in the order they were assigned, the visit order last computed
from them, a pool of unassigned jobs, and an index from job id to its current
owner so a job can never sit in two places at once. Mutations mark crews
dirty; metrics are only recomputed when the host calls ``recompute_dirty``.

Sequencing always starts from the assignment order, never from a previous
visit order, so a crew's tour depends only on its current jobs.
"""

from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import Iterable, Optional, Sequence

from ...exceptions import UnknownCrewError, UnknownJobError
from ...models.domain import Crew, Job
from ..routing.metrics import compute_metrics
from ..routing.models import RouteMetrics
from ..routing.sequencer import sequence_jobs
from ..weather.impact import WeatherInput


class MoveResult(str, Enum):
    MOVED = "moved"
    NOOP = "noop"
    UNKNOWN_JOB = "unknown_job"


class AssignmentLedger:
    """Job assignments for a set of crews, with scoped recomputation."""

    def __init__(self, weather: WeatherInput = None) -> None:
        self._lock = threading.RLock()
        self._weather = weather
        self._crews: dict[str, Crew] = {}
        self._jobs: dict[str, Job] = {}
        self._assigned: dict[str, list[str]] = {}
        self._visit_order: dict[str, list[str]] = {}
        self._unassigned: list[str] = []
        self._owner: dict[str, Optional[str]] = {}
        self._metrics: dict[str, RouteMetrics] = {}
        # dict keeps insertion order so recomputes run in the order crews were touched
        self._dirty: dict[str, None] = {}

    @property
    def weather(self) -> WeatherInput:
        return self._weather

    @property
    def crews(self) -> list[Crew]:
        with self._lock:
            return list(self._crews.values())

    def reset(self) -> None:
        with self._lock:
            self._crews.clear()
            self._jobs.clear()
            self._assigned.clear()
            self._visit_order.clear()
            self._unassigned.clear()
            self._owner.clear()
            self._metrics.clear()
            self._dirty.clear()

    def distribute(self, jobs: Sequence[Job], crews: Sequence[Crew]) -> dict[str, list[str]]:
        """Replace the current assignment with a round-robin distribution.

        Job ``i`` goes to crew ``i % len(crews)``. The split ignores geography;
        only the order within each crew is optimized. With no crews every job
        lands in the unassigned pool.
        """
        _ensure_unique((crew.id for crew in crews), "crew")
        _ensure_unique((job.id for job in jobs), "job")

        with self._lock:
            self.reset()
            for crew in crews:
                self._crews[crew.id] = crew
                self._assigned[crew.id] = []
            for index, job in enumerate(jobs):
                self._jobs[job.id] = job
                if crews:
                    crew_id = crews[index % len(crews)].id
                    self._assigned[crew_id].append(job.id)
                    self._owner[job.id] = crew_id
                else:
                    self._unassigned.append(job.id)
                    self._owner[job.id] = None

            for crew_id in self._assigned:
                self._refresh_crew(crew_id)

            logging.info(
                f"Distributed {len(jobs)} jobs across {len(crews)} crews "
                f"({len(self._unassigned)} unassigned)"
            )
            return self.assignments()

    def add_unassigned(self, jobs: Iterable[Job]) -> None:
        """Register new jobs in the unassigned pool."""

        jobs = list(jobs)
        with self._lock:
            _ensure_unique([*self._jobs, *(job.id for job in jobs)], "job")
            for job in jobs:
                self._jobs[job.id] = job
                self._owner[job.id] = None
                self._unassigned.append(job.id)

    def move(self, job_id: str, from_crew_id: Optional[str], to_crew_id: str) -> MoveResult:
        """Move a job to the end of another crew's sequence.

        ``from_crew_id`` of ``None`` means the unassigned pool. A job that is
        unknown, or is not where the caller says it is, is reported as
        ``UNKNOWN_JOB``; a drop onto the crew the job came from is ``NOOP``.
        Neither case changes any state. Unknown crew ids raise
        ``UnknownCrewError`` before anything is touched.
        """
        with self._lock:
            if to_crew_id not in self._crews:
                raise UnknownCrewError(to_crew_id)
            if from_crew_id is not None and from_crew_id not in self._crews:
                raise UnknownCrewError(from_crew_id)
            if job_id not in self._jobs or self._owner.get(job_id) != from_crew_id:
                logging.warning(f"Ignoring move of job '{job_id}': not found in source '{from_crew_id}'")
                return MoveResult.UNKNOWN_JOB
            if from_crew_id == to_crew_id:
                return MoveResult.NOOP

            self._detach(job_id, from_crew_id)
            self._assigned[to_crew_id].append(job_id)
            self._visit_order[to_crew_id].append(job_id)
            self._owner[job_id] = to_crew_id

            if from_crew_id is not None:
                self._dirty[from_crew_id] = None
            self._dirty[to_crew_id] = None
            return MoveResult.MOVED

    def unassign(self, job_id: str) -> MoveResult:
        """Return a job to the unassigned pool."""

        with self._lock:
            if job_id not in self._jobs:
                raise UnknownJobError(job_id)
            from_crew_id = self._owner[job_id]
            if from_crew_id is None:
                return MoveResult.NOOP

            self._detach(job_id, from_crew_id)
            self._unassigned.append(job_id)
            self._owner[job_id] = None
            self._dirty[from_crew_id] = None
            return MoveResult.MOVED

    def set_weather(self, weather: WeatherInput) -> None:
        """Change the forecast; every crew's metrics become stale."""

        with self._lock:
            self._weather = weather
            for crew_id in self._crews:
                self._dirty[crew_id] = None

    def recompute_dirty(self) -> dict[str, RouteMetrics]:
        """Re-sequence and re-score every dirty crew, then clear the flags."""

        with self._lock:
            results: dict[str, RouteMetrics] = {}
            for crew_id in list(self._dirty):
                results[crew_id] = self._refresh_crew(crew_id)
            self._dirty.clear()
            if results:
                logging.info(f"Recomputed metrics for crews: {', '.join(results)}")
            return results

    def dirty_crews(self) -> list[str]:
        with self._lock:
            return list(self._dirty)

    def owner_of(self, job_id: str) -> Optional[str]:
        with self._lock:
            if job_id not in self._jobs:
                raise UnknownJobError(job_id)
            return self._owner[job_id]

    def sequence_for(self, crew_id: str) -> list[str]:
        """Visit order for a crew; jobs moved in since the last recompute trail at the end."""

        with self._lock:
            if crew_id not in self._crews:
                raise UnknownCrewError(crew_id)
            return list(self._visit_order[crew_id])

    def assigned_to(self, crew_id: str) -> list[str]:
        """Job ids held by a crew in the order they were assigned."""

        with self._lock:
            if crew_id not in self._crews:
                raise UnknownCrewError(crew_id)
            return list(self._assigned[crew_id])

    def jobs_for(self, crew_id: str) -> list[Job]:
        with self._lock:
            return [self._jobs[job_id] for job_id in self.sequence_for(crew_id)]

    def metrics_for(self, crew_id: str) -> RouteMetrics:
        """Last published metrics for a crew (stale while the crew is dirty)."""

        with self._lock:
            if crew_id not in self._crews:
                raise UnknownCrewError(crew_id)
            return self._metrics.get(crew_id, RouteMetrics())

    def unassigned(self) -> list[Job]:
        with self._lock:
            return [self._jobs[job_id] for job_id in self._unassigned]

    def assignments(self) -> dict[str, list[str]]:
        with self._lock:
            return {crew_id: list(job_ids) for crew_id, job_ids in self._visit_order.items()}

    def snapshot(self) -> dict:
        with self._lock:
            return {
                "assignments": self.assignments(),
                "unassigned": list(self._unassigned),
                "metrics": dict(self._metrics),
                "dirty": list(self._dirty),
            }

    def _detach(self, job_id: str, crew_id: Optional[str]) -> None:
        if crew_id is None:
            self._unassigned.remove(job_id)
            return
        self._assigned[crew_id].remove(job_id)
        self._visit_order[crew_id].remove(job_id)

    def _refresh_crew(self, crew_id: str) -> RouteMetrics:
        ordered = sequence_jobs(self._jobs[job_id] for job_id in self._assigned[crew_id])
        self._visit_order[crew_id] = [job.id for job in ordered]
        metrics = compute_metrics(ordered, self._weather)
        self._metrics[crew_id] = metrics
        return metrics


def _ensure_unique(ids: Iterable[str], label: str) -> None:
    seen: set[str] = set()
    for item in ids:
        if item in seen:
            raise ValueError(f"Duplicate {label} id '{item}'")
        seen.add(item)
