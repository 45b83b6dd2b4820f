"""Visit-order construction for a single crew's jobs.

Jobs are ordered priority-first and then chained by nearest neighbour. This
is a greedy heuristic, not an exact TSP solve: it runs on every drag-and-drop
so it has to stay O(n^2) in the number of stops.
"""

from __future__ import annotations

from typing import Iterable

from ...models.domain import Job
from ..geospatial import distance_miles


def priority_sorted(jobs: Iterable[Job]) -> list[Job]:
    """Stable sort by priority weight, highest first."""

    return sorted(jobs, key=lambda job: job.priority.weight, reverse=True)


def nearest_neighbor_order(jobs: list[Job]) -> list[Job]:
    """Chain jobs greedily starting from ``jobs[0]``.

    Each step appends the remaining job closest to the last one appended.
    Ties go to the job that appears first in ``jobs``.
    """
    if len(jobs) <= 1:
        return list(jobs)

    ordered = [jobs[0]]
    remaining = list(jobs[1:])

    while remaining:
        current = ordered[-1].location
        nearest_index = 0
        nearest_distance = distance_miles(current, remaining[0].location)
        for index in range(1, len(remaining)):
            distance = distance_miles(current, remaining[index].location)
            if distance < nearest_distance:
                nearest_distance = distance
                nearest_index = index
        ordered.append(remaining.pop(nearest_index))

    return ordered


def sequence_jobs(jobs: Iterable[Job]) -> list[Job]:
    """Order a crew's jobs into a visit sequence.

    Args:
        jobs: The crew's jobs in insertion order.

    Returns:
        A permutation of ``jobs``. The tour is seeded with the first
        highest-priority job; every later stop is the nearest unvisited one.
    """
    return nearest_neighbor_order(priority_sorted(jobs))
