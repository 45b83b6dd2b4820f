"""Arrival and departure estimates along a crew's route."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional, Sequence

from ...config import settings
from ...models.domain import Job
from .models import RouteMetrics, RouteStop


def _format_clock(moment: datetime) -> str:
    hour = moment.hour % 12 or 12
    suffix = "AM" if moment.hour < 12 else "PM"
    return f"{hour}:{moment.minute:02d} {suffix}"


def _parse_start(start_time: str) -> datetime:
    try:
        hour, minute = (int(part) for part in start_time.split(":"))
    except ValueError as exc:
        raise ValueError(f"start_time must be HH:MM, got '{start_time}'") from exc
    if not (0 <= hour < 24 and 0 <= minute < 60):
        raise ValueError(f"start_time out of range: '{start_time}'")
    return datetime(2000, 1, 1, hour, minute)


def route_timeline(
    jobs: Sequence[Job],
    metrics: RouteMetrics,
    start_time: Optional[str] = None,
) -> list[RouteStop]:
    """Estimate when the crew reaches and leaves each stop.

    Drive time is spread evenly over the hops; the first stop is reached at
    ``start_time``.
    """
    if not jobs:
        return []

    clock = _parse_start(start_time or settings.default_start_time)
    per_hop = timedelta(minutes=metrics.drive_time_minutes / max(len(jobs) - 1, 1))

    stops: list[RouteStop] = []
    for sequence, job in enumerate(jobs, start=1):
        if sequence > 1:
            clock += per_hop
        departure = clock + timedelta(hours=job.estimated_duration_hours)
        stops.append(
            RouteStop(
                job_id=job.id,
                sequence=sequence,
                arrival=_format_clock(clock),
                departure=_format_clock(departure),
                latitude=job.location.latitude,
                longitude=job.location.longitude,
                address=job.address,
            )
        )
        clock = departure
    return stops
