"""Time, cost and efficiency metrics for an ordered route."""

from __future__ import annotations

import math
from typing import Optional, Sequence

from ...config import settings
from ...models.domain import Crew, Job, Priority
from ..geospatial import distance_miles
from ..weather.impact import WeatherInput, adjustment_note, multiplier, weather_sub_score
from .models import MetricsDelta, RouteMetrics

UTILIZATION_WEIGHT = 40.0
PRIORITY_WEIGHT = 25.0
ROUTE_EFFICIENCY_WEIGHT = 25.0


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def compute_metrics(
    ordered_jobs: Sequence[Job],
    weather: WeatherInput = None,
    *,
    fuel_cost_per_mile: Optional[float] = None,
    minutes_per_mile: Optional[float] = None,
    min_segment_minutes: Optional[float] = None,
    workday_hours: Optional[float] = None,
) -> RouteMetrics:
    """Compute route metrics for jobs already in visit order.

    Weather scales drive time and fuel cost only; billable hours are the sum
    of on-site estimates regardless of conditions.
    """
    if not ordered_jobs:
        return RouteMetrics()

    fuel_cost_per_mile = settings.fuel_cost_per_mile if fuel_cost_per_mile is None else fuel_cost_per_mile
    minutes_per_mile = settings.drive_minutes_per_mile if minutes_per_mile is None else minutes_per_mile
    min_segment_minutes = settings.min_segment_minutes if min_segment_minutes is None else min_segment_minutes
    workday_hours = settings.workday_hours if workday_hours is None else workday_hours

    billable_hours = sum(job.estimated_duration_hours for job in ordered_jobs)

    total_distance = 0.0
    raw_drive_minutes = 0.0
    for prev, nxt in zip(ordered_jobs, ordered_jobs[1:]):
        segment = distance_miles(prev.location, nxt.location)
        total_distance += segment
        raw_drive_minutes += max(min_segment_minutes, segment * minutes_per_mile)

    factor = multiplier(weather)
    drive_time_minutes = _round_half_up(raw_drive_minutes * factor)
    fuel_cost = round(total_distance * fuel_cost_per_mile * factor, 2)

    utilization_score = min(UTILIZATION_WEIGHT, (billable_hours / workday_hours) * UTILIZATION_WEIGHT)
    high_count = sum(1 for job in ordered_jobs if job.priority is Priority.HIGH)
    priority_score = (high_count / len(ordered_jobs)) * PRIORITY_WEIGHT
    if billable_hours > 0:
        route_efficiency_score = max(0.0, ROUTE_EFFICIENCY_WEIGHT - (drive_time_minutes / billable_hours * 10))
    else:
        route_efficiency_score = 0.0
    score = _round_half_up(utilization_score + priority_score + route_efficiency_score + weather_sub_score(weather))

    return RouteMetrics(
        total_distance_miles=round(total_distance, 2),
        drive_time_minutes=drive_time_minutes,
        fuel_cost=fuel_cost,
        billable_hours=round(billable_hours, 2),
        optimization_score=max(0, min(100, score)),
    )


def route_efficiency(metrics: RouteMetrics) -> float:
    """Share of the working day spent on billable work, as a percentage."""

    total_hours = metrics.drive_time_minutes / 60 + metrics.billable_hours
    if total_hours == 0:
        return 0.0
    return round(metrics.billable_hours / total_hours * 100, 1)


def compare_metrics(current: RouteMetrics, new: RouteMetrics) -> MetricsDelta:
    return MetricsDelta(
        drive_time_change=new.drive_time_minutes - current.drive_time_minutes,
        distance_change=round(new.total_distance_miles - current.total_distance_miles, 2),
        fuel_cost_change=round(new.fuel_cost - current.fuel_cost, 2),
        efficiency_change=round(route_efficiency(new) - route_efficiency(current), 1),
    )


def optimization_suggestions(jobs: Sequence[Job], metrics: RouteMetrics) -> list[str]:
    suggestions: list[str] = []
    if not jobs:
        return suggestions

    if route_efficiency(metrics) < 70:
        suggestions.append("Consider reordering jobs to minimize travel time")
    if metrics.total_distance_miles > 50:
        suggestions.append("Route covers significant distance - consider splitting across multiple crews")
    if metrics.drive_time_minutes > 120:
        suggestions.append("High drive time detected - optimize job sequence")
    if metrics.billable_hours / len(jobs) < 1:
        suggestions.append("Many short jobs - consider batching nearby locations")
    if any(job.priority is Priority.HIGH for job in jobs):
        suggestions.append("Prioritize high-priority jobs earlier in the route")
    return suggestions


def build_route_notes(
    jobs: Sequence[Job],
    metrics: RouteMetrics,
    weather: WeatherInput,
    crew: Optional[Crew] = None,
) -> list[str]:
    """Human-readable summary lines shown next to a crew's optimized route."""

    notes = [f"Optimized {len(jobs)} stops using nearest-neighbor algorithm"]
    if jobs:
        # Baseline assumes 2.5 miles per stop when nothing is sequenced.
        baseline = len(jobs) * 2.5
        saved = round((baseline - metrics.total_distance_miles) / baseline * 100)
        notes.append(f"Reduced travel distance by {saved}%")
    notes.append(adjustment_note(weather))
    if crew is not None:
        notes.append(f"Crew specialization match: {crew.specialization}")
    return notes
