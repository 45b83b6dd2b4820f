"""Routing domain models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from ...models.domain import Crew, Job


@dataclass(frozen=True, slots=True)
class RouteMetrics:
    total_distance_miles: float = 0.0
    drive_time_minutes: int = 0
    fuel_cost: float = 0.0
    billable_hours: float = 0.0
    optimization_score: int = 0


@dataclass(frozen=True, slots=True)
class MetricsDelta:
    drive_time_change: int
    distance_change: float
    fuel_cost_change: float
    efficiency_change: float


@dataclass(slots=True)
class RouteStop:
    job_id: str
    sequence: int
    arrival: str
    departure: str
    latitude: float
    longitude: float
    address: str | None = None


@dataclass(slots=True)
class CrewRoute:
    crew: Crew
    jobs: List[Job]
    metrics: RouteMetrics
    efficiency: float
    notes: List[str] = field(default_factory=list)
    timeline: List[RouteStop] = field(default_factory=list)


@dataclass(slots=True)
class ScheduleResult:
    schedule_date: str
    weather: dict
    routes: List[CrewRoute]
    unassigned: List[Job]
    total_efficiency: int
    optimization_factors: dict[str, int]
