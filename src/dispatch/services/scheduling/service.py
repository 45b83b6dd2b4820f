"""Schedule orchestration service: the batch "optimize" action."""

from __future__ import annotations

import logging
from dataclasses import asdict
from datetime import date
from typing import Optional, Sequence

from ...data.jobs_repository import load_crews, load_jobs
from ...models.domain import Crew, Job, Priority, WeatherCondition
from ...schemas.routing import RouteMetricsModel, RouteStopModel, weather_to_domain
from ...schemas.schedules import CrewRouteModel, ScheduleRequest, ScheduleResponse
from ..assignment.ledger import AssignmentLedger
from ..routing.metrics import build_route_notes, route_efficiency
from ..routing.models import CrewRoute, ScheduleResult
from ..routing.timeline import route_timeline
from ..weather.impact import describe, weather_impact_percent


def build_crew_route(
    ledger: AssignmentLedger,
    crew: Crew,
    *,
    start_time: Optional[str] = None,
) -> CrewRoute:
    jobs = ledger.jobs_for(crew.id)
    metrics = ledger.metrics_for(crew.id)
    return CrewRoute(
        crew=crew,
        jobs=jobs,
        metrics=metrics,
        efficiency=route_efficiency(metrics),
        notes=build_route_notes(jobs, metrics, ledger.weather, crew),
        timeline=route_timeline(jobs, metrics, start_time),
    )


def _optimization_factors(
    jobs: Sequence[Job],
    crews: Sequence[Crew],
    routes: Sequence[CrewRoute],
    weather: Optional[WeatherCondition],
) -> dict[str, int]:
    scheduled = [route for route in routes if route.jobs]
    high = sum(1 for job in jobs if job.priority is Priority.HIGH)
    return {
        "weather_impact": weather_impact_percent(weather),
        "route_efficiency": round(sum(r.metrics.total_distance_miles for r in routes) / len(routes)) if routes else 0,
        "job_prioritization": round(high / len(jobs) * 100) if jobs else 0,
        "crew_specialization": round(len(scheduled) / len(crews) * 100) if crews else 0,
    }


def optimize_schedule(
    jobs: Sequence[Job],
    crews: Sequence[Crew],
    weather: Optional[WeatherCondition] = None,
    *,
    schedule_date: Optional[str] = None,
    start_time: Optional[str] = None,
) -> ScheduleResult:
    """Distribute jobs over crews and score every resulting route.

    Args:
        jobs: Jobs for the day, in arrival order.
        crews: Available crews; job ``i`` goes to crew ``i % len(crews)``.
        weather: Forecast for the day, sunny when omitted.
        schedule_date: ISO date label, today when omitted.
        start_time: Day start used for arrival estimates.

    Returns:
        ScheduleResult with one route per crew and schedule-wide factors.
    """
    ledger = AssignmentLedger(weather=weather)
    ledger.distribute(jobs, crews)

    routes = [build_crew_route(ledger, crew, start_time=start_time) for crew in crews]
    total_efficiency = (
        round(sum(route.metrics.optimization_score for route in routes) / len(routes)) if routes else 0
    )
    logging.info(f"Optimized schedule for {len(jobs)} jobs, {len(crews)} crews; total efficiency {total_efficiency}")

    return ScheduleResult(
        schedule_date=schedule_date or date.today().isoformat(),
        weather=describe(weather),
        routes=routes,
        unassigned=ledger.unassigned(),
        total_efficiency=total_efficiency,
        optimization_factors=_optimization_factors(jobs, crews, routes, weather),
    )


def crew_route_to_model(route: CrewRoute) -> CrewRouteModel:
    return CrewRouteModel(
        crew_id=route.crew.id,
        crew_name=route.crew.name,
        specialization=route.crew.specialization,
        job_ids=[job.id for job in route.jobs],
        metrics=RouteMetricsModel(**asdict(route.metrics)),
        efficiency=route.efficiency,
        notes=route.notes,
        timeline=[RouteStopModel(**asdict(stop)) for stop in route.timeline],
    )


def schedule_result_to_response(result: ScheduleResult) -> ScheduleResponse:
    return ScheduleResponse(
        schedule_date=result.schedule_date,
        weather=result.weather,
        routes=[crew_route_to_model(route) for route in result.routes],
        unassigned=[job.id for job in result.unassigned],
        total_efficiency=result.total_efficiency,
        optimization_factors=result.optimization_factors,
    )


def run_schedule_request(payload: ScheduleRequest) -> ScheduleResult:
    jobs = [job.to_domain() for job in payload.jobs] if payload.jobs is not None else list(load_jobs())
    crews = [crew.to_domain() for crew in payload.crews] if payload.crews is not None else list(load_crews())
    if not jobs:
        raise ValueError("No jobs to schedule.")
    return optimize_schedule(
        jobs,
        crews,
        weather_to_domain(payload.weather),
        schedule_date=payload.schedule_date,
        start_time=payload.start_time,
    )


def process_schedule_request(payload: ScheduleRequest) -> ScheduleResponse:
    return schedule_result_to_response(run_schedule_request(payload))
