"""Single-route endpoints: sequencing and metrics for an explicit job list."""

from __future__ import annotations

import logging
from dataclasses import asdict

from fastapi import APIRouter, HTTPException, status

from ...schemas.routing import (
    MetricsRequest,
    MetricsResponse,
    RouteMetricsModel,
    RouteStopModel,
    SequenceRequest,
    SequenceResponse,
    weather_to_domain,
)
from ...services.routing.metrics import compute_metrics, optimization_suggestions, route_efficiency
from ...services.routing.sequencer import sequence_jobs
from ...services.routing.timeline import route_timeline

router = APIRouter(prefix="/routes", tags=["routes"])


@router.post("/sequence", response_model=SequenceResponse, status_code=status.HTTP_200_OK)
def sequence(payload: SequenceRequest) -> SequenceResponse:
    ordered = sequence_jobs(job.to_domain() for job in payload.jobs)
    return SequenceResponse(job_ids=[job.id for job in ordered])


@router.post("/metrics", response_model=MetricsResponse, status_code=status.HTTP_200_OK)
def metrics(payload: MetricsRequest) -> MetricsResponse:
    """Score jobs in the order given, without re-sequencing them."""
    try:
        jobs = [job.to_domain() for job in payload.jobs]
        result = compute_metrics(jobs, weather_to_domain(payload.weather))
        timeline = route_timeline(jobs, result, payload.start_time)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logging.exception(f"Error computing route metrics: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to compute route metrics: {str(exc)}",
        ) from exc

    return MetricsResponse(
        metrics=RouteMetricsModel(**asdict(result)),
        efficiency=route_efficiency(result),
        suggestions=optimization_suggestions(jobs, result),
        timeline=[RouteStopModel(**asdict(stop)) for stop in timeline],
    )
