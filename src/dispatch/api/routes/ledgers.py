"""Dispatch board endpoints: live assignment, drag-and-drop moves, recompute."""

from __future__ import annotations

import logging
from dataclasses import asdict

from fastapi import APIRouter, HTTPException, status

from ...exceptions import LedgerNotFoundError, UnknownCrewError, UnknownJobError
from ...schemas.routing import RouteMetricsModel, WeatherModel, weather_to_domain
from ...schemas.schedules import (
    LedgerCreateRequest,
    LedgerStateResponse,
    MoveRequest,
    MoveResponse,
    RecomputeResponse,
    UnassignRequest,
)
from ...services.assignment.ledger import AssignmentLedger
from ...services.assignment.registry import LedgerEntry, registry

router = APIRouter(prefix="/ledgers", tags=["ledgers"])


def _entry(ledger_id: str) -> LedgerEntry:
    try:
        return registry.get(ledger_id)
    except LedgerNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc

def _metrics_models(metrics: dict) -> dict[str, RouteMetricsModel]:
    return {crew_id: RouteMetricsModel(**asdict(value)) for crew_id, value in metrics.items()}

def _state(ledger_id: str, ledger: AssignmentLedger) -> LedgerStateResponse:
    snapshot = ledger.snapshot()
    return LedgerStateResponse(
        ledger_id=ledger_id,
        assignments=snapshot["assignments"],
        unassigned=snapshot["unassigned"],
        metrics=_metrics_models(snapshot["metrics"]),
        dirty=snapshot["dirty"],
    )

@router.post("", response_model=LedgerStateResponse, status_code=status.HTTP_201_CREATED)
def create_ledger(payload: LedgerCreateRequest) -> LedgerStateResponse:
    ledger = AssignmentLedger(weather=weather_to_domain(payload.weather))
    try:
        ledger.distribute(
            [job.to_domain() for job in payload.jobs],
            [crew.to_domain() for crew in payload.crews],
        )
        ledger.add_unassigned(job.to_domain() for job in payload.unassigned)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    ledger_id = registry.create(ledger)
    logging.info(f"Created ledger {ledger_id}")
    return _state(ledger_id, ledger)

@router.get("/{ledger_id}", response_model=LedgerStateResponse, status_code=status.HTTP_200_OK)
def get_ledger(ledger_id: str) -> LedgerStateResponse:
    """Current state; runs a pending recompute if the debounce window has passed."""
    entry = _entry(ledger_id)
    entry.scheduler.poll()
    return _state(ledger_id, entry.ledger)

@router.post("/{ledger_id}/moves", response_model=MoveResponse, status_code=status.HTTP_200_OK)
def move_job(ledger_id: str, payload: MoveRequest) -> MoveResponse:
    entry = _entry(ledger_id)
    try:
        result = entry.scheduler.move(payload.job_id, payload.from_crew_id, payload.to_crew_id)
    except UnknownCrewError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return MoveResponse(result=result.value, dirty=entry.ledger.dirty_crews())

@router.post("/{ledger_id}/unassign", response_model=MoveResponse, status_code=status.HTTP_200_OK)
def unassign_job(ledger_id: str, payload: UnassignRequest) -> MoveResponse:
    entry = _entry(ledger_id)
    try:
        result = entry.scheduler.unassign(payload.job_id)
    except UnknownJobError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return MoveResponse(result=result.value, dirty=entry.ledger.dirty_crews())

@router.post("/{ledger_id}/recompute", response_model=RecomputeResponse, status_code=status.HTTP_200_OK)
def recompute(ledger_id: str) -> RecomputeResponse:
    """Score every dirty crew now, without waiting for the debounce window."""
    entry = _entry(ledger_id)
    return RecomputeResponse(ledger_id=ledger_id, metrics=_metrics_models(entry.scheduler.flush()))

@router.put("/{ledger_id}/weather", response_model=LedgerStateResponse, status_code=status.HTTP_200_OK)
def update_weather(ledger_id: str, payload: WeatherModel) -> LedgerStateResponse:
    entry = _entry(ledger_id)
    entry.ledger.set_weather(payload.to_domain())
    entry.scheduler.touch()
    return _state(ledger_id, entry.ledger)

@router.delete("/{ledger_id}", status_code=status.HTTP_200_OK)
def delete_ledger(ledger_id: str) -> dict:
    try:
        registry.remove(ledger_id)
    except LedgerNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return {"success": True, "message": f"Ledger {ledger_id} removed"}
