"""Pydantic request/response models for schedule and ledger endpoints."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from .routing import CrewModel, JobModel, RouteMetricsModel, RouteStopModel, WeatherModel


class ScheduleRequest(BaseModel):
    jobs: Optional[List[JobModel]] = Field(
        default=None,
        description="Jobs to schedule. Loaded from the configured jobs file when omitted.",
    )
    crews: Optional[List[CrewModel]] = Field(
        default=None,
        description="Crews to schedule. Loaded from the configured crews file when omitted.",
    )
    weather: Optional[WeatherModel] = None
    schedule_date: Optional[str] = Field(default=None, description="ISO date the schedule is for.")
    start_time: Optional[str] = Field(default=None, pattern=r"^\d{1,2}:\d{2}$")


class CrewRouteModel(BaseModel):
    crew_id: str
    crew_name: Optional[str] = None
    specialization: str
    job_ids: List[str]
    metrics: RouteMetricsModel
    efficiency: float
    notes: List[str]
    timeline: List[RouteStopModel]


class ScheduleResponse(BaseModel):
    schedule_date: str
    weather: dict
    routes: List[CrewRouteModel]
    unassigned: List[str]
    total_efficiency: int
    optimization_factors: Dict[str, int]


class LedgerCreateRequest(BaseModel):
    jobs: List[JobModel]
    crews: List[CrewModel]
    weather: Optional[WeatherModel] = None
    unassigned: List[JobModel] = Field(
        default_factory=list,
        description="Jobs to hold in the unassigned pool instead of distributing.",
    )

    @field_validator("crews")
    @classmethod
    def validate_unique_crews(cls, value: List[CrewModel]) -> List[CrewModel]:
        ids = [crew.id for crew in value]
        if len(ids) != len(set(ids)):
            raise ValueError("crew ids must be unique")
        return value


class MoveRequest(BaseModel):
    job_id: str
    from_crew_id: Optional[str] = Field(default=None, description="Source crew; omit for the unassigned pool.")
    to_crew_id: str


class MoveResponse(BaseModel):
    result: str
    dirty: List[str]


class LedgerStateResponse(BaseModel):
    ledger_id: str
    assignments: Dict[str, List[str]]
    unassigned: List[str]
    metrics: Dict[str, RouteMetricsModel]
    dirty: List[str]


class RecomputeResponse(BaseModel):
    ledger_id: str
    metrics: Dict[str, RouteMetricsModel]


class UnassignRequest(BaseModel):
    job_id: str
