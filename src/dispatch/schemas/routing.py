"""Routing request/response schemas."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from ..models.domain import Crew, GeoPoint, Job, WeatherCondition


class JobModel(BaseModel):
    id: str = Field(..., min_length=1)
    lat: float = Field(..., ge=-90.0, le=90.0)
    long: float = Field(..., ge=-180.0, le=180.0)
    estimated_hours: float = Field(..., gt=0.0, description="On-site work time in hours.")
    priority: Literal["high", "medium", "low"] = "medium"
    status: Literal["pending", "in-progress", "completed", "cancelled"] = "pending"
    client_id: Optional[str] = None
    address: Optional[str] = None
    task: Optional[str] = None

    def to_domain(self) -> Job:
        return Job(
            id=self.id,
            location=GeoPoint(self.lat, self.long),
            estimated_duration_hours=self.estimated_hours,
            priority=self.priority,
            status=self.status,
            client_id=self.client_id,
            address=self.address,
            task=self.task,
        )

    @classmethod
    def from_domain(cls, job: Job) -> "JobModel":
        return cls(
            id=job.id,
            lat=job.location.latitude,
            long=job.location.longitude,
            estimated_hours=job.estimated_duration_hours,
            priority=job.priority.value,
            status=job.status.value,
            client_id=job.client_id,
            address=job.address,
            task=job.task,
        )


class CrewModel(BaseModel):
    id: str = Field(..., min_length=1)
    specialization: str = ""
    capacity_hint: Optional[int] = Field(default=None, ge=0)
    name: Optional[str] = None

    def to_domain(self) -> Crew:
        return Crew(
            id=self.id,
            specialization=self.specialization,
            capacity_hint=self.capacity_hint,
            name=self.name,
        )


class WeatherModel(BaseModel):
    condition: Literal["sunny", "cloudy", "rain", "storm"] = "sunny"
    temperature: Optional[float] = None
    wind_speed: Optional[float] = Field(default=None, ge=0.0)
    precipitation: Optional[float] = Field(default=None, ge=0.0)

    def to_domain(self) -> WeatherCondition:
        return WeatherCondition(
            kind=self.condition,
            temperature=self.temperature,
            wind_speed=self.wind_speed,
            precipitation=self.precipitation,
        )


def weather_to_domain(weather: Optional[WeatherModel]) -> Optional[WeatherCondition]:
    return weather.to_domain() if weather else None


class RouteMetricsModel(BaseModel):
    total_distance_miles: float
    drive_time_minutes: int
    fuel_cost: float
    billable_hours: float
    optimization_score: int = Field(..., ge=0, le=100)


class RouteStopModel(BaseModel):
    job_id: str
    sequence: int
    arrival: str
    departure: str
    latitude: float
    longitude: float
    address: Optional[str] = None


class SequenceRequest(BaseModel):
    jobs: List[JobModel]


class SequenceResponse(BaseModel):
    job_ids: List[str]


class MetricsRequest(BaseModel):
    jobs: List[JobModel] = Field(..., description="Jobs in visit order.")
    weather: Optional[WeatherModel] = None
    start_time: Optional[str] = Field(default=None, pattern=r"^\d{1,2}:\d{2}$")


class MetricsResponse(BaseModel):
    metrics: RouteMetricsModel
    efficiency: float
    suggestions: List[str]
    timeline: List[RouteStopModel]
