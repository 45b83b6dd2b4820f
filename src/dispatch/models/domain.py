"""Domain models for job sites, crews and weather."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Priority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def weight(self) -> int:
        return PRIORITY_WEIGHTS[self]


PRIORITY_WEIGHTS = {Priority.HIGH: 3, Priority.MEDIUM: 2, Priority.LOW: 1}


class JobStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class WeatherKind(str, Enum):
    SUNNY = "sunny"
    CLOUDY = "cloudy"
    RAIN = "rain"
    STORM = "storm"


@dataclass(frozen=True, slots=True)
class GeoPoint:
    """A latitude/longitude pair in decimal degrees."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"latitude must be within [-90, 90], got {self.latitude}")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError(f"longitude must be within [-180, 180], got {self.longitude}")


@dataclass(slots=True)
class Job:
    """A job ticket at a client site.

    Only ``id``, ``location``, ``estimated_duration_hours`` and ``priority``
    feed route calculations; the remaining fields are labels carried through
    for the dashboard.
    """

    id: str
    location: GeoPoint
    estimated_duration_hours: float
    priority: Priority = Priority.MEDIUM
    status: JobStatus = JobStatus.PENDING
    client_id: Optional[str] = None
    address: Optional[str] = None
    task: Optional[str] = None

    def __post_init__(self) -> None:
        if self.estimated_duration_hours <= 0:
            raise ValueError(
                f"estimated_duration_hours must be > 0 for job '{self.id}', got {self.estimated_duration_hours}"
            )
        self.priority = Priority(self.priority)
        self.status = JobStatus(self.status)


@dataclass(slots=True)
class Crew:
    """A field crew. Membership and equipment live outside this service."""

    id: str
    specialization: str
    capacity_hint: Optional[int] = None
    name: Optional[str] = None


@dataclass(frozen=True, slots=True)
class WeatherCondition:
    kind: WeatherKind = WeatherKind.SUNNY
    temperature: Optional[float] = None
    wind_speed: Optional[float] = None
    precipitation: Optional[float] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", WeatherKind(self.kind))
