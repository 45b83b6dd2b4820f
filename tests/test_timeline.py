import pytest

from src.dispatch.models.domain import GeoPoint, Job
from src.dispatch.services.routing.metrics import compute_metrics
from src.dispatch.services.routing.models import RouteMetrics
from src.dispatch.services.routing.timeline import route_timeline


def _job(jid: str, lat: float, hours: float = 1.0) -> Job:
    return Job(id=jid, location=GeoPoint(lat, -118.0), estimated_duration_hours=hours, address=f"{jid} Main St")


def test_timeline_spreads_drive_time_between_stops():
    jobs = [_job("J1", 34.00), _job("J2", 34.01)]
    metrics = compute_metrics(jobs)

    stops = route_timeline(jobs, metrics, "08:00")

    assert [(s.arrival, s.departure) for s in stops] == [
        ("8:00 AM", "9:00 AM"),
        ("9:10 AM", "10:10 AM"),
    ]
    assert stops[0].sequence == 1
    assert stops[1].address == "J2 Main St"


def test_timeline_crosses_noon():
    jobs = [_job("J1", 34.00, hours=3.5)]

    stops = route_timeline(jobs, compute_metrics(jobs), "10:00")

    assert stops[0].departure == "1:30 PM"


def test_empty_timeline():
    assert route_timeline([], RouteMetrics()) == []


def test_invalid_start_time():
    jobs = [_job("J1", 34.00)]
    with pytest.raises(ValueError):
        route_timeline(jobs, compute_metrics(jobs), "25:00")
    with pytest.raises(ValueError):
        route_timeline(jobs, compute_metrics(jobs), "noon")
