"""Serializers for schedule outputs."""

from __future__ import annotations

import csv
import io
from dataclasses import asdict

from ..routing.models import ScheduleResult


def schedule_result_to_json(result: ScheduleResult) -> dict:
    return {
        "schedule_date": result.schedule_date,
        "weather": result.weather,
        "total_efficiency": result.total_efficiency,
        "optimization_factors": result.optimization_factors,
        "unassigned": [job.id for job in result.unassigned],
        "routes": [
            {
                "crew_id": route.crew.id,
                "specialization": route.crew.specialization,
                "metrics": asdict(route.metrics),
                "efficiency": route.efficiency,
                "notes": route.notes,
                "stops": [asdict(stop) for stop in route.timeline],
            }
            for route in result.routes
        ],
    }


def schedule_result_to_csv(result: ScheduleResult) -> str:
    buffer = io.StringIO()
    fieldnames = [
        "crew_id",
        "sequence",
        "job_id",
        "arrival",
        "departure",
        "latitude",
        "longitude",
        "total_distance_miles",
        "drive_time_minutes",
        "fuel_cost",
        "billable_hours",
        "optimization_score",
    ]
    writer = csv.DictWriter(buffer, fieldnames=fieldnames)
    writer.writeheader()
    for route in result.routes:
        for stop in route.timeline:
            writer.writerow(
                {
                    "crew_id": route.crew.id,
                    "sequence": stop.sequence,
                    "job_id": stop.job_id,
                    "arrival": stop.arrival,
                    "departure": stop.departure,
                    "latitude": stop.latitude,
                    "longitude": stop.longitude,
                    "total_distance_miles": route.metrics.total_distance_miles,
                    "drive_time_minutes": route.metrics.drive_time_minutes,
                    "fuel_cost": route.metrics.fuel_cost,
                    "billable_hours": route.metrics.billable_hours,
                    "optimization_score": route.metrics.optimization_score,
                }
            )
    return buffer.getvalue()
