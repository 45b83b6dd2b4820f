"""Data access helpers for loading job tickets and crew rosters."""

from __future__ import annotations

import csv
import functools
from pathlib import Path
from typing import Optional

from ..config import settings
from ..models.domain import Crew, GeoPoint, Job


def _coerce_float(value: Optional[str]) -> Optional[float]:
    if value is None or value.strip() == "":
        return None
    try:
        return float(value.replace(",", ""))
    except ValueError as exc:
        raise ValueError(f"Unable to parse float from value '{value}'") from exc


def _coerce_int(value: Optional[str]) -> Optional[int]:
    number = _coerce_float(value)
    return int(number) if number is not None else None


def _open_rows(path: Path, label: str) -> list[dict]:
    if not path.exists():
        raise FileNotFoundError(f"{label} file not found: {path}")
    with path.open(mode="r", encoding="utf-8-sig", newline="") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            raise ValueError(f"{label} file '{path}' is missing a header row.")
        return list(reader)


@functools.lru_cache(maxsize=1)
def load_jobs(source: Optional[Path] = None) -> tuple[Job, ...]:
    """Load job tickets from the configured CSV file."""

    jobs: list[Job] = []
    for row in _open_rows(source or settings.jobs_file, "Jobs"):
        lat = _coerce_float(row.get("lat") or row.get("latitude"))
        lon = _coerce_float(row.get("long") or row.get("lng") or row.get("longitude"))
        if lat is None or lon is None:
            continue  # ignore tickets without coordinates
        jobs.append(
            Job(
                id=(row.get("id") or row.get("job_id") or "").strip(),
                location=GeoPoint(lat, lon),
                estimated_duration_hours=_coerce_float(row.get("estimated_hours")) or 0.0,
                priority=(row.get("priority") or "medium").strip().lower(),
                status=(row.get("status") or "pending").strip().lower(),
                client_id=(row.get("client_id") or "").strip() or None,
                address=(row.get("address") or "").strip() or None,
                task=(row.get("task") or "").strip() or None,
            )
        )
    return tuple(jobs)


@functools.lru_cache(maxsize=1)
def load_crews(source: Optional[Path] = None) -> tuple[Crew, ...]:
    """Load the crew roster from the configured CSV file."""

    return tuple(
        Crew(
            id=(row.get("id") or row.get("crew_id") or "").strip(),
            specialization=(row.get("specialization") or "").strip(),
            capacity_hint=_coerce_int(row.get("capacity_hint")),
            name=(row.get("name") or "").strip() or None,
        )
        for row in _open_rows(source or settings.crews_file, "Crews")
    )
