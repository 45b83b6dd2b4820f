from pathlib import Path

import pytest

from src.dispatch.data.jobs_repository import load_crews, load_jobs
from src.dispatch.models.domain import JobStatus, Priority


@pytest.fixture(autouse=True)
def clear_seed_cache():
    load_jobs.cache_clear()
    load_crews.cache_clear()
    yield
    load_jobs.cache_clear()
    load_crews.cache_clear()


def test_load_jobs_skips_rows_without_coordinates(tmp_path: Path):
    source = tmp_path / "jobs.csv"
    source.write_text(
        "id,client_id,address,lat,long,task,estimated_hours,priority,status\n"
        "job-001,contract-001,123 Sunset Blvd,34.0522,-118.2437,Weekly Mowing,2.5,High,pending\n"
        "job-002,contract-002,456 River Rd,,,Hedge Trimming,1.0,low,pending\n"
        "job-003,contract-003,789 Oak Ave,34.0928,-118.2737,Leaf Removal,1.5,,in-progress\n",
        encoding="utf-8",
    )

    jobs = load_jobs(source)

    assert [job.id for job in jobs] == ["job-001", "job-003"]
    assert jobs[0].priority is Priority.HIGH
    assert jobs[0].estimated_duration_hours == 2.5
    assert jobs[0].address == "123 Sunset Blvd"
    assert jobs[1].priority is Priority.MEDIUM
    assert jobs[1].status is JobStatus.IN_PROGRESS


def test_load_jobs_rejects_bad_numbers(tmp_path: Path):
    source = tmp_path / "jobs.csv"
    source.write_text("id,lat,long,estimated_hours\njob-001,34.0,-118.0,two\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_jobs(source)


def test_load_jobs_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_jobs(tmp_path / "missing.csv")


def test_load_crews(tmp_path: Path):
    source = tmp_path / "crews.csv"
    source.write_text(
        "id,name,specialization,capacity_hint\n"
        "crew-a,Alpha Team,Mowing & Maintenance,6\n"
        "crew-b,Bravo Team,Landscaping & Design,\n",
        encoding="utf-8",
    )

    crews = load_crews(source)

    assert [crew.id for crew in crews] == ["crew-a", "crew-b"]
    assert crews[0].capacity_hint == 6
    assert crews[1].capacity_hint is None
    assert crews[1].name == "Bravo Team"
