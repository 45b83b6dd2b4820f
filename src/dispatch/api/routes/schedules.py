"""Schedule endpoints."""

from __future__ import annotations

import logging
from typing import Literal

from fastapi import APIRouter, HTTPException, Query, status
from fastapi.responses import PlainTextResponse

from ...schemas.schedules import ScheduleRequest, ScheduleResponse
from ...services.outputs.schedule_formatter import schedule_result_to_csv, schedule_result_to_json
from ...services.scheduling.service import process_schedule_request, run_schedule_request

router = APIRouter(prefix="/schedules", tags=["schedules"])


@router.post("/optimize", response_model=ScheduleResponse, status_code=status.HTTP_200_OK)
def optimize(payload: ScheduleRequest) -> ScheduleResponse:
    try:
        return process_schedule_request(payload)
    except (ValueError, FileNotFoundError) as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logging.exception(f"Error optimizing schedule: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to optimize schedule: {str(exc)}",
        ) from exc


@router.post("/export", status_code=status.HTTP_200_OK)
def export(
    payload: ScheduleRequest,
    format: Literal["csv", "json"] = Query(default="csv", description="Export format"),
):
    """Optimize and return the schedule as a CSV sheet or a flat JSON document."""
    try:
        result = run_schedule_request(payload)
        if format == "json":
            return schedule_result_to_json(result)
        return PlainTextResponse(schedule_result_to_csv(result), media_type="text/csv")
    except (ValueError, FileNotFoundError) as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logging.exception(f"Error exporting schedule: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to export schedule: {str(exc)}",
        ) from exc
