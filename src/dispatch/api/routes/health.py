"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...services.assignment.registry import registry

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/health/ledgers", status_code=status.HTTP_200_OK)
def health_ledgers() -> dict:
    """Report how many dispatch boards are held in memory."""
    return {"status": "ok", "ledgers": len(registry)}
