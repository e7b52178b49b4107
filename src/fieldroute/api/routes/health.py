"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...config import settings
from ...services.routing.tables import RoutingTables

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/health/config", status_code=status.HTTP_200_OK)
def health_config() -> dict:
    """Report the active routing defaults and lookup tables."""
    tables = RoutingTables.from_settings()
    return {
        "max_jobs_per_technician": settings.max_jobs_per_technician,
        "max_jobs_per_optimization": settings.max_jobs_per_optimization,
        "hourly_labor_rate": tables.hourly_labor_rate,
        "currency": settings.currency,
        "default_zone_efficiency": tables.default_zone_efficiency,
        "zone_efficiency": dict(tables.zone_efficiency),
        "priority_weights": dict(tables.priority_weights),
        "job_durations": dict(tables.job_durations),
    }
