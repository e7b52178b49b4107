"""Human-readable turn list for an optimized route."""

from __future__ import annotations

from ...config import settings
from ..routing.models import OptimizedRoute
from ..routing.tables import RoutingTables, resolve_tables

URGENCY_MARKERS = {
    "urgent": "🚨",
    "high": "⚡",
    "medium": "📋",
    "low": "📝",
}

EMPTY_ROUTE_MESSAGE = "No jobs assigned for this route."


def _format_duration(minutes: float) -> str:
    whole = int(round(minutes))
    return f"{whole // 60}h {whole % 60}m"


def _format_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def generate_route_directions(
    route: OptimizedRoute,
    tables: RoutingTables | None = None,
    currency: str | None = None,
) -> list[str]:
    tables = resolve_tables(tables)
    currency = currency or settings.currency

    if route.is_empty:
        return [EMPTY_ROUTE_MESSAGE]

    directions = ["🏠 Start from home base"]
    for step, job in enumerate(route.jobs, start=1):
        marker = URGENCY_MARKERS.get(job.urgency, "")
        directions.append(f"{step}. {marker} {job.job_type.upper()} - {job.address} ({job.zone})")
        directions.append(f"   ⏱️ Est. duration: {tables.job_duration(job.job_type)} min")

    directions.append("🏠 Return to home base")
    directions.append(
        f"📊 Total: {_format_number(route.total_distance_km)}km, {_format_duration(route.total_duration_minutes)}"
    )
    directions.append(f"💰 Estimated cost: {_format_number(route.estimated_cost)} {currency}")
    return directions
