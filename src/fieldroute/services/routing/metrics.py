"""Route scoring: efficiency and cost estimates for a sequenced route."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ...models.domain import JobPoint
from .tables import RoutingTables, resolve_tables

TIME_WEIGHT = 0.5
DISTANCE_WEIGHT = 0.3
PRIORITY_WEIGHT = 0.2


@dataclass(frozen=True, slots=True)
class RouteMetrics:
    efficiency_score: float
    estimated_cost: float


def calculate_route_efficiency(
    jobs: Sequence[JobPoint],
    total_distance_km: float,
    total_duration_minutes: float,
    tables: RoutingTables | None = None,
) -> float:
    """Blend time utilisation, jobs per kilometre and average priority into a 0-1 score."""

    if not jobs:
        return 0.0

    tables = resolve_tables(tables)
    service_minutes = sum(tables.job_duration(job.job_type) for job in jobs)
    time_efficiency = min(service_minutes / total_duration_minutes, 1.0) if total_duration_minutes > 0 else 0.0
    distance_efficiency = min(len(jobs) / total_distance_km, 1.0) if total_distance_km > 0 else 0.0
    average_priority = sum(tables.priority_weight(job.urgency) for job in jobs) / len(jobs)
    priority_efficiency = min(average_priority / tables.max_priority_weight, 1.0)

    return (
        time_efficiency * TIME_WEIGHT
        + distance_efficiency * DISTANCE_WEIGHT
        + priority_efficiency * PRIORITY_WEIGHT
    )


def calculate_route_cost(
    total_distance_km: float,
    total_duration_minutes: float,
    vehicle_class: str,
    tables: RoutingTables | None = None,
) -> float:
    tables = resolve_tables(tables)
    fuel_cost = total_distance_km * tables.fuel_cost(vehicle_class)
    labor_cost = (total_duration_minutes / 60) * tables.hourly_labor_rate
    return fuel_cost + labor_cost


def compute_route_metrics(
    jobs: Sequence[JobPoint],
    total_distance_km: float,
    total_duration_minutes: float,
    vehicle_class: str,
    tables: RoutingTables | None = None,
) -> RouteMetrics:
    tables = resolve_tables(tables)
    return RouteMetrics(
        efficiency_score=calculate_route_efficiency(jobs, total_distance_km, total_duration_minutes, tables),
        estimated_cost=calculate_route_cost(total_distance_km, total_duration_minutes, vehicle_class, tables),
    )
