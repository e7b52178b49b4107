"""Greedy visit sequencing for a single technician.

Starting from the technician's home, the builder repeatedly travels to the
remaining job with the lowest weighted score::

    travel_time = distance_km / zone_efficiency
    score = travel_time - priority_weight * urgency_bonus_per_weight

so that nearby jobs and urgent jobs both pull the score down. Ties go to
the job that comes first in the remaining pool, which keeps the output
reproducible for identical input.
"""

from __future__ import annotations

from typing import Sequence

from ...models.domain import GeoPoint, JobPoint, TechnicianProfile
from ..geospatial import distance_between
from .metrics import compute_route_metrics
from .models import OptimizedRoute, RoutingOptions
from .tables import RoutingTables, resolve_tables

MINUTES_PER_TRAVEL_UNIT = 60


def empty_route(technician: TechnicianProfile) -> OptimizedRoute:
    return OptimizedRoute(
        technician_id=technician.id,
        jobs=(),
        total_distance_km=0.0,
        total_duration_minutes=0.0,
        efficiency_score=0.0,
        zones_covered=(),
        estimated_cost=0.0,
    )


def _travel_time(origin: GeoPoint, job: JobPoint, tables: RoutingTables) -> tuple[float, float]:
    distance = distance_between(origin, job.location)
    return distance, distance / tables.zone_factor(job.zone)


def _pick_next(current: GeoPoint, pool: Sequence[JobPoint], tables: RoutingTables) -> int:
    best_index = -1
    best_score = float("inf")
    for index, job in enumerate(pool):
        _, travel_time = _travel_time(current, job, tables)
        score = travel_time - tables.priority_weight(job.urgency) * tables.urgency_bonus_per_weight
        if score < best_score:
            best_score = score
            best_index = index
    return best_index


def _zones_in_visit_order(jobs: Sequence[JobPoint]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(job.zone for job in jobs))


def build_route(
    technician: TechnicianProfile,
    jobs: Sequence[JobPoint],
    options: RoutingOptions | None = None,
    tables: RoutingTables | None = None,
) -> OptimizedRoute:
    """Sequence ``jobs`` for ``technician`` and score the resulting route.

    An empty ``jobs`` sequence yields a zero-valued route rather than an error.
    ``options`` is accepted for the advisory flags only.
    """

    tables = resolve_tables(tables)
    if not jobs:
        return empty_route(technician)

    current = technician.home_location
    remaining = list(jobs)
    visited: list[JobPoint] = []
    total_distance = 0.0
    total_duration = 0.0

    while remaining:
        index = _pick_next(current, remaining, tables)
        job = remaining.pop(index)
        distance, travel_time = _travel_time(current, job, tables)
        total_distance += distance
        total_duration += travel_time * MINUTES_PER_TRAVEL_UNIT + tables.job_duration(job.job_type)
        visited.append(job)
        current = job.location

    # Return leg is timed without zone friction.
    return_distance = distance_between(current, technician.home_location)
    total_distance += return_distance
    total_duration += return_distance * MINUTES_PER_TRAVEL_UNIT

    metrics = compute_route_metrics(visited, total_distance, total_duration, technician.vehicle_class, tables)

    return OptimizedRoute(
        technician_id=technician.id,
        jobs=tuple(visited),
        total_distance_km=round(total_distance, 2),
        total_duration_minutes=float(round(total_duration)),
        efficiency_score=metrics.efficiency_score,
        zones_covered=_zones_in_visit_order(visited),
        estimated_cost=float(round(metrics.estimated_cost)),
    )
