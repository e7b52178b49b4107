"""Run-level totals and per-zone performance for a set of routes."""

from __future__ import annotations

from typing import Sequence

from ...models.domain import JobPoint, TechnicianProfile
from .models import OptimizationSummary, OptimizedRoute, ZonePerformance


def zone_performance(routes: Sequence[OptimizedRoute]) -> list[ZonePerformance]:
    """Aggregate route distance and efficiency per zone.

    A route counts once for every job it serves in a zone.
    """

    stats: dict[str, list[float]] = {}
    for route in routes:
        for job in route.jobs:
            count, distance, efficiency = stats.get(job.zone, [0, 0.0, 0.0])
            stats[job.zone] = [count + 1, distance + route.total_distance_km, efficiency + route.efficiency_score]

    performance = [
        ZonePerformance(
            zone=zone,
            route_count=int(count),
            average_distance_km=round(distance / count, 2),
            average_efficiency=round(efficiency / count, 2),
        )
        for zone, (count, distance, efficiency) in stats.items()
    ]
    return sorted(performance, key=lambda item: item.average_efficiency, reverse=True)


def summarize_optimization(
    routes: Sequence[OptimizedRoute],
    jobs: Sequence[JobPoint],
    technicians: Sequence[TechnicianProfile],
) -> OptimizationSummary:
    assigned_ids = {job.id for route in routes for job in route.jobs}
    unassigned = [job.id for job in jobs if job.id not in assigned_ids]
    average_efficiency = sum(route.efficiency_score for route in routes) / len(routes) if routes else 0.0
    return OptimizationSummary(
        total_jobs=len(jobs),
        assigned_jobs=len(jobs) - len(unassigned),
        unassigned_job_ids=unassigned,
        total_distance_km=round(sum(route.total_distance_km for route in routes), 2),
        average_jobs_per_technician=len(jobs) / len(technicians) if technicians else 0.0,
        average_efficiency=average_efficiency,
        zone_performance=zone_performance(routes),
    )
