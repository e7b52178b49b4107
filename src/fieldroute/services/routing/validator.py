"""Post-hoc quality checks for a set of optimized routes."""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from ...config import settings
from ...models.domain import JobPoint, TechnicianProfile
from .models import OptimizedRoute, RouteValidationResult

ISSUE_PENALTY = 0.1


def _technician_label(technician_id: str, technicians: Sequence[TechnicianProfile]) -> str:
    for technician in technicians:
        if technician.id == technician_id and technician.name:
            return f"{technician.name} ({technician_id})"
    return technician_id


def validate_routes(
    routes: Sequence[OptimizedRoute],
    original_jobs: Sequence[JobPoint],
    technicians: Sequence[TechnicianProfile],
    *,
    min_average_efficiency: float | None = None,
    max_workload_spread: int | None = None,
    urgent_position_limit: int | None = None,
) -> RouteValidationResult:
    """Report coverage, efficiency, balance and urgent-placement problems.

    Never raises; every problem becomes an issue with a matching
    recommendation.
    """

    min_average_efficiency = (
        settings.min_average_efficiency if min_average_efficiency is None else min_average_efficiency
    )
    max_workload_spread = settings.max_workload_spread if max_workload_spread is None else max_workload_spread
    urgent_position_limit = (
        settings.urgent_position_limit if urgent_position_limit is None else urgent_position_limit
    )

    issues: list[str] = []
    recommendations: list[str] = []

    appearances = Counter(job.id for route in routes for job in route.jobs)
    unassigned = [job.id for job in original_jobs if job.id not in appearances]
    if unassigned:
        issues.append(f"{len(unassigned)} jobs were not assigned to any technician")
        recommendations.append("Check technician service areas and availability")

    duplicated = sorted(job_id for job_id, count in appearances.items() if count > 1)
    if duplicated:
        issues.append(f"{len(duplicated)} jobs appear in more than one route: {', '.join(duplicated)}")
        recommendations.append("Ensure each job is dispatched to a single technician")

    if routes:
        average_efficiency = sum(route.efficiency_score for route in routes) / len(routes)
        if average_efficiency < min_average_efficiency:
            issues.append(f"Average route efficiency is low: {average_efficiency * 100:.1f}%")
            recommendations.append("Consider adjusting technician service areas or job priorities")

        job_counts = [route.job_count for route in routes]
        most, fewest = max(job_counts), min(job_counts)
        if most - fewest > max_workload_spread:
            issues.append(f"Unbalanced workload: {most} vs {fewest} jobs per technician")
            recommendations.append("Consider redistributing jobs for better balance")

    for route in routes:
        late = next(
            (
                position
                for position, job in enumerate(route.jobs)
                if job.urgency == "urgent" and position > urgent_position_limit
            ),
            None,
        )
        if late is not None:
            label = _technician_label(route.technician_id, technicians)
            issues.append(f"Urgent job scheduled as #{late + 1} for technician {label}")
            recommendations.append("Prioritize urgent jobs earlier in routes")

    accuracy = max(0.0, 1.0 - len(issues) * ISSUE_PENALTY)
    return RouteValidationResult(
        is_valid=not issues,
        accuracy_score=accuracy,
        issues=issues,
        recommendations=recommendations,
    )
