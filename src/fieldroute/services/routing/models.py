"""Routing domain models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from ...config import settings
from ...models.domain import JobPoint


@dataclass(frozen=True, slots=True)
class RoutingOptions:
    """Per-run assignment options.

    ``respect_time_windows`` and ``minimize_travel`` are accepted and carried
    through but not enforced by the greedy heuristic.
    """

    max_jobs_per_technician: int = field(default_factory=lambda: settings.max_jobs_per_technician)
    prioritize_urgent: bool = field(default_factory=lambda: settings.prioritize_urgent)
    respect_time_windows: bool = field(default_factory=lambda: settings.respect_time_windows)
    minimize_travel: bool = field(default_factory=lambda: settings.minimize_travel)

    def __post_init__(self) -> None:
        if self.max_jobs_per_technician < 1:
            raise ValueError("max_jobs_per_technician must be >= 1")


@dataclass(frozen=True, slots=True)
class OptimizedRoute:
    technician_id: str
    jobs: tuple[JobPoint, ...]
    total_distance_km: float
    total_duration_minutes: float
    efficiency_score: float
    zones_covered: tuple[str, ...]
    estimated_cost: float

    @property
    def job_count(self) -> int:
        return len(self.jobs)

    @property
    def is_empty(self) -> bool:
        return not self.jobs


@dataclass(slots=True)
class RouteValidationResult:
    is_valid: bool
    accuracy_score: float
    issues: List[str]
    recommendations: List[str]


@dataclass(slots=True)
class ZonePerformance:
    zone: str
    route_count: int
    average_distance_km: float
    average_efficiency: float


@dataclass(slots=True)
class OptimizationSummary:
    total_jobs: int
    assigned_jobs: int
    unassigned_job_ids: List[str]
    total_distance_km: float
    average_jobs_per_technician: float
    average_efficiency: float
    zone_performance: List[ZonePerformance] = field(default_factory=list)
