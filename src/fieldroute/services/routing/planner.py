"""Job-to-technician assignment."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Sequence

from ...config import settings
from ...models.domain import JobPoint, TechnicianProfile
from .models import OptimizedRoute, RoutingOptions
from .sequence_builder import build_route
from .tables import RoutingTables, resolve_tables

logger = logging.getLogger(__name__)


class RoutePlanner:
    """Distribute jobs across technicians and sequence each technician's share.

    Technicians are served in the order supplied. Each one takes up to
    ``max_jobs_per_technician`` of the highest-priority jobs left in its
    eligible zones; those jobs leave the pool before the next technician is
    considered. A technician with nothing to do produces no route.
    """

    def __init__(self, tables: RoutingTables | None = None, *, max_workers: int | None = None) -> None:
        self.tables = resolve_tables(tables)
        self.max_workers = max_workers if max_workers is not None else settings.route_builder_workers

    def sort_jobs(self, jobs: Sequence[JobPoint], options: RoutingOptions) -> list[JobPoint]:
        if options.prioritize_urgent:
            return sorted(
                jobs,
                key=lambda job: (-self.tables.priority_weight(job.urgency), job.estimated_service_minutes),
            )
        return sorted(jobs, key=lambda job: job.estimated_service_minutes)

    def select_assignments(
        self,
        technicians: Sequence[TechnicianProfile],
        jobs: Sequence[JobPoint],
        options: RoutingOptions,
    ) -> list[tuple[TechnicianProfile, list[JobPoint]]]:
        pool = self.sort_jobs(jobs, options)
        assigned: set[str] = set()
        selections: list[tuple[TechnicianProfile, list[JobPoint]]] = []

        for technician in technicians:
            candidates = [job for job in pool if job.id not in assigned and technician.serves(job.zone)]
            if not candidates:
                logger.debug(f"Technician {technician.id} has no eligible jobs; skipping")
                continue
            chosen = candidates[: options.max_jobs_per_technician]
            assigned.update(job.id for job in chosen)
            selections.append((technician, chosen))
        return selections

    def assign(
        self,
        technicians: Sequence[TechnicianProfile],
        jobs: Sequence[JobPoint],
        options: RoutingOptions | None = None,
    ) -> list[OptimizedRoute]:
        options = options or RoutingOptions()
        selections = self.select_assignments(technicians, jobs, options)

        if self.max_workers > 1 and len(selections) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                routes = list(
                    executor.map(lambda item: build_route(item[0], item[1], options, self.tables), selections)
                )
        else:
            routes = [build_route(technician, chosen, options, self.tables) for technician, chosen in selections]

        assigned_count = sum(route.job_count for route in routes)
        if assigned_count < len(jobs):
            logger.warning(
                f"{len(jobs) - assigned_count} of {len(jobs)} jobs left unassigned "
                f"across {len(technicians)} technicians"
            )
        logger.info(f"Built {len(routes)} routes covering {assigned_count} jobs")

        return sorted(routes, key=lambda route: route.efficiency_score, reverse=True)


def assign_routes(
    technicians: Sequence[TechnicianProfile],
    jobs: Sequence[JobPoint],
    options: RoutingOptions | None = None,
    *,
    tables: RoutingTables | None = None,
) -> list[OptimizedRoute]:
    return RoutePlanner(tables).assign(technicians, jobs, options)
