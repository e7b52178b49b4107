"""Routing orchestration service."""

from __future__ import annotations

import logging
from dataclasses import asdict
from datetime import time
from typing import Sequence

from ...config import settings
from ...models.domain import GeoPoint, JobPoint, TechnicianProfile, TimeWindow
from ...schemas.routing import (
    DirectionsRequest,
    DirectionsResponse,
    JobPointModel,
    LocationModel,
    OptimizationSummaryModel,
    RouteModel,
    RouteValidationModel,
    RoutingOptionsModel,
    RoutingRequest,
    RoutingResponse,
    TechnicianModel,
    TimeWindowModel,
    ValidationRequest,
)
from ..outputs.directions import generate_route_directions
from ..zoning.districts import resolve_zone
from .models import OptimizationSummary, OptimizedRoute, RouteValidationResult, RoutingOptions
from .planner import RoutePlanner
from .summary import summarize_optimization
from .tables import RoutingTables
from .validator import validate_routes

logger = logging.getLogger(__name__)


def _to_time_window(model: TimeWindowModel | None) -> TimeWindow | None:
    if model is None:
        return None
    return TimeWindow(start=model.start, end=model.end)


def _default_working_hours() -> TimeWindow:
    start, end = settings.default_working_hours
    return TimeWindow(start=time.fromisoformat(start), end=time.fromisoformat(end))


def job_from_model(model: JobPointModel) -> JobPoint:
    return JobPoint(
        id=model.id,
        location=GeoPoint(lat=model.location.lat, lng=model.location.lng),
        address=model.address,
        zone=resolve_zone(model.zone, model.location.lat, model.location.lng),
        urgency=model.urgency,
        job_type=model.job_type,
        estimated_service_minutes=model.estimated_service_minutes,
        time_window=_to_time_window(model.time_window),
    )


def technician_from_model(model: TechnicianModel) -> TechnicianProfile:
    return TechnicianProfile(
        id=model.id,
        name=model.name,
        home_location=GeoPoint(lat=model.home_location.lat, lng=model.home_location.lng),
        eligible_zones=frozenset(zone.strip() for zone in model.eligible_zones if zone.strip()),
        working_hours=_to_time_window(model.working_hours) or _default_working_hours(),
        vehicle_class=model.vehicle_class,
    )


def job_to_model(job: JobPoint) -> JobPointModel:
    time_window = None
    if job.time_window is not None:
        time_window = TimeWindowModel(start=job.time_window.start, end=job.time_window.end)
    return JobPointModel(
        id=job.id,
        location=LocationModel(lat=job.location.lat, lng=job.location.lng),
        address=job.address,
        zone=job.zone,
        urgency=job.urgency,
        job_type=job.job_type,
        estimated_service_minutes=job.estimated_service_minutes,
        time_window=time_window,
    )


def route_to_model(route: OptimizedRoute, *, include_directions: bool = False) -> RouteModel:
    return RouteModel(
        technician_id=route.technician_id,
        jobs=[job_to_model(job) for job in route.jobs],
        total_distance_km=route.total_distance_km,
        total_duration_minutes=route.total_duration_minutes,
        efficiency_score=route.efficiency_score,
        zones_covered=list(route.zones_covered),
        estimated_cost=route.estimated_cost,
        directions=generate_route_directions(route) if include_directions else None,
    )


def route_from_model(model: RouteModel) -> OptimizedRoute:
    return OptimizedRoute(
        technician_id=model.technician_id,
        jobs=tuple(job_from_model(job) for job in model.jobs),
        total_distance_km=model.total_distance_km,
        total_duration_minutes=model.total_duration_minutes,
        efficiency_score=model.efficiency_score,
        zones_covered=tuple(model.zones_covered),
        estimated_cost=model.estimated_cost,
    )


def _build_options(overrides: RoutingOptionsModel | None) -> RoutingOptions:
    base = RoutingOptions()
    if overrides is None:
        return base
    return RoutingOptions(
        max_jobs_per_technician=overrides.max_jobs_per_technician
        if overrides.max_jobs_per_technician is not None
        else base.max_jobs_per_technician,
        prioritize_urgent=overrides.prioritize_urgent
        if overrides.prioritize_urgent is not None
        else base.prioritize_urgent,
        respect_time_windows=overrides.respect_time_windows
        if overrides.respect_time_windows is not None
        else base.respect_time_windows,
        minimize_travel=overrides.minimize_travel
        if overrides.minimize_travel is not None
        else base.minimize_travel,
    )


def _summary_model(summary: OptimizationSummary) -> OptimizationSummaryModel:
    return OptimizationSummaryModel.model_validate(asdict(summary))


def _validation_model(result: RouteValidationResult) -> RouteValidationModel:
    return RouteValidationModel.model_validate(asdict(result))


def optimize_routes(payload: RoutingRequest, *, tables: RoutingTables | None = None) -> RoutingResponse:
    """Assign and sequence the requested jobs, then summarise and validate the result.

    Runs larger than ``settings.max_jobs_per_optimization`` are not sequenced;
    they come back with ``status="unoptimized"`` and every job unassigned so
    the caller can fall back to its own ordering.
    """

    technicians = [technician_from_model(model) for model in payload.technicians]
    jobs = [job_from_model(model) for model in payload.jobs]
    options = _build_options(payload.options)

    metadata: dict[str, object] = {
        "options": asdict(options),
        "technicians": len(technicians),
    }

    if len(jobs) > settings.max_jobs_per_optimization:
        logger.warning(
            f"Skipping optimization: {len(jobs)} jobs exceeds the limit of "
            f"{settings.max_jobs_per_optimization}"
        )
        metadata["reason"] = (
            f"Job count {len(jobs)} exceeds max_jobs_per_optimization "
            f"({settings.max_jobs_per_optimization}); jobs were not sequenced."
        )
        routes: list[OptimizedRoute] = []
        status = "unoptimized"
    else:
        planner = RoutePlanner(tables)
        routes = planner.assign(technicians, jobs, options)
        status = "optimized"

    summary = summarize_optimization(routes, jobs, technicians)
    if summary.unassigned_job_ids:
        logger.info(f"Unassigned jobs: {', '.join(summary.unassigned_job_ids)}")

    validation = None
    if payload.include_validation:
        result = validate_routes(routes, jobs, technicians)
        if not result.is_valid:
            logger.info(f"Route validation reported {len(result.issues)} issues")
        validation = _validation_model(result)

    return RoutingResponse(
        status=status,
        routes=[route_to_model(route, include_directions=payload.include_directions) for route in routes],
        summary=_summary_model(summary),
        validation=validation,
        metadata=metadata,
    )


def validate_route_payload(payload: ValidationRequest) -> RouteValidationModel:
    routes = [route_from_model(model) for model in payload.routes]
    jobs = [job_from_model(model) for model in payload.jobs]
    technicians = [technician_from_model(model) for model in payload.technicians]
    return _validation_model(validate_routes(routes, jobs, technicians))


def render_directions(payload: DirectionsRequest) -> DirectionsResponse:
    route = route_from_model(payload.route)
    return DirectionsResponse(
        technician_id=route.technician_id,
        directions=generate_route_directions(route, currency=payload.currency),
    )


def optimize_jobs(
    technicians: Sequence[TechnicianProfile],
    jobs: Sequence[JobPoint],
    options: RoutingOptions | None = None,
) -> tuple[list[OptimizedRoute], OptimizationSummary]:
    """Library entry point returning domain routes together with the run summary."""

    routes = RoutePlanner().assign(technicians, jobs, options)
    return routes, summarize_optimization(routes, jobs, technicians)
