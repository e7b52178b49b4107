"""Routing request/response schemas.

Request models double as the pre-flight validation stage: coordinates must
be finite and in range, service durations positive, and ids unique within
a request.
"""

from __future__ import annotations

from datetime import time
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, model_validator

from ..config import settings


class LocationModel(BaseModel):
    lat: float = Field(..., ge=-90.0, le=90.0, allow_inf_nan=False)
    lng: float = Field(..., ge=-180.0, le=180.0, allow_inf_nan=False)


class TimeWindowModel(BaseModel):
    start: time
    end: time

    @model_validator(mode="after")
    def _check_order(self) -> "TimeWindowModel":
        if self.end <= self.start:
            raise ValueError("time window end must be after its start")
        return self


class JobPointModel(BaseModel):
    id: str = Field(..., min_length=1)
    location: LocationModel
    address: str = "Unknown address"
    zone: Optional[str] = Field(
        default=None,
        description="Service zone name. Resolved from coordinates when omitted.",
    )
    urgency: Literal["low", "medium", "high", "urgent"] = "medium"
    job_type: Literal["installation", "repair", "maintenance", "inspection", "emergency"] = "maintenance"
    estimated_service_minutes: Optional[float] = Field(default=None, gt=0, allow_inf_nan=False)
    time_window: Optional[TimeWindowModel] = None


class TechnicianModel(BaseModel):
    id: str = Field(..., min_length=1)
    name: Optional[str] = None
    home_location: LocationModel
    eligible_zones: List[str] = Field(default_factory=list)
    working_hours: Optional[TimeWindowModel] = None
    vehicle_class: Literal["van", "car", "motorcycle"] = settings.default_vehicle_class


class RoutingOptionsModel(BaseModel):
    max_jobs_per_technician: Optional[int] = Field(None, ge=1)
    prioritize_urgent: Optional[bool] = None
    respect_time_windows: Optional[bool] = None
    minimize_travel: Optional[bool] = None


def _duplicates(ids: List[str]) -> List[str]:
    seen: set[str] = set()
    repeated: list[str] = []
    for item in ids:
        if item in seen and item not in repeated:
            repeated.append(item)
        seen.add(item)
    return repeated


class RoutingRequest(BaseModel):
    technicians: List[TechnicianModel]
    jobs: List[JobPointModel]
    options: Optional[RoutingOptionsModel] = None
    include_directions: bool = Field(default=False, description="Attach rendered directions to each route.")
    include_validation: bool = Field(default=True, description="Run the route validator on the result.")

    @model_validator(mode="after")
    def _check_unique_ids(self) -> "RoutingRequest":
        repeated_jobs = _duplicates([job.id for job in self.jobs])
        if repeated_jobs:
            raise ValueError(f"duplicate job ids: {', '.join(repeated_jobs)}")
        repeated_technicians = _duplicates([technician.id for technician in self.technicians])
        if repeated_technicians:
            raise ValueError(f"duplicate technician ids: {', '.join(repeated_technicians)}")
        return self


class RouteModel(BaseModel):
    technician_id: str
    jobs: List[JobPointModel]
    total_distance_km: float
    total_duration_minutes: float
    efficiency_score: float
    zones_covered: List[str]
    estimated_cost: float
    directions: Optional[List[str]] = None


class RouteValidationModel(BaseModel):
    is_valid: bool
    accuracy_score: float
    issues: List[str]
    recommendations: List[str]


class ZonePerformanceModel(BaseModel):
    zone: str
    route_count: int
    average_distance_km: float
    average_efficiency: float


class OptimizationSummaryModel(BaseModel):
    total_jobs: int
    assigned_jobs: int
    unassigned_job_ids: List[str]
    total_distance_km: float
    average_jobs_per_technician: float
    average_efficiency: float
    zone_performance: List[ZonePerformanceModel]


class RoutingResponse(BaseModel):
    status: Literal["optimized", "unoptimized"]
    routes: List[RouteModel]
    summary: OptimizationSummaryModel
    validation: Optional[RouteValidationModel] = None
    metadata: dict = Field(default_factory=dict)


class ValidationRequest(BaseModel):
    routes: List[RouteModel]
    jobs: List[JobPointModel]
    technicians: List[TechnicianModel] = Field(default_factory=list)


class DirectionsRequest(BaseModel):
    route: RouteModel
    currency: Optional[str] = None


class DirectionsResponse(BaseModel):
    technician_id: str
    directions: List[str]
