"""Domain models for dispatchable jobs and field technicians."""

from dataclasses import dataclass, field
from datetime import time
from types import MappingProxyType
from typing import Literal, Optional

Urgency = Literal["low", "medium", "high", "urgent"]
JobType = Literal["installation", "repair", "maintenance", "inspection", "emergency"]
VehicleClass = Literal["van", "car", "motorcycle"]

# On-site duration estimates (minutes) per job type.
JOB_DURATION_ESTIMATES = MappingProxyType(
    {
        "emergency": 120,
        "installation": 240,
        "repair": 90,
        "maintenance": 60,
        "inspection": 45,
    }
)


@dataclass(frozen=True, slots=True)
class GeoPoint:
    lat: float
    lng: float


@dataclass(frozen=True, slots=True)
class TimeWindow:
    start: time
    end: time


@dataclass(frozen=True, slots=True)
class JobPoint:
    """A single unit of dispatchable work at a fixed location.

    ``estimated_service_minutes`` defaults to the job-type estimate when it
    is not supplied by the caller.
    """

    id: str
    location: GeoPoint
    address: str
    zone: str
    urgency: Urgency
    job_type: JobType
    estimated_service_minutes: Optional[float] = None
    time_window: Optional[TimeWindow] = None

    def __post_init__(self) -> None:
        if self.estimated_service_minutes is None:
            object.__setattr__(
                self, "estimated_service_minutes", float(JOB_DURATION_ESTIMATES.get(self.job_type, 60))
            )
        if not self.estimated_service_minutes > 0:
            raise ValueError(
                f"Job {self.id} must have a positive service duration, got {self.estimated_service_minutes}."
            )


@dataclass(frozen=True, slots=True)
class TechnicianProfile:
    """A dispatchable field technician and the zones they may be routed into."""

    id: str
    home_location: GeoPoint
    eligible_zones: frozenset[str]
    working_hours: TimeWindow = field(default_factory=lambda: TimeWindow(time(8, 0), time(17, 0)))
    vehicle_class: VehicleClass = "van"
    name: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.eligible_zones, frozenset):
            object.__setattr__(self, "eligible_zones", frozenset(self.eligible_zones))

    def serves(self, zone: str) -> bool:
        return zone in self.eligible_zones
