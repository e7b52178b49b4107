"""Static lookup tables used by the routing heuristics.

All tables are exposed through a single immutable :class:`RoutingTables`
object so that planners and builders can be constructed with alternate
tables without touching module-level state.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Mapping

from ...config import Settings, settings
from ...models.domain import JOB_DURATION_ESTIMATES

# Warsaw district efficiency multipliers based on traffic and accessibility.
ZONE_EFFICIENCY = MappingProxyType(
    {
        "Śródmieście": 0.7,
        "Wilanów": 0.9,
        "Mokotów": 0.8,
        "Żoliborz": 0.85,
        "Ursynów": 0.9,
        "Wola": 0.75,
        "Praga-Południe": 0.8,
        "Targówek": 0.85,
        "Bemowo": 0.9,
        "Bielany": 0.85,
    }
)

PRIORITY_WEIGHTS = MappingProxyType({"urgent": 4, "high": 3, "medium": 2, "low": 1})

FUEL_COST_PER_KM = MappingProxyType({"van": 0.8, "car": 0.6, "motorcycle": 0.3})

def _frozen(mapping: Mapping) -> Mapping:
    return mapping if isinstance(mapping, MappingProxyType) else MappingProxyType(dict(mapping))


@dataclass(frozen=True, slots=True)
class RoutingTables:
    zone_efficiency: Mapping[str, float] = field(default_factory=lambda: ZONE_EFFICIENCY)
    priority_weights: Mapping[str, int] = field(default_factory=lambda: PRIORITY_WEIGHTS)
    job_durations: Mapping[str, int] = field(default_factory=lambda: JOB_DURATION_ESTIMATES)
    fuel_cost_per_km: Mapping[str, float] = field(default_factory=lambda: FUEL_COST_PER_KM)
    default_zone_efficiency: float = 0.8
    default_fuel_cost_per_km: float = 0.6
    default_job_duration: int = 60
    hourly_labor_rate: float = 80.0
    urgency_bonus_per_weight: float = 5.0

    def __post_init__(self) -> None:
        for name in ("zone_efficiency", "priority_weights", "job_durations", "fuel_cost_per_km"):
            object.__setattr__(self, name, _frozen(getattr(self, name)))
        if not 0.0 < self.default_zone_efficiency <= 1.0:
            raise ValueError(f"default_zone_efficiency must be in (0, 1], got {self.default_zone_efficiency}.")
        for zone, multiplier in self.zone_efficiency.items():
            if not 0.0 < multiplier <= 1.0:
                raise ValueError(f"Zone efficiency for '{zone}' must be in (0, 1], got {multiplier}.")
        for urgency, weight in self.priority_weights.items():
            if weight <= 0:
                raise ValueError(f"Priority weight for '{urgency}' must be positive, got {weight}.")

    def zone_factor(self, zone: str) -> float:
        return self.zone_efficiency.get(zone, self.default_zone_efficiency)

    def priority_weight(self, urgency: str) -> int:
        return self.priority_weights.get(urgency, 1)

    @property
    def max_priority_weight(self) -> int:
        return max(self.priority_weights.values(), default=1)

    def job_duration(self, job_type: str) -> int:
        return self.job_durations.get(job_type, self.default_job_duration)

    def fuel_cost(self, vehicle_class: str) -> float:
        return self.fuel_cost_per_km.get(vehicle_class, self.default_fuel_cost_per_km)

    def with_zone_efficiency(self, overrides: Mapping[str, float]) -> "RoutingTables":
        merged = {**self.zone_efficiency, **overrides}
        return replace(self, zone_efficiency=MappingProxyType(merged))

    @classmethod
    def from_settings(cls, config: Settings | None = None) -> "RoutingTables":
        config = config or settings
        tables = cls(
            default_zone_efficiency=config.default_zone_efficiency,
            hourly_labor_rate=config.hourly_labor_rate,
            urgency_bonus_per_weight=config.urgency_bonus_per_weight,
        )
        if config.zone_efficiency_overrides:
            tables = tables.with_zone_efficiency(config.zone_efficiency_overrides)
        return tables


def resolve_tables(tables: RoutingTables | None = None) -> RoutingTables:
    """Return ``tables`` or the tables built from the current settings."""

    return tables if tables is not None else RoutingTables.from_settings()
