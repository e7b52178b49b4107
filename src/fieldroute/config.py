"""Application configuration and settings management."""

from typing import Any, Literal

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="FIELDROUTE_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Field Route Optimizer API"
    api_prefix: str = "/api"
    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    # Assignment defaults
    max_jobs_per_technician: int = Field(default=8, ge=1)
    prioritize_urgent: bool = True
    respect_time_windows: bool = Field(
        default=True,
        description="Accepted for forward compatibility; the heuristic does not enforce time windows.",
    )
    minimize_travel: bool = Field(
        default=True,
        description="Accepted for forward compatibility; travel is always minimised greedily.",
    )
    max_jobs_per_optimization: int = Field(
        default=500,
        ge=1,
        description="Above this many jobs a run is returned unoptimized instead of sequenced.",
    )
    route_builder_workers: int = Field(default=1, ge=1)

    # Cost and scoring model
    hourly_labor_rate: float = Field(default=80.0, ge=0.0)
    currency: str = "PLN"
    default_zone_efficiency: float = Field(default=0.8, gt=0.0, le=1.0)
    urgency_bonus_per_weight: float = Field(default=5.0, ge=0.0)
    zone_efficiency_overrides: dict[str, float] = Field(
        default_factory=dict,
        description="Per-zone travel efficiency multipliers merged over the built-in table.",
    )
    default_vehicle_class: Literal["van", "car", "motorcycle"] = "van"
    default_working_hours: tuple[str, str] = ("08:00", "17:00")

    # Route validation thresholds
    min_average_efficiency: float = Field(default=0.6, ge=0.0, le=1.0)
    max_workload_spread: int = Field(default=3, ge=0)
    urgent_position_limit: int = Field(default=2, ge=0)

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()

    @field_validator("zone_efficiency_overrides")
    @classmethod
    def _check_zone_efficiency(cls, value: dict[str, float]) -> dict[str, float]:
        for zone, multiplier in value.items():
            if not 0.0 < multiplier <= 1.0:
                raise ValueError(f"Zone efficiency for '{zone}' must be in (0, 1], got {multiplier}.")
        return value


settings = Settings()
