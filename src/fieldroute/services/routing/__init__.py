"""Route assignment and sequencing engine."""

from .models import OptimizationSummary, OptimizedRoute, RouteValidationResult, RoutingOptions
from .planner import RoutePlanner, assign_routes
from .sequence_builder import build_route
from .summary import summarize_optimization, zone_performance
from .tables import RoutingTables, resolve_tables
from .validator import validate_routes

__all__ = [
    "OptimizationSummary",
    "OptimizedRoute",
    "RoutePlanner",
    "RouteValidationResult",
    "RoutingOptions",
    "RoutingTables",
    "assign_routes",
    "build_route",
    "resolve_tables",
    "summarize_optimization",
    "validate_routes",
    "zone_performance",
]
