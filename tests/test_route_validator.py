from fieldroute.models.domain import GeoPoint, JobPoint, TechnicianProfile
from fieldroute.services.routing.models import OptimizedRoute
from fieldroute.services.routing.validator import validate_routes


def _job(job_id: str, urgency: str = "medium") -> JobPoint:
    return JobPoint(
        id=job_id,
        location=GeoPoint(52.23, 21.01),
        address=f"Address {job_id}",
        zone="A",
        urgency=urgency,
        job_type="repair",
    )


def _route(technician_id: str, jobs, efficiency: float = 0.8) -> OptimizedRoute:
    return OptimizedRoute(
        technician_id=technician_id,
        jobs=tuple(jobs),
        total_distance_km=5.0,
        total_duration_minutes=200.0,
        efficiency_score=efficiency,
        zones_covered=("A",),
        estimated_cost=270.0,
    )


def _technician(tech_id: str, name: str | None = None) -> TechnicianProfile:
    return TechnicianProfile(
        id=tech_id,
        home_location=GeoPoint(52.23, 21.01),
        eligible_zones=frozenset({"A"}),
        name=name,
    )


def test_clean_run_is_valid():
    jobs = [_job("J1"), _job("J2"), _job("J3")]
    routes = [_route("tech-1", jobs[:2]), _route("tech-2", jobs[2:])]

    result = validate_routes(routes, jobs, [_technician("tech-1"), _technician("tech-2")])

    assert result.is_valid
    assert result.accuracy_score == 1.0
    assert result.issues == []
    assert result.recommendations == []


def test_unassigned_jobs_are_reported():
    jobs = [_job("J1"), _job("J2"), _job("J3")]
    routes = [_route("tech-1", jobs[:1])]

    result = validate_routes(routes, jobs, [_technician("tech-1")])

    assert not result.is_valid
    assert "2 jobs were not assigned to any technician" in result.issues
    assert "Check technician service areas and availability" in result.recommendations
    assert result.accuracy_score == 0.9


def test_jobs_in_several_routes_are_reported():
    jobs = [_job("J1"), _job("J2")]
    routes = [_route("tech-1", jobs), _route("tech-2", jobs[:1])]

    result = validate_routes(routes, jobs, [])

    assert any("more than one route" in issue and "J1" in issue for issue in result.issues)


def test_low_average_efficiency_is_flagged():
    jobs = [_job("J1"), _job("J2")]
    routes = [_route("tech-1", jobs[:1], efficiency=0.4), _route("tech-2", jobs[1:], efficiency=0.5)]

    result = validate_routes(routes, jobs, [])

    assert result.issues == ["Average route efficiency is low: 45.0%"]


def test_workload_imbalance_is_flagged():
    jobs = [_job(f"J{index}") for index in range(6)]
    routes = [_route("tech-1", jobs[:5]), _route("tech-2", jobs[5:])]

    result = validate_routes(routes, jobs, [])

    assert result.issues == ["Unbalanced workload: 5 vs 1 jobs per technician"]
    assert result.recommendations == ["Consider redistributing jobs for better balance"]


def test_spread_of_three_is_tolerated():
    jobs = [_job(f"J{index}") for index in range(5)]
    routes = [_route("tech-1", jobs[:4]), _route("tech-2", jobs[4:])]

    assert validate_routes(routes, jobs, []).is_valid


def test_urgent_job_after_third_stop_is_flagged_once_per_route():
    jobs = [_job("J1"), _job("J2"), _job("J3"), _job("U1", "urgent"), _job("U2", "urgent")]
    routes = [_route("tech-1", jobs)]

    result = validate_routes(routes, jobs, [_technician("tech-1", name="Jan Kowalski")])

    assert result.issues == ["Urgent job scheduled as #4 for technician Jan Kowalski (tech-1)"]
    assert result.recommendations == ["Prioritize urgent jobs earlier in routes"]


def test_urgent_job_at_third_stop_is_accepted():
    jobs = [_job("J1"), _job("J2"), _job("U1", "urgent")]
    routes = [_route("tech-1", jobs)]

    assert validate_routes(routes, jobs, []).is_valid


def test_accuracy_never_drops_below_zero():
    routes = []
    jobs = []
    for index in range(12):
        route_jobs = [_job(f"T{index}-J{n}") for n in range(3)] + [_job(f"T{index}-U", "urgent")]
        jobs.extend(route_jobs)
        routes.append(_route(f"tech-{index}", route_jobs))

    result = validate_routes(routes, jobs, [])

    assert len(result.issues) == 12
    assert result.accuracy_score == 0.0


def test_no_routes_only_reports_coverage():
    jobs = [_job("J1")]

    result = validate_routes([], jobs, [_technician("tech-1")])

    assert result.issues == ["1 jobs were not assigned to any technician"]
    assert result.accuracy_score == 0.9
