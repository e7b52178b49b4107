from fieldroute.models.domain import GeoPoint, JobPoint
from fieldroute.services.outputs.directions import generate_route_directions
from fieldroute.services.routing.models import OptimizedRoute


def _job(job_id: str, urgency: str, job_type: str, address: str, zone: str) -> JobPoint:
    return JobPoint(
        id=job_id,
        location=GeoPoint(52.2297, 21.0122),
        address=address,
        zone=zone,
        urgency=urgency,
        job_type=job_type,
    )


EMERGENCY = _job("job-1", "urgent", "emergency", "ul. Marszałkowska 1", "Śródmieście")
REPAIR = _job("job-2", "high", "repair", "ul. Puławska 10", "Mokotów")


def _route(jobs, distance=5.2, duration=180.0, cost=250.0) -> OptimizedRoute:
    return OptimizedRoute(
        technician_id="tech-1",
        jobs=tuple(jobs),
        total_distance_km=distance,
        total_duration_minutes=duration,
        efficiency_score=0.85,
        zones_covered=tuple(dict.fromkeys(job.zone for job in jobs)),
        estimated_cost=cost,
    )


def test_directions_list_every_stop_between_home_legs():
    directions = generate_route_directions(_route([EMERGENCY, REPAIR]))

    assert directions[0] == "🏠 Start from home base"
    assert "1. 🚨 EMERGENCY - ul. Marszałkowska 1 (Śródmieście)" in directions
    assert "2. ⚡ REPAIR - ul. Puławska 10 (Mokotów)" in directions
    assert "🏠 Return to home base" in directions
    assert "📊 Total: 5.2km, 3h 0m" in directions
    assert directions[-1] == "💰 Estimated cost: 250 PLN"


def test_directions_include_job_type_duration():
    directions = generate_route_directions(_route([EMERGENCY], distance=2.5, duration=120.0, cost=150.0))

    assert "   ⏱️ Est. duration: 120 min" in directions


def test_directions_use_requested_currency():
    directions = generate_route_directions(_route([REPAIR]), currency="EUR")

    assert directions[-1] == "💰 Estimated cost: 250 EUR"


def test_empty_route_directions():
    assert generate_route_directions(_route([], distance=0.0, duration=0.0, cost=0.0)) == [
        "No jobs assigned for this route."
    ]


def test_directions_total_floors_hours_and_keeps_remaining_minutes():
    directions = generate_route_directions(_route([REPAIR], distance=12.0, duration=90.0))

    assert "📊 Total: 12km, 1h 30m" in directions
