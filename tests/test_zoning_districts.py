from fieldroute.services.geospatial import haversine_km, point_in_bounds
from fieldroute.services.zoning.districts import UNKNOWN_ZONE, resolve_zone, zone_for_coordinates


def test_haversine_known_distance():
    # Warsaw centre to Kraków main square is roughly 252 km.
    distance = haversine_km(52.2297, 21.0122, 50.0619, 19.9368)

    assert 250 < distance < 255
    assert haversine_km(52.2297, 21.0122, 52.2297, 21.0122) == 0


def test_point_in_bounds_includes_edges():
    assert point_in_bounds(52.25, 21.0, south=52.22, west=21.0, north=52.25, east=21.04)
    assert not point_in_bounds(52.26, 21.0, south=52.22, west=21.0, north=52.25, east=21.04)


def test_zone_for_coordinates_matches_district():
    assert zone_for_coordinates(52.2297, 21.0122) == "Śródmieście"
    assert zone_for_coordinates(52.1700, 21.1000) == "Wilanów"
    assert zone_for_coordinates(0.0, 0.0) is None


def test_resolve_zone_prefers_explicit_zone():
    assert resolve_zone(" Mokotów ", 52.2297, 21.0122) == "Mokotów"
    assert resolve_zone(None, 52.2297, 21.0122) == "Śródmieście"
    assert resolve_zone("", 10.0, 10.0) == UNKNOWN_ZONE
