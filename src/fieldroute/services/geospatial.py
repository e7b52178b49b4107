"""Geospatial helper functions."""

from __future__ import annotations

import math

from shapely.geometry import Point, box

from ..models.domain import GeoPoint

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Compute distance between two coordinates using the Haversine formula."""

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def distance_between(origin: GeoPoint, destination: GeoPoint) -> float:
    return haversine_km(origin.lat, origin.lng, destination.lat, destination.lng)


def point_in_bounds(lat: float, lon: float, *, south: float, west: float, north: float, east: float) -> bool:
    """Return True if the point lies inside or on the edge of the bounding box."""

    return box(west, south, east, north).covers(Point(lon, lat))
