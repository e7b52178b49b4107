"""Resolve a service zone from coordinates using district bounding boxes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from ..geospatial import point_in_bounds

UNKNOWN_ZONE = "Unknown"


@dataclass(frozen=True, slots=True)
class DistrictBounds:
    name: str
    north: float
    south: float
    east: float
    west: float

    def contains(self, lat: float, lng: float) -> bool:
        return point_in_bounds(lat, lng, south=self.south, west=self.west, north=self.north, east=self.east)


WARSAW_DISTRICTS: tuple[DistrictBounds, ...] = (
    DistrictBounds("Śródmieście", north=52.2500, south=52.2200, east=21.0400, west=21.0000),
    DistrictBounds("Wilanów", north=52.1800, south=52.1600, east=21.1200, west=21.0800),
    DistrictBounds("Mokotów", north=52.2000, south=52.1700, east=21.0500, west=21.0000),
    DistrictBounds("Żoliborz", north=52.2900, south=52.2500, east=21.0300, west=20.9700),
    DistrictBounds("Ursynów", north=52.1700, south=52.1300, east=21.0900, west=21.0300),
    DistrictBounds("Wola", north=52.2500, south=52.2100, east=21.0100, west=20.9500),
    DistrictBounds("Praga-Południe", north=52.2400, south=52.2000, east=21.1000, west=21.0400),
    DistrictBounds("Targówek", north=52.3100, south=52.2700, east=21.1000, west=21.0300),
    DistrictBounds("Bemowo", north=52.2700, south=52.2300, east=20.9700, west=20.9000),
    DistrictBounds("Bielany", north=52.3000, south=52.2600, east=20.9800, west=20.9200),
)


def zone_for_coordinates(
    lat: float,
    lng: float,
    districts: Sequence[DistrictBounds] = WARSAW_DISTRICTS,
) -> Optional[str]:
    """Return the first district whose bounds contain the point, if any.

    Bounds overlap along shared edges; declaration order decides.
    """

    for district in districts:
        if district.contains(lat, lng):
            return district.name
    return None


def resolve_zone(
    zone: Optional[str],
    lat: float,
    lng: float,
    districts: Sequence[DistrictBounds] = WARSAW_DISTRICTS,
) -> str:
    if zone and zone.strip():
        return zone.strip()
    return zone_for_coordinates(lat, lng, districts) or UNKNOWN_ZONE
