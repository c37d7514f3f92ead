import math
from dataclasses import dataclass

EARTH_RADIUS_KM = 6371.0


# Planar placement used for straight-line-distance heuristics
@dataclass(frozen=True)
class Point:
    x: float  # same unit as the link distances of the map
    y: float

    def distance(self, other: "Point") -> float:
        return math.hypot(other.x - self.x, other.y - self.y)


@dataclass(frozen=True)
class Position:
    """WGS84 position in degrees. Distances are great-circle kilometers."""

    lat: float
    lon: float

    def distance_km(self, other: "Position") -> float:
        la1, la2 = math.radians(self.lat), math.radians(other.lat)
        dla = la2 - la1
        dlo = math.radians(other.lon - self.lon)
        a = math.sin(dla / 2) ** 2 + math.cos(la1) * math.cos(la2) * math.sin(dlo / 2) ** 2
        return 2 * EARTH_RADIUS_KM * math.asin(min(1.0, math.sqrt(a)))
