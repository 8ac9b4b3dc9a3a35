"""Great-circle helpers.

Keep these pure-Python so the raster code can import them without pulling
anything heavier than `math`.
"""
import math

from rastermap.config import EARTH


def deg2rad(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * (math.pi / 180.0)


def great_circle_distance(point_a, point_b, radius: float = EARTH['radius_m']) -> float:
    """Distance in meters between two points along the great circle.

    Uses the haversine formula on a sphere of `radius` meters (the mean Earth
    radius by default). Points are anything exposing `lat` and `lon` in
    degrees, typically `rastermap.points.GeoPoint`.
    """
    d_lat = deg2rad(point_b.lat - point_a.lat)
    d_lon = deg2rad(point_b.lon - point_a.lon)
    a = (math.sin(d_lat / 2) * math.sin(d_lat / 2)
         + math.cos(deg2rad(point_a.lat)) * math.cos(deg2rad(point_b.lat))
         * math.sin(d_lon / 2) * math.sin(d_lon / 2))
    # rounding can push a just past 1 for antipodal points
    a = min(a, 1.0)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return radius * c
