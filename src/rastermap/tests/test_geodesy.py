import math

from rastermap import GeoPoint
from rastermap.config import EARTH
from rastermap.geodesy import deg2rad, great_circle_distance


def test_deg2rad():
    assert abs(deg2rad(180.0) - math.pi) < 1e-15
    assert deg2rad(0.0) == 0.0
    assert abs(deg2rad(-90.0) + math.pi / 2) < 1e-15


def test_distance_same_point_is_zero():
    for p in (GeoPoint(0.0, 0.0), GeoPoint(48.85, 2.35), GeoPoint(-33.9, 151.2), GeoPoint(90.0, 0.0)):
        assert great_circle_distance(p, p) == 0.0


def test_distance_is_symmetric():
    a = GeoPoint(48.8566, 2.3522)
    b = GeoPoint(40.7128, -74.0060)
    assert abs(great_circle_distance(a, b) - great_circle_distance(b, a)) < 1e-6


def test_one_degree_on_equator():
    expected = EARTH['radius_m'] * math.pi / 180.0
    d_lon = great_circle_distance(GeoPoint(0.0, 0.0), GeoPoint(0.0, 1.0))
    d_lat = great_circle_distance(GeoPoint(0.0, 0.0), GeoPoint(1.0, 0.0))
    assert abs(d_lon - expected) < 1e-6
    assert abs(d_lat - expected) < 1e-6


def test_paris_new_york():
    # ~5837 km on a 6371 km sphere
    d = great_circle_distance(GeoPoint(48.8566, 2.3522), GeoPoint(40.7128, -74.0060))
    assert abs(d - 5837e3) < 5e3


def test_antipodal_points_half_circumference():
    d = great_circle_distance(GeoPoint(0.0, 0.0), GeoPoint(0.0, 180.0))
    assert abs(d - math.pi * EARTH['radius_m']) < 1e-3


def test_custom_radius():
    d = great_circle_distance(GeoPoint(0.0, 0.0), GeoPoint(0.0, 90.0), radius=1.0)
    assert abs(d - math.pi / 2) < 1e-12


def test_accepts_duck_typed_points():
    class P:
        def __init__(self, lat, lon):
            self.lat = lat
            self.lon = lon

    assert great_circle_distance(P(10.0, 10.0), P(10.0, 11.0)) == \
        great_circle_distance(GeoPoint(10.0, 10.0), GeoPoint(10.0, 11.0))
