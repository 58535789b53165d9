import math

import pytest

from transport_catalogue.geo import EARTH_RADIUS, Coordinates, compute_distance


def test_coordinates_equality_and_hash():
    a = Coordinates(55.611087, 37.20829)
    b = Coordinates(55.611087, 37.20829)
    c = Coordinates(55.611087, 37.20830)
    assert a == b
    assert hash(a) == hash(b)
    assert a != c
    assert len({a, b, c}) == 2


def test_distance_to_same_point_is_zero():
    point = Coordinates(55.595884, 37.209755)
    assert compute_distance(point, point) == pytest.approx(0.0, abs=1e-6)


def test_distance_is_symmetric():
    a = Coordinates(55.611087, 37.20829)
    b = Coordinates(55.595884, 37.209755)
    assert compute_distance(a, b) == pytest.approx(compute_distance(b, a))


def test_distance_is_positive_for_distinct_points():
    a = Coordinates(55.611087, 37.20829)
    b = Coordinates(55.595884, 37.209755)
    assert compute_distance(a, b) > 0


def test_triangle_inequality():
    a = Coordinates(55.611087, 37.20829)
    b = Coordinates(55.595884, 37.209755)
    c = Coordinates(55.632761, 37.333324)
    assert compute_distance(a, c) <= compute_distance(a, b) + compute_distance(b, c) + 1e-6


def test_antipodal_points_are_half_circumference_apart():
    north = Coordinates(90.0, 0.0)
    south = Coordinates(-90.0, 0.0)
    assert compute_distance(north, south) == pytest.approx(math.pi * EARTH_RADIUS)


def test_longitude_sign_does_not_matter_for_symmetric_offsets():
    base = Coordinates(10.0, 0.0)
    east = Coordinates(10.0, 5.0)
    west = Coordinates(10.0, -5.0)
    assert compute_distance(base, east) == pytest.approx(compute_distance(base, west))