from geohull.search_point import SearchPoint, SearchPointVector
from geohull.geo_point import Angle, GeoPoint, GeoBounds
import numpy as np
import pytest


def test_angle():
    angle = Angle.from_degrees(180)

    assert angle.native() == pytest.approx(np.pi)
    assert angle.degrees() == pytest.approx(180)
    assert (angle - Angle.from_degrees(90)).degrees() == pytest.approx(90)
    assert abs(-angle) == angle
    assert Angle.from_degrees(10) < Angle.from_degrees(11)


def test_geo_point():
    p = GeoPoint.from_degrees(10, 20)
    q = GeoPoint.from_degrees(4, 25)

    lon, lat = (p - q).degrees()
    assert lon == pytest.approx(6)
    assert lat == pytest.approx(-5)

    # Longitude first ...
    assert q < p
    # ... then latitude
    assert GeoPoint.from_degrees(10, 19) < p
    assert sorted([p, q, GeoPoint.from_degrees(4, 24)])[0] == GeoPoint.from_degrees(4, 24)


def test_bounds():
    points = SearchPointVector.from_degrees([(1, 2), (-3, 5), (4, -1)])
    bounds = points.bounds()

    assert isinstance(bounds, GeoBounds)
    assert bounds.west.degrees() == pytest.approx(-3)
    assert bounds.east.degrees() == pytest.approx(4)
    assert bounds.south.degrees() == pytest.approx(-1)
    assert bounds.north.degrees() == pytest.approx(5)

    assert all(bounds.contains(p) for p in points.locations())
    assert not bounds.contains(GeoPoint.from_degrees(5, 0))


def test_search_point_payload():
    sp = SearchPoint.from_degrees(1, 2)
    assert sp.payload is None

    sp = SearchPoint(GeoPoint.from_degrees(1, 2), 'A')
    assert sp.payload == 'A'
    assert sp.location == GeoPoint.from_degrees(1, 2)


def test_swap():
    a = SearchPointVector.from_degrees([(0, 0), (1, 1)])
    b = SearchPointVector.from_degrees([(2, 2)])
    a0, b0 = list(a), list(b)

    a.swap(b)
    assert a == b0 and b == a0


def test_native():
    points = SearchPointVector.from_degrees([(0, 0), (90, 45)])
    x = points.native()

    assert x.shape == (2, 2)
    assert np.allclose(x, [[0, 0], [np.pi/2, np.pi/4]])

    assert SearchPointVector().native().shape == (0, 2)
