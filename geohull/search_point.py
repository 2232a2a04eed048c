from geohull.geo_point import GeoPoint, GeoBounds
from collections import namedtuple
import numpy as np


class SearchPoint(namedtuple('SearchPoint', ('location', 'payload'))):
    '''Payload (opaque to us) sitting at location'''
    __slots__ = ()

    def __new__(cls, location, payload=None):
        return super().__new__(cls, location, payload)

    @classmethod
    def from_degrees(cls, longitude, latitude, payload=None):
        return cls(GeoPoint.from_degrees(longitude, latitude), payload)


class SearchPointVector(list):
    '''Ordered container of SearchPoints, typically a polygon outline'''

    @classmethod
    def from_degrees(cls, pairs):
        '''Vector from (longitude, latitude) pairs given in degrees'''
        return cls(SearchPoint.from_degrees(lon, lat) for lon, lat in pairs)

    def swap(self, other):
        '''Exchange contents with other vector'''
        assert isinstance(other, list)
        mine = list(self)
        self[:] = other
        other[:] = mine

    def locations(self):
        return [sp.location for sp in self]

    def native(self):
        '''Raw coordinates as (n, 2) array'''
        return np.array([sp.location.native() for sp in self], dtype=float).reshape((-1, 2))

    def bounds(self):
        return GeoBounds.from_points(self.locations())

    def prune_interior(self, tolerance=None):
        '''Drop points that are not vertices of the convex hull. Return True if changed.'''
        # Deferred to avoid a cycle; graham_scan imports this module
        from geohull.graham_scan import GrahamScan

        return GrahamScan(self, tolerance).prune_interior()

    def is_convex(self, tolerance=None):
        '''Nothing would be pruned'''
        return not SearchPointVector(self).prune_interior(tolerance)
