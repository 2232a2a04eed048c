from collections import namedtuple
import numpy as np


class Angle(namedtuple('Angle', ('value', ))):
    '''Angle; value is in radians'''
    __slots__ = ()

    @classmethod
    def from_radians(cls, value):
        return cls(float(value))

    @classmethod
    def from_degrees(cls, value):
        return cls(float(np.deg2rad(value)))

    def native(self):
        '''Raw number used in arithmetic'''
        return self.value

    def degrees(self):
        return float(np.rad2deg(self.value))

    def __sub__(self, other):
        return Angle(self.value - other.value)

    def __add__(self, other):
        return Angle(self.value + other.value)

    def __neg__(self):
        return Angle(-self.value)

    def __abs__(self):
        return Angle(abs(self.value))


class GeoPoint(namedtuple('GeoPoint', ('longitude', 'latitude'))):
    '''
    Location given by two angles. For the small areas we deal with the
    pair is treated as planar (x, y) = (longitude, latitude). Tuple
    ordering makes points compare by longitude first, then latitude.
    '''
    __slots__ = ()

    @classmethod
    def from_degrees(cls, longitude, latitude):
        return cls(Angle.from_degrees(longitude), Angle.from_degrees(latitude))

    @classmethod
    def from_radians(cls, longitude, latitude):
        return cls(Angle.from_radians(longitude), Angle.from_radians(latitude))

    def native(self):
        return (self.longitude.native(), self.latitude.native())

    def degrees(self):
        return (self.longitude.degrees(), self.latitude.degrees())

    def __sub__(self, other):
        # The difference is a vector in the same angular units
        return GeoPoint(self.longitude - other.longitude,
                        self.latitude - other.latitude)


class GeoBounds(namedtuple('GeoBounds', ('west', 'east', 'south', 'north'))):
    '''Axis aligned box in longitude/latitude'''
    __slots__ = ()

    @classmethod
    def from_points(cls, points):
        points = list(points)
        assert points, 'No bounds of empty set'

        x = np.array([p.native() for p in points])
        (west, south), (east, north) = x.min(axis=0), x.max(axis=0)

        return cls(Angle.from_radians(west), Angle.from_radians(east),
                   Angle.from_radians(south), Angle.from_radians(north))

    def contains(self, point):
        return (self.west <= point.longitude <= self.east and
                self.south <= point.latitude <= self.north)
