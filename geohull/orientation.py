from geohull.tolerance import as_tolerance
import numpy as np


def sign(value, tolerance):
    '''-1, 0, 1 with [-tolerance, tolerance] counting as 0'''
    if value > tolerance:
        return 1
    if value < -tolerance:
        return -1
    return 0


def direction(p0, p1, p2, tolerance=None):
    '''
    Does the path p0 -> p1 -> p2 turn? With p1 moved to the origin the
    sign of the cross product of p0 and p2 is positive for a right turn,
    negative for a left turn and 0 if the points are on a line.
    '''
    tolerance = as_tolerance(tolerance)

    a, b = p0 - p1, p2 - p1

    t1 = a.longitude.native()*b.latitude.native()
    t2 = b.longitude.native()*a.latitude.native()

    return sign(t1 - t2, tolerance(t1, t2))


def directions(p0, p1, x, tolerance=None):
    '''direction(p0, p1, p2) for every row p2 of (n, 2) array x'''
    tolerance = as_tolerance(tolerance)

    x = np.asarray(x, dtype=float).reshape((-1, 2))
    x0, x1 = np.array(p0.native()), np.array(p1.native())

    a, b = x0 - x1, x - x1

    t1 = a[0]*b[:, 1]
    t2 = b[:, 0]*a[1]

    diff, tol = t1 - t2, tolerance(t1, t2)

    return np.where(diff > tol, 1, np.where(diff < -tol, -1, 0))
