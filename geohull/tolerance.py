from collections import namedtuple
import numpy as np

# Dead zone of the orientation test is [-tol, tol] where tol is computed
# from the two cross product terms t1, t2. Both kinds work on scalars as
# well as on numpy arrays of the terms.

DEFAULT_TOLERANCE = 1E-8


class FixedTolerance(namedtuple('FixedTolerance', ('value', ))):
    '''Same tolerance for every test'''
    __slots__ = ()

    def __call__(self, t1, t2):
        return self.value


class AutoTolerance(namedtuple('AutoTolerance', ('divisor', ))):
    '''Tolerance scaled to the magnitude of the cross product terms'''
    __slots__ = ()

    def __new__(cls, divisor=10):
        return super().__new__(cls, divisor)

    def __call__(self, t1, t2):
        # Verified by experiment for divisor 10
        return np.maximum(np.abs(t1), np.abs(t2))/self.divisor


def as_tolerance(arg=None):
    '''
    Tolerance from arg. None gives the default fixed one, a negative
    number is auto tolerance and non-negative is fixed.
    '''
    if arg is None:
        return FixedTolerance(DEFAULT_TOLERANCE)

    if isinstance(arg, FixedTolerance):
        assert arg.value >= 0, arg
        return arg

    if isinstance(arg, AutoTolerance):
        assert arg.divisor > 0, arg
        return arg

    arg = float(arg)
    return AutoTolerance() if arg < 0 else FixedTolerance(arg)
