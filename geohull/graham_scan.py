from geohull.orientation import direction, directions
from geohull.search_point import SearchPointVector
from geohull.tolerance import as_tolerance
import numpy as np


class GrahamScan(object):
    '''
    Prune points of `points` which are not vertices of their convex hull.

    The hull is built as two monotone chains, lower and upper, running
    from the leftmost to the rightmost point. The vector is only borrowed
    for one `prune_interior` call; the instance is not meant to be reused.
    '''
    def __init__(self, points, tolerance=None):
        self.points = points
        self.size = len(points)
        self.tolerance = as_tolerance(tolerance)

        self.left, self.right = None, None
        self.upper_partition, self.lower_partition = [], []
        self.upper_hull, self.lower_hull = [], []

    def partition_points(self):
        '''
        Sort the points to get the far left and far right ones. The rest
        is split by the line left-right; those above go to upper partition
        and those below or on the line to the lower one.
        '''
        # Stable; ties in longitude are broken by latitude
        raw_points = sorted(self.points, key=lambda sp: sp.location)

        self.left, self.right = raw_points[0], raw_points[-1]
        interior = raw_points[1:-1]
        if not interior:
            return

        x = np.array([sp.location.native() for sp in raw_points])
        # Points coinciding with their predecessor in the sorted order
        # are skipped; the first interior point is checked against left
        fresh = np.any(x[1:-1] != x[:-2], axis=1)

        dirs = directions(self.left.location, self.right.location, x[1:-1],
                          self.tolerance)

        upper, = np.where(fresh & (dirs < 0))
        lower, = np.where(fresh & (dirs >= 0))

        self.upper_partition = [interior[i] for i in upper]
        self.lower_partition = [interior[i] for i in lower]

    def build_hull(self):
        '''Build lower and upper chain. Return True if something was pruned'''
        # For the lower hull the middle point of every triplet must be
        # below the line formed by its neighbors, for the upper one above.
        # This is the factor 1, -1 for the convexity test
        lower_pruned = self._build_half_hull(self.lower_partition, self.lower_hull, 1)
        upper_pruned = self._build_half_hull(self.upper_partition, self.upper_hull, -1)

        return lower_pruned or upper_pruned

    def _build_half_hull(self, partition, hull, factor):
        '''Monotone chain from left to right through sorted partition'''
        assert factor in (1, -1)

        partition.append(self.right)
        hull.append(self.left)

        pruned = False
        for sp in partition:
            hull.append(sp)
            # Restore convexity by dropping the next-to-last point
            while len(hull) >= 3:
                if factor*direction(hull[-3].location,
                                    hull[-1].location,
                                    hull[-2].location,
                                    self.tolerance) > 0:
                    break
                del hull[-2]
                pruned = True

        return pruned

    def prune_interior(self):
        '''Reduce points to the hull. Return True if points were removed.'''
        # Nothing to do
        if self.size < 3:
            return False

        self.partition_points()

        if not self.build_hull():
            return False

        # Right ends the lower chain and left starts the upper one
        result = self.lower_hull[:-1] + self.upper_hull[:0:-1]
        assert len(result) <= self.size, (len(result), self.size)

        if hasattr(self.points, 'swap'):
            self.points.swap(result)
        else:
            self.points[:] = result

        return True


def prune_interior(points, tolerance=None):
    '''Prune points in place. Return True if changed'''
    return GrahamScan(points, tolerance).prune_interior()


def convex_hull(points, tolerance=None):
    '''Hull points in a new vector; points are not modified'''
    hull = SearchPointVector(points)
    prune_interior(hull, tolerance)

    return hull

# --------------------------------------------------------------------

if __name__ == '__main__':
    from geohull.search_point import SearchPoint

    rng = np.random.default_rng(1234)
    # Around Lake Constance
    lon, lat = 9.4 + 0.3*rng.standard_normal(200), 47.6 + 0.1*rng.standard_normal(200)

    points = SearchPointVector(SearchPoint.from_degrees(*ll, payload=i)
                               for i, ll in enumerate(zip(lon, lat)))
    size = len(points)

    print(prune_interior(points), f'{size} -> {len(points)}')
    print([sp.payload for sp in points])
    print('Pruning again', prune_interior(points))
