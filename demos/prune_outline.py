from geohull.search_point import SearchPoint, SearchPointVector
from geohull.tolerance import AutoTolerance, FixedTolerance
import numpy as np


def random_cloud(center, spread, npoints, seed=None):
    '''Normally distributed points (degrees) around center'''
    rng = np.random.default_rng(seed)
    x = np.array(center) + np.array(spread)*rng.standard_normal((npoints, 2))

    return SearchPointVector(SearchPoint.from_degrees(lon, lat, payload=i)
                             for i, (lon, lat) in enumerate(x))


def closed_outline(points):
    '''Coordinates in degrees with the first point repeated at the end'''
    x = np.array([sp.location.degrees() for sp in points])
    return np.vstack([x, x[0]])

# ----------------------------------------------------------------------


if __name__ == '__main__':
    import matplotlib.pyplot as plt

    center, spread, npoints = (11.6, 48.1), (0.2, 0.1), 500

    cloud = random_cloud(center, spread, npoints, seed=42)
    x = np.array([sp.location.degrees() for sp in cloud])

    plt.figure()
    plt.plot(x[:, 0], x[:, 1], 'k.', markersize=2)

    for tol in (FixedTolerance(0.), FixedTolerance(1E-8), AutoTolerance()):
        outline = SearchPointVector(cloud)
        changed = outline.prune_interior(tol)
        print(tol, changed, f'{len(cloud)} -> {len(outline)}', outline.is_convex(tol))

        contour = closed_outline(outline)
        plt.plot(contour[:, 0], contour[:, 1], label=str(tol))

    print(cloud.bounds())

    plt.legend()
    plt.axis('equal')
    plt.show()
