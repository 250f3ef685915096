import numpy as np


class InvalidInputError(ValueError):
    """Raised when the point set cannot be ordered as given."""


class DimensionMismatchError(InvalidInputError):
    """Two coordinate vectors do not share the same dimensionality."""


def euclidean_distance(a, b):
    """Euclidean distance between two points."""
    ca, cb = a.coordinates, b.coordinates
    if ca.shape != cb.shape:
        raise DimensionMismatchError(
            f"point {a.index} has {ca.shape[0]} coordinates, point {b.index} has {cb.shape[0]}"
        )
    return float(np.sqrt(((ca - cb) ** 2).sum()))


class Point:
    """A data item in d-dimensional space plus the state OPTICS annotates it with.

    Equality and hashing are identity-based: two points with identical
    coordinates are still distinct points.
    """

    __slots__ = ("_coordinates", "index", "reachability", "processed")

    def __init__(self, coordinates, index):
        self.coordinates = coordinates
        self.index = index
        self.reachability = np.inf
        self.processed = False

    @property
    def coordinates(self):
        return self._coordinates

    @coordinates.setter
    def coordinates(self, coordinates):
        self._coordinates = np.asarray(coordinates, dtype=float).reshape(-1)

    def reset(self):
        self.reachability = np.inf
        self.processed = False

    def distance_to(self, other):
        return euclidean_distance(self, other)

    def __repr__(self):
        return f"Point(index={self.index}, reachability={self.reachability:.4g}, processed={self.processed})"


class PointDistance:
    """Snapshot of a point's reachability at the moment it entered the seed heap.

    Ordered by distance only, equal/hashed by the referenced point only.
    """

    __slots__ = ("_point", "_distance")

    def __init__(self, point, distance):
        self._point = point
        self._distance = distance

    @property
    def point(self):
        return self._point

    @property
    def distance(self):
        return self._distance

    def __lt__(self, other):
        return self._distance < other._distance

    def __eq__(self, other):
        if not isinstance(other, PointDistance):
            return NotImplemented
        return self._point is other._point

    def __hash__(self):
        return id(self._point)

    def __repr__(self):
        return f"PointDistance(point={self._point.index}, distance={self._distance:.4g})"


def points_from_array(X):
    """(n, d) array-like -> list of Points indexed 0..n-1 in row order."""
    X = np.asarray(X, dtype=float)
    if X.ndim == 1 and X.size == 0:
        return []
    if X.ndim != 2 or (len(X) and X.shape[1] == 0):
        raise DimensionMismatchError(f"expected a 2-D array of coordinates, got shape {X.shape}")
    return [Point(row, i) for i, row in enumerate(X)]
