import heapq
import numbers

import numpy as np

from point import InvalidInputError, PointDistance, euclidean_distance, points_from_array


class OpticsConfigError(ValueError):
    """Raised for an eps, min_samples or metric the engine cannot run with."""


class OPTICS:
    """OPTICS cluster ordering implemented from scratch.

    Produces an ordering of all points plus a reachability distance per point;
    clusters are read off the reachability plot afterwards, not assigned here.

    The point list is borrowed, not copied: ``execute`` resets and annotates
    each Point in place and returns references to them in cluster order.
    Neighbor search is a brute-force linear scan.
    """

    def __init__(self, points=None, eps=1.0, min_samples=2, metric=euclidean_distance):
        if isinstance(eps, bool) or not isinstance(eps, numbers.Real) or np.isnan(eps) or eps < 0:
            raise OpticsConfigError(f"eps must be a real number >= 0, got {eps!r}")
        if isinstance(min_samples, bool) or not isinstance(min_samples, numbers.Integral) or min_samples < 1:
            raise OpticsConfigError(f"min_samples must be an integer >= 1, got {min_samples!r}")
        if not callable(metric):
            raise OpticsConfigError(f"metric must be callable, got {metric!r}")

        self.points = points if points is not None else []
        self.eps = float(eps)
        self.min_samples = int(min_samples)
        self.metric = metric
        self.ordering = []
        self.core_distances_ = {}
        self.reachability_ = None
        self.ordering_indices_ = None

    def _distance(self, a, b):
        d = self.metric(a, b)
        if not d >= 0:
            raise InvalidInputError(f"metric returned {d!r} for points {a.index} and {b.index}")
        return d

    def neighbors(self, point):
        """All other points within eps of ``point``; the point itself is excluded by identity."""
        return [
            other for other in self.points
            if other is not point and self._distance(point, other) <= self.eps
        ]

    def core_distance(self, point, neighbors):
        """Distance to the (min_samples - 1)-th nearest neighbor, or inf if not a core point."""
        if len(neighbors) + 1 < self.min_samples:
            return np.inf
        if self.min_samples == 1:
            # the point alone is dense enough
            return 0.0
        distances = np.sort([self._distance(point, neighbor) for neighbor in neighbors])
        return float(distances[self.min_samples - 2])

    def update_seeds(self, seeds, reachability_index, center, neighbors, core_distance):
        """Push improved reachabilities of ``center``'s unprocessed neighbors onto ``seeds``.

        An improvement never touches the entry already in the heap; a fresh
        entry is pushed and ``reachability_index`` records the value that is
        now current, so the old entry is recognised as stale when popped.
        """
        for neighbor in neighbors:
            if neighbor.processed:
                continue
            candidate = max(core_distance, self._distance(center, neighbor))
            if neighbor.reachability == np.inf or candidate < neighbor.reachability:
                neighbor.reachability = candidate
                reachability_index[neighbor] = candidate
                heapq.heappush(seeds, PointDistance(neighbor, candidate))

    def _is_stale(self, entry, reachability_index):
        point = entry.point
        return point.processed or reachability_index[point] != entry.distance

    def expand_cluster_order(self, point, ordering):
        """Order every point density-reachable from ``point``, appending to ``ordering``."""
        seeds = []
        reachability_index = {}

        point.processed = True
        point.reachability = np.inf
        ordering.append(point)

        neighbors = self.neighbors(point)
        core = self.core_distance(point, neighbors)
        self.core_distances_[point.index] = core
        if core == np.inf:
            return

        self.update_seeds(seeds, reachability_index, point, neighbors, core)

        while seeds:
            entry = heapq.heappop(seeds)
            if self._is_stale(entry, reachability_index):
                continue

            current = entry.point
            current.processed = True
            ordering.append(current)

            current_neighbors = self.neighbors(current)
            current_core = self.core_distance(current, current_neighbors)
            self.core_distances_[current.index] = current_core
            if current_core != np.inf:
                self.update_seeds(seeds, reachability_index, current, current_neighbors, current_core)

    def execute(self):
        """Reset every point, then order the whole set; returns the ordered list of Points."""
        for point in self.points:
            point.reset()
        self.ordering = []
        self.core_distances_ = {}
        self.reachability_ = None
        self.ordering_indices_ = None

        ordering = []
        for point in self.points:
            if not point.processed:
                self.expand_cluster_order(point, ordering)

        self.ordering = ordering
        self.reachability_ = np.array([p.reachability for p in ordering], dtype=float)
        self.ordering_indices_ = np.array([p.index for p in ordering], dtype=int)

        n_regions = int(np.isinf(self.reachability_).sum())
        print(f"  Ordered {len(ordering)} points into {n_regions} density regions.")
        return ordering

    def fit(self, X):
        self.points = points_from_array(X)
        self.execute()
        return self
