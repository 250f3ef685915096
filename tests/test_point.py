import heapq

import numpy as np
import pytest

from point import (
    DimensionMismatchError,
    InvalidInputError,
    Point,
    PointDistance,
    euclidean_distance,
    points_from_array,
)


def test_new_point_is_unprocessed_with_infinite_reachability():
    p = Point([1, 2], 7)
    assert p.index == 7
    assert p.reachability == np.inf
    assert p.processed is False
    assert p.coordinates.dtype == float
    np.testing.assert_array_equal(p.coordinates, [1.0, 2.0])


def test_reset_restores_initial_state():
    p = Point([0.0], 0)
    p.reachability = 0.5
    p.processed = True
    p.reset()
    assert p.reachability == np.inf
    assert p.processed is False


def test_coordinates_can_be_replaced():
    p = Point([0.0, 0.0], 0)
    p.coordinates = [3.0, 4.0]
    assert p.distance_to(Point([0.0, 0.0], 1)) == pytest.approx(5.0)


def test_euclidean_distance_is_symmetric_and_zero_on_self():
    a = Point([0.0, 0.0], 0)
    b = Point([3.0, 4.0], 1)
    assert euclidean_distance(a, b) == pytest.approx(5.0)
    assert euclidean_distance(b, a) == pytest.approx(5.0)
    assert euclidean_distance(a, a) == 0.0


def test_dimension_mismatch_raises_invalid_input():
    a = Point([0.0, 0.0], 0)
    b = Point([1.0, 2.0, 3.0], 1)
    with pytest.raises(DimensionMismatchError):
        euclidean_distance(a, b)
    with pytest.raises(InvalidInputError):
        a.distance_to(b)
    with pytest.raises(ValueError):
        b.distance_to(a)


def test_points_compare_by_identity_not_coordinates():
    a = Point([1.0, 1.0], 0)
    b = Point([1.0, 1.0], 1)
    assert a != b
    assert len({a, b}) == 2
    assert a == a


def test_point_distance_equality_uses_point_only():
    p = Point([0.0], 0)
    q = Point([0.0], 1)
    assert PointDistance(p, 1.0) == PointDistance(p, 2.0)
    assert hash(PointDistance(p, 1.0)) == hash(PointDistance(p, 2.0))
    assert PointDistance(p, 1.0) != PointDistance(q, 1.0)


def test_point_distance_orders_by_distance_in_a_heap():
    pts = [Point([float(i)], i) for i in range(4)]
    heap = []
    for p, d in zip(pts, [3.0, 0.5, 2.0, 1.0]):
        heapq.heappush(heap, PointDistance(p, d))
    popped = [heapq.heappop(heap).point.index for _ in range(4)]
    assert popped == [1, 3, 2, 0]


def test_points_from_array_assigns_row_indices():
    pts = points_from_array(np.array([[0.0, 1.0], [2.0, 3.0], [4.0, 5.0]]))
    assert [p.index for p in pts] == [0, 1, 2]
    np.testing.assert_array_equal(pts[2].coordinates, [4.0, 5.0])


def test_points_from_array_empty_input():
    assert points_from_array([]) == []
    assert points_from_array(np.empty((0, 2))) == []


def test_points_from_array_rejects_flat_input():
    with pytest.raises(DimensionMismatchError):
        points_from_array([1.0, 2.0, 3.0])


def test_points_from_array_rejects_zero_width_rows():
    with pytest.raises(DimensionMismatchError):
        points_from_array(np.empty((3, 0)))
