import math
import random

import pytest

from nntour.distances import compute_distance_matrix
from nntour.greedy import GreedyTourBuilder, InvalidTourInput, build_tour
from nntour.points import Point, PointSet, sample_points

INF = math.inf


def _square_matrix():
    pts = [Point(0, 0, 0), Point(1, 10, 0), Point(2, 10, 10), Point(3, 0, 10)]
    return compute_distance_matrix(PointSet(points=pts, intended=4), 1.0, 99)


def test_square_tour():
    res = build_tour(_square_matrix(), 0)
    assert res.final_path == (0, 1, 2, 3, 0)
    assert res.total_cost == pytest.approx(40.0)
    assert [(s.from_city, s.to_city) for s in res.steps] == [(0, 1), (1, 2), (2, 3), (3, 0)]
    assert res.steps[0].path_so_far == (0,)
    assert res.steps[-1].path_so_far == (0, 1, 2, 3)


def test_tour_shape_on_random_graphs():
    for seed in range(20):
        ps = sample_points(800, 600, 50, 38, 100, rng=random.Random(seed))
        D = compute_distance_matrix(ps, 0.2, 99)
        n = len(D)
        if n < 2:
            continue
        for start in range(n):
            res = build_tour(D, start)
            assert len(res.steps) == n
            assert len(res.final_path) == n + 1
            assert res.final_path[0] == res.final_path[-1] == start
            assert sorted(res.final_path[:-1]) == list(range(n))
            assert res.total_cost == sum(s.cost_added for s in res.steps)
            for s in res.steps:
                assert s.path_so_far[-1] == s.from_city


def test_build_is_deterministic():
    ps = sample_points(800, 600, 50, 38, 100, rng=random.Random(5))
    D = compute_distance_matrix(ps, 0.2, 99)
    assert build_tour(D, 0) == build_tour(D, 0)


def test_tie_goes_to_lowest_index():
    D = [
        [INF, 5, 3, 3],
        [5, INF, 1, 1],
        [3, 1, INF, 2],
        [3, 1, 2, INF],
    ]
    res = build_tour(D, 0)
    assert res.steps[0].to_city == 2
    assert res.final_path == (0, 2, 1, 3, 0)


def test_single_city():
    res = build_tour([[INF]], 0)
    assert res.total_cost == 0
    assert res.final_path == (0,)
    assert res.steps == ()


@pytest.mark.parametrize("D,start", [
    ([], 0),
    ([[INF, 1], [1, INF]], 2),
    ([[INF, 1], [1, INF]], -1),
    ([[INF, 1], [1]], 0),
])
def test_invalid_input(D, start):
    with pytest.raises(InvalidTourInput):
        GreedyTourBuilder(D).build(start)


def test_invalid_input_is_value_error():
    assert issubclass(InvalidTourInput, ValueError)


@pytest.mark.parametrize("start", [0.5, 1.0, True, "0", None])
def test_non_integer_start_rejected(start):
    with pytest.raises(InvalidTourInput):
        build_tour([[INF, 1], [1, INF]], start)


def test_result_is_read_only():
    res = build_tour(_square_matrix(), 0)
    with pytest.raises(AttributeError):
        res.total_cost = 0
    assert isinstance(res.final_path, tuple)
    assert isinstance(res.steps, tuple)
