from __future__ import annotations
import math
from typing import List, Sequence

from .points import PointSet

def compute_distance_matrix(point_set: PointSet, scale_factor: float = 0.2,
                            cap: float = 99.0) -> List[List[float]]:
    n = len(point_set)
    D = [[math.inf]*n for _ in range(n)]
    for i in range(n):
        for j in range(i+1, n):
            d = min(point_set.distance(i, j) * scale_factor, cap)
            D[i][j] = D[j][i] = d
    return D

def path_cost(D: List[List[float]], path: Sequence[int]) -> float:
    cost = 0.0
    for a, b in zip(path, path[1:]):
        cost += D[a][b]
    return cost

def edge_label(weight: float) -> str:
    # half-up, not Python's banker's rounding
    return str(int(math.floor(weight + 0.5)))
