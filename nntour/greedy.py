from __future__ import annotations
import math
import numbers
from dataclasses import dataclass
from typing import List, Tuple

class InvalidTourInput(ValueError):
    """Raised when a tour cannot be built from the given matrix and start city."""

@dataclass(frozen=True)
class TourStep:
    from_city: int
    to_city: int
    path_so_far: Tuple[int, ...]   # ends with from_city
    cost_added: float

@dataclass(frozen=True)
class TourResult:
    total_cost: float
    final_path: Tuple[int, ...]
    steps: Tuple[TourStep, ...]
    start: int

class GreedyTourBuilder:
    """Nearest-neighbour tour construction with a recorded step trace."""
    def __init__(self, dist_matrix: List[List[float]]):
        self.D = dist_matrix
        self.n = len(dist_matrix)

    def _check(self, start: int):
        if self.n == 0:
            raise InvalidTourInput("Cannot build a tour over an empty point set.")
        if any(len(row) != self.n for row in self.D):
            raise InvalidTourInput("Distance matrix must be square.")
        if not isinstance(start, numbers.Integral) or isinstance(start, bool):
            raise InvalidTourInput(f"Start city must be an integer id, got {start!r}.")
        if not 0 <= start < self.n:
            raise InvalidTourInput(f"Start city {start} out of range 0..{self.n - 1}.")

    def _nearest_unvisited(self, current: int, visited: set) -> int:
        # ascending scan + strict '<': lowest index wins ties
        best, best_d = -1, math.inf
        for j in range(self.n):
            if j not in visited and self.D[current][j] < best_d:
                best, best_d = j, self.D[current][j]
        if best == -1:
            # every remaining edge is inf; still take the lowest unvisited index
            best = min(j for j in range(self.n) if j not in visited)
        return best

    def build(self, start: int) -> TourResult:
        self._check(start)
        start = int(start)
        if self.n == 1:
            return TourResult(total_cost=0.0, final_path=(start,), steps=(), start=start)

        visited = {start}
        path = [start]
        steps: List[TourStep] = []
        total = 0.0
        current = start
        while len(visited) < self.n:
            nxt = self._nearest_unvisited(current, visited)
            cost = self.D[current][nxt]
            steps.append(TourStep(current, nxt, tuple(path), cost))
            path.append(nxt)
            visited.add(nxt)
            total += cost
            current = nxt

        # close the tour
        cost = self.D[current][start]
        steps.append(TourStep(current, start, tuple(path), cost))
        path.append(start)
        total += cost
        return TourResult(total_cost=total, final_path=tuple(path), steps=tuple(steps),
                          start=start)

def build_tour(dist_matrix: List[List[float]], start: int) -> TourResult:
    return GreedyTourBuilder(dist_matrix).build(start)
