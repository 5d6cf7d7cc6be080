from __future__ import annotations
import logging
import math
import random
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from .config import GraphConfig

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class Point:
    id: int
    x: float
    y: float

@dataclass
class PointSet:
    points: List[Point] = field(default_factory=list)
    intended: int = 0   # size drawn before placement

    @staticmethod
    def random_planar(cfg: GraphConfig, rng: Optional[random.Random] = None) -> "PointSet":
        return sample_points(cfg.width, cfg.height, cfg.padding, cfg.min_separation,
                             cfg.max_attempts, n_range=cfg.node_range, rng=rng)

    @property
    def truncated(self) -> bool:
        return len(self.points) < self.intended

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __getitem__(self, i: int) -> Point:
        return self.points[i]

    def coords(self) -> List[Tuple[float, float]]:
        return [(p.x, p.y) for p in self.points]

    def distance(self, i: int, j: int) -> float:
        a, b = self.points[i], self.points[j]
        return math.hypot(a.x - b.x, a.y - b.y)

def _far_enough(x: float, y: float, accepted: List[Point], min_separation: float) -> bool:
    for p in accepted:
        if math.hypot(x - p.x, y - p.y) < min_separation:
            return False
    return True

def sample_points(width: float, height: float, padding: float, min_separation: float,
                  max_attempts_per_point: int, n_range: Tuple[int, int] = (3, 9),
                  rng: Optional[random.Random] = None) -> PointSet:
    """Place a random number of points at least ``min_separation`` apart.

    When a point cannot be placed within its attempt budget, placement stops and
    the smaller set is returned; callers can check ``PointSet.truncated``.
    """
    rng = rng or random.Random()
    lo, hi = n_range
    n = rng.randint(lo, hi)
    accepted: List[Point] = []
    for i in range(n):
        placed = None
        for _ in range(max_attempts_per_point):
            x = rng.uniform(padding, width - padding)
            y = rng.uniform(padding, height - padding)
            if _far_enough(x, y, accepted, min_separation):
                placed = Point(id=i, x=x, y=y)
                break
        if placed is None:
            logger.info("Could not place node %d after %d attempts. Stopping at %d nodes.",
                        i, max_attempts_per_point, i)
            break
        accepted.append(placed)
    return PointSet(points=accepted, intended=n)
