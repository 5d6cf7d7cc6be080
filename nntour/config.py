from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

@dataclass
class GraphConfig:
    width: float = 800.0             # canvas width (px)
    height: float = 600.0            # canvas height (px)
    padding: float = 50.0            # keep nodes this far from the border
    min_nodes: int = 3
    max_nodes: int = 9
    min_separation: float = 38.0     # ~1 cm on screen
    max_attempts: int = 100          # placement draws per node
    scale_factor: float = 0.2        # keeps edge weights below 100
    distance_cap: float = 99.0
    tick_interval_ms: int = 1000
    node_radius: float = 10.0        # also the click hit radius
    seed: Optional[int] = None

    def __post_init__(self):
        if self.min_nodes < 1 or self.max_nodes < self.min_nodes:
            raise ValueError("node range must satisfy 1 <= min_nodes <= max_nodes.")
        if self.padding < 0 or 2 * self.padding > min(self.width, self.height):
            raise ValueError("padding must leave a non-empty drawing area.")
        if self.min_separation < 0:
            raise ValueError("min_separation must be >= 0.")
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be >= 1.")
        if self.scale_factor <= 0 or self.distance_cap < 0:
            raise ValueError("scale_factor must be > 0 and distance_cap >= 0.")
        if self.tick_interval_ms < 0:
            raise ValueError("tick_interval_ms must be >= 0.")

    @property
    def node_range(self) -> Tuple[int, int]:
        return self.min_nodes, self.max_nodes
