from __future__ import annotations
import logging
import math
import random
from enum import Enum
from typing import Callable, List, Optional, Tuple

from .animator import RenderState, TourAnimator
from .config import GraphConfig
from .distances import compute_distance_matrix
from .greedy import GreedyTourBuilder, InvalidTourInput, TourResult
from .points import PointSet

logger = logging.getLogger(__name__)

class ActivationOutcome(Enum):
    STARTED = "started"
    IGNORED = "ignored"   # replay running, or click missed every node
    INVALID = "invalid"   # no graph yet, or id out of range

class TourSession:
    """Owns the current graph and replay; the host only sees callbacks.

    ``draw(points, matrix, path=None, edge=None, cumulative_cost=None)`` is
    called once after every generate and once per replay tick.
    """
    def __init__(self, cfg: Optional[GraphConfig] = None,
                 draw: Optional[Callable[..., None]] = None,
                 on_weight_changed: Optional[Callable[[Optional[float]], None]] = None,
                 on_animating_changed: Optional[Callable[[bool], None]] = None,
                 rng: Optional[random.Random] = None):
        self.cfg = cfg or GraphConfig()
        self.rng = rng or random.Random(self.cfg.seed)
        self.draw = draw
        self.on_weight_changed = on_weight_changed
        self.on_animating_changed = on_animating_changed

        self.points: Optional[PointSet] = None
        self.matrix: List[List[float]] = []
        self.result: Optional[TourResult] = None
        self.animator = TourAnimator(self.cfg.tick_interval_ms,
                                     on_render=self._render,
                                     on_complete=self._complete,
                                     on_animating_changed=self._animating_changed)

    @property
    def animating(self) -> bool:
        return self.animator.running

    def _weight_changed(self, weight: Optional[float]):
        if self.on_weight_changed is not None:
            self.on_weight_changed(weight)

    def _animating_changed(self, value: bool):
        if self.on_animating_changed is not None:
            self.on_animating_changed(value)

    def _render(self, rs: RenderState):
        if self.draw is not None:
            self.draw(self.points, self.matrix, path=rs.path, edge=rs.edge,
                      cumulative_cost=rs.cumulative_cost)

    def _complete(self, total: float):
        self._weight_changed(total)

    def on_generate_requested(self) -> Tuple[PointSet, List[List[float]]]:
        if self.animator.running:
            self.animator.cancel()   # emits animating=False
        else:
            self._animating_changed(False)
        self._weight_changed(None)
        self.result = None

        cfg = self.cfg
        self.points = PointSet.random_planar(cfg, rng=self.rng)
        self.matrix = compute_distance_matrix(self.points, cfg.scale_factor, cfg.distance_cap)
        logger.info("Generated %d nodes (intended %d)", len(self.points), self.points.intended)
        if self.draw is not None:
            self.draw(self.points, self.matrix)
        return self.points, self.matrix

    def on_point_activated(self, point_id: int) -> ActivationOutcome:
        if self.animating:
            return ActivationOutcome.IGNORED
        if self.points is None:
            logger.warning("Point %s activated before any graph was generated", point_id)
            return ActivationOutcome.INVALID
        try:
            result = GreedyTourBuilder(self.matrix).build(point_id)
        except InvalidTourInput as e:
            logger.warning("Rejected tour start: %s", e)
            return ActivationOutcome.INVALID
        self.result = result
        self.animator.start(result.steps)
        return ActivationOutcome.STARTED

    def point_at(self, x: float, y: float) -> Optional[int]:
        if self.points is None:
            return None
        for p in self.points:
            if math.hypot(x - p.x, y - p.y) <= self.cfg.node_radius:
                return p.id
        return None

    def on_canvas_clicked(self, x: float, y: float) -> ActivationOutcome:
        if self.animating:
            return ActivationOutcome.IGNORED
        pid = self.point_at(x, y)
        if pid is None:
            return ActivationOutcome.IGNORED
        return self.on_point_activated(pid)

    def tick(self) -> Optional[RenderState]:
        return self.animator.tick()
