"""Step-by-step replay of a tour trace.

The animator is a small state machine advanced by an external scheduler: each
call to :meth:`TourAnimator.tick` renders exactly one step, so a GUI timer, a
blocking loop (:func:`drive`) or a test can pace it.
"""
from __future__ import annotations
import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple

from .greedy import TourStep

logger = logging.getLogger(__name__)

class AnimatorState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"
    CANCELED = "canceled"

@dataclass(frozen=True)
class RenderState:
    step_index: int
    total_steps: int
    path: Tuple[int, ...]
    edge: Tuple[int, int]
    cumulative_cost: float

def cumulative_cost(steps: Sequence[TourStep], k: int) -> float:
    """Sum of ``cost_added`` over ``steps[0..k]``, recomputed from the trace."""
    total = 0.0
    for step in steps[:k + 1]:
        total += step.cost_added
    return total

def render_state(steps: Sequence[TourStep], k: int) -> RenderState:
    step = steps[k]
    path = step.path_so_far
    if not path or path[-1] != step.from_city:
        path = path + (step.from_city,)
    return RenderState(step_index=k, total_steps=len(steps), path=path,
                       edge=(step.from_city, step.to_city),
                       cumulative_cost=cumulative_cost(steps, k))

class TourAnimator:
    def __init__(self, tick_interval_ms: int = 1000,
                 on_render: Optional[Callable[[RenderState], None]] = None,
                 on_complete: Optional[Callable[[float], None]] = None,
                 on_animating_changed: Optional[Callable[[bool], None]] = None):
        self.tick_interval_ms = tick_interval_ms
        self.on_render = on_render
        self.on_complete = on_complete
        self.on_animating_changed = on_animating_changed
        self.state = AnimatorState.IDLE
        self.steps: List[TourStep] = []
        self.index = 0

    @property
    def running(self) -> bool:
        return self.state is AnimatorState.RUNNING

    def _set_animating(self, value: bool):
        if self.on_animating_changed is not None:
            self.on_animating_changed(value)

    def start(self, steps: Sequence[TourStep]):
        if self.running:
            self.cancel()
        self.steps = list(steps)
        self.index = 0
        self.state = AnimatorState.RUNNING
        self._set_animating(True)

    def cancel(self):
        if not self.running:
            return
        self.state = AnimatorState.CANCELED
        logger.debug("Replay canceled at step %d/%d", self.index, len(self.steps))
        self._set_animating(False)

    def tick(self) -> Optional[RenderState]:
        if not self.running:
            return None
        if self.index < len(self.steps):
            rs = render_state(self.steps, self.index)
            logger.debug("Tick %d/%d edge %s cost so far %.2f",
                         rs.step_index + 1, rs.total_steps, rs.edge, rs.cumulative_cost)
            self.index += 1
            if self.on_render is not None:
                self.on_render(rs)
            return rs

        total = sum(s.cost_added for s in self.steps)
        self.state = AnimatorState.COMPLETED
        logger.info("Replay complete: %d steps, total cost %.2f", len(self.steps), total)
        if self.on_complete is not None:
            self.on_complete(total)
        self._set_animating(False)
        return None

def drive(animator: TourAnimator, sleep: Callable[[float], None] = time.sleep) -> AnimatorState:
    """Block until the replay leaves RUNNING, sleeping one interval between ticks."""
    while animator.running:
        animator.tick()
        if animator.running:
            sleep(animator.tick_interval_ms / 1000.0)
    return animator.state
