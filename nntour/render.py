from __future__ import annotations
from typing import List, Optional, Sequence, Tuple

import numpy as np
import matplotlib.pyplot as plt

from .config import GraphConfig
from .distances import edge_label
from .points import PointSet

NODE_COLOR = "#3b82f6"
PATH_COLOR = "#10b981"
EDGE_COLOR = "#ef4444"
NEXT_COLOR = "#f97316"

class GraphRenderer:
    """Draws the graph, and optionally a replay step, onto a matplotlib Axes."""
    def __init__(self, ax, cfg: Optional[GraphConfig] = None):
        self.ax = ax
        self.cfg = cfg or GraphConfig()

    def _setup(self):
        ax, cfg = self.ax, self.cfg
        ax.clear()
        ax.set_xlim(0, cfg.width)
        ax.set_ylim(cfg.height, 0)   # canvas coordinates: y grows downwards
        ax.set_aspect("equal", adjustable="box")
        ax.set_xticks([])
        ax.set_yticks([])

    def _node(self, x, y, label, color, radius):
        self.ax.add_patch(plt.Circle((x, y), radius, color=color, zorder=3))
        self.ax.text(x, y, str(label), color="white", fontsize=7, fontweight="bold",
                     ha="center", va="center", zorder=4)

    def draw_graph(self, points: PointSet, matrix: List[List[float]]):
        self._setup()
        ax = self.ax
        n = len(points)
        for i in range(n):
            for j in range(i+1, n):
                a, b = points[i], points[j]
                ax.plot([a.x, b.x], [a.y, b.y], color=(0.59, 0.59, 0.59, 0.3), lw=1, zorder=1)
                ax.text((a.x + b.x) / 2, (a.y + b.y) / 2, edge_label(matrix[i][j]),
                        color=(0, 0, 0, 0.7), fontsize=7, zorder=2)
        for p in points:
            self._node(p.x, p.y, p.id, NODE_COLOR, self.cfg.node_radius)

    def __call__(self, points: PointSet, matrix: List[List[float]],
                 path: Optional[Sequence[int]] = None,
                 edge: Optional[Tuple[int, int]] = None,
                 cumulative_cost: Optional[float] = None):
        self.draw_graph(points, matrix)
        ax = self.ax
        if path:
            xs = [points[i].x for i in path]
            ys = [points[i].y for i in path]
            ax.plot(xs, ys, color=PATH_COLOR, lw=3, zorder=2)
        if edge is not None:
            a, b = points[edge[0]], points[edge[1]]
            ax.plot([a.x, b.x], [a.y, b.y], color=EDGE_COLOR, lw=4, zorder=2)
            r = self.cfg.node_radius * 1.2
            self._node(a.x, a.y, a.id, EDGE_COLOR, r)
            self._node(b.x, b.y, b.id, NEXT_COLOR, r)
        if cumulative_cost is not None:
            ax.text(10, 100, f"Total Cost So Far: {cumulative_cost:.2f}", fontsize=10,
                    ha="left", va="center", zorder=5)

def frame_rgb(fig) -> np.ndarray:
    fig.canvas.draw()
    return np.asarray(fig.canvas.buffer_rgba())[..., :3].copy()
