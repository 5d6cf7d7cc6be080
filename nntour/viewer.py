from __future__ import annotations
from typing import Optional

import matplotlib.pyplot as plt
from matplotlib.widgets import Button

from .config import GraphConfig
from .render import GraphRenderer
from .session import ActivationOutcome, TourSession

class TourViewer:
    """Interactive window: "Random" regenerates, clicking a node starts a tour."""
    def __init__(self, cfg: Optional[GraphConfig] = None):
        self.cfg = cfg or GraphConfig()
        self.fig = plt.figure(figsize=(self.cfg.width / 100, self.cfg.height / 100 + 0.8))
        self.ax = self.fig.add_axes([0.02, 0.02, 0.96, 0.84])
        btn_ax = self.fig.add_axes([0.44, 0.89, 0.12, 0.07])
        self.button = Button(btn_ax, "Random")
        self.renderer = GraphRenderer(self.ax, self.cfg)

        self.weight: Optional[float] = None
        self.animating = False
        self.session = TourSession(self.cfg, draw=self._draw,
                                   on_weight_changed=self._on_weight,
                                   on_animating_changed=self._on_animating)
        self.timer = self.fig.canvas.new_timer(interval=max(1, self.cfg.tick_interval_ms))
        self.timer.add_callback(self._on_timer)

        self.button.on_clicked(lambda event: self.session.on_generate_requested())
        self.fig.canvas.mpl_connect("button_press_event", self._on_click)
        self.session.on_generate_requested()

    def _draw(self, *args, **kwargs):
        self.renderer(*args, **kwargs)
        self._update_title()
        self.fig.canvas.draw_idle()

    def _update_title(self):
        if self.weight is None:
            self.fig.suptitle("Click a node to start the tour", y=0.99)
        else:
            self.fig.suptitle(f"Total Path Weight: {self.weight:.0f}", y=0.99)

    def _on_weight(self, weight):
        self.weight = weight
        self._update_title()
        self.fig.canvas.draw_idle()

    def _on_animating(self, value: bool):
        self.animating = value
        self.button.set_active(not value)
        if value:
            self.timer.start()
        else:
            self.timer.stop()

    def _on_timer(self):
        self.session.tick()

    def _on_click(self, event):
        if event.inaxes is not self.ax or event.xdata is None or self.animating:
            return
        if self.session.on_canvas_clicked(event.xdata, event.ydata) is ActivationOutcome.STARTED:
            # first step is drawn at once; the timer paces the rest
            self.session.tick()

    def show(self):
        plt.show()
