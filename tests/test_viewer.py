from types import SimpleNamespace

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from nntour.config import GraphConfig
from nntour.viewer import TourViewer


def test_click_draws_first_step_immediately():
    viewer = TourViewer(GraphConfig(seed=21))
    session = viewer.session
    p = session.points[0]
    viewer._on_click(SimpleNamespace(inaxes=viewer.ax, xdata=p.x, ydata=p.y))
    if len(session.points) > 1:
        assert viewer.animating
        assert session.animator.index == 1
    plt.close(viewer.fig)


def test_click_outside_axes_is_ignored():
    viewer = TourViewer(GraphConfig(seed=21))
    viewer._on_click(SimpleNamespace(inaxes=None, xdata=None, ydata=None))
    assert not viewer.animating
    assert viewer.session.animator.index == 0
    plt.close(viewer.fig)