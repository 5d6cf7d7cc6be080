import random

from nntour.config import GraphConfig
from nntour.session import ActivationOutcome, TourSession


def _session(seed=123):
    events = []
    draws = []

    def draw(points, matrix, **kw):
        draws.append(kw)

    s = TourSession(GraphConfig(seed=seed), draw=draw,
                    on_weight_changed=lambda w: events.append(("weight", w)),
                    on_animating_changed=lambda a: events.append(("animating", a)))
    return s, events, draws


def test_generate_resets_and_draws():
    s, events, draws = _session()
    points, matrix = s.on_generate_requested()
    assert len(matrix) == len(points) >= 1
    assert events == [("animating", False), ("weight", None)]
    assert draws == [{}]


def test_activation_runs_to_completion():
    s, events, draws = _session()
    points, _ = s.on_generate_requested()
    events.clear()
    draws.clear()
    assert s.on_point_activated(0) is ActivationOutcome.STARTED
    assert s.animating
    assert events == [("animating", True)]

    while s.animating:
        s.tick()
    n = len(points)
    assert len(draws) == (n if n > 1 else 0)
    assert events[-2:] == [("weight", s.result.total_cost), ("animating", False)]
    if n > 1:
        assert draws[-1]["cumulative_cost"] == s.result.total_cost


def test_activation_ignored_while_running():
    s, events, _ = _session()
    s.on_generate_requested()
    s.on_point_activated(0)
    assert s.on_point_activated(0) is ActivationOutcome.IGNORED
    assert s.on_canvas_clicked(s.points[0].x, s.points[0].y) is ActivationOutcome.IGNORED


def test_invalid_activation():
    s, _, _ = _session()
    assert s.on_point_activated(0) is ActivationOutcome.INVALID
    s.on_generate_requested()
    assert s.on_point_activated(len(s.points)) is ActivationOutcome.INVALID
    assert not s.animating


def test_generate_while_running_cancels_replay():
    s, events, draws = _session(seed=4)
    s.on_generate_requested()
    s.on_point_activated(0)
    s.tick()
    events.clear()
    draws.clear()
    s.on_generate_requested()
    assert events == [("animating", False), ("weight", None)]
    assert s.result is None
    assert draws == [{}]
    assert s.tick() is None
    assert len(draws) == 1


def test_click_hit_testing():
    s, _, _ = _session()
    s.on_generate_requested()
    p = s.points[0]
    assert s.point_at(p.x + 3, p.y - 3) == 0
    assert s.point_at(-500, -500) is None
    assert s.on_canvas_clicked(-500, -500) is ActivationOutcome.IGNORED
    assert s.on_canvas_clicked(p.x, p.y) is ActivationOutcome.STARTED


def test_seeded_sessions_generate_same_graph():
    a = TourSession(GraphConfig(), rng=random.Random(8))
    b = TourSession(GraphConfig(), rng=random.Random(8))
    assert a.on_generate_requested()[1] == b.on_generate_requested()[1]


def test_non_integer_point_id_is_invalid():
    s, events, _ = _session(seed=1)
    s.on_generate_requested()
    events.clear()
    assert s.on_point_activated(1.0) is ActivationOutcome.INVALID
    assert s.on_point_activated(0.5) is ActivationOutcome.INVALID
    assert not s.animating
    assert events == []
