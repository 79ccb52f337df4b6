import random

import pytest

from folio.animation.hover_reveal import HoverRevealAnimator
from folio.components.hover_reveal_state import AnimationState
from folio.constants import HOVER_REVEAL_DURATION_MS, WAVE_POINT_COUNT, WAVE_RATE_MAX, WAVE_RATE_MIN
from folio.rendering.card_surface import CardSurface
from folio.utils.frame_scheduler import FrameScheduler
from tests.helpers import FakeClock

FILL = (155, 246, 255)


class _RecordingSurface:
    """Logs canvas calls without painting anything."""

    def __init__(self, width, height):
        self.width = width
        self.height = height
        self.calls = []

    def __getattr__(self, name):
        def _record(*args):
            self.calls.append((name, args))
        return _record


def _make(width=200, height=100, seed=3, surface=None):
    clock = FakeClock()
    scheduler = FrameScheduler(clock=clock)
    surface = surface or CardSurface(width, height)
    animator = HoverRevealAnimator(surface, scheduler, FILL, rng=random.Random(seed))
    return animator, scheduler, clock, surface


def _frame_at(scheduler, clock, ms):
    clock.set_ms(ms)
    return scheduler.run_frame()


@pytest.mark.parametrize("width", [1, 37.5, 200, 1234])
def test_first_and_last_points_pin_to_edges(width):
    animator, scheduler, clock, _ = _make(width=width)
    for _ in range(3):
        animator.on_pointer_enter()
        _frame_at(scheduler, clock, clock.value * 1000 + 50)
        animator.on_pointer_leave()
        assert animator.points[0].x == 0
        assert animator.points[-1].x == width
    assert len(animator.points) == WAVE_POINT_COUNT


def test_point_positions_are_evenly_spaced():
    animator, *_ = _make(width=220)
    xs = [p.x for p in animator.points]
    assert xs[1] == pytest.approx(20.0)
    assert xs[5] == pytest.approx(100.0)


def test_enter_draws_fresh_rates_in_range():
    animator, scheduler, clock, _ = _make()
    animator.on_pointer_enter()
    first = [p.vertical_rate for p in animator.points]
    assert all(WAVE_RATE_MIN <= r <= WAVE_RATE_MAX for r in first)
    assert len(set(first)) > 1
    animator.on_pointer_leave()
    animator.on_pointer_enter()
    second = [p.vertical_rate for p in animator.points]
    assert second != first


def test_progress_is_monotonic_and_bounded():
    animator, scheduler, clock, _ = _make()
    animator.on_pointer_enter()
    _frame_at(scheduler, clock, 1000)
    previous = -1.0
    for ms in range(900, 1500, 7):
        progress = animator.progress_at(ms)
        assert 0.0 <= progress <= 1.0
        assert progress >= previous
        previous = progress
    assert animator.progress_at(1000 + HOVER_REVEAL_DURATION_MS) == 1.0


def test_midway_heights_follow_rates():
    animator, scheduler, clock, _ = _make(width=200, height=100)
    animator.on_pointer_enter()
    _frame_at(scheduler, clock, 0)
    _frame_at(scheduler, clock, 150)
    assert animator.state.progress == pytest.approx(0.5)
    for point in animator.points:
        expected = max(0.0, 100 - 100 * 0.5 * point.vertical_rate)
        assert point.current_y == pytest.approx(expected)


def test_heights_clamp_at_top_edge():
    animator, scheduler, clock, _ = _make(width=200, height=100)
    animator.on_pointer_enter()
    for point in animator.points:
        point.vertical_rate = 1.2
    _frame_at(scheduler, clock, 0)
    _frame_at(scheduler, clock, 290)
    assert all(point.current_y == 0.0 for point in animator.points)
    assert animator.state.state == AnimationState.RUNNING


def test_frame_draws_curve_through_every_point():
    surface = _RecordingSurface(200, 100)
    animator, scheduler, clock, _ = _make(surface=surface)
    animator.on_pointer_enter()
    _frame_at(scheduler, clock, 0)
    surface.calls.clear()
    _frame_at(scheduler, clock, 100)
    names = [name for name, _ in surface.calls]
    assert names[0] == "clear_rect"
    assert names.count("quadratic_curve_to") == WAVE_POINT_COUNT - 1
    assert names[-2:] == ["close_path", "fill"]
    curves = [args for name, args in surface.calls if name == "quadratic_curve_to"]
    p0, p1 = animator.points[0], animator.points[1]
    assert curves[0] == (p0.x, p0.current_y, (p0.x + p1.x) / 2, (p0.current_y + p1.current_y) / 2)
    assert ("set_fill_color", (FILL,)) in surface.calls


def test_completion_paints_solid_and_stops():
    animator, scheduler, clock, surface = _make()
    animator.on_pointer_enter()
    for ms in range(0, 336, 16):
        _frame_at(scheduler, clock, ms)
    assert animator.state.state == AnimationState.COMPLETING
    assert scheduler.pending == 0
    last = surface.shapes[-1]
    assert last.color == FILL
    assert last.points == ((0, 0), (200, 0), (200, 100), (0, 100))


def test_completion_fills_even_with_flat_points():
    surface = _RecordingSurface(50, 40)
    animator, scheduler, clock, _ = _make(surface=surface)
    animator.on_pointer_enter()
    for point in animator.points:
        point.vertical_rate = 0.8
    _frame_at(scheduler, clock, 0)
    _frame_at(scheduler, clock, 400)
    assert surface.calls[-1] == ("fill_rect", (0, 0, 50.0, 40.0))


def test_reenter_while_running_is_noop():
    animator, scheduler, clock, _ = _make()
    animator.on_pointer_enter()
    _frame_at(scheduler, clock, 10)
    rates = [p.vertical_rate for p in animator.points]
    start = animator.state.start_time
    handle = animator.state.frame_handle
    animator.on_pointer_enter()
    assert animator.state.start_time == start == 10
    assert [p.vertical_rate for p in animator.points] == rates
    assert animator.state.frame_handle == handle
    assert scheduler.pending == 1


def test_double_enter_before_first_frame_schedules_once():
    animator, scheduler, clock, _ = _make()
    animator.on_pointer_enter()
    animator.on_pointer_enter()
    assert scheduler.pending == 1


def test_leave_mid_animation_clears_and_cancels():
    animator, scheduler, clock, surface = _make()
    animator.on_pointer_enter()
    _frame_at(scheduler, clock, 0)
    _frame_at(scheduler, clock, 100)
    assert not surface.is_empty
    animator.on_pointer_leave()
    assert surface.is_empty
    assert animator.state.state == AnimationState.IDLE
    assert scheduler.pending == 0
    assert _frame_at(scheduler, clock, 116) == 0
    assert surface.is_empty


def test_stale_frame_after_leave_does_nothing():
    animator, scheduler, clock, surface = _make()
    animator.on_pointer_enter()
    _frame_at(scheduler, clock, 0)
    animator.on_pointer_leave()
    animator.on_frame(50.0)
    assert surface.is_empty
    assert scheduler.pending == 0


def test_leave_when_idle_is_safe():
    animator, scheduler, clock, surface = _make()
    animator.on_pointer_leave()
    animator.on_pointer_leave()
    assert surface.is_empty
    assert animator.state.state == AnimationState.IDLE


def test_leave_after_completion_clears_fill():
    animator, scheduler, clock, surface = _make()
    animator.on_pointer_enter()
    _frame_at(scheduler, clock, 0)
    _frame_at(scheduler, clock, 300)
    assert animator.state.state == AnimationState.COMPLETING
    animator.on_pointer_leave()
    assert surface.is_empty


def test_rapid_enter_leave_enter_keeps_single_loop():
    animator, scheduler, clock, _ = _make()
    for _ in range(5):
        animator.on_pointer_enter()
        animator.on_pointer_leave()
    animator.on_pointer_enter()
    assert scheduler.pending == 1
    _frame_at(scheduler, clock, 0)
    assert scheduler.pending == 1


def test_enter_after_completion_restarts():
    animator, scheduler, clock, surface = _make()
    animator.on_pointer_enter()
    _frame_at(scheduler, clock, 0)
    _frame_at(scheduler, clock, 300)
    rates = [p.vertical_rate for p in animator.points]
    animator.on_pointer_enter()
    assert animator.state.state == AnimationState.RUNNING
    assert animator.state.start_time is None
    assert [p.vertical_rate for p in animator.points] != rates
    _frame_at(scheduler, clock, 1000)
    assert animator.state.start_time == 1000


def test_zero_area_surface_runs_without_output():
    animator, scheduler, clock, surface = _make(width=0, height=0)
    animator.on_pointer_enter()
    _frame_at(scheduler, clock, 0)
    _frame_at(scheduler, clock, 300)
    assert animator.state.state == AnimationState.COMPLETING
    assert surface.is_empty


def test_resize_recomputes_point_positions():
    animator, scheduler, clock, surface = _make(width=200, height=100)
    animator.resize(330, 50)
    assert animator.points[0].x == 0
    assert animator.points[-1].x == 330
    assert animator.points[1].x == pytest.approx(30.0)
    assert surface.height == 50


def test_resize_keeps_running_fill_on_its_clock():
    animator, scheduler, clock, surface = _make(width=200, height=100)
    animator.on_pointer_enter()
    _frame_at(scheduler, clock, 1000)
    _frame_at(scheduler, clock, 1100)
    animator.resize(300, 80)
    assert animator.is_running
    assert surface.is_empty
    assert scheduler.pending == 1
    _frame_at(scheduler, clock, 1150)
    assert animator.state.progress == pytest.approx(0.5)
    assert not surface.is_empty
    _frame_at(scheduler, clock, 1300)
    assert animator.state.state == AnimationState.COMPLETING


def test_resize_repaints_completed_fill_at_new_size():
    animator, scheduler, clock, surface = _make(width=200, height=100)
    animator.on_pointer_enter()
    _frame_at(scheduler, clock, 1000)
    _frame_at(scheduler, clock, 1300)
    assert animator.state.state == AnimationState.COMPLETING
    animator.resize(320, 60)
    assert animator.state.state == AnimationState.COMPLETING
    assert len(surface.shapes) == 1
    solid = surface.shapes[0]
    assert solid.color == FILL
    assert solid.points == ((0, 0), (320.0, 0), (320.0, 60.0), (0, 60.0))
