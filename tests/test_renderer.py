"""Frame orchestration: page planning across a minute change and full frame rendering."""

from __future__ import annotations

import pytest

from lunar_calendar.clock import TimeSnapshot
from lunar_calendar.config import CalendarStyle
from lunar_calendar.renderer import LunarCalendarRenderer, PageLayer


def _snapshot(minute: int, second: int = 0) -> TimeSnapshot:
    return TimeSnapshot(hour12=3, minute=minute, second=second, year=2024, month=5, weekday="Friday")


def test_first_frame_is_single_full_page() -> None:
    renderer = LunarCalendarRenderer()
    layers = renderer.plan_frame(_snapshot(6))

    assert layers == [PageLayer(minute=6, alpha=255.0, scale=1.0)]


def test_minute_change_flips_for_thirty_frames() -> None:
    """7 held for 40 frames after 6: frames 1..30 overlay two pages, 31+ show only 7."""
    renderer = LunarCalendarRenderer()
    renderer.plan_frame(_snapshot(6))

    plans = [renderer.plan_frame(_snapshot(7)) for _ in range(40)]

    for frame, layers in enumerate(plans[:30]):
        outgoing, incoming = layers
        progress = frame / 30
        assert outgoing.outgoing and outgoing.minute == 6
        assert incoming.minute == 7 and not incoming.outgoing
        assert outgoing.alpha == pytest.approx(255.0 * (1 - progress))
        assert incoming.alpha == pytest.approx(255.0 * progress)
        assert outgoing.scale == pytest.approx(1.0 - 0.1 * progress)
        assert incoming.scale == 1.0

    for layers in plans[30:]:
        assert layers == [PageLayer(minute=7, alpha=255.0, scale=1.0)]

    assert renderer.is_animating() is False


def test_flip_state_invariant_holds_every_frame() -> None:
    renderer = LunarCalendarRenderer()
    renderer.plan_frame(_snapshot(1))
    for _ in range(35):
        renderer.plan_frame(_snapshot(2))
        state = renderer.transitions.state
        if state.is_flipping:
            assert state.flip_frame < renderer.transitions.flip_duration


def test_angle_advances_each_frame() -> None:
    renderer = LunarCalendarRenderer(style=CalendarStyle(angle_step=0.01))
    for _ in range(5):
        renderer.plan_frame(_snapshot(0))

    assert renderer.angle == pytest.approx(0.05)
    assert renderer.frame_count == 5


def test_custom_flip_duration() -> None:
    renderer = LunarCalendarRenderer(style=CalendarStyle(flip_duration=4))
    renderer.plan_frame(_snapshot(0))

    counts = [len(renderer.plan_frame(_snapshot(1))) for _ in range(6)]
    assert counts == [2, 2, 2, 2, 1, 1]


def test_render_frame_produces_portrait_rgb_image() -> None:
    renderer = LunarCalendarRenderer()
    img = renderer.render_frame(_snapshot(42, second=17))

    assert img.size == (400, 600)
    assert img.mode == 'RGB'
    # Backdrop stays visible in the corner, paper covers the middle
    r, g, b = img.getpixel((2, 2))
    assert r > 150 and g < 40 and b < 40
    assert img.getpixel((200, 560)) != img.getpixel((2, 560))


def test_render_during_flip_differs_from_steady_state() -> None:
    steady = LunarCalendarRenderer()
    steady.render_frame(_snapshot(7))
    steady_img = steady.render_frame(_snapshot(7))

    flipping = LunarCalendarRenderer()
    flipping.render_frame(_snapshot(6))
    flip_img = flipping.render_frame(_snapshot(7))

    assert steady_img.tobytes() != flip_img.tobytes()


def test_backdrop_is_cached_until_cleared() -> None:
    renderer = LunarCalendarRenderer()
    renderer.render_frame(_snapshot(1))
    cached = renderer._backdrop_template

    renderer.render_frame(_snapshot(1))
    assert renderer._backdrop_template is cached

    renderer.set_style(CalendarStyle(backdrop_color=(0, 0, 180)))
    assert renderer._backdrop_template is None


def test_status_reports_transition_and_snapshot() -> None:
    renderer = LunarCalendarRenderer()
    renderer.plan_frame(_snapshot(10))
    renderer.plan_frame(_snapshot(11))

    status = renderer.get_status()
    assert status["frame_count"] == 2
    assert status["snapshot"]["minute"] == 11
    assert status["transition"]["is_flipping"] is True
    assert status["transition"]["outgoing_minute"] == 10
    assert status["transition"]["flip_frame"] == 1
