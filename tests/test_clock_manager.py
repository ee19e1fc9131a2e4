"""Render loop scheduling and frame encoding."""

from __future__ import annotations

import asyncio
import threading

from lunar_calendar.config import CalendarStyle
from lunar_calendar.renderer import LunarCalendarRenderer
from managers.clock_manager import ClockDisplayManager


def test_render_loop_draws_frames_off_the_event_loop_thread() -> None:
    manager = ClockDisplayManager(LunarCalendarRenderer(), fps=30)
    render_threads = []
    render_once = manager.render_once

    def tracking_render():
        render_threads.append(threading.get_ident())
        return render_once()

    manager.render_once = tracking_render

    async def run() -> int:
        await manager.start()
        await asyncio.sleep(0.3)
        await manager.stop()
        return threading.get_ident()

    loop_thread = asyncio.run(run())

    assert render_threads
    assert loop_thread not in render_threads
    assert manager.is_running is False
    assert manager.latest_frame is not None


def test_loop_stays_responsive_while_rendering() -> None:
    """Short sleeps on the loop keep their timing while frames render."""
    manager = ClockDisplayManager(LunarCalendarRenderer(), fps=60)

    async def run() -> float:
        loop = asyncio.get_running_loop()
        await manager.start()
        worst = 0.0
        for _ in range(10):
            started = loop.time()
            await asyncio.sleep(0.01)
            worst = max(worst, loop.time() - started)
        await manager.stop()
        return worst

    worst = asyncio.run(run())
    assert worst < 0.2


def test_frame_png_renders_once_when_idle() -> None:
    manager = ClockDisplayManager(LunarCalendarRenderer(), fps=5)

    async def run() -> bytes:
        first = await manager.get_frame_png()
        second = await manager.get_frame_png()
        assert first == second
        return first

    png = asyncio.run(run())
    assert png.startswith(b"\x89PNG")
    assert manager.frames_rendered == 1


def test_set_style_reaches_renderer() -> None:
    manager = ClockDisplayManager(LunarCalendarRenderer(), fps=5)

    asyncio.run(manager.set_style(CalendarStyle(flip_duration=8)))

    assert manager.renderer.style.flip_duration == 8
    assert manager.renderer.transitions.flip_duration == 8
