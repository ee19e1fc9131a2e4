"""
Clock Display Manager

Runs the per-frame render loop for the lunar calendar clock and pushes
frames to the available outputs.
"""
import asyncio
import io
import logging
import time
from typing import Optional

from PIL import Image

from config import CLOCK_FPS
from lunar_calendar.config import CalendarStyle
from lunar_calendar.renderer import LunarCalendarRenderer
from managers.framebuffer_manager import FramebufferManager


def encode_png(frame: Image.Image) -> bytes:
    buffer = io.BytesIO()
    # compress_level=1 trades size for speed on every request
    frame.save(buffer, format='PNG', compress_level=1)
    return buffer.getvalue()


class ClockDisplayManager:
    """Drives LunarCalendarRenderer at a fixed cadence"""

    def __init__(self, renderer: LunarCalendarRenderer,
                 framebuffer_manager: Optional[FramebufferManager] = None,
                 fps: float = CLOCK_FPS):
        self.renderer = renderer
        self.framebuffer = framebuffer_manager
        self.fps = fps

        # Current state
        self.is_running = False
        self.latest_frame: Optional[Image.Image] = None
        self.frames_rendered = 0
        self.measured_fps = 0.0
        self._task: Optional[asyncio.Task] = None
        # Held around every render so the loop and on-demand requests never overlap
        self._render_lock = asyncio.Lock()

    async def start(self) -> bool:
        """Start the render loop (no-op if already running)"""
        if self.is_running:
            return True

        logging.info(f"Starting lunar calendar clock at {self.fps:.0f} fps")
        self.is_running = True
        self._task = asyncio.create_task(self._run_loop())
        return True

    async def stop(self) -> bool:
        """Stop the render loop (no-op if not running)"""
        if not self.is_running:
            return True

        self.is_running = False
        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None

        logging.info("Lunar calendar clock stopped")
        return True

    def render_once(self) -> Image.Image:
        """Render a single frame and push it to the outputs"""
        frame = self.renderer.render_frame()
        self.latest_frame = frame
        self.frames_rendered += 1

        if self.framebuffer and self.framebuffer.is_available:
            self.framebuffer.display_frame(frame)

        return frame

    async def _render_in_executor(self) -> Image.Image:
        """Render one frame on the default thread pool, off the event loop"""
        loop = asyncio.get_event_loop()
        async with self._render_lock:
            return await loop.run_in_executor(None, self.render_once)

    async def _run_loop(self) -> None:
        """Background task rendering one frame per tick"""
        interval = 1.0 / self.fps
        window_start = time.monotonic()
        window_frames = 0

        while self.is_running:
            started = time.monotonic()
            try:
                await self._render_in_executor()
            except asyncio.CancelledError:
                raise
            except Exception as e:
                logging.error(f"Failed to render clock frame: {e}")

            window_frames += 1
            now = time.monotonic()
            if now - window_start >= 1.0:
                self.measured_fps = window_frames / (now - window_start)
                window_start = now
                window_frames = 0

            await asyncio.sleep(max(0.0, interval - (now - started)))

    async def get_frame_png(self) -> bytes:
        """Latest frame as PNG, rendering one if the loop has not produced any"""
        frame = self.latest_frame
        if frame is None:
            frame = await self._render_in_executor()

        loop = asyncio.get_event_loop()
        return await loop.run_in_executor(None, encode_png, frame)

    async def set_style(self, style: CalendarStyle) -> None:
        """Swap the renderer style between frames"""
        async with self._render_lock:
            self.renderer.set_style(style)
        logging.info("Calendar style updated")

    def get_status(self) -> dict:
        """Get current status information"""
        status = self.renderer.get_status()
        status.update({
            "is_running": self.is_running,
            "target_fps": self.fps,
            "measured_fps": round(self.measured_fps, 1),
            "frames_rendered": self.frames_rendered,
            "framebuffer": bool(self.framebuffer and self.framebuffer.is_available),
        })
        return status
