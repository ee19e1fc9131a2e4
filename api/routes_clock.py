"""
Clock Routes

Handles the lunar calendar clock render loop, frame preview and style.
"""
import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from lunar_calendar.config import CalendarStyle
from models.request_models import ClockStatusResponse, ClockStyleRequest
from utils.route_helpers import build_style, clock_operation

if TYPE_CHECKING:
    from managers.clock_manager import ClockDisplayManager


def setup_clock_routes(clock_manager: 'ClockDisplayManager') -> APIRouter:
    """
    Setup clock routes with dependency injection

    Args:
        clock_manager: ClockDisplayManager driving the render loop

    Returns:
        Configured APIRouter
    """
    router = APIRouter()

    @router.get("/clock/status", response_model=ClockStatusResponse)
    async def get_clock_status():
        """Get render loop, transition and last snapshot status"""
        return clock_manager.get_status()

    @router.get("/clock/frame.png")
    async def get_clock_frame():
        """Get the most recent frame as PNG"""
        try:
            return Response(content=await clock_manager.get_frame_png(), media_type="image/png")
        except Exception as e:
            logging.error(f"Failed to encode clock frame: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    @router.post("/clock/start")
    async def start_clock():
        """Start the render loop"""
        return await clock_operation(clock_manager.start(), "start", clock_manager)

    @router.post("/clock/stop")
    async def stop_clock():
        """Stop the render loop"""
        return await clock_operation(clock_manager.stop(), "stop", clock_manager)

    @router.post("/clock/style")
    async def set_clock_style(request: ClockStyleRequest):
        """Replace the calendar style"""
        base = CalendarStyle() if request.reset else clock_manager.renderer.style
        style = build_style(base, request.style)
        await clock_manager.set_style(style)
        return {"status": "success", "style": style.to_dict()}

    return router
