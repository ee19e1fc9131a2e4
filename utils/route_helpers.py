"""
Shared route helper utilities.

Standard error handling for clock manager operations and style requests.
"""
import logging
from typing import TYPE_CHECKING, Any, Coroutine, Dict

from fastapi import HTTPException

from lunar_calendar.config import CalendarStyle

if TYPE_CHECKING:
    from managers.clock_manager import ClockDisplayManager


async def clock_operation(coro: Coroutine, action: str, clock_manager: 'ClockDisplayManager') -> dict:
    """
    Run a clock manager coroutine and build the standard response.

    Args:
        coro: Awaitable returning True on success
        action: Verb used in the response and in error messages ("start", "stop")
        clock_manager: Manager whose running state is reported

    Raises:
        HTTPException: 500 if the operation fails or raises
    """
    try:
        result = await coro
    except Exception as e:
        logging.error(f"Failed to {action} clock: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    if not result:
        raise HTTPException(status_code=500, detail=f"Failed to {action} clock")

    return {"status": "success", "action": action, "is_running": clock_manager.is_running}


def build_style(base: CalendarStyle, overrides: Dict[str, Any]) -> CalendarStyle:
    """
    Merge style overrides onto a base style.

    Raises:
        HTTPException: 400 if the merged style is invalid
    """
    data = base.to_dict()
    data.update(overrides)

    style = CalendarStyle.from_dict(data)
    issues = style.validate()
    if issues:
        raise HTTPException(status_code=400, detail="; ".join(issues))
    return style
