"""
API Request Models

Pydantic models for API request validation and status responses.
"""
from typing import Any, Dict, Optional
from pydantic import BaseModel, Field


class ClockStyleRequest(BaseModel):
    style: Dict[str, Any] = Field(default_factory=dict)  # CalendarStyle fields to override
    reset: bool = False  # True = start from the default style instead of the current one


class SnapshotModel(BaseModel):
    hour12: int
    minute: int
    second: int
    year: int
    month: int
    weekday: str


class TransitionModel(BaseModel):
    previous_minute: Optional[int] = None
    is_flipping: bool
    flip_frame: int
    outgoing_minute: Optional[int] = None


class ClockStatusResponse(BaseModel):
    is_running: bool
    target_fps: float
    measured_fps: float
    frames_rendered: int
    frame_count: int
    angle: float
    framebuffer: bool
    transition: TransitionModel
    snapshot: Optional[SnapshotModel] = None
