"""
Page flip transition for the lunar calendar clock
Detects minute changes and tracks the frame-counted flip between pages
"""

import logging
from dataclasses import dataclass
from typing import Optional

from config import FLIP_DURATION_FRAMES

FULL_ALPHA = 255.0
OUTGOING_MIN_SCALE = 0.9


@dataclass
class TransitionState:
    """Process-wide flip state, mutated only by TransitionController"""
    previous_minute: Optional[int] = None
    is_flipping: bool = False
    flip_frame: int = 0
    outgoing_minute: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "previous_minute": self.previous_minute,
            "is_flipping": self.is_flipping,
            "flip_frame": self.flip_frame,
            "outgoing_minute": self.outgoing_minute,
        }


class TransitionController:
    """Starts a flip whenever the sampled minute changes"""

    def __init__(self, flip_duration: int = FLIP_DURATION_FRAMES):
        self.flip_duration = flip_duration
        self.state = TransitionState()

    def update(self, current_minute: int) -> TransitionState:
        """Compare against the previous minute and start a flip on change.

        The very first sample only records the minute; there is no page to
        flip away from yet.
        """
        state = self.state
        if current_minute == state.previous_minute:
            return state

        if state.previous_minute is not None:
            state.outgoing_minute = state.previous_minute
            state.flip_frame = 0
            state.is_flipping = True
            logging.info(f"Minute changed to: {current_minute:02d}")

        state.previous_minute = current_minute
        return state

    def advance(self) -> bool:
        """Count one drawn flip frame. Returns True once the flip is complete."""
        state = self.state
        if not state.is_flipping:
            return True

        state.flip_frame += 1
        if state.flip_frame >= self.flip_duration:
            state.is_flipping = False
            return True

        return False

    @property
    def progress(self) -> float:
        """Flip progress (0.0 to 1.0), 1.0 if no flip is running"""
        if not self.state.is_flipping:
            return 1.0
        return min(max(self.state.flip_frame / self.flip_duration, 0.0), 1.0)


def page_alpha(progress: float, outgoing: bool) -> float:
    """Opacity of a page at the given flip progress; the two pages always sum to 255"""
    if outgoing:
        return FULL_ALPHA * (1.0 - progress)
    return FULL_ALPHA * progress


def page_scale(progress: float, outgoing: bool) -> float:
    """Outgoing page shrinks from 1.0 to 0.9, incoming page keeps full size"""
    if outgoing:
        return 1.0 - (1.0 - OUTGOING_MIN_SCALE) * progress
    return 1.0
