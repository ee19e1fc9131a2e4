"""
Lunar Calendar Clock
Animated page-flip calendar clock with zodiac hours and spiral snake decorations
"""

from .clock import TimeSnapshot, sample_time, hour_symbol
from .transition import TransitionController, TransitionState
from .config import CalendarStyle, load_style
from .renderer import LunarCalendarRenderer, PageLayer

__all__ = [
    'TimeSnapshot',
    'sample_time',
    'hour_symbol',
    'TransitionController',
    'TransitionState',
    'CalendarStyle',
    'load_style',
    'LunarCalendarRenderer',
    'PageLayer',
]
