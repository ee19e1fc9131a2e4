"""
Calendar Style Configuration

Centralized palette, font and animation settings for the calendar page.
Styles can be overridden from a YAML file or from an API request.
"""

import logging
import os
from dataclasses import dataclass, fields
from typing import Tuple

import yaml

import config as app_config

Color = Tuple[int, int, int]


@dataclass
class CalendarStyle:
    """
    Complete style for the lunar calendar page.

    Colors are RGB tuples (0-255); opacity is applied separately per page.
    """

    # Palette
    backdrop_color: Color = (180, 0, 0)       # Red backdrop behind the paper
    backdrop_fade: float = 0.7                # Backdrop brightness at the bottom row
    paper_color: Color = (250, 245, 235)      # Warm paper tone
    gold_color: Color = (200, 160, 0)         # Border, binding holes, dots, current second
    primary_color: Color = (180, 20, 20)      # Header bar, minute numerals, elapsed seconds
    ink_color: Color = (100, 50, 0)           # Hour symbol, grid borders, footer
    separator_color: Color = (180, 120, 0)    # Line under the minute numerals
    label_color: Color = (255, 255, 255)      # Text on filled areas

    # Accent spiral gradient
    snake_start_color: Color = (30, 120, 90)
    snake_end_color: Color = (60, 160, 120)
    snake_tongue_color: Color = (200, 60, 60)

    # Texts
    footer_text: str = "🍀 Happiness   🧧 Good Fortune   🌸 Prosperity"
    corner_left_text: str = "GOOD"
    corner_right_text: str = "LUCK"

    # Fonts
    sans_font_path: str = app_config.SANS_FONT_PATH
    sans_bold_font_path: str = app_config.SANS_BOLD_FONT_PATH
    numeral_font_path: str = app_config.NUMERAL_FONT_PATH
    symbol_font_path: str = app_config.SYMBOL_FONT_PATH

    # Animation
    flip_duration: int = app_config.FLIP_DURATION_FRAMES
    angle_step: float = app_config.SNAKE_ANGLE_STEP

    def to_dict(self) -> dict:
        """Convert style to dictionary for serialization"""
        return {
            field.name: getattr(self, field.name)
            for field in fields(self)
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'CalendarStyle':
        """Create style from dictionary, ignoring unknown keys"""
        color_fields = {field.name for field in fields(cls) if field.name.endswith('_color')}
        valid_fields = {field.name for field in fields(cls)}
        filtered_data = {}
        for key, value in data.items():
            if key not in valid_fields:
                continue
            # YAML and JSON hand colors over as lists
            if key in color_fields and isinstance(value, list):
                value = tuple(value)
            filtered_data[key] = value
        return cls(**filtered_data)

    def validate(self) -> list:
        """Validate style and return list of issues"""
        issues = []

        for field in fields(self):
            value = getattr(self, field.name)
            if field.name.endswith('_color'):
                if not (isinstance(value, tuple) and len(value) == 3 and
                        all(_is_int(c) and 0 <= c <= 255 for c in value)):
                    issues.append(f"{field.name} must be RGB tuple (0-255), got {value}")
            elif field.name.endswith(('_text', '_font_path')):
                if not isinstance(value, str):
                    issues.append(f"{field.name} must be a string, got {value!r}")

        if not (_is_number(self.backdrop_fade) and 0 <= self.backdrop_fade <= 1):
            issues.append(f"backdrop_fade must be between 0 and 1, got {self.backdrop_fade!r}")

        if not (_is_int(self.flip_duration) and self.flip_duration >= 1):
            issues.append(f"flip_duration must be a positive frame count, got {self.flip_duration!r}")

        if not _is_number(self.angle_step):
            issues.append(f"angle_step must be a number, got {self.angle_step!r}")

        return issues


def _is_int(value) -> bool:
    # bool is an int subclass but never a valid count or channel
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value) -> bool:
    return _is_int(value) or isinstance(value, float)


def load_style(path: str = app_config.CLOCK_STYLE_PATH) -> CalendarStyle:
    """Load a style from a YAML file, falling back to the defaults"""
    if not path or not os.path.exists(path):
        return CalendarStyle()

    try:
        with open(path, 'r') as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logging.error(f"Failed to read calendar style {path}: {e}")
        return CalendarStyle()

    if not isinstance(data, dict):
        logging.error(f"Calendar style {path} must be a mapping, got {type(data).__name__}")
        return CalendarStyle()

    style = CalendarStyle.from_dict(data)
    issues = style.validate()
    if issues:
        logging.warning(f"Ignoring invalid calendar style {path}: {'; '.join(issues)}")
        return CalendarStyle()

    logging.info(f"Loaded calendar style from {path}")
    return style
