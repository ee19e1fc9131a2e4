"""
Spiral "snake" decorations for the calendar page
Pure point generators plus the routines that draw them onto a Canvas
"""

import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from .canvas import RGBA, Canvas, rgba
from .config import CalendarStyle

Point = Tuple[float, float]

# Accent spiral ("small snake")
ACCENT_SEGMENTS = 80
ACCENT_MAX_T = math.tau * 2.5
ACCENT_BASE_RADIUS = 3.0
ACCENT_RADIUS_GROWTH = 6.0
ACCENT_OPACITY = 0.2
ACCENT_DETAIL_OPACITY = 0.4
ACCENT_STROKE = 3
HEAD_SIZE = (10.0, 7.0)
TONGUE_LENGTH = 6.0


@dataclass(frozen=True)
class SpiralPath:
    """One open spiral stroke"""
    points: np.ndarray  # shape (n, 2)
    color: RGBA
    width: int


@dataclass(frozen=True)
class AccentSpiral:
    """Small snake: gradient body plus head position"""
    points: np.ndarray  # shape (ACCENT_SEGMENTS + 1, 2)
    colors: List[RGBA]  # one per point
    head: Point


def spiral_points(center: Point, t: np.ndarray, base_radius: float, growth: float,
                  phase: float, direction: float = 1.0) -> np.ndarray:
    """Archimedean spiral r = base + growth * t, rotated by phase"""
    radius = base_radius + growth * t
    theta = direction * t + phase
    x = center[0] + np.cos(theta) * radius
    y = center[1] + np.sin(theta) * radius
    return np.column_stack((x, y))


def lerp_color(start, end, factor: float) -> Tuple[float, float, float]:
    return tuple(s + (e - s) * factor for s, e in zip(start, end))


def accent_spiral(center: Point, angle: float, alpha: float,
                  style: Optional[CalendarStyle] = None) -> AccentSpiral:
    """Build the small snake: 81 points over 2.5 turns with a green gradient"""
    style = style or CalendarStyle()
    t = np.linspace(0.0, ACCENT_MAX_T, ACCENT_SEGMENTS + 1)
    points = spiral_points(center, t, ACCENT_BASE_RADIUS, ACCENT_RADIUS_GROWTH, angle)

    colors = [
        rgba(lerp_color(style.snake_start_color, style.snake_end_color, i / ACCENT_SEGMENTS),
             alpha * ACCENT_OPACITY)
        for i in range(ACCENT_SEGMENTS + 1)
    ]

    head_radius = ACCENT_BASE_RADIUS + ACCENT_MAX_T * ACCENT_RADIUS_GROWTH
    head = (
        center[0] + math.cos(ACCENT_MAX_T + angle) * head_radius,
        center[1] + math.sin(ACCENT_MAX_T + angle) * head_radius,
    )
    return AccentSpiral(points=points, colors=colors, head=head)


def background_ornament(center: Point, angle: float, alpha: float,
                        style: Optional[CalendarStyle] = None) -> List[SpiralPath]:
    """Build the large snake: two faint superposed spirals turning in opposite directions"""
    style = style or CalendarStyle()
    main_t = np.arange(0.0, math.tau * 4, 0.05)
    counter_t = np.arange(0.0, math.tau * 3.5, 0.07)

    return [
        SpiralPath(
            points=spiral_points(center, main_t, 10.0, 15.0, angle * 0.5),
            color=rgba(style.gold_color, alpha * 0.1),
            width=20,
        ),
        SpiralPath(
            points=spiral_points(center, counter_t, 8.0, 12.0, angle * 0.3, direction=-1.0),
            color=rgba(style.primary_color, alpha * 0.08),
            width=15,
        ),
    ]


def draw_accent_spiral(canvas: Canvas, center: Point, angle: float, alpha: float,
                       style: Optional[CalendarStyle] = None) -> None:
    """Draw the small snake with its head, eyes and forked tongue"""
    style = style or CalendarStyle()
    snake = accent_spiral(center, angle, alpha, style)
    canvas.polyline(snake.points, snake.colors[1:], width=ACCENT_STROKE)

    hx, hy = snake.head
    canvas.ellipse(hx, hy, *HEAD_SIZE, fill=rgba(style.snake_end_color, alpha * ACCENT_OPACITY))

    eye = rgba((0, 0, 0), alpha * ACCENT_DETAIL_OPACITY)
    canvas.ellipse(hx - 2.2, hy - 1.5, 1.5, 1.5, fill=eye)
    canvas.ellipse(hx + 2.2, hy - 1.5, 1.5, 1.5, fill=eye)

    tongue = rgba(style.snake_tongue_color, alpha * ACCENT_DETAIL_OPACITY)
    tx, ty = hx + TONGUE_LENGTH, hy
    canvas.line(hx + 5, hy, tx, ty, tongue, width=2)
    canvas.line(tx, ty, tx + 2.5, ty - 1.5, tongue, width=2)
    canvas.line(tx, ty, tx + 2.5, ty + 1.5, tongue, width=2)


def draw_background_ornament(canvas: Canvas, center: Point, angle: float, alpha: float,
                             style: Optional[CalendarStyle] = None) -> None:
    for path in background_ornament(center, angle, alpha, style):
        canvas.polyline(path.points, path.color, width=path.width)
