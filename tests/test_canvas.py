"""Canvas transform stack and alpha-blended primitives."""

from __future__ import annotations

import pytest
from PIL import Image

from lunar_calendar.canvas import Canvas, rgba


def _canvas(color=(0, 0, 0)) -> Canvas:
    return Canvas(Image.new('RGB', (100, 100), color))


def test_rgba_clamps_alpha() -> None:
    assert rgba((1, 2, 3), 300.0) == (1, 2, 3, 255)
    assert rgba((1, 2, 3), -5.0) == (1, 2, 3, 0)
    assert rgba((1.9, 2.2, 3.0), 127.6) == (1, 2, 3, 128)


def test_rejects_non_rgb_images() -> None:
    with pytest.raises(ValueError):
        Canvas(Image.new('RGBA', (10, 10)))


def test_translate_and_scale_compose() -> None:
    canvas = _canvas()
    canvas.translate(50, 50)
    canvas.scale(0.5)
    canvas.translate(-50, -50)

    assert canvas.to_device(50, 50) == (50.0, 50.0)
    assert canvas.to_device(0, 0) == (25.0, 25.0)
    assert canvas.to_device(100, 100) == (75.0, 75.0)


def test_saved_restores_transform() -> None:
    canvas = _canvas()
    canvas.translate(10, 20)

    with canvas.saved():
        canvas.scale(2.0)
        canvas.translate(5, 5)
        assert canvas.to_device(0, 0) == (20.0, 30.0)

    assert canvas.to_device(0, 0) == (10.0, 20.0)
    assert canvas.scale_factor == 1.0


def test_fill_blends_with_alpha() -> None:
    canvas = _canvas((0, 0, 0))
    canvas.rect(0, 0, 100, 100, fill=(200, 100, 0, 128))

    r, g, b = canvas.image.getpixel((50, 50))
    assert r == pytest.approx(100, abs=1)
    assert g == pytest.approx(50, abs=1)
    assert b == 0


def test_opaque_fill_replaces() -> None:
    canvas = _canvas((0, 0, 0))
    canvas.circle(50, 50, 20, fill=(255, 255, 255, 255))

    assert canvas.image.getpixel((50, 50)) == (255, 255, 255)
    assert canvas.image.getpixel((5, 5)) == (0, 0, 0)


def test_scaled_rect_lands_in_device_space() -> None:
    canvas = _canvas((0, 0, 0))
    with canvas.saved():
        canvas.scale(0.5)
        canvas.rect(0, 0, 100, 100, fill=(255, 0, 0, 255))

    assert canvas.image.getpixel((40, 40)) == (255, 0, 0)
    assert canvas.image.getpixel((70, 70)) == (0, 0, 0)


def test_polyline_accepts_per_segment_colors() -> None:
    canvas = _canvas((0, 0, 0))
    points = [(10, 50), (50, 50), (90, 50)]
    canvas.polyline(points, [(255, 0, 0, 255), (0, 255, 0, 255)], width=3)

    assert canvas.image.getpixel((30, 50)) == (255, 0, 0)
    assert canvas.image.getpixel((80, 50)) == (0, 255, 0)


def test_text_draws_something() -> None:
    canvas = _canvas((0, 0, 0))
    canvas.text("88", 50, 50, 40, (255, 255, 255, 255), "/nonexistent/font.ttf")

    assert canvas.image.getbbox() is not None
