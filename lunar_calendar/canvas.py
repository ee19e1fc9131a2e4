"""
Canvas - Immediate-mode drawing surface over a PIL image
Blends every primitive with its own opacity and keeps a translate/scale transform stack
"""

from contextlib import contextmanager
from typing import Iterator, List, Optional, Sequence, Tuple, Union

from PIL import Image, ImageDraw

from utils.fonts import load_font

RGBA = Tuple[int, int, int, int]
Point = Tuple[float, float]


def rgba(color: Sequence[float], alpha: float = 255.0) -> RGBA:
    """Build an RGBA tuple, clamping the opacity channel to 0-255"""
    a = int(round(min(max(alpha, 0.0), 255.0)))
    return (int(color[0]), int(color[1]), int(color[2]), a)


class Canvas:
    """Draws onto an RGB image with alpha blending and a uniform-scale transform"""

    def __init__(self, image: Image.Image):
        if image.mode != 'RGB':
            raise ValueError(f"Canvas needs an RGB image, got {image.mode}")
        self.image = image
        self.draw = ImageDraw.Draw(image, 'RGBA')

        # Current transform: device = offset + logical * scale
        self.offset_x = 0.0
        self.offset_y = 0.0
        self.scale_factor = 1.0
        self._stack: List[Tuple[float, float, float]] = []

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    # Transform stack

    def push(self) -> None:
        self._stack.append((self.offset_x, self.offset_y, self.scale_factor))

    def pop(self) -> None:
        self.offset_x, self.offset_y, self.scale_factor = self._stack.pop()

    @contextmanager
    def saved(self) -> Iterator['Canvas']:
        """Save the transform, restoring it when the block exits"""
        self.push()
        try:
            yield self
        finally:
            self.pop()

    def translate(self, dx: float, dy: float) -> None:
        self.offset_x += dx * self.scale_factor
        self.offset_y += dy * self.scale_factor

    def scale(self, factor: float) -> None:
        self.scale_factor *= factor

    def to_device(self, x: float, y: float) -> Point:
        """Map a logical point to pixel coordinates"""
        return (self.offset_x + x * self.scale_factor, self.offset_y + y * self.scale_factor)

    def _width(self, width: float) -> int:
        if width <= 0:
            return 0
        return max(1, int(round(width * self.scale_factor)))

    # Primitives

    def rect(self, x: float, y: float, w: float, h: float,
             fill: Optional[RGBA] = None, outline: Optional[RGBA] = None,
             width: float = 1, radius: float = 0,
             corners: Optional[Tuple[bool, bool, bool, bool]] = None) -> None:
        """Draw a rectangle; corners selects which of (tl, tr, br, bl) get the radius"""
        x0, y0 = self.to_device(x, y)
        x1, y1 = self.to_device(x + w, y + h)
        stroke = self._width(width) if outline else 0
        if radius > 0:
            self.draw.rounded_rectangle(
                [x0, y0, x1, y1],
                radius=radius * self.scale_factor,
                fill=fill,
                outline=outline,
                width=stroke,
                corners=corners,
            )
        else:
            self.draw.rectangle([x0, y0, x1, y1], fill=fill, outline=outline, width=stroke)

    def ellipse(self, cx: float, cy: float, w: float, h: float,
                fill: Optional[RGBA] = None, outline: Optional[RGBA] = None,
                width: float = 1) -> None:
        x0, y0 = self.to_device(cx - w / 2, cy - h / 2)
        x1, y1 = self.to_device(cx + w / 2, cy + h / 2)
        stroke = self._width(width) if outline else 0
        self.draw.ellipse([x0, y0, x1, y1], fill=fill, outline=outline, width=stroke)

    def circle(self, cx: float, cy: float, diameter: float, fill: Optional[RGBA] = None) -> None:
        self.ellipse(cx, cy, diameter, diameter, fill=fill)

    def line(self, x1: float, y1: float, x2: float, y2: float, color: RGBA, width: float = 1) -> None:
        self.draw.line([self.to_device(x1, y1), self.to_device(x2, y2)], fill=color, width=self._width(width))

    def polyline(self, points: Sequence[Point], color: Union[RGBA, Sequence[RGBA]], width: float = 1) -> None:
        """
        Draw an open path. color may be one RGBA or one RGBA per segment.

        The whole stroke is painted into a coverage mask first and blended in
        one coat, so overlapping segments and joints never darken each other.
        """
        device = [self.to_device(float(x), float(y)) for x, y in points]
        if len(device) < 2:
            return
        stroke = self._width(width)

        # Work only inside the path's bounding box
        pad = stroke + 1
        left = max(int(min(x for x, _ in device)) - pad, 0)
        top = max(int(min(y for _, y in device)) - pad, 0)
        right = min(int(max(x for x, _ in device)) + pad + 1, self.width)
        bottom = min(int(max(y for _, y in device)) + pad + 1, self.height)
        if left >= right or top >= bottom:
            return
        local = [(x - left, y - top) for x, y in device]
        size = (right - left, bottom - top)
        box = (left, top, right, bottom)

        mask = Image.new('L', size, 0)
        mask_draw = ImageDraw.Draw(mask)

        if isinstance(color[0], (tuple, list)):
            layer = Image.new('RGB', size)
            layer_draw = ImageDraw.Draw(layer)
            for i in range(len(local) - 1):
                segment = [local[i], local[i + 1]]
                layer_draw.line(segment, fill=tuple(color[i][:3]), width=stroke)
                mask_draw.line(segment, fill=color[i][3], width=stroke)
            self.image.paste(layer, box, mask)
        else:
            mask_draw.line(local, fill=color[3], width=stroke, joint="curve")
            self.image.paste(tuple(color[:3]), box, mask)

    def text(self, content: str, x: float, y: float, size: float, fill: RGBA, font_path: str) -> None:
        """Draw text centered on (x, y) at the given logical pixel size"""
        font = load_font(font_path, int(round(size * self.scale_factor)))
        self.draw.text(self.to_device(x, y), content, fill=fill, font=font, anchor="mm")
