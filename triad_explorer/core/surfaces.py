"""
Drawing surfaces that do not need a Qt event loop.

``RecordingSurface`` keeps every call for headless use; ``PilSurface`` paints a
Pillow image and backs the Gradio front-end.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple

from PIL import Image, ImageDraw

from .geometry import Point
from .renderer import Rgba, Stroke
from .viewport import Triangle

Rgb = Tuple[int, int, int]


@dataclass(frozen=True)
class RecordedTriangle:
    points: Tuple[Point, ...]
    fill: Rgba
    stroke: Stroke


class RecordingSurface:
    """
    In-memory surface that records transform and draw calls.
    Useful when the explorer runs without any real canvas.
    """

    def __init__(self, width: float = 640.0, height: float = 480.0, device_pixel_ratio: float = 1.0) -> None:
        self.width = width
        self.height = height
        self.ratio = device_pixel_ratio
        self.backing_size: Tuple[int, int] = (0, 0)
        self.transform: Tuple[float, float] = (1.0, 1.0)
        self.calls: List[str] = []
        self.triangles: List[RecordedTriangle] = []

    def resize(self, width: float, height: float, device_pixel_ratio: float | None = None) -> None:
        self.width = width
        self.height = height
        if device_pixel_ratio is not None:
            self.ratio = device_pixel_ratio

    def rendered_size(self) -> Tuple[float, float]:
        return self.width, self.height

    def device_pixel_ratio(self) -> float:
        return self.ratio

    def set_backing_size(self, width: int, height: int) -> None:
        self.calls.append("set_backing_size")
        self.backing_size = (width, height)
        self.triangles.clear()

    def reset_transform(self) -> None:
        self.calls.append("reset_transform")
        self.transform = (1.0, 1.0)

    def scale(self, sx: float, sy: float) -> None:
        self.calls.append("scale")
        self.transform = (self.transform[0] * sx, self.transform[1] * sy)

    def clear(self) -> None:
        self.calls.append("clear")
        self.triangles.clear()

    def draw_triangles(self, triangles: Iterable[Triangle]) -> None:
        self.calls.append("draw_triangles")
        self.triangles.extend(RecordedTriangle(tuple(points), fill, stroke) for points, fill, stroke in triangles)


class PilSurface:
    """
    Pillow-backed surface; device pixels are simulated by scaling points.

    The backing image is RGB and drawing uses an RGBA context so translucent
    fills blend over the background.
    """

    def __init__(
        self,
        width: int = 640,
        height: int = 560,
        device_pixel_ratio: float = 1.0,
        background: Rgb = (0, 0, 0),
    ) -> None:
        self.width = width
        self.height = height
        self.ratio = device_pixel_ratio
        self.background = tuple(background)
        self._scale: Tuple[float, float] = (1.0, 1.0)
        self.image = Image.new("RGB", (1, 1), self.background)
        self._draw = ImageDraw.Draw(self.image, "RGBA")

    def resize(self, width: int, height: int, device_pixel_ratio: float | None = None) -> None:
        self.width = width
        self.height = height
        if device_pixel_ratio is not None:
            self.ratio = device_pixel_ratio

    def rendered_size(self) -> Tuple[float, float]:
        return float(self.width), float(self.height)

    def device_pixel_ratio(self) -> float:
        return self.ratio

    def set_backing_size(self, width: int, height: int) -> None:
        self.image = Image.new("RGB", (max(1, width), max(1, height)), self.background)
        self._draw = ImageDraw.Draw(self.image, "RGBA")

    def reset_transform(self) -> None:
        self._scale = (1.0, 1.0)

    def scale(self, sx: float, sy: float) -> None:
        self._scale = (self._scale[0] * sx, self._scale[1] * sy)

    def clear(self) -> None:
        self._draw.rectangle((0, 0, self.image.width, self.image.height), fill=self.background)

    def draw_triangles(self, triangles: Iterable[Triangle]) -> None:
        sx, sy = self._scale
        for points, fill, stroke in triangles:
            pts = [(p.x * sx, p.y * sy) for p in points]
            self._draw.polygon(pts, fill=fill.to_bytes())
            width = max(1, int(round(stroke.width * sx)))
            self._draw.line(pts + [pts[0]], fill=stroke.color.to_bytes(), width=width)

    def to_image(self) -> Image.Image:
        return self.image.copy()
