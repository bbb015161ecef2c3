from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Protocol, Sequence, Tuple

from .geometry import Point
from .renderer import Rgba, Stroke

logger = logging.getLogger(__name__)

# Corner points in rendered units, fill, outline.
Triangle = Tuple[Sequence[Point], Rgba, Stroke]


@dataclass(frozen=True)
class Viewport:
    width: float
    height: float
    device_pixel_ratio: float = 1.0

    @property
    def backing_size(self) -> Tuple[int, int]:
        return (
            int(round(self.width * self.device_pixel_ratio)),
            int(round(self.height * self.device_pixel_ratio)),
        )


class DrawingSurface(Protocol):
    """Interface the renderer and viewport manager use to reach a canvas."""

    def rendered_size(self) -> Tuple[float, float]:
        ...

    def device_pixel_ratio(self) -> float:
        ...

    def set_backing_size(self, width: int, height: int) -> None:
        ...

    def reset_transform(self) -> None:
        ...

    def scale(self, sx: float, sy: float) -> None:
        ...

    def clear(self) -> None:
        ...

    def draw_triangles(self, triangles: Iterable[Triangle]) -> None:
        """Paint one frame's triangles in order, later ones over earlier ones."""
        ...


class ViewportManager:
    """
    Keeps the surface's backing buffer at device resolution while callers
    draw in rendered (CSS) units.
    """

    def __init__(self, surface: DrawingSurface) -> None:
        self.surface = surface
        self._viewport: Optional[Viewport] = None

    @property
    def viewport(self) -> Optional[Viewport]:
        return self._viewport

    def resize_canvas(self) -> Viewport:
        width, height = self.surface.rendered_size()
        ratio = float(self.surface.device_pixel_ratio())
        viewport = Viewport(float(width), float(height), ratio)
        # A new backing buffer drops its pixels; callers repaint afterwards.
        self.surface.set_backing_size(*viewport.backing_size)
        self.surface.reset_transform()
        self.surface.scale(ratio, ratio)
        self._viewport = viewport
        logger.debug("Viewport %.0fx%.0f @%.2fx -> backing %dx%d", width, height, ratio, *viewport.backing_size)
        return viewport
