"""
Sierpinski-style triad rendering.

Subdivision is a pure generator of :class:`DrawCommand` so indexing and
coloring can be checked without a drawing surface. :class:`FractalRenderer`
replays the commands onto any :class:`~triad_explorer.core.viewport.DrawingSurface`.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Iterator, List, NamedTuple, Optional

from .config import PaletteConfig
from .geometry import Triad, root_triad

if TYPE_CHECKING:
    from .activity import ActivityDataset
    from .viewport import DrawingSurface, Viewport

logger = logging.getLogger(__name__)

ActivityAccessor = Callable[[int], float]

MIN_GREEN = 50
GREEN_RANGE = 205


class Rgba(NamedTuple):
    r: int
    g: int
    b: int
    a: float = 1.0

    def css(self) -> str:
        return f"rgba({self.r}, {self.g}, {self.b}, {self.a:g})"

    def to_bytes(self) -> tuple[int, int, int, int]:
        return self.r, self.g, self.b, int(round(self.a * 255))


@dataclass(frozen=True)
class Stroke:
    color: Rgba
    width: float


@dataclass(frozen=True)
class DrawCommand:
    triad: Triad
    fill: Rgba
    stroke: Stroke
    leaf_index: Optional[int] = None  # None for the undivided root


def green_channel(activity: float) -> int:
    activity = min(1.0, max(0.0, float(activity)))
    return int(math.floor(MIN_GREEN + activity * GREEN_RANGE))


def leaf_color(activity: float, alpha: float = 0.8) -> Rgba:
    return Rgba(0, green_channel(activity), 0, alpha)


def leaf_path(index: int, depth: int) -> str:
    """Base-3 child digits from the root down to a leaf, e.g. ``"021"``."""
    if depth == 0:
        return "root"
    if not 0 <= index < 3**depth:
        raise ValueError(f"leaf index {index} out of range for depth {depth}")
    digits = []
    for _ in range(depth):
        index, digit = divmod(index, 3)
        digits.append(str(digit))
    return "".join(reversed(digits))


def _leaf_stroke(palette: PaletteConfig) -> Stroke:
    return Stroke(Rgba(*palette.leaf_outline), palette.leaf_outline_width)


def subdivide(
    triad: Triad,
    remaining: int,
    leaf_index: int,
    activity_of: ActivityAccessor,
    palette: PaletteConfig,
) -> Iterator[DrawCommand]:
    if remaining == 0:
        activity = activity_of(leaf_index) or 0.0
        yield DrawCommand(triad, leaf_color(activity, palette.leaf_alpha), _leaf_stroke(palette), leaf_index)
        return
    for digit, child in enumerate(triad.children()):
        yield from subdivide(child, remaining - 1, leaf_index * 3 + digit, activity_of, palette)


def root_command(triad: Triad, palette: PaletteConfig) -> DrawCommand:
    fill = Rgba(*palette.root_fill, palette.root_alpha)
    return DrawCommand(triad, fill, Stroke(Rgba(*palette.root_outline), palette.root_outline_width))


def render_commands(
    triad: Triad,
    depth: int,
    activity_of: ActivityAccessor,
    palette: Optional[PaletteConfig] = None,
) -> List[DrawCommand]:
    palette = palette or PaletteConfig()
    if depth == 0:
        # The undivided root is drawn white, never with an activity color.
        return [root_command(triad, palette)]
    return list(subdivide(triad, depth, 0, activity_of, palette))


class FractalRenderer:
    def __init__(self, palette: Optional[PaletteConfig] = None, scale: float = 0.9) -> None:
        self.palette = palette or PaletteConfig()
        self.scale = scale

    def root_for(self, viewport: "Viewport") -> Triad:
        return root_triad(viewport.width, viewport.height, self.scale)

    def render(
        self,
        surface: "DrawingSurface",
        viewport: "Viewport",
        depth: int,
        dataset: "ActivityDataset",
    ) -> List[DrawCommand]:
        commands = render_commands(self.root_for(viewport), depth, dataset.accessor(depth), self.palette)
        surface.clear()
        surface.draw_triangles((command.triad.points(), command.fill, command.stroke) for command in commands)
        logger.debug("Painted depth %d with %d triangles", depth, len(commands))
        return commands
