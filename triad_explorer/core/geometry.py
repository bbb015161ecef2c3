from __future__ import annotations

import math
from dataclasses import dataclass
from typing import NamedTuple, Tuple


class Point(NamedTuple):
    x: float
    y: float


def midpoint(a: Point, b: Point) -> Point:
    return Point((a.x + b.x) / 2.0, (a.y + b.y) / 2.0)


@dataclass(frozen=True)
class Triad:
    """Triangle given by its bottom-left, bottom-right and apex corners."""

    p1: Point
    p2: Point
    p3: Point

    def points(self) -> Tuple[Point, Point, Point]:
        return self.p1, self.p2, self.p3

    def children(self) -> Tuple["Triad", "Triad", "Triad"]:
        # Corner order p1, p2, p3 fixes the base-3 digit of each child.
        m12 = midpoint(self.p1, self.p2)
        m23 = midpoint(self.p2, self.p3)
        m31 = midpoint(self.p3, self.p1)
        return (
            Triad(self.p1, m12, m31),
            Triad(m12, self.p2, m23),
            Triad(m31, m23, self.p3),
        )

    def centroid(self) -> Point:
        return Point(
            (self.p1.x + self.p2.x + self.p3.x) / 3.0,
            (self.p1.y + self.p2.y + self.p3.y) / 3.0,
        )


def root_triad(width: float, height: float, scale: float = 0.9) -> Triad:
    """Equilateral triangle centred in a ``width`` x ``height`` area."""
    size = min(width, height) * scale
    tri_height = size * math.sqrt(3) / 2.0
    offset_x = (width - size) / 2.0
    offset_y = (height - tri_height) / 2.0
    return Triad(
        Point(offset_x, offset_y + tri_height),
        Point(offset_x + size, offset_y + tri_height),
        Point(offset_x + size / 2.0, offset_y),
    )
