"""Shapes, the moving bar, and the area split under an axis-aligned divider.

Shape kinds share one record and are dispatched through ``_AREA_SPLITTERS``,
a table keyed by :class:`ShapeKind`.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable


class ShapeKind(Enum):
    RECTANGLE = "rectangle"
    CIRCLE = "circle"
    TRIANGLE = "triangle"


@dataclass(frozen=True)
class Shape:
    """Target region, laid out by its bounding box.

    ``area`` is the nominal bounding-box area (``width * height``) for every
    kind. Scoring normalizes by it, also for circles and triangles.
    """

    kind: ShapeKind
    x: int
    y: int
    width: int
    height: int
    area: float = field(init=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"shape size must be positive, got {self.width}x{self.height}"
            )
        object.__setattr__(self, "area", float(self.width * self.height))

    @classmethod
    def centered(
        cls, kind: ShapeKind, width: int, height: int, playfield: tuple[int, int],
    ) -> Shape:
        screen_w, screen_h = playfield
        return cls(
            kind=kind,
            x=screen_w // 2 - width // 2,
            y=screen_h // 2 - height // 2,
            width=width,
            height=height,
        )

    def span(self, vertical: bool) -> tuple[float, float]:
        """Bounding interval on the axis a bar of this orientation moves along."""
        if vertical:
            return float(self.x), float(self.x + self.width)
        return float(self.y), float(self.y + self.height)

    def center(self) -> tuple[float, float]:
        return self.x + self.width / 2, self.y + self.height / 2


@dataclass
class Bar:
    """Moving divider. ``speed`` is signed and flips on each bounce."""

    position: float
    vertical: bool
    speed: float

    @classmethod
    def at_leading_edge(cls, shape: Shape, vertical: bool, speed: float) -> Bar:
        start, _ = shape.span(vertical)
        return cls(position=start, vertical=vertical, speed=speed)

    def advance(self, shape: Shape) -> None:
        """Move one tick and reverse direction once outside the shape's span."""
        self.position += self.speed
        low, high = shape.span(self.vertical)
        if self.position > high or self.position < low:
            self.speed = -self.speed


def circular_segment_area(radius: float, h: float) -> float:
    """Area of the circle on the low side of a chord at offset ``h`` from center.

    Returns 0 for chords outside ``[-radius, radius]``; callers treat such a
    bar as lying outside the circle.
    """
    if h > radius or h < -radius:
        return 0.0
    depth = radius + h
    # clamp guards acos against rounding just past +-1
    cos_half = max(-1.0, min(1.0, (radius - depth) / radius))
    theta = 2 * math.acos(cos_half)
    return (radius * radius) / 2 * (theta - math.sin(theta))


def _rectangle_split(shape: Shape, bar: Bar) -> tuple[float, float]:
    if bar.vertical:
        area1 = (bar.position - shape.x) * shape.height
        area2 = (shape.x + shape.width - bar.position) * shape.height
    else:
        area1 = (bar.position - shape.y) * shape.width
        area2 = (shape.y + shape.height - bar.position) * shape.width
    return float(area1), float(area2)


def _circle_split(shape: Shape, bar: Bar) -> tuple[float, float]:
    radius = shape.width / 2  # width is the diameter
    full = math.pi * radius * radius
    cx, cy = shape.center()
    h = bar.position - (cx if bar.vertical else cy)
    area1 = circular_segment_area(radius, h)
    return area1, full - area1


def _triangle_split(shape: Shape, bar: Bar) -> tuple[float, float]:
    # Approximation: half of the rectangle split, not an exact triangle cut.
    area1, area2 = _rectangle_split(shape, bar)
    return 0.5 * area1, 0.5 * area2


_AREA_SPLITTERS: dict[ShapeKind, Callable[[Shape, Bar], tuple[float, float]]] = {
    ShapeKind.RECTANGLE: _rectangle_split,
    ShapeKind.CIRCLE: _circle_split,
    ShapeKind.TRIANGLE: _triangle_split,
}


def compute_areas(shape: Shape, bar: Bar) -> tuple[float, float]:
    """Return the areas on the low and high side of ``bar``."""
    return _AREA_SPLITTERS[shape.kind](shape, bar)
