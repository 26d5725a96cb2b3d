"""Shape and bar drawing."""
from __future__ import annotations

import pygame

from balance_blade.config import BAR_COLOR, BAR_THICKNESS, SHAPE_COLOR
from balance_blade.geometry import Bar, Shape, ShapeKind


def triangle_points(shape: Shape) -> list[tuple[int, int]]:
    """Apex at top-center, base along the bottom edge."""
    return [
        (shape.x + shape.width // 2, shape.y),
        (shape.x, shape.y + shape.height),
        (shape.x + shape.width, shape.y + shape.height),
    ]


def draw_shape(surface: pygame.Surface, shape: Shape) -> None:
    if shape.kind is ShapeKind.RECTANGLE:
        pygame.draw.rect(surface, SHAPE_COLOR, pygame.Rect(shape.x, shape.y, shape.width, shape.height))
    elif shape.kind is ShapeKind.CIRCLE:
        cx, cy = shape.center()
        pygame.draw.circle(surface, SHAPE_COLOR, (int(cx), int(cy)), shape.width // 2)
    elif shape.kind is ShapeKind.TRIANGLE:
        pygame.draw.polygon(surface, SHAPE_COLOR, triangle_points(shape), 1)


def bar_rect(shape: Shape, bar: Bar) -> pygame.Rect:
    """Thin rectangle across the shape's bounding box at the bar position."""
    if bar.vertical:
        return pygame.Rect(int(bar.position), shape.y, BAR_THICKNESS, shape.height)
    return pygame.Rect(shape.x, int(bar.position), shape.width, BAR_THICKNESS)


def draw_bar(surface: pygame.Surface, shape: Shape, bar: Bar) -> None:
    pygame.draw.rect(surface, BAR_COLOR, bar_rect(shape, bar))
