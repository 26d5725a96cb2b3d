"""Tests for shapes, bar movement and area splits."""
from __future__ import annotations

import math

import pytest

from balance_blade.geometry import (
    Bar,
    Shape,
    ShapeKind,
    circular_segment_area,
    compute_areas,
)


def _shape(kind: ShapeKind, width: int = 200, height: int = 150) -> Shape:
    return Shape(kind=kind, x=100, y=50, width=width, height=height)


# --- Shape ---

def test_shape_area_is_bounding_box():
    shape = _shape(ShapeKind.CIRCLE)
    assert shape.area == 30000.0


def test_shape_rejects_non_positive_size():
    with pytest.raises(ValueError):
        Shape(kind=ShapeKind.RECTANGLE, x=0, y=0, width=0, height=10)
    with pytest.raises(ValueError):
        Shape(kind=ShapeKind.RECTANGLE, x=0, y=0, width=10, height=-1)


def test_centered_shape_uses_integer_layout():
    shape = Shape.centered(ShapeKind.RECTANGLE, 200, 150, (640, 480))
    assert (shape.x, shape.y) == (220, 165)

    odd = Shape.centered(ShapeKind.RECTANGLE, 101, 99, (640, 480))
    assert (odd.x, odd.y) == (270, 191)


def test_span_follows_bar_orientation():
    shape = _shape(ShapeKind.RECTANGLE)
    assert shape.span(vertical=True) == (100.0, 300.0)
    assert shape.span(vertical=False) == (50.0, 200.0)


# --- Bar ---

def test_bar_starts_at_leading_edge():
    shape = _shape(ShapeKind.RECTANGLE)
    assert Bar.at_leading_edge(shape, vertical=True, speed=2.0).position == 100.0
    assert Bar.at_leading_edge(shape, vertical=False, speed=2.0).position == 50.0


def test_bar_bounces_past_upper_bound():
    """Span [100, 300], bar at 298 moving +5 ends at 303 with speed -5."""
    shape = _shape(ShapeKind.RECTANGLE)
    bar = Bar(position=298.0, vertical=True, speed=5.0)

    bar.advance(shape)

    assert bar.position == 303.0
    assert bar.speed == -5.0


def test_bar_bounces_past_lower_bound():
    shape = _shape(ShapeKind.RECTANGLE)
    bar = Bar(position=51.0, vertical=False, speed=-3.0)

    bar.advance(shape)

    assert bar.position == 48.0
    assert bar.speed == 3.0


def test_bar_keeps_speed_inside_span():
    shape = _shape(ShapeKind.RECTANGLE)
    bar = Bar(position=150.0, vertical=True, speed=2.5)

    for _ in range(10):
        bar.advance(shape)

    assert bar.position == 175.0
    assert bar.speed == 2.5


def test_bar_returns_after_bounce():
    shape = _shape(ShapeKind.RECTANGLE)
    bar = Bar(position=298.0, vertical=True, speed=5.0)

    bar.advance(shape)
    bar.advance(shape)

    assert bar.position == 298.0
    assert bar.speed == -5.0


# --- Rectangle ---

@pytest.mark.parametrize("position", [100.0, 137.5, 200.0, 263.0, 300.0])
def test_rectangle_vertical_split_sums_to_area(position):
    shape = _shape(ShapeKind.RECTANGLE)
    area1, area2 = compute_areas(shape, Bar(position=position, vertical=True, speed=1.0))
    assert area1 + area2 == pytest.approx(shape.area)
    assert area1 >= 0 and area2 >= 0


@pytest.mark.parametrize("position", [50.0, 99.0, 125.0, 200.0])
def test_rectangle_horizontal_split_sums_to_area(position):
    shape = _shape(ShapeKind.RECTANGLE)
    area1, area2 = compute_areas(shape, Bar(position=position, vertical=False, speed=1.0))
    assert area1 + area2 == pytest.approx(shape.area)


def test_rectangle_center_split_is_equal():
    shape = _shape(ShapeKind.RECTANGLE)
    assert compute_areas(shape, Bar(position=200.0, vertical=True, speed=1.0)) == (15000.0, 15000.0)


def test_rectangle_horizontal_split_values():
    shape = _shape(ShapeKind.RECTANGLE)
    area1, area2 = compute_areas(shape, Bar(position=80.0, vertical=False, speed=1.0))
    assert area1 == 30 * 200
    assert area2 == 120 * 200


# --- Circle ---

def test_segment_area_endpoints():
    radius = 50.0
    assert circular_segment_area(radius, -radius) == pytest.approx(0.0)
    assert circular_segment_area(radius, 0.0) == pytest.approx(math.pi * radius ** 2 / 2)
    assert circular_segment_area(radius, radius) == pytest.approx(math.pi * radius ** 2)


def test_segment_area_is_monotonic():
    radius = 75.0
    samples = [circular_segment_area(radius, -radius + i * 0.5) for i in range(301)]
    assert all(b >= a for a, b in zip(samples, samples[1:]))
    assert not any(math.isnan(s) for s in samples)


def test_segment_area_outside_circle_is_zero():
    assert circular_segment_area(50.0, 50.1) == 0.0
    assert circular_segment_area(50.0, -60.0) == 0.0


def test_circle_split_at_center_is_half_each():
    shape = _shape(ShapeKind.CIRCLE, width=200, height=200)
    full = math.pi * 100 ** 2
    area1, area2 = compute_areas(shape, Bar(position=200.0, vertical=True, speed=1.0))
    assert area1 == pytest.approx(full / 2)
    assert area2 == pytest.approx(full / 2)


def test_circle_horizontal_split_uses_vertical_center():
    shape = _shape(ShapeKind.CIRCLE, width=100, height=150)
    full = math.pi * 50 ** 2
    center_y = shape.y + 75
    area1, area2 = compute_areas(shape, Bar(position=center_y, vertical=False, speed=1.0))
    assert area1 == pytest.approx(full / 2)
    assert area1 + area2 == pytest.approx(full)


def test_circle_split_at_edge():
    shape = _shape(ShapeKind.CIRCLE, width=200, height=200)
    area1, area2 = compute_areas(shape, Bar(position=100.0, vertical=True, speed=1.0))
    assert area1 == pytest.approx(0.0)
    assert area2 == pytest.approx(math.pi * 100 ** 2)


# --- Triangle ---

def test_triangle_is_half_the_rectangle_split():
    rect = _shape(ShapeKind.RECTANGLE)
    tri = _shape(ShapeKind.TRIANGLE)
    bar = Bar(position=160.0, vertical=True, speed=1.0)

    r1, r2 = compute_areas(rect, bar)
    t1, t2 = compute_areas(tri, bar)

    assert (t1, t2) == (0.5 * r1, 0.5 * r2)
    assert t1 + t2 == pytest.approx(rect.area / 2)
