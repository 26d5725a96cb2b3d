"""Split scoring: relative area difference, score increment, display ratio."""
from __future__ import annotations

import math
from dataclasses import dataclass

from balance_blade.config import SUCCESS_MARGIN
from balance_blade.geometry import Bar, Shape, compute_areas


@dataclass(frozen=True)
class SplitResult:
    area1: float
    area2: float
    relative_diff: float
    success: bool
    increment: int
    ratio: float


def score_increment(relative_diff: float, margin: float = SUCCESS_MARGIN) -> int:
    """Points for a split: 100 for a perfect cut, 0 at the margin.

    Rounds half away from zero. Callers only ask for in-margin splits.
    """
    value = (1 - relative_diff / margin) * 100
    return int(math.floor(value + 0.5))


def area_ratio(area1: float, area2: float) -> float:
    """``min / max`` of the two areas, or 0 when they sum to zero."""
    if area1 + area2 == 0:
        return 0.0
    return min(area1, area2) / max(area1, area2)


def score_split(shape: Shape, bar: Bar, margin: float = SUCCESS_MARGIN) -> SplitResult:
    area1, area2 = compute_areas(shape, bar)
    # normalized by the nominal area, not area1 + area2
    relative_diff = abs(area1 - area2) / shape.area
    success = relative_diff <= margin
    return SplitResult(
        area1=area1,
        area2=area2,
        relative_diff=relative_diff,
        success=success,
        increment=score_increment(relative_diff, margin) if success else 0,
        ratio=area_ratio(area1, area2),
    )
