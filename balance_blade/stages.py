"""Stage table: shape size, bar orientation and bar speed per level."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class Stage:
    shape_width: int
    shape_height: int
    bar_vertical: bool
    bar_speed: float


STAGES: tuple[Stage, ...] = (
    Stage(shape_width=200, shape_height=150, bar_vertical=True, bar_speed=2.0),
    Stage(shape_width=150, shape_height=200, bar_vertical=False, bar_speed=2.5),
    Stage(shape_width=250, shape_height=100, bar_vertical=True, bar_speed=-3.0),
    Stage(shape_width=180, shape_height=180, bar_vertical=False, bar_speed=-2.0),
    Stage(shape_width=220, shape_height=130, bar_vertical=True, bar_speed=3.5),
)


def stage_for(stages: Sequence[Stage], index: int) -> Stage:
    """Look up a stage cyclically, so the table repeats indefinitely."""
    if not stages:
        raise ValueError("stage table is empty")
    return stages[index % len(stages)]
