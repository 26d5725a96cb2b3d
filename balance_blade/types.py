"""Shared type aliases and the per-tick context."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt: float
    elapsed: float
    pressed: bool  # left button state sampled once for this tick


if TYPE_CHECKING:
    from balance_blade.session import Session

System = Callable[["Session", TickContext], None]
