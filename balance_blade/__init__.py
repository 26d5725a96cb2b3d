"""balance_blade - split a shape into equal halves with a moving bar."""

from balance_blade.engine import Engine
from balance_blade.geometry import Bar, Shape, ShapeKind, circular_segment_area, compute_areas
from balance_blade.scoring import SplitResult, area_ratio, score_increment, score_split
from balance_blade.session import ClickLatch, GameState, Session, SessionView
from balance_blade.stages import STAGES, Stage, stage_for
from balance_blade.systems import build_engine
from balance_blade.types import TickContext

__all__ = [
    "Bar",
    "ClickLatch",
    "Engine",
    "GameState",
    "STAGES",
    "Session",
    "SessionView",
    "Shape",
    "ShapeKind",
    "SplitResult",
    "Stage",
    "TickContext",
    "area_ratio",
    "build_engine",
    "circular_segment_area",
    "compute_areas",
    "score_increment",
    "score_split",
    "stage_for",
]
