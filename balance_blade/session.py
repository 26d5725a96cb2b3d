"""Session - the single mutable game state advanced once per tick."""
from __future__ import annotations

import dataclasses
import logging
import random
import time
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from balance_blade.config import (
    INITIAL_LIVES,
    INITIAL_SIZE_RANGE,
    SCREEN_H,
    SCREEN_W,
    SUCCESS_MARGIN,
)
from balance_blade.fsm import FSM
from balance_blade.geometry import Bar, Shape, ShapeKind
from balance_blade.scoring import SplitResult, score_split
from balance_blade.signals import SignalBus
from balance_blade.stages import STAGES, Stage, stage_for

logger = logging.getLogger(__name__)


class GameState(Enum):
    PLAYING = "playing"
    RESULT = "result"


# Playing --click--> Result --click--> Playing. Side effects live in
# balance_blade.transitions.
TRANSITIONS: dict[str, list[list[str]]] = {
    GameState.PLAYING.value: [["clicked", GameState.RESULT.value]],
    GameState.RESULT.value: [["clicked", GameState.PLAYING.value]],
}


@dataclass
class ClickLatch:
    """Rising-edge detector for the mouse button.

    ``update`` reports a press only on the first tick the button is seen
    down; it re-arms once the button is observed released.
    """

    held: bool = False

    def update(self, down: bool) -> bool:
        pressed = down and not self.held
        self.held = down
        return pressed


@dataclass(frozen=True)
class SessionView:
    """Read-only snapshot handed to the presentation layer."""

    shape: Shape
    bar: Bar
    state: GameState
    score: int
    lives: int
    area_ratio: float
    stage_index: int


class Session:
    """Owns the shape, the bar, score, lives, stage index and the RNG.

    The RNG is reseeded only by :meth:`reset`, from the wall clock unless a
    seed is given.
    """

    def __init__(
        self,
        stages: Sequence[Stage] = STAGES,
        *,
        seed: int | None = None,
        playfield: tuple[int, int] = (SCREEN_W, SCREEN_H),
        margin: float = SUCCESS_MARGIN,
        bus: SignalBus | None = None,
    ) -> None:
        if not stages:
            raise ValueError("stage table is empty")
        self.stages = tuple(stages)
        self.playfield = playfield
        self.margin = margin
        self.bus = bus if bus is not None else SignalBus()
        self.fsm = FSM(state=GameState.PLAYING.value, transitions=TRANSITIONS)
        self.latch = ClickLatch()
        self.clicked = False
        self.last_split: SplitResult | None = None
        self.reset(seed)

    @property
    def state(self) -> GameState:
        return GameState(self.fsm.state)

    @property
    def game_over(self) -> bool:
        return self.lives <= 0

    @property
    def stage(self) -> Stage:
        return stage_for(self.stages, self.stage_index)

    def reset(self, seed: int | None = None) -> None:
        """Start a fresh session: score 0, full lives, first stage."""
        if seed is None:
            seed = time.time_ns()
        self.seed = seed
        self.rng = random.Random(seed)
        self.score = 0
        self.lives = INITIAL_LIVES
        self.stage_index = 0
        self.area_ratio = 0.0
        self.last_split = None
        # The first level rolls its own size instead of using stage 0's.
        low, high = INITIAL_SIZE_RANGE
        width = self.rng.randrange(low, high)
        height = self.rng.randrange(low, high)
        self.init_level(size=(width, height))
        self.bus.publish("session_reset", seed=seed)

    def init_level(self, size: tuple[int, int] | None = None) -> None:
        """Build the shape and bar for the current stage and resume play."""
        stage = self.stage
        width, height = size if size is not None else (stage.shape_width, stage.shape_height)
        kind = self.rng.choice(list(ShapeKind))
        self.shape = Shape.centered(kind, width, height, self.playfield)
        self.bar = Bar.at_leading_edge(self.shape, stage.bar_vertical, stage.bar_speed)
        self.fsm.state = GameState.PLAYING.value
        logger.debug(
            "level %d: %s %dx%d, %s bar at %.1f speed %.1f",
            self.stage_index, kind.value, width, height,
            "vertical" if self.bar.vertical else "horizontal",
            self.bar.position, self.bar.speed,
        )

    def advance_bar(self) -> None:
        self.bar.advance(self.shape)

    def evaluate_split(self) -> SplitResult:
        """Score the cut at the bar's current position."""
        result = score_split(self.shape, self.bar, self.margin)
        if result.success:
            self.score += result.increment
            self.bus.publish(
                "split_scored",
                increment=result.increment,
                ratio=result.ratio,
                relative_diff=result.relative_diff,
            )
        else:
            self.lives -= 1
            self.bus.publish(
                "split_missed",
                lives=self.lives,
                ratio=result.ratio,
                relative_diff=result.relative_diff,
            )
        self.area_ratio = result.ratio
        self.last_split = result
        return result

    def continue_play(self) -> None:
        """Leave the result screen: restart when out of lives, else next stage."""
        if self.game_over:
            self.reset()
            return
        self.stage_index += 1
        self.init_level()
        self.bus.publish("stage_advanced", stage_index=self.stage_index)

    def view(self) -> SessionView:
        return SessionView(
            shape=self.shape,
            bar=dataclasses.replace(self.bar),
            state=self.state,
            score=self.score,
            lives=self.lives,
            area_ratio=self.area_ratio,
            stage_index=self.stage_index,
        )
