"""Balance Blade - click while the bar cuts the shape into equal halves.

Controls:
  Left-click  Split the shape / continue after the result
  Esc         Quit
"""
from __future__ import annotations

import logging
import sys
from typing import Any

import pygame

from balance_blade.config import BG_COLOR, SCREEN_H, SCREEN_W, TITLE, parse_args
from balance_blade.session import Session
from balance_blade.signals import SignalBus
from balance_blade.systems import build_engine
from balance_blade.ui.feedback import FeedbackLayer
from balance_blade.ui.renderer import bar_rect, draw_bar, draw_shape
from balance_blade.ui.status import StatusPanel, load_font

logger = logging.getLogger(__name__)


def attach_outcome_log(bus: SignalBus) -> None:
    """Log split outcomes, stage changes and restarts as they are delivered."""

    def _on_scored(signal: str, data: dict[str, Any]) -> None:
        logger.info("Success! Score increment: %d (ratio %.2f)", data["increment"], data["ratio"])

    def _on_missed(signal: str, data: dict[str, Any]) -> None:
        logger.info("Failure! relative diff %.3f, %d lives left", data["relative_diff"], data["lives"])

    def _on_stage(signal: str, data: dict[str, Any]) -> None:
        logger.info("Stage %d", data["stage_index"] + 1)

    def _on_reset(signal: str, data: dict[str, Any]) -> None:
        logger.info("New session (seed %d)", data["seed"])

    bus.subscribe("split_scored", _on_scored)
    bus.subscribe("split_missed", _on_missed)
    bus.subscribe("stage_advanced", _on_stage)
    bus.subscribe("session_reset", _on_reset)


def main(argv: list[str] | None = None) -> None:
    config = parse_args(argv)
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption(TITLE)
    clock = pygame.time.Clock()

    try:
        font = load_font(config.font)
    except (OSError, pygame.error):
        logger.exception("Cannot load font %r", config.font)
        pygame.quit()
        sys.exit(1)

    session = Session(seed=config.seed)
    attach_outcome_log(session.bus)
    feedback = FeedbackLayer(session.bus)
    status = StatusPanel(font)
    engine = build_engine(session, tps=config.tps)

    # Tick accumulator for fixed-rate engine ticks
    tick_interval = 1.0 / config.tps
    accumulator = 0.0
    click_pending = False  # press seen as an event but not yet by a tick

    running = True
    while running:
        dt = clock.tick(config.fps) / 1000.0
        accumulator += dt

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                click_pending = True

        # --- Update ---
        while accumulator >= tick_interval:
            down = pygame.mouse.get_pressed()[0] or click_pending
            click_pending = False
            engine.step(down)
            accumulator -= tick_interval

        # --- Draw ---
        view = session.view()
        screen.fill(BG_COLOR)
        draw_shape(screen, view.shape)
        draw_bar(screen, view.shape, view.bar)
        bounds = bar_rect(view.shape, view.bar).union(
            pygame.Rect(view.shape.x, view.shape.y, view.shape.width, view.shape.height)
        )
        feedback.draw(screen, bounds)
        status.draw(screen, view)
        pygame.display.flip()

    logger.info("Quit with score %d after %d ticks", session.score, engine.clock.tick_number)
    pygame.quit()


if __name__ == "__main__":
    main()
