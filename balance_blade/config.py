"""Layout, timing and gameplay constants, plus command-line configuration."""
from __future__ import annotations

import argparse
from dataclasses import dataclass

# Window
TITLE = "Balance Blade"
SCREEN_W = 640
SCREEN_H = 480

# Timing
FPS = 60
TPS = 60

# Gameplay
SUCCESS_MARGIN = 0.10  # max relative area difference for a successful split
INITIAL_LIVES = 3
INITIAL_SIZE_RANGE = (100, 250)  # first-level width/height roll, upper bound exclusive

# Text
FONT_SIZE = 24
LINE_SPACING = 1.5

# Colors
BG_COLOR = (0, 0, 0)
SHAPE_COLOR = (255, 255, 255)
BAR_COLOR = (255, 0, 0)
BAR_THICKNESS = 2
TEXT_COLOR = (255, 255, 255)
FLASH_HIT = (0, 255, 100)
FLASH_MISS = (255, 60, 60)


@dataclass(frozen=True)
class GameConfig:
    seed: int | None = None
    tps: int = TPS
    fps: int = FPS
    font: str | None = None
    log_level: str = "INFO"


def parse_args(argv: list[str] | None = None) -> GameConfig:
    p = argparse.ArgumentParser(description="Balance Blade - split the shape in half")
    p.add_argument("--seed", type=int, default=None,
                   help="Seed for the first session (default: wall clock)")
    p.add_argument("--tps", type=int, default=TPS, help=f"Ticks per second (default: {TPS})")
    p.add_argument("--fps", type=int, default=FPS, help=f"Frame cap (default: {FPS})")
    p.add_argument("--font", type=str, default=None, metavar="TTF",
                   help="TrueType font for the status text (default: system monospace)")
    p.add_argument("--log-level", type=str, default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = p.parse_args(argv)
    if args.tps <= 0:
        p.error("--tps must be positive")
    if args.fps <= 0:
        p.error("--fps must be positive")
    return GameConfig(
        seed=args.seed,
        tps=args.tps,
        fps=args.fps,
        font=args.font,
        log_level=args.log_level,
    )
