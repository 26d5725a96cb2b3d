"""Hit/miss flash around the shape after a split."""
from __future__ import annotations

import time
from typing import Any

import pygame

from balance_blade.config import FLASH_HIT, FLASH_MISS
from balance_blade.signals import SignalBus


class Flash:
    """A temporary colored outline that fades out."""

    def __init__(self, color: tuple[int, int, int], duration: float) -> None:
        self.color = color
        self.created = time.monotonic()
        self.duration = duration

    def alive(self) -> bool:
        return time.monotonic() - self.created < self.duration

    def alpha(self) -> float:
        elapsed = time.monotonic() - self.created
        return max(0.0, 1.0 - elapsed / self.duration)


class FeedbackLayer:
    """Listens for split signals and outlines the shape green or red."""

    def __init__(self, bus: SignalBus) -> None:
        self._flashes: list[Flash] = []
        bus.subscribe("split_scored", self._on_scored)
        bus.subscribe("split_missed", self._on_missed)

    def _on_scored(self, signal: str, data: dict[str, Any]) -> None:
        self._flashes.append(Flash(FLASH_HIT, 0.4))

    def _on_missed(self, signal: str, data: dict[str, Any]) -> None:
        self._flashes.append(Flash(FLASH_MISS, 0.6))

    @property
    def active(self) -> int:
        return sum(1 for flash in self._flashes if flash.alive())

    def draw(self, surface: pygame.Surface, bounds: pygame.Rect) -> None:
        alive: list[Flash] = []
        for flash in self._flashes:
            if not flash.alive():
                continue
            alive.append(flash)
            a = flash.alpha()
            r, g, b = flash.color
            color = (int(r * a), int(g * a), int(b * a))
            pygame.draw.rect(surface, color, bounds.inflate(12, 12), 3)
        self._flashes = alive
