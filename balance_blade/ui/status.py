"""Status text: score, lives and the state prompt."""
from __future__ import annotations

import pygame

from balance_blade.config import FONT_SIZE, LINE_SPACING, TEXT_COLOR
from balance_blade.session import GameState, SessionView


def status_text(view: SessionView) -> str:
    lines = [f"Score: {view.score}", f"Lives: {view.lives}"]
    if view.state is GameState.PLAYING:
        lines.append("State: Playing")
    elif view.lives <= 0:
        lines += ["State: Game Over", "Click to restart"]
    else:
        lines += [f"Area Ratio: {view.area_ratio:.2f}", "Click to continue"]
    return "\n".join(lines)


def load_font(path: str | None, size: int = FONT_SIZE) -> pygame.font.Font:
    """Load the status font. A missing or unreadable file propagates."""
    if path is None:
        return pygame.font.SysFont("monospace", size)
    return pygame.font.Font(path, size)


class StatusPanel:
    """Multi-line status block in the top-left corner."""

    def __init__(self, font: pygame.font.Font, line_spacing: float = LINE_SPACING) -> None:
        self._font = font
        self._line_h = int(font.get_linesize() * line_spacing)

    def draw(self, surface: pygame.Surface, view: SessionView) -> None:
        for i, line in enumerate(status_text(view).splitlines()):
            surf = self._font.render(line, True, TEXT_COLOR)
            surface.blit(surf, (8, 8 + i * self._line_h))
