"""FSM guards and on_transition callback for the session's play loop."""
from __future__ import annotations

from typing import TYPE_CHECKING

from balance_blade.fsm import FSMGuards
from balance_blade.session import GameState

if TYPE_CHECKING:
    from balance_blade.session import Session
    from balance_blade.types import TickContext

guards = FSMGuards()
guards.register("clicked", lambda s: s.clicked)


def on_transition(session: Session, ctx: TickContext, old: str, new: str) -> None:
    if new == GameState.RESULT.value:
        session.evaluate_split()
    elif old == GameState.RESULT.value and new == GameState.PLAYING.value:
        session.continue_play()
