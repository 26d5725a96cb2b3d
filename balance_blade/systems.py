"""System factories and the standard engine wiring."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from balance_blade.config import TPS
from balance_blade.engine import Engine
from balance_blade.fsm import make_fsm_system
from balance_blade.session import GameState
from balance_blade.signals import make_signal_system
from balance_blade.transitions import guards, on_transition

if TYPE_CHECKING:
    from balance_blade.session import Session
    from balance_blade.types import TickContext


def make_input_system() -> Callable[[Session, TickContext], None]:
    """Turn the sampled button state into a one-tick ``clicked`` flag."""

    def input_system(session: Session, ctx: TickContext) -> None:
        session.clicked = session.latch.update(ctx.pressed)

    return input_system


def make_bar_system() -> Callable[[Session, TickContext], None]:
    def bar_system(session: Session, ctx: TickContext) -> None:
        if session.state is GameState.PLAYING:
            session.advance_bar()

    return bar_system


def build_engine(session: Session, tps: int = TPS) -> Engine:
    """Wire input, bar movement, the FSM and signal delivery (order matters)."""
    engine = Engine(session, tps=tps)
    engine.add_system(make_input_system())
    engine.add_system(make_bar_system())
    engine.add_system(make_fsm_system(guards, on_transition=on_transition))
    engine.add_system(make_signal_system(session.bus))
    return engine
