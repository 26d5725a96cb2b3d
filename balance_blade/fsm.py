"""Finite state machine primitives: component, guard registry, system factory."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from balance_blade.session import Session
    from balance_blade.types import TickContext


@dataclass
class FSM:
    """Finite state machine. Transition table maps states to guard/target pairs.

    Edges are tried in order and the first guard that passes wins. At most
    one transition fires per tick.
    """

    state: str
    transitions: dict[str, list[list[str]]]


class FSMGuards:
    """Maps guard name strings to callable predicates."""

    def __init__(self) -> None:
        self._guards: dict[str, Callable[[Session], bool]] = {}

    def register(self, name: str, fn: Callable[[Session], bool]) -> None:
        """Register a named guard. Overwrites if already registered."""
        self._guards[name] = fn

    def check(self, name: str, session: Session) -> bool:
        """Evaluate a guard. Raises KeyError if not registered."""
        return self._guards[name](session)

    def has(self, name: str) -> bool:
        return name in self._guards

    def names(self) -> list[str]:
        return list(self._guards)


def find_transition(fsm: FSM, guards: FSMGuards, session: Session) -> str | None:
    """Return the target of the first passing edge out of ``fsm.state``."""
    for guard_name, target in fsm.transitions.get(fsm.state, []):
        if guards.check(guard_name, session):
            return target
    return None


def make_fsm_system(
    guards: FSMGuards,
    on_transition: Callable[[Session, TickContext, str, str], None] | None = None,
) -> Callable[[Session, TickContext], None]:
    """Return a system that evaluates the session's FSM once per tick.

    ``on_transition`` runs after the state has been updated, so it may
    overwrite ``fsm.state`` again (e.g. when a restart resets the machine).
    """

    def fsm_system(session: Session, ctx: TickContext) -> None:
        fsm = session.fsm
        target = find_transition(fsm, guards, session)
        if target is None:
            return
        old = fsm.state
        fsm.state = target
        if on_transition is not None:
            on_transition(session, ctx, old, target)

    return fsm_system
