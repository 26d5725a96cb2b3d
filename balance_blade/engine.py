"""Engine - runs the session's systems once per tick."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from balance_blade.clock import Clock
from balance_blade.types import System

if TYPE_CHECKING:
    from balance_blade.session import Session


class Engine:
    """Steps a single :class:`Session` through an ordered list of systems.

    The engine owns no timer. The presentation layer calls :meth:`step` once
    per frame (or per accumulated tick interval) with the button state it
    sampled for that tick.
    """

    def __init__(self, session: Session, tps: int = 60) -> None:
        self._clock = Clock(tps)
        self._session = session
        self._systems: list[System] = []

    @property
    def session(self) -> Session:
        return self._session

    @property
    def clock(self) -> Clock:
        return self._clock

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def step(self, pressed: bool = False) -> None:
        self._clock.advance()
        ctx = self._clock.context(pressed)
        for system in self._systems:
            system(self._session, ctx)

    def run(self, inputs: Iterable[bool]) -> None:
        """Advance one tick per sampled button state in ``inputs``."""
        for pressed in inputs:
            self.step(pressed)
