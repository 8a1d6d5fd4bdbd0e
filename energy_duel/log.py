"""Game log: event messages and a bounded, newest-first history."""

from __future__ import annotations

import logging
from collections import deque
from typing import Deque, List

from energy_duel.events import (
    AttackEvent,
    DefeatEvent,
    EatEvent,
    Event,
    ItemUseEvent,
    RestartEvent,
)
from energy_duel.state import State
from energy_duel.types import ItemKind, PlayerID

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = "Game ready. Click Eat or Attack to play."


def _name(state: State, pid: PlayerID) -> str:
    player = state.player.get(pid)
    return player.name if player is not None else pid


def format_event(state: State, event: Event) -> str:
    """Render ``event`` as a log line, resolving names from ``state``."""
    if isinstance(event, EatEvent):
        return f"{_name(state, event.player_id)} eats (+{event.amount}). Energy: {event.energy}"
    if isinstance(event, AttackEvent):
        target = _name(state, event.target_id)
        return (
            f"{_name(state, event.source_id)} attacks {target} (-{event.amount}). "
            f"{target} energy: {event.energy}"
        )
    if isinstance(event, ItemUseEvent):
        user = _name(state, event.player_id)
        if event.kind == ItemKind.FOOD:
            return f"{user} uses {event.item_name} (+{event.amount})"
        return (
            f"{user} attacks {_name(state, event.target_id)} "
            f"with {event.item_name} (-{event.amount})"
        )
    if isinstance(event, DefeatEvent):
        return f"{_name(state, event.loser_id)} has been defeated!"
    if isinstance(event, RestartEvent):
        return "Game reset. Ready for another round!"
    raise ValueError(f"Unknown event: {event!r}")


class GameLog:
    """In-memory log of human-readable lines, most recent first.

    Keeps at most ``capacity`` lines; the oldest are dropped beyond that.
    """

    def __init__(self, capacity: int = 200) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._lines: Deque[str] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._lines.maxlen or 0

    def __len__(self) -> int:
        return len(self._lines)

    def add(self, line: str) -> None:
        self._lines.appendleft(line)
        logger.debug("Log: %s", line)

    def add_events(self, state: State) -> List[str]:
        """Append one line per event of ``state``'s latest step, in order."""
        lines = [format_event(state, event) for event in state.events]
        for line in lines:
            self.add(line)
        return lines

    def lines(self) -> List[str]:
        return list(self._lines)

    def clear(self) -> None:
        self._lines.clear()
