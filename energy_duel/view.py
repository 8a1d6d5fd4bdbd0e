"""Toolkit-independent presentation model.

:class:`DuelSession` is what a UI binds its controls to. It owns the single
long-lived reference to the current :class:`State`, feeds every step's events
into the :class:`GameLog`, and tracks the win banner and modal. The rules
live entirely in :func:`energy_duel.step.step`; this module only observes the
resulting snapshots.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from energy_duel.actions import Attack, Command, Eat, Restart, UseItem
from energy_duel.config import GameConfig
from energy_duel.factories import new_game
from energy_duel.log import WELCOME_MESSAGE, GameLog
from energy_duel.state import State
from energy_duel.step import step
from energy_duel.types import ATTACK_AMOUNT, EAT_AMOUNT, ItemID, Outcome, PlayerID
from energy_duel.utils.terminal import opponent_of, outcome_of

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ItemOption:
    id: ItemID
    label: str


@dataclass(frozen=True)
class PlayerView:
    """Render-ready snapshot of one player.

    Attributes:
        id: Player id.
        name: Display name.
        energy: Current energy.
        max_energy: Energy cap.
        percent: Bar fill in ``[0, 100]``.
        outcome: Winner / loser marker once the game is over.
        items: Selectable inventory entries, in inventory order.
    """

    id: PlayerID
    name: str
    energy: int
    max_energy: int
    percent: float
    outcome: Optional[Outcome]
    items: List[ItemOption]


@dataclass(frozen=True)
class Modal:
    title: str
    body: str


def energy_percent(energy: int, max_energy: int) -> float:
    """Map ``0..max_energy`` onto a ``0..100`` bar width."""
    if max_energy <= 0:
        return 0.0
    return max(0.0, min(100.0, energy * 100.0 / max_energy))


class DuelSession:
    """Mutable holder of the current duel state plus its UI bookkeeping."""

    def __init__(
        self,
        state: State,
        eat_amount: int = EAT_AMOUNT,
        attack_amount: int = ATTACK_AMOUNT,
        log_capacity: int = 200,
    ) -> None:
        self._state = state
        self.eat_amount = eat_amount
        self.attack_amount = attack_amount
        self.log = GameLog(capacity=log_capacity)
        self.banner: Optional[str] = None
        self.modal: Optional[Modal] = None
        self._modal_presented = False
        self.log.add(WELCOME_MESSAGE)

    @classmethod
    def from_config(cls, config: GameConfig) -> "DuelSession":
        return cls(
            new_game(config),
            eat_amount=config.eat_amount,
            attack_amount=config.attack_amount,
        )

    @property
    def state(self) -> State:
        return self._state

    @property
    def controls_enabled(self) -> bool:
        return not self._state.over

    def dispatch(self, command: Command) -> State:
        """Apply ``command`` and update log, banner and modal."""
        previous = self._state
        self._state = step(previous, command)
        self.log.add_events(self._state)

        if not previous.over and self._state.over:
            self._announce_winner()
        elif isinstance(command, Restart):
            self.banner = None
            self.modal = None
        return self._state

    def eat(self, pid: PlayerID) -> State:
        return self.dispatch(Eat(player_id=pid, amount=self.eat_amount))

    def attack(self, pid: PlayerID) -> State:
        target = opponent_of(self._state, pid)
        return self.dispatch(
            Attack(attacker_id=pid, target_id=target, amount=self.attack_amount)
        )

    def use_item(self, pid: PlayerID, item_id: Optional[ItemID]) -> State:
        if item_id is None:
            return self._state
        target = opponent_of(self._state, pid)
        return self.dispatch(UseItem(player_id=pid, target_id=target, item_id=item_id))

    def restart(self) -> State:
        return self.dispatch(Restart())

    def modal_restart(self) -> State:
        state = self.restart()
        self.close_modal()
        return state

    def close_modal(self) -> None:
        self.modal = None

    def present_modal(self) -> Optional[Modal]:
        """Return the open modal the first time it is asked for, then None.

        A UI that opens a dismissible dialog calls this on every render so the
        dialog pops up once per game over, however it is later dismissed.
        """
        if self.modal is None or self._modal_presented:
            return None
        self._modal_presented = True
        return self.modal

    def player_view(self, pid: PlayerID) -> PlayerView:
        state = self._state
        energy = state.energy[pid]
        return PlayerView(
            id=pid,
            name=state.player[pid].name,
            energy=energy.amount,
            max_energy=energy.max_amount,
            percent=energy_percent(energy.amount, energy.max_amount),
            outcome=outcome_of(state, pid),
            items=[
                ItemOption(id=item.id, label=f"{item.name} (x{item.remaining_uses})")
                for item in state.inventory[pid].items
            ],
        )

    def player_views(self) -> List[PlayerView]:
        return [self.player_view(pid) for pid in self._state.player_order]

    def _announce_winner(self) -> None:
        state = self._state
        if state.winner is None or state.loser is None:
            return
        winner = state.player[state.winner].name
        loser = state.player[state.loser].name
        self.banner = f"{winner} WINS, {loser} LOSES"
        self.modal = Modal(
            title=f"{winner} WINS",
            body=f"{winner} defeated {loser}. Congratulations!",
        )
        self._modal_presented = False
        logger.info("Announcing winner %s", winner)
