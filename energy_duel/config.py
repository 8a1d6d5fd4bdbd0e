"""Game configuration.

``GameConfig`` gathers every tunable of a duel: who plays, what they carry
and how much eating and attacking are worth. It is a frozen value object so
UI code can hold it in session state and rebuild it with
:func:`dataclasses.replace`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Tuple

from energy_duel.components import Item
from energy_duel.types import (
    ATTACK_AMOUNT,
    EAT_AMOUNT,
    MAX_ENERGY,
    RESTART_ENERGY,
    ItemID,
    PlayerID,
)


@dataclass(frozen=True)
class PlayerSetup:
    """Starting setup of one player.

    Attributes:
        id: Stable identifier used in commands.
        name: Display name.
        items: Template ids copied into the starting inventory, in order.
    """

    id: PlayerID
    name: str
    items: Tuple[ItemID, ...] = ()


def _default_players() -> Tuple[PlayerSetup, ...]:
    return (
        PlayerSetup(id="p1", name="Yad", items=("apple", "laser")),
        PlayerSetup(id="p2", name="Diks", items=("burger", "dagger")),
    )


@dataclass(frozen=True)
class GameConfig:
    players: Tuple[PlayerSetup, ...] = field(default_factory=_default_players)
    start_energy: int = RESTART_ENERGY
    restart_energy: int = RESTART_ENERGY
    max_energy: int = MAX_ENERGY
    eat_amount: int = EAT_AMOUNT
    attack_amount: int = ATTACK_AMOUNT

    def validate(self, templates: Mapping[ItemID, Item]) -> None:
        """Raise ``ValueError`` describing the first invalid setting."""
        if len(self.players) != 2:
            raise ValueError(f"A duel needs exactly 2 players, got {len(self.players)}")
        ids = [p.id for p in self.players]
        if len(set(ids)) != len(ids):
            raise ValueError(f"Duplicate player ids: {ids}")
        if self.max_energy <= 0:
            raise ValueError(f"max_energy must be positive: {self.max_energy}")
        if not 0 < self.start_energy <= self.max_energy:
            raise ValueError(
                f"start_energy must be in (0, {self.max_energy}]: {self.start_energy}"
            )
        if not 0 < self.restart_energy <= self.max_energy:
            raise ValueError(
                f"restart_energy must be in (0, {self.max_energy}]: {self.restart_energy}"
            )
        if self.eat_amount < 0 or self.attack_amount < 0:
            raise ValueError("eat_amount and attack_amount must be non-negative")
        for setup in self.players:
            unknown = [i for i in setup.items if i not in templates]
            if unknown:
                raise ValueError(f"Unknown item templates for {setup.name}: {unknown}")
            if len(set(setup.items)) != len(setup.items):
                raise ValueError(f"Duplicate items for {setup.name}: {setup.items}")
            for item_id in setup.items:
                template = templates[item_id]
                if template.remaining_uses < 1:
                    raise ValueError(f"Item template {item_id!r} has no uses")
                if template.magnitude < 0:
                    raise ValueError(
                        f"Item template {item_id!r} has negative magnitude: {template.magnitude}"
                    )
