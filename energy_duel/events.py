"""Step descriptors.

Every effective command leaves one or more events on ``State.events``. They
describe *what happened* during the latest step so observers (the game log,
the UI) can react without diffing snapshots. Events are replaced, not
accumulated, on each call to :func:`energy_duel.step.step`.
"""

from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Union

from energy_duel.types import ItemID, ItemKind, PlayerID


class EventType(StrEnum):
    EAT = auto()
    ATTACK = auto()
    USE_ITEM = auto()
    DEFEAT = auto()
    RESTART = auto()


@dataclass(frozen=True)
class EatEvent:
    """``player_id`` ate ``amount`` and now has ``energy``."""

    player_id: PlayerID
    amount: int
    energy: int
    type: EventType = field(default=EventType.EAT, init=False)


@dataclass(frozen=True)
class AttackEvent:
    """``source_id`` hit ``target_id`` for ``amount``; ``energy`` is the target's."""

    source_id: PlayerID
    target_id: PlayerID
    amount: int
    energy: int
    type: EventType = field(default=EventType.ATTACK, init=False)


@dataclass(frozen=True)
class ItemUseEvent:
    """One use of an inventory item.

    Attributes:
        player_id: Item owner.
        target_id: Opponent the item was aimed at (only affected by weapons).
        item_id: Identifier of the used item.
        item_name: Display name, kept so the log can still name depleted items.
        kind: Food or weapon.
        amount: Heal or damage magnitude.
        energy: New energy of the affected player (owner for food, target for
            weapons).
        remaining_uses: Charges left after this use; zero means the item was
            removed from the inventory.
    """

    player_id: PlayerID
    target_id: PlayerID
    item_id: ItemID
    item_name: str
    kind: ItemKind
    amount: int
    energy: int
    remaining_uses: int
    type: EventType = field(default=EventType.USE_ITEM, init=False)


@dataclass(frozen=True)
class DefeatEvent:
    winner_id: PlayerID
    loser_id: PlayerID
    type: EventType = field(default=EventType.DEFEAT, init=False)


@dataclass(frozen=True)
class RestartEvent:
    energy: int
    type: EventType = field(default=EventType.RESTART, init=False)


Event = Union[EatEvent, AttackEvent, ItemUseEvent, DefeatEvent, RestartEvent]
