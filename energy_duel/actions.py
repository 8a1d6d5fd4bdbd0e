"""Player commands.

Each UI control maps to one command dataclass; together they form the
``Command`` tagged union consumed by :func:`energy_duel.step.step`. The
:class:`Action` string enum names each kind and doubles as the ``type`` tag
carried by emitted events.
"""

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import ClassVar, Union

from energy_duel.types import ATTACK_AMOUNT, EAT_AMOUNT, ItemID, PlayerID


class Action(StrEnum):
    """String enum of command kinds.

    Members:
        EAT: Player gains energy.
        ATTACK: Player removes energy from the opponent.
        USE_ITEM: Player consumes one use of an inventory item.
        RESTART: Both players go back to the restart energy.
    """

    EAT = auto()
    ATTACK = auto()
    USE_ITEM = auto()
    RESTART = auto()


GAMEPLAY_ACTIONS = [Action.EAT, Action.ATTACK, Action.USE_ITEM]


@dataclass(frozen=True)
class Eat:
    action: ClassVar[Action] = Action.EAT

    player_id: PlayerID
    amount: int = EAT_AMOUNT


@dataclass(frozen=True)
class Attack:
    action: ClassVar[Action] = Action.ATTACK

    attacker_id: PlayerID
    target_id: PlayerID
    amount: int = ATTACK_AMOUNT


@dataclass(frozen=True)
class UseItem:
    """Use one charge of ``item_id`` from ``player_id``'s inventory.

    Food heals ``player_id``; weapons damage ``target_id``.
    """

    action: ClassVar[Action] = Action.USE_ITEM

    player_id: PlayerID
    target_id: PlayerID
    item_id: ItemID


@dataclass(frozen=True)
class Restart:
    action: ClassVar[Action] = Action.RESTART


Command = Union[Eat, Attack, UseItem, Restart]
