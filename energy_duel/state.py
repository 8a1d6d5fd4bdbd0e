"""Core immutable duel ``State`` dataclass.

This module defines the frozen :class:`State` object that represents the
whole game at a single point in time. Systems are pure functions that take a
previous ``State`` plus a command and return a *new* ``State``; nothing is
mutated in place. The presentation layer holds the only long-lived reference
and swaps it after each step.

Design notes:

* Component stores are **persistent maps** (``pyrsistent.PMap``) keyed by
    ``PlayerID``. Every player has all three components.
* ``player_order`` fixes who is "player 1" and "player 2" for display.
* ``over`` together with ``winner`` / ``loser`` is the terminal marker. The
    reducer short-circuits gameplay commands on terminal states; only a
    restart clears it.
* ``events`` holds the descriptors emitted by the latest step only.
"""

from dataclasses import dataclass
from typing import Any, Optional
from pyrsistent import PMap, PVector, pmap, pvector

from energy_duel.components import Energy, Inventory, Player
from energy_duel.events import Event
from energy_duel.types import RESTART_ENERGY, PlayerID


@dataclass(frozen=True)
class State:
    """Immutable duel state.

    Attributes:
        player (PMap[PlayerID, Player]): Display identity per player.
        energy (PMap[PlayerID, Energy]): Energy pools.
        inventory (PMap[PlayerID, Inventory]): Consumable items per player.
        player_order (PVector[PlayerID]): Stable ordering of the two players.
        restart_energy (int): Energy both players get back on restart.
        turn (int): Count of effective commands (0-based).
        over (bool): True once a player's energy reached zero.
        winner (PlayerID | None): Player who landed the final blow.
        loser (PlayerID | None): Player whose energy reached zero.
        events (PVector[Event]): Descriptors of the latest step.
    """

    # Components
    player: PMap[PlayerID, Player] = pmap()
    energy: PMap[PlayerID, Energy] = pmap()
    inventory: PMap[PlayerID, Inventory] = pmap()

    # Setup
    player_order: PVector[PlayerID] = pvector()
    restart_energy: int = RESTART_ENERGY

    # Status
    turn: int = 0
    over: bool = False
    winner: Optional[PlayerID] = None
    loser: Optional[PlayerID] = None
    events: PVector[Event] = pvector()

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse serialization of non-empty fields.

        Returns a persistent map of field name to value for every field that
        is a non-empty container or a non-``None`` scalar. Handy for the debug
        view without dumping empty stores.
        """
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            value = getattr(self, field)
            if value is None:
                continue
            if isinstance(value, (type(pmap()), type(pvector()))) and len(value) == 0:
                continue
            description = description.set(field, value)
        return description
