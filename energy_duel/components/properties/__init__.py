"""Property component aggregates.

Components are immutable dataclasses stored per player on
:class:`energy_duel.state.State`. Replacing an instance is how a system
expresses a change between steps.
"""

from .energy import Energy
from .inventory import Inventory
from .item import Item
from .player import Player

__all__ = [
    "Energy",
    "Inventory",
    "Item",
    "Player",
]
