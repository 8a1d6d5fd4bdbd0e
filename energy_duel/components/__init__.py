"""Aggregate import surface for the component dataclasses.

Example::

    from energy_duel.components import Energy, Inventory, Item
"""

from .properties import Energy
from .properties import Inventory
from .properties import Item
from .properties import Player

__all__ = [
    "Energy",
    "Inventory",
    "Item",
    "Player",
]
