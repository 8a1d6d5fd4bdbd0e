from dataclasses import dataclass
from pyrsistent import PVector

from .item import Item


@dataclass(frozen=True)
class Inventory:
    """Ordered collection of items owned by one player.

    The persistent ``PVector`` keeps insertion order (the order the item
    selector shows) and is shared cheaply across state copies.

    Attributes:
        items:
            Items currently held; none of them has zero remaining uses.
    """

    items: PVector[Item]
