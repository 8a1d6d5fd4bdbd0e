from dataclasses import dataclass

from energy_duel.types import ItemID, ItemKind


@dataclass(frozen=True)
class Item:
    """Consumable inventory entry.

    Items are value objects: spending a use produces a new ``Item`` with a
    lower ``remaining_uses``. Templates are copied per player so two players
    never share a use counter.

    Attributes:
        id:
            Identifier, unique within a single inventory.
        name:
            Label shown in the item selector and the log.
        kind:
            ``FOOD`` heals the user, ``WEAPON`` damages the target.
        magnitude:
            Heal or damage amount.
        remaining_uses:
            Charges left. An item is dropped from the inventory when this
            reaches zero.
    """

    id: ItemID
    name: str
    kind: ItemKind
    magnitude: int
    remaining_uses: int = 1
