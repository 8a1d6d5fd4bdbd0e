"""Inventory manipulation helpers."""

from dataclasses import replace
from typing import Iterable, Optional
from pyrsistent import pvector

from energy_duel.components import Inventory, Item
from energy_duel.types import ItemID


def make_inventory(templates: Iterable[Item]) -> Inventory:
    """Build an inventory holding fresh copies of ``templates``.

    Raises:
        ValueError: If two templates share an id.
    """
    inventory = Inventory(items=pvector())
    for template in templates:
        if find_item(inventory, template.id) is not None:
            raise ValueError(f"Duplicate item id in inventory: {template.id!r}")
        inventory = add_item(inventory, replace(template))
    return inventory


def find_item(inventory: Inventory, item_id: ItemID) -> Optional[Item]:
    """Return the item with ``item_id`` or None."""
    return next((item for item in inventory.items if item.id == item_id), None)


def add_item(inventory: Inventory, item: Item) -> Inventory:
    """Return a new inventory with ``item`` appended."""
    return Inventory(items=inventory.items.append(item))


def remove_item(inventory: Inventory, item_id: ItemID) -> Inventory:
    """Return a new inventory without ``item_id``."""
    return Inventory(
        items=pvector(item for item in inventory.items if item.id != item_id)
    )


def consume_item(inventory: Inventory, item_id: ItemID) -> Inventory:
    """Spend one use of ``item_id``; drop it once no uses remain.

    Unknown ids leave the inventory unchanged.
    """
    for index, item in enumerate(inventory.items):
        if item.id != item_id:
            continue
        remaining = item.remaining_uses - 1
        if remaining <= 0:
            return remove_item(inventory, item_id)
        return Inventory(
            items=inventory.items.set(index, replace(item, remaining_uses=remaining))
        )
    return inventory
