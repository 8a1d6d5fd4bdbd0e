"""Item use system.

Resolves one use of an inventory item:

1. Food heals the owner by the item's magnitude (capped at max energy).
2. Weapons damage the target by the item's magnitude (floored at zero).
3. The item loses one use and leaves the inventory when none remain.

Using an item the owner does not hold (e.g. a stale selection after the item
ran out) is a silent no-op.
"""

import logging
from dataclasses import replace

from energy_duel.events import ItemUseEvent
from energy_duel.state import State
from energy_duel.types import ItemID, ItemKind, PlayerID
from energy_duel.utils.energy import apply_damage, apply_heal
from energy_duel.utils.inventory import consume_item, find_item

logger = logging.getLogger(__name__)


def use_item_system(
    state: State, player_id: PlayerID, target_id: PlayerID, item_id: ItemID
) -> State:
    """Apply and consume ``item_id`` from ``player_id``'s inventory.

    Arguments:
        state:
            Current immutable state.
        player_id:
            Item owner.
        target_id:
            Opponent hit by weapons.
        item_id:
            Identifier of the item to use.

    Returns:
        State
            Updated state with energy, inventory and events patched, or the
            input state unchanged when the item is not held.
    """
    inventory = state.inventory[player_id]
    item = find_item(inventory, item_id)
    if item is None:
        logger.debug("Player %s has no item %r; ignoring", player_id, item_id)
        return state

    energy = state.energy
    if item.kind == ItemKind.FOOD:
        energy = apply_heal(energy, player_id, item.magnitude)
        affected_id = player_id
    elif item.kind == ItemKind.WEAPON:
        energy = apply_damage(energy, target_id, item.magnitude)
        affected_id = target_id
    else:
        raise ValueError(f"Item {item.id!r} has unknown kind: {item.kind}")

    inventory = consume_item(inventory, item_id)
    event = ItemUseEvent(
        player_id=player_id,
        target_id=target_id,
        item_id=item.id,
        item_name=item.name,
        kind=item.kind,
        amount=item.magnitude,
        energy=energy[affected_id].amount,
        remaining_uses=item.remaining_uses - 1,
    )
    return replace(
        state,
        energy=energy,
        inventory=state.inventory.set(player_id, inventory),
        events=state.events.append(event),
    )
