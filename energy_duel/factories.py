"""Item templates and game construction.

Templates are immutable :class:`Item` blueprints. :func:`new_game` copies them
into each player's inventory so use counters are never shared.
"""

from __future__ import annotations

from typing import Dict, Optional
from pyrsistent import pmap, pvector

from energy_duel.components import Energy, Item, Player
from energy_duel.config import GameConfig
from energy_duel.state import State
from energy_duel.types import ItemID, ItemKind
from energy_duel.utils.inventory import make_inventory


def create_food(item_id: ItemID, name: str, heal: int, uses: int = 1) -> Item:
    """Food item healing its user by ``heal``."""
    return Item(
        id=item_id, name=name, kind=ItemKind.FOOD, magnitude=heal, remaining_uses=uses
    )


def create_weapon(item_id: ItemID, name: str, damage: int, uses: int = 1) -> Item:
    """Weapon item damaging the opponent by ``damage``."""
    return Item(
        id=item_id,
        name=name,
        kind=ItemKind.WEAPON,
        magnitude=damage,
        remaining_uses=uses,
    )


APPLE = create_food("apple", "Apple +20", heal=20, uses=3)
BURGER = create_food("burger", "Burger +35", heal=35, uses=1)
LASER = create_weapon("laser", "Laser Gun -25", damage=25, uses=2)
DAGGER = create_weapon("dagger", "Dagger -12", damage=12, uses=4)

ITEM_TEMPLATE_REGISTRY: Dict[ItemID, Item] = {
    item.id: item for item in (APPLE, BURGER, LASER, DAGGER)
}
"""Item id -> template mapping for game configuration."""


def new_game(
    config: Optional[GameConfig] = None,
    templates: Optional[Dict[ItemID, Item]] = None,
) -> State:
    """Build the initial ``State`` for ``config``.

    Args:
        config (GameConfig | None): Game settings; defaults to ``GameConfig()``.
        templates (dict | None): Item template registry; defaults to
            ``ITEM_TEMPLATE_REGISTRY``.

    Raises:
        ValueError: If the config is invalid for the template registry.
    """
    config = config or GameConfig()
    templates = templates if templates is not None else ITEM_TEMPLATE_REGISTRY
    config.validate(templates)

    player = {}
    energy = {}
    inventory = {}
    for setup in config.players:
        player[setup.id] = Player(name=setup.name)
        energy[setup.id] = Energy(
            amount=config.start_energy, max_amount=config.max_energy
        )
        inventory[setup.id] = make_inventory(templates[i] for i in setup.items)

    return State(
        player=pmap(player),
        energy=pmap(energy),
        inventory=pmap(inventory),
        player_order=pvector(setup.id for setup in config.players),
        restart_energy=config.restart_energy,
    )
