"""Two-player energy duel engine.

The engine is a pure reducer over an immutable :class:`State`; see
:mod:`energy_duel.step`. Presentation helpers live in :mod:`energy_duel.view`.
"""

from energy_duel.actions import Action, Attack, Command, Eat, Restart, UseItem
from energy_duel.config import GameConfig
from energy_duel.factories import new_game
from energy_duel.state import State
from energy_duel.step import step

__all__ = [
    "Action",
    "Attack",
    "Command",
    "Eat",
    "GameConfig",
    "Restart",
    "State",
    "UseItem",
    "new_game",
    "step",
]
