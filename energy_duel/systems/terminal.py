"""Game-over system.

Marks the state as over exactly once, when the player who was just hit runs
out of energy. Later systems and the reducer short-circuit on ``state.over``.
"""

import logging
from dataclasses import replace

from energy_duel.events import DefeatEvent
from energy_duel.state import State
from energy_duel.types import PlayerID
from energy_duel.utils.terminal import is_depleted, is_terminal_state

logger = logging.getLogger(__name__)


def defeat_system(state: State, actor_id: PlayerID, target_id: PlayerID) -> State:
    """Set ``over`` with ``actor_id`` as winner if ``target_id`` is depleted."""
    if is_terminal_state(state) or not is_depleted(state, target_id):
        return state

    logger.info("Player %s defeated player %s", actor_id, target_id)
    return replace(
        state,
        over=True,
        winner=actor_id,
        loser=target_id,
        events=state.events.append(DefeatEvent(winner_id=actor_id, loser_id=target_id)),
    )
