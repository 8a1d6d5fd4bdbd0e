import logging
from dataclasses import replace

from energy_duel.events import RestartEvent
from energy_duel.state import State
from energy_duel.utils.energy import reset_energy

logger = logging.getLogger(__name__)


def restart_system(state: State) -> State:
    """Reset energies and clear the terminal markers.

    Inventories are left as they are: consumed items stay consumed across
    rounds.
    """
    logger.info("Restarting duel at energy %d", state.restart_energy)
    return replace(
        state,
        energy=reset_energy(state.energy, state.restart_energy),
        over=False,
        winner=None,
        loser=None,
        events=state.events.append(RestartEvent(energy=state.restart_energy)),
    )
