from dataclasses import replace

from energy_duel.events import EatEvent
from energy_duel.state import State
from energy_duel.types import PlayerID
from energy_duel.utils.energy import apply_heal


def eat_system(state: State, player_id: PlayerID, amount: int) -> State:
    """Raise ``player_id``'s energy by ``amount``, capped at its maximum."""
    energy = apply_heal(state.energy, player_id, amount)
    event = EatEvent(
        player_id=player_id, amount=amount, energy=energy[player_id].amount
    )
    return replace(state, energy=energy, events=state.events.append(event))
