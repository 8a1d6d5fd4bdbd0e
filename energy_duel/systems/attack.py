from dataclasses import replace

from energy_duel.events import AttackEvent
from energy_duel.state import State
from energy_duel.types import PlayerID
from energy_duel.utils.energy import apply_damage


def attack_system(
    state: State, attacker_id: PlayerID, target_id: PlayerID, amount: int
) -> State:
    """Lower ``target_id``'s energy by ``amount``, floored at zero."""
    energy = apply_damage(state.energy, target_id, amount)
    event = AttackEvent(
        source_id=attacker_id,
        target_id=target_id,
        amount=amount,
        energy=energy[target_id].amount,
    )
    return replace(state, energy=energy, events=state.events.append(event))
