"""Energy clamping helpers."""

from pyrsistent import PMap

from energy_duel.components import Energy
from energy_duel.types import MAX_ENERGY, PlayerID


def gain_energy(energy: int, amount: int, max_energy: int = MAX_ENERGY) -> int:
    """Return ``energy + amount`` capped at ``max_energy``."""
    if amount < 0:
        raise ValueError(f"Energy gain must be non-negative: {amount}")
    return min(energy + amount, max_energy)


def lose_energy(energy: int, amount: int) -> int:
    """Return ``energy - amount`` floored at zero."""
    if amount < 0:
        raise ValueError(f"Energy loss must be non-negative: {amount}")
    return max(energy - amount, 0)


def apply_heal(
    energy_dict: PMap[PlayerID, Energy], pid: PlayerID, amount: int
) -> PMap[PlayerID, Energy]:
    """Heal ``pid`` by ``amount`` (clamped to its maximum)."""
    current = energy_dict[pid]
    return energy_dict.set(
        pid,
        Energy(
            amount=gain_energy(current.amount, amount, current.max_amount),
            max_amount=current.max_amount,
        ),
    )


def apply_damage(
    energy_dict: PMap[PlayerID, Energy], pid: PlayerID, amount: int
) -> PMap[PlayerID, Energy]:
    """Damage ``pid`` by ``amount`` (clamped to zero)."""
    current = energy_dict[pid]
    return energy_dict.set(
        pid,
        Energy(
            amount=lose_energy(current.amount, amount),
            max_amount=current.max_amount,
        ),
    )


def reset_energy(
    energy_dict: PMap[PlayerID, Energy], amount: int
) -> PMap[PlayerID, Energy]:
    """Set every player's energy to ``amount`` (clamped to each maximum)."""
    for pid, current in energy_dict.items():
        energy_dict = energy_dict.set(
            pid,
            Energy(
                amount=max(0, min(amount, current.max_amount)),
                max_amount=current.max_amount,
            ),
        )
    return energy_dict
