from dataclasses import dataclass

from energy_duel.types import MAX_ENERGY


@dataclass(frozen=True)
class Energy:
    """Current and maximum energy of a player.

    Attributes:
        amount:
            Current energy. Systems clamp this to ``[0, max_amount]``; reaching
            zero ends the game for the owner.
        max_amount:
            Upper bound for ``amount``; also used to size the energy bar.
    """

    amount: int
    max_amount: int = MAX_ENERGY
