"""Terminal condition helper predicates."""

from typing import Optional

from energy_duel.state import State
from energy_duel.types import Outcome, PlayerID


def is_valid_player(state: State, pid: PlayerID) -> bool:
    """Return True if ``pid`` is a registered player with energy."""
    return pid in state.player and pid in state.energy


def is_terminal_state(state: State) -> bool:
    """Return True once the game is over."""
    return state.over


def is_depleted(state: State, pid: PlayerID) -> bool:
    """Return True if ``pid`` has no energy left."""
    return state.energy[pid].amount == 0


def opponent_of(state: State, pid: PlayerID) -> PlayerID:
    """Return the other player's id.

    Raises:
        ValueError: If ``pid`` is unknown or no opponent exists.
    """
    others = [other for other in state.player_order if other != pid]
    if pid not in state.player_order or not others:
        raise ValueError(f"No opponent for player {pid!r}")
    return others[0]


def outcome_of(state: State, pid: PlayerID) -> Optional[Outcome]:
    """Return the final standing of ``pid`` or None while the game runs."""
    if not state.over:
        return None
    if pid == state.winner:
        return Outcome.WINNER
    if pid == state.loser:
        return Outcome.LOSER
    return None
