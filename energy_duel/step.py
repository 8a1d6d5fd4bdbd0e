"""State reducer and step orchestration.

The exported :func:`step` is the only public entry point for gameplay
progression. It is pure: it returns a *new* :class:`energy_duel.state.State`
and never touches the input.

Ordering:

1. Clear the previous step's ``events``.
2. Dispatch on the command's ``action`` tag. ``Restart`` is always
    accepted; gameplay commands are ignored once the game is over.
3. Validate player ids and amounts, then run the command's system.
4. After damage (attack or weapon item) run ``defeat_system``.
5. Bump ``turn`` if the command had any effect.
"""

import logging
from dataclasses import replace
from typing import cast
from pyrsistent import pvector

from energy_duel.actions import GAMEPLAY_ACTIONS, Action, Attack, Command, Eat, UseItem
from energy_duel.state import State
from energy_duel.systems.attack import attack_system
from energy_duel.systems.eat import eat_system
from energy_duel.systems.item import use_item_system
from energy_duel.systems.restart import restart_system
from energy_duel.systems.terminal import defeat_system
from energy_duel.types import PlayerID
from energy_duel.utils.terminal import is_terminal_state, is_valid_player

logger = logging.getLogger(__name__)


def step(state: State, command: Command) -> State:
    """Advance the duel by one command.

    Args:
        state (State): Previous immutable state.
        command (Command): ``Eat``, ``Attack``, ``UseItem`` or ``Restart``.

    Returns:
        State: Next state snapshot with ``events`` describing what happened.
            Ignored commands (game over, missing item) return the input state
            with ``events`` emptied.

    Raises:
        ValueError: If the command is not recognized, names an unknown player,
            targets its own issuer or carries a negative amount.
    """
    state = replace(state, events=pvector())

    action = getattr(command, "action", None)

    if action == Action.RESTART:
        return _after_step(restart_system(state))

    if is_terminal_state(state):
        logger.debug("Game over; ignoring %r", command)
        return state

    if action not in GAMEPLAY_ACTIONS:
        raise ValueError(f"Command is not valid: {command!r}")

    if action == Action.EAT:
        next_state = _step_eat(state, cast(Eat, command))
    elif action == Action.ATTACK:
        next_state = _step_attack(state, cast(Attack, command))
    else:
        next_state = _step_use_item(state, cast(UseItem, command))

    if not next_state.events:
        return state
    return _after_step(next_state)


def _step_eat(state: State, command: Eat) -> State:
    _check_player(state, command.player_id)
    _check_amount(command.amount)
    logger.debug("Player %s eats %d", command.player_id, command.amount)
    return eat_system(state, command.player_id, command.amount)


def _step_attack(state: State, command: Attack) -> State:
    _check_pair(state, command.attacker_id, command.target_id)
    _check_amount(command.amount)
    logger.debug(
        "Player %s attacks %s for %d",
        command.attacker_id,
        command.target_id,
        command.amount,
    )
    state = attack_system(state, command.attacker_id, command.target_id, command.amount)
    return defeat_system(state, command.attacker_id, command.target_id)


def _step_use_item(state: State, command: UseItem) -> State:
    _check_pair(state, command.player_id, command.target_id)
    logger.debug("Player %s uses %r", command.player_id, command.item_id)
    state = use_item_system(state, command.player_id, command.target_id, command.item_id)
    # Food can never deplete the target, so this only fires for weapons.
    return defeat_system(state, command.player_id, command.target_id)


def _after_step(state: State) -> State:
    return replace(state, turn=state.turn + 1)


def _check_player(state: State, pid: PlayerID) -> None:
    if not is_valid_player(state, pid):
        raise ValueError(f"Unknown player: {pid!r}")


def _check_pair(state: State, actor_id: PlayerID, target_id: PlayerID) -> None:
    _check_player(state, actor_id)
    _check_player(state, target_id)
    if actor_id == target_id:
        raise ValueError(f"Player {actor_id!r} cannot target themselves")


def _check_amount(amount: int) -> None:
    if amount < 0:
        raise ValueError(f"Amount must be non-negative: {amount}")
