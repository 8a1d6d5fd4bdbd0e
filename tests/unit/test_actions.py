from energy_duel.actions import GAMEPLAY_ACTIONS, Action, Attack, Eat, Restart, UseItem
from energy_duel.step import step
from tests.test_utils import energy_of, make_duel_state


def test_each_command_carries_its_action() -> None:
    commands = [
        Eat(player_id="p1"),
        Attack(attacker_id="p1", target_id="p2"),
        UseItem(player_id="p1", target_id="p2", item_id="apple"),
        Restart(),
    ]
    assert [c.action for c in commands] == list(Action)


def test_gameplay_actions_exclude_restart() -> None:
    assert Action.RESTART not in GAMEPLAY_ACTIONS
    assert set(GAMEPLAY_ACTIONS) == {Action.EAT, Action.ATTACK, Action.USE_ITEM}


def test_step_dispatches_on_action_tag() -> None:
    class QuickEat(Eat):
        """Subclass keeps the ``EAT`` tag, so step treats it as eating."""

    state, players = make_duel_state()
    new_state = step(state, QuickEat(player_id=players["p1"], amount=7))
    assert energy_of(new_state, players["p1"]) == 57
