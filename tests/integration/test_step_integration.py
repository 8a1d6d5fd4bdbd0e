import random
from dataclasses import replace

import pytest

from energy_duel.actions import Attack, Eat, Restart, UseItem
from energy_duel.events import AttackEvent, DefeatEvent, EatEvent, RestartEvent
from energy_duel.factories import new_game
from energy_duel.step import step
from energy_duel.types import ItemKind
from tests.test_utils import energy_of, item_ids, make_duel_state, make_item


def test_step_eat_bumps_turn() -> None:
    state, players = make_duel_state()
    new_state = step(state, Eat(player_id=players["p1"]))
    assert energy_of(new_state, players["p1"]) == 60
    assert new_state.turn == 1
    assert isinstance(new_state.events[0], EatEvent)


def test_step_attack_default_amount() -> None:
    state, players = make_duel_state()
    new_state = step(state, Attack(attacker_id=players["p2"], target_id=players["p1"]))
    assert energy_of(new_state, players["p1"]) == 45


def test_ten_attacks_end_the_game() -> None:
    state, players = make_duel_state()
    for _ in range(10):
        state = step(state, Attack(attacker_id=players["p1"], target_id=players["p2"], amount=5))
    assert energy_of(state, players["p2"]) == 0
    assert state.over
    assert state.winner == players["p1"]
    assert state.loser == players["p2"]
    assert [type(e) for e in state.events] == [AttackEvent, DefeatEvent]


def test_nine_attacks_do_not_end_the_game() -> None:
    state, players = make_duel_state()
    for _ in range(9):
        state = step(state, Attack(attacker_id=players["p1"], target_id=players["p2"], amount=5))
    assert energy_of(state, players["p2"]) == 5
    assert not state.over


def test_apple_at_ninety_is_clamped_and_removed() -> None:
    apple = make_item("apple", ItemKind.FOOD, 20, uses=1)
    state, players = make_duel_state(p1_energy=90, p1_items=[apple])
    new_state = step(
        state, UseItem(player_id=players["p1"], target_id=players["p2"], item_id="apple")
    )
    assert energy_of(new_state, players["p1"]) == 100
    assert item_ids(new_state, players["p1"]) == []


def test_weapon_item_can_end_the_game() -> None:
    laser = make_item("laser", ItemKind.WEAPON, 25, uses=2)
    state, players = make_duel_state(p1_items=[laser])
    cmd = UseItem(player_id=players["p1"], target_id=players["p2"], item_id="laser")
    state = step(step(state, cmd), cmd)
    assert energy_of(state, players["p2"]) == 0
    assert state.over
    assert state.winner == players["p1"]
    assert item_ids(state, players["p1"]) == []


def test_missing_item_leaves_state_and_turn() -> None:
    state, players = make_duel_state()
    state = step(state, Eat(player_id=players["p1"]))
    new_state = step(
        state, UseItem(player_id=players["p1"], target_id=players["p2"], item_id="apple")
    )
    assert new_state.turn == state.turn
    assert new_state.energy == state.energy
    assert len(new_state.events) == 0


def test_actions_ignored_after_game_over() -> None:
    dagger = make_item("dagger", ItemKind.WEAPON, 12, uses=4)
    state, players = make_duel_state(p2_energy=5, p1_items=[dagger], p2_items=[dagger])
    state = step(state, Attack(attacker_id=players["p1"], target_id=players["p2"]))
    assert state.over

    commands = [
        Eat(player_id=players["p1"]),
        Eat(player_id=players["p2"]),
        Attack(attacker_id=players["p1"], target_id=players["p2"]),
        Attack(attacker_id=players["p2"], target_id=players["p1"]),
        UseItem(player_id=players["p1"], target_id=players["p2"], item_id="dagger"),
        UseItem(player_id=players["p2"], target_id=players["p1"], item_id="dagger"),
    ]
    for cmd in commands:
        after = step(state, cmd)
        assert after.energy == state.energy
        assert after.inventory == state.inventory
        assert after.turn == state.turn
        assert after.over
        assert len(after.events) == 0


def test_restart_after_game_over() -> None:
    laser = make_item("laser", ItemKind.WEAPON, 25, uses=2)
    state, players = make_duel_state(p1_items=[laser])
    cmd = UseItem(player_id=players["p1"], target_id=players["p2"], item_id="laser")
    state = step(step(state, cmd), cmd)
    assert state.over

    state = step(state, Restart())
    assert not state.over
    assert state.winner is None
    assert energy_of(state, players["p1"]) == 50
    assert energy_of(state, players["p2"]) == 50
    assert item_ids(state, players["p1"]) == []
    assert list(state.events) == [RestartEvent(energy=50)]

    state = step(state, Eat(player_id=players["p2"]))
    assert energy_of(state, players["p2"]) == 60


def test_restart_while_running() -> None:
    state, players = make_duel_state(p1_energy=80, p2_energy=20)
    state = step(state, Restart())
    assert energy_of(state, players["p1"]) == 50
    assert energy_of(state, players["p2"]) == 50


def test_step_does_not_mutate_input() -> None:
    state, players = make_duel_state()
    snapshot = replace(state)
    step(state, Attack(attacker_id=players["p1"], target_id=players["p2"]))
    assert state == snapshot


@pytest.mark.parametrize(
    "command",
    [
        Eat(player_id="nobody"),
        Attack(attacker_id="p1", target_id="nobody"),
        Attack(attacker_id="p1", target_id="p1"),
        UseItem(player_id="p2", target_id="p2", item_id="burger"),
        Eat(player_id="p1", amount=-1),
        Attack(attacker_id="p1", target_id="p2", amount=-5),
    ],
)
def test_invalid_commands_raise(command: object) -> None:
    state, _ = make_duel_state()
    with pytest.raises(ValueError):
        step(state, command)  # type: ignore[arg-type]


def test_unknown_command_raises() -> None:
    state, _ = make_duel_state()
    with pytest.raises(ValueError):
        step(state, "eat")  # type: ignore[arg-type]


@pytest.mark.parametrize("seed", range(5))
def test_energy_stays_in_bounds(seed: int) -> None:
    rng = random.Random(seed)
    state = new_game()
    p1, p2 = state.player_order
    item_choices = ["apple", "burger", "laser", "dagger", "missing"]
    for _ in range(200):
        actor, target = (p1, p2) if rng.random() < 0.5 else (p2, p1)
        roll = rng.randrange(4)
        if roll == 0:
            cmd = Eat(player_id=actor, amount=rng.randrange(0, 40))
        elif roll == 1:
            cmd = Attack(attacker_id=actor, target_id=target, amount=rng.randrange(0, 40))
        elif roll == 2:
            cmd = UseItem(player_id=actor, target_id=target, item_id=rng.choice(item_choices))
        else:
            cmd = Restart() if state.over else Eat(player_id=actor, amount=0)
        state = step(state, cmd)
        for energy in state.energy.values():
            assert 0 <= energy.amount <= 100
        for inventory in state.inventory.values():
            assert all(item.remaining_uses > 0 for item in inventory.items)
        assert state.over == any(e.amount == 0 for e in state.energy.values())
