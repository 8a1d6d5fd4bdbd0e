# tests/utils/test_energy.py

import pytest
from pyrsistent import pmap

from energy_duel.components import Energy
from energy_duel.utils.energy import (
    apply_damage,
    apply_heal,
    gain_energy,
    lose_energy,
    reset_energy,
)


@pytest.mark.parametrize("energy", [0, 1, 45, 50, 90, 99, 100])
@pytest.mark.parametrize("amount", [0, 1, 5, 10, 20, 35, 100, 250])
def test_gain_energy_is_capped(energy: int, amount: int) -> None:
    assert gain_energy(energy, amount) == min(energy + amount, 100)


@pytest.mark.parametrize("energy", [0, 1, 4, 5, 50, 100])
@pytest.mark.parametrize("amount", [0, 1, 5, 12, 25, 100, 250])
def test_lose_energy_is_floored(energy: int, amount: int) -> None:
    assert lose_energy(energy, amount) == max(energy - amount, 0)


def test_negative_amounts_rejected() -> None:
    with pytest.raises(ValueError):
        gain_energy(50, -1)
    with pytest.raises(ValueError):
        lose_energy(50, -1)


def test_apply_heal_respects_custom_max() -> None:
    energy = pmap({"a": Energy(amount=55, max_amount=60)})
    healed = apply_heal(energy, "a", 10)
    assert healed["a"] == Energy(amount=60, max_amount=60)
    # Original map untouched
    assert energy["a"].amount == 55


def test_apply_damage_only_touches_target() -> None:
    energy = pmap({"a": Energy(amount=10), "b": Energy(amount=10)})
    damaged = apply_damage(energy, "a", 25)
    assert damaged["a"].amount == 0
    assert damaged["b"].amount == 10


def test_reset_energy_sets_every_player() -> None:
    energy = pmap({"a": Energy(amount=0), "b": Energy(amount=100)})
    reset = reset_energy(energy, 50)
    assert {pid: e.amount for pid, e in reset.items()} == {"a": 50, "b": 50}


def test_reset_energy_clamps_to_max() -> None:
    energy = pmap({"a": Energy(amount=0, max_amount=30)})
    assert reset_energy(energy, 50)["a"].amount == 30
