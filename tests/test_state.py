from energy_duel.factories import new_game


def test_description_skips_empty_fields() -> None:
    description = new_game().description
    assert "player" in description
    assert "energy" in description
    assert "inventory" in description
    assert "events" not in description
    assert "winner" not in description
    assert description["turn"] == 0
