import streamlit as st

from energy_duel.config import GameConfig

from .session_factory import ensure_session, make_session_and_reset
from .shared_ui import energy_section, player_section

__all__ = [
    "GameConfig",
    "ensure_session",
    "make_session_and_reset",
    "set_default_config",
    "get_config_from_widgets",
]


def set_default_config() -> None:
    if "config" not in st.session_state:
        st.session_state["config"] = GameConfig()


def get_config_from_widgets() -> GameConfig:
    current: GameConfig = st.session_state["config"]

    players = tuple(
        player_section(index, setup) for index, setup in enumerate(current.players)
    )
    start_energy, restart_energy, max_energy = energy_section(
        current.start_energy, current.restart_energy, current.max_energy
    )

    st.subheader("Actions")
    eat_amount: int = st.number_input(
        "Eat amount", min_value=0, value=current.eat_amount, key="eat_amount"
    )
    attack_amount: int = st.number_input(
        "Attack amount", min_value=0, value=current.attack_amount, key="attack_amount"
    )

    return GameConfig(
        players=players,
        start_energy=start_energy,
        restart_energy=restart_energy,
        max_energy=max_energy,
        eat_amount=eat_amount,
        attack_amount=attack_amount,
    )
