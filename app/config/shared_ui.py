from __future__ import annotations

from typing import List, Tuple

import streamlit as st

from energy_duel.config import PlayerSetup
from energy_duel.factories import ITEM_TEMPLATE_REGISTRY


def player_section(index: int, current: PlayerSetup) -> PlayerSetup:
    st.subheader(f"Player {index + 1}")
    name: str = st.text_input("Name", value=current.name, key=f"player_name_{index}")
    item_ids: List[str] = list(ITEM_TEMPLATE_REGISTRY.keys())
    items: List[str] = st.multiselect(
        "Starting items",
        item_ids,
        default=[i for i in current.items if i in ITEM_TEMPLATE_REGISTRY],
        format_func=lambda i: ITEM_TEMPLATE_REGISTRY[i].name,
        key=f"player_items_{index}",
    )
    return PlayerSetup(id=current.id, name=name.strip() or current.name, items=tuple(items))


def energy_section(
    start: int, restart: int, max_energy: int
) -> Tuple[int, int, int]:
    st.subheader("Energy")
    max_energy = st.slider("Max energy", 10, 200, max_energy, key="max_energy")
    start = st.slider(
        "Start energy", 1, max_energy, min(start, max_energy), key="start_energy"
    )
    restart = st.slider(
        "Restart energy", 1, max_energy, min(restart, max_energy), key="restart_energy"
    )
    return start, restart, max_energy


__all__ = ["player_section", "energy_section"]
