from __future__ import annotations

from typing import Optional

import streamlit as st

from energy_duel.config import GameConfig
from energy_duel.view import DuelSession


def make_session_and_reset(config: GameConfig) -> None:
    """Create a fresh duel session for ``config`` and store it in session state.

    Invalid configs are reported with ``st.error`` and leave the current
    session in place.
    """
    try:
        session = DuelSession.from_config(config)
    except ValueError as e:
        st.error(f"Game creation failed: {e}")
        return
    st.session_state["session"] = session


def ensure_session(config: GameConfig) -> Optional[DuelSession]:
    """Return the stored session, creating one from ``config`` if missing.

    Returns None when no session exists and ``config`` cannot build one.
    """
    if "session" not in st.session_state:
        make_session_and_reset(config)
    return st.session_state.get("session")
