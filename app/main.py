import logging
import os
import streamlit as st

from typing import Optional
from pyrsistent import thaw

from config import (
    GameConfig,
    ensure_session,
    set_default_config,
    get_config_from_widgets,
    make_session_and_reset,
)
from components import (
    display_player,
    display_log,
    display_winner_modal,
)
from energy_duel.view import DuelSession

logging.basicConfig(level=logging.INFO)

script_dir: str = os.path.dirname(os.path.realpath(__file__))

st.set_page_config(layout="wide", page_title="Energy Duel")

with open(os.path.join(script_dir, "styles.css")) as f:
    st.markdown(f"<style>{f.read()}</style>", unsafe_allow_html=True)


# --------- Main App ---------

set_default_config()
tab_game, tab_config, tab_state = st.tabs(["Game", "Config", "State"])

with tab_config:
    config: GameConfig = get_config_from_widgets()

    if st.button("Save", key="save_config_btn", use_container_width=True):
        st.session_state["config"] = config
        make_session_and_reset(config)
    st.divider()

with tab_game:
    session: Optional[DuelSession] = ensure_session(st.session_state["config"])
    if session is None:
        st.stop()

    if session.banner:
        st.success(f"🎉 **{session.banner}** 🎉")

    left_col, middle_col, right_col = st.columns([0.3, 0.4, 0.3])
    player_views = session.player_views()

    with left_col:
        display_player(session, player_views[0])

    with right_col:
        display_player(session, player_views[1])

    with middle_col:
        if st.button("🔁 Restart", key="restart_btn", use_container_width=True):
            session.restart()
            st.rerun()
        display_log(session)

    display_winner_modal(session)

with tab_state:
    st.json(thaw(session.state.description), expanded=1)
