import html
from typing import Dict, Optional

import streamlit as st

from energy_duel.types import Outcome
from energy_duel.view import DuelSession, PlayerView

OUTCOME_ICONS: Dict[Outcome, str] = {
    Outcome.WINNER: "🏆",
    Outcome.LOSER: "💀",
}


def display_player(session: DuelSession, view: PlayerView) -> None:
    css_class = f"player-name {view.outcome}" if view.outcome else "player-name"
    icon = OUTCOME_ICONS[view.outcome] if view.outcome else ""
    st.markdown(
        f'<div class="{css_class}">{icon} {html.escape(view.name)}</div>',
        unsafe_allow_html=True,
    )
    st.metric("Energy", f"{view.energy} / {view.max_energy}")
    st.progress(int(round(view.percent)))

    disabled = not session.controls_enabled
    if st.button(
        f"🍗 Eat (+{session.eat_amount})",
        key=f"{view.id}_eat",
        disabled=disabled,
        use_container_width=True,
    ):
        session.eat(view.id)
        st.rerun()

    labels = {option.id: option.label for option in view.items}
    item_id: Optional[str] = st.selectbox(
        "Items",
        list(labels.keys()),
        format_func=lambda i: labels[i],
        index=0 if labels else None,
        placeholder="No items",
        key=f"{view.id}_items",
        disabled=disabled or not labels,
    )
    if st.button(
        "🎒 Use item",
        key=f"{view.id}_use_item",
        disabled=disabled or not labels,
        use_container_width=True,
    ):
        session.use_item(view.id, item_id)
        st.rerun()

    if st.button(
        f"⚔️ Attack (-{session.attack_amount})",
        key=f"{view.id}_attack",
        disabled=disabled,
        use_container_width=True,
    ):
        session.attack(view.id)
        st.rerun()


def display_log(session: DuelSession) -> None:
    st.text("Game log")
    with st.container(height=300):
        items = "".join(f"<li>{html.escape(line)}</li>" for line in session.log.lines())
        st.markdown(f'<ul class="game-log">{items}</ul>', unsafe_allow_html=True)


def display_winner_modal(session: DuelSession) -> None:
    modal = session.present_modal()
    if modal is None:
        return

    def _body() -> None:
        st.write(modal.body)
        restart_col, close_col = st.columns([1, 1])
        with restart_col:
            if st.button("🔁 Restart", key="modal_restart", use_container_width=True):
                session.modal_restart()
                st.rerun()
        with close_col:
            if st.button("Close", key="modal_close", use_container_width=True):
                session.close_modal()
                st.rerun()

    st.dialog(modal.title)(_body)()
