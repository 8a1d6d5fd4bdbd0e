from types import SimpleNamespace
from typing import Any, Dict, List

import pytest

from app.config import session_factory
from energy_duel.config import GameConfig
from energy_duel.view import DuelSession


@pytest.fixture
def fake_st(monkeypatch: pytest.MonkeyPatch) -> SimpleNamespace:
    errors: List[str] = []
    session_state: Dict[str, Any] = {}
    fake = SimpleNamespace(session_state=session_state, error=errors.append, errors=errors)
    monkeypatch.setattr(session_factory, "st", fake)
    return fake


def test_ensure_session_creates_session(fake_st: SimpleNamespace) -> None:
    session = session_factory.ensure_session(GameConfig())
    assert isinstance(session, DuelSession)
    assert fake_st.session_state["session"] is session
    assert fake_st.errors == []


def test_ensure_session_reuses_existing(fake_st: SimpleNamespace) -> None:
    first = session_factory.ensure_session(GameConfig())
    assert session_factory.ensure_session(GameConfig(start_energy=0)) is first


def test_ensure_session_reports_invalid_config(fake_st: SimpleNamespace) -> None:
    assert session_factory.ensure_session(GameConfig(start_energy=0)) is None
    assert "session" not in fake_st.session_state
    assert len(fake_st.errors) == 1
    assert fake_st.errors[0].startswith("Game creation failed")


def test_failed_reset_keeps_current_session(fake_st: SimpleNamespace) -> None:
    first = session_factory.ensure_session(GameConfig())
    session_factory.make_session_and_reset(GameConfig(max_energy=0))
    assert fake_st.session_state["session"] is first
    assert len(fake_st.errors) == 1
