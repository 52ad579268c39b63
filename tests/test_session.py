from calculator.session import (
    SESSION_KEY,
    CalculatorSession,
    get_session,
    reset_session,
    toggle_theme,
)
from calculator.settings import CalculatorConfig


def test_get_session_creates_once():
    state = {}
    first = get_session(state, CalculatorConfig())
    assert state[SESSION_KEY] is first
    assert get_session(state) is first


def test_sessions_are_independent():
    a = get_session({}, CalculatorConfig())
    b = get_session({}, CalculatorConfig())
    a.engine.append("1")
    assert b.buffer == ""


def test_reset_session():
    state = {}
    first = get_session(state, CalculatorConfig())
    reset_session(state)
    assert SESSION_KEY not in state
    assert get_session(state, CalculatorConfig()) is not first


def test_session_follows_config():
    session = CalculatorSession.create(CalculatorConfig(precision=3, default_theme="light", history_limit=5))
    assert session.dark is False
    assert session.history.limit == 5
    assert session.engine.precision == 3
    assert session.engine.history is session.history


def test_toggle_theme():
    session = CalculatorSession.create(CalculatorConfig())
    assert session.dark is True
    assert toggle_theme(session) is False
    assert toggle_theme(session) is True
