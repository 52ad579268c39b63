"""Per-browser-session calculator state.

Streamlit re-runs page scripts top to bottom on every interaction, so the
engine, theme flag and history live in ``st.session_state`` under a single
key. Functions here take the state mapping explicitly which keeps them
usable (and testable) with a plain ``dict``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, MutableMapping, Optional

from calculator.engine import ExpressionEngine
from calculator.history import History
from calculator.settings import CalculatorConfig, get_config


SESSION_KEY = "calculator_session"


@dataclass
class CalculatorSession:
    engine: ExpressionEngine
    history: History
    dark: bool = True

    @classmethod
    def create(cls, config: Optional[CalculatorConfig] = None) -> "CalculatorSession":
        cfg = config or get_config()
        history = History(limit=cfg.history_limit)
        engine = ExpressionEngine(precision=cfg.precision, history=history)
        return cls(engine=engine, history=history, dark=cfg.dark_by_default)

    @property
    def buffer(self) -> str:
        return self.engine.buffer


def get_session(state: MutableMapping[str, Any], config: Optional[CalculatorConfig] = None) -> CalculatorSession:
    """Return the session stored in ``state``, creating it on first use."""
    session = state.get(SESSION_KEY)
    if not isinstance(session, CalculatorSession):
        session = CalculatorSession.create(config)
        state[SESSION_KEY] = session
    return session


def reset_session(state: MutableMapping[str, Any]) -> None:
    state.pop(SESSION_KEY, None)


def toggle_theme(session: CalculatorSession) -> bool:
    session.dark = not session.dark
    return session.dark
