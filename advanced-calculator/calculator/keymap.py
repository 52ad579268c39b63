"""Button layout, keyboard bindings and routing of labels to engine calls."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from calculator.engine import UNARY_FUNCTIONS
from calculator.session import CalculatorSession


EVALUATE = "="
CLEAR = "C"
DELETE = "DEL"

SCIENTIFIC_BUTTONS: List[str] = ["sin", "cos", "tan", "√", "log", "π", "^", "%"]

MAIN_BUTTONS: List[List[str]] = [
    ["7", "8", "9", "/", DELETE],
    ["4", "5", "6", "*", CLEAR],
    ["1", "2", "3", "-", EVALUATE],
    ["0", ".", "+"],
]

# Browser key names (KeyboardEvent.key) mapped to button labels.
KEY_BINDINGS: Dict[str, str] = {
    **{str(d): str(d) for d in range(10)},
    ".": ".",
    "+": "+",
    "-": "-",
    "*": "*",
    "/": "/",
    "%": "%",
    "^": "^",
    "(": "(",
    ")": ")",
    "=": EVALUATE,
    "Enter": EVALUATE,
    "Backspace": DELETE,
    "Escape": CLEAR,
}


def key_to_action(key: str) -> Optional[str]:
    """Button label bound to a key, or None when the key is not bound."""
    return KEY_BINDINGS.get(key)


def button_kind(label: str) -> str:
    """CSS flavour for a button: clear, del, equal, sci or plain."""
    if label == CLEAR:
        return "clear"
    if label == DELETE:
        return "del"
    if label == EVALUATE:
        return "equal"
    if label in SCIENTIFIC_BUTTONS:
        return "sci"
    return "plain"


def dispatch(session: CalculatorSession, label: str) -> str:
    """Route a button label to the matching engine operation."""
    engine = session.engine
    if label == EVALUATE:
        return engine.evaluate()
    if label == CLEAR:
        return engine.clear()
    if label == DELETE:
        return engine.delete_last()
    if label in UNARY_FUNCTIONS:
        return engine.apply_unary(label)
    return engine.append(label)


def dispatch_keys(session: CalculatorSession, keys: Iterable[str]) -> str:
    """Feed key names (or the characters of typed text) through the bindings.

    Unbound keys are skipped.
    """
    for key in keys:
        action = key_to_action(key)
        if action is not None:
            dispatch(session, action)
    return session.buffer
