"""Advanced Calculator - expression engine and Streamlit helpers.

This package provides:
- A recursive-descent arithmetic parser (no eval)
- The expression engine that shapes keypad input and evaluates it
- Per-session state, history and theme helpers for the Streamlit app
"""

from .parser import InvalidExpression
from .engine import ERROR, ExpressionEngine, format_number
from .session import CalculatorSession, get_session

__all__ = [
    "InvalidExpression",
    "ERROR",
    "ExpressionEngine",
    "format_number",
    "CalculatorSession",
    "get_session",
]
