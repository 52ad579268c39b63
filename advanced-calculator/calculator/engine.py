"""Expression engine behind the calculator keypad.

The engine owns the display buffer and enforces the input-shaping rules:
no two operators in a row, only a leading minus on an empty buffer, and the
``"Error"`` sentinel after a failed evaluation. Evaluation itself is
delegated to :mod:`calculator.parser`.
"""

from __future__ import annotations

import logging
import math
import re
from decimal import Decimal
from typing import TYPE_CHECKING, Callable, Dict, Optional

from calculator import parser
from calculator.parser import InvalidExpression, PI_SYMBOL

if TYPE_CHECKING:
    from calculator.history import History


logger = logging.getLogger(__name__)

ERROR = "Error"
DEFAULT_PRECISION = 12

OPERATORS = frozenset("+-*/%^")
DIGITS = frozenset("0123456789")
PARENS = frozenset("()")

STATE_EMPTY = "empty"
STATE_IN_PROGRESS = "in_progress"
STATE_ERROR = "error"

# "/0" at the end of the input or directly followed by a dot.
_DIVIDE_BY_ZERO = re.compile(r"/\s*0(?:\.|$)")

UNARY_FUNCTIONS: Dict[str, Callable[[float], float]] = {
    "sin": math.sin,
    "cos": math.cos,
    "tan": math.tan,
    "log": math.log10,
    "√": math.sqrt,
    "%": lambda x: x / 100,
}


def format_number(value: float, precision: int = DEFAULT_PRECISION) -> str:
    """Round to ``precision`` significant digits and print the shortest form.

    Magnitudes in [1e-6, 1e21) print positionally; anything else uses an
    exponent without zero padding (``1e+21``, ``1.5e-7``).
    """
    if not math.isfinite(value):
        raise InvalidExpression("Result is not a finite number")
    rounded = float(f"{value:.{precision}g}")
    if rounded == 0:
        return "0"
    text = repr(rounded)
    magnitude = abs(rounded)
    if 1e-6 <= magnitude < 1e21:
        if "e" in text:
            text = format(Decimal(text), "f")
        if text.endswith(".0"):
            text = text[:-2]
        return text
    mantissa, _, exponent = text.partition("e")
    if mantissa.endswith(".0"):
        mantissa = mantissa[:-2]
    sign = "-" if exponent.startswith("-") else "+"
    return f"{mantissa}e{sign}{exponent.lstrip('+-').lstrip('0') or '0'}"


class ExpressionEngine:
    """In-progress arithmetic expression plus the operations the keypad drives.

    Every operation replaces ``buffer`` with a new string; none of them raise
    for bad expressions, failures turn the buffer into ``ERROR`` instead.
    """

    def __init__(
        self,
        buffer: str = "",
        *,
        precision: int = DEFAULT_PRECISION,
        history: Optional["History"] = None,
    ):
        self._buffer = buffer
        self.precision = precision
        self.history = history

    @property
    def buffer(self) -> str:
        return self._buffer

    @property
    def state(self) -> str:
        if self._buffer == ERROR:
            return STATE_ERROR
        if not self._buffer:
            return STATE_EMPTY
        return STATE_IN_PROGRESS

    @property
    def is_error(self) -> bool:
        return self._buffer == ERROR

    def display(self) -> str:
        return self._buffer or "0"

    def append(self, token: str) -> str:
        """Append a digit, dot, operator, parenthesis or ``π`` to the buffer."""
        if token == PI_SYMBOL:
            token = str(math.pi)
        if not token:
            raise ValueError("Empty token")

        if all(ch in DIGITS or ch == "." for ch in token):
            if self.is_error:
                self._buffer = token
            elif not ("." in token and self._current_number_has_dot()):
                self._buffer = self._buffer + token
            return self._buffer

        if token in OPERATORS:
            if self.is_error:
                return self._buffer
            if not self._buffer:
                if token == "-":
                    self._buffer = token
                return self._buffer
            if self._buffer[-1] in OPERATORS:
                self._buffer = self._buffer[:-1] + token
                return self._buffer
            self._buffer = self._buffer + token
            return self._buffer

        if token in PARENS:
            if not self.is_error:
                self._buffer = self._buffer + token
            return self._buffer

        raise ValueError(f"Token {token!r} is not allowed")

    def delete_last(self) -> str:
        if self.is_error:
            self._buffer = ""
        else:
            self._buffer = self._buffer[:-1]
        return self._buffer

    def clear(self) -> str:
        self._buffer = ""
        return self._buffer

    def evaluate(self) -> str:
        expression = self._buffer
        if not expression or self.is_error:
            return self._buffer
        try:
            if _DIVIDE_BY_ZERO.search(expression):
                raise InvalidExpression("Division by zero")
            result = format_number(parser.evaluate(expression), self.precision)
        except InvalidExpression as e:
            logger.debug("Could not evaluate %r: %s", expression, e)
            self._fail(expression, str(e))
            return self._buffer
        self._succeed(expression, result)
        return self._buffer

    def apply_unary(self, fn: str) -> str:
        """Evaluate the buffer and apply a scientific function to the result."""
        func = UNARY_FUNCTIONS.get(fn)
        if func is None:
            logger.warning("Ignoring unknown function %r", fn)
            return self._buffer
        expression = self._buffer
        if not expression or self.is_error:
            return self._buffer
        label = f"{fn}({expression})"
        try:
            if _DIVIDE_BY_ZERO.search(expression):
                raise InvalidExpression("Division by zero")
            value = parser.evaluate(expression)
            try:
                out = func(value)
            except (ArithmeticError, ValueError) as e:
                raise InvalidExpression(f"{fn} of {value}: {e}") from e
            result = format_number(out, self.precision)
        except InvalidExpression as e:
            logger.debug("Could not apply %s to %r: %s", fn, expression, e)
            self._fail(label, str(e))
            return self._buffer
        self._succeed(label, result)
        return self._buffer

    def _current_number_has_dot(self) -> bool:
        tail = re.search(r"[0-9.]*$", self._buffer)
        return tail is not None and "." in tail.group()

    def _succeed(self, expression: str, result: str) -> None:
        self._buffer = result
        if self.history is not None:
            self.history.record(expression, result)

    def _fail(self, expression: str, reason: str) -> None:
        self._buffer = ERROR
        if self.history is not None:
            self.history.record(expression, ERROR, ok=False, detail=reason)
