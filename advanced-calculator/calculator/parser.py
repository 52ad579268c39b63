"""Arithmetic expression parser.

Evaluates calculator buffer text without ``eval``: the text is normalised
(``π`` and ``^``), checked against the allowed character set, split into
tokens and evaluated by a small recursive-descent parser.

Grammar (lowest to highest precedence)::

    expr    := term (('+' | '-') term)*
    term    := unary (('*' | '/' | '%') unary)*
    unary   := ('+' | '-') unary | power
    power   := primary ('**' unary)?
    primary := NUMBER | '(' expr ')'

``**`` is right associative and binds tighter than a leading sign, so
``-2**2`` is ``-4``. ``%`` is the remainder with the sign of the dividend.
"""

from __future__ import annotations

import math
import operator as op
import re
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional


PI_SYMBOL = "π"

# Anything outside this set is rejected before tokenizing.
_INVALID_CHARS = re.compile(r"[^0-9+\-*/().%* \t\n\r]")
_NUMBER = re.compile(r"\d+\.?\d*|\.\d+")
_WHITESPACE = " \t\n\r"
MAX_DEPTH = 100


class InvalidExpression(ValueError):
    """The buffer text could not be evaluated to a finite number."""


def _divide(left: float, right: float) -> float:
    if right == 0:
        raise InvalidExpression("Division by zero")
    return left / right


def _remainder(left: float, right: float) -> float:
    if right == 0:
        raise InvalidExpression("Remainder by zero")
    return math.fmod(left, right)


# Allowed binary operators
BINARY_OPERATORS: Dict[str, Callable[[float, float], float]] = {
    "+": op.add,
    "-": op.sub,
    "*": op.mul,
    "/": _divide,
    "%": _remainder,
    "**": math.pow,
}

# Allowed unary operators
UNARY_OPERATORS: Dict[str, Callable[[float], float]] = {
    "+": op.pos,
    "-": op.neg,
}


@dataclass(frozen=True)
class Token:
    kind: str  # "number", "op", "lparen" or "rparen"
    text: str
    pos: int

    @property
    def value(self) -> float:
        return float(self.text)


def normalize(text: str) -> str:
    """Substitute the display-only symbols with parseable text."""
    return text.replace(PI_SYMBOL, str(math.pi)).replace("^", "**")


def tokenize(text: str) -> List[Token]:
    tokens: List[Token] = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch in _WHITESPACE:
            i += 1
            continue
        if ch.isdigit() or ch == ".":
            match = _NUMBER.match(text, i)
            if match is None:
                raise InvalidExpression(f"Malformed number at position {i}")
            end = match.end()
            if end < len(text) and text[end] == ".":
                raise InvalidExpression(f"Malformed number at position {i}")
            tokens.append(Token("number", match.group(), i))
            i = end
            continue
        if text.startswith("**", i):
            tokens.append(Token("op", "**", i))
            i += 2
            continue
        if ch in "+-*/%":
            tokens.append(Token("op", ch, i))
        elif ch == "(":
            tokens.append(Token("lparen", ch, i))
        elif ch == ")":
            tokens.append(Token("rparen", ch, i))
        else:
            raise InvalidExpression(f"Unexpected character {ch!r} at position {i}")
        i += 1
    return tokens


class Parser:
    """Recursive-descent evaluator over a token list."""

    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.index = 0
        self.depth = 0

    def _peek(self) -> Optional[Token]:
        if self.index < len(self.tokens):
            return self.tokens[self.index]
        return None

    def _next(self) -> Token:
        token = self._peek()
        if token is None:
            raise InvalidExpression("Unexpected end of expression")
        self.index += 1
        return token

    def _accept_op(self, *symbols: str) -> Optional[str]:
        token = self._peek()
        if token is not None and token.kind == "op" and token.text in symbols:
            self.index += 1
            return token.text
        return None

    def parse(self) -> float:
        if not self.tokens:
            raise InvalidExpression("Empty expression")
        value = self._expr()
        leftover = self._peek()
        if leftover is not None:
            raise InvalidExpression(f"Unexpected {leftover.text!r} at position {leftover.pos}")
        return value

    def _expr(self) -> float:
        value = self._term()
        while True:
            symbol = self._accept_op("+", "-")
            if symbol is None:
                return value
            value = _apply_binary(symbol, value, self._term())

    def _term(self) -> float:
        value = self._unary()
        while True:
            symbol = self._accept_op("*", "/", "%")
            if symbol is None:
                return value
            value = _apply_binary(symbol, value, self._unary())

    def _unary(self) -> float:
        # Every nested sign, parenthesis and exponent passes through here.
        self.depth += 1
        if self.depth > MAX_DEPTH:
            raise InvalidExpression("Expression nested too deeply")
        try:
            symbol = self._accept_op("+", "-")
            if symbol is not None:
                return UNARY_OPERATORS[symbol](self._unary())
            return self._power()
        finally:
            self.depth -= 1

    def _power(self) -> float:
        base = self._primary()
        if self._accept_op("**"):
            return _apply_binary("**", base, self._unary())
        return base

    def _primary(self) -> float:
        token = self._next()
        if token.kind == "number":
            return token.value
        if token.kind == "lparen":
            value = self._expr()
            closing = self._next()
            if closing.kind != "rparen":
                raise InvalidExpression(f"Expected ')' at position {closing.pos}")
            return value
        raise InvalidExpression(f"Unexpected {token.text!r} at position {token.pos}")


def _apply_binary(symbol: str, left: float, right: float) -> float:
    try:
        return BINARY_OPERATORS[symbol](left, right)
    except InvalidExpression:
        raise
    except (ArithmeticError, ValueError) as e:
        raise InvalidExpression(f"{left} {symbol} {right}: {e}") from e


def evaluate(text: str) -> float:
    """Evaluate calculator text and return a finite float.

    Raises InvalidExpression for disallowed characters, syntax errors,
    arithmetic failures and non-finite results.
    """
    normalized = normalize(text)
    bad = _INVALID_CHARS.search(normalized)
    if bad is not None:
        raise InvalidExpression(f"Invalid character {bad.group()!r}")
    value = Parser(tokenize(normalized)).parse()
    if not math.isfinite(value):
        raise InvalidExpression("Result is not a finite number")
    return value
