import math

import pytest

from calculator import parser
from calculator.parser import InvalidExpression


@pytest.mark.parametrize("expr, expected", [
    ("2+3", 5.0),
    ("2+3*4", 14.0),
    ("(2+3)*4", 20.0),
    ("10-4-3", 3.0),
    ("8/4/2", 1.0),
    ("2**3**2", 512.0),
    ("2^10", 1024.0),
    ("-2**2", -4.0),
    ("2**-1", 0.5),
    ("7%3", 1.0),
    ("-7%3", -1.0),
    (".5+5.", 5.5),
    (" 1 +\t2 ", 3.0),
    ("-(3-5)", 2.0),
    ("+4", 4.0),
])
def test_evaluate_arithmetic(expr, expected):
    assert parser.evaluate(expr) == pytest.approx(expected)


def test_pi_symbol_is_substituted():
    assert parser.evaluate("π") == pytest.approx(math.pi)
    assert parser.evaluate("2*π") == pytest.approx(2 * math.pi)


@pytest.mark.parametrize("expr", [
    "",
    "   ",
    "2+",
    "*2",
    "(2",
    "2)",
    "()",
    "(2)(3)",
    "1..2",
    "1.2.3",
    ".",
    "2***3",
    "1/0",
    "1/(2-2)",
    "5%0",
    "abc",
    "1e5",
    "Error",
    "(-8)**(1/3)",
    "10**400",
    "0**-1",
])
def test_evaluate_rejects(expr):
    with pytest.raises(InvalidExpression):
        parser.evaluate(expr)


def test_invalid_expression_is_value_error():
    assert issubclass(InvalidExpression, ValueError)


def test_tokenize_splits_power_and_numbers():
    tokens = parser.tokenize("12.5**(3)")
    assert [(t.kind, t.text) for t in tokens] == [
        ("number", "12.5"),
        ("op", "**"),
        ("lparen", "("),
        ("number", "3"),
        ("rparen", ")"),
    ]


def test_normalize_replaces_caret_and_pi():
    assert parser.normalize("2^3") == "2**3"
    assert parser.normalize("π") == str(math.pi)


def test_deep_nesting_is_rejected():
    with pytest.raises(InvalidExpression):
        parser.evaluate("(" * 1200 + "1" + ")" * 1200)
    with pytest.raises(InvalidExpression):
        parser.evaluate("-" * 1200 + "1")
    with pytest.raises(InvalidExpression):
        parser.evaluate("^".join(["1"] * 1200))


def test_moderate_nesting_still_evaluates():
    assert parser.evaluate("(" * 50 + "2" + ")" * 50) == 2.0
