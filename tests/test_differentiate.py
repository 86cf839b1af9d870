import math

import pytest
import sympy as sp

from symcalc.expr import constant, differentiate, variable

x = variable("x")
y = variable("y")


@pytest.mark.parametrize("node, expected", [
    (constant(7), "0"),
    (x, "1"),
    (y, "0"),
    (x.multiply(5), "5"),
    (x.multiply(5.5), "5.5"),
    (x.multiply(y), "y"),
    (x.pow(2), "2x"),
    (x.pow(3), "3 * x^2"),
    (x.sin(), "cos(x)"),
    (x.cos(), "-sin(x)"),
    (x.ln(), "1 / x"),
    (x.exp(), "exp(x)"),
    (x.sqrt(), "1 / (2 * sqrt(x))"),
    (x.plus(x), "2"),
    (x.minus(3), "1"),
])
def test_derivative_form(node, expected):
    assert str(differentiate(node)) == expected


def test_with_respect_to():
    assert str(x.multiply(y).differentiate("y")) == "x"
    assert str(x.pow(2).differentiate("y")) == "0"


X = sp.Symbol("x")

NODES = [
    x.pow(3),
    constant(2).pow(x),
    x.pow(x),
    x.sin().multiply(x.cos()),
    x.divide(x.plus(1)),
    x.tan(),
    x.asin(),
    x.acos(),
    x.atan(),
    x.ln(),
    x.ld(),
    x.log(3),
    x.exp(),
    x.sqrt(),
    x.cbrt(),
    x.nth_root(5),
    x.pow(2).plus(1).sqrt(),
    constant(3).multiply(x).sin().exp(),
    x.to_radians().sin(),
    x.to_degrees(),
]


@pytest.mark.parametrize("node", NODES)
@pytest.mark.parametrize("value", [0.3, 0.6, 0.9])
def test_matches_sympy(node, value):
    expected = float(sp.diff(node.to_sympy(), X).subs(X, value).evalf())
    assert differentiate(node).compute(value) == pytest.approx(expected, rel=1e-9)


@pytest.mark.parametrize("node", NODES)
def test_matches_finite_difference(node):
    h = 1e-5
    derivative = differentiate(node)
    for value in (0.3, 0.6, 0.9):
        estimate = (node.compute(value + h) - node.compute(value - h)) / (2 * h)
        assert derivative.compute(value) == pytest.approx(estimate, abs=1e-6, rel=1e-6)


def test_chain_rule():
    node = x.pow(2).sin()
    assert differentiate(node).compute(1.2) == pytest.approx(2 * 1.2 * math.cos(1.2 ** 2))


def test_input_not_mutated():
    node = x.sin().multiply(x)
    before = repr(node)
    differentiate(node)
    assert repr(node) == before
