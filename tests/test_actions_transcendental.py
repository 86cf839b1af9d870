import math

import pytest

from symcalc.expr import actions_transcendental as at
from symcalc.expr import actions_trig as atr
from symcalc.expr import constant, e, one, variable, zero

x = variable("x")
y = variable("y")


def test_power_zero():
    assert at.power_zero(x.pow(0)) is one
    assert not at.can_power_zero(constant(0).pow(0))


def test_power_one():
    assert at.power_one(x.pow(1)) is x


def test_one_power():
    assert at.one_power(one.pow(x)) is one


def test_zero_power():
    assert at.zero_power(constant(0).pow(2)) is zero
    assert not at.can_zero_power(constant(0).pow(-1))
    assert not at.can_zero_power(constant(0).pow(x))


def test_nested_power():
    assert str(at.nested_power(x.pow(2).pow(3))) == "x^(2 * 3)"


def test_power_of_ln():
    assert at.power_of_ln(constant(math.e).pow(x.ln())) is x
    assert not at.can_power_of_ln(constant(2).pow(x.ln()))


def test_log_self():
    assert at.log_self(x.log(x)) is one


def test_natural_log():
    assert str(at.natural_log(x.log(e))) == "ln(x)"
    assert not at.can_natural_log(x.log(2))


def test_ln_exp():
    assert at.ln_exp(x.exp().ln()) is x


def test_ln_power():
    assert str(at.ln_power(x.pow(3).ln())) == "3 * ln(x)"
    assert str(at.ln_power(x.pow(y).ln())) == "y * ln(x)"


@pytest.mark.parametrize("node, expected", [
    (x.multiply(y).ln(), "ln(x) + ln(y)"),
    (x.divide(y).ln(), "ln(x) - ln(y)"),
    (constant(2).multiply(x).ln(), "ln(2) + ln(x)"),
])
def test_ln_split(node, expected):
    assert str(at.ln_split(node)) == expected


@pytest.mark.parametrize("node", [
    constant(-2).multiply(x).ln(),
    x.divide(0).ln(),
    x.plus(y).ln(),
])
def test_ln_split_not_applicable(node):
    assert not at.can_ln_split(node)


def test_exp_ln():
    assert at.exp_ln(x.ln().exp()) is x


@pytest.mark.parametrize("node, expected", [
    (constant(3).multiply(x.ln()).exp(), "x^3"),
    (x.ln().multiply(y).exp(), "x^y"),
])
def test_exp_scaled_ln(node, expected):
    assert str(at.exp_scaled_ln(node)) == expected


@pytest.mark.parametrize("node", [
    x.pow(2).sqrt(),
    x.pow(3).cbrt(),
    x.pow(5).nth_root(5),
])
def test_root_of_power(node):
    assert at.root_of_power(node) is x


@pytest.mark.parametrize("node", [x.pow(3).sqrt(), x.pow(2).cbrt(), x.pow(4).nth_root(5)])
def test_root_of_power_needs_matching_degree(node):
    assert not at.can_root_of_power(node)


def test_sin_odd():
    assert str(atr.sin_odd(x.neg().sin())) == "-sin(x)"
    assert not atr.can_sin_odd(x.sin())


def test_cos_even():
    assert str(atr.cos_even(x.neg().cos())) == "cos(x)"


@pytest.mark.parametrize("node", [x.to_degrees().to_radians(), x.to_radians().to_degrees()])
def test_undo_conversion(node):
    assert atr.undo_conversion(node) is x


def test_undo_conversion_needs_inverse():
    assert not atr.can_undo_conversion(x.to_radians().to_radians())
