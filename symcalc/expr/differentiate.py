import logging
from typing import Callable, Dict

from symcalc.expr.expr_node import (
    DEFAULT_SYMBOL,
    ExprNode,
    ExprNodeType,
    constant,
    ln_two,
    one,
    three,
    two,
    zero,
)
from symcalc.expr.simplify import simplify

logger = logging.getLogger(__name__)

Rule = Callable[[ExprNode, str], ExprNode]


def _d(expr: ExprNode, symbol: str) -> ExprNode:
    return _RULES[expr.type](expr, symbol)


def _variable(expr: ExprNode, symbol: str) -> ExprNode:
    return one if expr.arg == symbol else zero


def _sum(expr: ExprNode, symbol: str) -> ExprNode:
    # (a +- b)' = a' +- b'
    return ExprNode(expr.type, left=_d(expr.left, symbol), right=_d(expr.right, symbol))


def _product(expr: ExprNode, symbol: str) -> ExprNode:
    # (ab)' = a'b + ab'
    a, b = expr.left, expr.right
    return _d(a, symbol).multiply(b).plus(a.multiply(_d(b, symbol)))


def _quotient(expr: ExprNode, symbol: str) -> ExprNode:
    # (a / b)' = (a'b - ab') / b^2
    a, b = expr.left, expr.right
    numerator = _d(a, symbol).multiply(b).minus(a.multiply(_d(b, symbol)))
    return numerator.divide(b.pow(two))


def _power(expr: ExprNode, symbol: str) -> ExprNode:
    base, exponent = expr.left, expr.right
    if exponent.is_constant():
        # (a^c)' = c a^(c - 1) a'
        return exponent.multiply(base.pow(exponent.minus(one))).multiply(_d(base, symbol))
    if base.is_constant():
        # (c^a)' = c^a ln(c) a'
        return expr.multiply(base.ln()).multiply(_d(exponent, symbol))
    # (a^b)' = a^b (b' ln(a) + b a' / a)
    inner = _d(exponent, symbol).multiply(base.ln()).plus(
        exponent.multiply(_d(base, symbol)).divide(base)
    )
    return expr.multiply(inner)


def _log(expr: ExprNode, symbol: str) -> ExprNode:
    # log_b(a)' = a' / (a ln(b))
    value, base = expr.left, expr.right
    return _d(value, symbol).divide(value.multiply(base.ln()))


def _ln(expr: ExprNode, symbol: str) -> ExprNode:
    # ln(a)' = a' / a
    return _d(expr.left, symbol).divide(expr.left)


def _ld(expr: ExprNode, symbol: str) -> ExprNode:
    # ld(a) = ln(a) / ln(2)
    return _d(expr.left.ln().divide(ln_two()), symbol)


def _exp(expr: ExprNode, symbol: str) -> ExprNode:
    # exp(a)' = exp(a) a'
    return expr.multiply(_d(expr.left, symbol))


def _sqrt(expr: ExprNode, symbol: str) -> ExprNode:
    # sqrt(a)' = a' / (2 sqrt(a))
    return _d(expr.left, symbol).divide(two.multiply(expr))


def _cbrt(expr: ExprNode, symbol: str) -> ExprNode:
    # cbrt(a)' = a' / (3 cbrt(a)^2)
    return _d(expr.left, symbol).divide(three.multiply(expr.pow(two)))


def _nth_root(expr: ExprNode, symbol: str) -> ExprNode:
    # root_n(a)' = a' / (n root_n(a)^(n - 1))
    n = expr.arg
    return _d(expr.left, symbol).divide(constant(n).multiply(expr.pow(constant(n - 1))))


def _sin(expr: ExprNode, symbol: str) -> ExprNode:
    # sin(a)' = cos(a) a'
    return expr.left.cos().multiply(_d(expr.left, symbol))


def _cos(expr: ExprNode, symbol: str) -> ExprNode:
    # cos(a)' = -sin(a) a'
    return expr.left.sin().neg().multiply(_d(expr.left, symbol))


def _tan(expr: ExprNode, symbol: str) -> ExprNode:
    # tan(a)' = a' / cos(a)^2
    return _d(expr.left, symbol).divide(expr.left.cos().pow(two))


def _unit_circle_root(a: ExprNode) -> ExprNode:
    # sqrt(1 - a^2)
    return one.minus(a.pow(two)).sqrt()


def _asin(expr: ExprNode, symbol: str) -> ExprNode:
    # asin(a)' = a' / sqrt(1 - a^2)
    return _d(expr.left, symbol).divide(_unit_circle_root(expr.left))


def _acos(expr: ExprNode, symbol: str) -> ExprNode:
    # acos(a)' = -a' / sqrt(1 - a^2)
    return _d(expr.left, symbol).neg().divide(_unit_circle_root(expr.left))


def _atan(expr: ExprNode, symbol: str) -> ExprNode:
    # atan(a)' = a' / (1 + a^2)
    return _d(expr.left, symbol).divide(one.plus(expr.left.pow(two)))


def _conversion(expr: ExprNode, symbol: str) -> ExprNode:
    # linear rescaling: f(a)' = f(a')
    return ExprNode(expr.type, left=_d(expr.left, symbol))


_RULES: Dict[ExprNodeType, Rule] = {
    ExprNodeType.CONST: lambda expr, symbol: zero,
    ExprNodeType.VAR: _variable,
    ExprNodeType.ADD: _sum,
    ExprNodeType.SUB: _sum,
    ExprNodeType.MUL: _product,
    ExprNodeType.DIV: _quotient,
    ExprNodeType.POW: _power,
    ExprNodeType.LOG: _log,
    ExprNodeType.LN: _ln,
    ExprNodeType.LD: _ld,
    ExprNodeType.EXP: _exp,
    ExprNodeType.SQRT: _sqrt,
    ExprNodeType.CBRT: _cbrt,
    ExprNodeType.NTH_ROOT: _nth_root,
    ExprNodeType.SIN: _sin,
    ExprNodeType.ASIN: _asin,
    ExprNodeType.COS: _cos,
    ExprNodeType.ACOS: _acos,
    ExprNodeType.TAN: _tan,
    ExprNodeType.ATAN: _atan,
    ExprNodeType.TO_RADIANS: _conversion,
    ExprNodeType.TO_DEGREES: _conversion,
}

assert len(_RULES) == len(ExprNodeType)


def differentiate(expr: ExprNode, with_respect_to: str = DEFAULT_SYMBOL) -> ExprNode:
    """Derivative of `expr` with respect to `with_respect_to`, simplified."""
    logger.debug("Differentiating %s with respect to %s", expr, with_respect_to)
    return simplify(_d(expr, with_respect_to))
