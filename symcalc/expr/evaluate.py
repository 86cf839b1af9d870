import math
from typing import Callable, Dict, Mapping, Optional, Union

from symcalc.expr.errors import DivisionByZero, InvalidDomain, UnboundVariable
from symcalc.expr.expr_node import ExprNode, ExprNodeType, as_expr

Bindings = Mapping[str, Union[ExprNode, int, float]]


def nth_root(value: float, n: int) -> float:
    """
    Real n-th root of a positive number by Newton iteration.

    The iteration stops once the sequence revisits a value, i.e. when a step
    taken once and a step taken twice from the same start agree.
    """
    if n < 2:
        raise InvalidDomain("n must be more than 1")
    if value <= 0.0:
        raise InvalidDomain("value must be positive")
    np = n - 1

    def step(g: float) -> float:
        return (np * g + value / g ** np) / n

    g1 = value
    g2 = step(g1)
    while g1 != g2:
        g1 = step(g1)
        g2 = step(step(g2))
    return g1


def _log(value: float, base: float) -> float:
    denominator = math.log(base)
    if denominator == 0.0:
        raise DivisionByZero(f"log base {base} has a zero logarithm")
    return math.log(value) / denominator


_BINARY: Dict[ExprNodeType, Callable[[float, float], float]] = {
    ExprNodeType.ADD: lambda a, b: a + b,
    ExprNodeType.SUB: lambda a, b: a - b,
    ExprNodeType.MUL: lambda a, b: a * b,
    ExprNodeType.POW: math.pow,
    ExprNodeType.LOG: _log,
}

_UNARY: Dict[ExprNodeType, Callable[[float], float]] = {
    ExprNodeType.LN: math.log,
    ExprNodeType.LD: math.log2,
    ExprNodeType.EXP: math.exp,
    ExprNodeType.SQRT: math.sqrt,
    ExprNodeType.CBRT: math.cbrt,
    ExprNodeType.SIN: math.sin,
    ExprNodeType.ASIN: math.asin,
    ExprNodeType.COS: math.cos,
    ExprNodeType.ACOS: math.acos,
    ExprNodeType.TAN: math.tan,
    ExprNodeType.ATAN: math.atan,
    ExprNodeType.TO_RADIANS: math.radians,
    ExprNodeType.TO_DEGREES: math.degrees,
}

assert set(_BINARY) | set(_UNARY) | {
    ExprNodeType.CONST,
    ExprNodeType.VAR,
    ExprNodeType.DIV,
    ExprNodeType.NTH_ROOT,
} == set(ExprNodeType)


def _compute(expr: ExprNode, bindings: Mapping[str, ExprNode]) -> float:
    if expr.type == ExprNodeType.CONST:
        return expr.arg

    if expr.type == ExprNodeType.VAR:
        bound = bindings.get(expr.arg)
        if bound is None:
            raise UnboundVariable(expr.arg)
        return _compute(bound, bindings)

    if expr.type == ExprNodeType.DIV:
        divisor = _compute(expr.right, bindings)
        if divisor == 0.0:
            raise DivisionByZero("Division by zero")
        return _compute(expr.left, bindings) / divisor

    if expr.type == ExprNodeType.NTH_ROOT:
        return nth_root(_compute(expr.left, bindings), expr.arg)

    if expr.type in _BINARY:
        args = (_compute(expr.left, bindings), _compute(expr.right, bindings))
        operation = _BINARY[expr.type]
    else:
        args = (_compute(expr.left, bindings),)
        operation = _UNARY[expr.type]

    try:
        return operation(*args)
    except ValueError as err:
        name = expr.type.name.lower()
        raise InvalidDomain(f"{name} is undefined for {', '.join(map(repr, args))}") from err


def compute(expr: ExprNode, bindings: Optional[Bindings] = None) -> float:
    """
    Evaluate `expr` with every variable replaced by its binding.

    Bindings may be numbers or expressions; an expression binding is itself
    computed against the same bindings.
    """
    resolved = {symbol: as_expr(value) for symbol, value in (bindings or {}).items()}
    return _compute(expr, resolved)
