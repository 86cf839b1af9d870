import logging
import math
from typing import Optional

from symcalc.expr.errors import EvaluationError
from symcalc.expr.evaluate import compute
from symcalc.expr.expr_node import ExprNode, ExprNodeType, constant, minus_one, one, zero

logger = logging.getLogger(__name__)

# operand value -> exact result, consulted before numeric evaluation
SIN_VALUES = ((0.0, zero), (math.pi / 2, one), (math.pi, zero))
COS_VALUES = ((0.0, one), (math.pi / 2, zero), (math.pi, minus_one))

_SPECIAL_VALUES = {
    ExprNodeType.SIN: SIN_VALUES,
    ExprNodeType.COS: COS_VALUES,
}


def _root_value(expr: ExprNode, operand: float) -> Optional[ExprNode]:
    # root(0) = 0, root(1) = 1, odd root(-1) = -1
    if operand == 0.0:
        return zero
    if operand == 1.0:
        return one
    if operand == -1.0 and expr.arg % 2 == 1:
        return minus_one
    return None


def special_value(expr: ExprNode) -> Optional[ExprNode]:
    if expr.type not in _SPECIAL_VALUES and expr.type != ExprNodeType.NTH_ROOT:
        return None
    if expr.left.type != ExprNodeType.CONST:
        return None

    operand = expr.left.arg
    if expr.type == ExprNodeType.NTH_ROOT:
        return _root_value(expr, operand)

    for value, result in _SPECIAL_VALUES[expr.type]:
        if operand == value:
            return result
    return None


def can_fold(expr: ExprNode) -> bool:
    return not expr.is_leaf() and expr.is_constant()


def fold(expr: ExprNode) -> Optional[ExprNode]:
    """
    Replace a constant subtree by its value.

    Returns None when the subtree has no finite real value (division by zero,
    a domain error or an overflow); such subtrees stay symbolic.
    """
    assert can_fold(expr)

    special = special_value(expr)
    if special is not None:
        return special

    try:
        value = compute(expr)
    except (EvaluationError, ArithmeticError) as err:
        logger.debug("Leaving %s unfolded: %s", expr, err)
        return None

    if not math.isfinite(value):
        logger.debug("Leaving %s unfolded: value is %s", expr, value)
        return None
    return constant(value)
