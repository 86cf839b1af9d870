import math

from symcalc.expr.actions_ring import common_factor
from symcalc.expr.expr_node import ExprNode, ExprNodeType, constant, minus_one, negate, one, zero


def _is_div(expr: ExprNode) -> bool:
    return expr.type == ExprNodeType.DIV


def can_divide_zero(expr: ExprNode) -> bool:
    return _is_div(expr) and expr.left == zero and not expr.right == zero


def divide_zero(expr: ExprNode) -> ExprNode:
    # 0 / a = 0, a != 0
    assert can_divide_zero(expr)
    return zero


def can_divide_one(expr: ExprNode) -> bool:
    return _is_div(expr) and expr.right == one


def divide_one(expr: ExprNode) -> ExprNode:
    # a / 1 = a
    assert can_divide_one(expr)
    return expr.left


def can_divide_self(expr: ExprNode) -> bool:
    return _is_div(expr) and expr.left == expr.right and not expr.right == zero


def divide_self(expr: ExprNode) -> ExprNode:
    # a / a = 1, a != 0
    assert can_divide_self(expr)
    return one


def can_divide_minus_one(expr: ExprNode) -> bool:
    return _is_div(expr) and expr.right == minus_one


def divide_minus_one(expr: ExprNode) -> ExprNode:
    # a / (-1) = (-1)a
    assert can_divide_minus_one(expr)
    return negate(expr.left)


def can_cancel_factor(expr: ExprNode) -> bool:
    if not _is_div(expr) or expr.right == zero:
        return False
    left, right = expr.left, expr.right
    return (
        left.type == ExprNodeType.MUL and expr.right in (left.left, left.right)
    ) or (
        right.type == ExprNodeType.MUL and expr.left in (right.left, right.right)
    )


def cancel_factor(expr: ExprNode) -> ExprNode:
    # ab / a -> b, ba / a -> b, a / ab -> 1 / b, a / ba -> 1 / b
    assert can_cancel_factor(expr)
    left, right = expr.left, expr.right
    if left.type == ExprNodeType.MUL and right in (left.left, left.right):
        return left.right if left.left == right else left.left
    return one.divide(right.right if right.left == left else right.left)


def can_cross_cancel(expr: ExprNode) -> bool:
    if not _is_div(expr):
        return False
    shared = common_factor(expr.left, expr.right, allow_constant=True)
    return shared is not None and not shared[0] == zero


def cross_cancel(expr: ExprNode) -> ExprNode:
    # ab / ac -> b / c
    assert can_cross_cancel(expr)
    _, a, b = common_factor(expr.left, expr.right, allow_constant=True)
    return a.divide(b)


def can_hoist_constant(expr: ExprNode) -> bool:
    if not _is_div(expr) or expr.right.type != ExprNodeType.CONST:
        return False
    divisor = expr.right.arg
    return divisor not in (0.0, 1.0) and math.isfinite(1.0 / divisor)


def hoist_constant(expr: ExprNode) -> ExprNode:
    # a / c -> (1 / c)a
    assert can_hoist_constant(expr)
    return constant(1.0 / expr.right.arg).multiply(expr.left)
