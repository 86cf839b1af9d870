from typing import Optional, Tuple

from symcalc.expr.expr_node import (
    ExprNode,
    ExprNodeType,
    negate,
    one,
    two,
    zero,
)


def _factors(expr: ExprNode):
    # ab -> (a, b), (b, a)
    return [(expr.left, expr.right), (expr.right, expr.left)]


def common_factor(
    a: ExprNode, b: ExprNode, allow_constant: bool = False
) -> Optional[Tuple[ExprNode, ExprNode, ExprNode]]:
    # fx, fy -> (f, x, y)
    if a.type != ExprNodeType.MUL or b.type != ExprNodeType.MUL:
        return None
    for f, x in _factors(a):
        if f.is_constant() and not allow_constant:
            continue
        for g, y in _factors(b):
            if f == g:
                return f, x, y
    return None


def _coefficient_of(term: ExprNode, base: ExprNode) -> Optional[ExprNode]:
    # c * base -> c
    if (
        term.type == ExprNodeType.MUL
        and term.left.is_constant()
        and term.right == base
    ):
        return term.left
    return None


def _moves_constant_front(expr: ExprNode) -> bool:
    return expr.right.is_constant() and not expr.left.is_constant()


# Add


def can_add_zero(expr: ExprNode) -> bool:
    return expr.type == ExprNodeType.ADD and (expr.left == zero or expr.right == zero)


def add_zero(expr: ExprNode) -> ExprNode:
    # 0 + a = a + 0 = a
    assert can_add_zero(expr)
    return expr.right if expr.left == zero else expr.left


def can_cancel(expr: ExprNode) -> bool:
    if expr.type != ExprNodeType.ADD:
        return False

    def cancels(a: ExprNode, b: ExprNode) -> bool:
        return b.is_negation() and b.right == a

    return cancels(expr.left, expr.right) or cancels(expr.right, expr.left)


def cancel(expr: ExprNode) -> ExprNode:
    # a + (-1)a = (-1)a + a = 0
    assert can_cancel(expr)
    return zero


def can_double(expr: ExprNode) -> bool:
    return expr.type == ExprNodeType.ADD and expr.left == expr.right


def double(expr: ExprNode) -> ExprNode:
    # a + a -> 2a
    assert can_double(expr)
    return two.multiply(expr.left)


def can_merge_like_terms(expr: ExprNode) -> bool:
    if expr.type not in (ExprNodeType.ADD, ExprNodeType.SUB):
        return False
    return (
        _coefficient_of(expr.right, expr.left) is not None
        or _coefficient_of(expr.left, expr.right) is not None
    )


def merge_like_terms(expr: ExprNode) -> ExprNode:
    # a + ca -> (1 + c)a, ca + a -> (c + 1)a, a - ca -> (1 - c)a, ca - a -> (c - 1)a
    assert can_merge_like_terms(expr)
    coefficient = _coefficient_of(expr.right, expr.left)
    if coefficient is not None:
        left, right, base = one, coefficient, expr.left
    else:
        left, right, base = _coefficient_of(expr.left, expr.right), one, expr.right
    return ExprNode(expr.type, left=left, right=right).multiply(base)


def can_factor_common(expr: ExprNode) -> bool:
    return (
        expr.type in (ExprNodeType.ADD, ExprNodeType.SUB)
        and common_factor(expr.left, expr.right) is not None
    )


def factor_common(expr: ExprNode) -> ExprNode:
    # fa + fb -> f(a + b), fa - fb -> f(a - b), f not constant
    assert can_factor_common(expr)
    f, a, b = common_factor(expr.left, expr.right)
    return f.multiply(ExprNode(expr.type, left=a, right=b))


def can_gather_constants(expr: ExprNode) -> bool:
    if expr.type not in (ExprNodeType.ADD, ExprNodeType.MUL):
        return False

    def leads_with_constant(operand: ExprNode) -> bool:
        return operand.type == expr.type and operand.left.is_constant()

    if expr.left.is_constant():
        return leads_with_constant(expr.right)
    return leads_with_constant(expr.left) or leads_with_constant(expr.right)


def gather_constants(expr: ExprNode) -> ExprNode:
    # c + (d + a) -> (c + d) + a, (c + a) + b -> c + (a + b), a + (c + b) -> c + (a + b)
    # and the same for products
    assert can_gather_constants(expr)
    op, left, right = expr.type, expr.left, expr.right
    if left.is_constant():
        return ExprNode(op, left=ExprNode(op, left=left, right=right.left), right=right.right)
    if left.type == op and left.left.is_constant():
        return ExprNode(op, left=left.left, right=ExprNode(op, left=left.right, right=right))
    return ExprNode(op, left=right.left, right=ExprNode(op, left=left, right=right.right))


def can_commute_constant(expr: ExprNode) -> bool:
    return expr.type in (ExprNodeType.ADD, ExprNodeType.MUL) and _moves_constant_front(expr)


def commute_constant(expr: ExprNode) -> ExprNode:
    # a + c -> c + a, ac -> ca
    assert can_commute_constant(expr)
    return ExprNode(expr.type, left=expr.right, right=expr.left)


# Subtract


def can_subtract_self(expr: ExprNode) -> bool:
    return expr.type == ExprNodeType.SUB and expr.left == expr.right


def subtract_self(expr: ExprNode) -> ExprNode:
    # a - a = 0
    assert can_subtract_self(expr)
    return zero


def can_subtract_zero(expr: ExprNode) -> bool:
    return expr.type == ExprNodeType.SUB and expr.right == zero


def subtract_zero(expr: ExprNode) -> ExprNode:
    # a - 0 = a
    assert can_subtract_zero(expr)
    return expr.left


def can_subtract_from_zero(expr: ExprNode) -> bool:
    return expr.type == ExprNodeType.SUB and expr.left == zero


def subtract_from_zero(expr: ExprNode) -> ExprNode:
    # 0 - a = (-1)a
    assert can_subtract_from_zero(expr)
    return negate(expr.right)


def can_subtract_negative(expr: ExprNode) -> bool:
    return expr.type == ExprNodeType.SUB and (
        (expr.right.type == ExprNodeType.CONST and expr.right.arg < 0)
        or expr.right.is_negation()
    )


def subtract_negative(expr: ExprNode) -> ExprNode:
    # a - (-c) -> a + c, a - (-1)b -> a + b
    assert can_subtract_negative(expr)
    if expr.right.type == ExprNodeType.CONST:
        return expr.left.plus(negate(expr.right))
    return expr.left.plus(expr.right.right)


# Multiply


def can_multiply_zero(expr: ExprNode) -> bool:
    return expr.type == ExprNodeType.MUL and (expr.left == zero or expr.right == zero)


def multiply_zero(expr: ExprNode) -> ExprNode:
    # 0a = a0 = 0
    assert can_multiply_zero(expr)
    return zero


def can_multiply_one(expr: ExprNode) -> bool:
    return expr.type == ExprNodeType.MUL and (expr.left == one or expr.right == one)


def multiply_one(expr: ExprNode) -> ExprNode:
    # 1a = a1 = a
    assert can_multiply_one(expr)
    return expr.right if expr.left == one else expr.left


def can_square(expr: ExprNode) -> bool:
    return expr.type == ExprNodeType.MUL and expr.left == expr.right


def square(expr: ExprNode) -> ExprNode:
    # aa -> a^2
    assert can_square(expr)
    return expr.left.pow(two)


def power_parts(expr: ExprNode) -> Tuple[ExprNode, ExprNode]:
    # a^p -> (a, p), a -> (a, 1)
    if expr.type == ExprNodeType.POW:
        return expr.left, expr.right
    return expr, one


def can_merge_powers(expr: ExprNode) -> bool:
    if expr.type not in (ExprNodeType.MUL, ExprNodeType.DIV):
        return False
    if ExprNodeType.POW not in (expr.left.type, expr.right.type):
        return False
    return power_parts(expr.left)[0] == power_parts(expr.right)[0]


def merge_powers(expr: ExprNode) -> ExprNode:
    # a^p a^q -> a^(p + q), a^p / a^q -> a^(p - q), with a = a^1
    assert can_merge_powers(expr)
    base, p = power_parts(expr.left)
    _, q = power_parts(expr.right)
    op = ExprNodeType.ADD if expr.type == ExprNodeType.MUL else ExprNodeType.SUB
    return base.pow(ExprNode(op, left=p, right=q))


def can_distribute_constant(expr: ExprNode) -> bool:
    return (
        expr.type == ExprNodeType.MUL
        and expr.left.is_constant()
        and expr.right.type in (ExprNodeType.ADD, ExprNodeType.SUB)
    )


def distribute_constant(expr: ExprNode) -> ExprNode:
    # c(a + b) -> ca + cb, c(a - b) -> ca - cb
    assert can_distribute_constant(expr)
    c, inner = expr.left, expr.right
    return ExprNode(inner.type, left=c.multiply(inner.left), right=c.multiply(inner.right))
