from symcalc.expr.expr_node import ExprNode, ExprNodeType


def can_sin_odd(expr: ExprNode) -> bool:
    return expr.type == ExprNodeType.SIN and expr.left.is_negation()


def sin_odd(expr: ExprNode) -> ExprNode:
    # sin(-a) -> -sin(a)
    assert can_sin_odd(expr)
    return expr.left.right.sin().neg()


def can_cos_even(expr: ExprNode) -> bool:
    return expr.type == ExprNodeType.COS and expr.left.is_negation()


def cos_even(expr: ExprNode) -> ExprNode:
    # cos(-a) -> cos(a)
    assert can_cos_even(expr)
    return expr.left.right.cos()


_INVERSE_CONVERSION = {
    ExprNodeType.TO_RADIANS: ExprNodeType.TO_DEGREES,
    ExprNodeType.TO_DEGREES: ExprNodeType.TO_RADIANS,
}


def can_undo_conversion(expr: ExprNode) -> bool:
    return (
        expr.type in _INVERSE_CONVERSION
        and expr.left.type == _INVERSE_CONVERSION[expr.type]
    )


def undo_conversion(expr: ExprNode) -> ExprNode:
    # radians(degrees(a)) = degrees(radians(a)) = a
    assert can_undo_conversion(expr)
    return expr.left.left
