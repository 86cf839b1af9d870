import logging

from symcalc.expr.actions import RULES
from symcalc.expr.actions_consts import can_fold, fold
from symcalc.expr.expr_node import ExprNode

logger = logging.getLogger(__name__)


def _simplify_children(expr: ExprNode) -> ExprNode:
    left = simplify(expr.left) if expr.left is not None else None
    right = simplify(expr.right) if expr.right is not None else None
    if left is expr.left and right is expr.right:
        return expr
    return ExprNode(expr.type, expr.arg, left, right)


def simplify(expr: ExprNode) -> ExprNode:
    """
    Rewrite `expr` into its canonical reduced form.

    Operands are simplified first. A subtree without variables is folded to
    its value; otherwise the first applicable rule for the node type rewrites
    it and the result is simplified again. The input tree is left untouched.
    """
    if expr.is_leaf():
        return expr

    expr = _simplify_children(expr)

    if can_fold(expr):
        folded = fold(expr)
        if folded is not None:
            return folded

    for action in RULES[expr.type]:
        if action.can_apply(expr):
            logger.debug("%s: %s", action.name, expr)
            return simplify(action.apply(expr))

    return expr
