from symcalc.expr.differentiate import differentiate
from symcalc.expr.errors import DivisionByZero, EvaluationError, InvalidDomain, UnboundVariable
from symcalc.expr.evaluate import compute, nth_root
from symcalc.expr.expr_node import (
    ExprNode,
    ExprNodeType,
    as_expr,
    constant,
    e,
    minus_one,
    one,
    pi,
    three,
    two,
    variable,
    zero,
)
from symcalc.expr.simplify import simplify
