from symcalc.expr import (
    DivisionByZero,
    EvaluationError,
    ExprNode,
    ExprNodeType,
    InvalidDomain,
    UnboundVariable,
    as_expr,
    compute,
    constant,
    differentiate,
    nth_root,
    simplify,
    variable,
)

__version__ = "0.1"
