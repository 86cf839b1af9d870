from symcalc.expr.expr_node import ExprNode, ExprNodeType, constant, e, one, three, two, zero

# Power


def can_power_zero(expr: ExprNode) -> bool:
    return expr.type == ExprNodeType.POW and expr.right == zero and not expr.left == zero


def power_zero(expr: ExprNode) -> ExprNode:
    # a^0 = 1, a != 0
    assert can_power_zero(expr)
    return one


def can_power_one(expr: ExprNode) -> bool:
    return expr.type == ExprNodeType.POW and expr.right == one


def power_one(expr: ExprNode) -> ExprNode:
    # a^1 = a
    assert can_power_one(expr)
    return expr.left


def can_one_power(expr: ExprNode) -> bool:
    return expr.type == ExprNodeType.POW and expr.left == one


def one_power(expr: ExprNode) -> ExprNode:
    # 1^a = 1
    assert can_one_power(expr)
    return one


def can_zero_power(expr: ExprNode) -> bool:
    return (
        expr.type == ExprNodeType.POW
        and expr.left == zero
        and expr.right.type == ExprNodeType.CONST
        and expr.right.arg > 0
    )


def zero_power(expr: ExprNode) -> ExprNode:
    # 0^c = 0, c > 0
    assert can_zero_power(expr)
    return zero


def can_nested_power(expr: ExprNode) -> bool:
    return expr.type == ExprNodeType.POW and expr.left.type == ExprNodeType.POW


def nested_power(expr: ExprNode) -> ExprNode:
    # (a^p)^q -> a^(pq)
    assert can_nested_power(expr)
    return expr.left.left.pow(expr.left.right.multiply(expr.right))


def can_power_of_ln(expr: ExprNode) -> bool:
    return (
        expr.type == ExprNodeType.POW
        and expr.left == e
        and expr.right.type == ExprNodeType.LN
    )


def power_of_ln(expr: ExprNode) -> ExprNode:
    # e^ln(a) = a
    assert can_power_of_ln(expr)
    return expr.right.left


# Log


def can_log_self(expr: ExprNode) -> bool:
    return expr.type == ExprNodeType.LOG and expr.left == expr.right


def log_self(expr: ExprNode) -> ExprNode:
    # log_a(a) = 1
    assert can_log_self(expr)
    return one


def can_natural_log(expr: ExprNode) -> bool:
    return expr.type == ExprNodeType.LOG and expr.right == e


def natural_log(expr: ExprNode) -> ExprNode:
    # log_e(a) -> ln(a)
    assert can_natural_log(expr)
    return expr.left.ln()


# Ln


def can_ln_exp(expr: ExprNode) -> bool:
    return expr.type == ExprNodeType.LN and expr.left.type == ExprNodeType.EXP


def ln_exp(expr: ExprNode) -> ExprNode:
    # ln(exp(a)) = a
    assert can_ln_exp(expr)
    return expr.left.left


def can_ln_power(expr: ExprNode) -> bool:
    return expr.type == ExprNodeType.LN and expr.left.type == ExprNodeType.POW


def ln_power(expr: ExprNode) -> ExprNode:
    # ln(a^p) -> p ln(a)
    assert can_ln_power(expr)
    return expr.left.right.multiply(expr.left.left.ln())


def _positive_operands(expr: ExprNode) -> bool:
    return not any(
        child.type == ExprNodeType.CONST and child.arg <= 0 for child in expr.children()
    )


def can_ln_split(expr: ExprNode) -> bool:
    return (
        expr.type == ExprNodeType.LN
        and expr.left.type in (ExprNodeType.MUL, ExprNodeType.DIV)
        and _positive_operands(expr.left)
    )


def ln_split(expr: ExprNode) -> ExprNode:
    # ln(ab) -> ln(a) + ln(b), ln(a / b) -> ln(a) - ln(b)
    assert can_ln_split(expr)
    inner = expr.left
    op = ExprNodeType.ADD if inner.type == ExprNodeType.MUL else ExprNodeType.SUB
    return ExprNode(op, left=inner.left.ln(), right=inner.right.ln())


# Exp


def can_exp_ln(expr: ExprNode) -> bool:
    return expr.type == ExprNodeType.EXP and expr.left.type == ExprNodeType.LN


def exp_ln(expr: ExprNode) -> ExprNode:
    # exp(ln(a)) = a
    assert can_exp_ln(expr)
    return expr.left.left


def can_exp_scaled_ln(expr: ExprNode) -> bool:
    return (
        expr.type == ExprNodeType.EXP
        and expr.left.type == ExprNodeType.MUL
        and ExprNodeType.LN in (expr.left.left.type, expr.left.right.type)
    )


def exp_scaled_ln(expr: ExprNode) -> ExprNode:
    # exp(p ln(a)) = exp(ln(a) p) -> a^p
    assert can_exp_scaled_ln(expr)
    product = expr.left
    if product.right.type == ExprNodeType.LN:
        return product.right.left.pow(product.left)
    return product.left.left.pow(product.right)


# Roots


def _root_degree(expr: ExprNode) -> ExprNode:
    if expr.type == ExprNodeType.SQRT:
        return two
    if expr.type == ExprNodeType.CBRT:
        return three
    return constant(expr.arg)


def can_root_of_power(expr: ExprNode) -> bool:
    return (
        expr.type in (ExprNodeType.SQRT, ExprNodeType.CBRT, ExprNodeType.NTH_ROOT)
        and expr.left.type == ExprNodeType.POW
        and expr.left.right == _root_degree(expr)
    )


def root_of_power(expr: ExprNode) -> ExprNode:
    # sqrt(a^2) -> a, cbrt(a^3) -> a, root_n(a^n) -> a
    assert can_root_of_power(expr)
    return expr.left.left
