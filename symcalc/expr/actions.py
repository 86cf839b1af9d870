from dataclasses import dataclass
from typing import Callable, Dict, List

from symcalc.expr import actions_field as af
from symcalc.expr import actions_ring as ar
from symcalc.expr import actions_transcendental as at
from symcalc.expr import actions_trig as atr
from symcalc.expr.expr_node import ExprNode, ExprNodeType


@dataclass(frozen=True)
class Action:
    name: str
    can_apply: Callable[[ExprNode], bool]
    apply: Callable[[ExprNode], ExprNode]


def _action(can_apply: Callable[[ExprNode], bool], apply: Callable[[ExprNode], ExprNode]) -> Action:
    return Action(apply.__name__, can_apply, apply)


_ROOT_ACTIONS = [_action(at.can_root_of_power, at.root_of_power)]
_CONVERSION_ACTIONS = [_action(atr.can_undo_conversion, atr.undo_conversion)]

# Ordered rewrite rules per node type; the first applicable rule wins.
RULES: Dict[ExprNodeType, List[Action]] = {
    ExprNodeType.CONST: [],
    ExprNodeType.VAR: [],
    ExprNodeType.ADD: [
        _action(ar.can_add_zero, ar.add_zero),
        _action(ar.can_cancel, ar.cancel),
        _action(ar.can_double, ar.double),
        _action(ar.can_merge_like_terms, ar.merge_like_terms),
        _action(ar.can_factor_common, ar.factor_common),
        _action(ar.can_commute_constant, ar.commute_constant),
        _action(ar.can_gather_constants, ar.gather_constants),
    ],
    ExprNodeType.SUB: [
        _action(ar.can_subtract_self, ar.subtract_self),
        _action(ar.can_subtract_zero, ar.subtract_zero),
        _action(ar.can_subtract_from_zero, ar.subtract_from_zero),
        _action(ar.can_subtract_negative, ar.subtract_negative),
        _action(ar.can_merge_like_terms, ar.merge_like_terms),
        _action(ar.can_factor_common, ar.factor_common),
    ],
    ExprNodeType.MUL: [
        _action(ar.can_multiply_zero, ar.multiply_zero),
        _action(ar.can_multiply_one, ar.multiply_one),
        _action(ar.can_commute_constant, ar.commute_constant),
        _action(ar.can_gather_constants, ar.gather_constants),
        _action(ar.can_square, ar.square),
        _action(ar.can_merge_powers, ar.merge_powers),
        _action(ar.can_distribute_constant, ar.distribute_constant),
    ],
    ExprNodeType.DIV: [
        _action(af.can_divide_zero, af.divide_zero),
        _action(af.can_divide_one, af.divide_one),
        _action(af.can_divide_self, af.divide_self),
        _action(af.can_divide_minus_one, af.divide_minus_one),
        _action(af.can_cancel_factor, af.cancel_factor),
        _action(ar.can_merge_powers, ar.merge_powers),
        _action(af.can_cross_cancel, af.cross_cancel),
        _action(af.can_hoist_constant, af.hoist_constant),
    ],
    ExprNodeType.POW: [
        _action(at.can_power_zero, at.power_zero),
        _action(at.can_power_one, at.power_one),
        _action(at.can_one_power, at.one_power),
        _action(at.can_zero_power, at.zero_power),
        _action(at.can_nested_power, at.nested_power),
        _action(at.can_power_of_ln, at.power_of_ln),
    ],
    ExprNodeType.LOG: [
        _action(at.can_log_self, at.log_self),
        _action(at.can_natural_log, at.natural_log),
    ],
    ExprNodeType.LN: [
        _action(at.can_ln_exp, at.ln_exp),
        _action(at.can_ln_power, at.ln_power),
        _action(at.can_ln_split, at.ln_split),
    ],
    ExprNodeType.LD: [],
    ExprNodeType.EXP: [
        _action(at.can_exp_ln, at.exp_ln),
        _action(at.can_exp_scaled_ln, at.exp_scaled_ln),
    ],
    ExprNodeType.SQRT: _ROOT_ACTIONS,
    ExprNodeType.CBRT: _ROOT_ACTIONS,
    ExprNodeType.NTH_ROOT: _ROOT_ACTIONS,
    ExprNodeType.SIN: [_action(atr.can_sin_odd, atr.sin_odd)],
    ExprNodeType.ASIN: [],
    ExprNodeType.COS: [_action(atr.can_cos_even, atr.cos_even)],
    ExprNodeType.ACOS: [],
    ExprNodeType.TAN: [],
    ExprNodeType.ATAN: [],
    ExprNodeType.TO_RADIANS: _CONVERSION_ACTIONS,
    ExprNodeType.TO_DEGREES: _CONVERSION_ACTIONS,
}

assert len(RULES) == len(ExprNodeType)
