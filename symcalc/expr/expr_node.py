import math
from enum import IntEnum, auto
from functools import lru_cache, reduce
from numbers import Real
from typing import List, Mapping, Optional, Union

import sympy as sp


class ExprNodeType(IntEnum):
    CONST = 0
    VAR = auto()
    ADD = auto()
    SUB = auto()
    MUL = auto()
    DIV = auto()
    POW = auto()
    LOG = auto()
    LN = auto()
    LD = auto()
    EXP = auto()
    SQRT = auto()
    CBRT = auto()
    NTH_ROOT = auto()
    SIN = auto()
    ASIN = auto()
    COS = auto()
    ACOS = auto()
    TAN = auto()
    ATAN = auto()
    TO_RADIANS = auto()
    TO_DEGREES = auto()


ARG_NULL = None
DEFAULT_SYMBOL = "x"

LEAF_TYPES = frozenset({ExprNodeType.CONST, ExprNodeType.VAR})
BINARY_TYPES = frozenset(
    {
        ExprNodeType.ADD,
        ExprNodeType.SUB,
        ExprNodeType.MUL,
        ExprNodeType.DIV,
        ExprNodeType.POW,
        ExprNodeType.LOG,
    }
)
UNARY_TYPES = frozenset(ExprNodeType) - LEAF_TYPES - BINARY_TYPES

FUNCTION_NAMES = {
    ExprNodeType.LN: "ln",
    ExprNodeType.LD: "ld",
    ExprNodeType.EXP: "exp",
    ExprNodeType.SQRT: "sqrt",
    ExprNodeType.CBRT: "cbrt",
    ExprNodeType.SIN: "sin",
    ExprNodeType.ASIN: "asin",
    ExprNodeType.COS: "cos",
    ExprNodeType.ACOS: "acos",
    ExprNodeType.TAN: "tan",
    ExprNodeType.ATAN: "atan",
}

# binding strength used when deciding where parentheses are needed
_PRECEDENCE = {
    ExprNodeType.ADD: 1,
    ExprNodeType.SUB: 1,
    ExprNodeType.MUL: 2,
    ExprNodeType.DIV: 2,
    ExprNodeType.POW: 3,
}
_ATOM = 4

Number = Union[int, float]


class ExprNode(object):
    """
    Immutable node of an expression tree.

    `arg` carries the leaf payload: the value of a constant, the symbol of a
    variable or the degree of an n-th root. Unary nodes keep their operand in
    `left`; binary nodes use both `left` and `right` (base and exponent for
    powers, value and base for logarithms).
    """

    __slots__ = ("type", "arg", "left", "right")

    def __init__(
        self,
        type: ExprNodeType,
        arg=ARG_NULL,
        left: Optional["ExprNode"] = None,
        right: Optional["ExprNode"] = None,
    ) -> None:
        type = ExprNodeType(type)
        if type == ExprNodeType.CONST:
            if isinstance(arg, bool) or not isinstance(arg, Real):
                raise ValueError(f"Constant needs a real number, got {arg!r}")
            arg = float(arg)
            if not math.isfinite(arg):
                raise ValueError(f"Constant must be finite, got {arg}")
        elif type == ExprNodeType.VAR:
            if not isinstance(arg, str) or not arg:
                raise ValueError(f"Variable needs a symbol, got {arg!r}")
        elif type == ExprNodeType.NTH_ROOT:
            if isinstance(arg, bool) or not isinstance(arg, int) or arg < 2:
                raise ValueError(f"Root degree must be an integer >= 2, got {arg!r}")

        if type in LEAF_TYPES:
            if left is not None or right is not None:
                raise ValueError(f"{type.name} takes no operands")
        elif type in BINARY_TYPES:
            if left is None or right is None:
                raise ValueError(f"{type.name} takes two operands")
        elif left is None or right is not None:
            raise ValueError(f"{type.name} takes one operand")

        object.__setattr__(self, "type", type)
        object.__setattr__(self, "arg", arg)
        object.__setattr__(self, "left", left)
        object.__setattr__(self, "right", right)

    def __setattr__(self, name, value) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def node_count(self) -> int:
        return 1 + sum(child.node_count() for child in self.children())

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def children(self) -> List["ExprNode"]:
        return [x for x in [self.left, self.right] if x is not None]

    def topological_sort(self) -> List["ExprNode"]:
        if self.left is None and self.right is None:
            return [self]
        elif self.right is None:
            return self.left.topological_sort() + [self]
        else:
            return self.left.topological_sort() + self.right.topological_sort() + [self]

    def free_symbols(self) -> frozenset:
        return frozenset(
            node.arg for node in self.topological_sort() if node.type == ExprNodeType.VAR
        )

    def is_constant(self) -> bool:
        if self.type == ExprNodeType.CONST:
            return True
        if self.type == ExprNodeType.VAR:
            return False
        return all(child.is_constant() for child in self.children())

    def is_negation(self) -> bool:
        # (-1) * a
        return self.type == ExprNodeType.MUL and self.left == minus_one

    def compute(self, value=None, bindings=None) -> float:
        from symcalc.expr.evaluate import compute

        if isinstance(value, Mapping):
            value, bindings = None, value
        if value is not None:
            bindings = dict(bindings or {})
            bindings[DEFAULT_SYMBOL] = value
        return compute(self, bindings)

    def differentiate(self, with_respect_to: str = DEFAULT_SYMBOL) -> "ExprNode":
        from symcalc.expr.differentiate import differentiate

        return differentiate(self, with_respect_to)

    def simplify(self) -> "ExprNode":
        from symcalc.expr.simplify import simplify

        return simplify(self)

    # fluent builder

    def plus(self, other) -> "ExprNode":
        return ExprNode(ExprNodeType.ADD, left=self, right=as_expr(other))

    def minus(self, other) -> "ExprNode":
        return ExprNode(ExprNodeType.SUB, left=self, right=as_expr(other))

    def multiply(self, other) -> "ExprNode":
        return ExprNode(ExprNodeType.MUL, left=self, right=as_expr(other))

    def divide(self, other) -> "ExprNode":
        return ExprNode(ExprNodeType.DIV, left=self, right=as_expr(other))

    def pow(self, other) -> "ExprNode":
        return ExprNode(ExprNodeType.POW, left=self, right=as_expr(other))

    def log(self, base) -> "ExprNode":
        return ExprNode(ExprNodeType.LOG, left=self, right=as_expr(base))

    def nth_root(self, degree: int) -> "ExprNode":
        return ExprNode(ExprNodeType.NTH_ROOT, degree, left=self)

    def neg(self) -> "ExprNode":
        return ExprNode(ExprNodeType.MUL, left=minus_one, right=self)

    def _unary(self, type: ExprNodeType) -> "ExprNode":
        return ExprNode(type, left=self)

    def ln(self) -> "ExprNode":
        return self._unary(ExprNodeType.LN)

    def ld(self) -> "ExprNode":
        return self._unary(ExprNodeType.LD)

    def exp(self) -> "ExprNode":
        return self._unary(ExprNodeType.EXP)

    def sqrt(self) -> "ExprNode":
        return self._unary(ExprNodeType.SQRT)

    def cbrt(self) -> "ExprNode":
        return self._unary(ExprNodeType.CBRT)

    def sin(self) -> "ExprNode":
        return self._unary(ExprNodeType.SIN)

    def asin(self) -> "ExprNode":
        return self._unary(ExprNodeType.ASIN)

    def cos(self) -> "ExprNode":
        return self._unary(ExprNodeType.COS)

    def acos(self) -> "ExprNode":
        return self._unary(ExprNodeType.ACOS)

    def tan(self) -> "ExprNode":
        return self._unary(ExprNodeType.TAN)

    def atan(self) -> "ExprNode":
        return self._unary(ExprNodeType.ATAN)

    def to_radians(self) -> "ExprNode":
        return self._unary(ExprNodeType.TO_RADIANS)

    def to_degrees(self) -> "ExprNode":
        return self._unary(ExprNodeType.TO_DEGREES)

    def __add__(self, other):
        return self.plus(other)

    def __radd__(self, other):
        return as_expr(other).plus(self)

    def __sub__(self, other):
        return self.minus(other)

    def __rsub__(self, other):
        return as_expr(other).minus(self)

    def __mul__(self, other):
        return self.multiply(other)

    def __rmul__(self, other):
        return as_expr(other).multiply(self)

    def __truediv__(self, other):
        return self.divide(other)

    def __rtruediv__(self, other):
        return as_expr(other).divide(self)

    def __pow__(self, other):
        return self.pow(other)

    def __rpow__(self, other):
        return as_expr(other).pow(self)

    def __neg__(self):
        return self.neg()

    # structural equality

    def _constant_value(self) -> Optional[float]:
        from symcalc.expr.errors import EvaluationError
        from symcalc.expr.evaluate import compute

        if self.type == ExprNodeType.CONST:
            return self.arg
        try:
            return compute(self)
        except (EvaluationError, ArithmeticError):
            return None

    def __eq__(self, value: object) -> bool:
        if self is value:
            return True
        if not isinstance(value, ExprNode):
            return False
        if self.is_constant() and value.is_constant():
            a, b = self._constant_value(), value._constant_value()
            if a is not None and b is not None:
                return a == b
        return (
            self.type == value.type
            and self.arg == value.arg
            and self.left == value.left
            and self.right == value.right
        )

    def __hash__(self) -> int:
        if self.is_constant():
            number = self._constant_value()
            if number is not None:
                return hash((ExprNodeType.CONST, number))
        return hash((self.type, self.arg, self.left, self.right))

    # display

    def _precedence(self) -> int:
        if self.type == ExprNodeType.CONST:
            return _PRECEDENCE[ExprNodeType.MUL] if self.arg < 0 else _ATOM
        if self.is_negation():
            return _PRECEDENCE[ExprNodeType.MUL]
        if self.type in (ExprNodeType.TO_RADIANS, ExprNodeType.TO_DEGREES):
            return self.left._precedence()
        return _PRECEDENCE.get(self.type, _ATOM)

    def _wrap(self, precedence: int, strict: bool = False) -> str:
        own = self._precedence()
        if own < precedence or (strict and own == precedence):
            return f"({self})"
        return str(self)

    def __str__(self) -> str:
        if self.type == ExprNodeType.CONST:
            return format_number(self.arg)

        if self.type == ExprNodeType.VAR:
            return self.arg

        if self.type in (ExprNodeType.TO_RADIANS, ExprNodeType.TO_DEGREES):
            return str(self.left)

        if self.type in FUNCTION_NAMES:
            return f"{FUNCTION_NAMES[self.type]}({self.left})"

        if self.type == ExprNodeType.NTH_ROOT:
            return f"root_{self.arg}({self.left})"

        if self.type == ExprNodeType.LOG:
            return f"log_{self.right._wrap(_ATOM)}({self.left})"

        if self.type == ExprNodeType.ADD:
            return f"{self.left._wrap(1)} + {self.right._wrap(1)}"

        if self.type == ExprNodeType.SUB:
            return f"{self.left._wrap(1)} - {self.right._wrap(1, strict=True)}"

        if self.type == ExprNodeType.MUL:
            left, right = self.left, self.right
            if left == minus_one and right.type != ExprNodeType.CONST:
                return f"-{right._wrap(2)}"
            if left.type == ExprNodeType.CONST and right.type == ExprNodeType.VAR:
                return f"{left}{right}"
            if left.type == ExprNodeType.VAR and right.type == ExprNodeType.VAR:
                return f"{left}{right}"
            return f"{left._wrap(2)} * {right._wrap(2)}"

        if self.type == ExprNodeType.DIV:
            return f"{self.left._wrap(2)} / {self.right._wrap(2, strict=True)}"

        if self.type == ExprNodeType.POW:
            return f"{self.left._wrap(3, strict=True)}^{self.right._wrap(3, strict=True)}"

        raise NotImplementedError(f"Unsupported expression type {self.type}")

    def __repr__(self) -> str:
        if self.is_leaf():
            return f"ExprNode({self.type.name}, {self.arg!r})"
        args = ", ".join(repr(child) for child in self.children())
        if self.arg is not ARG_NULL:
            args = f"{self.arg!r}, {args}"
        return f"ExprNode({self.type.name}, {args})"

    # sympy interop

    def to_sympy(self) -> sp.Expr:
        if self.type == ExprNodeType.CONST:
            if self.arg == math.pi:
                return sp.pi
            if self.arg == math.e:
                return sp.E
            if self.arg.is_integer():
                return sp.Integer(int(self.arg))
            return sp.Float(self.arg)

        if self.type == ExprNodeType.VAR:
            return sp.Symbol(self.arg)

        if self.type == ExprNodeType.NTH_ROOT:
            return sp.root(self.left.to_sympy(), self.arg)

        args = [child.to_sympy() for child in self.children()]
        return _SYMPY_BUILDERS[self.type](*args)

    @classmethod
    def from_sympy(cls, expr: Union[sp.Expr, Number]) -> "ExprNode":
        if isinstance(expr, (int, float)) and not isinstance(expr, bool):
            return constant(expr)

        if isinstance(expr, (sp.Number, sp.NumberSymbol)):
            return constant(float(expr))

        if isinstance(expr, sp.Symbol):
            return variable(expr.name)

        if isinstance(expr, (sp.Add, sp.Mul)):
            node_type = ExprNodeType.ADD if isinstance(expr, sp.Add) else ExprNodeType.MUL
            operands = [cls.from_sympy(arg) for arg in expr.args]
            return reduce(lambda left, right: ExprNode(node_type, left=left, right=right), operands)

        if isinstance(expr, sp.Pow):
            base, exponent = expr.args
            if base == sp.E:
                return cls.from_sympy(exponent).exp()
            if exponent == sp.S.Half:
                return cls.from_sympy(base).sqrt()
            if isinstance(exponent, sp.Rational) and exponent.p == 1 and exponent.q >= 3:
                if exponent.q == 3:
                    return cls.from_sympy(base).cbrt()
                return cls.from_sympy(base).nth_root(int(exponent.q))
            return cls.from_sympy(base).pow(cls.from_sympy(exponent))

        for sympy_type, node_type in _FROM_SYMPY_FUNCTIONS:
            if isinstance(expr, sympy_type):
                return ExprNode(node_type, left=cls.from_sympy(expr.args[0]))

        raise NotImplementedError(f"Unsupported expression type {type(expr)}")


_SYMPY_BUILDERS = {
    ExprNodeType.ADD: lambda a, b: a + b,
    ExprNodeType.SUB: lambda a, b: a - b,
    ExprNodeType.MUL: lambda a, b: a * b,
    ExprNodeType.DIV: lambda a, b: a / b,
    ExprNodeType.POW: sp.Pow,
    ExprNodeType.LOG: sp.log,
    ExprNodeType.LN: sp.log,
    ExprNodeType.LD: lambda a: sp.log(a, 2),
    ExprNodeType.EXP: sp.exp,
    ExprNodeType.SQRT: sp.sqrt,
    ExprNodeType.CBRT: sp.cbrt,
    ExprNodeType.SIN: sp.sin,
    ExprNodeType.ASIN: sp.asin,
    ExprNodeType.COS: sp.cos,
    ExprNodeType.ACOS: sp.acos,
    ExprNodeType.TAN: sp.tan,
    ExprNodeType.ATAN: sp.atan,
    ExprNodeType.TO_RADIANS: lambda a: a * sp.pi / 180,
    ExprNodeType.TO_DEGREES: lambda a: a * 180 / sp.pi,
}

_FROM_SYMPY_FUNCTIONS = [
    (sp.exp, ExprNodeType.EXP),
    (sp.log, ExprNodeType.LN),
    (sp.sin, ExprNodeType.SIN),
    (sp.asin, ExprNodeType.ASIN),
    (sp.cos, ExprNodeType.COS),
    (sp.acos, ExprNodeType.ACOS),
    (sp.tan, ExprNodeType.TAN),
    (sp.atan, ExprNodeType.ATAN),
]


def format_number(value: float) -> str:
    if value == math.pi:
        return "π"
    if value == -math.pi:
        return "-π"
    if value == math.e:
        return "e"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _make_constant(value: Number) -> ExprNode:
    return ExprNode(ExprNodeType.CONST, value)


zero = _make_constant(0)
one = _make_constant(1)
two = _make_constant(2)
three = _make_constant(3)
minus_one = _make_constant(-1)
e = _make_constant(math.e)
pi = _make_constant(math.pi)

_CANONICAL = {node.arg: node for node in (zero, one, two, three, minus_one, e, pi)}


def constant(value: Number) -> ExprNode:
    canonical = _CANONICAL.get(value) if type(value) in (int, float) else None
    if canonical is not None:
        return canonical
    return _make_constant(value)


def variable(symbol: str = DEFAULT_SYMBOL) -> ExprNode:
    return ExprNode(ExprNodeType.VAR, symbol)


def as_expr(value: Union[ExprNode, Number, str]) -> ExprNode:
    if isinstance(value, ExprNode):
        return value
    if isinstance(value, str):
        return variable(value)
    return constant(value)


def negate(expr: ExprNode) -> ExprNode:
    if expr.type == ExprNodeType.CONST:
        return constant(-expr.arg)
    return expr.neg()


@lru_cache(maxsize=None)
def ln_two() -> ExprNode:
    return constant(math.log(2))
