class EvaluationError(Exception):
    """Raised when an expression cannot be computed to a real number."""


class UnboundVariable(EvaluationError, LookupError):
    def __init__(self, symbol: str) -> None:
        super().__init__(f"'{symbol}' was not defined")
        self.symbol = symbol


class DivisionByZero(EvaluationError, ZeroDivisionError):
    pass


class InvalidDomain(EvaluationError, ValueError):
    pass
