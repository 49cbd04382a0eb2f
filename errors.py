"""
errors.py — Hierarchia wyjątków ExprFold.

Kody błędów:
  1. cyfra: grupa (1 = parsowanie, 2 = konstrukcja węzła, 3 = ewaluacja)
  2.–4. cyfra: numer błędu w grupie
"""
from __future__ import annotations

from typing import Optional

ERROR_MESSAGES: dict[str, str] = {
    "1000": "Failed to parse expression",
    "1001": "Expression cannot be empty",
    "1002": "Unknown character",
    "1003": "Malformed number",
    "1004": "Unbalanced parentheses",
    "1005": "Operator or function is missing an operand",
    "1006": "Invalid expression structure",

    "2000": "Invalid expression node",
    "2001": "Invalid operator",
    "2002": "Invalid variable name",
    "2003": "Operand cannot be None",
    "2004": "Unsupported function",

    "3000": "Evaluation failed",
    "3001": "Undefined variable",
    "3002": "Division by zero",
    "3003": "Argument outside of function domain",
    "3004": "Unknown function",

    "9999": "Unexpected error",
}


class ExprError(Exception):
    """Bazowy wyjątek; niesie kod błędu i (opcjonalnie) tekst wyrażenia."""

    default_code = "9999"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        expression: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.expression = expression


class ParseError(ExprError):
    default_code = "1000"


class ConstructionError(ExprError):
    default_code = "2000"


class EvaluationError(ExprError):
    default_code = "3000"


class UndefinedVariable(EvaluationError):
    default_code = "3001"

    def __init__(self, name: str, expression: Optional[str] = None) -> None:
        super().__init__(f"Value for variable {name!r} not provided", expression=expression)
        self.name = name


class DivisionByZero(EvaluationError):
    default_code = "3002"


class DomainError(EvaluationError):
    default_code = "3003"


class UnknownFunction(EvaluationError):
    default_code = "3004"

    def __init__(self, name: str, expression: Optional[str] = None) -> None:
        super().__init__(f"Unknown function: {name!r}", expression=expression)
        self.name = name
