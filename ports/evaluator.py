"""
Port: Evaluator
Odpowiedzialność: liczenie wartości drzewa ExprAST dla podanych zmiennych.
"""
from typing import Mapping, Optional, Protocol, runtime_checkable

from contracts import EvalResult, ExprAST


@runtime_checkable
class Evaluator(Protocol):
    def evaluate(
        self,
        ast: ExprAST,
        env: Optional[Mapping[str, float]] = None,
    ) -> float:
        """
        Evaluates an AST to a float.
        env: variable bindings for VariableNode resolution.
        Raises UndefinedVariable for unbound variables, DivisionByZero when
        |divisor| < 1e-10, DomainError for ln/log/sqrt outside their domain
        and UnknownFunction for a function it cannot compute.
        """
        ...

    def eval_expr(
        self,
        ast: ExprAST,
        env: Optional[Mapping[str, float]] = None,
    ) -> EvalResult:
        """
        Like evaluate(), but returns EvalResult with the value and the list
        of human-readable computation steps ("2 * 3 = 6").
        """
        ...
