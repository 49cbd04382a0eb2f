"""
Adapter: ASTEvaluator
Implementuje port Evaluator — rekurencyjne przejście ExprAST na liczbach float.

evaluate()  — zwraca samą wartość
eval_expr() — wartość + czytelne kroki obliczeń ("2 * 3 = 6")

Błędy:
  UndefinedVariable — zmienna bez wartości w env
  DivisionByZero    — |dzielnik| < tolerancja (także sec/csc/cot)
  DomainError       — ln/log dla x <= 0, sqrt dla x < 0
  UnknownFunction   — funkcja, której ewaluator nie umie policzyć
"""
from __future__ import annotations

import logging
import math
from typing import Callable, Mapping, Optional

from contracts import (
    ARITHMETIC,
    ZERO_TOLERANCE,
    BinOpNode,
    ConstantNode,
    EvalResult,
    ExprAST,
    FunctionNode,
    VariableNode,
    format_number,
)
from errors import (
    DivisionByZero,
    DomainError,
    EvaluationError,
    UndefinedVariable,
    UnknownFunction,
)

logger = logging.getLogger("exprfold.evaluator")

# Funkcje liczone bez warunków dziedziny
_FUNCTIONS: dict[str, Callable[[float], float]] = {
    "sin": math.sin,
    "cos": math.cos,
    "tan": math.tan,
    "sinh": math.sinh,
    "cosh": math.cosh,
    "tanh": math.tanh,
    "abs": abs,
}

# Funkcje odwrotne: nazwa → mianownik
_RECIPROCALS: dict[str, Callable[[float], float]] = {
    "sec": math.cos,
    "csc": math.sin,
    "cot": math.tan,
}


class ASTEvaluator:
    """Ewaluator wyrażeń ExprAST na liczbach zmiennoprzecinkowych."""

    def __init__(self, tolerance: float = ZERO_TOLERANCE) -> None:
        self._tolerance = tolerance

    # -- Evaluator protocol ------------------------------------------------

    def evaluate(
        self,
        ast: ExprAST,
        env: Optional[Mapping[str, float]] = None,
    ) -> float:
        value, _ = self._eval(ast, self._float_env(env), record=False)
        return value

    def eval_expr(
        self,
        ast: ExprAST,
        env: Optional[Mapping[str, float]] = None,
    ) -> EvalResult:
        """
        Rekurencyjnie oblicza wartość AST.
        env: opcjonalne podstawienia zmiennych (np. {"x": 5}).
        Zwraca EvalResult z wartością i krokami.
        """
        value, steps = self._eval(ast, self._float_env(env), record=True)
        logger.debug("Evaluated %s = %s", ast.show(), format_number(value))
        return EvalResult(value=value, steps=steps)

    # -- Prywatne ----------------------------------------------------------

    @staticmethod
    def _float_env(env: Optional[Mapping[str, float]]) -> dict[str, float]:
        return {k: float(v) for k, v in (env or {}).items()}

    def _eval(
        self,
        node: ExprAST,
        env: dict[str, float],
        record: bool,
    ) -> tuple[float, list[str]]:
        """Zwraca (wartość, lista kroków)."""

        if isinstance(node, ConstantNode):
            return node.value, []

        if isinstance(node, VariableNode):
            if node.name not in env:
                raise UndefinedVariable(node.name)
            val = env[node.name]
            return val, [f"{node.name} = {format_number(val)}"] if record else []

        if isinstance(node, BinOpNode):
            left_val, left_steps = self._eval(node.left, env, record)
            right_val, right_steps = self._eval(node.right, env, record)

            if node.op == "/" and abs(right_val) < self._tolerance:
                raise DivisionByZero("Division by zero", expression=node.show())

            result = ARITHMETIC[node.op](left_val, right_val)
            if not record:
                return result, []
            step = (
                f"{format_number(left_val)} {node.op} {format_number(right_val)}"
                f" = {format_number(result)}"
            )
            return result, left_steps + right_steps + [step]

        if isinstance(node, FunctionNode):
            arg_val, arg_steps = self._eval(node.argument, env, record)
            result = self._apply_function(node, arg_val)
            if not record:
                return result, []
            step = f"{node.name}({format_number(arg_val)}) = {format_number(result)}"
            return result, arg_steps + [step]

        raise TypeError(f"Nieznany typ węzła AST: {type(node)}")

    def _apply_function(self, node: FunctionNode, x: float) -> float:
        name = node.name

        if name in ("ln", "log"):
            if x <= 0:
                raise DomainError(
                    f"{name} is undefined for non-positive argument {format_number(x)}",
                    expression=node.show(),
                )
            return math.log(x) if name == "ln" else math.log10(x)

        if name == "sqrt":
            if x < 0:
                raise DomainError(
                    f"sqrt is undefined for negative argument {format_number(x)}",
                    expression=node.show(),
                )
            return math.sqrt(x)

        if name in _RECIPROCALS:
            denominator = _RECIPROCALS[name](x)
            if abs(denominator) < self._tolerance:
                raise DivisionByZero(f"{name} is undefined at {format_number(x)}", expression=node.show())
            return 1.0 / denominator

        fn = _FUNCTIONS.get(name)
        if fn is None:
            raise UnknownFunction(name, expression=node.show())
        try:
            return fn(x)
        except OverflowError as exc:
            raise EvaluationError(
                f"{name}({format_number(x)}) overflows", expression=node.show()
            ) from exc
