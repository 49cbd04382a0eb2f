"""
Adapter: RuleSimplifier
Implementuje port Simplifier — upraszczanie ExprAST od liści do korzenia.

Kolejność dla BinOpNode (po uproszczeniu obu dzieci):
  1. dwie stałe → constant-folding (a / 0 zostaje nieuproszczone, bez inf)
  2. reguły tożsamości ze stałą po prawej:  x*0, x*1, x+0, x-0, x^0, x^1, x/1
     ze stałą po lewej:                      0*x, 1*x, 0+x, 0^x, 1^x
  3. bez stałych i lewe == prawe:            x-x → 0, x/x → 1
  4. w przeciwnym razie nowy BinOpNode z uproszczonych dzieci

FunctionNode: ln(e^x) → x, sin(0) = 0, cos(0) = 1, ln(1) = 0, ln(e) = 1.

simplify_with_steps() zbiera show() węzłów w kolejności pre-order: węzeł
przed uproszczeniem dzieci, potem wynik, jeśli różni się od oryginału.
Każde wywołanie ma własną listę kroków.
"""
from __future__ import annotations

import logging
import math
from typing import Optional

from contracts import (
    ARITHMETIC,
    ZERO_TOLERANCE,
    BinOpNode,
    ConstantNode,
    ExprAST,
    FunctionNode,
    SimplifyResult,
    VariableNode,
)

logger = logging.getLogger("exprfold.simplifier")


class RuleSimplifier:
    """Regułowy upraszczacz wyrażeń (folding + tożsamości algebraiczne)."""

    def __init__(self, tolerance: float = ZERO_TOLERANCE) -> None:
        self._tolerance = tolerance

    # -- Simplifier protocol -----------------------------------------------

    def simplify(self, ast: ExprAST) -> ExprAST:
        result = self._simplify(ast, None)
        logger.debug("Simplified %s -> %s", ast.show(), result.show())
        return result

    def simplify_with_steps(self, ast: ExprAST) -> SimplifyResult:
        steps: list[str] = []
        result = self._simplify(ast, steps)
        return SimplifyResult(result=result, steps=steps)

    # -- Prywatne ----------------------------------------------------------

    def _simplify(self, node: ExprAST, steps: Optional[list[str]]) -> ExprAST:
        if steps is not None:
            steps.append(node.show())

        if isinstance(node, (ConstantNode, VariableNode)):
            return node

        if isinstance(node, BinOpNode):
            left = self._simplify(node.left, steps)
            right = self._simplify(node.right, steps)
            result = self._reduce_binop(node.op, left, right)
        elif isinstance(node, FunctionNode):
            argument = self._simplify(node.argument, steps)
            result = self._reduce_function(node.name, argument)
        else:
            raise TypeError(f"Nieznany typ węzła AST: {type(node)}")

        if steps is not None and result != node:
            steps.append(result.show())
        return result

    def _reduce_binop(self, op: str, left: ExprAST, right: ExprAST) -> ExprAST:
        if isinstance(left, ConstantNode) and isinstance(right, ConstantNode):
            return self._fold(op, left, right)

        reduced = self._apply_identities(op, left, right)
        if reduced is not None:
            return reduced
        return BinOpNode(op=op, left=left, right=right)

    def _fold(self, op: str, left: ConstantNode, right: ConstantNode) -> ExprAST:
        if op == "/" and right.is_zero(self._tolerance):
            return BinOpNode(op=op, left=left, right=right)
        return ConstantNode(value=ARITHMETIC[op](left.value, right.value))

    def _apply_identities(
        self, op: str, left: ExprAST, right: ExprAST
    ) -> Optional[ExprAST]:
        tol = self._tolerance

        if isinstance(right, ConstantNode):
            if op == "*":
                if right.is_zero(tol):
                    return ConstantNode(value=0)
                if right.is_one(tol):
                    return left
            elif op in ("+", "-"):
                if right.is_zero(tol):
                    return left
            elif op == "^":
                if right.is_zero(tol):
                    return ConstantNode(value=1)
                if right.is_one(tol):
                    return left
            elif op == "/":
                if right.is_one(tol):
                    return left

        if isinstance(left, ConstantNode):
            if op == "*":
                if left.is_zero(tol):
                    return ConstantNode(value=0)
                if left.is_one(tol):
                    return right
            elif op == "+":
                if left.is_zero(tol):
                    return right
            elif op == "^":
                if left.is_zero(tol):
                    return ConstantNode(value=0)
                if left.is_one(tol):
                    return ConstantNode(value=1)
            return None

        if not isinstance(right, ConstantNode) and left == right:
            if op == "-":
                return ConstantNode(value=0)
            if op == "/":
                return ConstantNode(value=1)
        return None

    @staticmethod
    def _reduce_function(name: str, argument: ExprAST) -> ExprAST:
        # ln(e^x) → x; wykładnik jest już uproszczony
        if (
            name == "ln"
            and isinstance(argument, BinOpNode)
            and argument.op == "^"
            and isinstance(argument.left, VariableNode)
            and argument.left.has_name("e")
        ):
            return argument.right

        if isinstance(argument, ConstantNode):
            value = argument.value
            if name == "sin" and value == 0:
                return ConstantNode(value=0)
            if name == "cos" and value == 0:
                return ConstantNode(value=1)
            if name == "ln" and value == 1:
                return ConstantNode(value=0)
            if name == "ln" and value == math.e:
                return ConstantNode(value=1)

        return FunctionNode(name=name, argument=argument)
