"""
Adapter: ShuntingYardParser
Implementuje port ExpressionParser.

Algorytm shunting-yard z obsługą funkcji:
  stos operandów (ExprAST) + stos operatorów (OPERATOR / FUNCTION / LEFT_PAREN)

  NUMBER, VARIABLE → operand
  FUNCTION, "("    → zawsze na stos operatorów
  ")"              → zdejmuj operatory aż do "("; jeśli pod nim leży
                     FUNCTION, zastosuj ją do właśnie zamkniętego operandu
  OPERATOR         → zdejmuj operatory o wyższym priorytecie (lub równym,
                     gdy bieżący jest lewostronnie łączny), potem wstaw bieżący

Priorytety: + - = 1, * / = 2, ^ = 3 (prawostronnie łączny).

parse() opakowuje każdy błąd wewnętrzny w jeden ParseError z oryginalnym
tekstem wyrażenia (przyczyna w __cause__).
"""
from __future__ import annotations

import logging
from typing import Optional

from adapters.tokenizer.infix_tokenizer import InfixTokenizer
from contracts import (
    OPERATOR_PRECEDENCE,
    SUPPORTED_FUNCTIONS,
    BinOpNode,
    ConstantNode,
    ExprAST,
    FunctionNode,
    Token,
    TokenType,
    VariableNode,
    is_left_associative,
)
from errors import ExprError, ParseError
from ports.tokenizer import Tokenizer

logger = logging.getLogger("exprfold.parser")


class _ShuntingYard:
    def __init__(self, tokens: list[Token]) -> None:
        self._tokens = tokens
        self._operands: list[ExprAST] = []
        self._operators: list[Token] = []

    def parse(self) -> ExprAST:
        if not self._tokens:
            raise ParseError("Empty token list", code="1001")

        for token in self._tokens:
            if token.type == TokenType.NUMBER:
                self._operands.append(ConstantNode(value=float(token.value)))
            elif token.type == TokenType.VARIABLE:
                self._operands.append(VariableNode(name=token.value))
            elif token.type in (TokenType.FUNCTION, TokenType.LEFT_PAREN):
                self._operators.append(token)
            elif token.type == TokenType.RIGHT_PAREN:
                self._close_paren()
            else:
                while self._operators and self._should_apply(token, self._operators[-1]):
                    self._apply(self._operators.pop())
                self._operators.append(token)

        while self._operators:
            top = self._operators.pop()
            if top.type == TokenType.LEFT_PAREN:
                raise ParseError("Unbalanced parentheses: missing ')'", code="1004")
            self._apply(top)

        if len(self._operands) != 1:
            raise ParseError("Invalid expression structure", code="1006")
        return self._operands.pop()

    def _close_paren(self) -> None:
        while self._operators and self._operators[-1].type != TokenType.LEFT_PAREN:
            self._apply(self._operators.pop())
        if not self._operators:
            raise ParseError("Unbalanced parentheses: missing '('", code="1004")
        self._operators.pop()  # "("
        if self._operators and self._operators[-1].type == TokenType.FUNCTION:
            self._apply(self._operators.pop())

    @staticmethod
    def _should_apply(current: Token, top: Token) -> bool:
        if top.type != TokenType.OPERATOR:
            return False
        current_prec = OPERATOR_PRECEDENCE[current.value]
        top_prec = OPERATOR_PRECEDENCE[top.value]
        return top_prec > current_prec or (
            top_prec == current_prec and is_left_associative(current.value)
        )

    def _apply(self, token: Token) -> None:
        if token.type == TokenType.FUNCTION:
            if not self._operands:
                raise ParseError(f"Function {token.value!r} requires an argument", code="1005")
            argument = self._operands.pop()
            self._operands.append(FunctionNode(name=token.value, argument=argument))
            return

        if len(self._operands) < 2:
            raise ParseError(
                f"Binary operator {token.value!r} requires two operands", code="1005"
            )
        right = self._operands.pop()
        left = self._operands.pop()
        self._operands.append(BinOpNode(op=token.value, left=left, right=right))


class ShuntingYardParser:
    """Parser tekstu wyrażenia do ExprAST (tokenizer + shunting-yard)."""

    def __init__(self, tokenizer: Optional[Tokenizer] = None) -> None:
        self._tokenizer = tokenizer or InfixTokenizer()

    # -- ExpressionParser protocol -----------------------------------------

    def parse(self, text: str) -> ExprAST:
        if text is None or not text.strip():
            raise ParseError("Expression cannot be null or empty", code="1001", expression=text)

        try:
            tokens = self._tokenizer.tokenize(text)
            ast = self.parse_tokens(tokens)
        except (ExprError, ValueError) as exc:
            raise ParseError(
                f"Failed to parse expression {text!r}: {exc}",
                code=getattr(exc, "code", None),
                expression=text,
            ) from exc

        logger.debug("Parsed %r -> %s", text, ast.show())
        return ast

    def parse_tokens(self, tokens: list[Token]) -> ExprAST:
        return _ShuntingYard(tokens).parse()

    def is_valid(self, text: str) -> bool:
        try:
            self.parse(text)
            return True
        except ParseError:
            return False

    @staticmethod
    def supported_functions() -> frozenset[str]:
        return SUPPORTED_FUNCTIONS
