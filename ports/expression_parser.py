"""
Port: ExpressionParser
Odpowiedzialność: parsowanie tekstu wyrażenia do drzewa ExprAST.
"""
from typing import Protocol, runtime_checkable

from contracts import ExprAST, Token


@runtime_checkable
class ExpressionParser(Protocol):
    def parse(self, text: str) -> ExprAST:
        """
        Parses an infix expression string into an ExprAST tree.

        Any failure (unknown character, malformed number, unbalanced
        parentheses, missing operands, invalid node) is raised as a single
        ParseError carrying the original text; the underlying error is
        chained as __cause__.
        """
        ...

    def parse_tokens(self, tokens: list[Token]) -> ExprAST:
        """
        Builds an ExprAST from an already tokenized expression.
        Raises ParseError on structural errors.
        """
        ...

    def is_valid(self, text: str) -> bool:
        """True if parse(text) would succeed. Never raises."""
        ...
