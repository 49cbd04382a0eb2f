"""
Port: Simplifier
Odpowiedzialność: algebraiczne upraszczanie drzewa ExprAST.
"""
from typing import Protocol, runtime_checkable

from contracts import ExprAST, SimplifyResult


@runtime_checkable
class Simplifier(Protocol):
    def simplify(self, ast: ExprAST) -> ExprAST:
        """
        Bottom-up rewriting: constant folding, identity rules (x*1, x+0,
        x^0, ...), x-x and x/x, ln(e^x) and constant function values.
        Pure and idempotent; never raises. Division by a zero constant is
        left unfolded.
        """
        ...

    def simplify_with_steps(self, ast: ExprAST) -> SimplifyResult:
        """
        Same result as simplify(), plus the ordered list of printed
        snapshots: each node before its children are simplified, and again
        after a node whose result differs from its original form.
        """
        ...
