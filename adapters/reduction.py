"""
reduction.py — Potok parse → simplify → show / evaluate na tekście wyrażenia.

Składa porty ExpressionParser, Simplifier i Evaluator; sam nie zawiera
logiki algebraicznej. ReductionPipeline.default() tworzy domyślne adaptery.
"""
from __future__ import annotations

from typing import Mapping, Optional

from adapters.evaluator.ast_evaluator import ASTEvaluator
from adapters.expression_parser.shunting_yard_parser import ShuntingYardParser
from adapters.simplifier.rule_simplifier import RuleSimplifier
from config import Settings
from contracts import EvalResult, ExprAST, SimplifyResult
from ports.evaluator import Evaluator
from ports.expression_parser import ExpressionParser
from ports.simplifier import Simplifier


class ReductionPipeline:
    def __init__(
        self,
        parser: ExpressionParser,
        simplifier: Simplifier,
        evaluator: Evaluator,
    ) -> None:
        self.parser = parser
        self.simplifier = simplifier
        self.evaluator = evaluator

    @classmethod
    def default(cls, settings: Optional[Settings] = None) -> ReductionPipeline:
        settings = settings or Settings()
        return cls(
            parser=ShuntingYardParser(),
            simplifier=RuleSimplifier(tolerance=settings.zero_tolerance),
            evaluator=ASTEvaluator(tolerance=settings.zero_tolerance),
        )

    def parse(self, text: str) -> ExprAST:
        return self.parser.parse(text)

    def simplify(self, text: str) -> ExprAST:
        return self.simplifier.simplify(self.parser.parse(text))

    def simplify_text(self, text: str) -> str:
        """Np. "2x*1 + 0" → "2 * x"."""
        return self.simplify(text).show()

    def simplify_with_steps(self, text: str) -> SimplifyResult:
        return self.simplifier.simplify_with_steps(self.parser.parse(text))

    def evaluate(self, text: str, env: Optional[Mapping[str, float]] = None) -> float:
        return self.evaluator.evaluate(self.parser.parse(text), env)

    def eval_expr(self, text: str, env: Optional[Mapping[str, float]] = None) -> EvalResult:
        return self.evaluator.eval_expr(self.parser.parse(text), env)
