"""
contracts.py — Jedyne źródło prawdy dla typów danych w ExprFold.
Wszystkie moduły importują typy WYŁĄCZNIE stąd.

Model wyrażenia to zamknięta unia ExprAST czterech zamrożonych węzłów
(ConstantNode, VariableNode, BinOpNode, FunctionNode). Walidacja operatora,
nazwy funkcji i nazwy zmiennej odbywa się przy konstrukcji węzła i rzuca
ConstructionError. Węzły nigdy nie są mutowane — uproszczenie buduje nowe.

show() na każdym węźle renderuje minimalnie onawiasowany zapis infiksowy.
"""
from __future__ import annotations

import math
import re
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from errors import ConstructionError

CONTRACTS_VERSION = "1.0.0"

# Wartości |x| < ZERO_TOLERANCE traktowane są jak zero (dzielenie, reguły tożsamości)
ZERO_TOLERANCE = 1e-10


# ─────────────────────────── Operatory i funkcje ─────────────────────────

BINARY_OPERATORS: frozenset[str] = frozenset({"+", "-", "*", "/", "^"})

OPERATOR_PRECEDENCE: dict[str, int] = {
    "+": 1,
    "-": 1,
    "*": 2,
    "/": 2,
    "^": 3,
}

RIGHT_ASSOCIATIVE: frozenset[str] = frozenset({"^"})

SUPPORTED_FUNCTIONS: frozenset[str] = frozenset({
    "ln", "log",
    "sin", "cos", "tan", "sec", "csc", "cot",
    "sinh", "cosh", "tanh",
    "sqrt", "abs",
})

_VARIABLE_NAME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9]*$")


def is_left_associative(op: str) -> bool:
    return op not in RIGHT_ASSOCIATIVE


def real_pow(base: float, exponent: float) -> float:
    """Potęgowanie rzeczywiste bez wyjątków: nan poza dziedziną, ±inf przy przepełnieniu."""
    try:
        return math.pow(base, exponent)
    except ValueError:
        if base == 0:
            return math.inf
        return math.nan
    except OverflowError:
        odd_exponent = exponent == int(exponent) and int(exponent) % 2 == 1
        return -math.inf if base < 0 and odd_exponent else math.inf


ARITHMETIC: dict[str, Callable[[float, float], float]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": lambda a, b: a / b,
    "^": real_pow,
}


def format_number(value: float) -> str:
    """Liczby całkowite bez części ułamkowej, pozostałe w zapisie dziesiętnym (bez 'e')."""
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value == int(value):
        return str(int(value))
    return format(Decimal(repr(value)), "f")


# ─────────────────────────── Tokeny ──────────────────────────────────────

class TokenType(str, Enum):
    NUMBER = "NUMBER"
    VARIABLE = "VARIABLE"
    FUNCTION = "FUNCTION"
    OPERATOR = "OPERATOR"
    LEFT_PAREN = "LEFT_PAREN"
    RIGHT_PAREN = "RIGHT_PAREN"


class Token(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: TokenType
    value: str

    def __str__(self) -> str:
        return f"{self.type.value}({self.value})"


# ─────────────────────────── AST wyrażenia ───────────────────────────────

class ConstantNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    node_type: Literal["constant"] = "constant"
    value: float

    def show(self) -> str:
        return format_number(self.value)

    def is_zero(self, tolerance: float = ZERO_TOLERANCE) -> bool:
        return abs(self.value) < tolerance

    def is_one(self, tolerance: float = ZERO_TOLERANCE) -> bool:
        return abs(self.value - 1.0) < tolerance

    def is_negative_one(self, tolerance: float = ZERO_TOLERANCE) -> bool:
        return abs(self.value + 1.0) < tolerance

    def is_positive(self) -> bool:
        return self.value > 0

    def is_negative(self) -> bool:
        return self.value < 0

    def negate(self) -> ConstantNode:
        return ConstantNode(value=-self.value)

    def absolute(self) -> ConstantNode:
        return ConstantNode(value=abs(self.value))

    def __str__(self) -> str:
        return self.show()


class VariableNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    node_type: Literal["variable"] = "variable"
    name: str

    @field_validator("name", mode="before")
    @classmethod
    def _check_name(cls, v: Any) -> str:
        if v is None or not str(v).strip():
            raise ConstructionError("Variable name cannot be null or empty", code="2002")
        name = str(v).strip()
        if not _VARIABLE_NAME_RE.match(name):
            raise ConstructionError(f"Invalid variable name: {name!r}", code="2002")
        return name

    def show(self) -> str:
        return self.name

    def has_name(self, name: str) -> bool:
        return self.name == name

    def __str__(self) -> str:
        return self.show()


class BinOpNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    node_type: Literal["binop"] = "binop"
    op: Literal["+", "-", "*", "/", "^"]
    left: "ExprAST"
    right: "ExprAST"

    @field_validator("op", mode="before")
    @classmethod
    def _check_op(cls, v: Any) -> str:
        op = v.strip() if isinstance(v, str) else v
        if op not in BINARY_OPERATORS:
            raise ConstructionError(f"Invalid operator: {v!r}", code="2001")
        return op

    @field_validator("left", "right", mode="before")
    @classmethod
    def _check_operand(cls, v: Any, info) -> Any:
        if v is None:
            raise ConstructionError(
                f"{info.field_name.capitalize()} operand cannot be None", code="2003"
            )
        return v

    @property
    def precedence(self) -> int:
        return OPERATOR_PRECEDENCE[self.op]

    def is_commutative(self) -> bool:
        return self.op in ("+", "*")

    def is_associative(self) -> bool:
        return self.op in ("+", "*")

    def show(self) -> str:
        left = _operand_text(self.left, self.op, is_left=True)
        right = _operand_text(self.right, self.op, is_left=False)
        return f"{left} {self.op} {right}"

    def __str__(self) -> str:
        return self.show()


class FunctionNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    node_type: Literal["function"] = "function"
    name: str
    argument: "ExprAST"

    @field_validator("name", mode="before")
    @classmethod
    def _check_name(cls, v: Any) -> str:
        if v not in SUPPORTED_FUNCTIONS:
            raise ConstructionError(f"Unsupported function: {v!r}", code="2004")
        return v

    @field_validator("argument", mode="before")
    @classmethod
    def _check_argument(cls, v: Any) -> Any:
        if v is None:
            raise ConstructionError("Function argument cannot be None", code="2003")
        return v

    def show(self) -> str:
        return f"{self.name}({self.argument.show()})"

    def __str__(self) -> str:
        return self.show()


ExprAST = Union[ConstantNode, VariableNode, BinOpNode, FunctionNode]
BinOpNode.model_rebuild()
FunctionNode.model_rebuild()


def _needs_parentheses(child: ExprAST, parent_op: str, is_left: bool) -> bool:
    # Ujemna stała jako operand: "x + (-3)", inaczej "x + -3" wróciłoby jako (x + 0) - 3
    if isinstance(child, ConstantNode):
        return child.value < 0
    if not isinstance(child, BinOpNode):
        return False

    parent_prec = OPERATOR_PRECEDENCE[parent_op]
    child_prec = child.precedence
    if child_prec < parent_prec:
        return True
    # Lewy operand o równym priorytecie nigdy nie dostaje nawiasów
    if child_prec == parent_prec and not is_left:
        return is_left_associative(parent_op)
    return False


def _operand_text(child: ExprAST, parent_op: str, is_left: bool) -> str:
    text = child.show()
    if _needs_parentheses(child, parent_op, is_left):
        return f"({text})"
    return text


def copy_expr(node: ExprAST) -> ExprAST:
    """Głęboka kopia drzewa — dla konsumentów, którzy chcą niezależnego drzewa."""
    return node.model_copy(deep=True)


# ─────────────────────────── Wyniki ──────────────────────────────────────

class SimplifyResult(BaseModel):
    result: ExprAST
    steps: list[str] = Field(default_factory=list)  # show() kolejnych węzłów, pre-order


class EvalResult(BaseModel):
    value: float
    steps: list[str] = Field(default_factory=list)  # czytelne kroki
