from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from contracts import (
    BinOpNode,
    ConstantNode,
    FunctionNode,
    Token,
    TokenType,
    VariableNode,
    copy_expr,
    format_number,
    real_pow,
)
from errors import ConstructionError


def _x() -> VariableNode:
    return VariableNode(name="x")


def test_binop_rejects_unknown_operator():
    with pytest.raises(ConstructionError) as exc:
        BinOpNode(op="%", left=_x(), right=ConstantNode(value=1))
    assert exc.value.code == "2001"


def test_binop_rejects_missing_operand():
    with pytest.raises(ConstructionError):
        BinOpNode(op="+", left=None, right=_x())


@pytest.mark.parametrize("name", ["", "   ", None, "1x", "x-y"])
def test_variable_rejects_invalid_names(name):
    with pytest.raises(ConstructionError):
        VariableNode(name=name)


def test_variable_name_is_stripped():
    assert VariableNode(name=" x1 ").name == "x1"


def test_function_rejects_unsupported_name():
    with pytest.raises(ConstructionError):
        FunctionNode(name="exp", argument=_x())


def test_nodes_are_frozen():
    node = ConstantNode(value=2)

    with pytest.raises(ValidationError):
        node.value = 3.0


def test_structural_equality_and_hash():
    a = BinOpNode(op="+", left=_x(), right=ConstantNode(value=1))
    b = BinOpNode(op="+", left=VariableNode(name="x"), right=ConstantNode(value=1.0))

    assert a == b
    assert hash(a) == hash(b)
    assert a != BinOpNode(op="-", left=_x(), right=ConstantNode(value=1))


def test_copy_expr_returns_equal_independent_tree():
    node = FunctionNode(name="sin", argument=BinOpNode(op="*", left=_x(), right=_x()))

    copied = copy_expr(node)

    assert copied == node
    assert copied is not node
    assert copied.argument is not node.argument


@pytest.mark.parametrize(
    "value, expected",
    [
        (3.0, "3"),
        (-3.0, "-3"),
        (2.5, "2.5"),
        (1e-05, "0.00001"),
        (1e20, "100000000000000000000"),
        (math.inf, "inf"),
        (math.nan, "nan"),
    ],
)
def test_constant_show(value, expected):
    assert ConstantNode(value=value).show() == expected


def test_negative_constant_operand_is_parenthesized():
    node = BinOpNode(op="+", left=_x(), right=ConstantNode(value=-3))

    assert node.show() == "x + (-3)"


def test_function_show_wraps_argument():
    node = FunctionNode(
        name="sin",
        argument=BinOpNode(op="+", left=_x(), right=ConstantNode(value=1)),
    )

    assert node.show() == "sin(x + 1)"
    assert str(node) == "sin(x + 1)"


def test_right_child_of_equal_precedence_is_parenthesized_even_when_associative():
    node = BinOpNode(
        op="+",
        left=VariableNode(name="a"),
        right=BinOpNode(op="+", left=VariableNode(name="b"), right=VariableNode(name="c")),
    )

    assert node.show() == "a + (b + c)"


def test_left_child_of_equal_precedence_is_never_parenthesized():
    node = BinOpNode(
        op="^",
        left=BinOpNode(op="^", left=VariableNode(name="a"), right=VariableNode(name="b")),
        right=VariableNode(name="c"),
    )

    assert node.show() == "a ^ b ^ c"


def test_constant_helpers():
    assert ConstantNode(value=1e-12).is_zero()
    assert ConstantNode(value=1 + 1e-12).is_one()
    assert ConstantNode(value=-1).is_negative_one()
    assert ConstantNode(value=0.5).is_zero(tolerance=1.0)
    assert ConstantNode(value=-2).is_negative()
    assert ConstantNode(value=2).is_positive()
    assert ConstantNode(value=2).negate() == ConstantNode(value=-2)
    assert ConstantNode(value=-2).absolute() == ConstantNode(value=2)


def test_binop_helpers():
    node = BinOpNode(op="*", left=_x(), right=_x())

    assert node.precedence == 2
    assert node.is_commutative()
    assert node.is_associative()
    assert not BinOpNode(op="-", left=_x(), right=_x()).is_commutative()
    assert _x().has_name("x")


def test_real_pow_never_raises():
    assert math.isnan(real_pow(-8, 1 / 3))
    assert real_pow(10, 400) == math.inf
    assert real_pow(-10, 401) == -math.inf
    assert real_pow(0, -1) == math.inf
    assert real_pow(2, 10) == 1024
    assert format_number(real_pow(2, 0.5) ** 2) == "2.0000000000000004"


def test_token_str():
    assert str(Token(type=TokenType.NUMBER, value="2.5")) == "NUMBER(2.5)"
