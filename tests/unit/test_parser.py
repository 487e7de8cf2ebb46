"""Tests for the recursive descent parser."""

from __future__ import annotations

import pytest

from arithcalc.core.ast import BinaryExpr, BinaryOp, Negate, Number, depth
from arithcalc.core.errors import CalcError, LexError, ParseError, ParseErrorKind
from arithcalc.core.parser import parse_expr


class TestParserLiterals:
    """Parser handles numeric literals."""

    def test_integer(self) -> None:
        expr = parse_expr("42")
        assert isinstance(expr, Number)
        assert expr.value == 42.0

    def test_decimal(self) -> None:
        expr = parse_expr("3.25")
        assert expr == Number(value=3.25)

    def test_parenthesized_literal(self) -> None:
        assert parse_expr("(((5)))") == Number(value=5)


class TestParserArithmetic:
    """Parser handles arithmetic with correct precedence."""

    def test_addition(self) -> None:
        expr = parse_expr("1 + 2")
        assert expr == BinaryExpr(op=BinaryOp.ADD, left=Number(value=1), right=Number(value=2))

    def test_mul_before_add(self) -> None:
        # 2 + 3 * 4 should be 2 + (3 * 4)
        expr = parse_expr("2 + 3 * 4")
        assert isinstance(expr, BinaryExpr)
        assert expr.op == BinaryOp.ADD
        assert isinstance(expr.right, BinaryExpr)
        assert expr.right.op == BinaryOp.MUL

    def test_parentheses_override_precedence(self) -> None:
        expr = parse_expr("(2 + 3) * 4")
        assert isinstance(expr, BinaryExpr)
        assert expr.op == BinaryOp.MUL
        assert isinstance(expr.left, BinaryExpr)
        assert expr.left.op == BinaryOp.ADD

    def test_subtraction_is_left_associative(self) -> None:
        expr = parse_expr("1 - 2 - 3")
        assert str(expr) == "((1 - 2) - 3)"

    def test_division_is_left_associative(self) -> None:
        expr = parse_expr("8 / 4 / 2")
        assert str(expr) == "((8 / 4) / 2)"

    def test_mixed_chain(self) -> None:
        assert str(parse_expr("1 + 2 * 3 - 4 / 5")) == "((1 + (2 * 3)) - (4 / 5))"

    def test_unary_minus(self) -> None:
        expr = parse_expr("-7")
        assert expr == Negate(operand=Number(value=7))

    def test_unary_minus_binds_tighter_than_mul(self) -> None:
        expr = parse_expr("-2 * 3")
        assert isinstance(expr, BinaryExpr)
        assert expr.op == BinaryOp.MUL
        assert expr.left == Negate(operand=Number(value=2))

    def test_double_negation(self) -> None:
        assert parse_expr("--1") == Negate(operand=Negate(operand=Number(value=1)))

    def test_negated_group(self) -> None:
        assert str(parse_expr("-(2 + 3)")) == "-(2 + 3)"

    def test_minus_after_operator(self) -> None:
        assert str(parse_expr("1 - -2")) == "(1 - -2)"

    def test_division_by_literal_zero_parses(self) -> None:
        expr = parse_expr("1 / 0")
        assert isinstance(expr, BinaryExpr)
        assert expr.op == BinaryOp.DIV


class TestParserErrors:
    """Invalid token streams fail with a specific ParseError kind."""

    def test_unclosed_paren(self) -> None:
        with pytest.raises(ParseError, match=r"Expected '\)'") as exc_info:
            parse_expr("(1 + 2")
        assert exc_info.value.kind == ParseErrorKind.UNMATCHED_PAREN
        assert exc_info.value.pos == 6

    def test_unclosed_paren_before_other_token(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_expr("(1 + 2 3")
        assert exc_info.value.kind == ParseErrorKind.UNMATCHED_PAREN

    def test_extra_closing_paren(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_expr("1 + 2)")
        assert exc_info.value.kind == ParseErrorKind.TRAILING_INPUT
        assert exc_info.value.pos == 5

    def test_trailing_number(self) -> None:
        with pytest.raises(ParseError, match="after expression") as exc_info:
            parse_expr("1 2")
        assert exc_info.value.kind == ParseErrorKind.TRAILING_INPUT

    def test_empty_input(self) -> None:
        with pytest.raises(ParseError, match="end of input") as exc_info:
            parse_expr("")
        assert exc_info.value.kind == ParseErrorKind.UNEXPECTED_TOKEN

    def test_missing_right_operand(self) -> None:
        with pytest.raises(ParseError, match="end of input") as exc_info:
            parse_expr("1 +")
        assert exc_info.value.kind == ParseErrorKind.UNEXPECTED_TOKEN
        assert exc_info.value.pos == 3

    def test_leading_binary_operator(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_expr("* 2")
        assert exc_info.value.kind == ParseErrorKind.UNEXPECTED_TOKEN
        assert exc_info.value.pos == 0

    def test_empty_parens(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_expr("()")
        assert exc_info.value.kind == ParseErrorKind.UNEXPECTED_TOKEN

    def test_lex_errors_propagate(self) -> None:
        with pytest.raises(LexError):
            parse_expr("1 + x")

    def test_error_shows_source_and_caret(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_expr("1 2")
        assert str(exc_info.value) == "Unexpected '2' after expression at column 3\n  1 2\n    ^"


class TestParserDepthGuard:
    """Deep nesting is rejected instead of exhausting the stack."""

    def test_nesting_within_limit(self) -> None:
        source = "(" * 10 + "1" + ")" * 10
        assert parse_expr(source, max_depth=10) == Number(value=1)

    def test_nesting_too_deep(self) -> None:
        source = "(" * 11 + "1" + ")" * 11
        with pytest.raises(ParseError, match="nested deeper than 10") as exc_info:
            parse_expr(source, max_depth=10)
        assert exc_info.value.kind == ParseErrorKind.TOO_DEEP
        assert exc_info.value.pos == 10

    def test_negation_counts_as_nesting(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_expr("-" * 6 + "1", max_depth=5)
        assert exc_info.value.kind == ParseErrorKind.TOO_DEEP

    def test_flat_chain_is_not_limited(self) -> None:
        # Left folds grow tall without any nesting
        expr = parse_expr(" + ".join(["1"] * 1000), max_depth=10)
        assert depth(expr) == 1000

    def test_chain_past_default_limit(self) -> None:
        expr = parse_expr(" * ".join(["2"] * 101))
        assert depth(expr) == 101

    def test_too_deep_points_at_offending_paren(self) -> None:
        source = "1 + " + "(" * 4 + "2" + ")" * 4
        with pytest.raises(ParseError) as exc_info:
            parse_expr(source, max_depth=3)
        assert exc_info.value.pos == 7
        assert str(exc_info.value).endswith("\n         ^")

    def test_default_limit_rejects_pathological_input(self) -> None:
        source = "(" * 5000 + "1" + ")" * 5000
        with pytest.raises(ParseError) as exc_info:
            parse_expr(source)
        assert exc_info.value.kind == ParseErrorKind.TOO_DEEP


class TestParserNeverCrashes:
    """Anything over the expression alphabet parses or raises a CalcError."""

    @pytest.mark.parametrize(
        "source",
        [
            "",
            " ",
            ".",
            "..",
            "(",
            ")",
            ")(",
            "-",
            "--",
            "1..2",
            "1 .2",
            "((1)",
            "(1))",
            "1+*2",
            "1 / / 2",
            "-()",
            "2(3)",
            "(2)3",
            "1-",
            "0.5 * (3 - -.)",
        ],
    )
    def test_fuzzed_input(self, source: str) -> None:
        try:
            parse_expr(source)
        except CalcError:
            pass
