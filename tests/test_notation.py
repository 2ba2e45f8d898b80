import pytest

from dsakit.notation import (
    ExpressionError,
    evaluate_postfix,
    infix_to_postfix,
    prefix_to_postfix,
)


def test_infix_multiplication_binds_tighter():
    assert infix_to_postfix("a+b*c") == "abc*+"


def test_infix_operator_order_follows_precedence():
    assert infix_to_postfix("a*b+c") == "ab*c+"


def test_infix_single_operand_passes_through():
    assert infix_to_postfix("a") == "a"


@pytest.mark.parametrize("infix", ["a+b*c-d/e", "x*y*z", "p-q+r*s"])
def test_infix_keeps_operands_in_order_and_length(infix):
    result = infix_to_postfix(infix)
    assert len(result) == len(infix)
    assert [c for c in result if c.isalpha()] == [c for c in infix if c.isalpha()]
    assert sorted(result) == sorted(infix)


def test_infix_ignores_whitespace():
    assert infix_to_postfix("a + b * c") == infix_to_postfix("a+b*c")


@pytest.mark.parametrize(
    "infix, expected",
    [
        ("9-5-2", 9 - 5 - 2),
        ("8/2*3", 8 // 2 * 3),
        ("2+3*4", 2 + 3 * 4),
        ("7*2-9/3", 7 * 2 - 9 // 3),
    ],
)
def test_infix_conversion_evaluates_correctly(infix, expected):
    assert evaluate_postfix(infix_to_postfix(infix)) == expected


def test_prefix_agrees_with_infix_conversion():
    assert prefix_to_postfix("+a*bc") == infix_to_postfix("a+b*c")


def test_prefix_ignores_blanks_and_tabs():
    assert prefix_to_postfix("+ a\tb") == prefix_to_postfix("+ab")


def test_prefix_supports_modulo_and_power():
    result = prefix_to_postfix("^a%bc")
    assert result[-1] == "^"
    assert sorted(result) == sorted("^a%bc")
    assert result.index("%") < result.index("^")


def test_prefix_single_operand():
    assert prefix_to_postfix("z") == "z"


@pytest.mark.parametrize("prefix", ["+a", "", "ab", "*"])
def test_prefix_malformed_raises(prefix):
    with pytest.raises(ExpressionError):
        prefix_to_postfix(prefix)


def test_evaluate_postfix_value():
    assert evaluate_postfix("23*4+") == 10


def test_evaluate_division_truncates_toward_zero():
    assert evaluate_postfix("27-2/") == int((2 - 7) / 2)


def test_evaluate_ignores_whitespace():
    assert evaluate_postfix("2 3 *") == evaluate_postfix("23*")


def test_evaluate_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        evaluate_postfix("20/")


@pytest.mark.parametrize("expression", ["2+", "23&", "", "+"])
def test_evaluate_malformed_raises(expression):
    with pytest.raises(ExpressionError):
        evaluate_postfix(expression)