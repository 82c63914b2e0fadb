import math

import pytest
from hypothesis import given, strategies as st

from filipe.ast import Infix, Postfix, Prefix
from filipe.evaluation.operators import (
    eval_infix,
    eval_postfix,
    eval_prefix,
    int_div,
    int_rem,
    is_truthy,
)
from filipe.types.errors import FilipeTypeError
from filipe.types.null import Null
from filipe.types.type_system import TypeTag
from filipe.types.values import Array, Range, TypeValue

ints = st.integers(min_value=-(2**63), max_value=2**63 - 1)
values = st.one_of(
    st.just(Null),
    st.integers(),
    st.floats(allow_nan=False),
    st.text(),
    st.booleans(),
    st.just(Range(0, 1)),
)


@given(ints, ints)
def test_int_arithmetic_matches_native(a, b):
    assert eval_infix(a, Infix.PLUS, b) == a + b
    assert eval_infix(a, Infix.MINUS, b) == a - b
    assert eval_infix(a, Infix.MULTIPLY, b) == a * b


@given(ints, ints.filter(lambda n: n != 0))
def test_int_division_truncates_toward_zero(a, b):
    q = eval_infix(a, Infix.DIVIDE, b)
    r = eval_infix(a, Infix.REMAINDER, b)
    assert q * b + r == a
    assert abs(r) < abs(b)
    assert r == 0 or (r < 0) == (a < 0)


@pytest.mark.parametrize(
    "a,b,q,r",
    [(7, 2, 3, 1), (-7, 2, -3, -1), (7, -2, -3, 1), (-7, -2, 3, -1), (6, 3, 2, 0)],
)
def test_int_division_table(a, b, q, r):
    assert int_div(a, b) == q
    assert int_rem(a, b) == r


def test_int_division_by_zero_is_a_host_fault():
    with pytest.raises(ZeroDivisionError):
        eval_infix(1, Infix.DIVIDE, 0)
    with pytest.raises(ZeroDivisionError):
        eval_infix(1, Infix.REMAINDER, 0)


@pytest.mark.parametrize(
    "lhs,rhs,expected",
    [
        (1.0, 0.0, math.inf),
        (-1.0, 0.0, -math.inf),
        (1.0, -0.0, -math.inf),
        (-2.5, -0.0, math.inf),
    ],
)
def test_float_division_by_zero_is_infinite(lhs, rhs, expected):
    assert eval_infix(lhs, Infix.DIVIDE, rhs) == expected


def test_float_nan_results():
    assert math.isnan(eval_infix(0.0, Infix.DIVIDE, 0.0))
    assert math.isnan(eval_infix(1.5, Infix.REMAINDER, 0.0))
    assert math.isnan(eval_infix(math.inf, Infix.REMAINDER, 2.0))
    assert eval_infix(1.5, Infix.REMAINDER, math.inf) == 1.5


def test_float_arithmetic():
    assert eval_infix(1.5, Infix.PLUS, 2.25) == 3.75
    assert eval_infix(7.5, Infix.DIVIDE, 2.5) == 3.0
    assert eval_infix(-7.5, Infix.REMAINDER, 2.0) == math.fmod(-7.5, 2.0)
    assert eval_infix(1.5, Infix.LESS_THAN, 2.0) is True


@pytest.mark.parametrize(
    "op,expected",
    [
        (Infix.EQUAL, False),
        (Infix.NOT_EQUAL, True),
        (Infix.LESS_THAN, True),
        (Infix.LESS_OR_EQUAL, True),
        (Infix.GREATER_THAN, False),
        (Infix.GREATER_OR_EQUAL, False),
    ],
)
def test_comparisons(op, expected):
    assert eval_infix(1, op, 2) is expected
    assert eval_infix(False, op, True) is expected


@given(values, values, st.sampled_from(list(Infix)))
def test_mismatched_types_name_both_tags(lhs, rhs, op):
    from filipe.types.type_system import value_type

    lt, rt = value_type(lhs), value_type(rhs)
    if lt == rt:
        return
    with pytest.raises(FilipeTypeError) as excinfo:
        eval_infix(lhs, op, rhs)
    assert f"between types {lt} and {rt}" in str(excinfo.value)


def test_string_operators():
    assert eval_infix("ab", Infix.PLUS, "cd") == "abcd"
    assert eval_infix("ab", Infix.EQUAL, "ab") is True
    assert eval_infix("ab", Infix.NOT_EQUAL, "ab") is False
    with pytest.raises(FilipeTypeError, match="not implemented for type string"):
        eval_infix("ab", Infix.MINUS, "cd")
    with pytest.raises(FilipeTypeError):
        eval_infix("a", Infix.LESS_THAN, "b")


def test_boolean_arithmetic_is_rejected():
    with pytest.raises(FilipeTypeError, match="not implemented for type boolean"):
        eval_infix(True, Infix.PLUS, False)


@pytest.mark.parametrize(
    "value",
    [Range(0, 1), Array([], TypeTag.UNKNOWN), TypeValue(TypeTag.INT), Null],
)
def test_other_types_have_no_infix(value):
    with pytest.raises(FilipeTypeError):
        eval_infix(value, Infix.EQUAL, value)


def test_not_prefix_table():
    assert eval_prefix(Prefix.NOT, Null) is True
    assert eval_prefix(Prefix.NOT, True) is False
    assert eval_prefix(Prefix.NOT, False) is True
    # not the truthiness rule: numbers and everything else become false
    assert eval_prefix(Prefix.NOT, 5) is False
    assert eval_prefix(Prefix.NOT, 0) is False
    assert eval_prefix(Prefix.NOT, "") is False
    assert eval_prefix(Prefix.NOT, Range(0, 1)) is False


def test_sign_prefixes():
    assert eval_prefix(Prefix.MINUS, 3) == -3
    assert eval_prefix(Prefix.MINUS, 2.5) == -2.5
    assert eval_prefix(Prefix.PLUS, 4) == 4
    with pytest.raises(FilipeTypeError):
        eval_prefix(Prefix.MINUS, "x")
    with pytest.raises(FilipeTypeError):
        eval_prefix(Prefix.PLUS, True)


def test_postfix():
    assert eval_postfix(1, Postfix.INCREMENT) == 2
    assert eval_postfix(1, Postfix.DECREMENT) == 0
    with pytest.raises(FilipeTypeError):
        eval_postfix(1.0, Postfix.INCREMENT)
    with pytest.raises(FilipeTypeError):
        eval_postfix(True, Postfix.INCREMENT)


@pytest.mark.parametrize(
    "value,expected",
    [
        (Null, False),
        (False, False),
        (0, False),
        (0.0, False),
        (True, True),
        (1, True),
        (-2.5, True),
        ("", True),
        (Range(0, 0), True),
        (Array([], TypeTag.UNKNOWN), True),
    ],
)
def test_truthiness(value, expected):
    assert is_truthy(value) is expected
