"""Infix, prefix and postfix operator semantics.

Operands arrive already evaluated. Both sides of an infix operator must carry
the same structural tag; dispatch is then on that shared tag.
"""

from __future__ import annotations

import math
import operator

from filipe import Value
from filipe.ast import Infix, Postfix, Prefix
from filipe.types.errors import FilipeTypeError
from filipe.types.null import NullType
from filipe.types.type_system import TypeTag, has_same_type, value_type

COMPARISONS = {
    Infix.EQUAL: operator.eq,
    Infix.NOT_EQUAL: operator.ne,
    Infix.LESS_THAN: operator.lt,
    Infix.LESS_OR_EQUAL: operator.le,
    Infix.GREATER_THAN: operator.gt,
    Infix.GREATER_OR_EQUAL: operator.ge,
}


def int_div(lhs: int, rhs: int) -> int:
    """Integer division truncating toward zero. Division by zero is not checked."""
    q = abs(lhs) // abs(rhs)
    return q if (lhs < 0) == (rhs < 0) else -q


def int_rem(lhs: int, rhs: int) -> int:
    """Remainder with the sign of the dividend, pairing with int_div."""
    return lhs - rhs * int_div(lhs, rhs)


def float_div(lhs: float, rhs: float) -> float:
    """IEEE division: a zero divisor gives a signed infinity, or NaN for 0/0."""
    if rhs == 0:
        if lhs == 0 or math.isnan(lhs):
            return math.nan
        return math.copysign(math.inf, math.copysign(1.0, lhs) * math.copysign(1.0, rhs))
    return lhs / rhs


def float_rem(lhs: float, rhs: float) -> float:
    """fmod, except that a zero divisor or infinite dividend gives NaN."""
    if rhs == 0 or math.isinf(lhs):
        return math.nan
    return math.fmod(lhs, rhs)


INT_ARITHMETIC = {
    Infix.PLUS: operator.add,
    Infix.MINUS: operator.sub,
    Infix.MULTIPLY: operator.mul,
    Infix.DIVIDE: int_div,
    Infix.REMAINDER: int_rem,
}

FLOAT_ARITHMETIC = {
    Infix.PLUS: operator.add,
    Infix.MINUS: operator.sub,
    Infix.MULTIPLY: operator.mul,
    Infix.DIVIDE: float_div,
    Infix.REMAINDER: float_rem,
}


def eval_infix(lhs: Value, op: Infix, rhs: Value) -> Value:
    lhs_type = value_type(lhs)
    if not has_same_type(lhs, rhs):
        raise FilipeTypeError(
            f"'{op}' operation not allowed between types {lhs_type} and {value_type(rhs)}"
        )

    match lhs_type:
        case TypeTag.INT:
            return _numeric(INT_ARITHMETIC, lhs, op, rhs)
        case TypeTag.FLOAT:
            return _numeric(FLOAT_ARITHMETIC, lhs, op, rhs)
        case TypeTag.STRING:
            if op is Infix.PLUS:
                return lhs + rhs
            if op in (Infix.EQUAL, Infix.NOT_EQUAL):
                return COMPARISONS[op](lhs, rhs)
        case TypeTag.BOOLEAN:
            if op in COMPARISONS:
                return COMPARISONS[op](lhs, rhs)
    raise FilipeTypeError(f"'{op}' operation not implemented for type {lhs_type}")


def _numeric(arithmetic, lhs, op: Infix, rhs) -> Value:
    if op in arithmetic:
        return arithmetic[op](lhs, rhs)
    return COMPARISONS[op](lhs, rhs)


def eval_prefix(op: Prefix, operand: Value) -> Value:
    if op is Prefix.NOT:
        # Only null and booleans negate; everything else is false.
        if isinstance(operand, NullType):
            return True
        if isinstance(operand, bool):
            return not operand
        return False

    if value_type(operand) not in (TypeTag.INT, TypeTag.FLOAT):
        raise FilipeTypeError(f"'{op}' prefix is for type number")
    return operand if op is Prefix.PLUS else -operand


def eval_postfix(operand: Value, op: Postfix) -> Value:
    """Return the incremented/decremented value. Nothing is written back."""
    if value_type(operand) is not TypeTag.INT:
        raise FilipeTypeError(f"'{op}' operation is only allowed for type 'int'")
    if op is Postfix.INCREMENT:
        return operand + 1
    return operand - 1


def is_truthy(value: Value) -> bool:
    """Condition rule for `if`: null, false, 0 and 0.0 are false."""
    if isinstance(value, NullType) or value is False:
        return False
    if value_type(value) in (TypeTag.INT, TypeTag.FLOAT):
        return value != 0
    return True
