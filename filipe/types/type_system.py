"""Type tags and the single-step type checks used by the evaluator.

Every runtime value has a structural tag. Compatibility between operands is
exact tag equality; no coercion is ever performed.
"""

from __future__ import annotations

from enum import Enum

from filipe import Value
from filipe.ast import ArrayLiteral, Expr, Identifier, Literal
from filipe.types.null import NullType
from filipe.types.values import (
    Array,
    BuiltInFunction,
    Range,
    ReturnSignal,
    TypeValue,
    UserDefinedFunction,
)


class TypeTag(Enum):
    NULL = "null"
    VOID = "void"
    INT = "int"
    FLOAT = "float"
    STRING = "string"
    BOOLEAN = "boolean"
    FUNCTION = "function"
    RANGE = "range"
    ARRAY = "array"
    TYPE_ANNOTATION = "type"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value


def value_type(value: Value) -> TypeTag:
    """Return the structural tag of an evaluated value."""
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return TypeTag.BOOLEAN
    if isinstance(value, int):
        return TypeTag.INT
    if isinstance(value, float):
        return TypeTag.FLOAT
    if isinstance(value, str):
        return TypeTag.STRING
    if isinstance(value, NullType):
        return TypeTag.NULL
    if isinstance(value, (BuiltInFunction, UserDefinedFunction)):
        return TypeTag.FUNCTION
    if isinstance(value, Range):
        return TypeTag.RANGE
    if isinstance(value, Array):
        return TypeTag.ARRAY
    if isinstance(value, TypeValue):
        return TypeTag.TYPE_ANNOTATION
    if isinstance(value, ReturnSignal):
        return value_type(value.value)
    return TypeTag.UNKNOWN


def expr_type(env, expr: Expr) -> TypeTag | None:
    """Tag of a literal or identifier without evaluating anything.

    Identifiers report the tag stored on their binding; undeclared names raise
    FilipeNameError. Any other expression kind yields None.
    """
    match expr:
        case Literal(value=value):
            return value_type(value)
        case ArrayLiteral():
            return TypeTag.ARRAY
        case Identifier(name=name):
            return env.type_of(name)
    return None


def has_same_type(lhs: Value, rhs: Value) -> bool:
    return value_type(lhs) == value_type(rhs)
