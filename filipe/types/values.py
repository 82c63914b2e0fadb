"""Runtime value classes for Filipe.

Ints, floats, strings and booleans are represented by the matching Python
types and null by the `Null` singleton. Everything else lives here.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from decimal import Decimal
from io import StringIO
from typing import TYPE_CHECKING, Any, Callable

from filipe.types.null import NullType

if TYPE_CHECKING:
    from filipe.ast import Param, Stmt
    from filipe.types.environment import Environment
    from filipe.types.type_system import TypeTag


class BuiltInFunction:
    """A native callable exposed to Filipe code.

    The wrapped function receives the running evaluator and the evaluated
    call arguments, and returns a value or raises a FilipeError.
    """

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: Callable[..., Any]):
        self.name = name
        self.fn = fn

    def __call__(self, evaluator, args: list[Argument]) -> Any:
        return self.fn(evaluator, args)

    def __repr__(self) -> str:
        return f"BuiltInFunction({self.name!r})"


class UserDefinedFunction:
    """A function declared in Filipe source.

    `env` is the scope the function was declared in. It is a live reference,
    not a copy, so names resolve against its state at call time.
    """

    __slots__ = ("name", "params", "body", "return_type", "env")

    def __init__(
        self,
        name: str,
        params: list[Param],
        body: list[Stmt],
        return_type: TypeTag | None,
        env: Environment,
    ):
        self.name = name
        self.params = params
        self.body = body
        self.return_type = return_type
        self.env = env

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write(f"fn {self.name}(")
            buffer.write(", ".join(f"{p.name}: {p.type}" for p in self.params))
            buffer.write(")")
            if self.return_type is not None:
                buffer.write(f": {self.return_type}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<UserDefinedFunction {self}>"


@dataclass(frozen=True)
class Range:
    start: int
    end: int
    step: int = 1

    def __str__(self) -> str:
        return f"range({self.start}, {self.end}, {self.step})"


@dataclass
class Array:
    items: list[Any] = field(default_factory=list)
    element_type: TypeTag | None = None

    def __str__(self) -> str:
        return "[" + ", ".join(display(item) for item in self.items) + "]"


@dataclass(frozen=True)
class TypeValue:
    """A type tag reified as a first-class value (what `typeof` returns)."""

    tag: TypeTag

    def __str__(self) -> str:
        return str(self.tag)


@dataclass
class ReturnSignal:
    """Carries a `return` payload up to the enclosing function call."""

    value: Any


@dataclass
class Argument:
    """An evaluated call argument together with its tracked type tag."""

    value: Any
    type: TypeTag


def display_float(value: float) -> str:
    """Shortest round-trip digits, written out without an exponent.

    Integral values drop the fractional part; NaN and infinities print as
    `NaN`, `inf` and `-inf`.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def display(value: Any) -> str:
    """Textual form of a value as `print` writes it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return display_float(value)
    if isinstance(value, NullType):
        return "null"
    if isinstance(value, BuiltInFunction):
        return "[Builtin Function]"
    if isinstance(value, UserDefinedFunction):
        return f"[Function {value.name}]"
    if isinstance(value, ReturnSignal):
        return display(value.value)
    return str(value)
