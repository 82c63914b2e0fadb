"""Filipe AST: the node set the parser hands to the evaluation engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from filipe.types.type_system import TypeTag


# ============================================================
# OPERATORS
# ============================================================


class Infix(Enum):
    PLUS = "+"
    MINUS = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    REMAINDER = "%"
    EQUAL = "=="
    NOT_EQUAL = "!="
    LESS_THAN = "<"
    LESS_OR_EQUAL = "<="
    GREATER_THAN = ">"
    GREATER_OR_EQUAL = ">="

    def __str__(self) -> str:
        return self.value


class Prefix(Enum):
    NOT = "!"
    PLUS = "+"
    MINUS = "-"

    def __str__(self) -> str:
        return self.value


class Postfix(Enum):
    INCREMENT = "++"
    DECREMENT = "--"

    def __str__(self) -> str:
        return self.value


# ============================================================
# EXPRESSIONS
# ============================================================


@dataclass
class Expr:
    """Base for all expression nodes."""


@dataclass
class Literal(Expr):
    """int, float, string, boolean or Null."""

    value: Any


@dataclass
class ArrayLiteral(Expr):
    """[a, b, ...]."""

    items: list[Expr] = field(default_factory=list)


@dataclass
class Identifier(Expr):
    name: str


@dataclass
class Assign(Expr):
    """name = value."""

    name: str
    value: Expr


@dataclass
class Call(Expr):
    callee: Expr
    args: list[Expr] = field(default_factory=list)


@dataclass
class InfixExpr(Expr):
    lhs: Expr
    op: Infix
    rhs: Expr


@dataclass
class PrefixExpr(Expr):
    op: Prefix
    operand: Expr


@dataclass
class PostfixExpr(Expr):
    operand: Expr
    op: Postfix


# ============================================================
# STATEMENTS
# ============================================================


@dataclass
class Stmt:
    """Base for all statement nodes."""


@dataclass
class Param:
    """Function parameter with its declared type."""

    name: str
    type: TypeTag


@dataclass
class Let(Stmt):
    """let name[: type] = value. Bindings are mutable unless declared otherwise."""

    name: str
    declared_type: TypeTag | None
    value: Expr
    mutable: bool = True


@dataclass
class FuncDef(Stmt):
    """fn name(params): return_type { body }."""

    name: str
    params: list[Param]
    body: list[Stmt]
    return_type: TypeTag | None = None


@dataclass
class Return(Stmt):
    value: Expr | None = None


@dataclass
class ExprStmt(Stmt):
    expr: Expr


@dataclass
class If(Stmt):
    condition: Expr
    consequence: list[Stmt]
    alternative: list[Stmt] | None = None


@dataclass
class ForLoop(Stmt):
    """for cursor in iterable { body }."""

    cursor: str
    iterable: Expr
    body: list[Stmt]
