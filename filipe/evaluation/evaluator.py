"""Core evaluator for the Filipe interpreter.

Walks statements and expressions against an Environment chain. Statements
are dispatched through STATEMENT_FORMS; expressions are matched here.
Failures are raised as FilipeError and unwind straight to `Evaluator.eval`,
which records the first one in the error handler and stops the program.
"""

from __future__ import annotations

import logging
import random
import sys
from typing import Optional, TextIO

from filipe import Program, Value
from filipe.ast import (
    ArrayLiteral,
    Assign,
    Call,
    Expr,
    ExprStmt,
    Identifier,
    InfixExpr,
    Literal,
    PostfixExpr,
    PrefixExpr,
    Stmt,
)
from filipe.evaluation.apply import apply
from filipe.evaluation.error_handler import ErrorHandler
from filipe.evaluation.operators import eval_infix, eval_postfix, eval_prefix
from filipe.evaluation.statement_forms import STATEMENT_FORMS
from filipe.types.environment import Environment, ScopeKind
from filipe.types.errors import (
    FilipeError,
    FilipeNameError,
    FilipeRecursionError,
    FilipeTypeError,
)
from filipe.types.type_system import TypeTag, expr_type, value_type
from filipe.types.values import Argument, Array, ReturnSignal

logger = logging.getLogger(__name__)


class Evaluator:
    """Evaluates a Program against a global Environment.

    `output` is the sink `print` writes to; `rng` feeds the `random` built-in.
    """

    def __init__(
        self,
        env: Environment,
        output: TextIO | None = None,
        rng: random.Random | None = None,
        error_handler: ErrorHandler | None = None,
    ):
        self.env = env
        self.output = output
        self.rng = rng if rng is not None else random.Random()
        self.error_handler = error_handler if error_handler is not None else ErrorHandler()

    def write(self, text: str) -> None:
        sink = self.output if self.output is not None else sys.stdout
        sink.write(text)

    # --- Driver ---
    def eval(self, program: Program) -> Optional[Value]:
        """Evaluate every top-level statement in order.

        Returns the value of the last statement, or None if a diagnostic was
        raised (after reporting it). A top-level `return` ends the program with
        its payload.
        """
        logger.debug("evaluating %d top-level statements", len(program))
        # each run starts with an empty slot
        self.error_handler.take()
        output: Optional[Value] = None
        for stmt in program:
            try:
                result = self.eval_stmt(stmt, self.env)
            except FilipeError as e:
                self.error_handler.set(e)
                result = None
            except RecursionError:
                self.error_handler.set(FilipeRecursionError("maximum call depth exceeded"))
                result = None
            if self.error_handler.has_error():
                self.error_handler.report()
                return None
            if isinstance(result, ReturnSignal):
                return result.value
            output = result
        return output

    # --- Statements ---
    def eval_stmt(self, stmt: Stmt, env: Environment) -> Optional[Value]:
        if isinstance(stmt, ExprStmt):
            return self.eval_expr(stmt.expr, env)
        form = STATEMENT_FORMS.get(type(stmt))
        if form is None:
            raise TypeError(f"unknown statement node {stmt!r}")
        return form(stmt, env, self)

    def eval_block(
        self, block: list[Stmt], env: Environment, kind: ScopeKind = ScopeKind.BLOCK
    ) -> Optional[Value]:
        """Run `block` in a fresh child of `env`.

        Yields the last statement's value. A ReturnSignal stops the block and
        is passed up unchanged for the enclosing call to consume.
        """
        scope = env.child(kind)
        result: Optional[Value] = None
        for stmt in block:
            result = self.eval_stmt(stmt, scope)
            if isinstance(result, ReturnSignal):
                return result
        return result

    # --- Expressions ---
    def eval_expr(self, expr: Expr, env: Environment) -> Optional[Value]:
        match expr:
            case Literal(value=value):
                return value
            case Identifier(name=name):
                return env.lookup(name)
            case ArrayLiteral(items=items):
                return self.eval_array(items, env)
            case Assign(name=name, value=value_expr):
                if not env.is_declared(name):
                    raise FilipeNameError(f"'{name}' is not declared")
                env.assign(name, self.eval_value(value_expr, env))
                return None
            case Call(callee=callee, args=args):
                fn = self.eval_value(callee, env)
                arguments = [self.eval_argument(arg, env) for arg in args]
                return apply(fn, arguments, self)
            case InfixExpr(lhs=lhs, op=op, rhs=rhs):
                return eval_infix(self.eval_value(lhs, env), op, self.eval_value(rhs, env))
            case PrefixExpr(op=op, operand=operand):
                return eval_prefix(op, self.eval_value(operand, env))
            case PostfixExpr(operand=operand, op=op):
                return eval_postfix(self.eval_value(operand, env), op)
        raise TypeError(f"unknown expression node {expr!r}")

    def eval_value(self, expr: Expr, env: Environment) -> Value:
        """Evaluate an expression whose result is used as an operand."""
        value = self.eval_expr(expr, env)
        if value is None:
            raise FilipeTypeError("expression does not produce a value")
        return value

    def eval_argument(self, expr: Expr, env: Environment) -> Argument:
        value = self.eval_value(expr, env)
        tracked = expr_type(env, expr)
        return Argument(value, tracked if tracked is not None else value_type(value))

    def eval_array(self, items: list[Expr], env: Environment) -> Array:
        values = [self.eval_value(item, env) for item in items]
        if not values:
            return Array([], TypeTag.UNKNOWN)
        element_type = value_type(values[0])
        for v in values[1:]:
            if value_type(v) != element_type:
                raise FilipeTypeError(
                    f"array items must share one type, found {element_type} and {value_type(v)}"
                )
        return Array(values, element_type)
