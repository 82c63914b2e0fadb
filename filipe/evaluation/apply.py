"""Application engine for Filipe.

Centralizes call semantics for the evaluator:
- Built-in functions receive the evaluator and the evaluated arguments.
- User-defined functions get a fresh FUNCTION scope nested in the scope they
  were declared in, with parameters bound positionally and type-checked.
- A ReturnSignal surfacing from the body is consumed here and nowhere else.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from filipe import Value
from filipe.types.environment import ScopeKind
from filipe.types.errors import FilipeArgumentError, FilipeTypeError
from filipe.types.type_system import TypeTag, value_type
from filipe.types.values import Argument, BuiltInFunction, ReturnSignal, UserDefinedFunction

if TYPE_CHECKING:
    from filipe.evaluation.evaluator import Evaluator

logger = logging.getLogger(__name__)


def apply_function(
    fn: UserDefinedFunction, args: list[Argument], evaluator: Evaluator
) -> Optional[Value]:
    """Call a user-defined function.

    Raises FilipeArgumentError on an arity mismatch and FilipeTypeError when an
    argument or the produced value disagrees with the declared types. A
    declared `void` return type yields no value.
    """
    if len(args) != len(fn.params):
        raise FilipeArgumentError(
            f"'{fn.name}' expects {len(fn.params)} args but {len(args)} were provided"
        )

    scope = fn.env.child(ScopeKind.FUNCTION)
    for param, arg in zip(fn.params, args):
        if arg.type != param.type:
            raise FilipeTypeError(
                f"argument '{param.name}' of '{fn.name}' expects type {param.type} but got {arg.type}"
            )
        scope.define(param.name, arg.value, arg.type)
    logger.debug("calling %s", fn)

    # The body shares the parameter scope rather than nesting another one.
    result: Optional[Value] = None
    for stmt in fn.body:
        result = evaluator.eval_stmt(stmt, scope)
        if isinstance(result, ReturnSignal):
            result = result.value
            break

    if fn.return_type is None:
        return result
    if fn.return_type is TypeTag.VOID:
        return None
    produced = value_type(result) if result is not None else TypeTag.VOID
    if produced != fn.return_type:
        raise FilipeTypeError(
            f"'{fn.name}' must return type {fn.return_type} but returned {produced}"
        )
    return result


def apply(fn: object, args: list[Argument], evaluator: Evaluator) -> Optional[Value]:
    """Apply either a user-defined or a built-in function.

    Anything else in callee position is a FilipeTypeError.
    """
    if isinstance(fn, UserDefinedFunction):
        return apply_function(fn, args, evaluator)
    if isinstance(fn, BuiltInFunction):
        return fn(evaluator, args)
    raise FilipeTypeError(f"value of type {value_type(fn)} is not callable")
