"""Built-in functions for the Filipe runtime environment.

Every built-in takes the running evaluator and the list of evaluated call
arguments (value plus tracked type tag) and either returns a value or raises a
FilipeError. `register` installs them, and the `true`/`false`/`null`
constants, as non-assignable bindings.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from filipe import Value
from filipe.types.environment import Binding, Environment
from filipe.types.errors import (
    FilipeArgumentError,
    FilipeTypeError,
    FilipeValueError,
)
from filipe.types.null import Null
from filipe.types.type_system import TypeTag, value_type
from filipe.types.values import Argument, BuiltInFunction, Range, TypeValue, display

if TYPE_CHECKING:
    from filipe.evaluation.evaluator import Evaluator

logger = logging.getLogger(__name__)


def _is_int(arg: Argument) -> bool:
    return value_type(arg.value) is TypeTag.INT


# -------------------------------
# I/O and process
# -------------------------------
def print_builtin(evaluator: Evaluator, args: list[Argument]) -> Value:
    """Write every argument's text form, unseparated, then a newline."""
    evaluator.write("".join(display(arg.value) for arg in args) + "\n")
    return Null


def exit_builtin(evaluator: Evaluator, args: list[Argument]) -> Value:
    """Terminate the process. Raises SystemExit, which is not a FilipeError."""
    if not args:
        raise SystemExit(0)
    if len(args) != 1:
        raise FilipeArgumentError(
            f"'exit' expects 0 or 1 argument but {len(args)} were provided"
        )
    if not _is_int(args[0]):
        raise FilipeArgumentError("'exit' only accepts an integer argument")
    raise SystemExit(args[0].value)


# -------------------------------
# Inspection
# -------------------------------
def len_builtin(evaluator: Evaluator, args: list[Argument]) -> Value:
    if len(args) != 1:
        raise FilipeTypeError(f"'len' expects 1 arg but {len(args)} were provided")
    value = args[0].value
    if value_type(value) is not TypeTag.STRING:
        raise FilipeTypeError("'len' only accepts type string")
    return len(value)


def typeof_builtin(evaluator: Evaluator, args: list[Argument]) -> Value:
    """Reify the tracked type tag of the single argument."""
    if len(args) != 1:
        raise FilipeTypeError(f"'typeof' expects 1 arg but {len(args)} were provided")
    return TypeValue(args[0].type)


# -------------------------------
# Numbers
# -------------------------------
def random_builtin(evaluator: Evaluator, args: list[Argument]) -> Value:
    """random() -> float in [0, 1); random(max) and random(min, max) -> int, inclusive."""
    rng = evaluator.rng
    match len(args):
        case 0:
            return rng.random()
        case 1:
            if not _is_int(args[0]):
                raise FilipeTypeError("'random' expects an integer argument")
            upper = args[0].value
            if upper < 0:
                raise FilipeValueError(
                    "Argument for 'random' must be a non-negative integer"
                )
            return rng.randint(0, upper)
        case 2:
            if not (_is_int(args[0]) and _is_int(args[1])):
                raise FilipeTypeError("'random' expects two integer arguments")
            lower, upper = args[0].value, args[1].value
            if lower < 0 or upper < 0:
                raise FilipeValueError(
                    "Arguments for 'random' must be non-negative integers"
                )
            if lower > upper:
                raise FilipeValueError(
                    "The first argument for 'random' must be less than or equal to the second argument"
                )
            return rng.randint(lower, upper)
    raise FilipeArgumentError("'random' expects 0, 1, or 2 arguments")


def range_builtin(evaluator: Evaluator, args: list[Argument]) -> Value:
    if not 2 <= len(args) <= 3:
        raise FilipeTypeError(
            f"function 'range' takes 2 or 3 args but {len(args)} were provided"
        )
    for arg in args:
        if arg.type is not TypeTag.INT or not _is_int(arg):
            raise FilipeTypeError("args for function 'range' must be of type int")
    return Range(*(arg.value for arg in args))


BUILTINS = {
    "print": print_builtin,
    "exit": exit_builtin,
    "len": len_builtin,
    "random": random_builtin,
    "typeof": typeof_builtin,
    "range": range_builtin,
}


def register(env: Environment) -> None:
    """Register all builtin functions and constants into the given environment."""
    env.update(
        {
            name: Binding(BuiltInFunction(name, fn), TypeTag.FUNCTION, mutable=False)
            for name, fn in BUILTINS.items()
        }
    )
    env.update(
        {
            "true": Binding(True, TypeTag.BOOLEAN, mutable=False),
            "false": Binding(False, TypeTag.BOOLEAN, mutable=False),
            "null": Binding(Null, TypeTag.NULL, mutable=False),
        }
    )
    logger.debug("registered %d builtins", len(BUILTINS))
