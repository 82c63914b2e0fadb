from __future__ import annotations

from typing import TYPE_CHECKING

from filipe.ast import Return
from filipe.types.environment import Environment
from filipe.types.null import Null
from filipe.types.values import ReturnSignal

if TYPE_CHECKING:
    from filipe.evaluation.evaluator import Evaluator


def return_form(stmt: Return, env: Environment, evaluator: Evaluator) -> ReturnSignal:
    if stmt.value is None:
        return ReturnSignal(Null)
    return ReturnSignal(evaluator.eval_value(stmt.value, env))
