from __future__ import annotations

from typing import TYPE_CHECKING

from filipe.ast import FuncDef
from filipe.types.environment import Environment
from filipe.types.values import UserDefinedFunction

if TYPE_CHECKING:
    from filipe.evaluation.evaluator import Evaluator


def func_def_form(stmt: FuncDef, env: Environment, evaluator: Evaluator) -> None:
    fn = UserDefinedFunction(stmt.name, stmt.params, stmt.body, stmt.return_type, env)
    env.define(stmt.name, fn)
    return None
