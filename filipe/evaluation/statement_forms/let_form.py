from __future__ import annotations

from typing import TYPE_CHECKING

from filipe.ast import Let
from filipe.types.environment import Environment

if TYPE_CHECKING:
    from filipe.evaluation.evaluator import Evaluator


def let_form(stmt: Let, env: Environment, evaluator: Evaluator) -> None:
    value = evaluator.eval_value(stmt.value, env)
    # define() rejects redeclaration in this scope and a mismatched annotation
    env.define(stmt.name, value, stmt.declared_type, stmt.mutable)
    return None
