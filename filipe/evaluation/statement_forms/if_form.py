from __future__ import annotations

from typing import TYPE_CHECKING

from filipe import Value
from filipe.ast import If
from filipe.evaluation.operators import is_truthy
from filipe.types.environment import Environment, ScopeKind

if TYPE_CHECKING:
    from filipe.evaluation.evaluator import Evaluator


def if_form(stmt: If, env: Environment, evaluator: Evaluator) -> Value | None:
    cond = evaluator.eval_value(stmt.condition, env)

    if is_truthy(cond):
        return evaluator.eval_block(stmt.consequence, env, ScopeKind.IF_ELSE)
    elif stmt.alternative is not None:
        return evaluator.eval_block(stmt.alternative, env, ScopeKind.IF_ELSE)
    else:
        return None
