from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from filipe.ast import ForLoop
from filipe.types.environment import Environment, ScopeKind
from filipe.types.errors import FilipeTypeError, FilipeValueError
from filipe.types.type_system import TypeTag
from filipe.types.values import Range, ReturnSignal

if TYPE_CHECKING:
    from filipe.evaluation.evaluator import Evaluator

logger = logging.getLogger(__name__)


def for_loop_form(
    stmt: ForLoop, env: Environment, evaluator: Evaluator
) -> ReturnSignal | None:
    """Iterate `stmt.body` over a Range.

    The cursor lives in one LOOP scope for the whole loop; every pass of the
    body gets its own child scope so declarations in the body never collide.
    The pass count is fixed up front, and the cursor is advanced by `step`
    through the normal assignment path after each pass.
    """
    iterable = evaluator.eval_value(stmt.iterable, env)
    if not isinstance(iterable, Range):
        raise FilipeTypeError("for loop works only with range")
    if iterable.step == 0:
        raise FilipeValueError("range step must not be zero")

    loop_scope = env.child(ScopeKind.LOOP)
    loop_scope.define(stmt.cursor, iterable.start, TypeTag.INT, mutable=True)
    passes = len(range(iterable.start, iterable.end, iterable.step))
    logger.debug("entering loop over %s (%d passes)", iterable, passes)

    for _ in range(passes):
        result = evaluator.eval_block(stmt.body, loop_scope)
        if isinstance(result, ReturnSignal):
            return result
        cursor = loop_scope.lookup(stmt.cursor)
        loop_scope.assign(stmt.cursor, cursor + iterable.step)
    return None
