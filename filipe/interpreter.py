"""Entry point into the Filipe evaluation engine."""

from __future__ import annotations

import random
import sys
from typing import Optional, TextIO

from filipe import Program, Value
from filipe.builtin.env_builtin import register
from filipe.config import get_random_seed, get_recursion_limit
from filipe.evaluation.error_handler import ErrorHandler
from filipe.evaluation.evaluator import Evaluator
from filipe.types.environment import Environment
from filipe.types.errors import FilipeError


class Interpreter:
    """
    Owns the global environment and runs parsed programs against it.
    State persists across calls to `evaluate`, so a program can be fed in pieces.
    """
    def __init__(
        self,
        output: TextIO | None = None,
        errors: TextIO | None = None,
        seed: int | None = None,
    ):
        self.env = Environment()
        register(self.env)

        # the limit is process-wide; only ever raise it
        limit = get_recursion_limit()
        if sys.getrecursionlimit() < limit:
            sys.setrecursionlimit(limit)

        if seed is None:
            seed = get_random_seed()
        self.error_handler = ErrorHandler(errors)
        self.evaluator = Evaluator(
            self.env,
            output=output,
            rng=random.Random(seed),
            error_handler=self.error_handler,
        )

    def evaluate(self, program: Program) -> Optional[Value]:
        """Run `program`; returns its last value, or None after reporting an error."""
        return self.evaluator.eval(program)

    @property
    def error(self) -> Optional[FilipeError]:
        """The diagnostic that stopped the last run, if any."""
        return self.error_handler.get_error()


def evaluate(program: Program) -> Optional[Value]:
    """Evaluate `program` in a fresh interpreter writing to stdout/stderr."""
    return Interpreter().evaluate(program)
