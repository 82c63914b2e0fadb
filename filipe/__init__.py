# Core type aliases for Filipe's evaluation engine.
# Runtime values are plain Python objects where one exists (int, float, str, bool)
# and small classes from filipe.types.values otherwise (ranges, arrays, functions).
#
# Naming guidance:
# - Value:   Use in evaluator/runtime code to denote an evaluated Filipe value.
# - Program: The ordered statement list handed over by the parser.

import logging
from typing import Any

# Runtime value alias
Value = Any
# The parser hands the engine an ordered list of statements
Program = list

logging.getLogger(__name__).addHandler(logging.NullHandler())
