"""Single-slot holder for the pending diagnostic of a Filipe run."""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from filipe.types.errors import FilipeError

logger = logging.getLogger(__name__)


class ErrorHandler:
    """Holds at most one pending FilipeError.

    Only the top-level driver fills the slot, between statements. Once an error
    is pending no other one can be recorded until it is taken.
    """

    __slots__ = ("error", "sink")

    def __init__(self, sink: TextIO | None = None):
        self.error: Optional[FilipeError] = None
        self.sink = sink

    def has_error(self) -> bool:
        return self.error is not None

    def set(self, error: FilipeError) -> None:
        if self.error is not None:
            raise RuntimeError(f"an error is already pending: {self.error}")
        self.error = error

    def get_error(self) -> Optional[FilipeError]:
        return self.error

    def take(self) -> Optional[FilipeError]:
        """Return the pending error and clear the slot."""
        error, self.error = self.error, None
        return error

    def report(self) -> None:
        """Write the pending diagnostic to the error sink."""
        if self.error is None:
            return
        logger.debug("reporting %s", self.error)
        sink = self.sink if self.sink is not None else sys.stderr
        print(self.error, file=sink)
