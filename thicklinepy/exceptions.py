"""
Errors raised by the thick line pipeline.

Every error carries a single human-readable message that a host can show
verbatim, plus optional ``context`` for debugging.
"""

from typing import Any, Optional


class ThickLineError(ValueError):
    """Base class for all thick line errors."""

    def __init__(self, message: str, context: Optional[Any] = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        return self.message


class InputMissingError(ThickLineError):
    """A required point selection is absent or could not be read."""


class DegenerateGeometryError(ThickLineError):
    """The baseline is too short to define a direction."""


class ConstraintViolationError(ThickLineError):
    """One of the validator checks failed."""
