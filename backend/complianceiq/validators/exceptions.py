"""Evaluation errors.

Callers see exactly one of two shapes from the engine: the input was unusable,
or the evaluation itself broke. Neither ever comes with a partial result.
"""

from typing import Optional


class EvaluationError(Exception):
    """Base class for every failure signalled by the validation engine."""


class InvalidInputError(EvaluationError, ValueError):
    """Document text is missing or not textual."""


class ProcessingFailureError(EvaluationError):
    """A check raised unexpectedly while evaluating otherwise valid text."""

    def __init__(self, message: str, validator: Optional[str] = None):
        super().__init__(message)
        self.validator = validator
