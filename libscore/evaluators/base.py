"""Base evaluator protocol defining the contract for all evaluators."""

from datetime import datetime
from typing import Protocol

from libscore.models.model_library import Library


class BaseEvaluator(Protocol):
    """Protocol defining the evaluator contract.

    Evaluators are pure functions of a Library and a reference time. They
    never mutate their input; they return a copy with their derived fields
    set. With a fixed current_time the output is fully reproducible.
    """

    def evaluate(self, library: Library, current_time: datetime | None = None) -> Library:
        """Evaluate library on this dimension.

        Args:
            library: The library to evaluate
            current_time: Reference time (defaults to now)

        Returns:
            A copy of the library with this evaluator's fields set
        """
        ...
