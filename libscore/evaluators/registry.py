"""Evaluator registry for running both scorers over libraries."""

import logging
from datetime import datetime

from libscore.evaluators.base import BaseEvaluator
from libscore.evaluators.quality import QualityEvaluator
from libscore.evaluators.trending import TrendingEvaluator
from libscore.models.common import _utc_now
from libscore.models.model_eval import TrendingThresholds
from libscore.models.model_library import Library

logger = logging.getLogger(__name__)


class EvaluatorRegistry:
    """Orchestrates the quality and trending evaluators.

    The two scores are independent; the registry only chains the copies so a
    single returned record carries score, matching_score_modifiers and
    popularity.
    """

    def __init__(self, thresholds: TrendingThresholds | None = None) -> None:
        """Initialize registry with all evaluators."""
        self.evaluators: dict[str, BaseEvaluator] = {
            "quality": QualityEvaluator(),
            "trending": TrendingEvaluator(thresholds),
        }

    def evaluate_library(
        self,
        library: Library,
        current_time: datetime | None = None,
    ) -> Library:
        """Score one library on every dimension.

        Args:
            library: The library to evaluate (left unchanged)
            current_time: Reference time shared by all evaluators (defaults to now)

        Returns:
            A scored copy of the library
        """
        if current_time is None:
            current_time = _utc_now()

        scored = library
        for evaluator in self.evaluators.values():
            scored = evaluator.evaluate(scored, current_time)
        return scored

    def evaluate_batch(
        self,
        libraries: list[Library],
        current_time: datetime | None = None,
    ) -> list[Library]:
        """Score many libraries against the same reference time.

        Args:
            libraries: Libraries to evaluate (left unchanged)
            current_time: Reference time (defaults to now, read once)

        Returns:
            Scored copies in input order
        """
        if current_time is None:
            current_time = _utc_now()

        logger.info(f"Scoring {len(libraries)} libraries at {current_time.isoformat()}")
        return [self.evaluate_library(library, current_time) for library in libraries]
