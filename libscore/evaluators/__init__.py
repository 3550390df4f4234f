"""Evaluators module for scoring directory libraries.

Libraries are scored on two independent signals:
- Quality (modifier table rescaled to 0-100)
- Trending popularity (download volume with penalties, unbounded)

All evaluators are stateless pure functions that take Library + current time → Library.
"""

from libscore.evaluators.base import BaseEvaluator
from libscore.evaluators.quality import (
    MAX_POSSIBLE_SCORE,
    MIN_POSSIBLE_SCORE,
    MODIFIERS,
    QualityEvaluator,
    calculate_directory_score,
    get_combined_popularity,
    get_matching_modifiers,
    get_updated_days_ago,
)
from libscore.evaluators.registry import EvaluatorRegistry
from libscore.evaluators.trending import (
    TrendingEvaluator,
    calculate_popularity_score,
    get_popularity_gain,
)

__all__ = [
    # Protocol
    "BaseEvaluator",
    # Individual evaluators
    "QualityEvaluator",
    "TrendingEvaluator",
    # Orchestration
    "EvaluatorRegistry",
    # Scoring functions
    "calculate_directory_score",
    "calculate_popularity_score",
    # Helpers
    "get_combined_popularity",
    "get_matching_modifiers",
    "get_popularity_gain",
    "get_updated_days_ago",
    # Modifier table
    "MODIFIERS",
    "MIN_POSSIBLE_SCORE",
    "MAX_POSSIBLE_SCORE",
]
