"""Pydantic models for libscore."""

from libscore.models.model_eval import Modifier, TrendingThresholds
from libscore.models.model_library import (
    GitHub,
    GitHubStats,
    Library,
    License,
    NpmStats,
)

__all__ = [
    # Library models
    "GitHub",
    "GitHubStats",
    "Library",
    "License",
    "NpmStats",
    # Evaluation models
    "Modifier",
    "TrendingThresholds",
]
