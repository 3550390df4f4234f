"""Evaluation configuration models for scoring libraries."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from pydantic import BaseModel, Field

from libscore.models.model_library import Library


@dataclass(frozen=True)
class Modifier:
    """A named rule adding a signed value to the quality score when it matches."""

    name: str
    value: int
    condition: Callable[[Library, datetime], bool]

    def matches(self, library: Library, current_time: datetime) -> bool:
        return bool(self.condition(library, current_time))


class TrendingThresholds(BaseModel):
    """Configurable limits for the trending score.

    Defaults reproduce the directory's trending formula.
    """

    min_monthly_downloads: int = Field(
        default=500, ge=0, description="Below this, the downloads penalty applies"
    )
    many_monthly_downloads: int = Field(
        default=5000, ge=0, description="Above this, the download bonus may apply"
    )
    min_github_stars: int = Field(
        default=25, ge=0, description="Below this, the stars penalty applies"
    )
    downloads_penalty: float = Field(default=0.25, ge=0.0)
    stars_penalty: float = Field(default=0.1, ge=0.0)
    unmaintained_penalty: float = Field(default=0.5, ge=0.0)
    fresh_package_penalty: float = Field(default=0.5, ge=0.0)
    bonus_gain_threshold: float = Field(
        default=0.25, description="Popularity gain needed for the download bonus"
    )
    download_bonus: float = Field(default=5.0, ge=0.0)
